"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

from mdslack.core.models import ListOptions, ParsingOptions
from mdslack.core.validation import MAX_BLOCKS, MAX_INPUT_LENGTH, MAX_RECURSION_DEPTH


CONFIG_FILE = "config.yaml"


class Settings(BaseModel):
    app_name:            str = "mdslack"
    parser_config:       str = Field(default="gfm-like", description="MarkdownIt parser preset name")
    max_blocks:          int = Field(default=MAX_BLOCKS, ge=1, description="Max blocks per converted document")
    max_input_length:    int = Field(default=MAX_INPUT_LENGTH, ge=1, description="Max markdown characters per document")
    max_recursion_depth: int = Field(default=MAX_RECURSION_DEPTH, ge=1, description="Max inline nesting depth")
    checkbox_checked:    str = Field(default="✅ ", description="Prefix for checked task items")
    checkbox_unchecked:  str = Field(default="☐ ", description="Prefix for unchecked task items")
    output_dir:          str = Field(default="payloads", description="Directory for converted JSON payloads")
    indent:              int = Field(default=2, ge=0, description="JSON indent for written payloads")

    def parsing_options(self) -> ParsingOptions:
        """Build the immutable ParsingOptions for a conversion from these settings."""
        checked, unchecked = self.checkbox_checked, self.checkbox_unchecked
        return ParsingOptions(
            lists=ListOptions(checkbox_prefix=lambda done: checked if done else unchecked),
            max_recursion_depth=self.max_recursion_depth,
        )


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then MDSLACK_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"MDSLACK_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
