"""Serialize blocks to Slack JSON payloads and write them to disk"""

import json
from pathlib import Path

from mdslack.core.models import Block


def to_dicts(blocks: list[Block]) -> list[dict]:
    """Slack JSON shape of each block; unset optional fields are omitted."""
    return [block.model_dump(exclude_none=True) for block in blocks]


def build_payload(blocks: list[Block]) -> dict:
    """Message payload accepted by chat.postMessage's `blocks` argument."""
    return {"blocks": to_dicts(blocks)}


def write_payload(blocks: list[Block], out_file: Path, indent: int = 2) -> Path:
    """Write the payload for blocks to out_file, creating parent directories."""
    out_file.parent.mkdir(parents=True, exist_ok=True)
    out_file.write_text(
        json.dumps(build_payload(blocks), indent=indent, ensure_ascii=False),
        encoding='utf-8',
    )
    return out_file
