"""Per-conversion traversal state"""

from contextlib import contextmanager
from dataclasses import dataclass, field

from mdslack.core.models import ParsingOptions
from mdslack.core.validation import validate_recursion_depth


@dataclass
class Context:
    """Options plus the inline recursion counter for one transform() call.

    Each call builds its own Context, so concurrent conversions never share
    a depth counter.
    """
    options: ParsingOptions = field(default_factory=ParsingOptions)
    depth: int = 0

    @contextmanager
    def nested(self):
        """Count one level of inline nesting; the level is released on any exit."""
        self.depth += 1
        try:
            validate_recursion_depth(self.depth, self.options.max_recursion_depth)
            yield self.depth
        finally:
            self.depth -= 1
