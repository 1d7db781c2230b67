"""Exception taxonomy for markdown conversion"""


class MdSlackError(Exception):
    """Base class for all conversion errors."""


class ValidationError(MdSlackError, ValueError):
    """A value passed to a block builder or entry point is malformed or out of range."""


class BlockLimitError(MdSlackError):
    """The converted document has more blocks than Slack accepts in one message."""

    def __init__(self, count: int, limit: int):
        super().__init__(f"Document produced {count} blocks, exceeding the limit of {limit}")
        self.count = count
        self.limit = limit


class RecursionLimitError(MdSlackError):
    """Inline nesting is deeper than the configured ceiling."""

    def __init__(self, depth: int, limit: int):
        super().__init__(f"Maximum recursion depth of {limit} exceeded (depth {depth})")
        self.depth = depth
        self.limit = limit


class ParseError(MdSlackError):
    """An embedded HTML island could not be parsed."""
