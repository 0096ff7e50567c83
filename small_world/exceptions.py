"""Errors raised while loading a graph or reducing sampled statistics."""


class SmallWorldError(ValueError):
    """Base class for analysis failures that should abort the run."""


class ParseError(SmallWorldError):
    """
    Raised when a line of the edge list is not two non-negative integers.

    Args:
        line_number: 1-based line number in the input.
        line: The offending line, without its trailing newline.
        reason: Short description of what was wrong.
    """

    def __init__(self, line_number: int, line: str, reason: str):
        self.line_number = line_number
        self.line = line
        self.reason = reason
        super().__init__(f"line {line_number}: {reason} ({line!r})")


class EmptySampleError(SmallWorldError):
    """Raised when there are no samples left to compute statistics from."""
