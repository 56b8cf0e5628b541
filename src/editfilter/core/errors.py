from __future__ import annotations

"""Exception hierarchy for editfilter.

Both concrete errors also derive from ``ValueError`` so callers that only
care about "bad argument" can catch the builtin.
"""

from typing import Optional


class EditFilterError(Exception):
    """Base class for every error raised by editfilter."""


class PatternCompileError(EditFilterError, ValueError):
    """The pattern source is not a valid regular expression.

    Raised once, when the filter is constructed. A filter is never built
    around a pattern that failed to compile.
    """

    def __init__(self, pattern: str, reason: str) -> None:
        super().__init__(f'invalid pattern {pattern!r}: {reason}')
        self.pattern = pattern
        self.reason = reason


class InvalidSpanError(EditFilterError, ValueError):
    """A span or replacement range violates ``0 <= start <= end <= length``.

    This is a caller bug. Indices are never clamped.
    """

    def __init__(self, what: str, start: object, end: object, length: Optional[int]) -> None:
        super().__init__(f'invalid {what} range [{start!r}, {end!r}) for length {length}')
        self.what = what
        self.start = start
        self.end = end
        self.length = length
