"""
Exceptions raised by the notation package.

Hierarchy:
- NotationError: base class for everything the package raises on bad input
- TermError: a constructor was given arguments that break a term invariant
- ParseError: the parser rejected its input (position is 1-based)
"""

from __future__ import annotations
from typing import Optional


class NotationError(Exception):
    """Base class for errors raised by psi_notation."""


class TermError(NotationError, ValueError):
    """A term constructor received arguments that violate a term invariant."""


class ParseError(NotationError, ValueError):
    """Base class for errors encountered while parsing a term."""

    def __init__(
        self,
        position: int,
        expected: Optional[str] = None,
        found: Optional[str] = None,
    ) -> None:
        self.position = position
        self.expected = expected
        self.found = found
        super().__init__(str(self))

    def __str__(self) -> str:
        return f"Parse error at character {self.position}"


class UnexpectedEndError(ParseError):
    """The input ended where more text was required."""

    def __str__(self) -> str:
        return (
            f"Expected {self.expected} at character {self.position},"
            f" but the input ended"
        )


class UnexpectedTokenError(ParseError):
    """A character other than the required one was found."""

    def __str__(self) -> str:
        return (
            f"Expected {self.expected} at character {self.position},"
            f" but found {self.found!r}"
        )


class ZeroSummandError(ParseError):
    """A summand joined by '+' evaluated to zero."""

    def __str__(self) -> str:
        return f"Zero cannot be joined by plus (character {self.position})"


class LimitExceededError(ParseError):
    """The input nests too deeply or names too large a numeral."""

    def __str__(self) -> str:
        return (
            f"Input exceeds the {self.expected} at character {self.position}"
            f" ({self.found})"
        )
