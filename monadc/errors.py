"""Exception hierarchy for the MONAD optimizer."""

from __future__ import annotations


class MonadError(Exception):
    """Base class for every error raised by this package."""


class ParseError(MonadError, ValueError):
    """Raised when MONAD source text cannot be decoded into instructions."""

    def __init__(self, line_number: int, line: str, reason: str = "malformed"):
        self.line_number = line_number
        self.line = line
        self.reason = reason
        super().__init__(f"line {line_number}: {reason} instruction {line!r}")


class IdentityExhaustedError(MonadError, RuntimeError):
    """Raised when an identity generator has no identifiers left to hand out."""


class ConstantDivisionByZeroError(MonadError, ZeroDivisionError):
    """Raised when a div/mod right operand is provably zero at compile time.

    Well-formed programs must never divide by a constant zero, so the
    optimizer treats it as a fatal caller error instead of guessing.
    """
