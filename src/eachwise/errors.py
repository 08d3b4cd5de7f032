"""Error contracts for the iteration helpers.

Helpers raise EachwiseError subclasses for rejected arguments. Exceptions
raised by caller callbacks are never wrapped and reach the caller unchanged.
"""

from __future__ import annotations

from typing import Literal

EachwiseErrorCode = Literal["invalid_argument"]


class EachwiseError(Exception):
    """Base failure raised by eachwise helpers."""

    def __init__(
        self,
        code: EachwiseErrorCode,
        message: str,
        *,
        recovery_hint: str | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.recovery_hint = recovery_hint


class InvalidArgumentError(EachwiseError, ValueError):
    """A required argument was missing.

    Attributes:
        argument: Name of the offending parameter (``source`` or ``fn``).

    Example:
        >>> err = InvalidArgumentError("source")
        >>> str(err), err.argument, err.code
        ('source must not be None', 'source', 'invalid_argument')
        >>> isinstance(err, ValueError)
        True
    """

    def __init__(self, argument: str, *, recovery_hint: str | None = None) -> None:
        super().__init__(
            "invalid_argument",
            f"{argument} must not be None",
            recovery_hint=recovery_hint,
        )
        self.argument = argument
