"""Exception hierarchy for the combinations package.

Only count overflow unwinds as an exception. Out-of-range ranks, exhausted
enumerators and degenerate subset sizes are ordinary return values.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class ErrorContext:
    """Extra diagnostic information attached to an error."""

    extra: dict[str, Any] = field(default_factory=dict)


class CombinationsError(Exception):
    """Base class for all combinations errors.

    Attributes:
        message: Human-readable description of the failure.
        context: Additional diagnostic data.
    """

    def __init__(self, message: str, context: ErrorContext | None = None) -> None:
        self.message = message
        self.context = context or ErrorContext()
        super().__init__(message)


class CountOverflowError(CombinationsError, OverflowError):
    """Raised when C(n, m) does not fit the counter's integer width.

    Attributes:
        n: Set size of the failing count.
        m: Subset size of the failing count (normalized).
        bits: Integer width of the counter that overflowed.

    Example:
        >>> from combinations import Counter, CountOverflowError
        >>> try:
        ...     Counter(bits=32).count(100, 50)
        ... except CountOverflowError as e:
        ...     print(e.bits)
        32
    """

    def __init__(self, n: int, m: int, bits: int) -> None:
        self.n = n
        self.m = m
        self.bits = bits
        super().__init__(
            f"Combination size overflowed: C({n}, {m}) exceeds {bits} bits",
            context=ErrorContext(extra={"n": n, "m": m, "bits": bits}),
        )


class ConfigValidationError(CombinationsError):
    """Raised when a configuration value is invalid.

    Attributes:
        field: Name of the offending field.
        value: The rejected value.
    """

    def __init__(
        self,
        message: str,
        field: str | None = None,
        value: Any = None,
        context: ErrorContext | None = None,
    ) -> None:
        self.field = field
        self.value = value
        super().__init__(message, context=context)
