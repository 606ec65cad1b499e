"""Validation result type returned by every validator.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterator

    from .exceptions import ErrorTree


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a single ``try_validate`` call.

    Unpacks like a ``(accepted, value, errors)`` tuple and is truthy when the
    value was accepted:

    ```python
    accepted, value, errors = validator.try_validate(raw)
    if validator.try_validate(raw):
        ...
    ```
    """

    accepted: bool
    value: Any  # The (possibly coerced and transformed) value
    errors: ErrorTree | None = None

    def __bool__(self) -> bool:
        """Allow 'if result:' usage to check acceptance."""
        return self.accepted

    def __iter__(self) -> Iterator[Any]:
        return iter((self.accepted, self.value, self.errors))

    @classmethod
    def success(cls, value: Any) -> ValidationResult:
        """Create an accepted result.

        Args:
            value: The validated value

        Returns:
            Accepted ValidationResult
        """
        return cls(accepted=True, value=value, errors=None)

    @classmethod
    def failure(cls, value: Any, errors: ErrorTree) -> ValidationResult:
        """Create a failed result.

        Args:
            value: The value as far as the pipeline got before failing
            errors: Error tree describing the failure

        Returns:
            Failed ValidationResult
        """
        return cls(accepted=False, value=value, errors=errors)
