"""Transformation steps applied, in declaration order, after validation.

Each step maps ``(value, kind) -> (value, kind)``. The kind is the chain's
current kind: it is local to one ``try_validate`` call and is threaded
through the steps, never stored on the validator.
"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from typing import Any

from .exceptions import FieldValidationError
from .kinds import Kind, detect_kind, renormalize
from .settings import settings


class TransformStep(ABC):
    """Base class for transformation steps."""

    @abstractmethod
    def apply(self, value: Any, kind: Kind) -> tuple[Any, Kind]:
        """Apply the step.

        Args:
            value: Current value (None when absent)
            kind: Current kind of the chain

        Returns:
            Tuple of the new value and the new current kind

        Raises:
            FieldValidationError: To fail the field with a structured error
        """


class Pipe(TransformStep):
    """Type-preserving functions; output is re-normalized for the current kind.

    Skipped when the value is absent, since the functions expect a value of
    the current kind.
    """

    def __init__(self, *functions: Callable[[Any], Any]):
        for function in functions:
            if not callable(function):
                raise TypeError(f"pipe() expects callables, got {type(function).__name__}")
        self.functions = functions

    def apply(self, value: Any, kind: Kind) -> tuple[Any, Kind]:
        if value is None:
            return value, kind
        for function in self.functions:
            value = renormalize(kind, function(value))
        return value, kind


class Transform(TransformStep):
    """Type-switching function; the current kind follows its output.

    Always runs, including on an absent value.
    """

    def __init__(self, function: Callable[[Any], Any]):
        if not callable(function):
            raise TypeError(f"transform() expects a callable, got {type(function).__name__}")
        self.function = function

    def apply(self, value: Any, kind: Kind) -> tuple[Any, Kind]:
        value = self.function(value)
        return value, detect_kind(value, fallback=kind)


class Required(TransformStep):
    """Fails the field if the value is absent at this point of the chain."""

    def __init__(self, message: str):
        self.message = message

    def apply(self, value: Any, kind: Kind) -> tuple[Any, Kind]:
        if value is None:
            raise FieldValidationError([self.message])
        return value, kind


class NullifyEmpty(TransformStep):
    """Turns blank strings and empty containers into an absent value."""

    def apply(self, value: Any, kind: Kind) -> tuple[Any, Kind]:
        if isinstance(value, str) and not value.strip():
            return None, kind
        if isinstance(value, (list, tuple, Mapping)) and len(value) == 0:
            return None, kind
        return value, kind


class AllowedValues(TransformStep):
    """Exact-match membership check against a fixed set of values.

    Used both as the immediate allowed-values check that runs before type
    narrowing and, once transformation steps are queued, as a step in the
    chain checking the transformed value. Equality is exact: ``1``, ``1.0``
    and ``True`` are different values.
    """

    def __init__(self, values: list[Any], message: str | None = None):
        if not values:
            raise ValueError("one_of() requires at least one allowed value")
        self.values = list(values)
        self.message = message or _default_one_of_message(self.values)

    def contains(self, value: Any) -> bool:
        return any(type(allowed) is type(value) and allowed == value for allowed in self.values)

    def check(self, value: Any) -> None:
        if not self.contains(value):
            raise FieldValidationError([self.message])

    def apply(self, value: Any, kind: Kind) -> tuple[Any, Kind]:
        if value is not None:
            self.check(value)
        return value, kind


def _default_one_of_message(values: list[Any]) -> str:
    return settings.message("one_of", values=json.dumps(values, default=str))


def clamp(minimum: float, maximum: float) -> Callable[[Any], Any]:
    """Build a function clamping a number into ``[minimum, maximum]``.

    Raises:
        ValueError: If minimum is greater than maximum
    """
    if minimum > maximum:
        raise ValueError("Minimum cannot be greater than maximum for clamp")

    def clamp_value(value: Any) -> Any:
        if value < minimum:
            return minimum
        if value > maximum:
            return maximum
        return value

    return clamp_value


def distinct(values: list[Any]) -> list[Any]:
    """Drop repeated items, keeping the first occurrence of each."""
    kept: list[Any] = []
    for item in values:
        if not any(type(seen) is type(item) and seen == item for seen in kept):
            kept.append(item)
    return kept
