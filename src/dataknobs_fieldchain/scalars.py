"""Validators for scalar kinds: strings, integers, floats and booleans.
"""

from __future__ import annotations

import math
import re
from re import Pattern as RegexPattern
from typing import Any, TypeVar

from . import formats
from .exceptions import FieldValidationError
from .field import FieldValidator, OneOfMixin
from .kinds import Kind
from .settings import settings
from .transforms import clamp

N = TypeVar("N", bound="NumericConstraintsMixin")
S = TypeVar("S", bound="StringValidator")


class StringValidator(OneOfMixin, FieldValidator):
    """Validator for text values."""

    kind = Kind.STRING

    def narrow(self, value: Any, key: str, payload: Any) -> Any:
        if not isinstance(value, str):
            raise FieldValidationError([settings.message("string_type")])
        return value

    def min_length(self: S, minimum: int, message: str | None = None) -> S:
        """Require at least ``minimum`` characters."""
        if minimum < 0:
            raise ValueError(f"min length cannot be negative: {minimum}")
        return self.satisfies(
            lambda value, key, payload: len(value) >= minimum,
            message or f"Value must be at least {minimum} characters long",
        )

    def max_length(self: S, maximum: int, message: str | None = None) -> S:
        """Allow at most ``maximum`` characters."""
        if maximum < 0:
            raise ValueError(f"max length cannot be negative: {maximum}")
        return self.satisfies(
            lambda value, key, payload: len(value) <= maximum,
            message or f"Value must be at most {maximum} characters long",
        )

    def length(self: S, exact: int, message: str | None = None) -> S:
        """Require exactly ``exact`` characters."""
        if exact < 0:
            raise ValueError(f"length cannot be negative: {exact}")
        return self.satisfies(
            lambda value, key, payload: len(value) == exact,
            message or f"Value must be exactly {exact} characters long",
        )

    def not_empty(self: S, message: str | None = None) -> S:
        return self.min_length(1, message or "Value must not be empty")

    def pattern(self: S, regex: str | RegexPattern, message: str | None = None) -> S:
        """Require a match of ``regex`` anywhere in the value.

        Args:
            regex: Regex pattern (string or compiled pattern)
            message: Custom error message

        Returns:
            Self for chaining
        """
        compiled = re.compile(regex) if isinstance(regex, str) else regex
        return self.satisfies(
            lambda value, key, payload: compiled.search(value) is not None,
            message or "Value does not match the required pattern",
        )

    regex = pattern

    def format(self: S, name: str, message: str | None = None) -> S:
        """Require a registered format, e.g. ``"email"`` or ``"ipv4"``."""
        return self.satisfies_named(name, message)

    def email(self: S, message: str | None = None) -> S:
        return self.format("email", message)

    def url(self: S, message: str | None = None) -> S:
        return self.format("url", message)

    def uuid(self: S, version: int | None = None, message: str | None = None) -> S:
        """Require a UUID, optionally of a given version (1-5 or 7)."""
        if version not in (None, 1, 2, 3, 4, 5, 7):
            raise ValueError(f"Unsupported UUID version: {version}")
        return self.format("uuid" if version is None else f"uuid_v{version}", message)

    def ip(self: S, version: int | None = None, message: str | None = None) -> S:
        """Require an IP address, optionally of a given version (4 or 6)."""
        if version not in (None, 4, 6):
            raise ValueError(f"Unsupported IP version: {version}")
        return self.format("ip" if version is None else f"ipv{version}", message)

    def hex(self: S, message: str | None = None) -> S:
        return self.format("hex", message)

    def base64(self: S, urlsafe: bool = False, message: str | None = None) -> S:
        return self.format("base64_urlsafe" if urlsafe else "base64", message)

    def hostname(self: S, message: str | None = None) -> S:
        return self.format("hostname", message)

    def domain(self: S, message: str | None = None) -> S:
        return self.format("domain", message)

    def time(self: S, message: str | None = None) -> S:
        return self.format("time", message)

    def date(self: S, fmt: str = "%Y-%m-%d", message: str | None = None) -> S:
        """Require a date in the given ``strftime`` format."""
        return self.satisfies(
            lambda value, key, payload: formats.matches_datetime(value, fmt),
            message or f"Value must be a valid date in format '{fmt}'",
        )

    def datetime(self: S, fmt: str = "%Y-%m-%dT%H:%M:%S", message: str | None = None) -> S:
        """Require a datetime in the given ``strftime`` format."""
        return self.satisfies(
            lambda value, key, payload: formats.matches_datetime(value, fmt),
            message or f"Value must be a valid datetime in format '{fmt}'",
        )


class NumericConstraintsMixin:
    """Range and divisibility constraints shared by integer and float validators."""

    def min(self: N, minimum: float, message: str | None = None) -> N:
        return self.satisfies(
            lambda value, key, payload: value >= minimum,
            message or f"Value must be at least {minimum}",
        )

    def max(self: N, maximum: float, message: str | None = None) -> N:
        return self.satisfies(
            lambda value, key, payload: value <= maximum,
            message or f"Value must be at most {maximum}",
        )

    def gt(self: N, threshold: float, message: str | None = None) -> N:
        return self.satisfies(
            lambda value, key, payload: value > threshold,
            message or f"Value must be greater than {threshold}",
        )

    def gte(self: N, threshold: float, message: str | None = None) -> N:
        return self.satisfies(
            lambda value, key, payload: value >= threshold,
            message or f"Value must be at least {threshold}",
        )

    def lt(self: N, threshold: float, message: str | None = None) -> N:
        return self.satisfies(
            lambda value, key, payload: value < threshold,
            message or f"Value must be less than {threshold}",
        )

    def lte(self: N, threshold: float, message: str | None = None) -> N:
        return self.satisfies(
            lambda value, key, payload: value <= threshold,
            message or f"Value must be at most {threshold}",
        )

    def between(self: N, minimum: float, maximum: float, message: str | None = None) -> N:
        """Require ``minimum <= value <= maximum``."""
        if minimum > maximum:
            raise ValueError(f"min ({minimum}) cannot be greater than max ({maximum})")
        return self.satisfies(
            lambda value, key, payload: minimum <= value <= maximum,
            message or f"Value must be between {minimum} and {maximum}",
        )

    def multiple_of(self: N, divisor: float, message: str | None = None) -> N:
        """Require the value to be a multiple of ``divisor``.

        Float operands are compared with a 1e-9 tolerance.
        """
        if divisor == 0:
            raise ValueError("divisor cannot be zero")

        def is_multiple(value: Any, key: Any, payload: Any) -> bool:
            if isinstance(divisor, int) and isinstance(value, int):
                return value % divisor == 0
            try:
                remainder = math.fmod(float(value), float(divisor))
            except (OverflowError, ValueError):
                return False
            return abs(remainder) < 1e-9 or abs(abs(remainder) - abs(divisor)) < 1e-9

        return self.satisfies(is_multiple, message or f"Value must be a multiple of {divisor}")

    def positive(self: N, message: str | None = None) -> N:
        return self.satisfies(
            lambda value, key, payload: value > 0,
            message or "Value must be positive",
        )

    def negative(self: N, message: str | None = None) -> N:
        return self.satisfies(
            lambda value, key, payload: value < 0,
            message or "Value must be negative",
        )

    def non_negative(self: N, message: str | None = None) -> N:
        return self.gte(0, message or "Value must be non-negative")

    def non_positive(self: N, message: str | None = None) -> N:
        return self.lte(0, message or "Value must be non-positive")

    def clamp_to_range(self: N, minimum: float, maximum: float) -> N:
        """Clamp the value into ``[minimum, maximum]`` as a transformation.

        Raises:
            ValueError: If minimum is greater than maximum
        """
        return self.pipe(clamp(minimum, maximum))


class IntegerValidator(NumericConstraintsMixin, OneOfMixin, FieldValidator):
    """Validator for whole numbers. Booleans are not integers here."""

    kind = Kind.INTEGER

    def narrow(self, value: Any, key: str, payload: Any) -> Any:
        if isinstance(value, bool) or not isinstance(value, int):
            raise FieldValidationError([settings.message("integer_type")])
        return value


class FloatValidator(NumericConstraintsMixin, OneOfMixin, FieldValidator):
    """Validator for decimal numbers; integers are accepted and widened."""

    kind = Kind.FLOAT

    def narrow(self, value: Any, key: str, payload: Any) -> Any:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise FieldValidationError([settings.message("float_type")])
        try:
            return float(value)
        except OverflowError:
            raise FieldValidationError([settings.message("float_type")]) from None


class BooleanValidator(OneOfMixin, FieldValidator):
    """Validator for True/False values."""

    kind = Kind.BOOLEAN

    def narrow(self, value: Any, key: str, payload: Any) -> Any:
        if not isinstance(value, bool):
            raise FieldValidationError([settings.message("boolean_type")])
        return value
