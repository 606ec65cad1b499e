"""Logical combinators over whole validators.

Each combinator is a single validation step on a validator of the MIXED
kind, so it composes with coercion, transformations and schemas like any
other validator. Failures report one combinator-level message; the messages
of the combined validators are not surfaced.
"""

from __future__ import annotations

from typing import Any

from .field import FieldValidator
from .settings import settings


class MixedValidator(FieldValidator):
    """Validator that accepts any present value; used to host combinators."""

    def narrow(self, value: Any, key: str, payload: Any) -> Any:
        return value


def any_of(validators: list[Any], message: str | None = None) -> MixedValidator:
    """Accept a value if at least one validator (or predicate) accepts it.

    Args:
        validators: Validators and/or ``(value, key, payload)`` predicates
        message: Custom error message

    Returns:
        New validator
    """
    return MixedValidator().satisfies_any(validators, message)


def all_of(validators: list[Any], message: str | None = None) -> MixedValidator:
    """Accept a value if every validator (or predicate) accepts it.

    Args:
        validators: Validators and/or ``(value, key, payload)`` predicates
        message: Custom error message

    Returns:
        New validator
    """
    return MixedValidator().satisfies_all(validators, message)


def not_(validator: Any, message: str | None = None) -> MixedValidator:
    """Accept a value if the validator (or predicate) rejects it.

    Args:
        validator: Validator or ``(value, key, payload)`` predicate
        message: Custom error message

    Returns:
        New validator
    """
    return MixedValidator().satisfies_none([validator], message or settings.message("not"))
