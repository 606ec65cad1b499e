"""Factory functions creating one independently configurable validator per kind."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from .collection import ListValidator
from .combinators import MixedValidator, all_of, any_of, not_
from .field import FieldValidator
from .record import MappingValidator, ObjectValidator
from .scalars import BooleanValidator, FloatValidator, IntegerValidator, StringValidator

logger = logging.getLogger(__name__)


def string() -> StringValidator:
    return StringValidator()


def integer() -> IntegerValidator:
    return IntegerValidator()


def float_() -> FloatValidator:
    return FloatValidator()


def boolean() -> BooleanValidator:
    return BooleanValidator()


def list_() -> ListValidator:
    return ListValidator()


def mapping(schema: Mapping[str, FieldValidator] | None = None) -> MappingValidator:
    """Create a validator for dicts with the given field schema."""
    logger.debug(f"Creating mapping validator with fields: {list(schema or {})}")
    return MappingValidator(schema)


def object_(schema: Mapping[str, FieldValidator] | None = None) -> ObjectValidator:
    """Create a validator for attribute objects with the given field schema."""
    logger.debug(f"Creating object validator with fields: {list(schema or {})}")
    return ObjectValidator(schema)


class Validator:
    """Static entry points mirroring the factory functions.

    Example:
        ```python
        schema = Validator.is_mapping({
            "email": Validator.is_string().email().required(),
            "tags": Validator.is_list().items(Validator.is_string()),
        })
        ```
    """

    is_string = staticmethod(string)
    is_int = staticmethod(integer)
    is_float = staticmethod(float_)
    is_bool = staticmethod(boolean)
    is_list = staticmethod(list_)
    is_mapping = staticmethod(mapping)
    is_object = staticmethod(object_)

    @staticmethod
    def any_of(validators: list[Any], message: str | None = None) -> MixedValidator:
        return any_of(validators, message)

    @staticmethod
    def all_of(validators: list[Any], message: str | None = None) -> MixedValidator:
        return all_of(validators, message)

    @staticmethod
    def not_(validator: Any, message: str | None = None) -> MixedValidator:
        return not_(validator, message)
