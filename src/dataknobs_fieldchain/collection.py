"""List validator with per-item validation and cross-item constraints.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any, TypeVar

from .exceptions import ErrorTree, FieldValidationError
from .field import FieldValidator
from .kinds import Kind
from .predicates import CrossItemCheck
from .settings import settings
from .transforms import distinct

logger = logging.getLogger(__name__)

L = TypeVar("L", bound="ListValidator")


class ListValidator(FieldValidator):
    """Validator for zero-indexed sequences.

    With an item validator configured every item is validated on its own and
    failures are collected per index, so all failing items are reported:

    ```python
    validator = list_().items(integer().min(1))
    validator.try_validate([5, -2, 0, 10]).errors
    # {1: ['Value must be at least 1'], 2: ['Value must be at least 1']}
    ```
    """

    kind = Kind.LIST

    def __init__(self) -> None:
        super().__init__()
        self._item_validator: FieldValidator | None = None
        self._filter_empty = False

    def items(self: L, validator: FieldValidator) -> L:
        """Validate every item with ``validator``.

        Args:
            validator: Validator applied to each item

        Returns:
            Self for chaining
        """
        if not isinstance(validator, FieldValidator):
            raise TypeError(f"items() expects a validator, got {type(validator).__name__}")
        self._item_validator = validator
        return self

    def filter_empty(self: L) -> L:
        """Drop empty strings and None before items are validated."""
        self._filter_empty = True
        return self

    def min_items(self: L, minimum: int, message: str | None = None) -> L:
        if minimum < 0:
            raise ValueError(f"min items cannot be negative: {minimum}")
        return self.satisfies(
            lambda value, key, payload: len(value) >= minimum,
            message or f"List must contain at least {minimum} items",
        )

    def max_items(self: L, maximum: int, message: str | None = None) -> L:
        if maximum < 0:
            raise ValueError(f"max items cannot be negative: {maximum}")
        return self.satisfies(
            lambda value, key, payload: len(value) <= maximum,
            message or f"List must contain at most {maximum} items",
        )

    def unique(self: L, message: str | None = None) -> L:
        """Require all items to be distinct."""
        return self.satisfies(
            lambda value, key, payload: len(distinct(value)) == len(value),
            message or "List items must be unique",
        )

    def distinct(self: L) -> L:
        """Drop repeated items, keeping first occurrences (a transformation)."""
        return self.pipe(distinct)

    def cross_check(self: L, check: Callable[[list[Any]], Any]) -> L:
        """Add a whole-list constraint that can blame individual items.

        ``check`` receives the validated list and returns an error tree,
        typically ``{index: {field: [message]}}``, or an empty value when
        the list is acceptable. It runs with the other validation steps, in
        declaration order.

        Args:
            check: Cross-item check

        Returns:
            Self for chaining
        """
        if not callable(check):
            raise TypeError(f"cross_check() expects a callable, got {type(check).__name__}")
        return self._add_validation(CrossItemCheck(check))

    def unique_by(self: L, field: str, message: str | None = None) -> L:
        """Require a field to be unique across mapping items.

        Every item repeating an earlier item's value is reported at
        ``{index: {field: [message]}}``. Items lacking the field are ignored.

        Args:
            field: Field compared across items
            message: Custom error message

        Returns:
            Self for chaining
        """
        text = message or f"Duplicate value for '{field}'"

        def check(items: list[Any]) -> ErrorTree:
            seen: list[Any] = []
            errors: dict = {}
            for index, item in enumerate(items):
                if not isinstance(item, Mapping) or item.get(field) is None:
                    continue
                value = item[field]
                if value in seen:
                    errors[index] = {field: [text]}
                else:
                    seen.append(value)
            return errors

        return self._add_validation(CrossItemCheck(check, name=f"unique_by:{field}"))

    def narrow(self, value: Any, key: str, payload: Any) -> Any:
        if not isinstance(value, (list, tuple)):
            raise FieldValidationError([settings.message("list_type")])
        value = list(value)

        if self._filter_empty:
            value = [item for item in value if item is not None and not _is_empty_string(item)]

        if self._item_validator is None:
            return value

        validated: list[Any] = []
        errors: dict[int, ErrorTree] = {}
        for index, item in enumerate(value):
            item_key = f"{key}{settings.get_setting('path_separator')}{index}" if key else str(index)
            result = self._item_validator.try_validate(item, item_key, [])
            if result.accepted:
                validated.append(result.value)
            else:
                errors[index] = result.errors

        if errors:
            logger.debug(f"List '{key or '<root>'}' failed validation at indices {sorted(errors)}")
            raise FieldValidationError(errors)
        return validated

    def _clone_children(self, duplicate: FieldValidator) -> None:
        if self._item_validator is not None:
            duplicate._item_validator = self._item_validator.clone()


def _is_empty_string(item: Any) -> bool:
    return isinstance(item, str) and item == ""

