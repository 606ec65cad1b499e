"""Record validators: a schema of named child validators.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import SimpleNamespace
from typing import Any, TypeVar

from .exceptions import ErrorTree, FieldValidationError
from .field import FieldValidator
from .kinds import Kind
from .settings import settings

logger = logging.getLogger(__name__)

R = TypeVar("R", bound="SchemaValidator")


class SchemaValidator(FieldValidator):
    """Validates a record against an ordered schema of child validators.

    Each declared key is validated by its own validator, in schema order,
    with the whole input record as payload so predicates can look at sibling
    fields. A field fails fast on its first error, while the record collects
    one error per failing field:

    ```python
    schema = mapping({
        "name": string().required(),
        "age": integer().min(18),
    })
    schema.try_validate({"age": 16}).errors
    # {'name': ['Value is required'], 'age': ['Value must be at least 18']}
    ```

    Keys missing from the input appear in the result only if their validator
    supplies a default. Undeclared keys are dropped.
    """

    type_message = "mapping_type"

    def __init__(self, schema: Mapping[str, FieldValidator] | None = None):
        """Initialize with a schema.

        Args:
            schema: Mapping of field name to validator, in validation order
        """
        super().__init__()
        self._schema: dict[str, FieldValidator] = {}
        for name, validator in (schema or {}).items():
            if not isinstance(validator, FieldValidator):
                raise TypeError(
                    f"Schema field '{name}' must be a validator, got {type(validator).__name__}"
                )
            self._schema[name] = validator
        self._warn_on_output_collisions()

    @property
    def schema(self) -> dict[str, FieldValidator]:
        """Copy of the field name to validator mapping."""
        return dict(self._schema)

    def coerce_all(self: R) -> R:
        """Enable coercion on this record and every declared field."""
        self.coerce()
        for validator in self._schema.values():
            validator.coerce()
        return self

    def narrow(self, value: Any, key: str, payload: Any) -> Any:
        fields = self._fields_of(value)
        if fields is None:
            raise FieldValidationError([settings.message(self.type_message)])

        data: dict[str, Any] = {}
        errors: dict[str, ErrorTree] = {}

        for field_key, validator in self._schema.items():
            provided = field_key in fields
            result = validator.try_validate(fields.get(field_key), field_key, value)

            if not result.accepted:
                errors[field_key] = result.errors
                continue

            if provided or (validator.has_default and result.value is not None):
                data[validator.output_name or field_key] = result.value

        if errors:
            logger.debug(f"Record '{key or '<root>'}' failed validation for fields {list(errors)}")
            raise FieldValidationError(errors)
        return self._build(data)

    def _fields_of(self, value: Any) -> Mapping[str, Any] | None:
        """Return the record's fields as a mapping, or None for a non-record."""
        return value if isinstance(value, Mapping) else None

    def _build(self, data: dict[str, Any]) -> Any:
        return data

    def _clone_children(self, duplicate: FieldValidator) -> None:
        duplicate._schema = {name: validator.clone() for name, validator in self._schema.items()}

    def _warn_on_output_collisions(self) -> None:
        seen: dict[str, str] = {}
        for name, validator in self._schema.items():
            output = validator.output_name or name
            if output in seen:
                logger.warning(
                    f"Schema fields '{seen[output]}' and '{name}' both write to output key '{output}'"
                )
            seen[output] = name


class MappingValidator(SchemaValidator):
    """Validator for keyed mappings (dicts); produces a dict."""

    kind = Kind.MAPPING


class ObjectValidator(SchemaValidator):
    """Validator for attribute objects; produces a ``SimpleNamespace``."""

    kind = Kind.OBJECT
    type_message = "object_type"

    def _fields_of(self, value: Any) -> Mapping[str, Any] | None:
        if isinstance(value, (Mapping, str, bytes, int, float, list, tuple)):
            return None
        if not hasattr(value, "__dict__") or isinstance(value, type):
            return None
        return vars(value)

    def _build(self, data: dict[str, Any]) -> Any:
        return SimpleNamespace(**data)
