"""Field pipeline engine shared by every validator kind.

A validator is configured once through chained calls and then invoked any
number of times. ``try_validate`` runs the pipeline:

1. absent input short-circuits to the default (unless transformations are queued)
2. optional coercion, then the absent short-circuit again
3. the allowed-values check of discrete kinds
4. the kind's type check (recursive validation for records and lists)
5. validation steps, fail-fast, in declaration order
6. transformation steps, in declaration order
7. the default, if the value is still absent

Everything that varies per call (the travelling value, the current kind of
the transformation chain) lives in local variables, so a configured
validator can be shared between callers and threads.
"""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any, TypeVar

from .coercer import coercer
from .exceptions import FieldValidationError
from .kinds import Kind
from .predicates import (
    CrossItemCheck,
    ValidationStep,
    all_of_predicate,
    any_of_predicate,
    as_predicate,
    none_of_predicate,
    predicates,
)
from .result import ValidationResult
from .settings import settings
from .transforms import (
    AllowedValues,
    NullifyEmpty,
    Pipe,
    Required,
    Transform,
    TransformStep,
)

V = TypeVar("V", bound="FieldValidator")


class FieldValidator(ABC):
    """Base class for all validators.

    Subclasses declare their ``kind`` and implement ``narrow()``, the type
    check that accepts (and may reshape) a present value or raises
    ``FieldValidationError``.

    Example:
        ```python
        validator = string().coerce().pipe(str.strip).nullify_empty().required()
        accepted, value, errors = validator.try_validate("  hello ")
        # (True, 'hello', None)
        ```
    """

    kind: Kind = Kind.MIXED

    def __init__(self) -> None:
        self._coerce = False
        self._default: Any = None
        self._has_default = False
        self._allowed: AllowedValues | None = None
        self._validations: list[ValidationStep | CrossItemCheck] = []
        self._transformations: list[TransformStep] = []
        self._output_key: str | None = None

    @property
    def has_default(self) -> bool:
        """Whether a default value is configured."""
        return self._has_default

    @property
    def output_name(self) -> str | None:
        """Key this field is written under in a record result, if remapped."""
        return self._output_key

    def coerce(self: V) -> V:
        """Enable form-safe coercion of raw input to this validator's kind."""
        self._coerce = True
        return self

    def required(self: V, message: str | None = None) -> V:
        """Fail if the value is absent at this point of the transformation chain.

        Args:
            message: Custom error message

        Returns:
            Self for chaining
        """
        self._transformations.append(Required(message or settings.message("required")))
        return self

    def default(self: V, value: Any) -> V:
        """Set the value used when the input is, or ends up, absent.

        Args:
            value: The default value

        Returns:
            Self for chaining
        """
        self._default = value
        self._has_default = True
        return self

    def satisfies(self: V, predicate: Any, message: str | None = None) -> V:
        """Add a validation step.

        Args:
            predicate: Callable ``(value, key, payload) -> bool`` or a validator
            message: Error message when the step fails

        Returns:
            Self for chaining
        """
        return self._add_validation(
            ValidationStep(as_predicate(predicate), message or settings.message("custom"))
        )

    def satisfies_named(self: V, name: str, message: str | None = None) -> V:
        """Add a validation step from the predicate registry.

        Args:
            name: Registered predicate name
            message: Message overriding the registered default

        Returns:
            Self for chaining
        """
        return self._add_validation(predicates.step(name, message))

    def satisfies_all(self: V, items: list[Any], message: str | None = None) -> V:
        """Add a step that passes when every validator/predicate passes."""
        return self._add_validation(
            ValidationStep(all_of_predicate(items), message or settings.message("all_of"))
        )

    def satisfies_any(self: V, items: list[Any], message: str | None = None) -> V:
        """Add a step that passes when at least one validator/predicate passes."""
        return self._add_validation(
            ValidationStep(any_of_predicate(items), message or settings.message("any_of"))
        )

    def satisfies_none(self: V, items: list[Any], message: str | None = None) -> V:
        """Add a step that passes when no validator/predicate passes."""
        return self._add_validation(
            ValidationStep(none_of_predicate(items), message or settings.message("none_of"))
        )

    def pipe(self: V, *functions: Callable[[Any], Any]) -> V:
        """Add type-preserving transformations.

        The output of each function is re-normalized for the chain's current
        kind (lists are re-indexed, mapping keys are kept). Skipped when the
        value is absent.

        Args:
            *functions: Functions applied left to right

        Returns:
            Self for chaining
        """
        self._transformations.append(Pipe(*functions))
        return self

    def transform(self: V, function: Callable[[Any], Any]) -> V:
        """Add a type-switching transformation.

        The chain's current kind becomes the kind of the function's output.
        Runs on absent values too.

        Args:
            function: Function applied to the value

        Returns:
            Self for chaining
        """
        self._transformations.append(Transform(function))
        return self

    def nullify_empty(self: V) -> V:
        """Turn blank strings and empty lists/mappings into an absent value."""
        self._transformations.append(NullifyEmpty())
        return self

    def output_key(self: V, name: str) -> V:
        """Write this field under ``name`` in the enclosing record's result.

        Errors stay keyed by the input key.

        Args:
            name: Output key

        Returns:
            Self for chaining
        """
        self._output_key = name
        return self

    def clone(self: V) -> V:
        """Create an independent copy of this validator.

        Step lists, the default value and nested validators are copied, so
        configuring the clone never affects the original.

        Returns:
            New validator with the same configuration
        """
        duplicate = copy.copy(self)
        duplicate._default = copy.deepcopy(self._default)
        duplicate._validations = list(self._validations)
        duplicate._transformations = list(self._transformations)
        self._clone_children(duplicate)
        return duplicate

    def _clone_children(self, duplicate: FieldValidator) -> None:
        """Copy nested validators into ``duplicate``; overridden by composites."""

    def _add_validation(self: V, step: ValidationStep | CrossItemCheck) -> V:
        self._validations.append(step)
        return self

    def coerce_value(self, value: Any) -> Any:
        """Coerce raw input to this validator's kind (never raises)."""
        return coercer.coerce(value, self.kind)

    @abstractmethod
    def narrow(self, value: Any, key: str, payload: Any) -> Any:
        """Check the type of a present value.

        Args:
            value: Present (non-None) value
            key: Key of the value in its enclosing payload
            payload: The full enclosing payload

        Returns:
            The narrowed value

        Raises:
            FieldValidationError: If the value has the wrong type
        """

    def try_validate(self, value: Any = None, key: str = "", payload: Any = None) -> ValidationResult:
        """Validate a value without raising for invalid data.

        Args:
            value: Raw value (None when absent)
            key: Key of the value in its enclosing payload
            payload: The full enclosing payload, visible to predicates

        Returns:
            ValidationResult unpacking as ``(accepted, value, errors)``
        """
        if payload is None:
            payload = {}

        if value is None and not self._transformations:
            return ValidationResult.success(self._default_value())

        if self._coerce:
            value = self.coerce_value(value)
            if value is None and not self._transformations:
                return ValidationResult.success(self._default_value())

        try:
            if value is not None:
                if self._allowed is not None:
                    self._allowed.check(value)
                value = self.narrow(value, key, payload)
                for step in self._validations:
                    errors = step.evaluate(value, key, payload)
                    if errors is not None:
                        return ValidationResult.failure(value, errors)
            value = self._apply_transformations(value)
        except FieldValidationError as e:
            return ValidationResult.failure(value, e.errors)

        if value is None:
            value = self._default_value()
        return ValidationResult.success(value)

    def validate(self, value: Any = None, key: str = "", payload: Any = None) -> Any:
        """Validate a value and return the result.

        Args:
            value: Raw value (None when absent)
            key: Key of the value in its enclosing payload
            payload: The full enclosing payload, visible to predicates

        Returns:
            The validated, coerced and transformed value

        Raises:
            FieldValidationError: With the full error tree if validation fails
        """
        result = self.try_validate(value, key, payload)
        if not result.accepted:
            raise FieldValidationError(result.errors)
        return result.value

    def _apply_transformations(self, value: Any) -> Any:
        kind = self.kind
        for step in self._transformations:
            value, kind = step.apply(value, kind)
        return value

    def _default_value(self) -> Any:
        if not self._has_default:
            return None
        return copy.deepcopy(self._default)


class OneOfMixin:
    """Allowed-values restriction for kinds compared by exact equality."""

    def one_of(self: V, values: list[Any], message: str | None = None) -> V:
        """Restrict the value to a fixed set of allowed values.

        Before any transformation is queued this is checked immediately on
        the (coerced) input; afterwards it is queued in the transformation
        chain and checks the transformed value.

        Args:
            values: Allowed values, compared by type and value
            message: Custom error message

        Returns:
            Self for chaining
        """
        step = AllowedValues(values, message)
        if self._transformations:
            self._transformations.append(step)
        else:
            self._allowed = step
        return self
