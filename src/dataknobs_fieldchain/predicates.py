"""Validation steps and the named predicate registry.

Every check a validator runs is a ``ValidationStep``: a predicate with the
explicit signature ``(value, key, payload) -> bool`` boxed together with the
message reported when it returns False. Reusable predicates can be registered
by name and queued with ``satisfies_named()``:

```python
from dataknobs_fieldchain import predicates, string

predicates.register_predicate(
    "slug",
    lambda value, key, payload: value.replace("-", "").isalnum(),
    "Value must be a slug",
)
validator = string().satisfies_named("slug")
```
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from dataknobs_common import Registry

from .settings import settings

if TYPE_CHECKING:
    from .exceptions import ErrorTree

logger = logging.getLogger(__name__)

Predicate = Callable[[Any, Any, Any], bool]


@dataclass(frozen=True)
class ValidationStep:
    """A predicate and the message reported when it fails."""

    predicate: Predicate
    message: str
    name: str | None = None

    def evaluate(self, value: Any, key: Any, payload: Any) -> ErrorTree | None:
        """Run the predicate.

        Returns:
            None when the predicate holds, otherwise a one-message error list
        """
        if self.predicate(value, key, payload):
            return None
        return [self.message]


@dataclass(frozen=True)
class CrossItemCheck:
    """A whole-collection constraint that reports errors per item.

    ``check`` receives the narrowed list and returns an error tree such as
    ``{2: {"email": ["Duplicate email"]}}`` (or a flat message list), or an
    empty value when the list is acceptable.
    """

    check: Callable[[list[Any]], Any]
    name: str | None = None

    def evaluate(self, value: Any, key: Any, payload: Any) -> ErrorTree | None:
        """Run the check; empty results mean success."""
        errors = self.check(value)
        return errors or None


def as_predicate(item: Any) -> Predicate:
    """Turn a validator or a callable into a ``(value, key, payload)`` predicate.

    Args:
        item: A validator (anything with ``try_validate``) or a predicate

    Returns:
        Predicate callable

    Raises:
        TypeError: If the item is neither
    """
    if hasattr(item, "try_validate"):
        return lambda value, key, payload: item.try_validate(value, key, payload).accepted
    if callable(item):
        return item
    raise TypeError(f"Expected a validator or a callable, got {type(item).__name__}")


def _compose(items: list[Any], combinator: str) -> list[Predicate]:
    if not items:
        raise ValueError(f"{combinator} requires at least one validator or predicate")
    return [as_predicate(item) for item in items]


def all_of_predicate(items: list[Any]) -> Predicate:
    """Predicate that holds when every item accepts the value."""
    composed = _compose(items, "all_of")
    return lambda value, key, payload: all(p(value, key, payload) for p in composed)


def any_of_predicate(items: list[Any]) -> Predicate:
    """Predicate that holds when at least one item accepts the value."""
    composed = _compose(items, "any_of")
    return lambda value, key, payload: any(p(value, key, payload) for p in composed)


def none_of_predicate(items: list[Any]) -> Predicate:
    """Predicate that holds when no item accepts the value."""
    composed = _compose(items, "none_of")
    return lambda value, key, payload: not any(p(value, key, payload) for p in composed)


@dataclass(frozen=True)
class NamedPredicate:
    """A registry entry: a predicate and its default message."""

    predicate: Predicate
    message: str


class PredicateRegistry(Registry[NamedPredicate]):
    """Registry of reusable, named predicates.

    Example:
        ```python
        registry = PredicateRegistry()
        registry.register_predicate("even", lambda v, k, p: v % 2 == 0, "Value must be even")
        step = registry.step("even")
        ```
    """

    def __init__(self, name: str = "predicates"):
        """Initialize the registry.

        Args:
            name: Registry name for identification
        """
        super().__init__(name)

    def register_predicate(
        self,
        name: str,
        predicate: Predicate,
        message: str | None = None,
        allow_overwrite: bool = False,
    ) -> None:
        """Register a predicate by name.

        Args:
            name: Unique predicate name
            predicate: Callable with signature ``(value, key, payload) -> bool``
            message: Default failure message
            allow_overwrite: Whether to replace an existing entry

        Raises:
            TypeError: If predicate is not callable
            OperationError: If the name is taken and allow_overwrite is False
        """
        if not callable(predicate):
            raise TypeError(f"Predicate '{name}' must be callable")
        self.register(
            name,
            NamedPredicate(predicate, message or settings.message("custom")),
            allow_overwrite=allow_overwrite,
        )
        logger.debug(f"Registered predicate '{name}' in {self.name}")

    def step(self, name: str, message: str | None = None) -> ValidationStep:
        """Build a validation step from a registered predicate.

        Args:
            name: Registered predicate name
            message: Message overriding the registered default

        Returns:
            ValidationStep

        Raises:
            NotFoundError: If no predicate is registered under ``name``
        """
        entry = self.get(name)
        return ValidationStep(entry.predicate, message or entry.message, name=name)


predicates = PredicateRegistry()
