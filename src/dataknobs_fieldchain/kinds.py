"""Value kinds and kind-specific re-normalization.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from enum import Enum
from types import SimpleNamespace
from typing import Any


class Kind(Enum):
    """Enumeration of validator kinds.

    A kind names the category of values a validator narrows to. While a
    transformation chain runs, the current kind follows the value: a
    type-switching ``transform()`` replaces it with the kind detected from its
    output, and type-preserving ``pipe()`` steps re-normalize their output for
    the current kind.

    Attributes:
        STRING: Text values
        INTEGER: Whole numbers (bools excluded)
        FLOAT: Decimal numbers
        BOOLEAN: True/False values
        LIST: Zero-indexed sequences
        MAPPING: Keyed mappings validated against a schema
        OBJECT: Attribute objects validated against a schema
        MIXED: Any value (used by logical combinators)
    """

    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    LIST = "list"
    MAPPING = "mapping"
    OBJECT = "object"
    MIXED = "mixed"


def detect_kind(value: Any, fallback: Kind = Kind.MIXED) -> Kind:
    """Detect the kind of a value.

    Args:
        value: Value to inspect
        fallback: Kind returned for None

    Returns:
        Detected Kind
    """
    if value is None:
        return fallback
    if isinstance(value, bool):
        return Kind.BOOLEAN
    if isinstance(value, int):
        return Kind.INTEGER
    if isinstance(value, float):
        return Kind.FLOAT
    if isinstance(value, str):
        return Kind.STRING
    if isinstance(value, (list, tuple)):
        return Kind.LIST
    if isinstance(value, Mapping):
        return Kind.MAPPING
    if isinstance(value, SimpleNamespace) or hasattr(value, "__dict__"):
        return Kind.OBJECT
    return Kind.MIXED


def renormalize(kind: Kind, value: Any) -> Any:
    """Restore the shape expected for ``kind`` after a type-preserving step.

    Lists are re-indexed (any iterable or mapping output becomes a fresh list
    of its values), mappings keep their keys, and objects built from mappings
    become namespaces. Scalars are returned unchanged.

    Args:
        kind: Current kind of the chain
        value: Output of the step

    Returns:
        Re-normalized value
    """
    if value is None:
        return value
    if kind is Kind.LIST:
        if isinstance(value, list):
            return value
        if isinstance(value, Mapping):
            return list(value.values())
        if isinstance(value, Iterable) and not isinstance(value, (str, bytes)):
            return list(value)
        return value
    if kind is Kind.MAPPING:
        if isinstance(value, dict):
            return value
        if isinstance(value, Mapping):
            return dict(value)
        return value
    if kind is Kind.OBJECT and isinstance(value, Mapping):
        return SimpleNamespace(**value)
    return value
