"""Structured validation errors and error-tree flattening.

An error tree is either a flat list of messages (a scalar validator failed)
or a mapping from field name / list index to a nested error tree (a record or
list validator aggregated failures of its children).

Example:
    ```python
    errors = {"name": ["Value is required"], "address": {"street": ["Value is required"]}}
    flatten_errors(errors)
    # [('name', 'Value is required'), ('address.street', 'Value is required')]
    ```
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any, Union

from dataknobs_common import ValidationError

from .settings import settings

ErrorTree = Union[list[str], dict[Union[str, int], "ErrorTree"]]


class FieldValidationError(ValidationError):
    """Raised when a value fails validation.

    Inside a validator pipeline this is the only exception that is caught and
    turned into a failed result; user code may raise it from a transformation
    to fail a field with a custom (possibly nested) error tree.

    Attributes:
        errors: The structured error tree
    """

    def __init__(self, errors: ErrorTree):
        """Initialize with an error tree.

        Args:
            errors: List of messages or mapping of key/index to nested errors
        """
        self.errors = errors
        super().__init__(
            json.dumps(errors, indent=4, default=str),
            context={"errors": errors},
        )

    def flattened(self) -> list[tuple[str, str]]:
        """Get the error tree as ordered ``(path, message)`` pairs."""
        return flatten_errors(self.errors)


def flatten_errors(errors: ErrorTree | None) -> list[tuple[str, str]]:
    """Flatten an error tree into ``(path, message)`` pairs.

    Paths join nested keys and indices with the configured separator; messages
    that are not attached to any key get the configured root key.

    Args:
        errors: Error tree as produced by ``try_validate``, or None

    Returns:
        List of ``(path, message)`` tuples in declaration order
    """
    if not errors:
        return []

    root_key = settings.get_setting("root_key")
    separator = settings.get_setting("path_separator")
    flattened: list[tuple[str, str]] = []

    def walk(node: Any, path: str | None) -> None:
        if isinstance(node, Mapping):
            for key, child in node.items():
                child_path = str(key) if path is None else f"{path}{separator}{key}"
                walk(child, child_path)
        elif isinstance(node, (list, tuple)):
            for message in node:
                if isinstance(message, (Mapping, list, tuple)):
                    walk(message, path)
                else:
                    flattened.append((root_key if path is None else path, str(message)))
        else:
            flattened.append((root_key if path is None else path, str(node)))

    walk(errors, None)
    return flattened
