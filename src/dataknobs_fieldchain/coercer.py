"""Form-safe coercion of raw input to a validator's kind.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from types import SimpleNamespace
from typing import Any

from .kinds import Kind

_INTEGER = re.compile(r"^[+-]?\d+$")
_NUMBER = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$")
_TRUE = frozenset({"true", "on", "1"})
_FALSE = frozenset({"false", "off", "0"})


class Coercer:
    """Kind coercion with predictable results.

    Coercion is total: it never raises. Input it does not recognize is
    returned unchanged so the validator's type check reports it normally.
    An empty string becomes absent (None) for scalar kinds and an empty
    container for container kinds.
    """

    def coerce(self, value: Any, kind: Kind) -> Any:
        """Coerce a value to the given kind.

        Args:
            value: Raw value
            kind: Target kind

        Returns:
            Coerced value, None, or the input unchanged
        """
        if value is None:
            return None

        handler = getattr(self, f"_coerce_{kind.value}", None)
        if handler is None:
            return value
        return handler(value)

    def _coerce_string(self, value: Any) -> Any:
        if value == "":
            return None
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (int, float)):
            try:
                return str(value)
            except ValueError:
                # Integer beyond the interpreter's digit limit
                return value
        return value

    def _coerce_integer(self, value: Any) -> Any:
        if value == "":
            return None
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            text = value.strip()
            try:
                if _INTEGER.match(text):
                    return int(text)
                if _NUMBER.match(text):
                    number = float(text)
                    if number.is_integer():
                        return int(number)
            except (ValueError, OverflowError):
                pass
            return value
        if isinstance(value, float) and value.is_integer():
            return int(value)
        return value

    def _coerce_float(self, value: Any) -> Any:
        if value == "":
            return None
        if isinstance(value, bool):
            return value
        try:
            if isinstance(value, int):
                return float(value)
            if isinstance(value, str) and _NUMBER.match(value.strip()):
                return float(value.strip())
        except (ValueError, OverflowError):
            pass
        return value

    def _coerce_boolean(self, value: Any) -> Any:
        if value == "":
            return None
        if isinstance(value, bool):
            return value
        if isinstance(value, int):
            return {1: True, 0: False}.get(value, value)
        if isinstance(value, str):
            text = value.strip().lower()
            if text in _TRUE:
                return True
            if text in _FALSE:
                return False
        return value

    def _coerce_list(self, value: Any) -> Any:
        if isinstance(value, list):
            return value
        if isinstance(value, Mapping):
            # Keys are dropped, values keep their original order
            return list(value.values())
        if isinstance(value, (tuple, set, frozenset)):
            return list(value)
        if isinstance(value, (str, int, float, bool)):
            return [] if value == "" else [value]
        return value

    def _coerce_mapping(self, value: Any) -> Any:
        if value == "":
            return {}
        if isinstance(value, Mapping):
            return value
        if hasattr(value, "__dict__") and not isinstance(value, type):
            return dict(vars(value))
        return value

    def _coerce_object(self, value: Any) -> Any:
        if value == "":
            return SimpleNamespace()
        if isinstance(value, Mapping):
            return SimpleNamespace(**{str(key): item for key, item in value.items()})
        return value


coercer = Coercer()
