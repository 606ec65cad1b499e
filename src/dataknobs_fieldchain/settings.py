"""Global settings and default messages for field validators."""

import copy
import os
import threading
from typing import Any, Dict


DEFAULT_SETTINGS: Dict[str, Any] = {
    "root_key": "_root",
    "path_separator": ".",
    "messages": {
        "required": "Value is required",
        "custom": "Custom validation failed",
        "any_of": "Value must satisfy at least one validation rule",
        "all_of": "Value must satisfy all validation rules",
        "none_of": "Value must not satisfy any of the validation rules",
        "not": "Value must not satisfy the validation rule",
        "one_of": "Value must be one of: {values}",
        "string_type": "Value must be a string",
        "integer_type": "Value must be an integer",
        "float_type": "Value must be a float",
        "boolean_type": "Value must be a boolean",
        "list_type": "Value must be a list",
        "mapping_type": "Input must be a mapping",
        "object_type": "Input must be an object",
    },
}


class SettingsManager:
    """Manages the root key, path separator and default message templates.

    Settings attributes:
        - root_key: Path used for errors that are not attached to a key
        - path_separator: Joins keys and indices in flattened error paths
        - messages: Default message templates, keyed by message name

    Environment variables named ``DATAKNOBS_FIELDCHAIN_<SETTING>`` override
    scalar settings the first time the manager is read, e.g.
    ``DATAKNOBS_FIELDCHAIN_ROOT_KEY=__all__``.
    """

    ENV_PREFIX = "DATAKNOBS_FIELDCHAIN_"

    def __init__(self) -> None:
        """Initialize the settings manager."""
        self._settings: Dict[str, Any] = {}
        self._lock = threading.RLock()
        self._env_loaded = False

    def load_settings(self, settings: dict) -> None:
        """Load settings from a dictionary.

        Args:
            settings: Settings dictionary
        """
        with self._lock:
            # Merge with existing settings (first seen takes precedence)
            for key, value in settings.items():
                if key not in self._settings:
                    self._settings[key] = copy.deepcopy(value)

    def get_setting(self, key: str, default: Any = None) -> Any:
        """Get a setting value.

        Args:
            key: Setting key
            default: Default value if not found

        Returns:
            Setting value or default
        """
        with self._lock:
            self._load_environment()
            if key in self._settings:
                return self._settings[key]
            return DEFAULT_SETTINGS.get(key, default)

    def set_setting(self, key: str, value: Any) -> None:
        """Set a setting value.

        Args:
            key: Setting key
            value: Setting value
        """
        with self._lock:
            self._settings[key] = value

    def message(self, name: str, **params: Any) -> str:
        """Render a default message template.

        Args:
            name: Message name (e.g. ``"required"``)
            **params: Values substituted into the template

        Returns:
            The rendered message
        """
        with self._lock:
            self._load_environment()
            overrides = self._settings.get("messages", {})
            template = overrides.get(name, DEFAULT_SETTINGS["messages"].get(name))
        if template is None:
            raise KeyError(f"Unknown message template: {name}")
        return template.format(**params) if params else template

    def reset(self) -> None:
        """Drop all loaded settings, restoring the defaults."""
        with self._lock:
            self._settings.clear()
            self._env_loaded = False

    def _load_environment(self) -> None:
        if self._env_loaded:
            return
        self._env_loaded = True
        for key, value in os.environ.items():
            if key.startswith(self.ENV_PREFIX):
                name = key[len(self.ENV_PREFIX):].lower()
                if name in DEFAULT_SETTINGS and name != "messages":
                    self._settings.setdefault(name, value)


settings = SettingsManager()
