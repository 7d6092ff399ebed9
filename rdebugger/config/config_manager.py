"""Global settings management for the R debugger integration.

This module provides process-wide access to the current
:class:`ExtensionSettings` with thread-safe updates and validation.
"""

from __future__ import annotations

import dataclasses
import logging
import threading
from typing import TYPE_CHECKING
from typing import Any

if TYPE_CHECKING:
    import types

from rdebugger.config.settings import ExtensionSettings

logger = logging.getLogger(__name__)


class SettingsManager:
    """Thread-safe manager for process-wide settings state."""

    def __init__(self, default_settings: ExtensionSettings) -> None:
        self._lock = threading.RLock()
        self._default_settings = default_settings
        self._current_settings = default_settings

    def get_settings(self) -> ExtensionSettings:
        with self._lock:
            return self._current_settings

    def set_settings(self, settings: ExtensionSettings) -> None:
        with self._lock:
            settings.validate()
            self._current_settings = settings

    def update_settings(self, **kwargs: Any) -> ExtensionSettings:
        """Replace individual fields of the current settings."""
        with self._lock:
            allowed_keys = {f.name for f in dataclasses.fields(ExtensionSettings)}
            unknown_keys = sorted(set(kwargs) - allowed_keys)
            if unknown_keys:
                logger.warning("Ignoring unknown setting(s): %s", ", ".join(unknown_keys))

            changes = {key: value for key, value in kwargs.items() if key in allowed_keys}
            updated = dataclasses.replace(self._current_settings, **changes)
            updated.validate()
            self._current_settings = updated
            return updated

    def reset_settings(self) -> None:
        with self._lock:
            self._current_settings = self._default_settings


_settings_manager = SettingsManager(ExtensionSettings())


def get_settings() -> ExtensionSettings:
    """Get the current settings in a thread-safe manner."""
    return _settings_manager.get_settings()


def set_settings(settings: ExtensionSettings) -> None:
    """Validate and install new settings."""
    _settings_manager.set_settings(settings)


def update_settings(**kwargs: Any) -> ExtensionSettings:
    """Update the current settings with new values."""
    return _settings_manager.update_settings(**kwargs)


def reset_settings() -> None:
    """Reset settings to defaults."""
    _settings_manager.reset_settings()


class SettingsContext:
    """Context manager for temporary settings changes.

    The previous settings are restored when the context exits.
    """

    def __init__(self, **kwargs: Any) -> None:
        self._manager = _settings_manager
        self._changes = kwargs
        self._original: ExtensionSettings | None = None

    def __enter__(self) -> ExtensionSettings:
        self._original = self._manager.get_settings()
        return self._manager.update_settings(**self._changes)

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: types.TracebackType | None,
    ) -> None:
        if self._original is not None:
            self._manager.set_settings(self._original)


def settings_context(**kwargs: Any) -> SettingsContext:
    """Create a context manager for temporary settings changes."""
    return SettingsContext(**kwargs)
