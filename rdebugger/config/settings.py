"""User settings of the R debugger integration.

Settings are read from the flat ``section.key`` mapping the host exposes.
The old ``rdebugger.*`` section has been replaced by ``r.debugger.*`` (and
``r.rterm.*`` for the R executable); :func:`check_deprecated_settings`
reports leftovers of the old section once, until the user acknowledges it.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from typing import TYPE_CHECKING
from typing import Any
from typing import Literal

from rdebugger.constants import DEFAULT_R_PATH
from rdebugger.constants import IGNORE_DEPRECATED_CONFIG_KEY
from rdebugger.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Callable
    from collections.abc import Mapping

    from rdebugger.host import StateStore

logger = logging.getLogger(__name__)

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

DEPRECATED_SETTINGS: dict[str, str] = {
    "rdebugger.rterm.windows": "r.rterm.windows",
    "rdebugger.rterm.mac": "r.rterm.mac",
    "rdebugger.rterm.linux": "r.rterm.linux",
    "rdebugger.timeouts.startup": "r.debugger.timeouts.startup",
    "rdebugger.timeouts.terminate": "r.debugger.timeouts.terminate",
    "rdebugger.trackTerminals": "r.debugger.trackTerminals",
}


def _rterm_key() -> str:
    if sys.platform.startswith("win"):
        return "r.rterm.windows"
    if sys.platform == "darwin":
        return "r.rterm.mac"
    return "r.rterm.linux"


@dataclass
class ExtensionSettings:
    """Settings that influence activation and how sessions are started.

    ``track_terminals`` asks the terminal handler to follow R terminals the
    user opens, ``log_level`` applies to the ``rdebugger`` loggers and
    ``r_path`` is the R executable for the current platform.
    """

    track_terminals: bool = False
    log_level: LogLevel = "INFO"
    r_path: str = DEFAULT_R_PATH

    @classmethod
    def from_mapping(cls, settings: Mapping[str, Any]) -> ExtensionSettings:
        """Create settings from the host's flat settings mapping."""
        defaults = cls()
        return cls(
            track_terminals=bool(settings.get("r.debugger.trackTerminals", defaults.track_terminals)),
            log_level=str(settings.get("r.debugger.logLevel", defaults.log_level)).upper(),  # type: ignore[arg-type]
            r_path=settings.get(_rterm_key()) or defaults.r_path,
        )

    def validate(self) -> None:
        """Validate settings and raise errors for unusable values."""
        if self.log_level not in LOG_LEVELS:
            raise ConfigurationError(
                f"Unknown log level: {self.log_level}",
                config_key="r.debugger.logLevel",
                details={"allowed": list(LOG_LEVELS)},
            )
        if not isinstance(self.r_path, str) or not self.r_path:
            raise ConfigurationError("Path to R must not be empty", config_key=_rterm_key())


def find_deprecated_settings(settings: Mapping[str, Any]) -> dict[str, str]:
    """Map each deprecated key present in ``settings`` to its replacement."""
    return {
        old: new
        for old, new in DEPRECATED_SETTINGS.items()
        if settings.get(old) is not None
    }


def check_deprecated_settings(
    settings: Mapping[str, Any],
    state: StateStore,
    notify: Callable[[dict[str, str]], bool] | None = None,
) -> bool:
    """Warn about deprecated settings unless the user already dismissed it.

    ``notify`` shows the found settings to the user and returns True when
    the user asks not to be told again; the answer is persisted in
    ``state``. Returns the stored acknowledgement.
    """
    if state.get(IGNORE_DEPRECATED_CONFIG_KEY, False) is True:
        return True

    found = find_deprecated_settings(settings)
    if not found:
        return False

    for old, new in found.items():
        logger.warning("Setting '%s' is deprecated, use '%s' instead", old, new)

    acknowledged = bool(notify(found)) if notify is not None else False
    state.update(IGNORE_DEPRECATED_CONFIG_KEY, acknowledged)
    return acknowledged
