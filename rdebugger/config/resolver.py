"""Resolution of raw debug configurations into strict ones.

The resolver takes whatever the user (or a template) supplied, possibly an
empty mapping, and derives one strict, mode-tagged configuration from it.
Each step below is a plain function over a private copy of the input, so
the caller's mapping is never modified and the steps can be exercised on
their own.

Unset detection is uniform: a string field is unset when it is missing,
``None`` or ``""``; any other field is unset only when it is missing or
``None``. An explicit ``False`` or ``0`` is always kept. The fields in
:data:`STRING_FIELDS` can only hold a string, so a value of any other type
there (``"file": 123``, ``"mainFunction": ["main"]``) also counts as unset
and is replaced by the default. Malformed input never makes resolution
fail; only an unknown ``request`` does.
"""

from __future__ import annotations

import copy
import logging
from typing import TYPE_CHECKING
from typing import Any

from rdebugger.config.catalog import file_template
from rdebugger.config.catalog import package_template
from rdebugger.config.catalog import workspace_template
from rdebugger.config.strict import LAUNCH_VARIANTS
from rdebugger.config.strict import Attach
from rdebugger.constants import DEFAULT_HOST
from rdebugger.constants import DEFAULT_MAIN_FUNCTION
from rdebugger.constants import FILE_PLACEHOLDER
from rdebugger.constants import REQUEST_ATTACH
from rdebugger.constants import REQUEST_LAUNCH
from rdebugger.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from rdebugger.config.environment import EnvironmentSignals
    from rdebugger.config.strict import StrictConfiguration
    from rdebugger.host import CancellationToken

logger = logging.getLogger(__name__)

# Launch capabilities this integration always provides.
FORCED_LAUNCH_CAPABILITIES = (
    "supportsStdoutReading",
    "supportsWriteToStdinEvent",
    "supportsShowingPromptRequest",
)


# Fields that only ever hold a string; any other value there is replaced.
STRING_FIELDS = frozenset(("workingDirectory", "file", "mainFunction", "customHost"))


def is_unset(config: Mapping[str, Any], key: str) -> bool:
    value = config.get(key)
    if key in STRING_FIELDS:
        return not isinstance(value, str) or value == ""
    return value is None or (isinstance(value, str) and value == "")


def set_default(config: dict[str, Any], key: str, value: Any) -> None:
    if is_unset(config, key):
        config[key] = value


def is_empty_configuration(config: Mapping[str, Any]) -> bool:
    """True when the session was started without any ``launch.json`` entry."""
    return all(is_unset(config, key) for key in ("type", "request", "name"))


def bootstrap_configuration(signals: EnvironmentSignals) -> dict[str, Any]:
    """Pick a configuration when the user supplied none."""
    wd = signals.working_directory
    if signals.has_package_descriptor:
        config = dict(package_template(wd))
        config["allowGlobalDebugging"] = True
        return config
    if signals.has_open_file_document:
        return dict(file_template(wd, name="Launch R Debugger"))
    return dict(workspace_template(wd, name="Launch R Debugger"))


def apply_mode_defaults(config: dict[str, Any], signals: EnvironmentSignals) -> None:
    set_default(config, "debugMode", "file" if signals.has_open_file_document else "workspace")
    set_default(config, "allowGlobalDebugging", True)


def apply_launch_capabilities(config: dict[str, Any], supports_help_viewer: bool) -> None:
    for key in FORCED_LAUNCH_CAPABILITIES:
        config[key] = True
    # R's own default for overwriteHelp is False, so make it explicit here
    set_default(config, "overwriteHelp", True)
    config["overwriteHelp"] = bool(config["overwriteHelp"]) and supports_help_viewer


def apply_attach_defaults(config: dict[str, Any], custom_port: int, custom_host: str) -> None:
    set_default(config, "customPort", custom_port)
    set_default(config, "customHost", custom_host)
    set_default(config, "useCustomSocket", True)
    set_default(config, "supportsWriteToStdinEvent", True)
    # the process is already running, nothing can be loaded into it
    config["overwriteLoadAll"] = False


def _debug_mode(config: Mapping[str, Any]) -> str | None:
    mode = config.get("debugMode")
    return mode if isinstance(mode, str) else None


def backfill_launch_fields(config: dict[str, Any], signals: EnvironmentSignals) -> None:
    mode = _debug_mode(config)
    if mode not in LAUNCH_VARIANTS:
        return
    set_default(config, "workingDirectory", signals.working_directory)
    if mode in ("function", "file"):
        set_default(config, "file", FILE_PLACEHOLDER)
    if mode == "function":
        set_default(config, "mainFunction", DEFAULT_MAIN_FUNCTION)


def tag_configuration(config: Mapping[str, Any]) -> StrictConfiguration | None:
    """Wrap a fully defaulted configuration in its strict variant."""
    if config.get("request") == REQUEST_ATTACH:
        return Attach.from_mapping(config)
    variant = LAUNCH_VARIANTS.get(_debug_mode(config) or "")
    if variant is None:
        return None
    return variant.from_mapping(config)


class DebugConfigurationResolver:
    """Turns raw configurations into strict ones.

    ``custom_port``/``custom_host`` are the socket the terminal handler
    listens on and become the defaults for attach sessions.
    ``supports_help_viewer`` tells whether a help panel is available to
    display help requested by R. All three are fixed at construction.
    """

    def __init__(
        self,
        custom_port: int,
        custom_host: str = DEFAULT_HOST,
        supports_help_viewer: bool = False,
    ) -> None:
        self._custom_port = custom_port
        self._custom_host = custom_host
        self._supports_help_viewer = supports_help_viewer

    @property
    def custom_port(self) -> int:
        return self._custom_port

    @property
    def custom_host(self) -> str:
        return self._custom_host

    @property
    def supports_help_viewer(self) -> bool:
        return self._supports_help_viewer

    def resolve(
        self,
        raw: Mapping[str, Any] | None,
        signals: EnvironmentSignals,
        token: CancellationToken | None = None,
    ) -> StrictConfiguration | None:
        """Resolve ``raw`` into a strict configuration.

        Returns ``None`` when a launch configuration names an unknown
        ``debugMode``; callers should report that and not start a session.

        Raises:
            ConfigurationError: If ``request`` is neither ``launch`` nor
                ``attach``.
        """
        if token is not None and token.is_cancellation_requested:
            # resolution is short and synchronous, the token is advisory
            logger.debug("Cancellation requested during resolution; completing anyway")

        config: dict[str, Any] = copy.deepcopy(dict(raw or {}))

        if is_empty_configuration(config):
            config = bootstrap_configuration(signals)
            logger.debug("No debug configuration supplied, using '%s'", config["name"])

        apply_mode_defaults(config, signals)

        request = config.get("request")
        if request == REQUEST_LAUNCH:
            apply_launch_capabilities(config, self._supports_help_viewer)
            backfill_launch_fields(config, signals)
        elif request == REQUEST_ATTACH:
            apply_attach_defaults(config, self._custom_port, self._custom_host)
        else:
            msg = 'Invalid entry "request" in debug config. Valid entries are "launch" and "attach"'
            raise ConfigurationError(msg, config_key="request", details={"request": request})

        strict = tag_configuration(config)
        if strict is None:
            logger.warning(
                "Unable to resolve debug configuration %r: unknown debugMode %r",
                config.get("name"),
                config.get("debugMode"),
            )
            return None

        logger.debug("Resolved debug configuration %r as %s", strict.name, strict.tag)
        return strict
