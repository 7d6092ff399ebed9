"""Activation of the R debugger integration inside an editor host.

:func:`activate` wires the configuration providers, the resolver and the
adapter descriptor factory together. The resolver needs the port of the
terminal handler's socket, so activation waits for it before anything is
returned to the host.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from dataclasses import field
from typing import TYPE_CHECKING
from typing import Any

from rdebugger.adapter.dispatch import CustomMessageDispatcher
from rdebugger.adapter.transport import DebugAdapterDescriptorFactory
from rdebugger.config.catalog import dynamic_templates
from rdebugger.config.catalog import initial_templates
from rdebugger.config.config_manager import set_settings
from rdebugger.config.resolver import DebugConfigurationResolver
from rdebugger.config.settings import ExtensionSettings
from rdebugger.config.settings import check_deprecated_settings
from rdebugger.protocol.custom import ViewHelp

if TYPE_CHECKING:
    from collections.abc import Callable
    from collections.abc import Mapping

    from rdebugger.adapter.transport import TransportHandle
    from rdebugger.config.environment import EnvironmentSignals
    from rdebugger.config.strict import StrictConfiguration
    from rdebugger.host import CancellationToken
    from rdebugger.host import HelpPanel
    from rdebugger.host import StateStore
    from rdebugger.host import TerminalHandler
    from rdebugger.protocol.configuration import DebugConfiguration

logger = logging.getLogger(__name__)


@dataclass
class ExtensionRuntime:
    """Everything the host registers after activation."""

    resolver: DebugConfigurationResolver
    descriptor_factory: DebugAdapterDescriptorFactory
    settings: ExtensionSettings
    dispatcher: CustomMessageDispatcher = field(default_factory=CustomMessageDispatcher)

    def provide_initial_configurations(self) -> list[DebugConfiguration]:
        return initial_templates()

    def provide_dynamic_configurations(self, signals: EnvironmentSignals) -> list[DebugConfiguration]:
        return dynamic_templates(signals)

    def resolve_configuration(
        self,
        raw: Mapping[str, Any] | None,
        signals: EnvironmentSignals,
        token: CancellationToken | None = None,
    ) -> StrictConfiguration | None:
        return self.resolver.resolve(raw, signals, token)

    def start_session(
        self,
        raw: Mapping[str, Any] | None,
        signals: EnvironmentSignals,
    ) -> tuple[StrictConfiguration, TransportHandle] | None:
        """Resolve ``raw`` and pick its transport.

        Returns None when the configuration could not be resolved; a
        session must not be started in that case.
        """
        config = self.resolve_configuration(raw, signals)
        if config is None:
            return None
        return config, self.descriptor_factory.create_descriptor(config)


async def activate(
    terminal_handler: TerminalHandler,
    state: StateStore,
    settings: Mapping[str, Any] | None = None,
    help_panel: HelpPanel | None = None,
    notify_deprecated: Callable[[dict[str, str]], bool] | None = None,
) -> ExtensionRuntime:
    """Set up the integration and return the objects to register."""
    host_settings = settings or {}
    check_deprecated_settings(host_settings, state, notify_deprecated)

    extension_settings = ExtensionSettings.from_mapping(host_settings)
    set_settings(extension_settings)
    logging.getLogger("rdebugger").setLevel(extension_settings.log_level)

    if extension_settings.track_terminals:
        terminal_handler.track_terminals()

    port = await terminal_handler.acquire_port()
    logger.info("Terminal handler listening on %s:%d", terminal_handler.host, port)

    runtime = ExtensionRuntime(
        resolver=DebugConfigurationResolver(
            port, terminal_handler.host, supports_help_viewer=help_panel is not None
        ),
        descriptor_factory=DebugAdapterDescriptorFactory(help_panel),
        settings=extension_settings,
    )

    if help_panel is not None:
        runtime.dispatcher.register(ViewHelp, lambda message: help_panel.show_help(message.request_path))

    return runtime
