"""Selection of the debug adapter transport for a resolved configuration.

Launch sessions run the adapter inline, in the host process, which then
starts R itself. Attach sessions connect to the socket server of an R
process that is already running.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING
from typing import ClassVar
from typing import Union

from rdebugger.config.strict import Attach
from rdebugger.config.strict import LaunchConfigurationBase
from rdebugger.errors import ConfigurationError

if TYPE_CHECKING:
    from rdebugger.config.strict import StrictConfiguration
    from rdebugger.host import HelpPanel

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InlineTransport:
    """Adapter implemented in-process."""

    kind: ClassVar[str] = "inline"

    supports_help_viewer: bool
    command_line_args: tuple[str, ...] = ()


@dataclass(frozen=True)
class SocketTransport:
    """Adapter reached over TCP."""

    kind: ClassVar[str] = "server"

    port: int
    host: str


TransportHandle = Union[InlineTransport, SocketTransport]


def select_transport(config: StrictConfiguration, help_panel_available: bool) -> TransportHandle:
    """Pick the transport a session with ``config`` runs over.

    Raises:
        ConfigurationError: If ``config`` is not a known strict variant. This
            is not recoverable; retrying with the same input fails again.
    """
    if isinstance(config, Attach):
        transport: TransportHandle = SocketTransport(port=config.port, host=config.host)
    elif isinstance(config, LaunchConfigurationBase):
        transport = InlineTransport(
            supports_help_viewer=help_panel_available,
            command_line_args=tuple(config.command_line_args),
        )
    else:
        request = getattr(config, "request", None)
        if request is None and isinstance(config, dict):
            request = config.get("request")
        msg = 'Invalid entry "request" in debug config. Valid entries are "launch" and "attach"'
        raise ConfigurationError(msg, config_key="request", details={"request": request})

    logger.debug("Selected %s transport for %s", transport.kind, config.tag)
    return transport


class DebugAdapterDescriptorFactory:
    """Provides transports for sessions, bound to the available help panel."""

    def __init__(self, help_panel: HelpPanel | None = None) -> None:
        self.help_panel = help_panel

    def create_descriptor(self, config: StrictConfiguration) -> TransportHandle:
        return select_transport(config, self.help_panel is not None)
