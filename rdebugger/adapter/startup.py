"""Startup arguments for the R process of a launch session."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from rdebugger.config.strict import LaunchConfigurationBase
from rdebugger.errors import ConfigurationError

if TYPE_CHECKING:
    from rdebugger.config.strict import StrictConfiguration
    from rdebugger.protocol.configuration import RStartupArguments

logger = logging.getLogger(__name__)


def r_interactive_flags(platform: str | None = None) -> list[str]:
    """Flags that start R quietly with an interactive prompt on stdin.

    Rterm on Windows does not know ``--interactive``; ``--ess`` has the
    same effect there.
    """
    platform = platform or sys.platform
    interactive = "--ess" if platform.startswith("win") else "--interactive"
    return ["--quiet", "--no-save", interactive]


def make_startup_arguments(
    config: StrictConfiguration,
    r_path: str,
    *,
    json_port: int | None = None,
    sink_port: int | None = None,
    platform: str | None = None,
) -> RStartupArguments:
    """Build the arguments used to spawn R for a launch configuration.

    Raises:
        ConfigurationError: For attach configurations, which never start a
            process.
    """
    if not isinstance(config, LaunchConfigurationBase):
        raise ConfigurationError(
            "Startup arguments are only available for launch configurations",
            config_key="request",
            details={"tag": getattr(config, "tag", None)},
        )

    args: RStartupArguments = {
        "path": r_path,
        "args": [*r_interactive_flags(platform), *config.command_line_args],
        "cwd": config.working_directory,
    }
    if json_port is not None:
        args["jsonPort"] = json_port
    if sink_port is not None:
        args["sinkPort"] = sink_port

    logger.debug("Starting R with %s", args)
    return args
