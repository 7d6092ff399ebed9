"""rdebugger - launch/attach configuration and custom protocol messages for the R debugger."""

from rdebugger.adapter.transport import select_transport
from rdebugger.config.catalog import dynamic_templates
from rdebugger.config.catalog import initial_templates
from rdebugger.config.environment import EnvironmentSignals
from rdebugger.config.resolver import DebugConfigurationResolver

__all__ = [
    "DebugConfigurationResolver",
    "EnvironmentSignals",
    "__version__",
    "dynamic_templates",
    "initial_templates",
    "main",
    "select_transport",
]
__version__ = "0.1.0"


def main() -> int:
    """Entry point that mirrors :func:`rdebugger.__main__.main`."""
    from rdebugger.__main__ import main as _main

    return _main()
