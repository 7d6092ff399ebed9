"""Error handling for the R debugger integration."""

from rdebugger.errors.rdebugger_errors import ConfigurationError
from rdebugger.errors.rdebugger_errors import ProtocolError
from rdebugger.errors.rdebugger_errors import RDebuggerError

__all__ = [
    "ConfigurationError",
    "ProtocolError",
    "RDebuggerError",
]
