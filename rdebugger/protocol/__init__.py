"""Protocol shapes: base DAP messages, debug configurations and custom messages."""

from rdebugger.protocol.custom import CustomMessage
from rdebugger.protocol.custom import ShowDataViewer
from rdebugger.protocol.custom import ShowingPrompt
from rdebugger.protocol.custom import ViewHelp
from rdebugger.protocol.custom import WriteToStdin
from rdebugger.protocol.custom import decode_custom_message
from rdebugger.protocol.protocol import ProtocolFactory
from rdebugger.protocol.protocol import ProtocolHandler

__all__ = [
    "CustomMessage",
    "ProtocolFactory",
    "ProtocolHandler",
    "ShowDataViewer",
    "ShowingPrompt",
    "ViewHelp",
    "WriteToStdin",
    "decode_custom_message",
]
