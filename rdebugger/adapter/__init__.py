"""Adapter-side components: transport selection, startup and custom messages."""

from rdebugger.adapter.dispatch import CustomMessageDispatcher
from rdebugger.adapter.startup import make_startup_arguments
from rdebugger.adapter.transport import DebugAdapterDescriptorFactory
from rdebugger.adapter.transport import InlineTransport
from rdebugger.adapter.transport import SocketTransport
from rdebugger.adapter.transport import TransportHandle
from rdebugger.adapter.transport import select_transport

__all__ = [
    "CustomMessageDispatcher",
    "DebugAdapterDescriptorFactory",
    "InlineTransport",
    "SocketTransport",
    "TransportHandle",
    "make_startup_arguments",
    "select_transport",
]
