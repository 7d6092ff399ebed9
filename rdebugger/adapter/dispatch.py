"""Dispatch of custom protocol messages to registered handlers.

Handlers are registered per message variant, either directly or with the
:meth:`CustomMessageDispatcher.handler` decorator. Standard protocol
traffic, unknown reasons and variants without a handler are ignored.
Custom requests can be answered with :meth:`CustomMessageDispatcher.respond`.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from typing import Any
from typing import cast

from rdebugger.errors import RDebuggerError
from rdebugger.protocol.custom import EVENT_VARIANTS
from rdebugger.protocol.custom import REQUEST_VARIANTS
from rdebugger.protocol.custom import decode_custom_message

if TYPE_CHECKING:
    from collections.abc import Callable
    from collections.abc import Mapping

    from rdebugger.protocol.custom import CustomMessage
    from rdebugger.protocol.messages import GenericRequest
    from rdebugger.protocol.messages import GenericResponse
    from rdebugger.protocol.protocol import ProtocolFactory

logger = logging.getLogger(__name__)

_KNOWN_VARIANTS = frozenset((*EVENT_VARIANTS.values(), *REQUEST_VARIANTS.values()))


class CustomMessageDispatcher:
    """Routes decoded custom messages to one handler per variant."""

    def __init__(self) -> None:
        self._handlers: dict[type, Callable[[Any], Any]] = {}

    def register(self, variant: type, handler: Callable[[Any], Any]) -> None:
        if variant not in _KNOWN_VARIANTS:
            msg = f"Not a custom message variant: {variant!r}"
            raise TypeError(msg)
        self._handlers[variant] = handler

    def handler(self, variant: type):
        """Decorator to register a handler for ``variant``."""

        def decorator(func):
            self.register(variant, func)
            return func

        return decorator

    def dispatch(self, message: Mapping[str, Any]) -> Any:
        """Decode ``message`` and pass it to its handler.

        Returns the handler's result, or None when nothing handled it.
        Malformed payloads of known reasons raise ``ProtocolError``.
        """
        decoded = decode_custom_message(message)
        if decoded is None:
            return None
        return self.dispatch_decoded(decoded)

    def dispatch_decoded(self, decoded: CustomMessage) -> Any:
        handler = self._handlers.get(type(decoded))
        if handler is None:
            logger.debug("No handler registered for custom message '%s'", decoded.reason)
            return None
        return handler(decoded)

    def respond(self, request: Mapping[str, Any], factory: ProtocolFactory) -> GenericResponse | None:
        """Handle a custom request and build the response to send back.

        A dict returned by the handler becomes the response body. Malformed
        requests, and handlers raising ``RDebuggerError``, get a failed
        response. Returns None for anything that is not a custom request or
        whose reason is unknown.
        """
        if request.get("type") != "request":
            return None
        generic_request = cast("GenericRequest", request)
        try:
            decoded = decode_custom_message(request)
            if decoded is None:
                return None
            result = self.dispatch_decoded(decoded)
        except RDebuggerError as e:
            logger.warning("Custom request %s failed: %s", request.get("seq"), e)
            return factory.create_error_response(generic_request, e)
        body = result if isinstance(result, dict) else None
        return factory.create_response(generic_request, True, body)
