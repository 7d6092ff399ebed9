"""
Debug Adapter Protocol message parsing and construction.

This module provides classes for building the base protocol messages and
the R debugger's custom events and requests, and for parsing/validating
incoming frames.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING
from typing import Any
from typing import cast

from rdebugger.constants import CUSTOM_COMMAND
from rdebugger.constants import CUSTOM_EVENT
from rdebugger.errors import ProtocolError
from rdebugger.errors import RDebuggerError
from rdebugger.protocol.configuration import to_wire_rstrings

if TYPE_CHECKING:
    from rdebugger.protocol.configuration import RStrings
    from rdebugger.protocol.custom import CustomEvent
    from rdebugger.protocol.custom import CustomEventMessage
    from rdebugger.protocol.custom import CustomRequest
    from rdebugger.protocol.custom import CustomRequestMessage
    from rdebugger.protocol.messages import ErrorResponse
    from rdebugger.protocol.messages import GenericEvent
    from rdebugger.protocol.messages import GenericRequest
    from rdebugger.protocol.messages import GenericResponse

logger = logging.getLogger(__name__)


class ProtocolFactory:
    """
    Builds Debug Adapter Protocol messages.

    This class owns the sequencing for created messages and provides helpers
    for constructing requests, responses (including error responses), and
    events, as well as the custom R debugger messages.
    """

    def __init__(self, *, seq_start: int = 1) -> None:
        self.seq_counter = seq_start

    # ---- Core constructors -------------------------------------------------

    def _next_seq(self) -> int:
        seq = self.seq_counter
        self.seq_counter += 1
        return seq

    def create_request(
        self, command: str, arguments: dict[str, Any] | None = None
    ) -> GenericRequest:
        request_dict: dict[str, Any] = dict(seq=self._next_seq(), type="request")
        request_dict["command"] = command
        if arguments is not None:
            request_dict["arguments"] = arguments

        return cast("GenericRequest", request_dict)

    def create_response(
        self,
        request: GenericRequest,
        success: bool,
        body: dict[str, Any] | None = None,
        error_message: str | None = None,
    ) -> GenericResponse:
        req = cast("dict[str, Any]", request)

        response_dict: dict[str, Any] = {
            "seq": self._next_seq(),
            "type": "response",
            "request_seq": req["seq"],
            "success": success,
            "command": req.get("command"),
        }

        if body is not None:
            response_dict["body"] = body

        if not success and error_message is not None:
            response_dict["message"] = error_message

        return cast("GenericResponse", response_dict)

    def create_error_response(
        self, request: GenericRequest, error: str | RDebuggerError
    ) -> ErrorResponse:
        """Build a failed response to ``request``.

        An :class:`RDebuggerError` contributes its ``error_code`` and
        ``details`` to the body; a plain message is reported as a protocol
        error for the request's command.
        """
        if isinstance(error, RDebuggerError):
            error_body = error.to_dict()
            error_message = error.message
        else:
            error_body = {
                "error": "ProtocolError",
                "message": error,
                "details": {"command": request.get("command")},
            }
            error_message = error
        response = self.create_response(request, False, error_body, error_message)
        return cast("ErrorResponse", response)

    def create_event(self, event_type: str, body: dict[str, Any] | None = None) -> GenericEvent:
        event_dict: dict[str, Any] = {
            "seq": self._next_seq(),
            "type": "event",
            "event": event_type,
        }

        if body is not None:
            event_dict["body"] = body

        return cast("GenericEvent", event_dict)

    # ---- Specialized request creators -------------------------------------

    def create_initialize_request(
        self,
        client_id: str,
        adapter_id: str,
        *,
        r_strings: RStrings | None = None,
        extension_version: str | None = None,
    ) -> GenericRequest:
        args: dict[str, Any] = {
            "clientID": client_id,
            "adapterID": adapter_id,
            "linesStartAt1": True,
            "columnsStartAt1": True,
        }
        if r_strings is not None:
            args["rStrings"] = to_wire_rstrings(r_strings)
        if extension_version is not None:
            args["extensionVersion"] = extension_version
        return self.create_request("initialize", args)

    def create_continue_request(
        self,
        thread_id: int,
        *,
        call_debug_source: bool = False,
        source: dict[str, Any] | None = None,
    ) -> GenericRequest:
        args: dict[str, Any] = {"threadId": thread_id}
        if call_debug_source:
            args["callDebugSource"] = True
            if source is not None:
                args["source"] = source
        return self.create_request("continue", args)

    def create_custom_request(self, message: CustomRequestMessage) -> CustomRequest:
        request = self.create_request(CUSTOM_COMMAND, dict(message.to_body()))
        return cast("CustomRequest", request)

    # ---- Specialized event creators ---------------------------------------

    def create_custom_event(self, message: CustomEventMessage) -> CustomEvent:
        event = self.create_event(CUSTOM_EVENT, dict(message.to_body()))
        return cast("CustomEvent", event)


class ProtocolHandler:
    """
    Handles parsing and construction of Debug Adapter Protocol messages.
    """

    def __init__(self) -> None:
        self._factory = ProtocolFactory(seq_start=1)

    @property
    def factory(self) -> ProtocolFactory:
        return self._factory

    def parse_message(self, message_json: str):
        # -> GenericRequest | GenericResponse | GenericEvent
        """
        Parse a JSON message into a protocol message object.

        Args:
            message_json: JSON string containing the protocol message

        Returns:
            A parsed protocol message as a TypedDict

        Raises:
            ProtocolError: If the message is invalid or cannot be parsed
        """
        try:
            message = json.loads(message_json)
        except json.JSONDecodeError as e:
            msg = f"Failed to parse message as JSON: {e}"
            raise ProtocolError(msg, cause=e) from e

        if not isinstance(message, dict):
            raise ProtocolError("Message is not a JSON object")

        if "seq" not in message:
            raise ProtocolError("Message missing 'seq' field")

        if "type" not in message:
            raise ProtocolError("Message missing 'type' field")

        msg_type = message["type"]

        if msg_type == "request":
            return self._validate_request(message)

        if msg_type == "response":
            return self._validate_response(message)

        if msg_type == "event":
            return self._validate_event(message)

        raise ProtocolError(f"Invalid message type: {msg_type}")  # noqa: EM102

    def _validate_request(self, message: dict[str, Any]) -> GenericRequest:
        if "command" not in message:
            msg = "Request message missing 'command' field"
            raise ProtocolError(msg)

        # Unknown commands are accepted; dispatch decides what to do with them.
        return cast("GenericRequest", message)

    def _validate_response(self, message: dict[str, Any]) -> GenericResponse:
        for key in ("request_seq", "success", "command"):
            if key not in message:
                msg = f"Response message missing '{key}' field"
                raise ProtocolError(msg)

        return cast("GenericResponse", message)

    def _validate_event(self, message: dict[str, Any]) -> GenericEvent:
        if "event" not in message:
            msg = "Event message missing 'event' field"
            raise ProtocolError(msg)

        return cast("GenericEvent", message)

    def create_request(
        self, command: str, arguments: dict[str, Any] | None = None
    ) -> GenericRequest:
        return self._factory.create_request(command, arguments)

    def create_response(
        self,
        request: GenericRequest,
        success: bool,
        body: dict[str, Any] | None = None,
        error_message: str | None = None,
    ) -> GenericResponse:
        return self._factory.create_response(request, success, body, error_message)

    def create_error_response(
        self, request: GenericRequest, error: str | RDebuggerError
    ) -> ErrorResponse:
        return self._factory.create_error_response(request, error)

    def create_event(self, event_type: str, body: dict[str, Any] | None = None) -> GenericEvent:
        return self._factory.create_event(event_type, body)

    def create_custom_event(self, message: CustomEventMessage) -> CustomEvent:
        return self._factory.create_custom_event(message)

    def create_custom_request(self, message: CustomRequestMessage) -> CustomRequest:
        return self._factory.create_custom_request(message)

    def encode(self, message: Any) -> str:
        """Serialize a message for the wire."""
        return json.dumps(message, separators=(",", ":"))
