"""Tests for dispatching custom messages to handlers."""

from __future__ import annotations

import pytest

from rdebugger.adapter.dispatch import CustomMessageDispatcher
from rdebugger.errors import ConfigurationError
from rdebugger.errors import ProtocolError
from rdebugger.protocol.custom import ShowDataViewer
from rdebugger.protocol.custom import ShowingPrompt
from rdebugger.protocol.custom import ViewHelp
from rdebugger.protocol.custom import WriteToStdin
from rdebugger.protocol.protocol import ProtocolFactory


@pytest.fixture
def dispatcher() -> CustomMessageDispatcher:
    return CustomMessageDispatcher()


def test_registered_handler_receives_variant(dispatcher) -> None:
    received = []

    @dispatcher.handler(WriteToStdin)
    def on_write(message: WriteToStdin) -> str:
        received.append(message)
        return "written"

    result = dispatcher.dispatch(
        {"seq": 1, "type": "event", "event": "custom", "body": {"reason": "writeToStdin", "text": "n"}}
    )

    assert result == "written"
    assert received == [WriteToStdin(text="n")]


def test_unhandled_variant_is_noop(dispatcher) -> None:
    message = {"seq": 1, "type": "event", "event": "custom", "body": {"reason": "viewHelp", "requestPath": "x"}}
    assert dispatcher.dispatch(message) is None


def test_unknown_reason_is_noop(dispatcher) -> None:
    calls = []
    dispatcher.register(ViewHelp, calls.append)

    message = {"seq": 1, "type": "event", "event": "custom", "body": {"reason": "refreshView"}}

    assert dispatcher.dispatch(message) is None
    assert calls == []


def test_standard_message_is_noop(dispatcher) -> None:
    assert dispatcher.dispatch({"seq": 1, "type": "request", "command": "threads"}) is None


def test_dispatch_decoded(dispatcher) -> None:
    dispatcher.register(ShowingPrompt, lambda m: m.which)
    assert dispatcher.dispatch_decoded(ShowingPrompt(which="browser")) == "browser"


def test_malformed_message_raises(dispatcher) -> None:
    dispatcher.register(ViewHelp, lambda m: None)
    with pytest.raises(ProtocolError):
        dispatcher.dispatch({"seq": 1, "type": "event", "event": "custom", "body": {"reason": "viewHelp"}})


def test_register_rejects_non_variants(dispatcher) -> None:
    with pytest.raises(TypeError):
        dispatcher.register(dict, lambda m: None)


class TestRespond:
    """Answering custom requests."""

    def test_handler_result_becomes_response_body(self, dispatcher) -> None:
        factory = ProtocolFactory()
        dispatcher.register(ShowDataViewer, lambda m: {"opened": m.name})
        request = factory.create_custom_request(ShowDataViewer(variables_reference=4, name="df"))

        response = dispatcher.respond(request, factory)

        assert response is not None
        assert response["success"] is True
        assert response["request_seq"] == request["seq"]
        assert response["command"] == "custom"
        assert response["body"] == {"opened": "df"}

    def test_malformed_request_gets_error_response(self, dispatcher) -> None:
        factory = ProtocolFactory()
        request = factory.create_request("custom", {"reason": "showDataViewer", "name": "df"})

        response = dispatcher.respond(request, factory)

        assert response is not None
        assert response["success"] is False
        assert response["body"]["error"] == "ProtocolError"
        assert response["body"]["details"] == {"key": "variablesReference", "reason": "showDataViewer"}

    def test_handler_error_gets_error_response(self, dispatcher) -> None:
        factory = ProtocolFactory()

        def fail(message: ShowingPrompt) -> None:
            raise ConfigurationError("no terminal attached", config_key="terminalId")

        dispatcher.register(ShowingPrompt, fail)
        request = factory.create_custom_request(ShowingPrompt(which="topLevel"))

        response = dispatcher.respond(request, factory)

        assert response["success"] is False
        assert response["message"] == "no terminal attached"
        assert response["body"]["error"] == "ConfigurationError"

    def test_events_and_unknown_reasons_are_not_answered(self, dispatcher) -> None:
        factory = ProtocolFactory()
        event = factory.create_custom_event(ViewHelp(request_path="/doc"))
        unknown = factory.create_request("custom", {"reason": "refreshView"})

        assert dispatcher.respond(event, factory) is None
        assert dispatcher.respond(unknown, factory) is None
