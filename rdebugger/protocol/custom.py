"""Custom messages riding on top of the Debug Adapter Protocol.

Events sent by the adapter use ``event: "custom"`` and requests sent by the
host use ``command: "custom"``; the ``reason`` key of the body/arguments
selects the actual message. Each reason is modelled as a frozen dataclass,
and :func:`decode_custom_message` maps a raw frame onto the closed set of
variants. Reasons this module does not know about decode to ``None`` so
that newer peers never break older ones.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING
from typing import Any
from typing import ClassVar
from typing import Literal
from typing import TypedDict
from typing import Union

from typing_extensions import NotRequired  # noqa: TC002

from rdebugger.constants import CUSTOM_COMMAND
from rdebugger.constants import CUSTOM_EVENT
from rdebugger.constants import DEFAULT_STDIN_COUNT
from rdebugger.errors import ProtocolError

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)

StdinWhen = Literal["now", "browserPrompt", "topLevelPrompt", "prompt"]
PromptKind = Literal["browser", "topLevel"]

STDIN_WHEN_VALUES: frozenset[str] = frozenset(("now", "browserPrompt", "topLevelPrompt", "prompt"))
PROMPT_KINDS: frozenset[str] = frozenset(("browser", "topLevel"))


# ---------------------------------------------------------------------------
# Wire shapes
# ---------------------------------------------------------------------------


class CustomEventBody(TypedDict):
    reason: str


class CustomEvent(TypedDict):
    """Event used to send information to the host that is not part of the DAP."""

    seq: int
    type: Literal["event"]
    event: Literal["custom"]
    body: CustomEventBody


class CustomRequestArguments(TypedDict):
    reason: str


class CustomRequest(TypedDict):
    """Request used to send information to R that is not part of the DAP."""

    seq: int
    type: Literal["request"]
    command: Literal["custom"]
    arguments: CustomRequestArguments


class ViewHelpBody(TypedDict):
    reason: Literal["viewHelp"]
    requestPath: str


class WriteToStdinBody(TypedDict):
    reason: Literal["writeToStdin"]
    text: str
    when: NotRequired[StdinWhen]
    fallBackToNow: NotRequired[bool]
    addNewLine: NotRequired[bool]
    count: NotRequired[int]
    stack: NotRequired[bool]
    terminalId: NotRequired[str]
    useActiveTerminal: NotRequired[bool]
    pid: NotRequired[int]
    ppid: NotRequired[int]


class ShowingPromptArguments(TypedDict):
    reason: Literal["showingPrompt"]
    which: NotRequired[PromptKind]
    text: NotRequired[str]


class ShowDataViewerArguments(TypedDict):
    reason: Literal["showDataViewer"]
    variablesReference: int
    name: str


# ---------------------------------------------------------------------------
# Payload helpers
# ---------------------------------------------------------------------------


def _check_type(value: Any, expected: type) -> bool:
    # bool is a subclass of int but never a valid number on the wire
    if isinstance(value, bool) and expected is not bool:
        return False
    return isinstance(value, expected)


def _required(payload: Mapping[str, Any], key: str, expected: type, reason: str) -> Any:
    if key not in payload or not _check_type(payload[key], expected):
        msg = f"Custom message '{reason}' requires '{key}' of type {expected.__name__}"
        raise ProtocolError(msg, reason=reason, details={"key": key})
    return payload[key]


def _optional(payload: Mapping[str, Any], key: str, expected: type, reason: str) -> Any:
    value = payload.get(key)
    if value is None:
        return None
    if not _check_type(value, expected):
        msg = f"Custom message '{reason}' has invalid '{key}': {value!r}"
        raise ProtocolError(msg, reason=reason, details={"key": key})
    return value


def _drop_none(body: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in body.items() if value is not None}


# ---------------------------------------------------------------------------
# Variants
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ViewHelp:
    """Adapter asks the host to open a help topic."""

    reason: ClassVar[str] = "viewHelp"
    kind: ClassVar[str] = "event"

    request_path: str

    def to_body(self) -> ViewHelpBody:
        return {"reason": "viewHelp", "requestPath": self.request_path}

    @classmethod
    def from_body(cls, body: Mapping[str, Any]) -> ViewHelp:
        return cls(request_path=_required(body, "requestPath", str, cls.reason))


@dataclass(frozen=True)
class WriteToStdin:
    """Adapter asks the host to type text into R's stdin.

    The terminal fields identify which terminal/process should receive the
    text when more than one R session is running.
    """

    reason: ClassVar[str] = "writeToStdin"
    kind: ClassVar[str] = "event"

    text: str
    when: str | None = None
    fall_back_to_now: bool | None = None
    add_new_line: bool | None = None
    count: int = DEFAULT_STDIN_COUNT
    stack: bool | None = None
    terminal_id: str | None = None
    use_active_terminal: bool | None = None
    pid: int | None = None
    ppid: int | None = None

    def __post_init__(self) -> None:
        if self.when is not None and self.when not in STDIN_WHEN_VALUES:
            msg = f"Invalid 'when' for writeToStdin: {self.when!r}"
            raise ProtocolError(msg, reason=self.reason, details={"key": "when"})

    def to_body(self) -> WriteToStdinBody:
        body = _drop_none({
            "reason": "writeToStdin",
            "text": self.text,
            "when": self.when,
            "fallBackToNow": self.fall_back_to_now,
            "addNewLine": self.add_new_line,
            "count": self.count,
            "stack": self.stack,
            "terminalId": self.terminal_id,
            "useActiveTerminal": self.use_active_terminal,
            "pid": self.pid,
            "ppid": self.ppid,
        })
        return body  # type: ignore[return-value]

    @classmethod
    def from_body(cls, body: Mapping[str, Any]) -> WriteToStdin:
        reason = cls.reason
        count = _optional(body, "count", int, reason)
        return cls(
            text=_required(body, "text", str, reason),
            when=_optional(body, "when", str, reason),
            fall_back_to_now=_optional(body, "fallBackToNow", bool, reason),
            add_new_line=_optional(body, "addNewLine", bool, reason),
            count=DEFAULT_STDIN_COUNT if count is None else count,
            stack=_optional(body, "stack", bool, reason),
            terminal_id=_optional(body, "terminalId", str, reason),
            use_active_terminal=_optional(body, "useActiveTerminal", bool, reason),
            pid=_optional(body, "pid", int, reason),
            ppid=_optional(body, "ppid", int, reason),
        )


@dataclass(frozen=True)
class ShowingPrompt:
    """Host tells R which prompt is currently shown in its stdout."""

    reason: ClassVar[str] = "showingPrompt"
    kind: ClassVar[str] = "request"

    which: str | None = None
    text: str | None = None

    def __post_init__(self) -> None:
        if self.which is not None and self.which not in PROMPT_KINDS:
            msg = f"Invalid 'which' for showingPrompt: {self.which!r}"
            raise ProtocolError(msg, reason=self.reason, details={"key": "which"})

    def to_body(self) -> ShowingPromptArguments:
        return _drop_none({"reason": "showingPrompt", "which": self.which, "text": self.text})  # type: ignore[return-value]

    @classmethod
    def from_body(cls, body: Mapping[str, Any]) -> ShowingPrompt:
        return cls(
            which=_optional(body, "which", str, cls.reason),
            text=_optional(body, "text", str, cls.reason),
        )


@dataclass(frozen=True)
class ShowDataViewer:
    """Host asks R to open the data viewer for a variable."""

    reason: ClassVar[str] = "showDataViewer"
    kind: ClassVar[str] = "request"

    # The reference of the variable container.
    variables_reference: int
    # The name of the variable in the container.
    name: str

    def to_body(self) -> ShowDataViewerArguments:
        return {
            "reason": "showDataViewer",
            "variablesReference": self.variables_reference,
            "name": self.name,
        }

    @classmethod
    def from_body(cls, body: Mapping[str, Any]) -> ShowDataViewer:
        return cls(
            variables_reference=_required(body, "variablesReference", int, cls.reason),
            name=_required(body, "name", str, cls.reason),
        )


CustomEventMessage = Union[ViewHelp, WriteToStdin]
CustomRequestMessage = Union[ShowingPrompt, ShowDataViewer]
CustomMessage = Union[ViewHelp, WriteToStdin, ShowingPrompt, ShowDataViewer]

EVENT_VARIANTS: dict[str, type[CustomEventMessage]] = {
    ViewHelp.reason: ViewHelp,
    WriteToStdin.reason: WriteToStdin,
}
REQUEST_VARIANTS: dict[str, type[CustomRequestMessage]] = {
    ShowingPrompt.reason: ShowingPrompt,
    ShowDataViewer.reason: ShowDataViewer,
}


def is_custom_message(message: Mapping[str, Any]) -> bool:
    """Return True for frames using the custom event/command sentinel."""
    msg_type = message.get("type")
    if msg_type == "event":
        return message.get("event") == CUSTOM_EVENT
    if msg_type == "request":
        return message.get("command") == CUSTOM_COMMAND
    return False


def decode_custom_message(message: Mapping[str, Any]) -> CustomMessage | None:
    """Decode a raw protocol frame into a custom message variant.

    Returns ``None`` for standard protocol traffic and for custom messages
    whose ``reason`` is not known for their direction.

    Raises:
        ProtocolError: If the payload of a known reason is malformed.
    """
    if not is_custom_message(message):
        return None

    if message["type"] == "event":
        payload = message.get("body")
        variants: Mapping[str, type[CustomMessage]] = EVENT_VARIANTS
    else:
        payload = message.get("arguments")
        variants = REQUEST_VARIANTS

    if not isinstance(payload, dict):
        raise ProtocolError("Custom message has no payload", command=CUSTOM_COMMAND)

    reason = payload.get("reason")
    if not isinstance(reason, str):
        raise ProtocolError("Custom message is missing 'reason'", command=CUSTOM_COMMAND)

    variant = variants.get(reason)
    if variant is None:
        logger.debug("Ignoring custom %s with unknown reason %r", message["type"], reason)
        return None
    return variant.from_body(payload)
