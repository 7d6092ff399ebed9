"""Base protocol message shapes built and parsed by the ProtocolHandler."""

from __future__ import annotations

from typing import Any
from typing import Literal
from typing import TypedDict

from typing_extensions import NotRequired  # noqa: TC002


class GenericRequest(TypedDict):
    seq: int
    type: Literal["request"]
    command: str
    arguments: NotRequired[Any]


class GenericResponse(TypedDict):
    seq: int
    type: Literal["response"]
    request_seq: int
    success: bool
    command: str
    message: NotRequired[str]
    body: NotRequired[Any]


class GenericEvent(TypedDict):
    seq: int
    type: Literal["event"]
    event: str
    body: NotRequired[Any]


class ErrorResponse(GenericResponse):
    """Failed response; ``body`` holds ``error``, ``message`` and ``details``."""

    body: dict[str, Any]
