"""Interfaces of the collaborators provided by the editor host.

The debugger core never talks to the editor directly; everything it needs
(help panel, terminal handler, persistent state, cancellation) is passed in
as an object satisfying one of these protocols.
"""

from __future__ import annotations

from typing import Any
from typing import Protocol
from typing import runtime_checkable


@runtime_checkable
class HelpPanel(Protocol):
    """Panel that can display R help topics."""

    def show_help(self, request_path: str) -> None: ...


@runtime_checkable
class TerminalHandler(Protocol):
    """Owner of the local socket R terminals report to."""

    async def acquire_port(self) -> int: ...

    def track_terminals(self) -> None:
        """Start following R terminals opened by the user."""

    @property
    def host(self) -> str: ...


class StateStore(Protocol):
    """Key-value store persisted by the host across sessions."""

    def get(self, key: str, default: Any = None) -> Any: ...

    def update(self, key: str, value: Any) -> None: ...


class CancellationToken(Protocol):
    @property
    def is_cancellation_requested(self) -> bool: ...


class InMemoryStateStore:
    """StateStore that lives as long as the process."""

    def __init__(self, initial: dict[str, Any] | None = None) -> None:
        self._values: dict[str, Any] = dict(initial or {})

    def get(self, key: str, default: Any = None) -> Any:
        return self._values.get(key, default)

    def update(self, key: str, value: Any) -> None:
        self._values[key] = value
