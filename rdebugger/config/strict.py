"""Strict, mode-tagged debug configurations.

A strict configuration is the only configuration shape accepted after
resolution. Each variant checks its required fields before an instance is
created, and the wrapped fields are copied into a read-only mapping so the
value cannot change once produced.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING
from typing import Any
from typing import ClassVar
from typing import Union

from rdebugger.constants import DEFAULT_ATTACH_PORT
from rdebugger.constants import DEFAULT_HOST
from rdebugger.constants import REQUEST_ATTACH
from rdebugger.constants import REQUEST_LAUNCH
from rdebugger.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from rdebugger.protocol.configuration import DebugConfiguration


@dataclass(frozen=True)
class StrictConfigurationBase:
    """Common behaviour of all strict configuration variants."""

    tag: ClassVar[str] = ""
    request: ClassVar[str] = ""
    debug_mode: ClassVar[str | None] = None
    required_fields: ClassVar[tuple[str, ...]] = ()

    fields: Mapping[str, Any]

    @classmethod
    def from_mapping(cls, config: Mapping[str, Any]):
        """Validate ``config`` against this variant and wrap a copy of it.

        Raises:
            ConfigurationError: If ``request``/``debugMode`` do not match the
                variant or a required field is missing or empty.
        """
        if config.get("request") != cls.request:
            msg = f"{cls.tag} requires request '{cls.request}'"
            raise ConfigurationError(
                msg, config_key="request", details={"request": config.get("request")}
            )
        if cls.debug_mode is not None and config.get("debugMode") != cls.debug_mode:
            msg = f"{cls.tag} requires debugMode '{cls.debug_mode}'"
            raise ConfigurationError(
                msg, config_key="debugMode", details={"debugMode": config.get("debugMode")}
            )
        for key in cls.required_fields:
            value = config.get(key)
            if not isinstance(value, str) or not value:
                msg = f"{cls.tag} requires '{key}' to be a non-empty string"
                raise ConfigurationError(msg, config_key=key)
        return cls(fields=MappingProxyType(copy.deepcopy(dict(config))))

    def __getitem__(self, key: str) -> Any:
        return self.fields[key]

    def __contains__(self, key: object) -> bool:
        return key in self.fields

    def get(self, key: str, default: Any = None) -> Any:
        return self.fields.get(key, default)

    @property
    def name(self) -> str | None:
        return self.fields.get("name")

    def to_dict(self) -> DebugConfiguration:
        """Return a mutable deep copy in wire form."""
        return copy.deepcopy(dict(self.fields))  # type: ignore[return-value]


@dataclass(frozen=True)
class LaunchConfigurationBase(StrictConfigurationBase):
    request: ClassVar[str] = REQUEST_LAUNCH
    required_fields: ClassVar[tuple[str, ...]] = ("workingDirectory",)

    @property
    def working_directory(self) -> str:
        return self.fields["workingDirectory"]

    @property
    def command_line_args(self) -> list[str]:
        return list(self.fields.get("commandLineArgs") or [])


@dataclass(frozen=True)
class FunctionLaunch(LaunchConfigurationBase):
    """Launch that sources a file and calls one function in it."""

    tag: ClassVar[str] = "FunctionLaunch"
    debug_mode: ClassVar[str | None] = "function"
    required_fields: ClassVar[tuple[str, ...]] = ("workingDirectory", "file", "mainFunction")

    @property
    def file(self) -> str:
        return self.fields["file"]

    @property
    def main_function(self) -> str:
        return self.fields["mainFunction"]


@dataclass(frozen=True)
class FileLaunch(LaunchConfigurationBase):
    """Launch that sources a single file."""

    tag: ClassVar[str] = "FileLaunch"
    debug_mode: ClassVar[str | None] = "file"
    required_fields: ClassVar[tuple[str, ...]] = ("workingDirectory", "file")

    @property
    def file(self) -> str:
        return self.fields["file"]


@dataclass(frozen=True)
class WorkspaceLaunch(LaunchConfigurationBase):
    """Launch an interactive session in a working directory."""

    tag: ClassVar[str] = "WorkspaceLaunch"
    debug_mode: ClassVar[str | None] = "workspace"


@dataclass(frozen=True)
class Attach(StrictConfigurationBase):
    """Attach to an R process that is already running."""

    tag: ClassVar[str] = "Attach"
    request: ClassVar[str] = REQUEST_ATTACH

    @property
    def port(self) -> int:
        return self.fields.get("port") or DEFAULT_ATTACH_PORT

    @property
    def host(self) -> str:
        return self.fields.get("host") or DEFAULT_HOST


StrictConfiguration = Union[FunctionLaunch, FileLaunch, WorkspaceLaunch, Attach]
LaunchConfiguration = Union[FunctionLaunch, FileLaunch, WorkspaceLaunch]

LAUNCH_VARIANTS: dict[str, type[LaunchConfiguration]] = {
    "function": FunctionLaunch,
    "file": FileLaunch,
    "workspace": WorkspaceLaunch,
}
