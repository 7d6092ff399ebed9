"""
Debug configuration shapes and the R-specific extensions of the DAP
``initialize``/``continue`` messages.

These are the loosely typed wire shapes; the strict, validated variants a
session actually runs with live in :mod:`rdebugger.config.strict`.
"""

from __future__ import annotations

from typing import Any
from typing import Literal
from typing import TypedDict

from typing_extensions import NotRequired  # noqa: TC002

DebugMode = Literal["function", "file", "workspace"]
RequestKind = Literal["launch", "attach"]


class DebugConfiguration(TypedDict, total=False):
    """A ``launch.json`` entry of type ``R-Debugger``.

    Every key is optional on the wire; which ones are required depends on
    ``request`` and ``debugMode`` and is checked during resolution.
    """

    type: str
    request: str
    name: str

    # how/where to debug
    debugMode: str
    workingDirectory: str
    file: str
    mainFunction: str
    commandLineArgs: list[str]

    # how to debug
    includePackageScopes: bool
    setBreakpointsInPackages: bool
    debuggedPackages: list[str]
    loadPackages: list[str]
    assignToAns: bool
    allowGlobalDebugging: bool

    overwritePrint: bool
    overwriteCat: bool
    overwriteMessage: bool
    overwriteStr: bool
    overwriteSource: bool
    overwriteLoadAll: bool
    overwriteHelp: bool
    splitOverwrittenOutput: bool

    # custom events/requests/capabilities
    supportsWriteToStdinEvent: bool
    supportsShowingPromptRequest: bool
    supportsStdoutReading: bool
    supportsHelpViewer: bool
    ignoreFlowControl: bool

    useCustomSocket: bool
    customPort: int
    customHost: str

    # attach only
    port: int
    host: str


class RStartupArguments(TypedDict):
    """Everything needed to start the R process outside of the DAP."""

    path: str
    args: list[str]
    jsonPort: NotRequired[int]
    sinkPort: NotRequired[int]
    cwd: str


class RStrings(TypedDict, total=False):
    """Strings the R side uses to recognise its own output."""

    prompt: str
    continue_: str
    startup: str
    libraryNotFound: str
    packageName: str


class InitializeRequestArguments(TypedDict, total=False):
    """R-specific additions to the ``initialize`` request arguments."""

    clientID: str
    clientName: str
    adapterID: str
    locale: str
    linesStartAt1: bool
    columnsStartAt1: bool
    pathFormat: Literal["path", "uri"]

    rStrings: RStrings
    threadId: int
    useJsonSocket: bool
    jsonPort: int
    jsonHost: str
    useSinkSocket: bool
    sinkPort: int
    sinkHost: str
    extensionVersion: str


class PackageInfo(TypedDict):
    Package: str
    Version: str


class InitializeResponse(TypedDict):
    seq: int
    type: Literal["response"]
    request_seq: int
    success: bool
    command: Literal["initialize"]
    body: NotRequired[dict[str, Any]]
    packageInfo: NotRequired[PackageInfo]


class ContinueArguments(TypedDict):
    threadId: int
    callDebugSource: NotRequired[bool]
    source: NotRequired[dict[str, Any]]


def to_wire_rstrings(strings: RStrings) -> dict[str, Any]:
    """Convert :class:`RStrings` to its wire form.

    ``continue`` is a Python keyword, so the TypedDict stores it as
    ``continue_``.
    """
    wire = dict(strings)
    if "continue_" in wire:
        wire["continue"] = wire.pop("continue_")
    return wire
