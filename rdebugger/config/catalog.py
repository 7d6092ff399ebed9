"""Template debug configurations offered to the user.

``initial_templates`` is what gets written into a fresh ``launch.json``;
``dynamic_templates`` is the list offered when starting a session without
one and depends on the current editor state. Both return lists in the order
they should be shown: the most commonly wanted configuration first and the
generic attach template last.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rdebugger.constants import DEBUGGER_TYPE
from rdebugger.constants import DEFAULT_MAIN_FUNCTION
from rdebugger.constants import FILE_PLACEHOLDER
from rdebugger.constants import WORKSPACE_FOLDER_PLACEHOLDER

if TYPE_CHECKING:
    from rdebugger.config.environment import EnvironmentSignals
    from rdebugger.protocol.configuration import DebugConfiguration


def workspace_template(working_directory: str, name: str = "Launch R-Workspace") -> DebugConfiguration:
    return {
        "type": DEBUGGER_TYPE,
        "name": name,
        "request": "launch",
        "debugMode": "workspace",
        "workingDirectory": working_directory,
    }


def file_template(working_directory: str, name: str = "Debug R-File") -> DebugConfiguration:
    return {
        "type": DEBUGGER_TYPE,
        "name": name,
        "request": "launch",
        "debugMode": "file",
        "workingDirectory": working_directory,
        "file": FILE_PLACEHOLDER,
    }


def function_template(working_directory: str) -> DebugConfiguration:
    return {
        "type": DEBUGGER_TYPE,
        "name": "Debug R-Function",
        "request": "launch",
        "debugMode": "function",
        "workingDirectory": working_directory,
        "file": FILE_PLACEHOLDER,
        "mainFunction": DEFAULT_MAIN_FUNCTION,
        "allowGlobalDebugging": False,
    }


def package_template(working_directory: str) -> DebugConfiguration:
    return {
        "type": DEBUGGER_TYPE,
        "name": "Debug R-Package",
        "request": "launch",
        "debugMode": "workspace",
        "workingDirectory": working_directory,
        "includePackageScopes": True,
        "loadPackages": ["."],
    }


def attach_template() -> DebugConfiguration:
    return {
        "type": DEBUGGER_TYPE,
        "name": "Attach to R process",
        "request": "attach",
        "splitOverwrittenOutput": True,
    }


def initial_templates() -> list[DebugConfiguration]:
    """Templates for a new ``launch.json``, independent of the editor state."""
    return [
        workspace_template(WORKSPACE_FOLDER_PLACEHOLDER),
        file_template(WORKSPACE_FOLDER_PLACEHOLDER),
        function_template(WORKSPACE_FOLDER_PLACEHOLDER),
        package_template(WORKSPACE_FOLDER_PLACEHOLDER),
        attach_template(),
    ]


def dynamic_templates(signals: EnvironmentSignals) -> list[DebugConfiguration]:
    """Templates that make sense for the current editor state."""
    wd = signals.working_directory
    configs: list[DebugConfiguration] = []

    workspace = workspace_template(wd)
    workspace["allowGlobalDebugging"] = True
    configs.append(workspace)

    if signals.has_open_file_document:
        debug_file = file_template(wd)
        debug_file["allowGlobalDebugging"] = True
        configs.append(debug_file)
        configs.append(function_template(wd))

    if signals.has_package_descriptor:
        package = package_template(wd)
        package["allowGlobalDebugging"] = True
        configs.append(package)

    configs.append(attach_template())
    return configs
