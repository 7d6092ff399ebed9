"""
Constants used throughout the R debugger integration.

This module contains constants to avoid magic values in the codebase.
"""
from typing import Final

# Debug configuration identity
DEBUGGER_TYPE: Final[str] = "R-Debugger"
REQUEST_LAUNCH: Final[str] = "launch"
REQUEST_ATTACH: Final[str] = "attach"

# Custom protocol messages
CUSTOM_EVENT: Final[str] = "custom"
CUSTOM_COMMAND: Final[str] = "custom"

# Network Constants
DEFAULT_ATTACH_PORT: Final[int] = 18721
DEFAULT_HOST: Final[str] = "localhost"

# Launch defaults
DEFAULT_MAIN_FUNCTION: Final[str] = "main"
DEFAULT_STDIN_COUNT: Final[int] = 1
DEFAULT_R_PATH: Final[str] = "R"

# Substitution placeholders resolved by the host
WORKSPACE_FOLDER_PLACEHOLDER: Final[str] = "${workspaceFolder}"
FILE_DIRNAME_PLACEHOLDER: Final[str] = "${fileDirname}"
FILE_PLACEHOLDER: Final[str] = "${file}"
CURRENT_DIRECTORY: Final[str] = "."

# Package projects are recognised by this manifest at the workspace root
PACKAGE_DESCRIPTOR: Final[str] = "DESCRIPTION"
FILE_SCHEME: Final[str] = "file"

# Persistent host state
IGNORE_DEPRECATED_CONFIG_KEY: Final[str] = "ignoreDeprecatedConfig"
