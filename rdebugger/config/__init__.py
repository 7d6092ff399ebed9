"""Debug configuration resolution and extension settings."""

from rdebugger.config.catalog import dynamic_templates
from rdebugger.config.catalog import initial_templates
from rdebugger.config.config_manager import SettingsContext
from rdebugger.config.config_manager import get_settings
from rdebugger.config.config_manager import reset_settings
from rdebugger.config.config_manager import set_settings
from rdebugger.config.config_manager import settings_context
from rdebugger.config.config_manager import update_settings
from rdebugger.config.environment import EnvironmentSignals
from rdebugger.config.resolver import DebugConfigurationResolver
from rdebugger.config.settings import ExtensionSettings
from rdebugger.config.strict import Attach
from rdebugger.config.strict import FileLaunch
from rdebugger.config.strict import FunctionLaunch
from rdebugger.config.strict import StrictConfiguration
from rdebugger.config.strict import WorkspaceLaunch

__all__ = [
    "Attach",
    "DebugConfigurationResolver",
    "EnvironmentSignals",
    "ExtensionSettings",
    "FileLaunch",
    "FunctionLaunch",
    "SettingsContext",
    "StrictConfiguration",
    "WorkspaceLaunch",
    "dynamic_templates",
    "get_settings",
    "initial_templates",
    "reset_settings",
    "set_settings",
    "settings_context",
    "update_settings",
]
