from __future__ import annotations

import logging

import pytest

from rdebugger.config.config_manager import reset_settings
from rdebugger.config.environment import EnvironmentSignals
from rdebugger.config.resolver import DebugConfigurationResolver

logger = logging.getLogger(__name__)

FALLBACK_PORT = 40123


@pytest.fixture(autouse=True)
def _reset_global_settings():
    yield
    reset_settings()
    # activation applies the configured level to the package loggers
    logging.getLogger("rdebugger").setLevel(logging.NOTSET)


@pytest.fixture
def resolver() -> DebugConfigurationResolver:
    """Resolver with a terminal socket on localhost and a help panel."""
    return DebugConfigurationResolver(FALLBACK_PORT, "localhost", supports_help_viewer=True)


@pytest.fixture
def file_only_signals() -> EnvironmentSignals:
    """A single file is open, no workspace folder."""
    return EnvironmentSignals(has_open_file_document=True, active_file_path="/tmp/script.R")


@pytest.fixture
def workspace_signals() -> EnvironmentSignals:
    """A workspace folder without a package and without an open file."""
    return EnvironmentSignals(has_workspace_folder=True, workspace_folder_path="/work")


@pytest.fixture
def package_signals() -> EnvironmentSignals:
    """An R package workspace with a file open."""
    return EnvironmentSignals(
        has_open_file_document=True,
        has_workspace_folder=True,
        has_package_descriptor=True,
        workspace_folder_path="/work/pkg",
        active_file_path="/work/pkg/R/foo.R",
    )
