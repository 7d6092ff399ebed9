"""Snapshot of the host environment used to default debug configurations."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from rdebugger.constants import CURRENT_DIRECTORY
from rdebugger.constants import FILE_DIRNAME_PLACEHOLDER
from rdebugger.constants import FILE_SCHEME
from rdebugger.constants import PACKAGE_DESCRIPTOR
from rdebugger.constants import WORKSPACE_FOLDER_PLACEHOLDER

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EnvironmentSignals:
    """Read-only view of the editor state at resolution time.

    The paths are informational; configurations only ever reference them
    through the host's substitution placeholders.
    """

    has_open_file_document: bool = False
    has_workspace_folder: bool = False
    has_package_descriptor: bool = False
    workspace_folder_path: str | None = None
    active_file_path: str | None = None

    @property
    def working_directory(self) -> str:
        """Placeholder for the directory a session should run in."""
        if self.has_workspace_folder:
            return WORKSPACE_FOLDER_PLACEHOLDER
        if self.has_open_file_document:
            return FILE_DIRNAME_PLACEHOLDER
        return CURRENT_DIRECTORY

    @classmethod
    def collect(
        cls,
        workspace_folder: str | Path | None = None,
        active_file: str | Path | None = None,
        scheme: str = FILE_SCHEME,
    ) -> EnvironmentSignals:
        """Build signals from the host's workspace folder and active editor.

        Only documents backed by the filesystem count as open files, and a
        package project is recognised by a ``DESCRIPTION`` file at the root
        of the workspace folder.
        """
        has_file = active_file is not None and scheme == FILE_SCHEME
        has_description = (
            workspace_folder is not None
            and (Path(workspace_folder) / PACKAGE_DESCRIPTOR).exists()
        )
        signals = cls(
            has_open_file_document=has_file,
            has_workspace_folder=workspace_folder is not None,
            has_package_descriptor=has_description,
            workspace_folder_path=str(workspace_folder) if workspace_folder is not None else None,
            active_file_path=str(active_file) if has_file else None,
        )
        logger.debug("Collected environment signals: %s", signals)
        return signals
