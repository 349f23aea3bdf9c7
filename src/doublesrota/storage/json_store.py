"""Load-whole / save-whole JSON persistence of the session state."""

# Doubles Rota
# Copyright (C) 2025  Doubles Rota developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import json
import os
from pathlib import Path
from typing import Optional, Union

from PyQt6 import QtCore

from doublesrota.constants import SAVE_FILE_NAME, STATE_PATH_ENV_VAR
from doublesrota.exceptions import FileSaveException
from doublesrota.models.session_state import SessionState
from doublesrota.utils import setup_logger

logger = setup_logger(__name__)


def default_state_path() -> Path:
    """Where the session document lives unless told otherwise.

    ``DOUBLES_ROTA_STATE`` overrides the Qt application data location.
    """
    override = os.environ.get(STATE_PATH_ENV_VAR)
    if override:
        return Path(override)
    folder = QtCore.QStandardPaths.writableLocation(
        QtCore.QStandardPaths.StandardLocation.AppDataLocation
    )
    if not folder:
        folder = QtCore.QStandardPaths.writableLocation(
            QtCore.QStandardPaths.StandardLocation.HomeLocation
        )
    return Path(folder) / SAVE_FILE_NAME


class JsonStateStore:
    """Single-writer JSON store; last write wins."""

    def __init__(self, path: Optional[Union[str, Path]] = None):
        self.path = Path(path) if path is not None else default_state_path()

    def load(self) -> SessionState:
        """Load the saved state, falling back to a fresh one.

        A missing file, unreadable JSON or a document without a player list
        all yield the default state; every missing field is backfilled.
        """
        if not self.path.exists():
            logger.info("No saved state at %s, starting fresh", self.path)
            return SessionState()
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.error("Error loading state from %s: %s", self.path, e)
            return SessionState()
        if not isinstance(data, dict):
            logger.error("Saved state in %s is not an object", self.path)
            return SessionState()
        try:
            return SessionState.from_dict(data)
        except (KeyError, TypeError, ValueError, OverflowError) as e:
            logger.error("Saved state in %s is malformed: %s", self.path, e)
            return SessionState()

    def save(self, state: SessionState) -> None:
        """Write the whole document.

        Raises:
            FileSaveException: If the file cannot be written
        """
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(state.to_dict(), f, indent=2)
        except OSError as e:
            logger.exception("Error saving state:")
            raise FileSaveException(f"Could not save state to {self.path}: {e}") from e
