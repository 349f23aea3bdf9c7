"""Doubles Rota entry point."""

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


import platform
import sys

from PyQt6 import QtWidgets

from doublesrota import APP_NAME
from doublesrota.controllers.session import SessionController
from doublesrota.gui.mainwindow import DoublesRotaMainWindow
from doublesrota.storage import JsonStateStore
from doublesrota.utils import setup_logger

logger = setup_logger(__name__)


def main():
    """Entry point."""
    exit_code = run_app()
    logger.info("run_app() exited with code: %s", exit_code)
    sys.exit(exit_code)


def run_app() -> int:
    """Run the gui application.

    Returns
    -------
    int
        the exit code from app.exec()
    """
    app = QtWidgets.QApplication(sys.argv)
    app.setApplicationName(APP_NAME)

    system = platform.system()
    if system == "Windows":
        app.setStyle("WindowsVista")
    elif system == "Darwin":
        app.setStyle("macos")
    else:
        app.setStyle("fusion")

    store = JsonStateStore()
    logger.info("Session file: %s", store.path)
    controller = SessionController(store=store)

    window = DoublesRotaMainWindow(controller)
    window.show()
    return app.exec()


if __name__ == "__main__":
    main()
