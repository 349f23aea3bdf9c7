"""Main GUI window for Doubles Rota."""

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


from typing import Optional

from PyQt6 import QtCore, QtGui, QtWidgets
from PyQt6.QtCore import Qt
from PyQt6.QtGui import QAction

from doublesrota import APP_NAME, APP_VERSION
from doublesrota.controllers.session import SessionController
from doublesrota.exceptions import DoublesRotaException, FileSaveException
from doublesrota.gui.dialogs import SettingsDialog
from doublesrota.gui.views import PlayersView, RoundsView
from doublesrota.utils import setup_logger

logger = setup_logger(__name__)


# --- Main Application Window ---
class DoublesRotaMainWindow(QtWidgets.QMainWindow):
    """Main application window for Doubles Rota."""

    def __init__(self, controller: SessionController) -> None:
        super().__init__()
        self.controller = controller
        self._setup_ui()
        self.players_tab.set_controller(controller)
        self.rounds_tab.set_controller(controller)
        self._update_ui_state()

    def _setup_ui(self):
        self.setWindowTitle(APP_NAME)
        self.setGeometry(100, 100, 900, 700)
        self.central_widget = QtWidgets.QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QtWidgets.QVBoxLayout(self.central_widget)
        self._setup_main_panel()
        self._setup_menu()
        self._setup_toolbar()
        self.statusBar().showMessage("Ready - mark who is here, then generate a round.")
        logger.info("%s v%s started.", APP_NAME, APP_VERSION)

    def _setup_main_panel(self):
        self.tabs = QtWidgets.QTabWidget()
        self.main_layout.addWidget(self.tabs)

        self.players_tab = PlayersView(self)
        self.rounds_tab = RoundsView(self)
        self.players_tab.status_message.connect(self.statusBar().showMessage)
        self.players_tab.roster_changed.connect(self._update_ui_state)

        self.tabs.addTab(self.players_tab, "Players")
        self.tabs.addTab(self.rounds_tab, "Rounds")

    def _setup_menu(self):
        menu_bar = self.menuBar()

        # --- File Menu ---
        file_menu = menu_bar.addMenu("&File")
        self.new_day_action = self._create_action(
            "&New Day...", self.prompt_new_day, "Ctrl+N", "Clear rounds and counters"
        )
        self.settings_action = self._create_action(
            "S&ettings...", self.show_settings_dialog, "Ctrl+,", "Session settings"
        )
        self.exit_action = self._create_action("E&xit", self.close, "Ctrl+Q")
        file_menu.addAction(self.new_day_action)
        file_menu.addAction(self.settings_action)
        file_menu.addSeparator()
        file_menu.addAction(self.exit_action)

        # --- Round Menu ---
        round_menu = menu_bar.addMenu("&Round")
        self.generate_action = self._create_action(
            "&Generate Round",
            self.generate_round,
            "Ctrl+G",
            "Pick sit-outs, courts and pairs for the next round",
        )
        round_menu.addAction(self.generate_action)

        # --- Help Menu ---
        help_menu = menu_bar.addMenu("&Help")
        help_menu.addAction(
            self._create_action("&About...", self.show_about_dialog)
        )

    def _create_action(
        self, text: str, slot: callable, shortcut: str = "", tooltip: str = ""
    ) -> QAction:
        """Create and configure a QAction.

        Arguments
        ---------
            text: The text to display for the action.
            slot: The function to call when the action is triggered.
            shortcut: Optional keyboard shortcut (e.g., "Ctrl+G").
            tooltip: Optional tooltip to show on hover.
        """
        action = QAction(text, self)
        action.triggered.connect(slot)
        if shortcut:
            action.setShortcut(QtGui.QKeySequence(shortcut))
        if tooltip:
            action.setToolTip(tooltip)
            action.setStatusTip(tooltip)
        action.setIconVisibleInMenu(False)
        return action

    def _setup_toolbar(self) -> None:
        toolbar = self.addToolBar("Main Toolbar")
        toolbar.setObjectName("MainToolbar")
        toolbar.setMovable(False)
        toolbar.setContextMenuPolicy(Qt.ContextMenuPolicy.PreventContextMenu)
        toolbar.setIconSize(QtCore.QSize(18, 18))

        self.generate_action.setIcon(QtGui.QIcon.fromTheme("media-playback-start"))
        self.new_day_action.setIcon(QtGui.QIcon.fromTheme("document-new"))
        toolbar.addAction(self.generate_action)
        toolbar.addSeparator()
        toolbar.addAction(self.new_day_action)
        toolbar.addAction(self.settings_action)

        self.toolbar_info_label = QtWidgets.QLabel()
        self.toolbar_info_label.setContentsMargins(8, 0, 8, 0)
        toolbar.addSeparator()
        toolbar.addWidget(self.toolbar_info_label)

    def _update_ui_state(self):
        """Refresh the toolbar summary and the Generate Round action."""
        present = len(self.controller.state.present_players())
        next_round = self.controller.state.next_round_number
        self.generate_action.setEnabled(present >= 4)
        self.toolbar_info_label.setText(
            f"{present} present  |  next: Round {next_round}"
        )

    def generate_round(self) -> None:
        try:
            round_data = self.controller.generate_round()
        except FileSaveException as e:
            # the round is in memory, show it anyway
            QtWidgets.QMessageBox.warning(self, "Generate Round", str(e))
            self._show_new_round()
            self.statusBar().showMessage(str(e))
            return
        except DoublesRotaException as e:
            logger.warning("Round generation failed: %s", e)
            QtWidgets.QMessageBox.warning(self, "Generate Round", str(e))
            self.statusBar().showMessage(str(e))
            return
        self._show_new_round()
        self.statusBar().showMessage(
            f"Round {round_data.round_number} generated: "
            f"{len(round_data.courts)} courts, {len(round_data.sit_out)} sitting out."
        )

    def _show_new_round(self) -> None:
        self.players_tab.refresh_player_list()
        self.rounds_tab.refresh_rounds()
        self.tabs.setCurrentWidget(self.rounds_tab)
        self._update_ui_state()

    def prompt_new_day(self) -> None:
        reply = QtWidgets.QMessageBox.question(
            self,
            "New Day",
            "Start a new day? All rounds and games/sits counters will be cleared. "
            "Players and settings are kept.",
            QtWidgets.QMessageBox.StandardButton.Yes
            | QtWidgets.QMessageBox.StandardButton.No,
            QtWidgets.QMessageBox.StandardButton.No,
        )
        if reply != QtWidgets.QMessageBox.StandardButton.Yes:
            return
        self.controller.new_day()
        self.players_tab.refresh_player_list()
        self.rounds_tab.refresh_rounds()
        self.statusBar().showMessage("New day started.")
        self._update_ui_state()

    def show_settings_dialog(self) -> bool:
        dialog = SettingsDialog(self.controller.state.config, self)
        if not dialog.exec():
            return False
        pairing, skill, uniqueness, focus = dialog.get_settings()
        try:
            self.controller.set_pairing_mode(pairing)
            self.controller.set_skill_mode(skill)
            self.controller.set_uniqueness_importance(uniqueness)
            self.controller.set_rotation_focus(focus)
        except DoublesRotaException as e:
            QtWidgets.QMessageBox.critical(self, "Settings", str(e))
            return False
        self.statusBar().showMessage("Settings updated.")
        return True

    def show_about_dialog(self):
        QtWidgets.QMessageBox.about(
            self,
            f"About {APP_NAME}",
            f"{APP_NAME} v{APP_VERSION}\n\n"
            "Fair sit-outs, courts and partners for social doubles sessions.",
        )
