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

from PyQt6 import QtCore, QtWidgets
from PyQt6.QtCore import Qt, pyqtSignal

from doublesrota.constants import (
    DEFAULT_SKILL,
    GENDER_NAMES,
    MAX_SKILL,
    MIN_SKILL,
)
from doublesrota.controllers.session import SessionController
from doublesrota.exceptions import DoublesRotaException

COL_NAME, COL_GENDER, COL_SKILL, COL_PRESENT, COL_HAPPY, COL_GAMES, COL_SITS = range(7)
HEADERS = ["Name", "Gender", "Skill", "Present", "Happy to sit", "Played", "Sat out"]


class NumericTableWidgetItem(QtWidgets.QTableWidgetItem):
    """Custom QTableWidgetItem for numerical sorting."""

    def __lt__(self, other):
        try:
            return float(self.text()) < float(other.text())
        except (ValueError, TypeError):
            return super().__lt__(other)


class PlayersView(QtWidgets.QWidget):
    status_message = pyqtSignal(str)
    roster_changed = pyqtSignal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self.controller: Optional[SessionController] = None
        self._refreshing = False
        self.main_layout = QtWidgets.QVBoxLayout(self)

        # --- Add player form ---
        add_group = QtWidgets.QGroupBox("Add Player")
        add_layout = QtWidgets.QHBoxLayout(add_group)
        self.input_name = QtWidgets.QLineEdit()
        self.input_name.setPlaceholderText("Name")
        self.combo_gender = QtWidgets.QComboBox()
        for code, label in GENDER_NAMES.items():
            self.combo_gender.addItem(label, code)
        self.spin_skill = QtWidgets.QSpinBox()
        self.spin_skill.setRange(MIN_SKILL, MAX_SKILL)
        self.spin_skill.setValue(DEFAULT_SKILL)
        self.spin_skill.setToolTip(f"Skill from {MIN_SKILL} to {MAX_SKILL}")
        self.btn_add = QtWidgets.QPushButton("Add")
        self.btn_add.clicked.connect(self.add_player)
        self.input_name.returnPressed.connect(self.add_player)
        add_layout.addWidget(self.input_name, stretch=1)
        add_layout.addWidget(self.combo_gender)
        add_layout.addWidget(QtWidgets.QLabel("Skill:"))
        add_layout.addWidget(self.spin_skill)
        add_layout.addWidget(self.btn_add)
        self.main_layout.addWidget(add_group)

        # --- Player Table ---
        self.table_players = QtWidgets.QTableWidget()
        self.table_players.setColumnCount(len(HEADERS))
        self.table_players.setHorizontalHeaderLabels(HEADERS)
        self.table_players.setToolTip("Right-click a player to remove them.")
        self.table_players.setContextMenuPolicy(
            QtCore.Qt.ContextMenuPolicy.CustomContextMenu
        )
        self.table_players.customContextMenuRequested.connect(
            self.on_player_context_menu
        )
        self.table_players.setAlternatingRowColors(True)
        self.table_players.setSelectionBehavior(
            QtWidgets.QAbstractItemView.SelectionBehavior.SelectRows
        )
        self.table_players.setEditTriggers(
            QtWidgets.QAbstractItemView.EditTrigger.NoEditTriggers
        )
        header = self.table_players.horizontalHeader()
        header.setSectionResizeMode(
            COL_NAME, QtWidgets.QHeaderView.ResizeMode.Stretch
        )
        self.table_players.itemChanged.connect(self._on_item_changed)
        self.main_layout.addWidget(self.table_players)

    def set_controller(self, controller: SessionController) -> None:
        self.controller = controller
        self.refresh_player_list()

    def refresh_player_list(self) -> None:
        """Rebuild the table from the roster (archived players hidden)."""
        self._refreshing = True
        self.table_players.setSortingEnabled(False)
        self.table_players.setRowCount(0)
        players = self.controller.get_player_list() if self.controller else []
        for row, player in enumerate(players):
            self.table_players.insertRow(row)
            name_item = QtWidgets.QTableWidgetItem(player.name)
            name_item.setData(Qt.ItemDataRole.UserRole, player.id)
            self.table_players.setItem(row, COL_NAME, name_item)
            self.table_players.setItem(
                row, COL_GENDER, QtWidgets.QTableWidgetItem(player.gender)
            )
            self.table_players.setItem(
                row, COL_SKILL, NumericTableWidgetItem(str(player.skill))
            )
            for col, checked in (
                (COL_PRESENT, player.is_present),
                (COL_HAPPY, player.happy_to_sit),
            ):
                item = QtWidgets.QTableWidgetItem()
                item.setFlags(
                    Qt.ItemFlag.ItemIsUserCheckable | Qt.ItemFlag.ItemIsEnabled
                )
                item.setCheckState(
                    Qt.CheckState.Checked if checked else Qt.CheckState.Unchecked
                )
                self.table_players.setItem(row, col, item)
            self.table_players.setItem(
                row, COL_GAMES, NumericTableWidgetItem(str(player.games_played))
            )
            self.table_players.setItem(
                row, COL_SITS, NumericTableWidgetItem(str(player.sits))
            )
        self.table_players.setSortingEnabled(True)
        self._refreshing = False
        present = sum(1 for p in players if p.is_present)
        self.status_message.emit(f"{len(players)} players, {present} present")

    def _player_id_at(self, row: int) -> Optional[int]:
        item = self.table_players.item(row, COL_NAME)
        return item.data(Qt.ItemDataRole.UserRole) if item else None

    def _on_item_changed(self, item: QtWidgets.QTableWidgetItem) -> None:
        if self._refreshing or not self.controller:
            return
        if item.column() not in (COL_PRESENT, COL_HAPPY):
            return
        player_id = self._player_id_at(item.row())
        if player_id is None:
            return
        checked = item.checkState() == Qt.CheckState.Checked
        try:
            if item.column() == COL_PRESENT:
                self.controller.set_present(player_id, checked)
            else:
                self.controller.set_happy_to_sit(player_id, checked)
        except DoublesRotaException as e:
            self.status_message.emit(str(e))
        self.roster_changed.emit()

    def add_player(self) -> None:
        if not self.controller:
            return
        try:
            player = self.controller.add_player(
                self.input_name.text(),
                self.combo_gender.currentData(),
                self.spin_skill.value(),
            )
        except DoublesRotaException as e:
            QtWidgets.QMessageBox.warning(self, "Add Player", str(e))
            return
        self.input_name.clear()
        self.spin_skill.setValue(DEFAULT_SKILL)
        self.refresh_player_list()
        self.status_message.emit(f"Added {player.name}")
        self.roster_changed.emit()

    def on_player_context_menu(self, point: QtCore.QPoint) -> None:
        row = self.table_players.rowAt(point.y())
        if row < 0 or not self.controller:
            return
        player_id = self._player_id_at(row)
        player = self.controller.state.get_player(player_id)
        if player is None:
            return

        menu = QtWidgets.QMenu(self)
        remove_action = menu.addAction("Remove Player")
        action = menu.exec(self.table_players.mapToGlobal(point))
        if action != remove_action:
            return
        response = QtWidgets.QMessageBox.question(
            self,
            "Remove Player",
            f'Remove player "{player.name}"? They will be removed from the list '
            "but kept in old rounds.",
        )
        if response != QtWidgets.QMessageBox.StandardButton.Yes:
            return
        self.controller.archive_player(player.id)
        self.refresh_player_list()
        self.status_message.emit(f"Removed {player.name}")
        self.roster_changed.emit()
