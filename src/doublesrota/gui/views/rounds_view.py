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

from PyQt6 import QtWidgets

from doublesrota.controllers.session import SessionController


class RoundsView(QtWidgets.QWidget):
    """Reverse-chronological round history; hover a line to see why."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.controller: Optional[SessionController] = None
        layout = QtWidgets.QVBoxLayout(self)
        self.tree_rounds = QtWidgets.QTreeWidget()
        self.tree_rounds.setHeaderHidden(True)
        self.tree_rounds.setToolTip("Hover a court or sitter to see why they were chosen.")
        layout.addWidget(self.tree_rounds)
        self.lbl_empty = QtWidgets.QLabel("No rounds generated yet.")
        layout.addWidget(self.lbl_empty)

    def set_controller(self, controller: SessionController) -> None:
        self.controller = controller
        self.refresh_rounds()

    def refresh_rounds(self) -> None:
        self.tree_rounds.clear()
        rounds = self.controller.rounds_newest_first() if self.controller else []
        self.lbl_empty.setVisible(not rounds)
        for index, round_data in enumerate(rounds):
            title = f"Round {round_data.round_number}"
            if round_data.created_at is not None:
                title += f"  ({round_data.created_at:%H:%M})"
            round_item = QtWidgets.QTreeWidgetItem([title])
            lines = self.controller.round_lines(round_data)
            for court, line in zip(round_data.courts, lines):
                court_item = QtWidgets.QTreeWidgetItem([line])
                if court.rationale:
                    court_item.setToolTip(0, court.rationale)
                round_item.addChild(court_item)
            for pid in round_data.sit_out:
                sit_item = QtWidgets.QTreeWidgetItem(
                    [f"Sitting out: {self.controller.player_name(pid)}"]
                )
                reason = round_data.sit_out_rationale.get(pid)
                if reason:
                    sit_item.setToolTip(0, reason)
                round_item.addChild(sit_item)
            self.tree_rounds.addTopLevelItem(round_item)
            # newest round open
            round_item.setExpanded(index == 0)
