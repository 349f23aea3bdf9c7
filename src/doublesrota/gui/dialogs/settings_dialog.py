"""Settings dialog for the scheduling dials."""

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

from typing import Tuple

from PyQt6 import QtWidgets

from doublesrota.constants import (
    PAIRING_MODE_NAMES,
    ROTATION_FOCUS_NAMES,
    SKILL_MODE_NAMES,
    UNIQUENESS_NAMES,
)
from doublesrota.models.session_config import SessionConfig


def _fill_combo(combo: QtWidgets.QComboBox, names: dict, current) -> None:
    for value, label in names.items():
        combo.addItem(label, value)
    index = combo.findData(current)
    combo.setCurrentIndex(max(index, 0))


class SettingsDialog(QtWidgets.QDialog):
    def __init__(self, config: SessionConfig, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Session Settings")
        self.setMinimumWidth(350)
        layout = QtWidgets.QVBoxLayout(self)

        courts_group = QtWidgets.QGroupBox("Courts")
        courts_layout = QtWidgets.QFormLayout(courts_group)
        self.pairing_combo = QtWidgets.QComboBox()
        _fill_combo(self.pairing_combo, PAIRING_MODE_NAMES, config.pairing_mode)
        self.pairing_combo.setToolTip(
            "Gender make-up preferred when grouping players onto courts."
        )
        courts_layout.addRow("Pairing mode:", self.pairing_combo)
        self.skill_combo = QtWidgets.QComboBox()
        _fill_combo(self.skill_combo, SKILL_MODE_NAMES, config.skill_mode)
        self.skill_combo.setToolTip(
            "Cluster similar skill on a court, or leave courts unconstrained."
        )
        courts_layout.addRow("Skill mode:", self.skill_combo)
        self.uniqueness_combo = QtWidgets.QComboBox()
        _fill_combo(
            self.uniqueness_combo, UNIQUENESS_NAMES, config.uniqueness_importance
        )
        self.uniqueness_combo.setToolTip(
            "How strongly fresh combinations outrank gender and skill preferences."
        )
        courts_layout.addRow("Variety importance:", self.uniqueness_combo)
        layout.addWidget(courts_group)

        pairs_group = QtWidgets.QGroupBox("Pairs")
        pairs_layout = QtWidgets.QFormLayout(pairs_group)
        self.focus_combo = QtWidgets.QComboBox()
        _fill_combo(self.focus_combo, ROTATION_FOCUS_NAMES, config.rotation_focus)
        self.focus_combo.setToolTip(
            "Skill first only balances team skill; Variety also avoids repeat partners."
        )
        pairs_layout.addRow("Rotation focus:", self.focus_combo)
        layout.addWidget(pairs_group)

        self.buttons = QtWidgets.QDialogButtonBox(
            QtWidgets.QDialogButtonBox.StandardButton.Ok
            | QtWidgets.QDialogButtonBox.StandardButton.Cancel
        )
        self.buttons.accepted.connect(self.accept)
        self.buttons.rejected.connect(self.reject)
        layout.addWidget(self.buttons)

    def get_settings(self) -> Tuple[str, str, int, str]:
        return (
            self.pairing_combo.currentData(),
            self.skill_combo.currentData(),
            self.uniqueness_combo.currentData(),
            self.focus_combo.currentData(),
        )
