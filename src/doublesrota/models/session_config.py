"""SessionConfig data class."""

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

from dataclasses import dataclass
from typing import Any, Dict, Tuple

from doublesrota.constants import (
    DEFAULT_PAIRING_MODE,
    DEFAULT_ROTATION_FOCUS,
    DEFAULT_SKILL_MODE,
    DEFAULT_UNIQUENESS_IMPORTANCE,
    PRIORITY_ORDERS,
    ROTATION_FOCUS_WEIGHTS,
)
from doublesrota.type_hints import (
    PairingMode,
    RotationFocus,
    SkillMode,
    UniquenessImportance,
)
from doublesrota.utils.validation import (
    validate_pairing_mode,
    validate_rotation_focus,
    validate_skill_mode,
    validate_uniqueness_importance,
)


@dataclass
class SessionConfig:
    """Scheduling preferences that persist across rounds.

    Attributes
    ----------
    pairing_mode : str
        Gender composition preference: "same-gender", "mixed" or "random".
    skill_mode : str
        "same-skill" clusters similar levels on a court, "balanced" does not.
    uniqueness_importance : int
        1 (low) to 3 (high); reorders the tie-break priority of the
        pairing, skill and uniqueness metrics.
    rotation_focus : str
        How pairs are chosen inside a court: "skill-first", "balanced" or
        "variety".
    """

    pairing_mode: PairingMode = DEFAULT_PAIRING_MODE
    skill_mode: SkillMode = DEFAULT_SKILL_MODE
    uniqueness_importance: UniquenessImportance = DEFAULT_UNIQUENESS_IMPORTANCE
    rotation_focus: RotationFocus = DEFAULT_ROTATION_FOCUS

    @property
    def priority_order(self) -> Tuple[str, str, str]:
        """Metric keys in tie-break priority order."""
        return PRIORITY_ORDERS.get(
            self.uniqueness_importance, PRIORITY_ORDERS[DEFAULT_UNIQUENESS_IMPORTANCE]
        )

    @property
    def pair_weights(self) -> Tuple[int, int, int]:
        """Weights of (skill gap, repeat partners, gender pattern)."""
        return ROTATION_FOCUS_WEIGHTS.get(
            self.rotation_focus, ROTATION_FOCUS_WEIGHTS[DEFAULT_ROTATION_FOCUS]
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        return {
            "pairingMode": self.pairing_mode,
            "skillMode": self.skill_mode,
            "uniquenessImportance": self.uniqueness_importance,
            "rotationFocus": self.rotation_focus,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SessionConfig":
        """Deserialize configuration, mapping legacy values to canonical ones."""
        pairing = validate_pairing_mode(data.get("pairingMode"))
        skill = validate_skill_mode(data.get("skillMode"))
        uniqueness = validate_uniqueness_importance(data.get("uniquenessImportance"))
        focus = validate_rotation_focus(data.get("rotationFocus"))
        return cls(
            pairing_mode=pairing.sanitized_value if pairing else DEFAULT_PAIRING_MODE,
            skill_mode=skill.sanitized_value if skill else DEFAULT_SKILL_MODE,
            uniqueness_importance=(
                uniqueness.sanitized_value
                if uniqueness
                else DEFAULT_UNIQUENESS_IMPORTANCE
            ),
            rotation_focus=focus.sanitized_value if focus else DEFAULT_ROTATION_FOCUS,
        )
