"""A player on the club roster."""

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

import math
from dataclasses import dataclass
from typing import Any, Dict, Optional

from doublesrota.constants import DEFAULT_SKILL, GENDER_OTHER
from doublesrota.type_hints import Gender
from doublesrota.utils.validation import normalize_gender, validate_skill


def _as_count(value: Any) -> int:
    """Return a non-negative integer counter, 0 for anything unusable."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    if not math.isfinite(value):
        return 0
    return max(0, int(value))


def _as_flag(value: Any) -> bool:
    return value if isinstance(value, bool) else False


@dataclass
class Player:
    """
    A person on the roster who can be scheduled onto a court.

    Attributes
    ----------
    id : int
        Unique identifier, assigned at creation and never reused.
    name : str
        Display name.
    gender : str
        ``"M"``, ``"F"`` or ``"O"``.
    skill : int
        Skill level from 1 to 10.
    is_present : bool
        Whether the player is available for the next round.
    happy_to_sit : bool
        Whether the player volunteers to sit out.
    games_played : int
        Rounds played today.
    sits : int
        Rounds sat out today.
    is_archived : bool
        Soft-deleted. Archived players are never selected but stay
        resolvable for old rounds.

    Notes
    -----
    An archived player is never present; this is enforced on construction
    and by :meth:`archive`.
    """

    id: int
    name: str
    gender: Gender = GENDER_OTHER
    skill: int = DEFAULT_SKILL
    is_present: bool = False
    happy_to_sit: bool = False
    games_played: int = 0
    sits: int = 0
    is_archived: bool = False

    def __post_init__(self) -> None:
        if self.is_archived:
            self.is_present = False

    @property
    def is_available(self) -> bool:
        """Present and not archived."""
        return self.is_present and not self.is_archived

    def archive(self) -> None:
        """Soft-delete the player."""
        self.is_archived = True
        self.is_present = False

    def reset_day(self) -> None:
        """Clear the per-day counters and presence."""
        self.games_played = 0
        self.sits = 0
        self.is_present = False

    def to_dict(self) -> Dict[str, Any]:
        """Serialize player to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "gender": self.gender,
            "skill": self.skill,
            "isPresent": self.is_present,
            "happyToSit": self.happy_to_sit,
            "gamesPlayed": self.games_played,
            "sits": self.sits,
            "isArchived": self.is_archived,
        }

    @classmethod
    def from_dict(
        cls, data: Dict[str, Any], fallback_id: Optional[int] = None
    ) -> "Player":
        """Deserialize a player, backfilling any missing or broken field."""
        raw_id = data.get("id")
        if isinstance(raw_id, bool) or not isinstance(raw_id, (int, float, str)):
            raw_id = fallback_id
        try:
            player_id = int(raw_id)
        except (TypeError, ValueError, OverflowError):
            player_id = fallback_id
        skill = validate_skill(data.get("skill"))
        return cls(
            id=player_id,
            name=str(data.get("name") or "").strip() or "Unnamed",
            gender=normalize_gender(data.get("gender")),
            skill=skill.sanitized_value if skill else DEFAULT_SKILL,
            is_present=_as_flag(data.get("isPresent")),
            happy_to_sit=_as_flag(data.get("happyToSit")),
            games_played=_as_count(data.get("gamesPlayed")),
            sits=_as_count(data.get("sits")),
            is_archived=_as_flag(data.get("isArchived")),
        )
