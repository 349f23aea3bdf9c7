"""Data model for a generated round."""

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

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

from dateutil import parser as date_parser

from doublesrota.constants import PLAYERS_PER_COURT
from doublesrota.utils import setup_logger

logger = setup_logger(__name__)


def _parse_timestamp(value: Any) -> Optional[datetime]:
    """Parse an ISO 8601 timestamp, returning None for anything unusable."""
    if not value or not isinstance(value, str):
        return None
    try:
        return date_parser.isoparse(value)
    except (ValueError, OverflowError):
        return None


def _as_id(value: Any) -> int:
    """Return a saved integer id or number.

    Raises:
        ValueError: For booleans, non-integral or non-finite numbers and
            anything that is not an int or a numeric string
    """
    if isinstance(value, bool):
        raise ValueError(f"Not an id: {value!r}")
    if isinstance(value, float) and not value.is_integer():
        raise ValueError(f"Not an id: {value!r}")
    if not isinstance(value, (int, float, str)):
        raise ValueError(f"Not an id: {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        raise ValueError(f"Not an id: {value!r}") from None


def _as_id_list(value: Any) -> List[int]:
    """Convert a saved list of ids, raising ValueError if any is unusable."""
    if not isinstance(value, list):
        raise ValueError(f"Not a list of ids: {value!r}")
    return [_as_id(pid) for pid in value]


@dataclass
class Court:
    """One court of a round.

    Attributes
    ----------
    court_number : int
        Court number (1-indexed), unique within the round.
    players : list of int
        The four player ids on the court.
    pairs : list of tuple of int
        The two teams, each a pair of player ids.
    rationale : str or None
        Why this group was chosen, for display only.
    """

    court_number: int
    players: List[int]
    pairs: List[Tuple[int, int]]
    rationale: Optional[str] = None

    def is_valid_partition(self) -> bool:
        """Check the court holds four distinct players split into two pairs."""
        if len(self.players) != PLAYERS_PER_COURT or len(set(self.players)) != 4:
            return False
        if len(self.pairs) != 2 or any(len(pair) != 2 for pair in self.pairs):
            return False
        flat = [pid for pair in self.pairs for pid in pair]
        return len(set(flat)) == 4 and set(flat) == set(self.players)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize court to dictionary."""
        data = {
            "courtNumber": self.court_number,
            "players": list(self.players),
            "pairs": [list(pair) for pair in self.pairs],
        }
        if self.rationale:
            data["rationale"] = self.rationale
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Court":
        """Deserialize court from dictionary.

        Raises:
            ValueError: If the court, its players or its pairs are unusable
        """
        if not isinstance(data, dict):
            raise ValueError(f"Court is not an object: {data!r}")
        raw_pairs = data.get("pairs")
        if not isinstance(raw_pairs, list) or not all(
            isinstance(pair, list) for pair in raw_pairs
        ):
            raise ValueError(f"Court pairs are not a list of pairs: {raw_pairs!r}")
        rationale = data.get("rationale")
        return cls(
            court_number=_as_id(data.get("courtNumber", 0)),
            players=_as_id_list(data.get("players")),
            pairs=[tuple(_as_id_list(pair)) for pair in raw_pairs],
            rationale=rationale if isinstance(rationale, str) else None,
        )


@dataclass
class RoundData:
    """Container for all data related to a single round.

    Rounds are immutable once committed, apart from the display-only
    rationale text.

    Attributes
    ----------
    round_number : int
        Round number (1-indexed).
    courts : list of Court
        Courts in court-number order.
    sit_out : list of int
        Ids of the players sitting out.
    sit_out_rationale : dict of int to str
        Why each sitter was chosen, for display only.
    created_at : datetime or None
        When the round was generated.
    """

    round_number: int
    courts: List[Court] = field(default_factory=list)
    sit_out: List[int] = field(default_factory=list)
    sit_out_rationale: Dict[int, str] = field(default_factory=dict)
    created_at: Optional[datetime] = None

    @property
    def playing_ids(self) -> List[int]:
        """Ids of everyone on a court, in court order."""
        return [pid for court in self.courts for pid in court.players]

    def to_dict(self) -> Dict[str, Any]:
        """Serialize round data to dictionary."""
        data = {
            "roundNumber": self.round_number,
            "courts": [court.to_dict() for court in self.courts],
            "sitOut": list(self.sit_out),
        }
        if self.sit_out_rationale:
            data["sitOutRationale"] = {
                str(pid): text for pid, text in self.sit_out_rationale.items()
            }
        if self.created_at is not None:
            data["createdAt"] = self.created_at.isoformat()
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RoundData":
        """Deserialize round data from dictionary.

        Courts that cannot be read are dropped, as are unreadable sit-out
        ids and rationale entries.

        Raises:
            ValueError: If the round number is missing or unusable
        """
        courts = []
        raw_courts = data.get("courts")
        for raw_court in raw_courts if isinstance(raw_courts, list) else []:
            try:
                courts.append(Court.from_dict(raw_court))
            except ValueError as e:
                logger.warning("Skipping unreadable court: %s", e)

        raw_sit_out = data.get("sitOut")
        sit_out = []
        for pid in raw_sit_out if isinstance(raw_sit_out, list) else []:
            try:
                sit_out.append(_as_id(pid))
            except ValueError:
                logger.warning("Skipping unreadable sit-out id %r", pid)

        rationale = {}
        raw_rationale = data.get("sitOutRationale")
        if not isinstance(raw_rationale, dict):
            raw_rationale = {}
        for key, text in raw_rationale.items():
            try:
                rationale[_as_id(key)] = str(text)
            except ValueError:
                continue

        return cls(
            round_number=_as_id(data.get("roundNumber")),
            courts=courts,
            sit_out=sit_out,
            sit_out_rationale=rationale,
            created_at=_parse_timestamp(data.get("createdAt")),
        )
