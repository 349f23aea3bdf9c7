"""The whole persisted document: roster, rounds and configuration."""

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
from typing import Any, Dict, List, Optional

from doublesrota.models.player import Player
from doublesrota.models.round_data import RoundData
from doublesrota.models.session_config import SessionConfig
from doublesrota.utils import setup_logger

logger = setup_logger(__name__)


@dataclass
class SessionState:
    """Explicit state value threaded through round generation.

    Attributes
    ----------
    players : list of Player
        Every player ever added, archived ones included.
    rounds : list of RoundData
        Round log in creation order.
    config : SessionConfig
        Scheduling preferences.
    next_player_id : int
        Id handed to the next added player.
    next_round_number : int
        Number handed to the next generated round.
    """

    players: List[Player] = field(default_factory=list)
    rounds: List[RoundData] = field(default_factory=list)
    config: SessionConfig = field(default_factory=SessionConfig)
    next_player_id: int = 1
    next_round_number: int = 1

    def get_player(self, player_id: int) -> Optional[Player]:
        """Find a player by id, archived players included."""
        for player in self.players:
            if player.id == player_id:
                return player
        return None

    @property
    def players_by_id(self) -> Dict[int, Player]:
        return {p.id: p for p in self.players}

    def roster(self) -> List[Player]:
        """Non-archived players sorted by name."""
        return sorted(
            (p for p in self.players if not p.is_archived),
            key=lambda p: (p.name.lower(), p.id),
        )

    def present_players(self) -> List[Player]:
        """Present, non-archived players in roster order."""
        return [p for p in self.players if p.is_available]

    @property
    def last_round(self) -> Optional[RoundData]:
        return self.rounds[-1] if self.rounds else None

    def last_sit_out_ids(self) -> List[int]:
        """Who sat out in the immediately preceding round."""
        last = self.last_round
        return list(last.sit_out) if last else []

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the whole document."""
        return {
            "players": [p.to_dict() for p in self.players],
            "rounds": [r.to_dict() for r in self.rounds],
            "nextPlayerId": self.next_player_id,
            "nextRoundNumber": self.next_round_number,
            **self.config.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SessionState":
        """Deserialize the document, backfilling anything missing.

        Raises
        ------
        ValueError
            If ``players`` is not a list; callers fall back to a default state.
        """
        raw_players = data.get("players")
        if not isinstance(raw_players, list):
            raise ValueError("Saved state has no player list")

        players: List[Player] = [
            Player.from_dict(raw) for raw in raw_players if isinstance(raw, dict)
        ]
        max_id = max((p.id for p in players if p.id is not None), default=0)
        # players saved without an id get fresh ones
        for player in players:
            if player.id is None:
                max_id += 1
                player.id = max_id

        raw_rounds = data.get("rounds")
        rounds: List[RoundData] = []
        for raw_round in raw_rounds if isinstance(raw_rounds, list) else []:
            if not isinstance(raw_round, dict):
                continue
            try:
                rounds.append(RoundData.from_dict(raw_round))
            except ValueError as e:
                logger.warning("Skipping unreadable round: %s", e)

        next_player_id = data.get("nextPlayerId")
        if isinstance(next_player_id, bool) or not isinstance(next_player_id, int):
            next_player_id = max_id + 1
        next_round_number = data.get("nextRoundNumber")
        if isinstance(next_round_number, bool) or not isinstance(
            next_round_number, int
        ):
            next_round_number = len(rounds) + 1

        return cls(
            players=players,
            rounds=rounds,
            config=SessionConfig.from_dict(data),
            next_player_id=max(next_player_id, max_id + 1),
            next_round_number=next_round_number,
        )
