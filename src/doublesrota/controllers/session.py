"""Session controller - the single entry point for roster, settings and rounds.

The presentation layer sends every user event through this class. Each
successful mutation is followed by a save of the whole state.
"""

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

import random
from typing import Any, List, Optional

from doublesrota.controllers.round_assembler import RoundAssembler
from doublesrota.exceptions import FileSaveException, PlayerNotFoundException
from doublesrota.models.player import Player
from doublesrota.models.round_data import RoundData
from doublesrota.models.session_state import SessionState
from doublesrota.utils import setup_logger
from doublesrota.utils.validation import (
    validate_pairing_mode,
    validate_player_fields,
    validate_rotation_focus,
    validate_skill_mode,
    validate_strict,
    validate_uniqueness_importance,
)

logger = setup_logger(__name__)


class SessionController:
    """Coordinates the session state, the round assembler and the store.

    Args
    ----
    store: Object with ``load()`` and ``save(state)``; None keeps the
        session in memory only
    state: Starting state; loaded from ``store`` when omitted
    rng: Random source handed to the round assembler
    """

    def __init__(
        self,
        store=None,
        state: Optional[SessionState] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.store = store
        if state is None:
            state = store.load() if store is not None else SessionState()
        self.state = state
        self.assembler = RoundAssembler(rng=rng)

    def _save(self) -> None:
        if self.store is not None:
            self.store.save(self.state)

    def _require_player(self, player_id: int) -> Player:
        player = self.state.get_player(player_id)
        if player is None:
            raise PlayerNotFoundException(f"No player with id {player_id}")
        return player

    # ========== Players ==========

    def get_player_list(self, include_archived: bool = False) -> List[Player]:
        """Players sorted by name, archived ones only on request."""
        if include_archived:
            return sorted(self.state.players, key=lambda p: (p.name.lower(), p.id))
        return self.state.roster()

    def add_player(self, name: str, gender: Optional[str], skill: Any) -> Player:
        """Add a new player to the roster.

        Raises:
            InvalidPlayerDataException: Empty name or skill outside 1-10
        """
        clean_name, clean_gender, clean_skill = validate_player_fields(
            name, gender, skill
        )
        player = Player(
            id=self.state.next_player_id,
            name=clean_name,
            gender=clean_gender,
            skill=clean_skill,
        )
        self.state.next_player_id += 1
        self.state.players.append(player)
        self._save()
        logger.info("Added player %s (id %d)", player.name, player.id)
        return player

    def set_present(self, player_id: int, is_present: bool) -> bool:
        """Mark a player present or absent.

        Returns:
            False if the player is archived and cannot be made present
        """
        player = self._require_player(player_id)
        if player.is_archived and is_present:
            logger.warning("Cannot mark archived player %s present", player.name)
            return False
        player.is_present = bool(is_present)
        self._save()
        return True

    def set_happy_to_sit(self, player_id: int, happy: bool) -> bool:
        player = self._require_player(player_id)
        player.happy_to_sit = bool(happy)
        self._save()
        return True

    def archive_player(self, player_id: int) -> bool:
        """Soft-delete a player; old rounds keep showing them."""
        player = self._require_player(player_id)
        if player.is_archived:
            return False
        player.archive()
        self._save()
        logger.info("Archived player %s", player.name)
        return True

    # ========== Configuration ==========

    def set_pairing_mode(self, mode: str) -> None:
        """Raises InvalidConfigurationException for unknown modes."""
        self.state.config.pairing_mode = validate_strict(validate_pairing_mode(mode))
        self._save()

    def set_skill_mode(self, mode: str) -> None:
        self.state.config.skill_mode = validate_strict(validate_skill_mode(mode))
        self._save()

    def set_uniqueness_importance(self, level: Any) -> None:
        self.state.config.uniqueness_importance = validate_strict(
            validate_uniqueness_importance(level)
        )
        self._save()

    def set_rotation_focus(self, focus: str) -> None:
        self.state.config.rotation_focus = validate_strict(
            validate_rotation_focus(focus)
        )
        self._save()

    # ========== Rounds ==========

    def generate_round(self) -> RoundData:
        """Generate, commit and save the next round.

        Raises:
            RoundGenerationException: Nothing was changed
            FileSaveException: The round was committed in memory but the
                save failed
        """
        round_data = self.assembler.generate_round(self.state)
        try:
            self._save()
        except FileSaveException as e:
            raise FileSaveException(
                f"Round {round_data.round_number} was generated but not saved: {e}"
            ) from e
        return round_data

    def new_day(self) -> None:
        """Clear all rounds and per-day counters, keeping roster and settings."""
        self.state.rounds = []
        self.state.next_round_number = 1
        for player in self.state.players:
            player.reset_day()
        self._save()
        logger.info("Started a new day")

    def rounds_newest_first(self) -> List[RoundData]:
        return list(reversed(self.state.rounds))

    def player_name(self, player_id: int) -> str:
        player = self.state.get_player(player_id)
        return player.name if player else "?"

    def round_lines(self, round_data: RoundData) -> List[str]:
        """Display lines for a round, one per court plus the sit-outs."""
        lines = []
        for court in round_data.courts:
            (a, b), (c, d) = court.pairs
            lines.append(
                f"Court {court.court_number}: "
                f"{self.player_name(a)} & {self.player_name(b)}  vs  "
                f"{self.player_name(c)} & {self.player_name(d)}"
            )
        if round_data.sit_out:
            names = ", ".join(self.player_name(pid) for pid in round_data.sit_out)
            lines.append(f"Sitting out: {names}")
        return lines
