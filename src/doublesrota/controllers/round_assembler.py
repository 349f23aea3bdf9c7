"""Round assembly.

This module runs one round generation end to end: validation, sit-out
selection, court grouping, pairing, counter updates and the commit of the new
round to the session state.
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
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Callable, List, Optional

from doublesrota.constants import COURT_CAP_PLAYERS, PLAYERS_PER_COURT
from doublesrota.exceptions import (
    CourtGroupingException,
    NotEnoughPlayersException,
    RoundInvariantException,
)
from doublesrota.models.player import Player
from doublesrota.models.round_data import Court, RoundData
from doublesrota.models.session_state import SessionState
from doublesrota.pairing import (
    cap_candidate_pool,
    co_court_counts,
    court_rationale,
    group_courts,
    partner_counts,
    select_pairs,
    select_sit_outs,
)
from doublesrota.utils import setup_logger

logger = setup_logger(__name__)


class RoundPhase(Enum):
    """Phases of one round generation."""

    IDLE = "idle"
    VALIDATING = "validating"
    SELECTING_SIT_OUTS = "selecting_sit_outs"
    GROUPING_COURTS = "grouping_courts"
    PAIRING_COURTS = "pairing_courts"
    UPDATING_COUNTERS = "updating_counters"
    COMMITTED = "committed"
    ABORTED = "aborted"


@dataclass
class RoundPlan:
    """A generated round that has not been committed yet.

    Attributes:
        round_data: The round to append
        play_ids: Everyone on a court
        sit_ids: Everyone sitting out
        excluded_ids: Present players left out by the pool cap
    """

    round_data: RoundData
    play_ids: List[int] = field(default_factory=list)
    sit_ids: List[int] = field(default_factory=list)
    excluded_ids: List[int] = field(default_factory=list)


def max_players_in_round(present_count: int) -> int:
    """Largest multiple of four that fits, capped at the court limit."""
    return min(
        (present_count // PLAYERS_PER_COURT) * PLAYERS_PER_COURT, COURT_CAP_PLAYERS
    )


class RoundAssembler:
    """Generates rounds and commits them to a :class:`SessionState`.

    Each component it calls is a pure function of (pool, config, history);
    the state is only mutated in the final commit, so an aborted generation
    leaves it exactly as it was.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        """Initialize the assembler.

        Args:
            rng: Random source for the court seed ordering
            clock: Returns the timestamp stored on new rounds
        """
        self.rng = rng or random.Random()
        self.clock = clock
        self.phase = RoundPhase.IDLE

    def _enter(self, phase: RoundPhase) -> None:
        logger.debug("Round generation: %s -> %s", self.phase.value, phase.value)
        self.phase = phase

    def _abort(self, exc: Exception) -> Exception:
        self._enter(RoundPhase.ABORTED)
        logger.warning("Round generation aborted: %s", exc)
        return exc

    def plan_round(self, state: SessionState) -> RoundPlan:
        """Generate the next round without touching ``state``.

        Raises:
            NotEnoughPlayersException: Fewer than four players are present
            CourtGroupingException: No court could be formed
            RoundInvariantException: The result is not a clean partition
        """
        self._enter(RoundPhase.VALIDATING)
        present = state.present_players()
        if len(present) < PLAYERS_PER_COURT:
            raise self._abort(
                NotEnoughPlayersException(
                    "Need at least 4 players marked as present to create a round."
                )
            )
        max_players = max_players_in_round(len(present))
        if max_players < PLAYERS_PER_COURT:
            raise self._abort(
                NotEnoughPlayersException("Not enough players for a full court.")
            )
        pool, excluded = cap_candidate_pool(present)
        num_sit = len(pool) - max_players
        config = state.config
        counts = co_court_counts(state.rounds)

        self._enter(RoundPhase.SELECTING_SIT_OUTS)
        decision = select_sit_outs(
            pool, num_sit, config, counts, state.last_sit_out_ids()
        )
        sit_ids = set(decision.sitter_ids)
        to_play = [p for p in pool if p.id not in sit_ids]
        if len(to_play) != max_players:
            logger.error(
                "Play pool has %d players, expected %d", len(to_play), max_players
            )
            raise self._abort(
                RoundInvariantException(
                    f"Expected {max_players} players on court but found {len(to_play)}."
                )
            )

        self._enter(RoundPhase.GROUPING_COURTS)
        quartets = group_courts(to_play, config, counts, self.rng)
        if not quartets:
            raise self._abort(
                CourtGroupingException(
                    "Could not form any courts. Check players present."
                )
            )

        self._enter(RoundPhase.PAIRING_COURTS)
        partners = partner_counts(state.rounds)
        courts = []
        for number, quartet in enumerate(quartets, start=1):
            pair1, pair2 = select_pairs(quartet, config, partners)
            courts.append(
                Court(
                    court_number=number,
                    players=[p.id for p in quartet],
                    pairs=[pair1, pair2],
                    rationale=court_rationale(quartet, config, counts),
                )
            )

        round_data = RoundData(
            round_number=state.next_round_number,
            courts=courts,
            sit_out=[p.id for p in decision.sitters],
            sit_out_rationale=dict(decision.rationale),
            created_at=self.clock(),
        )
        plan = RoundPlan(
            round_data=round_data,
            play_ids=round_data.playing_ids,
            sit_ids=list(round_data.sit_out),
            excluded_ids=[p.id for p in excluded],
        )
        self._check_partition(plan, pool)
        return plan

    def _check_partition(self, plan: RoundPlan, pool: List[Player]) -> None:
        """Sit-outs and courts must partition the pool exactly."""
        play, sit = plan.play_ids, plan.sit_ids
        problems = []
        if len(set(play)) != len(play) or len(set(sit)) != len(sit):
            problems.append("a player appears twice")
        if set(play) & set(sit):
            problems.append("a player both plays and sits")
        if set(play) | set(sit) != {p.id for p in pool}:
            problems.append("courts and sit-outs do not cover the pool")
        if not all(c.is_valid_partition() for c in plan.round_data.courts):
            problems.append("a court's pairs do not split its players")
        if problems:
            logger.error("Round partition broken: %s", problems)
            raise self._abort(RoundInvariantException("; ".join(problems)))

    def commit(self, state: SessionState, plan: RoundPlan) -> RoundData:
        """Apply a planned round: update counters and append it to the log."""
        self._enter(RoundPhase.UPDATING_COUNTERS)
        play_ids = set(plan.play_ids)
        sit_ids = set(plan.sit_ids)
        for player in state.present_players():
            if player.id in play_ids:
                player.games_played += 1
            elif player.id in sit_ids:
                player.sits += 1

        self._enter(RoundPhase.COMMITTED)
        state.rounds.append(plan.round_data)
        state.next_round_number = plan.round_data.round_number + 1
        logger.info(
            "Round %d committed: %d courts, %d sitting out, %d left out by cap",
            plan.round_data.round_number,
            len(plan.round_data.courts),
            len(plan.sit_ids),
            len(plan.excluded_ids),
        )
        return plan.round_data

    def generate_round(self, state: SessionState) -> RoundData:
        """Plan and commit the next round.

        Raises:
            RoundGenerationException: The round could not be generated; the
                state is unchanged.
        """
        self.phase = RoundPhase.IDLE
        plan = self.plan_round(state)
        return self.commit(state, plan)
