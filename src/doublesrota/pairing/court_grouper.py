"""Court grouping: partition the players who will play into quartets."""

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
from itertools import combinations
from typing import List, Optional, Sequence, Tuple

from doublesrota.constants import PLAYERS_PER_COURT, SKILL_SAME
from doublesrota.models.player import Player
from doublesrota.models.session_config import SessionConfig
from doublesrota.pairing.history import repeated_pairs
from doublesrota.pairing.metrics import (
    describe_genders,
    order_metrics,
    quartet_metrics,
)
from doublesrota.type_hints import PairCounts
from doublesrota.utils import setup_logger

logger = setup_logger(__name__)


def _seed_order(
    players: Sequence[Player], skill_mode: str, rng: random.Random
) -> List[Player]:
    """Initial ordering of the pool.

    The quartet search below is exhaustive and its tie-break does not depend
    on order, so this ordering never changes the result.
    """
    if skill_mode == SKILL_SAME:
        return sorted(players, key=lambda p: (-p.skill, p.id))
    seeded = list(players)
    rng.shuffle(seeded)
    return seeded


def _quartet_key(
    quartet: Sequence[Player], config: SessionConfig, counts: PairCounts
) -> Tuple:
    metrics = quartet_metrics(quartet, config.pairing_mode, config.skill_mode, counts)
    ids = sorted(p.id for p in quartet)
    return (*order_metrics(metrics, config.priority_order), sum(ids), tuple(ids))


def best_quartet(
    remaining: Sequence[Player], config: SessionConfig, counts: PairCounts
) -> Tuple[Player, ...]:
    """Return the 4-subset of ``remaining`` with the smallest ranking tuple."""
    return min(
        combinations(remaining, PLAYERS_PER_COURT),
        key=lambda quartet: _quartet_key(quartet, config, counts),
    )


def group_courts(
    players: Sequence[Player],
    config: SessionConfig,
    counts: PairCounts,
    rng: Optional[random.Random] = None,
) -> List[List[Player]]:
    """Greedily split ``players`` into courts of four.

    Parameters
    ----------
    players : sequence of Player
        Everyone who will play; a multiple of four.
    config : SessionConfig
        Pairing mode, skill mode and priority dial.
    counts : dict
        Co-court counts from the round log.
    rng : random.Random, optional
        Source for the seed ordering.

    Returns
    -------
    list of list of Player
        Quartets in court order, each sorted by player id.
    """
    rng = rng or random.Random()
    num_courts = len(players) // PLAYERS_PER_COURT
    remaining = _seed_order(players, config.skill_mode, rng)
    quartets: List[List[Player]] = []

    for _ in range(num_courts):
        if len(remaining) < PLAYERS_PER_COURT:
            break
        quartet = best_quartet(remaining, config, counts)
        chosen = {p.id for p in quartet}
        quartets.append(sorted(quartet, key=lambda p: p.id))
        remaining = [p for p in remaining if p.id not in chosen]

    if remaining:
        logger.warning(
            "%d players left ungrouped: %s",
            len(remaining),
            [p.name for p in remaining],
        )
    return quartets


def court_rationale(
    quartet: Sequence[Player], config: SessionConfig, counts: PairCounts
) -> str:
    """Display text explaining a chosen court."""
    skills = [p.skill for p in quartet]
    repeats = len(repeated_pairs([p.id for p in quartet], counts))
    parts = [
        describe_genders(quartet),
        f"skill {min(skills)}-{max(skills)}",
        "all fresh pairings" if repeats == 0 else f"{repeats} repeat pairings",
    ]
    return ", ".join(parts)
