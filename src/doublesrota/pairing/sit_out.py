"""Sit-out selection.

Chooses which present players sit out this round. Candidates are ranked by a
per-player fairness cost; every subset of the required size is then scored by
``(fairness, m1, m2, m3, alpha_key)`` where ``m1..m3`` are the pool metrics of
the players who would play, ordered by the uniqueness-importance dial.
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

from dataclasses import dataclass, field
from itertools import combinations
from typing import Collection, Dict, List, Optional, Sequence, Tuple

from doublesrota.constants import (
    BACK_TO_BACK_SIT_PENALTY,
    BOOTSTRAP_SIT_WEIGHT,
    CANDIDATE_POOL_CAP,
    GAME_LAG_THRESHOLD,
    GAME_LAG_WEIGHT,
    HAPPY_TO_SIT_BONUS,
    SIT_RATE_WEIGHT,
)
from doublesrota.models.player import Player
from doublesrota.models.session_config import SessionConfig
from doublesrota.pairing.metrics import order_metrics, pool_metrics
from doublesrota.type_hints import PairCounts
from doublesrota.utils import setup_logger

logger = setup_logger(__name__)

# Fairness sums are rounded so equal shares compare equal
_FAIRNESS_PRECISION = 9


@dataclass
class FairnessCost:
    """Fairness cost of one player and the parts it is made of."""

    total: float
    reasons: List[str] = field(default_factory=list)

    def describe(self) -> str:
        return "; ".join(self.reasons) if self.reasons else "even share"


@dataclass
class SitOutDecision:
    """Outcome of sit-out selection.

    Attributes
    ----------
    sitters : list of Player
        Players sitting out, sorted by name.
    rationale : dict of int to str
        Display text per sitter id.
    score : tuple or None
        The winning ``(fairness, m1, m2, m3, alpha_key, ids)`` tuple, None for
        trivial decisions.
    """

    sitters: List[Player] = field(default_factory=list)
    rationale: Dict[int, str] = field(default_factory=dict)
    score: Optional[Tuple] = None

    @property
    def sitter_ids(self) -> List[int]:
        return [p.id for p in self.sitters]


def cap_candidate_pool(
    present: Sequence[Player], cap: int = CANDIDATE_POOL_CAP
) -> Tuple[List[Player], List[Player]]:
    """Limit the candidate pool to ``cap`` players.

    Players who most need a game are kept: fewest games, then most sits,
    then name and id.

    Returns
    -------
    tuple of (list of Player, list of Player)
        The pool and the players left out by the cap.
    """
    if len(present) <= cap:
        return list(present), []
    ranked = sorted(present, key=lambda p: (p.games_played, -p.sits, p.name, p.id))
    return ranked[:cap], ranked[cap:]


def average_sit_rate(pool: Sequence[Player]) -> float:
    """Sits per game across the pool, 0 before anyone has played."""
    total_games = sum(p.games_played for p in pool)
    if total_games == 0:
        return 0.0
    return sum(p.sits for p in pool) / total_games


def fairness_cost(
    player: Player,
    avg_sit_rate: float,
    max_games: int,
    sat_last_round: bool,
) -> FairnessCost:
    """Score how much a player deserves to sit now; lower sits first."""
    cost = FairnessCost(total=0.0)
    if player.games_played > 0 and avg_sit_rate > 0:
        expected = player.games_played * avg_sit_rate
        cost.total += (player.sits - expected) * SIT_RATE_WEIGHT
        cost.reasons.append(f"sat {player.sits}, expected {expected:.1f}")
    else:
        cost.total += player.sits * BOOTSTRAP_SIT_WEIGHT
        if player.sits:
            cost.reasons.append(f"sat {player.sits} so far")

    if sat_last_round:
        cost.total += BACK_TO_BACK_SIT_PENALTY
        cost.reasons.append(f"sat last round (+{BACK_TO_BACK_SIT_PENALTY})")
    if player.happy_to_sit:
        cost.total -= HAPPY_TO_SIT_BONUS
        cost.reasons.append(f"happy to sit (-{HAPPY_TO_SIT_BONUS})")

    lag = max_games - player.games_played
    if lag >= GAME_LAG_THRESHOLD:
        cost.total += GAME_LAG_WEIGHT * lag
        cost.reasons.append(f"{lag} games behind (+{GAME_LAG_WEIGHT * lag})")
    return cost


def fairness_costs(
    pool: Sequence[Player], last_sit_ids: Collection[int] = ()
) -> Dict[int, FairnessCost]:
    """Fairness cost for every player in the pool, keyed by id."""
    avg_rate = average_sit_rate(pool)
    max_games = max((p.games_played for p in pool), default=0)
    last_sit = set(last_sit_ids)
    return {
        p.id: fairness_cost(p, avg_rate, max_games, p.id in last_sit) for p in pool
    }


def select_sit_outs(
    pool: Sequence[Player],
    num_sit: int,
    config: SessionConfig,
    counts: PairCounts,
    last_sit_ids: Collection[int] = (),
) -> SitOutDecision:
    """Choose ``num_sit`` players to sit out.

    Parameters
    ----------
    pool : sequence of Player
        Present, non-archived candidates, already capped.
    num_sit : int
        How many must sit.
    config : SessionConfig
        Pairing mode, skill mode and priority dial.
    counts : dict
        Co-court counts from the round log.
    last_sit_ids : collection of int
        Who sat out in the previous round.

    Returns
    -------
    SitOutDecision
        The sitters with display rationale.
    """
    if num_sit <= 0:
        return SitOutDecision()
    if num_sit >= len(pool):
        sitters = sorted(pool, key=lambda p: (p.name, p.id))
        return SitOutDecision(
            sitters=sitters,
            rationale={p.id: "not enough players for a court" for p in sitters},
        )

    candidates = sorted(pool, key=lambda p: p.id)
    costs = fairness_costs(candidates, last_sit_ids)
    priority = config.priority_order

    best_key: Optional[Tuple] = None
    best_combo: Optional[Tuple[Player, ...]] = None
    for combo in combinations(candidates, num_sit):
        sit_ids = {p.id for p in combo}
        players = [p for p in candidates if p.id not in sit_ids]
        fairness = round(sum(costs[p.id].total for p in combo), _FAIRNESS_PRECISION)
        metrics = order_metrics(
            pool_metrics(players, config.pairing_mode, config.skill_mode, counts),
            priority,
        )
        alpha_key = "".join(sorted(p.name for p in combo))
        key = (fairness, *metrics, alpha_key, tuple(sorted(sit_ids)))
        if best_key is None or key < best_key:
            best_key = key
            best_combo = combo

    sitters = sorted(best_combo, key=lambda p: (p.name, p.id))
    logger.debug("Sit-out choice %s scored %s", [p.name for p in sitters], best_key)
    return SitOutDecision(
        sitters=sitters,
        rationale={p.id: costs[p.id].describe() for p in sitters},
        score=best_key,
    )
