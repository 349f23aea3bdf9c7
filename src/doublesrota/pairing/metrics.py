"""Pool and quartet metrics scored by the sit-out selector and court grouper.

Every metric is a "badness": lower is better and 0 is ideal.
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

from statistics import pvariance
from typing import Dict, Sequence, Tuple

from doublesrota.constants import (
    GENDER_FEMALE,
    GENDER_MALE,
    GENDER_OTHER,
    METRIC_PAIRING,
    METRIC_SKILL,
    METRIC_UNIQUENESS,
    PAIRING_MIXED,
    PAIRING_SAME_GENDER,
    PLAYERS_PER_COURT,
    SKILL_SAME,
)
from doublesrota.models.player import Player
from doublesrota.pairing.history import sum_pair_counts
from doublesrota.type_hints import MetricTuple, PairCounts


def gender_counts(players: Sequence[Player]) -> Tuple[int, int, int]:
    """Return (males, females, others)."""
    males = sum(1 for p in players if p.gender == GENDER_MALE)
    females = sum(1 for p in players if p.gender == GENDER_FEMALE)
    return males, females, len(players) - males - females


def order_metrics(metrics: Dict[str, float], priority: Sequence[str]) -> MetricTuple:
    """Arrange named metrics into a tuple following ``priority``."""
    return tuple(metrics[key] for key in priority)


# ========== Pool metrics ==========


def pool_pairing_badness(players: Sequence[Player], pairing_mode: str) -> int:
    """How many courts of the pool cannot match the gender preference.

    Same-gender mode counts the courts that cannot be single-gender, mixed
    mode the courts that cannot be two men and two women.
    """
    num_courts = len(players) // PLAYERS_PER_COURT
    males, females, others = gender_counts(players)
    if pairing_mode == PAIRING_SAME_GENDER:
        pure = males // 4 + females // 4 + others // 4
        return max(0, num_courts - pure)
    if pairing_mode == PAIRING_MIXED:
        return max(0, num_courts - min(males // 2, females // 2))
    return 0


def pool_skill_badness(players: Sequence[Player], skill_mode: str) -> float:
    """Population variance of skill, only under same-skill mode."""
    if skill_mode != SKILL_SAME or len(players) < 2:
        return 0.0
    return float(pvariance([p.skill for p in players]))


def pool_uniqueness_badness(players: Sequence[Player], counts: PairCounts) -> int:
    """Total co-court history within the pool; lower means fresher combinations."""
    return sum_pair_counts([p.id for p in players], counts)


def pool_metrics(
    players: Sequence[Player],
    pairing_mode: str,
    skill_mode: str,
    counts: PairCounts,
) -> Dict[str, float]:
    return {
        METRIC_PAIRING: pool_pairing_badness(players, pairing_mode),
        METRIC_SKILL: pool_skill_badness(players, skill_mode),
        METRIC_UNIQUENESS: pool_uniqueness_badness(players, counts),
    }


# ========== Quartet metrics ==========


def quartet_pairing_badness(quartet: Sequence[Player], pairing_mode: str) -> int:
    """Gender badness of one court.

    Same-gender: 0 when all four share a gender, else 1.
    Mixed: 0 for two men and two women, 1 for a 3-1 split, 2 for 4-0.
    Random: always 0.
    """
    if pairing_mode == PAIRING_SAME_GENDER:
        return 0 if len({p.gender for p in quartet}) == 1 else 1
    if pairing_mode == PAIRING_MIXED:
        males, females, _ = gender_counts(quartet)
        return (abs(males - 2) + abs(females - 2) + 1) // 2
    return 0


def quartet_skill_badness(quartet: Sequence[Player], skill_mode: str) -> int:
    """Skill spread on the court under same-skill mode, else 0."""
    if skill_mode != SKILL_SAME:
        return 0
    skills = [p.skill for p in quartet]
    return max(skills) - min(skills)


def quartet_metrics(
    quartet: Sequence[Player],
    pairing_mode: str,
    skill_mode: str,
    counts: PairCounts,
) -> Dict[str, float]:
    return {
        METRIC_PAIRING: quartet_pairing_badness(quartet, pairing_mode),
        METRIC_SKILL: quartet_skill_badness(quartet, skill_mode),
        METRIC_UNIQUENESS: sum_pair_counts([p.id for p in quartet], counts),
    }


def describe_genders(players: Sequence[Player]) -> str:
    """Short gender split such as ``2M/2F`` or ``3M/1O``."""
    males, females, others = gender_counts(players)
    parts = []
    for count, code in (
        (males, GENDER_MALE),
        (females, GENDER_FEMALE),
        (others, GENDER_OTHER),
    ):
        if count:
            parts.append(f"{count}{code}")
    return "/".join(parts)
