"""Pair selection: choose the 2-2 split used on each court."""

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

from typing import Dict, List, Optional, Sequence, Tuple

from doublesrota.constants import (
    GENDER_FEMALE,
    GENDER_MALE,
    PAIRING_MIXED,
    PAIRING_SAME_GENDER,
)
from doublesrota.models.player import Player
from doublesrota.models.session_config import SessionConfig
from doublesrota.pairing.history import pair_count
from doublesrota.pairing.metrics import gender_counts
from doublesrota.type_hints import PairCounts, PairSplit

# Index layout of {AB|CD}, {AC|BD}, {AD|BC}
_SPLITS = (((0, 1), (2, 3)), ((0, 2), (1, 3)), ((0, 3), (1, 2)))


def candidate_splits(quartet: Sequence[Player]) -> List[PairSplit]:
    """The three 2-2 splits of a quartet ordered by player id."""
    ordered = sorted(quartet, key=lambda p: p.id)
    ids = [p.id for p in ordered]
    return [
        ((ids[a], ids[b]), (ids[c], ids[d])) for (a, b), (c, d) in _SPLITS
    ]


def skill_gap(split: PairSplit, by_id: Dict[int, Player]) -> int:
    """Absolute difference between the two teams' summed skill."""
    side1 = sum(by_id[pid].skill for pid in split[0])
    side2 = sum(by_id[pid].skill for pid in split[1])
    return abs(side1 - side2)


def repeat_partners(split: PairSplit, history: PairCounts) -> int:
    """Number of earlier partnerships repeated by this split."""
    return sum(pair_count(history, pair[0], pair[1]) for pair in split)


def gender_penalty(
    split: PairSplit, by_id: Dict[int, Player], pairing_mode: str
) -> int:
    """1 when a two-men two-women court is split men against women."""
    if pairing_mode not in (PAIRING_SAME_GENDER, PAIRING_MIXED):
        return 0
    males, females, _ = gender_counts(list(by_id.values()))
    if males != 2 or females != 2:
        return 0
    mixed = sum(1 for a, b in split if by_id[a].gender != by_id[b].gender)
    return 0 if mixed == 2 else 1


def split_score(
    split: PairSplit,
    by_id: Dict[int, Player],
    config: SessionConfig,
    history: PairCounts,
) -> Tuple[int, int, int, int]:
    """Weighted score of a split followed by its parts."""
    w_skill, w_partner, w_gender = config.pair_weights
    gap = skill_gap(split, by_id)
    repeats = repeat_partners(split, history) if w_partner else 0
    gender = gender_penalty(split, by_id, config.pairing_mode) if w_gender else 0
    total = w_skill * gap + w_partner * repeats + w_gender * gender
    return total, gap, repeats, gender


def select_pairs(
    quartet: Sequence[Player],
    config: Optional[SessionConfig] = None,
    partner_history: Optional[PairCounts] = None,
) -> PairSplit:
    """Pick the 2-2 split for one court.

    With the default skill-first focus this minimizes the team skill gap.
    The balanced and variety foci also weigh repeat partners and the gender
    pattern. Ties keep the earliest split in {AB|CD}, {AC|BD}, {AD|BC} order.

    Args:
        quartet: The four players on the court
        config: Session configuration, defaults to skill-first
        partner_history: Partner counts from the round log

    Returns:
        The chosen split as two pairs of player ids
    """
    config = config or SessionConfig()
    history = partner_history or {}
    by_id = {p.id: p for p in quartet}
    splits = candidate_splits(quartet)
    best_index = min(
        range(len(splits)),
        key=lambda i: (split_score(splits[i], by_id, config, history)[0], i),
    )
    return splits[best_index]
