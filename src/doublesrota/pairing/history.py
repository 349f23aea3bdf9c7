"""Co-occurrence statistics derived from the round log."""

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

from itertools import combinations
from typing import Iterable, List, Sequence

from doublesrota.models.round_data import RoundData
from doublesrota.type_hints import PairCounts, PairKey


def pair_key(player1_id: int, player2_id: int) -> PairKey:
    """Unordered key for two player ids."""
    return frozenset((player1_id, player2_id))


def co_court_counts(rounds: Iterable[RoundData]) -> PairCounts:
    """Count how often every two players have shared a court.

    Each court contributes its six unordered pairs. The result is a pure
    function of the round log and is recomputed on every generation.
    """
    counts: PairCounts = {}
    for round_data in rounds:
        for court in round_data.courts:
            for a, b in combinations(court.players, 2):
                key = pair_key(a, b)
                counts[key] = counts.get(key, 0) + 1
    return counts


def partner_counts(rounds: Iterable[RoundData]) -> PairCounts:
    """Count how often every two players have been partners (same team)."""
    counts: PairCounts = {}
    for round_data in rounds:
        for court in round_data.courts:
            for pair in court.pairs:
                key = pair_key(pair[0], pair[1])
                counts[key] = counts.get(key, 0) + 1
    return counts


def pair_count(counts: PairCounts, player1_id: int, player2_id: int) -> int:
    return counts.get(pair_key(player1_id, player2_id), 0)


def sum_pair_counts(player_ids: Sequence[int], counts: PairCounts) -> int:
    """Sum the counts over every unordered pair within ``player_ids``."""
    if not counts:
        return 0
    return sum(counts.get(pair_key(a, b), 0) for a, b in combinations(player_ids, 2))


def repeated_pairs(player_ids: Sequence[int], counts: PairCounts) -> List[PairKey]:
    """Pairs within ``player_ids`` that already have a count."""
    return [
        pair_key(a, b)
        for a, b in combinations(player_ids, 2)
        if counts.get(pair_key(a, b), 0) > 0
    ]
