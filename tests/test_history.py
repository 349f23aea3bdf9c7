from doublesrota.models import Court, RoundData
from doublesrota.pairing.history import (
    co_court_counts,
    pair_key,
    partner_counts,
    repeated_pairs,
    sum_pair_counts,
)


def _rounds():
    return [
        RoundData(
            round_number=1,
            courts=[Court(1, [1, 2, 3, 4], [(1, 2), (3, 4)])],
            sit_out=[5, 6],
        ),
        RoundData(
            round_number=2,
            courts=[Court(1, [1, 2, 5, 6], [(1, 5), (2, 6)])],
            sit_out=[3, 4],
        ),
    ]


def test_pair_key_is_unordered():
    assert pair_key(1, 2) == pair_key(2, 1)


def test_co_court_counts_every_pair_on_a_court():
    counts = co_court_counts(_rounds())
    assert counts[pair_key(1, 2)] == 2
    assert counts[pair_key(3, 4)] == 1
    assert counts[pair_key(5, 6)] == 1
    assert pair_key(3, 5) not in counts
    # six pairs per court, {1, 2} shared
    assert len(counts) == 11


def test_partner_counts_only_teams():
    counts = partner_counts(_rounds())
    assert counts == {
        pair_key(1, 2): 1,
        pair_key(3, 4): 1,
        pair_key(1, 5): 1,
        pair_key(2, 6): 1,
    }


def test_counts_are_recomputed_not_accumulated():
    rounds = _rounds()
    assert co_court_counts(rounds) == co_court_counts(rounds)
    assert co_court_counts([]) == {}


def test_sum_and_repeated_pairs():
    counts = co_court_counts(_rounds())
    assert sum_pair_counts([1, 2, 3], counts) == 2 + 1 + 1
    assert sum_pair_counts([3, 5], counts) == 0
    assert set(repeated_pairs([1, 2, 5], counts)) == {
        pair_key(1, 2),
        pair_key(1, 5),
        pair_key(2, 5),
    }
