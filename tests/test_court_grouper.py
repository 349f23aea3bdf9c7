import random
from itertools import combinations

from doublesrota.models import SessionConfig
from doublesrota.pairing.court_grouper import court_rationale, group_courts
from doublesrota.pairing.history import pair_key
from doublesrota.pairing.metrics import pool_pairing_badness, quartet_pairing_badness
from doublesrota.testing import make_players


def _ids(quartets):
    return [[p.id for p in q] for q in quartets]


def test_mixed_mode_builds_two_mixed_courts():
    players = make_players(["M"] * 4 + ["F"] * 4)
    config = SessionConfig(
        pairing_mode="mixed", skill_mode="balanced", uniqueness_importance=2
    )
    quartets = group_courts(players, config, {}, random.Random(1))
    assert _ids(quartets) == [[1, 2, 5, 6], [3, 4, 7, 8]]
    for quartet in quartets:
        assert sorted(p.gender for p in quartet) == ["F", "F", "M", "M"]


def test_same_gender_remainder_is_still_grouped():
    # 5 men (ids 1-5) and 3 women (ids 6-8)
    players = make_players(["M"] * 5 + ["F"] * 3)
    config = SessionConfig(pairing_mode="same-gender")
    quartets = group_courts(players, config, {}, random.Random(1))
    assert len(quartets) == 2
    assert _ids(quartets)[0] == [1, 2, 3, 4]
    assert sorted(pid for q in _ids(quartets) for pid in q) == list(range(1, 9))
    assert quartet_pairing_badness(quartets[1], "same-gender") == 1


def test_same_skill_clusters_levels():
    skills = [1, 9, 2, 10, 1, 9, 2, 10]
    players = make_players(["M"] * 8, skills)
    config = SessionConfig(skill_mode="same-skill", uniqueness_importance=1)
    quartets = group_courts(players, config, {}, random.Random(1))
    assert _ids(quartets) == [[1, 3, 5, 7], [2, 4, 6, 8]]


def test_history_prefers_fresh_quartet():
    players = make_players(["M"] * 8)
    counts = {pair_key(a, b): 1 for a in (1, 2, 3, 4) for b in (1, 2, 3, 4) if a < b}
    quartets = group_courts(players, SessionConfig(), counts, random.Random(1))
    # first court takes only one of the players who already met
    assert _ids(quartets)[0] == [1, 5, 6, 7]
    assert _ids(quartets)[1] == [2, 3, 4, 8]


def test_result_does_not_depend_on_seed():
    players = make_players(["M", "F", "O", "M", "F", "M", "F", "F"], [3, 7, 5, 5, 8, 2, 6, 4])
    config = SessionConfig(pairing_mode="mixed")
    first = _ids(group_courts(players, config, {}, random.Random(1)))
    for seed in range(2, 6):
        assert _ids(group_courts(players, config, {}, random.Random(seed))) == first


def test_pool_pairing_badness():
    players = make_players(["M"] * 5 + ["F"] * 3)
    assert pool_pairing_badness(players, "same-gender") == 1
    assert pool_pairing_badness(players, "mixed") == 1
    assert pool_pairing_badness(players, "random") == 0


def test_court_rationale():
    players = make_players(["M", "M", "F", "F"], [3, 5, 7, 4])
    config = SessionConfig()
    assert court_rationale(players, config, {}) == "2M/2F, skill 3-7, all fresh pairings"
    counts = {pair_key(1, 2): 2}
    assert court_rationale(players, config, counts).endswith("1 repeat pairings")


def test_uniqueness_importance_changes_grouping():
    # every 2M/2F court repeats a woman-woman pairing
    players = make_players(["M"] * 4 + ["F"] * 4)
    counts = {pair_key(a, b): 1 for a, b in combinations([5, 6, 7, 8], 2)}

    low = SessionConfig(pairing_mode="mixed", uniqueness_importance=1)
    high = SessionConfig(pairing_mode="mixed", uniqueness_importance=3)
    assert _ids(group_courts(players, low, counts, random.Random(1))) == [
        [1, 2, 5, 6],
        [3, 4, 7, 8],
    ]
    assert _ids(group_courts(players, high, counts, random.Random(1))) == [
        [1, 2, 3, 5],
        [4, 6, 7, 8],
    ]
