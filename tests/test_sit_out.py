import pytest

from doublesrota.models import SessionConfig
from doublesrota.pairing.history import pair_key
from doublesrota.pairing.sit_out import (
    average_sit_rate,
    cap_candidate_pool,
    fairness_cost,
    fairness_costs,
    select_sit_outs,
)
from doublesrota.testing import make_players


def test_happy_to_sit_player_sits_first():
    players = make_players(["M"] * 9)
    players[4].happy_to_sit = True
    decision = select_sit_outs(players, 1, SessionConfig(), {})
    assert decision.sitter_ids == [5]
    assert "happy to sit" in decision.rationale[5]
    assert decision.score[0] == -5


def test_equal_costs_fall_back_to_name_order():
    players = make_players(["M"] * 9)
    decision = select_sit_outs(players, 2, SessionConfig(), {})
    # Alex and Bea sort first
    assert decision.sitter_ids == [1, 2]


def test_back_to_back_penalty_is_eight():
    player = make_players(["F"])[0]
    player.games_played, player.sits = 3, 1
    repeat = fairness_cost(player, 0.25, 3, sat_last_round=True)
    fresh = fairness_cost(player, 0.25, 3, sat_last_round=False)
    assert repeat.total - fresh.total == pytest.approx(8)


def test_player_who_sat_last_round_is_not_chosen_again():
    players = make_players(["M"] * 5)
    decision = select_sit_outs(players, 1, SessionConfig(), {}, last_sit_ids=[1])
    assert decision.sitter_ids == [2]


def test_repeat_sitter_costs_more_than_players_who_played():
    players = make_players(["M"] * 5)
    players[0].sits = 1
    for p in players[1:]:
        p.games_played = 1
    costs = fairness_costs(players, last_sit_ids=[1])
    # bootstrap 1 * 10 plus the back-to-back penalty
    assert costs[1].total == pytest.approx(18)
    # (0 - 1 * 0.25) * 20
    assert costs[2].total == pytest.approx(-5)
    decision = select_sit_outs(players, 1, SessionConfig(), {}, last_sit_ids=[1])
    assert decision.sitter_ids == [2]


def test_players_behind_on_games_are_protected():
    player = make_players(["M"])[0]
    cost = fairness_cost(player, 0.0, 3, sat_last_round=False)
    assert cost.total == 9
    assert "3 games behind" in cost.describe()


def test_average_sit_rate():
    players = make_players(["M"] * 2)
    assert average_sit_rate(players) == 0.0
    players[0].games_played, players[0].sits = 3, 1
    players[1].games_played, players[1].sits = 1, 1
    assert average_sit_rate(players) == pytest.approx(0.5)


def test_no_sitters_needed():
    decision = select_sit_outs(make_players(["M"] * 8), 0, SessionConfig(), {})
    assert decision.sitters == []
    assert decision.score is None


def test_everyone_sits_when_too_few():
    players = make_players(["M", "F", "O"])
    decision = select_sit_outs(players, 3, SessionConfig(), {})
    assert decision.sitter_ids == [1, 2, 3]


def test_mixed_mode_keeps_gender_balance_on_court():
    # 5 men, 4 women: one must sit, a man keeps two 2M/2F courts possible
    players = make_players(["F", "F", "F", "F", "M", "M", "M", "M", "M"])
    decision = select_sit_outs(
        players, 1, SessionConfig(pairing_mode="mixed"), {}
    )
    assert players[decision.sitter_ids[0] - 1].gender == "M"


def test_cap_keeps_players_who_need_games():
    players = make_players(["M"] * 25)
    for p in players[:5]:
        p.games_played = 2
    pool, excluded = cap_candidate_pool(players, cap=23)
    assert len(pool) == 23
    # Dana and Eli sort last among the players with two games
    assert [p.id for p in excluded] == [4, 5]


def test_cap_is_noop_under_limit():
    players = make_players(["M"] * 10)
    pool, excluded = cap_candidate_pool(players)
    assert pool == players
    assert excluded == []


def test_uniqueness_importance_changes_sitter():
    # 5 men (ids 1-5), 4 women (ids 6-9); Fay (6) has met every man
    players = make_players(["M"] * 5 + ["F"] * 4)
    counts = {pair_key(6, man): 1 for man in range(1, 6)}

    low = SessionConfig(pairing_mode="mixed", uniqueness_importance=1)
    medium = SessionConfig(pairing_mode="mixed", uniqueness_importance=2)
    high = SessionConfig(pairing_mode="mixed", uniqueness_importance=3)
    # a man sitting keeps two 2M/2F courts possible
    assert select_sit_outs(players, 1, low, counts).sitter_ids == [1]
    assert select_sit_outs(players, 1, medium, counts).sitter_ids == [1]
    # Fay sitting leaves no repeat pairings in the pool
    assert select_sit_outs(players, 1, high, counts).sitter_ids == [6]
