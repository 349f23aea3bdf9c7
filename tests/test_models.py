from datetime import datetime

import pytest

from doublesrota.models import Court, Player, RoundData, SessionConfig
from doublesrota.utils.validation import (
    normalize_gender,
    validate_pairing_mode,
    validate_skill,
    validate_uniqueness_importance,
)


def test_archived_player_is_never_present():
    player = Player(id=1, name="Ann", is_present=True, is_archived=True)
    assert player.is_present is False
    assert not player.is_available


def test_player_dict_uses_saved_keys():
    player = Player(id=2, name="Bob", gender="M", skill=6, happy_to_sit=True)
    data = player.to_dict()
    assert data["happyToSit"] is True
    assert data["gamesPlayed"] == 0
    assert Player.from_dict(data) == player


def test_court_partition_check():
    assert Court(1, [1, 2, 3, 4], [(1, 2), (3, 4)]).is_valid_partition()
    assert not Court(1, [1, 2, 3, 4], [(1, 2), (2, 4)]).is_valid_partition()
    assert not Court(1, [1, 2, 3], [(1, 2), (3,)]).is_valid_partition()
    assert not Court(1, [1, 2, 3, 4], [(1, 2), (3, 5)]).is_valid_partition()


def test_round_timestamp_parsing():
    data = RoundData(round_number=1, created_at=datetime(2025, 5, 4, 19, 0)).to_dict()
    assert data["createdAt"] == "2025-05-04T19:00:00"
    assert RoundData.from_dict(data).created_at == datetime(2025, 5, 4, 19, 0)
    assert RoundData.from_dict({"roundNumber": 2, "createdAt": "soon"}).created_at is None


@pytest.mark.parametrize(
    "importance, order",
    [
        (1, ("pairing", "skill", "uniqueness")),
        (2, ("pairing", "uniqueness", "skill")),
        (3, ("uniqueness", "pairing", "skill")),
    ],
)
def test_priority_order(importance, order):
    assert SessionConfig(uniqueness_importance=importance).priority_order == order


def test_pair_weights_follow_rotation_focus():
    assert SessionConfig().pair_weights == (1, 0, 0)
    assert SessionConfig(rotation_focus="variety").pair_weights == (1, 5, 3)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("neutral", "random"),
        ("none", "random"),
        ("mixed_priority", "mixed"),
        ("Same Gender", "same-gender"),
        ("gender", "same-gender"),
    ],
)
def test_pairing_mode_aliases(raw, expected):
    assert validate_pairing_mode(raw).sanitized_value == expected


def test_skill_validation():
    assert validate_skill(10).sanitized_value == 10
    assert not validate_skill(True)
    assert not validate_skill(None)
    assert not validate_skill(2.5)


def test_uniqueness_and_gender_normalization():
    assert validate_uniqueness_importance("Medium").sanitized_value == 2
    assert validate_uniqueness_importance("3").sanitized_value == 3
    assert not validate_uniqueness_importance(True)
    assert normalize_gender("Woman") == "F"
    assert normalize_gender("") == "O"
    assert normalize_gender("x") == "O"
