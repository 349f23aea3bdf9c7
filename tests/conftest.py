import random
from datetime import datetime

import pytest

from doublesrota.controllers import RoundAssembler
from doublesrota.models import SessionConfig, SessionState
from doublesrota.testing import make_players

FIXED_TIME = datetime(2025, 6, 1, 18, 30)


@pytest.fixture
def fixed_time():
    return FIXED_TIME


@pytest.fixture
def assembler():
    return RoundAssembler(rng=random.Random(7), clock=lambda: FIXED_TIME)


@pytest.fixture
def state_factory():
    def _make(genders, skills=None, **config):
        players = make_players(genders, skills)
        return SessionState(
            players=players,
            config=SessionConfig(**config),
            next_player_id=len(players) + 1,
        )

    return _make
