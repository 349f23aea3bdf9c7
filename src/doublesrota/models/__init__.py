from doublesrota.models.player import Player
from doublesrota.models.round_data import Court, RoundData
from doublesrota.models.session_config import SessionConfig
from doublesrota.models.session_state import SessionState

__all__ = [
    "Player",
    "Court",
    "RoundData",
    "SessionConfig",
    "SessionState",
]
