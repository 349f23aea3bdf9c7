"""Simulation tooling for Doubles Rota.

Run ``python -m doublesrota.testing --help`` for the command line interface.
"""

from doublesrota.testing.simulator import (
    PlayerFactory,
    SessionSimulator,
    SimConfig,
    SimReport,
    make_players,
)

__all__ = [
    "PlayerFactory",
    "SessionSimulator",
    "SimConfig",
    "SimReport",
    "make_players",
]
