from doublesrota.controllers.round_assembler import (
    RoundAssembler,
    RoundPhase,
    RoundPlan,
)
from doublesrota.controllers.session import SessionController

__all__ = ["RoundAssembler", "RoundPhase", "RoundPlan", "SessionController"]
