from doublesrota.gui.views.players_view import PlayersView
from doublesrota.gui.views.rounds_view import RoundsView

__all__ = ["PlayersView", "RoundsView"]
