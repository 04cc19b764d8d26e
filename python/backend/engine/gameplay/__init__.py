from backend.engine.gameplay.game import GamePlay
from backend.engine.gameplay.layout import TileLayout

__all__ = ["GamePlay", "TileLayout"]
