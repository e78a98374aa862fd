from liquidsort.engine.gameplay.game import Action, GamePlay, InvalidReason, MoveResult

__all__ = ["Action", "GamePlay", "InvalidReason", "MoveResult"]
