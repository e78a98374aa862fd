from liquidsort.engine.gamestate.state import GameState, HistoryEntry

__all__ = ["GameState", "HistoryEntry"]
