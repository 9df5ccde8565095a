from backend.engine.gamestate.state import CountdownTimer, SessionState

__all__ = ["CountdownTimer", "SessionState"]
