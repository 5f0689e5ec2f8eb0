from unblockcar.engine.gamestate.state import SearchState, StateGraph

__all__ = ["SearchState", "StateGraph"]
