from puzzlesearch.engine.goaltest.goal import is_goal

__all__ = ["is_goal"]
