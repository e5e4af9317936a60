"""Headless playtesting for Cold War Terminal.

Drives the real GameEngine with scripted strategies for balance validation
and whole-game regression tests.

Usage:
    from coldwar.testing import STRATEGIES, run_batch, summarize_results

    results = run_batch(STRATEGIES["analyst"], games=100)
    print(summarize_results(results))
"""

from .game_runner import (
    MAX_DIRECTIVES_PER_TURN,
    GameResult,
    GameRunner,
    run_batch,
    summarize_results,
)
from .strategies import (
    STRATEGIES,
    CrisisPolicy,
    Strategy,
    analyst,
    default_crisis_response,
    dove,
    hawk,
    random_crisis_response,
    random_strategy,
)

__all__ = [
    # Game execution
    "GameRunner",
    "GameResult",
    "MAX_DIRECTIVES_PER_TURN",
    "run_batch",
    "summarize_results",
    # Strategy type aliases
    "Strategy",
    "CrisisPolicy",
    # Built-in strategies
    "STRATEGIES",
    "random_strategy",
    "hawk",
    "dove",
    "analyst",
    # Crisis policies
    "default_crisis_response",
    "random_crisis_response",
]
