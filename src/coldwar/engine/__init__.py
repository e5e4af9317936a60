"""Game engine module for Cold War Terminal.

This module contains the core game logic including:
- rng: The single seeded random stream
- context: Engine context and per-turn counters
- turns: Turn lifecycle and difficulty scaling
- resolution: Directive resolution and end-of-turn drift
- crisis: Red phone crisis resolution
- endings: End condition checks
- game_engine: Core game loop and history

Usage:
    from coldwar.engine import GameEngine
    from coldwar.models import ESCALATE, Decrypt

    game = GameEngine(random_seed=42)
    game.start_turn()

    # Spend intel on a document
    result = game.submit_directive(Decrypt(target=game.documents[0].id))

    # End the turn
    result = game.submit_directive(ESCALATE)

    if game.crisis_pending:
        prompt = game.open_crisis()
        game.resolve_crisis("admit")

    if game.is_game_over():
        print(game.get_ending().description)
"""

from coldwar.engine.context import EngineContext, TurnCounters
from coldwar.engine.crisis import (
    CrisisChoice,
    CrisisKind,
    CrisisOutcome,
    CrisisPrompt,
    CrisisResolver,
)
from coldwar.engine.endings import (
    EndingType,
    GameEnding,
    check_all_endings,
    check_max_turns,
    check_state_endings,
)
from coldwar.engine.game_engine import (
    DirectiveRecord,
    GameEngine,
    TurnPhase,
    TurnRecord,
    TurnResult,
    create_game,
)
from coldwar.engine.resolution import DirectiveResolver, DirectiveResult, override_probability
from coldwar.engine.rng import GameRandom
from coldwar.engine.turns import (
    TurnController,
    document_count,
    interruption_chance,
    max_intel_points,
)

__all__ = [
    # Game engine classes
    "GameEngine",
    "TurnPhase",
    "TurnRecord",
    "TurnResult",
    "DirectiveRecord",
    "create_game",
    # Context
    "EngineContext",
    "TurnCounters",
    "GameRandom",
    # Turns
    "TurnController",
    "interruption_chance",
    "document_count",
    "max_intel_points",
    # Resolution
    "DirectiveResolver",
    "DirectiveResult",
    "override_probability",
    # Crisis
    "CrisisResolver",
    "CrisisKind",
    "CrisisChoice",
    "CrisisPrompt",
    "CrisisOutcome",
    # Endings
    "EndingType",
    "GameEnding",
    "check_all_endings",
    "check_max_turns",
    "check_state_endings",
]
