"""Core game engine for Cold War Terminal.

This module implements the GameEngine class, which wires the turn controller,
directive resolver and crisis resolver around one engine context and keeps
the turn history.

Turn Sequence:
1. START - ``start_turn()`` advances the turn, resets budgets, deals documents
2. DECISION - ``submit_directive()`` until a directive consumes the turn
3. CRISIS - whenever ``crisis_pending`` is set, ``open_crisis()`` and
   ``resolve_crisis()`` must run before the next directive or turn start
4. CHECK ENDINGS - world-state endings after every resolution, the turn cap
   after every turn-ending directive
5. ADVANCE - back to START

The engine is strictly single-threaded: each call resolves completely
(including all mutation and clamping) before returning.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from coldwar import parameters as p
from coldwar.engine.context import EngineContext, TurnCounters
from coldwar.engine.crisis import CrisisOutcome, CrisisPrompt, CrisisResolver
from coldwar.engine.endings import GameEnding, check_max_turns, check_state_endings
from coldwar.engine.resolution import DirectiveResolver, DirectiveResult
from coldwar.engine.turns import DocumentSource, TurnController
from coldwar.models.directives import Directive
from coldwar.models.documents import Document
from coldwar.models.state import WorldState

logger = logging.getLogger(__name__)


class TurnPhase(Enum):
    """Where the engine is within the turn cycle."""

    AWAITING_TURN = "awaiting_turn"
    DECISION = "decision"
    GAME_OVER = "game_over"


@dataclass
class DirectiveRecord:
    """One resolved directive within a turn.

    Attributes:
        submitted: What the operator asked for
        executed: What actually ran (differs after an AI override)
        overridden: Whether the AI override fired
        turn_ended: Whether the directive consumed the turn
        feedback: Feedback lines produced
    """

    submitted: Directive
    executed: Directive
    overridden: bool
    turn_ended: bool
    feedback: list[str]


@dataclass
class TurnRecord:
    """Record of a single turn's events.

    Attributes:
        turn: Turn number (1-indexed)
        state_before: World state when the turn started
        state_after: World state after the turn-ending directive (None while open)
        documents: Ids of the documents dealt this turn
        interruption_active: Whether the turn carried a signal interrupt
        directives: Every directive resolved this turn, in order
        crises: Every crisis resolved during this turn, in order
    """

    turn: int
    state_before: WorldState
    state_after: Optional[WorldState] = None
    documents: list[str] = field(default_factory=list)
    interruption_active: bool = False
    directives: list[DirectiveRecord] = field(default_factory=list)
    crises: list[CrisisOutcome] = field(default_factory=list)


@dataclass
class TurnResult:
    """Result of submitting a directive.

    Attributes:
        success: Whether the directive was accepted for resolution
        result: Resolution details (None if rejected)
        ending: GameEnding if the game ended (None if continuing)
        crisis_pending: Whether a red phone crisis now needs resolving
        error: Error message if success=False
    """

    success: bool
    result: Optional[DirectiveResult] = None
    ending: Optional[GameEnding] = None
    crisis_pending: bool = False
    error: Optional[str] = None

    @property
    def feedback(self) -> list[str]:
        return self.result.feedback if self.result else []

    @property
    def turn_ended(self) -> bool:
        return bool(self.result and self.result.turn_ended)


class GameEngine:
    """Core game engine managing the complete game loop.

    Attributes:
        controller: Turn controller owning the engine context
        resolver: Directive resolver
        crisis_resolver: Red phone crisis resolver
        max_turns: Turn cap after which the game ends
        phase: Current phase of the turn cycle
        history: One TurnRecord per started turn
        ending: Game ending (None while in progress)
    """

    def __init__(
        self,
        max_turns: int = p.DEFAULT_MAX_TURNS,
        random_seed: Optional[int] = None,
        generator: Optional[DocumentSource] = None,
        context: Optional[EngineContext] = None,
    ) -> None:
        """Initialize the engine with a fresh world.

        Args:
            max_turns: Turn cap (default 20)
            random_seed: Seed for the single random stream (for reproducibility)
            generator: Document source (default: DocumentGenerator)
            context: Pre-built context, mainly for tests

        Raises:
            ValueError: If max_turns is not positive
        """
        if max_turns < 1:
            raise ValueError(f"max_turns must be positive, got {max_turns}")

        self.controller = TurnController(context=context, generator=generator, random_seed=random_seed)
        self.resolver = DirectiveResolver()
        self.crisis_resolver = CrisisResolver()
        self.max_turns = max_turns
        self.phase = TurnPhase.AWAITING_TURN
        self.history: list[TurnRecord] = []
        self.ending: Optional[GameEnding] = None

    # =========================================================================
    # Accessors
    # =========================================================================

    @property
    def context(self) -> EngineContext:
        return self.controller.context

    @property
    def state(self) -> WorldState:
        return self.context.state

    @property
    def turn(self) -> int:
        return self.context.turn

    @property
    def counters(self) -> TurnCounters:
        return self.context.counters

    @property
    def documents(self) -> list[Document]:
        return self.context.documents

    @property
    def crisis_pending(self) -> bool:
        """A red phone crisis must be resolved before play continues."""
        return self.ending is None and self.state.red_phone_active

    def get_current_state(self) -> WorldState:
        """Deep copy of the current world state."""
        return self.state.model_copy(deep=True)

    def get_documents(self) -> list[Document]:
        """Deep copies of the current document batch."""
        return [d.model_copy(deep=True) for d in self.documents]

    def get_history(self) -> list[TurnRecord]:
        return list(self.history)

    def is_game_over(self) -> bool:
        return self.ending is not None

    def get_ending(self) -> Optional[GameEnding]:
        return self.ending

    # =========================================================================
    # Turn cycle
    # =========================================================================

    def start_turn(self) -> None:
        """Advance to the next turn.

        Raises:
            ValueError: If the game is over, a crisis is pending, or the
                current turn has not been consumed yet
        """
        if self.is_game_over():
            raise ValueError("Game is already over")
        if self.crisis_pending:
            raise ValueError("A red phone crisis must be resolved before the next turn")
        if self.phase == TurnPhase.DECISION:
            raise ValueError(f"Turn {self.turn} is still in progress")

        state_before = self.get_current_state()
        self.controller.start_turn()
        self.phase = TurnPhase.DECISION
        self.history.append(
            TurnRecord(
                turn=self.turn,
                state_before=state_before,
                documents=[d.id for d in self.documents],
                interruption_active=self.counters.interruption_active,
            )
        )

    def submit_directive(self, directive: Directive) -> TurnResult:
        """Resolve one directive for the current turn.

        Args:
            directive: Parsed directive from the operator (or a strategy)

        Returns:
            TurnResult with feedback, the turn-consumed flag and any ending
        """
        if self.is_game_over():
            return TurnResult(success=False, error="Game is already over")
        if self.crisis_pending:
            return TurnResult(
                success=False,
                crisis_pending=True,
                error="A red phone crisis must be resolved first",
            )
        if self.phase != TurnPhase.DECISION:
            return TurnResult(success=False, error="No turn in progress. Start a turn first.")

        result = self.resolver.resolve(self.context, directive)
        record = self.history[-1]
        record.directives.append(
            DirectiveRecord(
                submitted=directive,
                executed=result.directive,
                overridden=result.overridden,
                turn_ended=result.turn_ended,
                feedback=list(result.feedback),
            )
        )

        ending = check_state_endings(self.state, self.turn)
        if result.turn_ended:
            record.state_after = self.get_current_state()
            self.phase = TurnPhase.AWAITING_TURN
            if ending is None:
                ending = check_max_turns(self.turn, self.max_turns)

        if ending is not None:
            self._finish(ending)

        return TurnResult(
            success=True,
            result=result,
            ending=ending,
            crisis_pending=self.crisis_pending,
        )

    # =========================================================================
    # Crisis
    # =========================================================================

    def open_crisis(self) -> CrisisPrompt:
        """Prompt for the pending crisis.

        Raises:
            ValueError: If no crisis is pending
        """
        if not self.crisis_pending:
            raise ValueError("No red phone crisis is pending")
        return self.crisis_resolver.open(self.context)

    def resolve_crisis(self, response: str) -> CrisisOutcome:
        """Apply the operator's crisis response.

        Args:
            response: Raw operator input ("execute", "deny", "2", ...)

        Returns:
            CrisisOutcome; check ``is_game_over()`` for a fatal response

        Raises:
            ValueError: If no crisis is pending
        """
        if not self.crisis_pending:
            raise ValueError("No red phone crisis is pending")

        outcome = self.crisis_resolver.resolve(self.context, response)
        if self.history:
            self.history[-1].crises.append(outcome)

        ending = check_state_endings(self.state, self.turn)
        if ending is not None:
            self._finish(ending)
        return outcome

    def _finish(self, ending: GameEnding) -> None:
        self.ending = ending
        self.phase = TurnPhase.GAME_OVER
        logger.info("Game over on turn %d: %s", ending.turn, ending.ending_type.value)


def create_game(max_turns: Optional[int] = None, random_seed: Optional[int] = None) -> GameEngine:
    """Create a new game from environment configuration.

    Args:
        max_turns: Override for the turn cap (default: COLDWAR_MAX_TURNS)
        random_seed: Override for the seed (default: COLDWAR_SEED)

    Returns:
        A GameEngine ready for ``start_turn()``
    """
    from coldwar import config

    if max_turns is None:
        max_turns = config.get_max_turns()
    if random_seed is None:
        random_seed = config.get_seed()
    return GameEngine(max_turns=max_turns, random_seed=random_seed)
