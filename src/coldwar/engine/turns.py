"""Turn lifecycle for Cold War Terminal.

The TurnController owns the engine context for the lifetime of a game and
advances turns. Each advancing turn:

1. Increments the turn index
2. Rolls whether a signal interrupt is live (turn-indexed probability)
3. Resets the intel budget to the turn's maximum and clears rate-limit trackers
4. Requests a fresh document batch, discarding the previous one
5. Guarantees at least one encrypted document in a non-empty batch

Difficulty scaling (see coldwar.parameters):
- Interrupt chance: 0% turns 1-2, 15% turns 3-5, 30% turns 6-10, 50% after
- Batch size: 3 below turn 4, 4 below turn 7, then 5
- Intel budget: 1 below turn 3, 2 below turn 6, then 3
"""

from __future__ import annotations

import logging
from typing import Optional, Protocol

from coldwar import parameters as p
from coldwar.engine.context import EngineContext
from coldwar.engine.rng import GameRandom
from coldwar.generation import DocumentGenerator
from coldwar.models.documents import Document
from coldwar.models.state import WorldState, create_initial_state

logger = logging.getLogger(__name__)


class DocumentSource(Protocol):
    """Anything that can produce a turn's document batch."""

    def generate_batch(
        self,
        state: WorldState,
        count: int,
        turn: int,
        rng: GameRandom,
    ) -> list[Document]: ...


def interruption_chance(turn: int) -> float:
    """Probability of a signal interrupt on the given turn."""
    return p.lookup_by_turn(p.INTERRUPTION_CHANCE_BY_TURN, turn)


def document_count(turn: int) -> int:
    """Number of documents generated on the given turn."""
    return p.lookup_by_turn(p.DOCUMENT_COUNT_BY_TURN, turn)


def max_intel_points(turn: int) -> int:
    """Intel budget available on the given turn."""
    return p.lookup_by_turn(p.MAX_INTEL_BY_TURN, turn)


def ensure_encrypted(documents: list[Document]) -> bool:
    """Flip the first document to encrypted if none is.

    Returns:
        True if a document had to be flipped
    """
    if not documents or any(d.is_encrypted for d in documents):
        return False
    documents[0].is_encrypted = True
    return True


class TurnController:
    """Owns the engine context and advances turns.

    Attributes:
        context: The engine context (world state, batch, counters, rng)
        generator: Document source consulted at every turn start
    """

    def __init__(
        self,
        context: Optional[EngineContext] = None,
        generator: Optional[DocumentSource] = None,
        random_seed: Optional[int] = None,
    ) -> None:
        """Initialize the controller.

        Args:
            context: Existing context to drive (default: fresh game state)
            generator: Document source (default: DocumentGenerator)
            random_seed: Seed for a fresh context's random stream
        """
        if context is None:
            rng = GameRandom(random_seed)
            context = EngineContext(state=create_initial_state(rng), rng=rng)
        self.context = context
        self.generator: DocumentSource = generator or DocumentGenerator()

    @property
    def turn(self) -> int:
        return self.context.turn

    @property
    def state(self) -> WorldState:
        return self.context.state

    @property
    def documents(self) -> list[Document]:
        return self.context.documents

    def start_turn(self) -> None:
        """Advance to the next turn and prepare its budgets and documents."""
        ctx = self.context
        ctx.turn += 1
        turn = ctx.turn

        interrupted = ctx.rng.chance(interruption_chance(turn))
        ctx.counters.reset(max_intel_points(turn), interrupted)

        docs = list(self.generator.generate_batch(ctx.state, document_count(turn), turn, ctx.rng))
        if ensure_encrypted(docs):
            logger.debug("Turn %d: no encrypted document generated, flipped %s", turn, docs[0].id)

        ctx.documents = docs

        logger.debug(
            "Turn %d started: %d documents, %d intel, interruption=%s",
            turn,
            len(docs),
            ctx.counters.max_intel_points,
            interrupted,
        )
