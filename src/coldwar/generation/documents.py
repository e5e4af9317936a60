"""Default document generator for Cold War Terminal.

Produces the per-turn intelligence feed. The engine treats the generator as a
black box with one contract::

    generate_batch(state, count, turn, rng) -> list[Document]

The generator is deterministic for a given random stream and never mutates
the world state. Any object with a matching ``generate_batch`` method can be
injected into the engine instead (see ``coldwar.engine.turns.DocumentSource``).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from coldwar import parameters as p
from coldwar.generation import content
from coldwar.models.documents import (
    SIGNAL_ID,
    Document,
    DocumentCategory,
    clearance_for,
    format_document_id,
)
from coldwar.models.state import WorldState

if TYPE_CHECKING:
    from coldwar.engine.rng import GameRandom

logger = logging.getLogger(__name__)

# Cumulative thresholds on a 0-99 roll.
CATEGORY_WEIGHTS = (
    (20, DocumentCategory.ADVISOR_MESSAGE),
    (40, DocumentCategory.INTELLIGENCE_CABLE),
    (60, DocumentCategory.INTERNAL_MEMO),
    (75, DocumentCategory.FOREIGN_INTERCEPT),
    (90, DocumentCategory.BUDGET_ANOMALY),
    (100, DocumentCategory.ANONYMOUS_LEAK),
)

NEVER_ENCRYPTED = frozenset({DocumentCategory.ANONYMOUS_LEAK, DocumentCategory.ADVISOR_MESSAGE})

ANOMALY_CHANCE = 0.15
RELIABILITY_FLOOR = 0.3
RELIABILITY_SPAN = 0.65


class DocumentGenerator:
    """Generates batches of cables, memos and intercepts from the world state."""

    def generate_batch(
        self,
        state: WorldState,
        count: int,
        turn: int,
        rng: GameRandom,
    ) -> list[Document]:
        """Generate ``count`` documents for the given turn.

        Args:
            state: Current world state (read only)
            count: Number of documents to produce
            turn: Current turn index, which scales encryption
            rng: The game's random stream

        Returns:
            Ordered list of new documents
        """
        docs = [self.generate_single(state, turn, rng) for _ in range(count)]
        logger.debug(
            "Generated %d documents for turn %d (%d encrypted)",
            len(docs),
            turn,
            sum(1 for d in docs if d.is_encrypted),
        )
        return docs

    def generate_single(self, state: WorldState, turn: int, rng: GameRandom) -> Document:
        category = self._draw_category(rng)
        reliability = RELIABILITY_FLOOR + rng.random() * RELIABILITY_SPAN
        doc_id = format_document_id(rng.randrange(0, 0xFFFF))

        is_encrypted = False
        if category not in NEVER_ENCRYPTED:
            encryption_chance = p.lookup_by_turn(p.ENCRYPTION_CHANCE_BY_TURN, turn)
            is_encrypted = rng.chance(encryption_chance)

        if is_encrypted:
            body = content.crucial_intel(state, rng)
        elif category == DocumentCategory.ADVISOR_MESSAGE:
            body = content.advisor_message(state, rng)
        elif rng.chance(ANOMALY_CHANCE):
            if rng.chance(0.5):
                doc_id = SIGNAL_ID
                body = content.numbers_station(rng)
            else:
                body = content.ghost_message(state, rng)
        else:
            body = self._category_content(category, state, rng, reliability)

        return Document(
            id=doc_id,
            category=category,
            clearance=clearance_for(category),
            timestamp=self._timestamp(rng),
            content=body,
            is_encrypted=is_encrypted,
            reliability=reliability,
        )

    @staticmethod
    def _draw_category(rng: GameRandom) -> DocumentCategory:
        roll = rng.randrange(0, 100)
        for threshold, category in CATEGORY_WEIGHTS:
            if roll < threshold:
                return category
        return DocumentCategory.ANONYMOUS_LEAK

    @staticmethod
    def _category_content(
        category: DocumentCategory,
        state: WorldState,
        rng: GameRandom,
        reliability: float,
    ) -> str:
        if category == DocumentCategory.INTELLIGENCE_CABLE:
            return content.cable(state, rng, reliability)
        if category == DocumentCategory.INTERNAL_MEMO:
            return content.memo(state, rng)
        if category == DocumentCategory.BUDGET_ANOMALY:
            return content.budget_anomaly(rng)
        if category == DocumentCategory.FOREIGN_INTERCEPT:
            return content.intercept(state, rng, reliability)
        if category == DocumentCategory.ANONYMOUS_LEAK:
            return content.leak(state)
        return content.advisor_message(state, rng)

    @staticmethod
    def _timestamp(rng: GameRandom) -> str:
        year = rng.randrange(0, 9)
        month = rng.randrange(0, 3)
        day = rng.randrange(1, 28)
        hour = rng.randrange(0, 23)
        minute = rng.randrange(0, 59)
        return f"198{year}-1{month}-{day:02d} {hour:02d}:{minute:02d}Z"
