"""Document generation for Cold War Terminal.

Provides the default per-turn document feed:
- DocumentGenerator: builds a batch of documents from the world state
- content: narrative builders for each document category

Usage:
    from coldwar.engine.rng import GameRandom
    from coldwar.generation import DocumentGenerator

    docs = DocumentGenerator().generate_batch(state, count=3, turn=1, rng=GameRandom(7))
"""

from coldwar.generation.documents import (
    ANOMALY_CHANCE,
    CATEGORY_WEIGHTS,
    NEVER_ENCRYPTED,
    DocumentGenerator,
)

__all__ = [
    "DocumentGenerator",
    "ANOMALY_CHANCE",
    "CATEGORY_WEIGHTS",
    "NEVER_ENCRYPTED",
]
