"""Shared pytest fixtures and markers for all tests."""

import pytest

from coldwar.engine.context import EngineContext
from coldwar.engine.rng import GameRandom
from coldwar.models.documents import Document, DocumentCategory
from coldwar.models.state import WorldState


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "tui: marks tests that drive the Textual app headlessly"
    )


class ScriptedRandom(GameRandom):
    """GameRandom whose ``chance`` calls return queued outcomes.

    Once the queue is empty it falls back to the seeded stream.
    """

    def __init__(self, outcomes=(), seed=0):
        super().__init__(seed)
        self.outcomes = list(outcomes)

    def chance(self, probability):
        if self.outcomes:
            return self.outcomes.pop(0)
        return super().chance(probability)


class FixedDocuments:
    """Document source that deals copies of the same documents every turn."""

    def __init__(self, documents):
        self.documents = documents
        self.calls = []

    def generate_batch(self, state, count, turn, rng):
        self.calls.append((count, turn))
        return [d.model_copy(deep=True) for d in self.documents]


def make_state(mole="General Volkov", **metrics) -> WorldState:
    """WorldState with the named advisor as mole and optional metric overrides."""
    state = WorldState(**metrics)
    for advisor in state.advisors:
        advisor.is_mole = advisor.name == mole
    return state


def sample_documents():
    return [
        Document(
            id="DOC-0001",
            category=DocumentCategory.INTELLIGENCE_CABLE,
            content="Satellite imagery shows silo doors open.",
            is_encrypted=True,
            reliability=0.9,
        ),
        Document(
            id="DOC-0002",
            category=DocumentCategory.INTERNAL_MEMO,
            content="Budget review postponed.",
            reliability=0.6,
        ),
        Document(
            id="DOC-0003",
            category=DocumentCategory.ANONYMOUS_LEAK,
            content="They are not telling you everything.",
            reliability=0.35,
        ),
    ]


@pytest.fixture
def scripted_rng():
    """Factory for a ScriptedRandom with queued ``chance`` outcomes."""
    return ScriptedRandom


@pytest.fixture
def documents():
    return sample_documents()


@pytest.fixture
def fixed_generator():
    return FixedDocuments(sample_documents())


@pytest.fixture
def make_context():
    """Factory for an EngineContext in the middle of a turn.

    The default context is turn 6 with 3 intel points, the Military advisor
    as mole, the sample documents and no signal interrupt.
    """

    def _make(
        outcomes=(),
        mole="General Volkov",
        intel=3,
        interruption=False,
        turn=6,
        docs=None,
        **metrics,
    ) -> EngineContext:
        ctx = EngineContext(
            state=make_state(mole, **metrics),
            rng=ScriptedRandom(outcomes),
            turn=turn,
            documents=sample_documents() if docs is None else docs,
        )
        ctx.counters.reset(intel, interruption)
        return ctx

    return _make


@pytest.fixture
def default_state():
    """Provide a default world state with the Military advisor as mole."""
    return make_state()


@pytest.fixture
def make_world():
    """Factory for a WorldState with a chosen mole and metric overrides."""
    return make_state
