"""Engine context for Cold War Terminal.

All mutable simulation data lives in one explicit ``EngineContext`` value
that is passed by reference into every resolver call. There are no
process-wide singletons: two engines in one process never share state.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from coldwar.engine.rng import GameRandom
from coldwar.models.documents import Document
from coldwar.models.state import WorldState


@dataclass
class TurnCounters:
    """Per-turn ephemeral state, reset at the start of every advancing turn.

    Attributes:
        intel_points: Spendable budget for minor actions this turn
        max_intel_points: Budget ceiling for this turn
        interruption_active: A signal interrupt is live (enables Trace)
        consult_count: Consults resolved this turn (the first is free)
        trace_count: Successful traces this turn
        traced_advisors: Names of advisors traced this turn
        interrogate_count: Successful interrogations this turn
        interrogated_advisors: Names of advisors interrogated this turn
    """

    intel_points: int = 1
    max_intel_points: int = 1
    interruption_active: bool = False
    consult_count: int = 0
    trace_count: int = 0
    traced_advisors: list[str] = field(default_factory=list)
    interrogate_count: int = 0
    interrogated_advisors: list[str] = field(default_factory=list)

    def reset(self, max_intel_points: int, interruption_active: bool) -> None:
        """Start a new turn with a full intel budget and cleared trackers."""
        self.max_intel_points = max_intel_points
        self.intel_points = max_intel_points
        self.interruption_active = interruption_active
        self.consult_count = 0
        self.trace_count = 0
        self.traced_advisors = []
        self.interrogate_count = 0
        self.interrogated_advisors = []

    def can_afford(self, cost: int) -> bool:
        return self.intel_points >= cost

    def charge(self, cost: int) -> None:
        """Spend intel points. Callers check affordability first."""
        if cost > self.intel_points:
            raise ValueError(f"Cannot spend {cost} intel with {self.intel_points} available")
        self.intel_points -= cost

    def refund(self, cost: int) -> None:
        """Return previously charged intel points, never above the turn's maximum."""
        self.intel_points = min(self.intel_points + cost, self.max_intel_points)


@dataclass
class EngineContext:
    """Everything the resolvers read and mutate.

    Attributes:
        state: World state (metrics, advisors, crisis flag)
        rng: The single random stream for generation and resolution
        turn: Current turn index (0 before the first turn starts)
        documents: Current turn's document batch
        counters: Per-turn budgets and rate-limit trackers
    """

    state: WorldState
    rng: GameRandom
    turn: int = 0
    documents: list[Document] = field(default_factory=list)
    counters: TurnCounters = field(default_factory=TurnCounters)

    def find_document(self, doc_id: str) -> Optional[Document]:
        """First document in the batch with this id (ids are compared exactly)."""
        return next((d for d in self.documents if d.id == doc_id), None)
