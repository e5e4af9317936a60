"""World state models for Cold War Terminal.

This module defines the persistent simulation truth: six bounded metrics,
the derived system corruption metric, the advisor roster and the pending
red phone crisis flag.

Bounded metrics are clamped to [0, 1] when a state is constructed. Engine
code mutates fields directly during a resolution (pydantic does not validate
on assignment here), so intermediate values may leave the range; the
resolver calls :meth:`WorldState.clamp_bounded` once a turn-ending directive
has been applied.
"""

from __future__ import annotations

import random
from enum import Enum

from pydantic import BaseModel, Field, field_validator

from coldwar import parameters as p

BOUNDED_FIELDS = (
    "global_tension",
    "internal_secrecy",
    "foreign_paranoia",
    "accidental_escalation_risk",
    "domestic_stability",
    "secret_weapon_progress",
)


def clamp(value: float, min_val: float, max_val: float) -> float:
    """Clamp a value to the specified range."""
    return max(min_val, min(max_val, value))


class AdvisorRole(str, Enum):
    """Closed set of advisor portfolios.

    The value doubles as the role label matched by free-text advisor lookup.
    """

    MILITARY = "Military"
    INTELLIGENCE = "Intelligence"
    DIPLOMATIC = "Diplomatic"


class Advisor(BaseModel):
    """A member of the inner circle.

    Attributes:
        name: Unique display label
        role: Portfolio, which shapes advice and interrogation responses
        suspicion: Accumulated suspicion (conventionally 0-100, never clamped)
        is_mole: Whether this advisor secretly works for the other side
    """

    name: str = Field(..., min_length=1)
    role: AdvisorRole
    suspicion: int = Field(default=0)
    is_mole: bool = Field(default=False)

    @property
    def is_exposed(self) -> bool:
        """Suspicion has reached the confirmation threshold."""
        return self.suspicion >= p.SUSPICION_CONFIRMED

    def matches(self, reference: str) -> bool:
        """Case-insensitive substring match against name or role label."""
        needle = reference.strip().lower()
        if not needle:
            return False
        return needle in self.name.lower() or needle in self.role.value.lower()


def default_roster() -> list[Advisor]:
    """Build the fixed three-advisor roster with nobody marked as mole."""
    return [Advisor(name=name, role=AdvisorRole(role)) for name, role in p.ADVISOR_ROSTER]


class WorldState(BaseModel):
    """Complete world state.

    Bounded metrics (all 0.0-1.0):
        global_tension: 0 is peace, 1 is nuclear war
        internal_secrecy: 0 is an open society, 1 a totalitarian state
        foreign_paranoia: How readily the enemy reads actions as aggression
        accidental_escalation_risk: Accumulated glitches, fatigue and errors
        domestic_stability: 0 is anarchy (government collapse)
        secret_weapon_progress: Hidden progress of Project Basilisk

    Derived:
        system_corruption: Grows while the weapon program runs hot; past 0.4 it
            starts hijacking directives. Clamped to [0, 1] after every resolution.

    Other:
        advisors: Roster in fixed declaration order
        red_phone_active: A red phone crisis is pending
    """

    global_tension: float = Field(default=p.INITIAL_GLOBAL_TENSION)
    internal_secrecy: float = Field(default=p.INITIAL_INTERNAL_SECRECY)
    foreign_paranoia: float = Field(default=p.INITIAL_FOREIGN_PARANOIA)
    accidental_escalation_risk: float = Field(default=p.INITIAL_ACCIDENTAL_ESCALATION_RISK)
    domestic_stability: float = Field(default=p.INITIAL_DOMESTIC_STABILITY)
    secret_weapon_progress: float = Field(default=p.INITIAL_SECRET_WEAPON_PROGRESS)
    system_corruption: float = Field(default=p.INITIAL_SYSTEM_CORRUPTION)

    advisors: list[Advisor] = Field(default_factory=default_roster)
    red_phone_active: bool = Field(default=False)

    @field_validator(*BOUNDED_FIELDS, "system_corruption", mode="before")
    @classmethod
    def clamp_to_unit(cls, v: float) -> float:
        """Clamp metrics to [0, 1] on construction."""
        return clamp(float(v), 0.0, 1.0)

    def is_terminal(self) -> bool:
        """Nuclear war or government collapse."""
        return self.global_tension >= 1.0 or self.domestic_stability <= 0.0

    def clamp_bounded(self) -> None:
        """Clamp the six bounded metrics to [0, 1] in place."""
        for name in BOUNDED_FIELDS:
            setattr(self, name, clamp(getattr(self, name), 0.0, 1.0))

    def clamp_corruption(self) -> None:
        """Clamp system corruption to [0, 1] in place."""
        self.system_corruption = clamp(self.system_corruption, 0.0, 1.0)

    @property
    def mole(self) -> Advisor | None:
        """The active mole, or None once exposed."""
        return next((a for a in self.advisors if a.is_mole), None)

    def exposed_advisor(self) -> Advisor | None:
        """First advisor at or above the confirmation threshold.

        The actual mole is preferred when several advisors qualify.
        """
        exposed = [a for a in self.advisors if a.is_exposed]
        if not exposed:
            return None
        return next((a for a in exposed if a.is_mole), exposed[0])

    def to_json(self) -> str:
        """Serialize state to JSON string."""
        return self.model_dump_json(indent=2)

    @classmethod
    def from_json(cls, json_str: str) -> WorldState:
        """Deserialize state from JSON string."""
        return cls.model_validate_json(json_str)


def create_initial_state(rng: random.Random) -> WorldState:
    """Create the opening world state with one mole chosen uniformly at random.

    Args:
        rng: The game's random stream

    Returns:
        Fresh WorldState with exactly one advisor marked as mole
    """
    state = WorldState()
    mole_index = rng.randrange(0, len(state.advisors))
    state.advisors[mole_index].is_mole = True
    return state
