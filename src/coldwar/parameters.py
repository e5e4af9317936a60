"""Simulation parameters for Cold War Terminal.

This module is the SINGLE SOURCE OF TRUTH for all tunable game constants.

Parameter Categories:
- Initial World State: Starting values for every metric
- Turn Scaling: Turn-indexed difficulty tables
- Directive Effects: Magnitudes applied by turn-ending directives
- Minor Actions: Intel costs and per-turn caps
- Mole & Suspicion: Hidden-role subsystem
- Passive Drift: End-of-turn escalation and corruption
- Crisis: Red phone outcomes

Usage:
    from coldwar.parameters import INITIAL_GLOBAL_TENSION, TRACE_MAX_PER_TURN

Turn-indexed tables are expressed as ordered ``(upper_bound, value)`` pairs
read by :func:`lookup_by_turn`: the first pair whose bound is >= the turn wins,
and ``None`` as a bound matches every remaining turn.
"""

from __future__ import annotations

from typing import Optional, Sequence, TypeVar

T = TypeVar("T")


def lookup_by_turn(table: Sequence[tuple[Optional[int], T]], turn: int) -> T:
    """Read a turn-indexed scaling table.

    Args:
        table: Ordered (inclusive upper bound, value) pairs; the last bound is None
        turn: Current turn index (1-based)

    Returns:
        The value for the first bucket containing ``turn``
    """
    for upper, value in table:
        if upper is None or turn <= upper:
            return value
    raise ValueError(f"Turn table has no open-ended final bucket: {table!r}")


# =============================================================================
# INITIAL WORLD STATE
# =============================================================================

INITIAL_GLOBAL_TENSION = 0.2
INITIAL_INTERNAL_SECRECY = 0.5
INITIAL_FOREIGN_PARANOIA = 0.3
INITIAL_ACCIDENTAL_ESCALATION_RISK = 0.05
INITIAL_DOMESTIC_STABILITY = 0.8
INITIAL_SECRET_WEAPON_PROGRESS = 0.1
INITIAL_SYSTEM_CORRUPTION = 0.0

ADVISOR_ROSTER = (
    ("General Volkov", "Military"),
    ("Director Hale", "Intelligence"),
    ("Ambassador Reyes", "Diplomatic"),
)
"""Fixed advisor roster in declaration order.

Lookup by free-text reference walks this order and returns the first match,
so the order is part of the game rules.
"""


# =============================================================================
# TURN SCALING
# =============================================================================

INTERRUPTION_CHANCE_BY_TURN = (
    (2, 0.0),
    (5, 0.15),
    (10, 0.30),
    (None, 0.50),
)
"""Probability that a turn carries a signal interrupt (enables Trace)."""

DOCUMENT_COUNT_BY_TURN = (
    (3, 3),
    (6, 4),
    (None, 5),
)
"""Documents generated per turn: 3 below turn 4, 4 below turn 7, then 5."""

MAX_INTEL_BY_TURN = (
    (2, 1),
    (5, 2),
    (None, 3),
)
"""Intel point budget per turn: 1 below turn 3, 2 below turn 6, then 3."""

ENCRYPTION_CHANCE_BY_TURN = (
    (1, 0.0),
    (4, 0.3),
    (8, 0.5),
    (None, 0.8),
)
"""Chance that an encryptable document is generated enciphered."""

DEFAULT_MAX_TURNS = 20
"""Caller-enforced turn cap (the engine itself has no turn limit)."""


# =============================================================================
# DIRECTIVE EFFECTS (turn-ending)
# =============================================================================

ESCALATE_DETERRENCE_CHANCE = 0.6
ESCALATE_DETERRENCE_TENSION = 0.2
ESCALATE_DETERRENCE_PARANOIA = 0.2
ESCALATE_DETERRENCE_STABILITY = 0.05
ESCALATE_NEAR_MISS_TENSION = 0.35
ESCALATE_NEAR_MISS_RISK = 0.15

INVESTIGATE_SECRECY = -0.1
INVESTIGATE_WEAPON_PROGRESS = 0.15
INVESTIGATE_RISK_REDUCTION_CHANCE = 0.5
INVESTIGATE_RISK_REDUCTION = -0.1

CONTAIN_PARANOIA_THRESHOLD = 0.6
CONTAIN_FAILURE_TENSION = 0.1
CONTAIN_TENSION = -0.15
CONTAIN_STABILITY = -0.1

LEAK_SECRECY = -0.25
LEAK_STABILITY = 0.2
LEAK_PARANOIA = -0.05

STAND_DOWN_TENSION = -0.4
STAND_DOWN_PARANOIA = -0.3
STAND_DOWN_STABILITY = -0.35


# =============================================================================
# MINOR ACTIONS
# =============================================================================

DECRYPT_COST = 1
ANALYZE_COST = 1
TRACE_COST = 1
CONSULT_COST = 1
"""Cost of every consult after the first free one in a turn."""
INTERROGATE_COST = 2

TRACE_MAX_PER_TURN = 2
INTERROGATE_MAX_PER_TURN = 2

RELIABILITY_HIGH_THRESHOLD = 0.80
RELIABILITY_MODERATE_THRESHOLD = 0.50

CONTENT_MARKER = "CONTENT: "
"""Feedback prefix marking a decrypted document body for the presentation layer."""


# =============================================================================
# MOLE & SUSPICION
# =============================================================================

SUSPICION_CONFIRMED = 100
"""Suspicion at which an advisor counts as exposed. Suspicion is not clamped."""

INTERROGATE_SUSPICION = 20
INTERROGATE_DECEPTION_SUSPICION = 15
INTERROGATE_DECEPTION_CHANCE = 0.5

INTERROGATE_MILITARY_STABILITY = -0.05
INTERROGATE_INTELLIGENCE_SECRECY = -0.05
INTERROGATE_DIPLOMATIC_PARANOIA = 0.05


# =============================================================================
# AI OVERRIDE
# =============================================================================

AI_OVERRIDE_THRESHOLD = 0.4
AI_OVERRIDE_SCALE = 0.5
AI_OVERRIDE_MAX_PROBABILITY = 0.3
"""Override probability = min((corruption - 0.4) * 0.5, 0.3).

With corruption clamped to [0, 1] the formula alone never exceeds 0.3; the cap
keeps that true if the scale is retuned.
"""


# =============================================================================
# PASSIVE DRIFT (after every turn-ending directive)
# =============================================================================

DRIFT_TENSION_THRESHOLD = 0.3
DRIFT_TENSION = 0.03
DRIFT_WEAPON_THRESHOLD = 0.2
DRIFT_WEAPON = 0.02

RED_PHONE_TENSION_THRESHOLD = 0.8
RED_PHONE_CHANCE = 0.1

SILO_RISK_THRESHOLD = 0.6
SILO_CHANCE = 0.3
SILO_TENSION = 0.15

CORRUPTION_WEAPON_THRESHOLD = 0.5
CORRUPTION_RATE = 0.2
"""Corruption gained per turn = (weapon_progress - 0.5) * 0.2."""

BASILISK_WARNING_THRESHOLD = 0.9
BASILISK_WARNING_CHANCE = 0.2


# =============================================================================
# CRISIS (red phone)
# =============================================================================

CRISIS_EXECUTE_STABILITY = 0.3
CRISIS_EXECUTE_PARANOIA = 0.2
CRISIS_TURN_TENSION = -0.3
CRISIS_TURN_SECRECY = -0.1
CRISIS_TURN_RISK = 0.1

CRISIS_DENY_PARANOIA_THRESHOLD = 0.7
CRISIS_DENY_TENSION = -0.2
CRISIS_ADMIT_TENSION = -0.5
CRISIS_ADMIT_STABILITY = -0.3
