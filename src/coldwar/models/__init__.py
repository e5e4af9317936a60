"""Cold War Terminal game models.

This module exports the core data structures for the simulation.
"""

from .directives import (
    CONTAIN,
    ESCALATE,
    INVESTIGATE,
    LEAK,
    MAJOR_DIRECTIVES,
    STAND_DOWN,
    TARGETED_DIRECTIVES,
    Analyze,
    Consult,
    Contain,
    Decrypt,
    Directive,
    DirectiveKind,
    Escalate,
    Interrogate,
    Investigate,
    Leak,
    StandDown,
    Trace,
    parse_directive,
    serialize_directive,
)
from .documents import (
    SIGNAL_ID,
    Document,
    DocumentCategory,
    clearance_for,
    format_document_id,
    reliability_tier,
)
from .state import (
    Advisor,
    AdvisorRole,
    WorldState,
    clamp,
    create_initial_state,
    default_roster,
)

__all__ = [
    # Enums
    "AdvisorRole",
    "DirectiveKind",
    "DocumentCategory",
    # State Models
    "Advisor",
    "WorldState",
    "Document",
    # Directive Models
    "Directive",
    "Escalate",
    "Investigate",
    "Contain",
    "Leak",
    "StandDown",
    "Decrypt",
    "Analyze",
    "Trace",
    "Consult",
    "Interrogate",
    # Functions
    "clamp",
    "clearance_for",
    "create_initial_state",
    "default_roster",
    "format_document_id",
    "parse_directive",
    "reliability_tier",
    "serialize_directive",
    # Constants
    "ESCALATE",
    "INVESTIGATE",
    "CONTAIN",
    "LEAK",
    "STAND_DOWN",
    "MAJOR_DIRECTIVES",
    "TARGETED_DIRECTIVES",
    "SIGNAL_ID",
]
