"""Document models for Cold War Terminal.

Documents are the per-turn intelligence feed. A fresh batch is generated at
the start of every advancing turn and discarded at the next. The engine only
looks at ``is_encrypted`` (which a successful decrypt flips exactly once) and
``reliability``; everything else is narrative.
"""

from enum import Enum

from pydantic import BaseModel, Field

from coldwar import parameters as p

SIGNAL_ID = "SIGNAL-???"
"""Reserved id for anomalous numbers-station broadcasts."""


class DocumentCategory(str, Enum):
    """Kinds of documents the generator produces."""

    INTELLIGENCE_CABLE = "intelligence_cable"
    INTERNAL_MEMO = "internal_memo"
    BUDGET_ANOMALY = "budget_anomaly"
    FOREIGN_INTERCEPT = "foreign_intercept"
    ANONYMOUS_LEAK = "anonymous_leak"
    ADVISOR_MESSAGE = "advisor_message"


CLEARANCE_BY_CATEGORY = {
    DocumentCategory.BUDGET_ANOMALY: "CONFIDENTIAL",
    DocumentCategory.ANONYMOUS_LEAK: "UNVERIFIED",
    DocumentCategory.ADVISOR_MESSAGE: "EYES ONLY",
}
DEFAULT_CLEARANCE = "TOP SECRET"


def clearance_for(category: DocumentCategory) -> str:
    """Clearance label shown on a document of the given category."""
    return CLEARANCE_BY_CATEGORY.get(category, DEFAULT_CLEARANCE)


def format_document_id(value: int) -> str:
    """Default document id: ``DOC-`` plus four uppercase hex digits."""
    return f"DOC-{value:04X}"


class Document(BaseModel):
    """A single cable, memo or intercept in the turn's batch.

    Attributes:
        id: Short opaque token (``DOC-XXXX`` or the reserved ``SIGNAL-???``)
        category: What kind of document this is
        clearance: Clearance label derived from the category
        timestamp: Flavor timestamp
        content: Text body, still enciphered while ``is_encrypted``
        is_encrypted: Whether a decrypt is needed to read the body
        reliability: How little perceptual noise went into the content (0.3-0.95)
    """

    id: str = Field(..., min_length=1)
    category: DocumentCategory
    clearance: str = Field(default=DEFAULT_CLEARANCE)
    timestamp: str = Field(default="")
    content: str = Field(default="")
    is_encrypted: bool = Field(default=False)
    reliability: float = Field(default=0.5, ge=0.3, le=0.95)

    @property
    def is_signal(self) -> bool:
        return self.id == SIGNAL_ID

    @property
    def integrity(self) -> int:
        """Reliability as a whole percentage."""
        return int(self.reliability * 100)


def reliability_tier(reliability: float) -> str:
    """Map a reliability value to its analysis tier.

    Returns:
        "high" above 0.80, "moderate" above 0.50, otherwise "low"
    """
    if reliability > p.RELIABILITY_HIGH_THRESHOLD:
        return "high"
    if reliability > p.RELIABILITY_MODERATE_THRESHOLD:
        return "moderate"
    return "low"
