"""Directive definitions for Cold War Terminal.

A directive is one command issued at a decision point. The set is closed:
five zero-argument directives that always consume the turn, and five targeted
"minor" directives that cost intel and leave the turn open.

Directives form a pydantic discriminated union on ``kind``, so each case
carries only the payload it needs and a targeted directive cannot be built
without a target.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator


class DirectiveKind(str, Enum):
    """Every directive the resolver accepts.

    Inherits from str for proper JSON serialization.
    """

    ESCALATE = "escalate"
    INVESTIGATE = "investigate"
    CONTAIN = "contain"
    LEAK = "leak"
    STAND_DOWN = "stand_down"
    DECRYPT = "decrypt"
    ANALYZE = "analyze"
    TRACE = "trace"
    CONSULT = "consult"
    INTERROGATE = "interrogate"


MAJOR_KINDS = frozenset(
    {
        DirectiveKind.ESCALATE,
        DirectiveKind.INVESTIGATE,
        DirectiveKind.CONTAIN,
        DirectiveKind.LEAK,
        DirectiveKind.STAND_DOWN,
    }
)


class _Directive(BaseModel):
    model_config = ConfigDict(frozen=True)

    @property
    def is_major(self) -> bool:
        """Whether this directive always ends the turn."""
        return self.kind in MAJOR_KINDS

    @property
    def label(self) -> str:
        """Upper-case display label, e.g. ``STAND DOWN``."""
        return self.kind.value.replace("_", " ").upper()


class _TargetedDirective(_Directive):
    target: str = Field(..., min_length=1)

    @field_validator("target", mode="before")
    @classmethod
    def strip_target(cls, v: Any) -> Any:
        """Targets are opaque strings; surrounding whitespace is not part of them."""
        if isinstance(v, str):
            return v.strip()
        return v


class Escalate(_Directive):
    """Prime strike assets. 60% deterrence, 40% near-miss."""

    kind: Literal[DirectiveKind.ESCALATE] = DirectiveKind.ESCALATE


class Investigate(_Directive):
    """Internal audit. Costs secrecy, advances the Project."""

    kind: Literal[DirectiveKind.INVESTIGATE] = DirectiveKind.INVESTIGATE


class Contain(_Directive):
    """Quiet diplomacy. Fails outright against a paranoid enemy."""

    kind: Literal[DirectiveKind.CONTAIN] = DirectiveKind.CONTAIN


class Leak(_Directive):
    """Go public."""

    kind: Literal[DirectiveKind.LEAK] = DirectiveKind.LEAK


class StandDown(_Directive):
    """Capitulate: large drops to tension, paranoia and stability."""

    kind: Literal[DirectiveKind.STAND_DOWN] = DirectiveKind.STAND_DOWN


class Decrypt(_TargetedDirective):
    """Decrypt a document by id."""

    kind: Literal[DirectiveKind.DECRYPT] = DirectiveKind.DECRYPT


class Analyze(_TargetedDirective):
    """Assess the source reliability of a document by id."""

    kind: Literal[DirectiveKind.ANALYZE] = DirectiveKind.ANALYZE


class Trace(_TargetedDirective):
    """Trace an active signal interrupt back to an advisor's devices."""

    kind: Literal[DirectiveKind.TRACE] = DirectiveKind.TRACE


class Consult(_TargetedDirective):
    """Ask an advisor for a recommendation."""

    kind: Literal[DirectiveKind.CONSULT] = DirectiveKind.CONSULT


class Interrogate(_TargetedDirective):
    """Put an advisor under hostile questioning."""

    kind: Literal[DirectiveKind.INTERROGATE] = DirectiveKind.INTERROGATE


Directive = Annotated[
    Union[
        Escalate,
        Investigate,
        Contain,
        Leak,
        StandDown,
        Decrypt,
        Analyze,
        Trace,
        Consult,
        Interrogate,
    ],
    Field(discriminator="kind"),
]

TARGETED_DIRECTIVES = (Decrypt, Analyze, Trace, Consult, Interrogate)

_directive_adapter: TypeAdapter[Directive] = TypeAdapter(Directive)


# =============================================================================
# Zero-argument directives
# =============================================================================

ESCALATE = Escalate()
INVESTIGATE = Investigate()
CONTAIN = Contain()
LEAK = Leak()
STAND_DOWN = StandDown()

MAJOR_DIRECTIVES = (ESCALATE, INVESTIGATE, CONTAIN, LEAK, STAND_DOWN)


def parse_directive(data: dict[str, Any]) -> Directive:
    """Build a directive from its serialized form.

    Args:
        data: Mapping with a ``kind`` and, for targeted kinds, a ``target``

    Returns:
        The matching directive model

    Raises:
        pydantic.ValidationError: If the kind is unknown or a target is missing
    """
    return _directive_adapter.validate_python(data)


def serialize_directive(directive: Directive) -> dict[str, Any]:
    """Serialize a directive to a JSON-friendly dictionary."""
    return directive.model_dump(mode="json")
