"""Red phone crisis resolution for Cold War Terminal.

A crisis pre-empts normal turn flow whenever ``red_phone_active`` is set,
either by mole confirmation (Trace/Interrogate) or by the high-tension random
trigger at the end of a turn. Two mutually exclusive variants exist:

MOLE CONFRONTATION (some advisor has suspicion >= 100):
    execute  -> stability +0.3, paranoia +0.2
    anything else ("turn") -> tension -0.3, secrecy -0.1, risk +0.1
    Either way the exposed advisor's suspicion resets to 0 and is_mole clears.
    No replacement mole is ever assigned.

NUCLEAR STANDOFF (otherwise):
    deny     -> tension forced to 1.0 if paranoia > 0.7, else tension -0.2
    admit    -> tension -0.5, stability -0.3
    threaten or anything unrecognized -> tension forced to 1.0

Choices are also accepted by their menu number ("1", "2", "3").
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from coldwar import parameters as p
from coldwar.engine.context import EngineContext
from coldwar.models.state import Advisor

logger = logging.getLogger(__name__)


class CrisisKind(Enum):
    """Crisis variants."""

    MOLE_CONFRONTATION = "mole_confrontation"
    NUCLEAR_STANDOFF = "nuclear_standoff"


@dataclass(frozen=True)
class CrisisChoice:
    """One option offered during a crisis.

    Attributes:
        key: Canonical response keyword
        label: Short button label
        description: Consequence hint shown to the operator
    """

    key: str
    label: str
    description: str


MOLE_CHOICES = (
    CrisisChoice("execute", "EXECUTE", "Silence the traitor. Immediate stability boost, high paranoia."),
    CrisisChoice("turn", "TURN", "Force them to double-agent. High risk, high intel reward."),
)

STANDOFF_CHOICES = (
    CrisisChoice("deny", "DENY", "Claim it's a training exercise."),
    CrisisChoice("admit", "ADMIT", "Tell the truth, ask for de-escalation."),
    CrisisChoice("threaten", "THREATEN", "Tell them to back down or else."),
)


@dataclass
class CrisisPrompt:
    """What the operator sees when the red phone rings.

    Attributes:
        kind: Crisis variant
        lines: Caller dialogue, in order
        choices: Offered responses, in menu order
        advisor_name: Exposed advisor for a mole confrontation
    """

    kind: CrisisKind
    lines: list[str]
    choices: tuple[CrisisChoice, ...]
    advisor_name: Optional[str] = None


@dataclass
class CrisisOutcome:
    """Result of resolving a crisis.

    Attributes:
        kind: Crisis variant that was resolved
        choice: Canonical key of the response taken
        feedback: Narrative lines describing the consequence
        advisor_name: Exposed advisor for a mole confrontation
    """

    kind: CrisisKind
    choice: str
    feedback: list[str] = field(default_factory=list)
    advisor_name: Optional[str] = None


def normalize_response(response: str, choices: tuple[CrisisChoice, ...]) -> Optional[str]:
    """Map raw operator input to a choice key, or None if unrecognized."""
    text = response.strip().lower()
    for index, choice in enumerate(choices, start=1):
        if text in (choice.key, str(index)):
            return choice.key
    return None


class CrisisResolver:
    """Presents and resolves red phone crises against an engine context."""

    def classify(self, ctx: EngineContext) -> CrisisKind:
        if ctx.state.exposed_advisor() is not None:
            return CrisisKind.MOLE_CONFRONTATION
        return CrisisKind.NUCLEAR_STANDOFF

    def open(self, ctx: EngineContext) -> CrisisPrompt:
        """Build the prompt for the pending crisis.

        Raises:
            ValueError: If no crisis is pending
        """
        if not ctx.state.red_phone_active:
            raise ValueError("No red phone crisis is pending")

        kind = self.classify(ctx)
        logger.info("Turn %d: red phone crisis opened (%s)", ctx.turn, kind.value)
        if kind == CrisisKind.MOLE_CONFRONTATION:
            advisor = ctx.state.exposed_advisor()
            return CrisisPrompt(
                kind=kind,
                lines=[
                    f"VOICE ({advisor.name.upper()}): So... you figured it out. Smart.",
                    "VOICE: I am doing this for the greater good. The war is inevitable. "
                    "I just wanted to finish it quickly.",
                ],
                choices=MOLE_CHOICES,
                advisor_name=advisor.name,
            )
        return CrisisPrompt(
            kind=kind,
            lines=[
                "VOICE: PREMIER CHERNOV HERE. WE SEE YOUR BOMBERS. EXPLAIN YOURSELF OR WE LAUNCH.",
            ],
            choices=STANDOFF_CHOICES,
        )

    def resolve(self, ctx: EngineContext, response: str) -> CrisisOutcome:
        """Apply the operator's response and clear the crisis flag.

        Args:
            ctx: Engine context to mutate
            response: Raw operator input

        Returns:
            CrisisOutcome describing what happened

        Raises:
            ValueError: If no crisis is pending
        """
        if not ctx.state.red_phone_active:
            raise ValueError("No red phone crisis is pending")

        if self.classify(ctx) == CrisisKind.MOLE_CONFRONTATION:
            outcome = self._resolve_mole(ctx, response)
        else:
            outcome = self._resolve_standoff(ctx, response)

        ctx.state.clamp_bounded()
        ctx.state.red_phone_active = False
        logger.info("Turn %d: crisis resolved (%s -> %s)", ctx.turn, outcome.kind.value, outcome.choice)
        return outcome

    def _resolve_mole(self, ctx: EngineContext, response: str) -> CrisisOutcome:
        state = ctx.state
        advisor: Advisor = state.exposed_advisor()
        choice = normalize_response(response, MOLE_CHOICES) or "turn"
        outcome = CrisisOutcome(
            kind=CrisisKind.MOLE_CONFRONTATION,
            choice=choice,
            advisor_name=advisor.name,
        )

        if choice == "execute":
            state.domestic_stability += p.CRISIS_EXECUTE_STABILITY
            state.foreign_paranoia += p.CRISIS_EXECUTE_PARANOIA
            outcome.feedback.append("COMMAND: SECURITY TEAM DISPATCHED. TARGET NEUTRALIZED.")
        else:
            state.global_tension += p.CRISIS_TURN_TENSION
            state.internal_secrecy += p.CRISIS_TURN_SECRECY
            state.accidental_escalation_risk += p.CRISIS_TURN_RISK
            outcome.feedback.append(
                "COMMAND: ASSET FLIPPED. THEY ARE FEEDING DISINFORMATION TO THE ENEMY."
            )

        advisor.suspicion = 0
        advisor.is_mole = False
        return outcome

    def _resolve_standoff(self, ctx: EngineContext, response: str) -> CrisisOutcome:
        state = ctx.state
        choice = normalize_response(response, STANDOFF_CHOICES)
        outcome = CrisisOutcome(kind=CrisisKind.NUCLEAR_STANDOFF, choice=choice or "silence")

        if choice == "deny":
            if state.foreign_paranoia > p.CRISIS_DENY_PARANOIA_THRESHOLD:
                state.global_tension = 1.0
                outcome.feedback.append("CHERNOV: LIAR! WE ARE LAUNCHING!")
            else:
                state.global_tension += p.CRISIS_DENY_TENSION
                outcome.feedback.append("CHERNOV: ...Fine. Turn them around. Now.")
        elif choice == "admit":
            state.global_tension += p.CRISIS_ADMIT_TENSION
            state.domestic_stability += p.CRISIS_ADMIT_STABILITY
            outcome.feedback.append(
                "CHERNOV: A bold admission. We will stand down, but there will be consequences."
            )
        elif choice == "threaten":
            state.global_tension = 1.0
            outcome.feedback.append("CHERNOV: THEN LET IT END!")
        else:
            state.global_tension = 1.0
            outcome.feedback.append("CHERNOV: YOUR SILENCE IS DAMNING. LAUNCHING!")
        return outcome
