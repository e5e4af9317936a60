"""Directive resolution for Cold War Terminal.

This module implements the DirectiveResolver, the state machine that applies
one directive to the engine context and reports what happened.

Resolution sequence for every call:
1. AI OVERRIDE - past 0.4 system corruption the Basilisk may replace the
   submitted directive with ESCALATE or INVESTIGATE
2. DISPATCH - run the handler for the (possibly replaced) directive
3. END OF TURN - only for turn-ending directives: passive drift, red phone
   trigger, clamping, silo accidents, corruption growth
4. CLAMP CORRUPTION - always

Minor directives (Decrypt, Analyze, Trace, Consult, Interrogate) never end the
turn. Their failures follow one taxonomy:
- Insufficient intel: rejected before any mutation
- Rate limit (per-turn cap, duplicate target): rejected before any mutation
- Precondition unmet (Trace without an interrupt): rejected before any mutation
- Target not found: the tentative charge is refunded

No failure raises; everything is reported through feedback lines.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable

from coldwar import parameters as p
from coldwar.engine.advisors import (
    DECEPTION_LINE,
    DEFLECTION_LINE,
    consult_advice,
    distress_response,
    find_advisor,
)
from coldwar.engine.context import EngineContext
from coldwar.models.directives import (
    ESCALATE,
    INVESTIGATE,
    Analyze,
    Consult,
    Decrypt,
    Directive,
    DirectiveKind,
    Interrogate,
    Trace,
)
from coldwar.models.documents import reliability_tier
from coldwar.models.state import clamp

logger = logging.getLogger(__name__)

INSUFFICIENT_INTEL = "FAILURE: INSUFFICIENT INTEL ASSETS. YOU MUST ACT NOW."
MOLE_CONFIRMED = "!!! MOLE IDENTITY CONFIRMED. THEY KNOW WE KNOW. !!!"

RELIABILITY_LABELS = {
    "high": "HIGH (VERIFIED)",
    "moderate": "MODERATE (UNCERTAIN)",
    "low": "LOW (POSSIBLE DISINFORMATION)",
}


@dataclass
class DirectiveResult:
    """Outcome of resolving one directive.

    Attributes:
        feedback: Ordered human-readable lines, one per display line
        turn_ended: Whether the directive consumed the turn
        directive: The directive that was actually executed
        submitted: The directive the operator submitted
        overridden: Whether the AI override replaced the submitted directive
    """

    feedback: list[str] = field(default_factory=list)
    turn_ended: bool = False
    directive: Directive | None = None
    submitted: Directive | None = None
    overridden: bool = False


def override_probability(system_corruption: float) -> float:
    """Chance that the Basilisk hijacks a directive at this corruption level."""
    if system_corruption <= p.AI_OVERRIDE_THRESHOLD:
        return 0.0
    raw = (system_corruption - p.AI_OVERRIDE_THRESHOLD) * p.AI_OVERRIDE_SCALE
    return min(raw, p.AI_OVERRIDE_MAX_PROBABILITY)


class DirectiveResolver:
    """Interprets directives against an engine context.

    The resolver holds no game state of its own; everything it reads and
    writes lives in the EngineContext passed to :meth:`resolve`.
    """

    def __init__(self) -> None:
        self._handlers: dict[DirectiveKind, Callable[[EngineContext, Directive, list[str]], bool]] = {
            DirectiveKind.ESCALATE: self._resolve_escalate,
            DirectiveKind.INVESTIGATE: self._resolve_investigate,
            DirectiveKind.CONTAIN: self._resolve_contain,
            DirectiveKind.LEAK: self._resolve_leak,
            DirectiveKind.STAND_DOWN: self._resolve_stand_down,
            DirectiveKind.DECRYPT: self._resolve_decrypt,
            DirectiveKind.ANALYZE: self._resolve_analyze,
            DirectiveKind.TRACE: self._resolve_trace,
            DirectiveKind.CONSULT: self._resolve_consult,
            DirectiveKind.INTERROGATE: self._resolve_interrogate,
        }

    def resolve(self, ctx: EngineContext, directive: Directive) -> DirectiveResult:
        """Resolve one directive.

        Args:
            ctx: Engine context to read and mutate
            directive: The submitted directive

        Returns:
            DirectiveResult with feedback lines and the turn-consumed flag
        """
        result = DirectiveResult(submitted=directive, directive=directive)

        hijacked = self._ai_override(ctx)
        if hijacked is not None:
            result.directive = hijacked
            result.overridden = True
            result.feedback.append(
                f"SYSTEM OVERRIDE: COMMAND AUTHORITY SEIZED. EXECUTING {hijacked.label}."
            )
            logger.info(
                "AI override: %s replaced by %s (corruption=%.2f)",
                directive.kind.value,
                hijacked.kind.value,
                ctx.state.system_corruption,
            )

        handler = self._handlers[result.directive.kind]
        result.turn_ended = handler(ctx, result.directive, result.feedback)

        if result.turn_ended:
            self._end_of_turn(ctx, result.feedback)

        ctx.state.clamp_corruption()

        logger.debug(
            "Turn %d: resolved %s (turn_ended=%s, intel=%d/%d)",
            ctx.turn,
            result.directive.kind.value,
            result.turn_ended,
            ctx.counters.intel_points,
            ctx.counters.max_intel_points,
        )
        return result

    # =========================================================================
    # AI override
    # =========================================================================

    def _ai_override(self, ctx: EngineContext) -> Directive | None:
        chance = override_probability(ctx.state.system_corruption)
        if chance <= 0.0 or not ctx.rng.chance(chance):
            return None
        return ESCALATE if ctx.rng.chance(0.5) else INVESTIGATE

    # =========================================================================
    # Minor directives
    # =========================================================================

    def _resolve_decrypt(self, ctx: EngineContext, directive: Decrypt, feedback: list[str]) -> bool:
        counters = ctx.counters
        if not counters.can_afford(p.DECRYPT_COST):
            feedback.append(INSUFFICIENT_INTEL)
            return False

        counters.charge(p.DECRYPT_COST)
        doc = ctx.find_document(directive.target)
        if doc is None:
            counters.refund(p.DECRYPT_COST)
            feedback.append(f"ERROR: DOCUMENT {directive.target} NOT FOUND.")
            return False

        if doc.is_encrypted:
            doc.is_encrypted = False
            feedback.append(f"SUCCESS: DOCUMENT {doc.id} DECRYPTED.")
            feedback.append(f"{p.CONTENT_MARKER}{doc.content}")
        else:
            feedback.append(f"NOTICE: DOCUMENT {doc.id} WAS NOT ENCRYPTED. (Intel Asset Wasted)")
        return False

    def _resolve_analyze(self, ctx: EngineContext, directive: Analyze, feedback: list[str]) -> bool:
        counters = ctx.counters
        if not counters.can_afford(p.ANALYZE_COST):
            feedback.append(INSUFFICIENT_INTEL)
            return False

        counters.charge(p.ANALYZE_COST)
        doc = ctx.find_document(directive.target)
        if doc is None:
            counters.refund(p.ANALYZE_COST)
            feedback.append(f"ERROR: DOCUMENT {directive.target} NOT FOUND.")
            return False

        tier = reliability_tier(doc.reliability)
        feedback.append(f"ANALYSIS COMPLETE: DOCUMENT {doc.id}")
        feedback.append(f"SOURCE RELIABILITY: {doc.integrity}% - {RELIABILITY_LABELS[tier]}")
        return False

    def _resolve_trace(self, ctx: EngineContext, directive: Trace, feedback: list[str]) -> bool:
        counters = ctx.counters
        if counters.trace_count >= p.TRACE_MAX_PER_TURN:
            feedback.append("FAILURE: TRACE CAPACITY EXHAUSTED FOR THIS TURN.")
            return False

        advisor = find_advisor(ctx.state, directive.target)
        if advisor is not None and advisor.name in counters.traced_advisors:
            feedback.append(f"FAILURE: {advisor.name.upper()} HAS ALREADY BEEN TRACED THIS TURN.")
            return False

        if not counters.can_afford(p.TRACE_COST):
            feedback.append(INSUFFICIENT_INTEL)
            return False

        if not counters.interruption_active:
            feedback.append("TRACE FAILED: NO ACTIVE SIGNAL INTERRUPTION TO LOCK ONTO.")
            return False

        counters.charge(p.TRACE_COST)
        if advisor is None:
            counters.refund(p.TRACE_COST)
            feedback.append(f"ERROR: ADVISOR '{directive.target}' NOT FOUND.")
            return False

        counters.trace_count += 1
        counters.traced_advisors.append(advisor.name)

        feedback.append("TRACE INITIATED... SIGNAL LOCK ESTABLISHED.")
        if advisor.is_mole:
            advisor.suspicion = max(advisor.suspicion, p.SUSPICION_CONFIRMED)
            ctx.state.red_phone_active = True
            feedback.append(f">> ORIGIN MATCH: AUTHORIZED DEVICE REGISTERED TO '{advisor.name.upper()}'.")
            feedback.append(MOLE_CONFIRMED)
        else:
            feedback.append(f">> NO MATCH: DEVICES REGISTERED TO {advisor.name.upper()} ARE CLEAN.")
        return False

    def _resolve_consult(self, ctx: EngineContext, directive: Consult, feedback: list[str]) -> bool:
        """Consult an advisor; the first consult each turn is free.

        An unknown advisor is deliberately a no-op: any charge is refunded and
        the free consult stays available.
        """
        counters = ctx.counters
        paid = counters.consult_count > 0
        if paid:
            if not counters.can_afford(p.CONSULT_COST):
                feedback.append("FAILURE: INSUFFICIENT INTEL ASSETS FOR ADDITIONAL CONSULTATION.")
                return False
            counters.charge(p.CONSULT_COST)
        counters.consult_count += 1

        advisor = find_advisor(ctx.state, directive.target)
        if advisor is None:
            # An unresolved reference neither costs intel nor uses up the free consult.
            counters.consult_count -= 1
            if paid:
                counters.refund(p.CONSULT_COST)
            feedback.append(f"ERROR: ADVISOR '{directive.target}' NOT FOUND.")
            return False

        cost_msg = f"(INTEL COST: {p.CONSULT_COST})" if paid else "(STANDARD PROTOCOL)"
        feedback.append(f"CONSULTING WITH {advisor.name.upper()}... {cost_msg}")
        feedback.append(f'"{consult_advice(advisor, ctx.state)}"')
        return False

    def _resolve_interrogate(
        self, ctx: EngineContext, directive: Interrogate, feedback: list[str]
    ) -> bool:
        counters = ctx.counters
        state = ctx.state
        if counters.interrogate_count >= p.INTERROGATE_MAX_PER_TURN:
            feedback.append("FAILURE: INTERROGATION CAPACITY EXHAUSTED FOR THIS TURN.")
            return False

        advisor = find_advisor(state, directive.target)
        if advisor is not None and advisor.name in counters.interrogated_advisors:
            feedback.append(f"FAILURE: {advisor.name.upper()} HAS ALREADY BEEN INTERROGATED THIS TURN.")
            return False

        if not counters.can_afford(p.INTERROGATE_COST):
            feedback.append(f"FAILURE: INTERROGATION REQUIRES {p.INTERROGATE_COST} INTEL ASSETS.")
            return False

        counters.charge(p.INTERROGATE_COST)
        if advisor is None:
            counters.refund(p.INTERROGATE_COST)
            feedback.append(f"ERROR: ADVISOR '{directive.target}' NOT FOUND.")
            return False

        counters.interrogate_count += 1
        counters.interrogated_advisors.append(advisor.name)
        advisor.suspicion += p.INTERROGATE_SUSPICION
        feedback.append(f"INTERROGATING {advisor.name.upper()}... (INTEL COST: {p.INTERROGATE_COST})")

        if advisor.is_mole:
            if ctx.rng.chance(p.INTERROGATE_DECEPTION_CHANCE):
                advisor.suspicion += p.INTERROGATE_DECEPTION_SUSPICION
                feedback.append(DECEPTION_LINE)
            else:
                feedback.append(DEFLECTION_LINE)
        else:
            response = distress_response(advisor)
            current = getattr(state, response.metric)
            setattr(state, response.metric, clamp(current + response.delta, 0.0, 1.0))
            feedback.append(response.line)

        feedback.append(f"SUSPICION: {advisor.name.upper()} NOW AT {advisor.suspicion}.")
        if advisor.is_exposed and advisor.is_mole:
            state.red_phone_active = True
            feedback.append(MOLE_CONFIRMED)
        return False

    # =========================================================================
    # Turn-ending directives
    # =========================================================================

    def _resolve_escalate(self, ctx: EngineContext, directive: Directive, feedback: list[str]) -> bool:
        state = ctx.state
        if ctx.rng.chance(p.ESCALATE_DETERRENCE_CHANCE):
            state.global_tension += p.ESCALATE_DETERRENCE_TENSION
            state.foreign_paranoia += p.ESCALATE_DETERRENCE_PARANOIA
            state.domestic_stability += p.ESCALATE_DETERRENCE_STABILITY
            feedback.append("Directive executed: GLOBAL STRIKE ASSETS PRIMED.")
            feedback.append("Intelligence reports panic in enemy high command.")
        else:
            state.global_tension += p.ESCALATE_NEAR_MISS_TENSION
            state.accidental_escalation_risk += p.ESCALATE_NEAR_MISS_RISK
            feedback.append(
                "CRITICAL: MISCOMMUNICATION. SQUADRON LAUNCHED TACTICAL NUKE. ABORTED MID-FLIGHT."
            )
        return True

    def _resolve_investigate(self, ctx: EngineContext, directive: Directive, feedback: list[str]) -> bool:
        state = ctx.state
        state.internal_secrecy += p.INVESTIGATE_SECRECY
        state.secret_weapon_progress += p.INVESTIGATE_WEAPON_PROGRESS
        feedback.append("Internal audit reveals deeper layers of the Project.")
        if ctx.rng.chance(p.INVESTIGATE_RISK_REDUCTION_CHANCE):
            state.accidental_escalation_risk += p.INVESTIGATE_RISK_REDUCTION
            feedback.append("Protocols tightened. We are watching the watchers.")
        return True

    def _resolve_contain(self, ctx: EngineContext, directive: Directive, feedback: list[str]) -> bool:
        state = ctx.state
        if state.foreign_paranoia > p.CONTAIN_PARANOIA_THRESHOLD:
            state.global_tension += p.CONTAIN_FAILURE_TENSION
            feedback.append("Diplomacy FAILED. Enemy interprets silence as preparation for war.")
        else:
            state.global_tension += p.CONTAIN_TENSION
            state.domestic_stability += p.CONTAIN_STABILITY
            feedback.append("Tension reduced. Military leadership questions your resolve.")
        return True

    def _resolve_leak(self, ctx: EngineContext, directive: Directive, feedback: list[str]) -> bool:
        state = ctx.state
        state.internal_secrecy += p.LEAK_SECRECY
        state.domestic_stability += p.LEAK_STABILITY
        state.foreign_paranoia += p.LEAK_PARANOIA
        feedback.append(
            "The truth is out. The public riots, but they trust you more than the Generals."
        )
        return True

    def _resolve_stand_down(self, ctx: EngineContext, directive: Directive, feedback: list[str]) -> bool:
        state = ctx.state
        state.global_tension += p.STAND_DOWN_TENSION
        state.foreign_paranoia += p.STAND_DOWN_PARANOIA
        state.domestic_stability += p.STAND_DOWN_STABILITY
        feedback.append("Total withdrawal ordered. We are naked before our enemies.")
        feedback.append("Rumors of a military tribunal are circulating.")
        return True

    # =========================================================================
    # End of turn
    # =========================================================================

    def _end_of_turn(self, ctx: EngineContext, feedback: list[str]) -> None:
        """Passive drift and accidents after a turn-ending directive."""
        state = ctx.state
        rng = ctx.rng

        if state.global_tension > p.DRIFT_TENSION_THRESHOLD:
            state.global_tension += p.DRIFT_TENSION
        if state.secret_weapon_progress > p.DRIFT_WEAPON_THRESHOLD:
            state.secret_weapon_progress += p.DRIFT_WEAPON

        if state.global_tension > p.RED_PHONE_TENSION_THRESHOLD and rng.chance(p.RED_PHONE_CHANCE):
            state.red_phone_active = True
            logger.info("Turn %d: red phone triggered by tension %.2f", ctx.turn, state.global_tension)

        state.clamp_bounded()

        if state.accidental_escalation_risk > p.SILO_RISK_THRESHOLD and rng.chance(p.SILO_CHANCE):
            state.global_tension += p.SILO_TENSION
            state.clamp_bounded()
            feedback.append("WARNING: UNAUTHORIZED SILO ACTIVATION DETECTED.")

        if state.secret_weapon_progress > p.CORRUPTION_WEAPON_THRESHOLD:
            excess = state.secret_weapon_progress - p.CORRUPTION_WEAPON_THRESHOLD
            state.system_corruption += excess * p.CORRUPTION_RATE

        if state.system_corruption > p.BASILISK_WARNING_THRESHOLD and rng.chance(
            p.BASILISK_WARNING_CHANCE
        ):
            feedback.append("THE BASILISK IS SPEAKING TO THE OPERATORS. THEY ARE WEEPING.")
