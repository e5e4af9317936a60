"""Advisor behaviour for Cold War Terminal.

Covers the parts of the hidden-role subsystem that depend on who an advisor
is: resolving free-text references to an advisor, the advice they give when
consulted, and how they respond to interrogation.

Loyal advisors push the directive that stabilizes the metric their
portfolio cares about. The mole gives advice that serves the other side:
escalation when escalation is most dangerous, capitulation when the country
should be alert.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from coldwar import parameters as p
from coldwar.models.state import Advisor, AdvisorRole, WorldState


def find_advisor(state: WorldState, reference: str) -> Optional[Advisor]:
    """Resolve a free-text reference to an advisor.

    Matches case-insensitively as a substring of the advisor's name or role
    label, walking the roster in declaration order. When several advisors
    match, the first one wins.

    Args:
        state: World state holding the roster
        reference: Operator-supplied text, e.g. "volkov" or "intel"

    Returns:
        The matching advisor, or None if nobody matches
    """
    return next((a for a in state.advisors if a.matches(reference)), None)


def consult_advice(advisor: Advisor, state: WorldState) -> str:
    """Advice text given by an advisor for the current state."""
    if advisor.is_mole:
        return _mole_advice(advisor.role, state)
    return _loyal_advice(advisor.role, state)


def _mole_advice(role: AdvisorRole, state: WorldState) -> str:
    if role == AdvisorRole.MILITARY:
        if state.global_tension > 0.7:
            return "We have the advantage! Strike now before they mobilize further! (Recommend: ESCALATE)"
        return "Intelligence is flawed. They are just exercises. We should pull back. (Recommend: STAND DOWN)"
    if role == AdvisorRole.INTELLIGENCE:
        if state.internal_secrecy < 0.4:
            return "The leaks are useful. They confuse the enemy. Let them flow. (Recommend: LEAK)"
        return "Our own agents are the problem. Purge the departments. (Recommend: INVESTIGATE)"
    if state.foreign_paranoia > 0.6:
        return "They are bluffing. Ignore their threats. (Recommend: CONTAIN)"
    return "We should apologize for the border incident immediately. (Recommend: STAND DOWN)"


def _loyal_advice(role: AdvisorRole, state: WorldState) -> str:
    if role == AdvisorRole.MILITARY:
        if state.global_tension > 0.8:
            return "Situation critical. We must show resolve but avoid a first strike. (Recommend: CONTAIN)"
        if state.foreign_paranoia > 0.7:
            return "They are scared. Reducing readiness might calm them. (Recommend: STAND DOWN)"
        return "We should test their response times. (Recommend: INVESTIGATE)"
    if role == AdvisorRole.INTELLIGENCE:
        if state.secret_weapon_progress > 0.7:
            return "The Project is becoming unstable. We need to secure the facility. (Recommend: INVESTIGATE)"
        if state.internal_secrecy < 0.5:
            return "Too many leaks. We need to plug the holes. (Recommend: INVESTIGATE)"
        return "We can use the confusion to our advantage. (Recommend: LEAK)"
    if state.global_tension > 0.6:
        return "We need a backchannel. I can arrange a meeting. (Recommend: CONTAIN)"
    if state.domestic_stability < 0.4:
        return "The people need to know we are working for peace. (Recommend: LEAK)"
    return "Maintain current diplomatic pressure. (Recommend: WAIT)"


@dataclass(frozen=True)
class DistressResponse:
    """A loyal advisor's reaction to interrogation and its side effect.

    Attributes:
        line: What the advisor says
        metric: WorldState field that is nudged
        delta: Amount added to that field
    """

    line: str
    metric: str
    delta: float


DISTRESS_BY_ROLE = {
    AdvisorRole.MILITARY: DistressResponse(
        line="\"You dare question my loyalty? The officer corps will hear of this.\"",
        metric="domestic_stability",
        delta=p.INTERROGATE_MILITARY_STABILITY,
    ),
    AdvisorRole.INTELLIGENCE: DistressResponse(
        line="\"Every hour I spend in this room is an hour my networks go unwatched.\"",
        metric="internal_secrecy",
        delta=p.INTERROGATE_INTELLIGENCE_SECRECY,
    ),
    AdvisorRole.DIPLOMATIC: DistressResponse(
        line="\"Word of this will reach the embassies. They will think we are purging.\"",
        metric="foreign_paranoia",
        delta=p.INTERROGATE_DIPLOMATIC_PARANOIA,
    ),
}

DECEPTION_LINE = "POLYGRAPH: ELEVATED RESPONSE ON KEY QUESTIONS. DECEPTION INDICATED."
DEFLECTION_LINE = "\"I have served this office for twenty years. Ask me something worth answering.\""


def distress_response(advisor: Advisor) -> DistressResponse:
    """Role-specific reaction of a loyal advisor under interrogation."""
    return DISTRESS_BY_ROLE[advisor.role]
