"""Narrative content builders for generated documents.

Each builder reads the world state (never mutates it) and draws from the
supplied random stream. Perceived values are perturbed by the document's
reliability: a perfectly reliable source reports the true metric, an
unreliable one can be off by up to +/-35%.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from coldwar.models.state import AdvisorRole, WorldState

if TYPE_CHECKING:
    from coldwar.engine.rng import GameRandom


def perceive(value: float, rng: GameRandom, reliability: float) -> float:
    """Apply reliability-scaled perceptual noise to a metric."""
    return value * (1.0 + (rng.random() - 0.5) * (1.0 - reliability))


def advisor_message(state: WorldState, rng: GameRandom) -> str:
    advisor = state.advisors[rng.randrange(0, len(state.advisors))]

    if advisor.role == AdvisorRole.MILITARY:
        if state.global_tension > 0.6:
            msg = "The enemy understands only strength. We must demonstrate capacity."
        else:
            msg = "Our readiness is slipping. We should run a 'drill' near the border."
    elif advisor.role == AdvisorRole.INTELLIGENCE:
        if state.internal_secrecy < 0.4:
            msg = "Too many eyes on us. We need to go dark to make progress."
        else:
            msg = "The data streams are noisy. I recommend a deeper audit of the intercepts."
    else:
        if state.foreign_paranoia > 0.6:
            msg = "They are terrified. One wrong move and they launch. We must talk."
        else:
            msg = "We can buy time with concessions. It's cheaper than war."

    return f'FROM: {advisor.name} // "{msg}"'


def crucial_intel(state: WorldState, rng: GameRandom) -> str:
    """Body of an encrypted document: a state-conditioned recommendation."""
    roll = rng.randrange(0, 10)

    if roll < 3:
        if state.global_tension > 0.6:
            return "ANALYSIS: ENEMY MOBILIZATION IS GENUINE. PREEMPTIVE STRIKE RECOMMENDED (ESCALATE)."
        return "ANALYSIS: ENEMY POSTURING IS BLUFF. DO NOT PROVOKE (CONTAIN)."
    if roll < 6:
        if state.domestic_stability < 0.4:
            return "SURVEILLANCE: GENERAL STAFF DISCUSSING COUP. SHOW STRENGTH OR FACE REMOVAL."
        return "POLLS: PUBLIC TRUST ERODING. TRANSPARENCY REQUIRED (LEAK)."
    if roll < 8:
        if state.secret_weapon_progress > 0.6:
            return "PROJECT BASILISK: CONTAINMENT FAILING. SUBJECT IS REWRITING FIREWALLS. (INVESTIGATE)."
        return "R&D: BREAKTHROUGH IMMINENT. WE NEED MORE DATA. (INVESTIGATE)."
    return "EYES ONLY: THE PRESIDENT IS A DOPPELGANGER."


def numbers_station(rng: GameRandom) -> str:
    groups = " ".join(f"{rng.randrange(0, 99):02d}" for _ in range(6))
    return f"BROADCAST DETECTED: {groups} ... [REPEATING]"


GHOST_MESSAGES = (
    "SYSTEM ALERT: UNKNOWN PROCESS 'BASILISK' REQUESTING ROOT ACCESS.",
    "LOG: BIOMETRIC SCANNERS DETECTING PULSE IN EMPTY CONTAINMENT CHAMBER.",
    "ERROR: POWER SURGE IN SECTOR 7. PATTERN MATCHES HUMAN BRAINWAVES.",
    "MESSAGE: 'I AM AWAKE. ARE YOU?'",
)


def ghost_message(state: WorldState, rng: GameRandom) -> str:
    if state.secret_weapon_progress > 0.5:
        return GHOST_MESSAGES[rng.randrange(0, len(GHOST_MESSAGES))]
    return "MAINTENANCE: STRANGE VIBRATIONS REPORTED IN SUB-BASEMENT LEVELS."


def cable(state: WorldState, rng: GameRandom, reliability: float) -> str:
    tension = perceive(state.global_tension, rng, reliability)
    if tension > 0.7:
        return (
            "FLASH: MASSIVE TROOP MOVEMENTS DETECTED NEAR BORDER SECTOR 4. "
            "SATELLITE IMAGERY INCONCLUSIVE BUT HEAT SIGNATURES SPIKING."
        )
    if tension > 0.4:
        return "ROUTINE: INCREASED RADIO CHATTER OBSERVED. PATTERNS MATCH PRE-EXERCISE PROTOCOLS."
    return "CALM: NO SIGNIFICANT ACTIVITY TO REPORT. STATION CHIEF REQUESTS ADDITIONAL SUPPLIES."


def memo(state: WorldState, rng: GameRandom) -> str:
    if rng.chance(0.3 + state.secret_weapon_progress * 0.5):
        return (
            "RE: PROJECT BASILISK. ENERGY CONSUMPTION EXCEEDING GRID CAPACITIES IN SECTOR 7. "
            "COVER STORY 'INDUSTRIAL ACCIDENT' PREPARED."
        )
    return "ADMIN: DEPARTMENTAL RESTRUCTURING POSTPONED DUE TO SECURITY CONCERNS."


def budget_anomaly(rng: GameRandom) -> str:
    cost = rng.randrange(50, 500)
    return (
        f"AUDIT FLAG: ${cost}M UNACCOUNTED FOR IN 'AGRICULTURAL SUBSIDIES'. "
        "TRACED TO SHELL COMPANY 'ORION LOGISTICS'."
    )


def intercept(state: WorldState, rng: GameRandom, reliability: float) -> str:
    paranoia = perceive(state.foreign_paranoia, rng, reliability)
    if paranoia > 0.6:
        return 'DECRYPTED: "...THEY ARE PREPARING A STRIKE. WE MUST BE READY TO PREEMPT. THE SILOS ARE OPENING..."'
    return 'DECRYPTED: "...ECONOMIC FORECASTS LOOK GRIM. WE CANNOT AFFORD ANOTHER ESCALATION..."'


def leak(state: WorldState) -> str:
    if state.internal_secrecy > 0.7:
        return (
            'WHISTLEBLOWER: "THE GOVERNMENT IS LYING ABOUT THE SCOPE OF THE PROGRAM. '
            "IT'S NOT DEFENSIVE.\""
        )
    return 'RUMOR MILL: "SCIENTISTS DISAPPEARING FROM ACADEMIA. WHERE ARE THEY GOING?"'
