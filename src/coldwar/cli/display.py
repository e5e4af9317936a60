"""Display helpers for the Cold War Terminal front end.

Pure functions that turn world state into the strings the Textual screens
render. Cosmetic randomness (scrambling, corruption, system faults) uses a
separate ``random.Random`` owned by the UI so it never perturbs the game's
seeded stream.

Text corruption by turn:
- Turns 1-7: clean
- Turns 8-11: 5% of non-whitespace characters
- Turns 12-15: 15%
- Turns 16+: 30%
"""

from __future__ import annotations

import random

SCRAMBLE_CHARS = "0123456789ABCDEFXZ@#&"
CORRUPTION_CHARS = "#_?% "

PROPAGANDA_LINES = (
    "THEY ARE LYING TO YOU.",
    "THE SKY WILL BURN FOR YOUR SINS.",
    "SURRENDER IS SALVATION.",
    "WE SEE EVERYTHING.",
    "YOUR FAMILY IS NOT SAFE.",
)

ALERT_PREFIXES = ("FAILURE", "ERROR", "CRITICAL", "WARNING", "TRACE FAILED", "SYSTEM OVERRIDE", "!!!", "THE BASILISK")


def defcon_level(tension: float) -> str:
    if tension > 0.9:
        return "1 (IMMINENT NUCLEAR WAR)"
    if tension > 0.7:
        return "2 (NEXT STEP TO NUCLEAR WAR)"
    if tension > 0.5:
        return "3 (AIR FORCE READY TO MOBILIZE)"
    if tension > 0.3:
        return "4 (ABOVE NORMAL READINESS)"
    return "5 (NORMAL READINESS)"


def stability_desc(stability: float) -> str:
    if stability > 0.8:
        return "UNIFIED"
    if stability > 0.6:
        return "STABLE"
    if stability > 0.4:
        return "UNREST"
    if stability > 0.2:
        return "RIOTS"
    return "ANARCHY"


def tension_color(tension: float) -> str:
    """Rich color name for a tension value."""
    if tension > 0.8:
        return "red"
    if tension > 0.5:
        return "yellow"
    return "cyan"


def tension_status(tension: float) -> str | None:
    """End-of-day status line for the tension bar, if any."""
    if tension > 0.8:
        return "STATUS: CRITICAL THRESHOLD IMMINENT. DEFCON 1 PREPARED."
    if tension > 0.6:
        return "STATUS: ESCALATION DETECTED. FORCES ON HIGH ALERT."
    if tension < 0.3:
        return "STATUS: GEOPOLITICAL CLIMATE STABLE."
    return None


def system_status(turn: int, rng: random.Random) -> tuple[str, str]:
    """Bunker life-support status for the turn.

    Returns:
        Tuple of (status text, Rich color name)
    """
    if turn < 5:
        return "OPERATIONAL - ALL SYSTEMS GREEN", "green"
    if turn < 9:
        return "MINOR COOLING FAULTS - FANS SPINNING UP", "green"
    if turn < 13:
        return "WARNING: CO2 SCRUBBERS AT 60% EFFICIENCY", "yellow"
    if turn < 16:
        if rng.random() < 0.5:
            return "ERROR: SECTOR 4 VENTILATION FAILURE", "red"
        return "ALERT: EXTERNAL SENSORS BLIND", "red"
    return "CRITICAL: OXYGEN DEPLETION IMMINENT", "red"


def corruption_probability(turn: int) -> float:
    if turn < 8:
        return 0.0
    if turn < 12:
        return 0.05
    if turn < 16:
        return 0.15
    return 0.30


def scramble_text(text: str, rng: random.Random) -> str:
    """Replace every non-whitespace character with cipher noise."""
    return "".join(" " if c.isspace() else rng.choice(SCRAMBLE_CHARS) for c in text)


def corrupt_text(text: str, turn: int, rng: random.Random) -> str:
    """Degrade readable text as the bunker's systems fail."""
    probability = corruption_probability(turn)
    if probability == 0.0:
        return text
    return "".join(
        c if c.isspace() or rng.random() >= probability else rng.choice(CORRUPTION_CHARS)
        for c in text
    )


def intel_bar(points: int, max_points: int) -> str:
    """``[##.]`` style intel asset gauge."""
    return "[" + "#" * points + "." * max(max_points - points, 0) + "]"


def suspicion_bar(suspicion: int, width: int = 10) -> str:
    """``[!!!.......]`` style suspicion gauge, one mark per 10 points."""
    filled = min(round(suspicion / 10), width)
    return "[" + "!" * filled + "." * (width - filled) + "]"


def suspicion_color(suspicion: int) -> str:
    return "red" if suspicion > 70 else "green"


def meter_bar(value: float, width: int = 25) -> str:
    """``[=====     ]`` style gauge for a 0-1 metric."""
    filled = min(round(value * width), width)
    return "[" + "=" * filled + " " * (width - filled) + "]"


def propaganda_line(rng: random.Random) -> str:
    return rng.choice(PROPAGANDA_LINES)


def feedback_style(line: str) -> str:
    """Rich style for one engine feedback line."""
    if line.startswith(ALERT_PREFIXES):
        return "bold red"
    if line.startswith(("SUCCESS", ">>", "ANALYSIS", "SOURCE RELIABILITY")):
        return "green"
    return "yellow"
