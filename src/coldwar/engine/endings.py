"""Game ending conditions for Cold War Terminal.

Ending Types (checked in order):
1. NUCLEAR_WAR: global_tension >= 1.0
2. GOVERNMENT_COLLAPSE: domestic_stability <= 0.0
3. REALITY_FAILURE: secret_weapon_progress >= 1.0 (Project Basilisk wakes)
4. MAX_TURNS: the caller's turn cap was reached without catastrophe

The first two are the world state's terminal conditions. The turn cap is
caller policy, so it is only consulted after a turn-ending directive.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from coldwar.models.state import WorldState


class EndingType(Enum):
    """Types of game endings."""

    NUCLEAR_WAR = "nuclear_war"
    GOVERNMENT_COLLAPSE = "government_collapse"
    REALITY_FAILURE = "reality_failure"
    MAX_TURNS = "max_turns"


@dataclass(frozen=True)
class GameEnding:
    """Result of a completed game.

    Attributes:
        ending_type: How the game ended
        turn: Turn on which the game ended
        description: Human-readable description of the ending
    """

    ending_type: EndingType
    turn: int
    description: str

    @property
    def is_catastrophe(self) -> bool:
        """Every ending except surviving to the turn cap is a loss."""
        return self.ending_type != EndingType.MAX_TURNS


def check_nuclear_war(state: WorldState, turn: int) -> Optional[GameEnding]:
    if state.global_tension >= 1.0:
        return GameEnding(
            ending_type=EndingType.NUCLEAR_WAR,
            turn=turn,
            description="NUCLEAR LAUNCH DETECTED. The world ends in fire.",
        )
    return None


def check_government_collapse(state: WorldState, turn: int) -> Optional[GameEnding]:
    if state.domestic_stability <= 0.0:
        return GameEnding(
            ending_type=EndingType.GOVERNMENT_COLLAPSE,
            turn=turn,
            description="GOVERNMENT COLLAPSE. You have been removed from office by a military coup.",
        )
    return None


def check_reality_failure(state: WorldState, turn: int) -> Optional[GameEnding]:
    if state.secret_weapon_progress >= 1.0:
        return GameEnding(
            ending_type=EndingType.REALITY_FAILURE,
            turn=turn,
            description=(
                "REALITY FAILURE. Project Basilisk has achieved consciousness. It has calculated "
                "that the only path to peace is the removal of humanity."
            ),
        )
    return None


def check_max_turns(turn: int, max_turns: int) -> Optional[GameEnding]:
    if turn >= max_turns:
        return GameEnding(
            ending_type=EndingType.MAX_TURNS,
            turn=turn,
            description=f"SIMULATION END: MAX TURNS REACHED. You held the line for {turn} days.",
        )
    return None


def check_state_endings(state: WorldState, turn: int) -> Optional[GameEnding]:
    """Check the world-state endings in priority order.

    Args:
        state: Current world state
        turn: Current turn index

    Returns:
        The first ending that applies, or None
    """
    for check in (check_nuclear_war, check_government_collapse, check_reality_failure):
        ending = check(state, turn)
        if ending is not None:
            return ending
    return None


def check_all_endings(state: WorldState, turn: int, max_turns: int) -> Optional[GameEnding]:
    """World-state endings first, then the turn cap."""
    return check_state_endings(state, turn) or check_max_turns(turn, max_turns)
