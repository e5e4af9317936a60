"""Game trace logging for Cold War Terminal.

Records all game events for debugging and analysis:
- Directives submitted and executed (including AI overrides)
- World-state changes per directive
- Red phone crises
- Game outcome

A trace that cannot be written is logged and skipped; it never stops a game.
"""

import json
import logging
from dataclasses import asdict, dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any

from coldwar.engine.crisis import CrisisOutcome
from coldwar.engine.endings import GameEnding
from coldwar.engine.game_engine import TurnResult
from coldwar.models.state import BOUNDED_FIELDS, WorldState

logger = logging.getLogger(__name__)

SNAPSHOT_FIELDS = BOUNDED_FIELDS + ("system_corruption",)


@dataclass
class StateSnapshot:
    """Snapshot of the world metrics at a point in time."""

    turn: int
    global_tension: float
    domestic_stability: float
    internal_secrecy: float
    foreign_paranoia: float
    secret_weapon_progress: float
    accidental_escalation_risk: float
    system_corruption: float
    red_phone_active: bool


@dataclass
class DirectiveEntry:
    """Record of one resolved directive."""

    turn_number: int
    submitted: str
    executed: str
    target: str | None
    overridden: bool
    turn_ended: bool
    intel_remaining: int
    feedback: list[str]
    state_before: StateSnapshot
    state_after: StateSnapshot
    state_deltas: dict[str, float] = field(default_factory=dict)


@dataclass
class GameTrace:
    """Complete trace of a game session."""

    game_id: str
    seed: int | None
    max_turns: int
    start_time: str
    end_time: str | None = None
    directives: list[DirectiveEntry] = field(default_factory=list)
    crises: list[dict[str, Any]] = field(default_factory=list)
    ending: dict[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "game_id": self.game_id,
            "seed": self.seed,
            "max_turns": self.max_turns,
            "start_time": self.start_time,
            "end_time": self.end_time,
            "directives": [asdict(d) for d in self.directives],
            "crises": self.crises,
            "ending": self.ending,
        }


def capture_state(state: WorldState, turn: int) -> StateSnapshot:
    """Capture a snapshot of a WorldState.

    Args:
        state: WorldState from the engine
        turn: Current turn index

    Returns:
        StateSnapshot for the trace
    """
    return StateSnapshot(
        turn=turn,
        global_tension=state.global_tension,
        domestic_stability=state.domestic_stability,
        internal_secrecy=state.internal_secrecy,
        foreign_paranoia=state.foreign_paranoia,
        secret_weapon_progress=state.secret_weapon_progress,
        accidental_escalation_risk=state.accidental_escalation_risk,
        system_corruption=state.system_corruption,
        red_phone_active=state.red_phone_active,
    )


def state_deltas(before: StateSnapshot, after: StateSnapshot) -> dict[str, float]:
    """Per-metric change between two snapshots, rounded for readability."""
    return {name: round(getattr(after, name) - getattr(before, name), 4) for name in SNAPSHOT_FIELDS}


class TraceLogger:
    """Logger for game trace events."""

    def __init__(
        self,
        seed: int | None = None,
        max_turns: int = 20,
        output_dir: Path | None = None,
    ):
        """Initialize trace logger.

        Args:
            seed: Seed of the game's random stream (None if unseeded)
            max_turns: Turn cap of the game
            output_dir: Directory for trace files (default: ./traces)
        """
        self.output_dir = Path(output_dir) if output_dir else Path("traces")

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        game_id = f"coldwar_{seed if seed is not None else 'unseeded'}_{timestamp}"

        self.trace = GameTrace(
            game_id=game_id,
            seed=seed,
            max_turns=max_turns,
            start_time=datetime.now().isoformat(),
        )
        self._output_file = self.output_dir / f"{game_id}.json"

    @property
    def output_file(self) -> Path:
        return self._output_file

    def record_directive(
        self,
        turn: int,
        state_before: WorldState,
        state_after: WorldState,
        result: TurnResult,
        intel_remaining: int = 0,
    ) -> None:
        """Record one resolved directive.

        Args:
            turn: Turn the directive was resolved on
            state_before: WorldState copy taken before submission
            state_after: WorldState after resolution
            result: Successful TurnResult from the engine
            intel_remaining: Intel points left after resolution
        """
        before = capture_state(state_before, turn)
        after = capture_state(state_after, turn)
        resolved = result.result
        target = getattr(resolved.submitted, "target", None)

        self.trace.directives.append(
            DirectiveEntry(
                turn_number=turn,
                submitted=resolved.submitted.kind.value,
                executed=resolved.directive.kind.value,
                target=target,
                overridden=resolved.overridden,
                turn_ended=resolved.turn_ended,
                intel_remaining=intel_remaining,
                feedback=list(resolved.feedback),
                state_before=before,
                state_after=after,
                state_deltas=state_deltas(before, after),
            )
        )
        self.save()

    def record_crisis(self, turn: int, outcome: CrisisOutcome) -> None:
        """Record a resolved red phone crisis.

        Args:
            turn: Turn the crisis was resolved on
            outcome: CrisisOutcome from the engine
        """
        self.trace.crises.append(
            {
                "turn": turn,
                "kind": outcome.kind.value,
                "choice": outcome.choice,
                "advisor": outcome.advisor_name,
                "feedback": list(outcome.feedback),
                "timestamp": datetime.now().isoformat(),
            }
        )
        self.save()

    def record_ending(self, ending: GameEnding) -> None:
        """Record the game ending.

        Args:
            ending: GameEnding from the engine
        """
        self.trace.end_time = datetime.now().isoformat()
        self.trace.ending = {
            "type": ending.ending_type.value,
            "turn": ending.turn,
            "description": ending.description,
        }
        self.save()

    def save(self) -> Path | None:
        """Save the trace to a JSON file.

        Returns:
            Path to the saved file, or None if it could not be written
        """
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
            with open(self._output_file, "w") as f:
                json.dump(self.trace.to_dict(), f, indent=2)
        except OSError as e:
            logger.warning("Could not write trace %s: %s", self._output_file, e)
            return None
        return self._output_file

    def get_summary(self) -> str:
        """Get a human-readable summary of the trace.

        Returns:
            Summary string
        """
        turns_played = len({d.turn_number for d in self.trace.directives})
        lines = [
            f"Game: {self.trace.game_id}",
            f"Seed: {self.trace.seed}",
            f"Turns played: {turns_played}",
            f"Directives: {len(self.trace.directives)}",
            "",
            "Directive History:",
        ]

        for entry in self.trace.directives:
            executed = entry.executed.upper()
            if entry.overridden:
                executed = f"{executed} (OVERRIDE of {entry.submitted.upper()})"
            target = f" {entry.target}" if entry.target else ""
            lines.append(f"  T{entry.turn_number}: {executed}{target}")
            if entry.turn_ended:
                lines.append(
                    f"         Δ Tension={entry.state_deltas.get('global_tension', 0):+.2f}, "
                    f"Δ Stability={entry.state_deltas.get('domestic_stability', 0):+.2f}, "
                    f"Δ Weapon={entry.state_deltas.get('secret_weapon_progress', 0):+.2f}"
                )

        for crisis in self.trace.crises:
            lines.append(f"  Crisis T{crisis['turn']}: {crisis['kind']} -> {crisis['choice']}")

        if self.trace.ending:
            lines.append("")
            lines.append(f"Ending: {self.trace.ending['type']} (turn {self.trace.ending['turn']})")

        lines.append("")
        lines.append(f"Trace saved to: {self._output_file}")

        return "\n".join(lines)
