"""Cold War Terminal CLI Application.

A Textual-based terminal interface for playing Cold War Terminal.

Implements:
- Main menu
- Game screen with status panel, incoming cables, feedback log and shell input
- Red phone crisis modal
- End-game results
"""

from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import Optional

from rich.text import Text
from textual import on
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal, Vertical, VerticalScroll
from textual.screen import ModalScreen, Screen
from textual.widgets import Button, Footer, Header, Input, RichLog, Rule, Static

from coldwar import config
from coldwar.cli.commands import (
    HELP_LINES,
    LS_LINES,
    MENU_LINES,
    WHOAMI_LINE,
    CommandType,
    parse_command,
)
from coldwar.cli.display import (
    corrupt_text,
    defcon_level,
    feedback_style,
    intel_bar,
    meter_bar,
    propaganda_line,
    scramble_text,
    stability_desc,
    suspicion_bar,
    suspicion_color,
    system_status,
    tension_color,
    tension_status,
)
from coldwar.cli.trace import TraceLogger
from coldwar.engine.crisis import CrisisKind, CrisisPrompt
from coldwar.engine.game_engine import GameEngine, TurnPhase, TurnResult, create_game
from coldwar.engine.endings import GameEnding
from coldwar.models.directives import Directive
from coldwar.parameters import CONTENT_MARKER

logger = logging.getLogger(__name__)


# =============================================================================
# Theme and Styles
# =============================================================================

CSS = """
Screen {
    background: $surface;
}

#main-menu {
    align: center middle;
    width: 100%;
    height: 100%;
}

.menu-container {
    width: 60;
    height: auto;
    border: solid green;
    padding: 1 2;
}

.menu-title {
    text-align: center;
    text-style: bold;
    color: $success;
    margin-bottom: 1;
}

.menu-button {
    width: 100%;
    margin: 1 0;
}

.panel-title {
    text-style: bold;
    color: $secondary;
    margin-bottom: 1;
}

#status-bar {
    dock: top;
    height: 1;
    background: $primary-darken-2;
    color: $text;
    padding: 0 1;
}

#game-content {
    height: 1fr;
    layout: horizontal;
}

#status-panel {
    width: 48;
    border: solid $success;
    padding: 0 1;
}

#right-column {
    width: 1fr;
}

#interrupt-banner {
    border: heavy $error;
    color: $error;
    text-style: bold;
    padding: 0 1;
    height: auto;
}

#cables-panel {
    height: 1fr;
    border: solid $primary;
    padding: 0 1;
}

#feedback-log {
    height: 1fr;
    border: solid $warning;
    padding: 0 1;
}

#command-input {
    dock: bottom;
}

CrisisScreen {
    align: center middle;
    background: $surface 90%;
}

#crisis-dialog {
    width: 76;
    height: auto;
    border: heavy $error;
    background: $surface;
    padding: 1 2;
}

.crisis-title {
    text-align: center;
    text-style: bold;
    color: $error;
    margin-bottom: 1;
}

.crisis-voice {
    color: $warning;
    margin-bottom: 1;
}

.crisis-choice {
    color: $text-muted;
}

.button-row {
    margin-top: 1;
    height: 3;
    align: center middle;
}

.button-row Button {
    margin: 0 1;
}

.ending-catastrophe {
    color: $error;
    text-style: bold;
    text-align: center;
}

.ending-survived {
    color: $success;
    text-style: bold;
    text-align: center;
}
"""


# =============================================================================
# Screens
# =============================================================================


class MainMenuScreen(Screen):
    """Main menu screen with game options."""

    BINDINGS = [
        Binding("q", "quit", "Quit"),
    ]

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with Container(id="main-menu"):
            with Vertical(classes="menu-container"):
                yield Static("C O L D   W A R   T E R M I N A L", classes="menu-title")
                yield Static("Authenticating user... CLEARED: LEVEL 5", classes="menu-title")
                yield Rule()
                yield Button("New Game", id="new-game", classes="menu-button", variant="success")
                yield Button("Quit", id="quit", classes="menu-button", variant="error")
        yield Footer()

    @on(Button.Pressed, "#new-game")
    def start_new_game(self) -> None:
        self.app.push_screen(GameScreen())

    @on(Button.Pressed, "#quit")
    def quit_app(self) -> None:
        self.app.exit()


class GameScreen(Screen):
    """Main game screen: status, cables, feedback and the command shell."""

    BINDINGS = [
        Binding("escape", "confirm_quit", "Abandon Game"),
    ]

    def __init__(self, game: Optional[GameEngine] = None) -> None:
        super().__init__()
        self.game = game or create_game()
        self.ui_rng = random.Random()
        # Set by a turn-ending directive until its day summary has been shown
        self.day_ended = False
        self.trace_logger: Optional[TraceLogger] = None
        if config.is_trace_enabled():
            self.trace_logger = TraceLogger(
                seed=config.get_seed(),
                max_turns=self.game.max_turns,
                output_dir=Path(config.get_trace_dir()),
            )

    def compose(self) -> ComposeResult:
        yield Header()
        yield Static("DAY 000 // 1983", id="status-bar")

        with Horizontal(id="game-content"):
            with VerticalScroll(id="status-panel"):
                yield Static("SITUATION REPORT", classes="panel-title")
                yield Static("", id="status-text")
                yield Static("ADVISOR LOYALTY STATUS", classes="panel-title")
                yield Static("", id="advisor-text")
                yield Static("AVAILABLE COMMANDS", classes="panel-title")
                yield Static(Text("\n".join(MENU_LINES)), id="menu-text")
            with Vertical(id="right-column"):
                yield Static("", id="interrupt-banner")
                with VerticalScroll(id="cables-panel"):
                    yield Static("INCOMING CABLES", classes="panel-title")
                    yield Static("", id="cables-text")
                yield RichLog(id="feedback-log", wrap=True, markup=False)

        yield Input(placeholder="root@command:~$", id="command-input")
        yield Footer()

    def on_mount(self) -> None:
        """Start the first turn when the screen mounts."""
        self._begin_turn()
        self.query_one("#command-input", Input).focus()

    # =========================================================================
    # Rendering
    # =========================================================================

    @property
    def log_widget(self) -> RichLog:
        return self.query_one("#feedback-log", RichLog)

    def write_line(self, line: str, style: str = "") -> None:
        self.log_widget.write(Text(line, style=style))

    def update_display(self) -> None:
        """Update all display elements."""
        game = self.game
        state = game.state
        counters = game.counters

        self.query_one("#status-bar", Static).update(
            f"DAY {game.turn:03d} // 1983 | DEFCON: {state.global_tension:.2f} | "
            f"INTEL: {counters.intel_points}/{counters.max_intel_points}"
        )

        status = Text()
        status.append("DEFCON ESTIMATE: ")
        status.append(defcon_level(state.global_tension), style=tension_color(state.global_tension))
        status.append("\nDOMESTIC MOOD:   ")
        status.append(stability_desc(state.domestic_stability))
        sys_status, sys_color = system_status(game.turn, self.ui_rng)
        status.append("\nSYSTEM STATUS:   ")
        status.append(sys_status, style=sys_color)
        status.append("\nINTEL ASSETS:    ")
        status.append(intel_bar(counters.intel_points, counters.max_intel_points), style="yellow")
        self.query_one("#status-text", Static).update(status)

        advisors = Text()
        for advisor in state.advisors:
            advisors.append(f"{advisor.name:<17}")
            advisors.append(suspicion_bar(advisor.suspicion), style=suspicion_color(advisor.suspicion))
            advisors.append(f" {advisor.suspicion} SUSPICION\n")
        self.query_one("#advisor-text", Static).update(advisors)

        banner = self.query_one("#interrupt-banner", Static)
        if counters.interruption_active:
            banner.update(
                "!!! SIGNAL INTERRUPT DETECTED !!!\n"
                f"INTRUDER MESSAGE: {propaganda_line(self.ui_rng)}"
            )
            banner.display = True
        else:
            banner.display = False

        self._update_cables()

    def _update_cables(self) -> None:
        game = self.game
        shake = game.state.global_tension > 0.7
        cables = Text()
        for doc in game.documents:
            padding = " " * self.ui_rng.randrange(0, 4) if shake else ""
            cables.append(
                f"\n{padding}[ID: {doc.id} | CLASS: {doc.clearance} | TIME: {doc.timestamp}]\n",
                style="cyan",
            )
            cables.append(f"{padding}> ")
            if doc.is_encrypted:
                cables.append(scramble_text(doc.content, self.ui_rng), style="red")
                cables.append("   [ENCRYPTED CONTENT - DECRYPTION REQUIRED]\n", style="bold red")
            else:
                cables.append(corrupt_text(doc.content, game.turn, self.ui_rng) + "\n", style="green")
        self.query_one("#cables-text", Static).update(cables)

    # =========================================================================
    # Turn flow
    # =========================================================================

    def _begin_turn(self) -> None:
        self.game.start_turn()
        self.write_line(f"--- TURN {self.game.turn} REPORT ---", "bold cyan")
        self.update_display()

    def _end_of_day(self) -> None:
        tension = self.game.state.global_tension
        self.write_line(f"DAY {self.game.turn} SEQUENCE COMPLETED", "bold cyan")
        self.write_line(
            f"GLOBAL TENSION: {meter_bar(tension)} {tension * 100:.0f}%",
            tension_color(tension),
        )
        status = tension_status(tension)
        if status:
            self.write_line(status, tension_color(tension))

    @on(Input.Submitted, "#command-input")
    def command_submitted(self, event: Input.Submitted) -> None:
        text = event.value
        event.input.clear()
        if self.game.is_game_over():
            return
        self.write_line(f"root@command:~$ {text}", "dim")
        self.handle_command(text)

    def handle_command(self, text: str) -> None:
        """Run one line of shell input."""
        parsed = parse_command(text)
        if parsed.command_type == CommandType.DIRECTIVE:
            self.submit(parsed.directive)
        elif parsed.command_type == CommandType.HELP:
            for line in HELP_LINES:
                self.write_line(line)
        elif parsed.command_type == CommandType.CLEAR:
            self.log_widget.clear()
        elif parsed.command_type == CommandType.LS:
            for line in LS_LINES:
                self.write_line(line, "cyan")
        elif parsed.command_type == CommandType.WHOAMI:
            self.write_line(WHOAMI_LINE, "magenta")
        elif parsed.command_type == CommandType.QUIT:
            self.app.exit()
        else:
            self.write_line(parsed.message or "", "bold red")

    def submit(self, directive: Directive) -> None:
        """Submit a directive to the engine and render the outcome."""
        game = self.game
        turn = game.turn
        state_before = game.get_current_state()
        result = game.submit_directive(directive)
        if not result.success:
            self.write_line(f"ERROR: {result.error}", "bold red")
            return

        if self.trace_logger:
            self.trace_logger.record_directive(
                turn,
                state_before,
                game.state,
                result,
                intel_remaining=game.counters.intel_points,
            )

        self.write_line("EXECUTING DIRECTIVE...", "yellow")
        self._write_feedback(result.feedback)
        self._after_resolution(result)

    def _write_feedback(self, lines: list[str]) -> None:
        for line in lines:
            if line.startswith(CONTENT_MARKER):
                self.write_line(" :: DECRYPTED >> " + line[len(CONTENT_MARKER):], "bold green")
            else:
                self.write_line(f" :: {line}", feedback_style(line))

    def _after_resolution(self, result: Optional[TurnResult] = None) -> None:
        game = self.game
        if game.is_game_over():
            self._show_ending(game.get_ending())
            return

        if result is not None and result.turn_ended:
            self.day_ended = True

        if game.crisis_pending:
            prompt = game.open_crisis()
            self.app.push_screen(CrisisScreen(prompt), self._crisis_resolved)
            return

        if self.day_ended:
            self.day_ended = False
            self._end_of_day()
        if game.phase == TurnPhase.AWAITING_TURN:
            self._begin_turn()
        else:
            self.update_display()

    def _crisis_resolved(self, response: Optional[str]) -> None:
        outcome = self.game.resolve_crisis(response or "")
        if self.trace_logger:
            self.trace_logger.record_crisis(self.game.turn, outcome)
        self.write_line("RED PHONE: CONNECTION ESTABLISHED.", "bold red")
        self._write_feedback(outcome.feedback)
        self.write_line("CALL TERMINATED.", "bold red")
        self._after_resolution()

    def _show_ending(self, ending: GameEnding) -> None:
        if self.trace_logger:
            self.trace_logger.record_ending(ending)
            self.notify(f"Trace saved: {self.trace_logger.output_file}", timeout=10)
        self.update_display()
        self.app.push_screen(EndGameScreen(ending, self.game))

    def action_confirm_quit(self) -> None:
        """Return to main menu (abandons current game)."""
        # Pop all screens back to main menu (keep base Screen + MainMenuScreen)
        while len(self.app.screen_stack) > 2:
            self.app.pop_screen()


class CrisisScreen(ModalScreen[str]):
    """Red phone crisis modal; dismisses with the chosen response key."""

    BINDINGS = [
        Binding("1", "choose(1)", "Option 1", show=False),
        Binding("2", "choose(2)", "Option 2", show=False),
        Binding("3", "choose(3)", "Option 3", show=False),
    ]

    def __init__(self, prompt: CrisisPrompt) -> None:
        super().__init__()
        self.prompt = prompt

    def compose(self) -> ComposeResult:
        title = (
            "MOLE CONFRONTATION"
            if self.prompt.kind == CrisisKind.MOLE_CONFRONTATION
            else "INCOMING PRIORITY ONE ALERT"
        )
        with Vertical(id="crisis-dialog"):
            yield Static(f"☎ {title} ☎", classes="crisis-title")
            for line in self.prompt.lines:
                yield Static(Text(line), classes="crisis-voice")
            yield Rule()
            yield Static("DECISION POINT:")
            for index, choice in enumerate(self.prompt.choices, start=1):
                yield Static(Text(f"{index}. {choice.label} ({choice.description})"), classes="crisis-choice")
            with Horizontal(classes="button-row"):
                for choice in self.prompt.choices:
                    yield Button(choice.label, id=f"choice-{choice.key}", variant="error")

    @on(Button.Pressed)
    def choice_pressed(self, event: Button.Pressed) -> None:
        key = (event.button.id or "").removeprefix("choice-")
        self.dismiss(key)

    def action_choose(self, index: int) -> None:
        if 1 <= index <= len(self.prompt.choices):
            self.dismiss(self.prompt.choices[index - 1].key)


class EndGameScreen(Screen):
    """Screen showing game results."""

    BINDINGS = [
        Binding("m", "main_menu", "Main Menu"),
        Binding("q", "quit", "Quit"),
    ]

    def __init__(self, ending: GameEnding, game: GameEngine) -> None:
        super().__init__()
        self.ending = ending
        self.game = game

    def compose(self) -> ComposeResult:
        catastrophe = self.ending.is_catastrophe
        yield Header()
        with Container(id="main-menu"):
            with Vertical(classes="menu-container"):
                yield Static(
                    "GAME OVER" if catastrophe else "SIMULATION END",
                    classes="ending-catastrophe" if catastrophe else "ending-survived",
                )
                yield Rule()

                ending_name = self.ending.ending_type.value.replace("_", " ").title()
                yield Static(f"Ending: {ending_name}")
                yield Static(f"Turns Survived: {self.ending.turn}")
                yield Rule()

                yield Static(self.ending.description)
                yield Rule()

                yield Button("Main Menu", id="main-menu-btn", variant="default", classes="menu-button")
                yield Button("Quit", id="quit", variant="error", classes="menu-button")
        yield Footer()

    @on(Button.Pressed, "#main-menu-btn")
    def go_to_main_menu(self) -> None:
        # Pop all screens back to main menu (keep base Screen + MainMenuScreen)
        while len(self.app.screen_stack) > 2:
            self.app.pop_screen()

    @on(Button.Pressed, "#quit")
    def quit_app(self) -> None:
        self.app.exit()

    def action_main_menu(self) -> None:
        self.go_to_main_menu()

    def action_quit(self) -> None:
        self.app.exit()


# =============================================================================
# Main Application
# =============================================================================


class ColdWarTerminalApp(App):
    """Main Cold War Terminal application."""

    TITLE = "Cold War Terminal"
    SUB_TITLE = "SECURE TERMINAL LINK // 1983"
    CSS = CSS

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit", show=True, priority=True),
    ]

    def on_mount(self) -> None:
        """Show main menu when app starts."""
        self.push_screen(MainMenuScreen())


def main() -> None:
    """Entry point for the CLI application.

    For debugging with Textual devtools:
        1. In one terminal: textual console
        2. In another terminal: textual run --dev src/coldwar/cli/app.py
    Set COLDWAR_LOG_FILE to capture engine logs while the UI owns the terminal.
    """
    config.configure_logging()
    logger.info("Starting Cold War Terminal")
    app = ColdWarTerminalApp()
    app.run()


if __name__ == "__main__":
    main()
