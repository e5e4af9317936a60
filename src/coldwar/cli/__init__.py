"""Cold War Terminal CLI module.

Provides a Textual-based terminal interface for playing Cold War Terminal.

Usage:
    coldwar

Or directly:
    python -m coldwar.cli.app
"""

from coldwar.cli.app import ColdWarTerminalApp, main

__all__ = ["ColdWarTerminalApp", "main"]
