"""Command-line parsing for the Cold War Terminal shell.

Turns one line of operator input into either a directive, a meta command
(help, clear, ls, whoami, quit) or an error message. Parsing rules:

- An optional ``sudo`` or ``execute`` prefix is dropped
- The command word may be a menu number (1-10), a name, an alias, or a
  ``--flag`` form such as ``--stand-down``
- The target is the first ``DOC-``/``SIGNAL-`` token after the command word,
  otherwise the last word if it is not a flag
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from coldwar.models.directives import (
    CONTAIN,
    ESCALATE,
    INVESTIGATE,
    LEAK,
    STAND_DOWN,
    Analyze,
    Consult,
    Decrypt,
    Directive,
    DirectiveKind,
    Interrogate,
    Trace,
)


class CommandType(Enum):
    """What a line of input turned out to be."""

    DIRECTIVE = "directive"
    HELP = "help"
    CLEAR = "clear"
    LS = "ls"
    WHOAMI = "whoami"
    QUIT = "quit"
    ERROR = "error"


@dataclass
class ParsedCommand:
    """Result of parsing one line of input.

    Attributes:
        command_type: Directive, meta command or error
        directive: The directive (only for DIRECTIVE)
        message: Error text (only for ERROR)
    """

    command_type: CommandType
    directive: Optional[Directive] = None
    message: Optional[str] = None


COMMAND_ALIASES: dict[str, DirectiveKind] = {}
for _kind, _words in (
    (DirectiveKind.ESCALATE, ("1", "escalate", "esc", "--escalate")),
    (DirectiveKind.INVESTIGATE, ("2", "investigate", "inv", "audit", "--investigate")),
    (DirectiveKind.CONTAIN, ("3", "contain", "con", "--contain")),
    (DirectiveKind.LEAK, ("4", "leak", "pub", "--leak")),
    (DirectiveKind.STAND_DOWN, ("5", "stand-down", "standdown", "sd", "abort", "--stand-down")),
    (DirectiveKind.DECRYPT, ("6", "decrypt", "dec", "crack", "cat", "--decrypt")),
    (DirectiveKind.ANALYZE, ("7", "analyze", "ana", "stat", "check", "--analyze")),
    (DirectiveKind.TRACE, ("8", "trace", "tr", "traceroute", "netstat", "--trace")),
    (DirectiveKind.CONSULT, ("9", "consult", "ask", "--consult")),
    (DirectiveKind.INTERROGATE, ("10", "interrogate", "grill", "--interrogate")),
):
    for _word in _words:
        COMMAND_ALIASES[_word] = _kind

META_COMMANDS = {
    "help": CommandType.HELP,
    "clear": CommandType.CLEAR,
    "cls": CommandType.CLEAR,
    "ls": CommandType.LS,
    "ll": CommandType.LS,
    "whoami": CommandType.WHOAMI,
    "quit": CommandType.QUIT,
    "exit": CommandType.QUIT,
}

PREFIXES = ("sudo", "execute")
TARGET_PREFIXES = ("DOC-", "SIGNAL-")

MAJOR_BY_KIND = {
    DirectiveKind.ESCALATE: ESCALATE,
    DirectiveKind.INVESTIGATE: INVESTIGATE,
    DirectiveKind.CONTAIN: CONTAIN,
    DirectiveKind.LEAK: LEAK,
    DirectiveKind.STAND_DOWN: STAND_DOWN,
}

TARGETED_BY_KIND = {
    DirectiveKind.DECRYPT: Decrypt,
    DirectiveKind.ANALYZE: Analyze,
    DirectiveKind.TRACE: Trace,
    DirectiveKind.CONSULT: Consult,
    DirectiveKind.INTERROGATE: Interrogate,
}

USAGE = {
    DirectiveKind.DECRYPT: "decrypt -t DOC-XXXX",
    DirectiveKind.ANALYZE: "analyze -t DOC-XXXX",
    DirectiveKind.TRACE: "trace [ADVISOR]",
    DirectiveKind.CONSULT: "consult [ADVISOR]",
    DirectiveKind.INTERROGATE: "interrogate [ADVISOR]",
}

MENU_LINES = (
    "[1] execute --escalate",
    "[2] execute --investigate",
    "[3] execute --contain",
    "[4] execute --leak",
    "[5] execute --stand-down",
    "[6] decrypt -t [ID]",
    "[7] analyze -t [ID]",
    "[8] traceroute [ADVISOR]",
    "[9] consult [ADVISOR]",
    "[10] interrogate [ADVISOR]",
)

HELP_LINES = (
    "Usage: command [options] [target]",
    "Aliases accepted: esc, inv, con, leak, sd, dec, ana, trace, ask, grill",
    "Targets: document ids (DOC-XXXX, SIGNAL-???) or advisor name/role (volkov, intel)",
    "Shell: help, clear, ls, whoami, quit",
)

LS_LINES = (
    "drwx------ 2 root root 4096 .secrets",
    "drwx------ 2 root root 4096 .basilisk",
    "drwxr-xr-x 2 root root 4096 cables",
)

WHOAMI_LINE = "root (Security Clearance Level 5)"


def extract_target(args: list[str]) -> Optional[str]:
    """Pick the target out of the words following the command word.

    Document ids are matched case-insensitively and returned upper-cased,
    since generated ids are always upper case.
    """
    for word in args:
        if word.upper().startswith(TARGET_PREFIXES):
            return word.upper()
    if args and not args[-1].startswith("-"):
        return args[-1]
    return None


def parse_command(text: str) -> ParsedCommand:
    """Parse one line of operator input.

    Args:
        text: Raw input line

    Returns:
        ParsedCommand describing a directive, a meta command or an error
    """
    parts = text.split()
    if not parts:
        return ParsedCommand(CommandType.ERROR, message="BASH: COMMAND '' NOT FOUND")

    first = parts[0].lower()
    if first in META_COMMANDS and len(parts) == 1:
        return ParsedCommand(META_COMMANDS[first])

    if first in PREFIXES:
        command, args = (parts[1].lower() if len(parts) > 1 else ""), parts[2:]
    else:
        command, args = first, parts[1:]

    kind = COMMAND_ALIASES.get(command)
    if kind is None:
        return ParsedCommand(CommandType.ERROR, message=f"BASH: COMMAND NOT FOUND: {command}.")

    if kind in MAJOR_BY_KIND:
        return ParsedCommand(CommandType.DIRECTIVE, directive=MAJOR_BY_KIND[kind])

    target = extract_target(args)
    if target is None:
        return ParsedCommand(
            CommandType.ERROR,
            message=f"ERROR: MISSING TARGET. USAGE: {USAGE[kind]}",
        )
    return ParsedCommand(CommandType.DIRECTIVE, directive=TARGETED_BY_KIND[kind](target=target))
