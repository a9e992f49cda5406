"""
Text rendering of game outcomes.

Three styles, each with one distinct presentation per MatchKind:
  - color : ANSI background tiles (green / yellow / red)
  - emoji : the letters followed by a row of 🟩🟨🟥 squares
  - plain : [A] exact, (A) present, ' A ' absent

Rendering is pure: it only builds strings; the caller prints them.
"""

from __future__ import annotations

import sys
from typing import Dict, TextIO

from wordler.engine.game import InProgress, Lost, Outcome, Won
from wordler.engine.types import Attempt, MatchKind, ScoredLetter

STYLES = ("color", "emoji", "plain")

WIN_MESSAGE = "Congratulations you won! 🎉"


class Ansi:
    RESET = "\033[0m"; BOLD = "\033[1m"
    BLACK = "\033[30m"; WHITE = "\033[97m"
    BG_GREEN = "\033[42m"; BG_YELLOW = "\033[103m"; BG_RED = "\033[41m"


_TILE_COLORS: Dict[MatchKind, str] = {
    MatchKind.EXACT_LOCATION: Ansi.BOLD + Ansi.BLACK + Ansi.BG_GREEN,
    MatchKind.PRESENT_IN_WORD: Ansi.BOLD + Ansi.BLACK + Ansi.BG_YELLOW,
    MatchKind.ABSENT_IN_WORD: Ansi.BOLD + Ansi.WHITE + Ansi.BG_RED,
}

_EMOJI: Dict[MatchKind, str] = {
    MatchKind.EXACT_LOCATION: "🟩",
    MatchKind.PRESENT_IN_WORD: "🟨",
    MatchKind.ABSENT_IN_WORD: "🟥",
}

_PLAIN_BRACKETS: Dict[MatchKind, str] = {
    MatchKind.EXACT_LOCATION: "[]",
    MatchKind.PRESENT_IN_WORD: "()",
    MatchKind.ABSENT_IN_WORD: "  ",
}


def resolve_style(style: str, stream: TextIO = sys.stdout) -> str:
    """'auto' -> 'color' on a terminal, 'plain' otherwise."""
    if style == "auto":
        return "color" if stream.isatty() else "plain"
    if style not in STYLES:
        raise ValueError(f"unknown style {style!r}; expected one of {STYLES}")
    return style


def _tile(s: ScoredLetter, style: str) -> str:
    if style == "color":
        return f"{_TILE_COLORS[s.kind]} {s.char} {Ansi.RESET}"
    left, right = _PLAIN_BRACKETS[s.kind]
    return f"{left}{s.char}{right}"


def render_attempt(attempt: Attempt, style: str = "plain") -> str:
    """`style` must be concrete; the caller resolves 'auto' via resolve_style()."""
    if style not in STYLES:
        raise ValueError(f"unknown style {style!r}; expected one of {STYLES}")
    if style == "emoji":
        return " ".join(attempt.word) + "\n" + "".join(_EMOJI[s.kind] for s in attempt)
    return "".join(_tile(s, style) for s in attempt)


def render_outcome(outcome: Outcome, style: str = "plain") -> str:
    if isinstance(outcome, InProgress):
        return render_attempt(outcome.attempt, style)
    if isinstance(outcome, Won):
        return render_attempt(outcome.attempt, style) + "\n" + WIN_MESSAGE
    if isinstance(outcome, Lost):
        return (render_attempt(outcome.attempt, style)
                + f"\nThe word is {outcome.answer}. Ouch! 🤕")
    raise TypeError(f"not an outcome: {outcome!r}")
