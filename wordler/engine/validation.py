"""
Guess normalization.

Every raw guess passes through here before it reaches the state machine:
trim surrounding whitespace, uppercase, and enforce the word length.
Vocabulary membership is the WordSource's call, not ours.
"""

from __future__ import annotations

from .errors import InvalidLength
from .types import ALPHABET, WORD_LENGTH


def normalize_word(word: str) -> str:
    return word.strip().upper()


def normalize_guess(raw: str, N: int = WORD_LENGTH) -> str:
    """
    Return the canonical (trimmed, uppercase) form of `raw`.

    Raises:
      InvalidLength if the normalized guess is not exactly N characters.
    """
    w = normalize_word(raw)
    if len(w) != N:
        raise InvalidLength(len(w), N)
    return w


def is_ascii_word(word: str) -> bool:
    """True when every character is an uppercase A-Z letter."""
    return bool(word) and all(c in ALPHABET for c in word)
