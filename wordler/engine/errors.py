"""
Error taxonomy.

Fatal (setup) errors:
  - SourceLoadError : the word list could not be read, decoded or was empty
  - SeedInvalid     : an answer override is not in the vocabulary

Per-turn errors (subclasses of GuessError) leave the game untouched and
the player may simply try again:
  - GameAlreadyEnded
  - InvalidLength
  - NotInVocabulary
"""

from __future__ import annotations


class WordlerError(Exception):
    """Base class for every error raised by this package."""


class SourceLoadError(WordlerError):
    pass


class SeedInvalid(WordlerError):
    def __init__(self, seed: str):
        self.seed = seed
        super().__init__(f"SEED ({seed}) is not a valid word in the dictionary.")


class GuessError(WordlerError):
    """A rejected guess; the game state is unchanged."""


class GameAlreadyEnded(GuessError):
    def __init__(self):
        super().__init__("Game ended.")


class InvalidLength(GuessError):
    def __init__(self, length: int, expected: int):
        self.length = length
        self.expected = expected
        what = "too long" if length > expected else "too short"
        super().__init__(f"Please enter a valid word with {expected} letters "
                         f"({length} is {what}).")


class NotInVocabulary(GuessError):
    def __init__(self, word: str):
        self.word = word
        super().__init__(f"Word not in dictionary: {word}")
