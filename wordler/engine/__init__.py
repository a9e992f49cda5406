from .scoring import score, LetterBudget
from .validation import normalize_guess
from .types import Attempt, Letter, MatchKind, ScoredLetter, WORD_LENGTH
from .errors import (
    WordlerError, SourceLoadError, SeedInvalid, GuessError,
    GameAlreadyEnded, InvalidLength, NotInVocabulary,
)
from .game import GuessEngine, GameStatus, InProgress, Won, Lost, Outcome, MAX_ATTEMPTS

__all__ = [
    "score", "LetterBudget", "normalize_guess",
    "Attempt", "Letter", "MatchKind", "ScoredLetter", "WORD_LENGTH",
    "WordlerError", "SourceLoadError", "SeedInvalid", "GuessError",
    "GameAlreadyEnded", "InvalidLength", "NotInVocabulary",
    "GuessEngine", "GameStatus", "InProgress", "Won", "Lost", "Outcome", "MAX_ATTEMPTS",
]
