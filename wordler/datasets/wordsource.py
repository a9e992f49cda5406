"""
Word sources: where answers come from and which guesses are accepted.

A WordSource has two capabilities:
  - sample()        : uniformly random vocabulary word (injected RNG)
  - contains(word)  : case-insensitive membership test

Backends:
  - InMemoryWordSource : a fixed list (tests, built-ins)
  - FileWordSource     : a whitespace-separated text file
                         (default /usr/share/dict/words)
  - UrlWordSource      : the same format fetched over HTTP

All backends share the same cleaning rule: keep tokens that are exactly
5 ASCII letters, uppercase them, drop duplicates (first occurrence wins,
so the vocabulary stays indexable for sampling). An empty vocabulary is
a SourceLoadError at construction time, never at sample time.
"""

from __future__ import annotations

import logging
import random
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterable, List, Optional, Set

import requests

from wordler.engine.errors import SourceLoadError
from wordler.engine.types import WORD_LENGTH
from .io import decode_text, read_tokens

log = logging.getLogger(__name__)

DEFAULT_DICTIONARY_PATH = "/usr/share/dict/words"


def clean_tokens(tokens: Iterable[str], N: int = WORD_LENGTH) -> List[str]:
    """
    Keep N-letter ASCII alphabetic tokens, uppercased, de-duplicated in
    first-seen order.
    """
    seen: Set[str] = set()
    out: List[str] = []
    for t in tokens:
        w = t.strip().upper()
        if len(w) != N or not (w.isascii() and w.isalpha()):
            continue
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


class WordSource(ABC):
    """
    Interface the game engine depends on.

    Vocabulary words are exactly 5 uppercase ASCII letters (A-Z); the engine
    rejects any other guess as not in the vocabulary, whatever contains() says.
    """

    @abstractmethod
    def sample(self) -> str:
        """Return a random vocabulary word (uppercase)."""

    @abstractmethod
    def contains(self, word: str) -> bool:
        """Case-insensitive membership test; pure query."""


class InMemoryWordSource(WordSource):
    """
    Vocabulary held in memory. Base for the loading backends: subclasses
    only have to produce the raw tokens.
    """

    def __init__(self, words: Iterable[str], *, rng: Optional[random.Random] = None,
                 origin: str = "<memory>"):
        self._words = clean_tokens(words)
        if not self._words:
            raise SourceLoadError(f"word list {origin} contains no "
                                  f"{WORD_LENGTH}-letter words")
        self._index = frozenset(self._words)
        self.rng = rng if rng is not None else random.Random()
        self.origin = origin
        log.debug("loaded %d %d-letter word(s) from %s",
                  len(self._words), WORD_LENGTH, origin)

    def __len__(self) -> int:
        return len(self._words)

    @property
    def words(self) -> List[str]:
        return list(self._words)

    def sample(self) -> str:
        i = self.rng.randrange(len(self._words))
        return self._words[i]

    def contains(self, word: str) -> bool:
        return word.upper() in self._index


class FileWordSource(InMemoryWordSource):
    """Word list read from a local text file."""

    def __init__(self, path: Path | str = DEFAULT_DICTIONARY_PATH, *,
                 rng: Optional[random.Random] = None):
        self.path = Path(path)
        super().__init__(read_tokens(self.path), rng=rng, origin=str(self.path))


class UrlWordSource(InMemoryWordSource):
    """Word list downloaded once, at construction, over HTTP(S)."""

    def __init__(self, url: str, *, rng: Optional[random.Random] = None,
                 timeout: float = 30.0):
        self.url = url
        super().__init__(fetch_tokens(url, timeout=timeout), rng=rng, origin=url)


def fetch_tokens(url: str, *, timeout: float = 30.0) -> List[str]:
    try:
        r = requests.get(url, timeout=timeout)
        r.raise_for_status()
    except requests.RequestException as e:
        raise SourceLoadError(f"cannot fetch word list {url}: {e}") from e
    return decode_text(r.content, url).split()
