from .wordsource import (
    WordSource, InMemoryWordSource, FileWordSource, UrlWordSource,
    DEFAULT_DICTIONARY_PATH, clean_tokens,
)
from .validator import validate_wordlist, pretty_summary
from .io import read_text, read_tokens, write_lines

__all__ = [
    "WordSource", "InMemoryWordSource", "FileWordSource", "UrlWordSource",
    "DEFAULT_DICTIONARY_PATH", "clean_tokens",
    "validate_wordlist", "pretty_summary",
    "read_text", "read_tokens", "write_lines",
]
