from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List

from wordler.engine.errors import SourceLoadError

log = logging.getLogger(__name__)


def read_text(p: Path | str) -> str:
    """
    Read a UTF-8 text file.
    Raises SourceLoadError if the file is missing, unreadable or not valid UTF-8.
    """
    p = Path(p)
    try:
        raw = p.read_bytes()
    except OSError as e:
        raise SourceLoadError(f"cannot read word list {p}: {e}") from e
    return decode_text(raw, str(p))


def decode_text(raw: bytes, origin: str) -> str:
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise SourceLoadError(f"word list {origin} is not valid UTF-8 text: {e}") from e


def read_tokens(p: Path | str) -> List[str]:
    """Whitespace-separated tokens of a text file (any mix of spaces/newlines)."""
    tokens = read_text(p).split()
    log.debug("read %d token(s) from %s", len(tokens), p)
    return tokens


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)
