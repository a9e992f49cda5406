"""
Word-list validator.

What this module does:
- Inspect a raw dictionary file the way the game will load it
  (whitespace-separated tokens, keep exactly-5-letter ASCII words).
- Count kept / dropped tokens and duplicates; compute SHA-256 of the raw file.
- Return a machine-readable dict and provide a pretty one-line summary.

Typical use:
    from wordler.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist("/usr/share/dict/words")
    print(pretty_summary(rep))
"""

from __future__ import annotations

import hashlib
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Dict, List

from wordler.engine.errors import SourceLoadError
from wordler.engine.types import WORD_LENGTH
from .io import read_tokens
from .wordsource import clean_tokens


@dataclass
class WordListReport:
    """Diagnostics and metadata for one word-list file."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    tokens: int          # whitespace-separated tokens in the file
    kept: int            # tokens that are N ASCII letters
    unique_count: int    # kept words after uppercase dedupe
    dropped: int         # tokens rejected by the length/alphabet rule
    passed: bool
    issues: List[str] = field(default_factory=list)


def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes (empty string if unreadable)."""
    h = hashlib.sha256()
    try:
        with path.open("rb") as f:
            for chunk in iter(lambda: f.read(8192), b""):
                h.update(chunk)
    except OSError:
        return ""
    return h.hexdigest()


def _is_word(token: str, N: int) -> bool:
    return len(token) == N and token.isascii() and token.isalpha()


def validate_wordlist(path: str | Path, N: int = WORD_LENGTH) -> Dict:
    """
    Validate a word list for use as a FileWordSource.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see WordListReport). `passed` is True
        when the file exists, decodes as UTF-8 and yields at least one word.
        Dropped tokens and duplicates are reported but do not fail the check,
        since loading filters them anyway.
    """
    p = Path(path)
    if not p.is_file():
        problem = "is not a regular file" if p.exists() else "not found"
        rep = WordListReport(str(p), p.exists(), "", 0, 0, 0, 0, False,
                             [f"word list {problem}: {p}"])
        return asdict(rep)

    issues: List[str] = []
    try:
        tokens = read_tokens(p)
    except SourceLoadError as e:
        rep = WordListReport(str(p), True, _sha256_file(p), 0, 0, 0, 0, False, [str(e)])
        return asdict(rep)

    kept = [t.upper() for t in tokens if _is_word(t, N)]
    unique = clean_tokens(kept, N)
    dropped = len(tokens) - len(kept)

    if not unique:
        issues.append(f"word list contains 0 valid {N}-letter words")
    if dropped:
        issues.append(f"{dropped} token(s) are not {N} ASCII letters")
    if len(kept) != len(unique):
        issues.append(f"{len(kept) - len(unique)} duplicate word(s) (case-insensitive)")

    rep = WordListReport(
        path=str(p),
        exists=True,
        sha256=_sha256_file(p),
        tokens=len(tokens),
        kept=len(kept),
        unique_count=len(unique),
        dropped=dropped,
        passed=bool(unique),
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for the console.

    Example:
        words=/usr/share/dict/words | tokens=104334 | kept=4594 (uniq=4594, sha=abc123def456) | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    # abbreviate sha to 12 chars for readability
    sha = (report.get("sha256") or "")[:12]
    return (
        f"words={report['path']} | tokens={report['tokens']} "
        f"| kept={report['kept']} (uniq={report['unique_count']}, sha={sha}) "
        f"| dropped={report['dropped']} | {status}"
    )
