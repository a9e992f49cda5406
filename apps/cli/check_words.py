# apps/cli/check_words.py
"""
Print a one-line health summary of a word list (counts + SHA), optionally
the full JSON report. Exits non-zero when the list is unusable.

Usage:
    python -m apps.cli.check_words /usr/share/dict/words --json
"""

from __future__ import annotations

import argparse
import json
import os
import sys
from typing import List, Optional

from wordler.datasets import DEFAULT_DICTIONARY_PATH, pretty_summary, validate_wordlist


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="wordler — validate a word list")
    ap.add_argument("path", nargs="?",
                    default=os.environ.get("WORDLER_WORDS", DEFAULT_DICTIONARY_PATH),
                    help="word list to check")
    ap.add_argument("--json", action="store_true", help="also dump the full report as JSON")
    args = ap.parse_args(argv)

    rep = validate_wordlist(args.path)
    print(pretty_summary(rep))
    for issue in rep["issues"]:
        print(f"  - {issue}")
    if args.json:
        print(json.dumps(rep, indent=2))
    return 0 if rep["passed"] else 1


if __name__ == "__main__":
    sys.exit(main())
