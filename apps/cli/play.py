# apps/cli/play.py
"""
CLI entry point: play one game of wordler in the terminal.

This script:
  1) Loads the vocabulary (local word list, or --url over HTTP).
  2) Starts a game; $SEED, when set, fixes the answer instead of sampling.
  3) Reads one guess per line from stdin and prints the scored row,
     or the reason a guess was rejected.

Exit status: 0 won, 1 lost, 2 setup error, 3 stdin closed mid-game.

Usage:
    python -m apps.cli.play --words /usr/share/dict/words
    SEED=dream python -m apps.cli.play --style plain
"""

from __future__ import annotations

import argparse
import logging
import os
import random
import sys
from typing import List, Optional, TextIO

from wordler.datasets import DEFAULT_DICTIONARY_PATH, FileWordSource, UrlWordSource, WordSource
from wordler.engine import GuessEngine, GuessError, Lost, MAX_ATTEMPTS, SeedInvalid, SourceLoadError, Won
from wordler.render import render_outcome, resolve_style

log = logging.getLogger("wordler")

EXIT_WON = 0
EXIT_LOST = 1
EXIT_SETUP = 2
EXIT_EOF = 3

WORDS_ENV_VAR = "WORDLER_WORDS"


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="wordler — guess the 5-letter word in 6 tries")
    ap.add_argument("--words", default=os.environ.get(WORDS_ENV_VAR, DEFAULT_DICTIONARY_PATH),
                    help=f"path to a whitespace-separated word list "
                         f"(default: ${WORDS_ENV_VAR} or {DEFAULT_DICTIONARY_PATH})")
    ap.add_argument("--url", help="download the word list from this URL instead of --words")
    ap.add_argument("--rng-seed", type=int,
                    help="seed for answer sampling (reproducible games); "
                         "ignored when $SEED fixes the answer")
    ap.add_argument("--style", choices=["auto", "color", "emoji", "plain"], default="auto",
                    help="output style (auto=color on a terminal, plain otherwise)")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging on stderr")
    return ap


def load_source(args: argparse.Namespace) -> WordSource:
    rng = random.Random(args.rng_seed)
    if args.url:
        return UrlWordSource(args.url, rng=rng)
    return FileWordSource(args.words, rng=rng)


def play(engine: GuessEngine, *, style: str, stdin: TextIO, stdout: TextIO) -> int:
    """Run the read-score-print loop until the game ends; return the exit status."""
    while True:
        print(f"Enter your guess [{engine.current_attempt}/{MAX_ATTEMPTS}]", file=stdout)
        line = stdin.readline()
        if not line:
            log.warning("input closed before the game ended")
            return EXIT_EOF

        try:
            outcome = engine.submit(line)
        except GuessError as e:
            print(e, file=stdout)
            continue

        print(render_outcome(outcome, style), file=stdout)
        if isinstance(outcome, Won):
            return EXIT_WON
        if isinstance(outcome, Lost):
            return EXIT_LOST


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="[%(levelname)s] %(message)s", stream=sys.stderr)

    try:
        source = load_source(args)
        engine = GuessEngine.from_env(source)
    except (SourceLoadError, SeedInvalid) as e:
        log.error("%s", e)
        return EXIT_SETUP

    style = resolve_style(args.style, sys.stdout)
    return play(engine, style=style, stdin=sys.stdin, stdout=sys.stdout)


if __name__ == "__main__":
    sys.exit(main())
