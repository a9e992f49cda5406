"""
Build a clean wordler vocabulary from a raw dictionary.

What it does:
- Reads a local file (--in) or downloads one (--url).
- Keeps tokens that are exactly 5 ASCII letters, uppercases them and
  de-duplicates while preserving first-seen order.
- Optionally sorts alphabetically, then writes one word per line.

Usage:
    python -m script.build_wordlist --in /usr/share/dict/words --out data/words_5.txt
    python -m script.build_wordlist --url https://example.org/words.txt --sort --out data/words_5.txt
"""

import argparse

from wordler.datasets import clean_tokens, read_tokens, write_lines
from wordler.datasets.wordsource import fetch_tokens


def main():
    ap = argparse.ArgumentParser(description="Build a 5-letter uppercase word list")
    src = ap.add_mutually_exclusive_group(required=True)
    src.add_argument("--in", dest="inp", help="raw dictionary file")
    src.add_argument("--url", help="raw dictionary URL")
    ap.add_argument("--out", required=True, help="output .txt file")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically (otherwise keep "
                                                        "source order)")
    args = ap.parse_args()

    tokens = fetch_tokens(args.url) if args.url else read_tokens(args.inp)
    words = clean_tokens(tokens)
    if args.sort:
        words = sorted(words)

    write_lines(words, args.out)
    print(f"Input: {args.url or args.inp} ({len(tokens)} tokens) -> Output: {args.out} "
          f"({len(words)} words)")


if __name__ == "__main__":
    main()
