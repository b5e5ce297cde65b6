#!/usr/bin/env python3
"""
Autocomplete Engine

Type a word one character at a time and see every word already in the
dictionary that starts with it. Enter adds the typed word to the
dictionary, backspace clears the input, escape quits.

Requires: pip install readchar
"""

from __future__ import annotations

import argparse
import logging
import sys

from autocomplete.cli import run_cli
from autocomplete.trie import Trie
from autocomplete.wordlist import load_words


# Logging setup

logging.basicConfig(
    level=logging.INFO,
    format="[%(levelname)s] %(message)s",
)
log = logging.getLogger("autocomplete")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Interactive prefix autocomplete backed by a trie",
    )
    parser.add_argument("--words", type=str, default=None,
                        help="Word list to seed the dictionary with (one word per line)")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    trie = Trie()
    if args.words:
        try:
            load_words(trie, args.words)
        except (OSError, UnicodeDecodeError) as exc:
            log.error("Cannot seed dictionary from %s: %s", args.words, exc)
            sys.exit(1)

    try:
        run_cli(trie)
    except (EOFError, OSError) as exc:
        log.error("Cannot read input: %s", exc)
        sys.exit(1)


if __name__ == "__main__":
    main()
