"""Seed word list loading."""

from __future__ import annotations

import logging

from autocomplete.constants import LOGGER_NAME
from autocomplete.trie import Trie

log = logging.getLogger(LOGGER_NAME)


def load_words(trie: Trie, path: str) -> int:
    """Insert every non-blank line of ``path`` into ``trie``.

    Lines are stripped of surrounding whitespace and otherwise kept as-is.
    Returns the number of lines inserted (repeats included). Errors opening
    or decoding the file propagate to the caller.
    """
    count = 0
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            word = line.strip()
            if word:
                trie.insert(word)
                count += 1

    log.info("Loaded %s words from %s", f"{count:,}", path)
    return count
