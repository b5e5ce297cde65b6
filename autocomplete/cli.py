"""Terminal mode: one raw key at a time."""

from __future__ import annotations

import sys
from typing import Callable, TextIO

import readchar

from autocomplete.constants import BANNER
from autocomplete.session import Action, Session, render
from autocomplete.trie import Trie


def run_cli(
    trie: Trie,
    read_char: Callable[[], str] = readchar.readchar,
    out: TextIO | None = None,
) -> None:
    """Run the interactive autocomplete loop until escape is pressed."""
    out = out or sys.stdout
    session = Session(trie)

    out.write(BANNER + "\r\n")
    out.flush()

    while True:
        char = read_char()
        if not char:
            raise EOFError("input closed")

        event = session.handle(char)
        out.write(render(event))
        out.flush()
        if event.action is Action.QUIT:
            break
