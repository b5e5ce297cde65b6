"""Session loop: routes typed characters to the trie and renders results."""

from __future__ import annotations

import enum
import logging

from autocomplete.constants import (
    CLEAR_KEYS,
    CLEAR_LINE,
    CURSOR_COLUMN,
    CURSOR_UP,
    ENTER_KEYS,
    LOGGER_NAME,
    QUIT_KEYS,
)
from autocomplete.trie import Trie

log = logging.getLogger(LOGGER_NAME)


class Action(enum.Enum):
    APPEND = "append"
    COMMIT = "commit"
    CLEAR = "clear"
    QUIT = "quit"


class Event:
    """Outcome of a single key press."""

    __slots__ = ("action", "text", "matches")

    def __init__(self, action: Action, text: str = "", matches: list[str] | None = None):
        self.action = action
        self.text = text
        self.matches = matches or []

    def __repr__(self) -> str:
        return f"Event({self.action.name}, {self.text!r}, {self.matches!r})"


class Session:
    """Input buffer for one interactive run, backed by a shared trie."""

    def __init__(self, trie: Trie):
        self.trie = trie
        self.buffer = ""

    def handle(self, char: str) -> Event:
        if char in QUIT_KEYS:
            return Event(Action.QUIT)

        if char in ENTER_KEYS:
            word = self.buffer
            self.trie.insert(word)
            self.buffer = ""
            log.debug("Committed %r (%d words)", word, len(self.trie))
            return Event(Action.COMMIT, word, self.trie.search(word))

        if char in CLEAR_KEYS:
            self.buffer = ""
            return Event(Action.CLEAR)

        self.buffer += char
        return Event(Action.APPEND, self.buffer, self.trie.search(self.buffer))


def format_matches(matches: list[str]) -> str:
    return "[" + " ".join(sorted(matches)) + "]"


def render(event: Event) -> str:
    """Terminal output for an event.

    Text goes on the input line and matches on the line below, then the
    cursor is parked back at the end of the typed text.
    """
    if event.action is Action.CLEAR:
        return CLEAR_LINE + "\r"
    if event.action is Action.QUIT:
        return "\r\n\r\n"
    return (
        f"{CLEAR_LINE}\r{event.text}\n"
        f"{CLEAR_LINE}\r{format_matches(event.matches)}"
        f"{CURSOR_UP}{CURSOR_COLUMN.format(len(event.text) + 1)}"
    )
