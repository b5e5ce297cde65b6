"""Trie-backed interactive autocomplete."""

from autocomplete.trie import Trie, TrieNode
from autocomplete.session import Action, Event, Session, render
from autocomplete.wordlist import load_words
from autocomplete.cli import run_cli

__all__ = [
    "Action",
    "Event",
    "Session",
    "Trie",
    "TrieNode",
    "load_words",
    "render",
    "run_cli",
]
