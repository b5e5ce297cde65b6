"""Prefix trie for autocomplete lookups."""

from __future__ import annotations


class TrieNode:
    """Single node in the prefix trie."""

    __slots__ = ("children", "is_terminal")

    def __init__(self):
        self.children: dict[str, TrieNode] = {}
        self.is_terminal: bool = False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TrieNode):
            return NotImplemented
        return self.is_terminal == other.is_terminal and self.children == other.children

    def __repr__(self) -> str:
        mark = "*" if self.is_terminal else ""
        return f"TrieNode{mark}({', '.join(self.children)})"


class Trie:
    """Prefix trie holding the words committed during a session."""

    def __init__(self):
        self.root = TrieNode()
        self._size = 0

    def insert(self, word: str) -> None:
        node = self.root
        for ch in word:
            if ch not in node.children:
                node.children[ch] = TrieNode()
            node = node.children[ch]
        if not node.is_terminal:
            node.is_terminal = True
            self._size += 1

    def search(self, prefix: str) -> list[str]:
        """All inserted words starting with ``prefix``, in no particular order.

        Returns an empty list as soon as the prefix leaves the tree.
        """
        start = self._walk(prefix)
        if start is None:
            return []

        results: list[str] = []
        stack: list[tuple[TrieNode, str]] = [(start, prefix)]
        while stack:
            node, word = stack.pop()
            if node.is_terminal:
                results.append(word)
            for ch, child in node.children.items():
                stack.append((child, word + ch))
        return results

    def is_word(self, word: str) -> bool:
        node = self._walk(word)
        return node is not None and node.is_terminal

    def is_prefix(self, prefix: str) -> bool:
        return self._walk(prefix) is not None

    def _walk(self, s: str) -> TrieNode | None:
        node = self.root
        for ch in s:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def __contains__(self, word: str) -> bool:
        return self.is_word(word)

    def __len__(self) -> int:
        return self._size

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Trie):
            return NotImplemented
        return self.root == other.root
