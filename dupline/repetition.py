"""Character trie counting how often each exact line text was inserted."""

from typing import Dict, Optional


class _Node:
    __slots__ = ("children", "occurrence")

    def __init__(self) -> None:
        self.children: Dict[str, "_Node"] = {}
        self.occurrence = 0


class RepetitionIndex:
    """Insert-only multiset of line texts keyed by their character path.

    Each inserted text walks one node per character from the root; only the
    terminal node's counter is bumped, so a text that is a prefix of another
    shares path nodes with it but never its count.
    """

    def __init__(self) -> None:
        self._root = _Node()
        self._distinct = 0

    def insert(self, text: str) -> int:
        """Record one more occurrence of *text* and return its new count."""
        node = self._root
        for char in text:
            child = node.children.get(char)
            if child is None:
                child = node.children[char] = _Node()
            node = child
        if node.occurrence == 0:
            self._distinct += 1
        node.occurrence += 1
        return node.occurrence

    def count(self, text: str) -> int:
        """Return how many times *text* has been inserted (0 if never)."""
        node = self._find(text)
        return node.occurrence if node is not None else 0

    def _find(self, text: str) -> Optional[_Node]:
        node = self._root
        for char in text:
            node = node.children.get(char)
            if node is None:
                return None
        return node

    def __contains__(self, text: object) -> bool:
        return isinstance(text, str) and self.count(text) > 0

    def __len__(self) -> int:
        return self._distinct
