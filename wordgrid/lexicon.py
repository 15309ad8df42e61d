from __future__ import annotations

import logging
import re
import unicodedata
from typing import Iterable

logger = logging.getLogger("wordgrid")

# Slot order doubles as enumeration order: letters, then hyphen, then apostrophe
ALPHABET = "abcdefghijklmnopqrstuvwxyz-'"
_SLOTS = {symbol: slot for slot, symbol in enumerate(ALPHABET)}
_DISCARD = re.compile(r"[^a-z'\-]")


def sanitize(text: str) -> str:
    """Fold text onto the tree alphabet.

    Accents are stripped, case is folded, and anything that is not a letter,
    hyphen or apostrophe is dropped, so "Chat!" and "chat" sanitize alike.
    """
    if text is None:
        raise ValueError("text must not be None")
    decomposed = unicodedata.normalize("NFKD", text)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return _DISCARD.sub("", stripped.lower())


class TrieNode:
    __slots__ = ("children", "is_word")

    def __init__(self):
        self.children: list[TrieNode | None] = [None] * len(ALPHABET)
        self.is_word: bool = False

    def child(self, symbol: str) -> TrieNode | None:
        slot = _SLOTS.get(symbol)
        if slot is None:
            return None
        return self.children[slot]


class Trie:
    def __init__(self, words: Iterable[str] = ()):
        self.root = TrieNode()
        self._size = 0
        for word in words:
            self.insert(word)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, word: str) -> bool:
        return self.contains_word(word)

    def size(self) -> int:
        return self._size

    def insert(self, word: str) -> bool:
        """Insert a word, returning True if it was not already stored."""
        word = sanitize(word)
        if not word:
            return False
        node = self.root
        for ch in word:
            slot = _SLOTS[ch]
            if node.children[slot] is None:
                node.children[slot] = TrieNode()
            node = node.children[slot]
        if node.is_word:
            return False
        node.is_word = True
        self._size += 1
        return True

    def contains_word(self, word: str) -> bool:
        word = sanitize(word)
        if not word:
            return False
        node = self._walk(word)
        return node is not None and node.is_word

    def is_prefix(self, text: str) -> bool:
        """Check whether some stored word starts with ``text``.

        The text is not sanitized: callers pass symbols that are already in
        the tree alphabet. Any other character simply has no matching branch.
        """
        return self._walk(text) is not None

    def get_words(self, prefix: str) -> list[str]:
        """All stored words starting with ``prefix``, in alphabetical order."""
        prefix = sanitize(prefix)
        node = self._walk(prefix)
        words: list[str] = []
        if node is not None:
            self._collect(node, prefix, words)
        return words

    def get_words_of_length(self, length: int) -> list[str]:
        words: list[str] = []
        if length <= 0:
            return words
        self._collect(self.root, "", words, length)
        return words

    def _walk(self, text: str) -> TrieNode | None:
        node = self.root
        for ch in text:
            node = node.child(ch)
            if node is None:
                return None
        return node

    def _collect(self, node: TrieNode, prefix: str, words: list[str], length: int = 0):
        """Depth-first walk in slot order, so words come out sorted.

        With ``length`` > 0 only words of exactly that many symbols are kept
        and nothing deeper is visited.
        """
        path = list(prefix)
        if node.is_word and (not length or len(path) == length):
            words.append(prefix)
        # One child iterator per symbol on the path below node
        stack = [enumerate(node.children)]
        while stack:
            slot, child = next(stack[-1], (-1, None))
            if slot < 0:
                stack.pop()
                if stack:
                    path.pop()
                continue
            if child is None:
                continue
            path.append(ALPHABET[slot])
            if child.is_word and (not length or len(path) == length):
                words.append("".join(path))
            if length and len(path) >= length:
                stack.append(iter(()))
            else:
                stack.append(enumerate(child.children))


def load_trie(path: str) -> Trie:
    """Build a trie from a newline-delimited word list.

    I/O failures propagate; a missing file is never turned into an empty trie.
    """
    trie = Trie()
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            trie.insert(line)
    logger.info("Loaded %d words from %s", trie.size(), path)
    return trie
