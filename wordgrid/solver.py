from __future__ import annotations

import logging
from typing import Iterator

from wordgrid.grid import Grid
from wordgrid.lexicon import Trie, TrieNode

logger = logging.getLogger("wordgrid")

MIN_WORD_LENGTH = 3


class WordSearch:
    """Finds dictionary words along king-move paths of a grid.

    The grid and trie are only read; all search state lives in the recursion.
    """

    def __init__(self, grid: Grid, trie: Trie):
        self.grid = grid
        self.trie = trie

    def contains(self, word: str) -> bool:
        """Check whether ``word`` can be traced on the grid, letter by letter."""
        if not word:
            return True
        grid = self.grid
        # A path never visits more cells than the grid has
        if len(word) > grid.vertex_count:
            return False

        for start in range(grid.vertex_count):
            if grid.letter(start) != word[0]:
                continue
            if len(word) == 1:
                return True
            # Each frame is (visited, neighbour iterator); its depth is the next letter to match
            stack = [(1 << start, iter(grid.neighbors(start)))]
            while stack:
                visited, pending = stack[-1]
                nidx = next(pending, None)
                if nidx is None:
                    stack.pop()
                    continue
                if visited & (1 << nidx) or grid.letter(nidx) != word[len(stack)]:
                    continue
                if len(stack) + 1 == len(word):
                    return True
                stack.append((visited | (1 << nidx), iter(grid.neighbors(nidx))))
        return False

    def solve(self) -> set[str]:
        """Solve the grid using DFS with trie prefix pruning and bitmask visited tracking."""
        found: set[str] = set()
        grid = self.grid

        for start in range(grid.vertex_count):
            # One-step descent is is_prefix on the candidate extended by this cell
            node = self.trie.root.child(grid.letter(start))
            if node is None:
                continue
            path = [grid.letter(start)]
            stack: list[tuple[TrieNode, int, Iterator[int]]] = [
                (node, 1 << start, iter(grid.neighbors(start)))
            ]
            while stack:
                current, visited, pending = stack[-1]
                nidx = next(pending, None)
                if nidx is None:
                    stack.pop()
                    path.pop()
                    continue
                if visited & (1 << nidx):
                    continue
                child = current.child(grid.letter(nidx))
                if child is None:
                    continue

                path.append(grid.letter(nidx))
                if child.is_word and len(path) >= MIN_WORD_LENGTH:
                    found.add("".join(path))
                stack.append((child, visited | (1 << nidx), iter(grid.neighbors(nidx))))

        logger.debug("Solved %dx%d grid: %d words", grid.size, grid.size, len(found))
        return found


def rank(words: set[str], max_results: int = 0) -> list[str]:
    """Sort longest first, then alphabetical; cap when max_results > 0."""
    result = sorted(words, key=lambda w: (-len(w), w))
    return result[:max_results] if max_results > 0 else result
