from __future__ import annotations

import string

import numpy as np

LETTERS = string.ascii_lowercase


def random_letters(count: int, rng: np.random.Generator | None = None) -> str:
    """Draw ``count`` uniform lowercase letters."""
    if rng is None:
        rng = np.random.default_rng()
    picks = rng.integers(0, len(LETTERS), size=count)
    return "".join(LETTERS[i] for i in picks)


class Grid:
    """Square letter grid with king-move adjacency, immutable once built."""

    def __init__(self, size: int, letters: str):
        if size < 1:
            raise ValueError(f"Grid size must be at least 1, got {size}")
        total_cells = size * size
        if letters is None or len(letters) < total_cells:
            got = 0 if letters is None else len(letters)
            raise ValueError(f"A {size}x{size} grid needs {total_cells} letters, got {got}")

        self.size = size
        self._letters = letters[:total_cells]

        # Precompute adjacency lists
        neighbors: list[tuple[int, ...]] = []
        for idx in range(total_cells):
            r, c = divmod(idx, size)
            adj = []
            for dr in (-1, 0, 1):
                for dc in (-1, 0, 1):
                    if dr == 0 and dc == 0:
                        continue
                    nr, nc = r + dr, c + dc
                    if 0 <= nr < size and 0 <= nc < size:
                        adj.append(nr * size + nc)
            neighbors.append(tuple(adj))
        self._neighbors = tuple(neighbors)

    @classmethod
    def random(cls, size: int, rng: np.random.Generator | None = None) -> Grid:
        if size < 1:
            raise ValueError(f"Grid size must be at least 1, got {size}")
        return cls(size, random_letters(size * size, rng))

    @property
    def vertex_count(self) -> int:
        return len(self._letters)

    def cell(self, row: int, col: int) -> int:
        if not (0 <= row < self.size and 0 <= col < self.size):
            raise ValueError(f"Cell ({row}, {col}) is outside a {self.size}x{self.size} grid")
        return row * self.size + col

    def position(self, index: int) -> tuple[int, int]:
        return divmod(index, self.size)

    def letter(self, index: int) -> str:
        return self._letters[index]

    def neighbors(self, index: int) -> tuple[int, ...]:
        return self._neighbors[index]

    def letters(self) -> str:
        return self._letters

    def rows(self) -> list[str]:
        return [self._letters[r * self.size:(r + 1) * self.size] for r in range(self.size)]

    def render(self) -> str:
        return "".join("|" + "|".join(row) + "|\n" for row in self.rows())

    def __str__(self) -> str:
        return self.render()
