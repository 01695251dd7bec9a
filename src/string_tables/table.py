from __future__ import annotations

from typing import Any

import numpy as np

from .errors import TableIndexError


class FlatTable:
    """
    A height x width table kept in one contiguous numpy array.

    Cell (i, j) lives at index ``j + i * width``.
    """

    def __init__(self, height: int, width: int, dtype: Any = np.int64, fill: Any = 0) -> None:
        if height < 0 or width < 0:
            raise ValueError(f"table dimensions must be non-negative, got {height}x{width}")
        self.height = height
        self.width = width
        self.cells = np.full(height * width, fill, dtype=dtype)

    def __len__(self) -> int:
        return self.height * self.width

    def coord(self, i: int, j: int) -> int:
        if not (0 <= i < self.height and 0 <= j < self.width):
            raise TableIndexError(f"cell ({i}, {j}) outside {self.height}x{self.width} table")
        return j + i * self.width

    def get(self, i: int, j: int) -> Any:
        value = self.cells[self.coord(i, j)]
        if isinstance(value, np.generic):
            return value.item()
        return value

    def set(self, i: int, j: int, value: Any) -> None:
        self.cells[self.coord(i, j)] = value

    def row(self, i: int) -> list[Any]:
        return [self.get(i, j) for j in range(self.width)]

    def rows(self) -> list[list[Any]]:
        return [self.row(i) for i in range(self.height)]
