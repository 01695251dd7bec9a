from __future__ import annotations

from dataclasses import dataclass

from .log import logger
from .table import FlatTable


@dataclass(frozen=True)
class LCSTable:
    """
    LCS lengths for every pair of prefixes of `x` and `y`.

    For x = "CATCGA", y = "GTACCGTCA" the table reads

             G  T  A  C  C  G  T  C  A
          0  0  0  0  0  0  0  0  0  0
       C  0  0  0  0  1  1  1  1  1  1
       A  0  0  0  1  1  1  1  1  1  2
       T  0  0  1  1  1  1  1  2  2  2
       C  0  0  1  1  2  2  2  2  3  3
       G  0  1  1  1  2  2  3  3  3  3
       A  0  1  1  2  2  2  3  3  3  4
    """

    x: str
    y: str
    table: FlatTable

    @property
    def height(self) -> int:
        return self.table.height

    @property
    def width(self) -> int:
        return self.table.width

    @property
    def length(self) -> int:
        return self.table.get(len(self.x), len(self.y))


def build_lcs_table(x: str, y: str) -> LCSTable:
    # Row 0 and column 0 stay at the zero fill.
    table = FlatTable(len(x) + 1, len(y) + 1)
    for i in range(1, len(x) + 1):
        for j in range(1, len(y) + 1):
            if x[i - 1] == y[j - 1]:
                table.set(i, j, table.get(i - 1, j - 1) + 1)
            else:
                table.set(i, j, max(table.get(i - 1, j), table.get(i, j - 1)))
    t = LCSTable(x=x, y=y, table=table)
    logger.debug("built LCS table %dx%d, length %d", t.height, t.width, t.length)
    return t


def assemble_lcs(t: LCSTable, i: int, j: int) -> str:
    """
    Walk back from (i, j) to recover one LCS of x[:i] and y[:j].

    On a mismatch the walk moves left only when the left neighbour is strictly
    larger; ties move up.
    """
    t.table.coord(i, j)
    out: list[str] = []
    while t.table.get(i, j) != 0:
        if t.x[i - 1] == t.y[j - 1]:
            out.append(t.x[i - 1])
            i -= 1
            j -= 1
        elif t.table.get(i, j - 1) > t.table.get(i - 1, j):
            j -= 1
        else:
            i -= 1
    out.reverse()
    return "".join(out)


def lcs(x: str, y: str) -> tuple[LCSTable, str]:
    t = build_lcs_table(x, y)
    seq = assemble_lcs(t, len(x), len(y))
    logger.debug("LCS of %d/%d chars: %r", len(x), len(y), seq)
    return t, seq
