from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel

from .lcs import LCSTable
from .match import StateTable
from .transform import TransformTable

_OP_LABELS = {
    "copy": "cpy",
    "replace": "rep",
    "insert": "ins",
    "delete": "del",
    "noop": "---",
}


def write_json(result: BaseModel, path: str | Path) -> None:
    Path(path).write_text(result.model_dump_json(indent=2), encoding="utf-8")


def format_lcs_table(t: LCSTable) -> str:
    lines = ["      " + "".join(f"{ch:>3}" for ch in t.y)]
    for i in range(t.height):
        label = t.x[i - 1] if i > 0 else " "
        lines.append(f"{label:>3}" + "".join(f"{v:>3}" for v in t.table.row(i)))
    return "\n".join(lines)


def format_transform_table(t: TransformTable) -> str:
    cell = 12
    lines = [" " * (3 + cell) + "".join(f"{ch:>{cell}}" for ch in t.y)]
    for i in range(t.height):
        label = t.x[i - 1] if i > 0 else " "
        cells = []
        for j in range(t.width):
            step = t.op.get(i, j)
            cells.append(f"{t.cost.get(i, j):>6} {_OP_LABELS[step.op]}:{step.char}")
        lines.append(f"{label:>3}" + "".join(f"{c:>{cell}}" for c in cells))
    return "\n".join(lines)


def format_state_table(t: StateTable) -> str:
    lines = ["      " + "".join(f"{ch:>4}" for ch in t.alphabet)]
    for state in range(t.next_state.height):
        lines.append(f"{state:>4} |" + "".join(f"{v:>4}" for v in t.next_state.row(state)))
    return "\n".join(lines)
