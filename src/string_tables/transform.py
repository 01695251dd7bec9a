from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from .config import DEFAULT_COSTS, Costs
from .errors import IntegrityError, InvalidInputError
from .log import logger
from .table import FlatTable


OpType = Literal["copy", "replace", "insert", "delete", "noop"]

NOOP_CHAR = "-"


@dataclass(frozen=True)
class Operation:
    op: OpType
    char: str = NOOP_CHAR


NOOP = Operation("noop", NOOP_CHAR)


@dataclass(frozen=True)
class TransformTable:
    """
    Cost and last-operation tables for turning prefixes of `x` into prefixes of `y`.

    x = "ACAAGC", y = "CCGT" with costs copy=-1, replace=1, delete=2, insert=2:

                 C      C      G      T
            0 -    2 I    4 I    6 I    8 I
       A    2 D    1 R    3 R    5 R    7 R
       C    4 D    1 C    0 C    2 I    4 I
       A    6 D    3 D    2 R    1 R    3 R
       A    8 D    5 D    4 R    3 R    2 R
       G   10 D    7 D    6 R    3 C    4 R
       C   12 D    9 C    6 C    5 D    4 R
    """

    x: str
    y: str
    costs: Costs
    cost: FlatTable
    op: FlatTable

    @property
    def height(self) -> int:
        return self.cost.height

    @property
    def width(self) -> int:
        return self.cost.width

    @property
    def total_cost(self) -> int:
        return self.cost.get(len(self.x), len(self.y))


def build_transform_table(x: str, y: str, cc: int, cr: int, cd: int, ci: int) -> TransformTable:
    height, width = len(x) + 1, len(y) + 1
    cost = FlatTable(height, width)
    op = FlatTable(height, width, dtype=object, fill=NOOP)

    for i in range(1, height):
        cost.set(i, 0, i * cd)
        op.set(i, 0, Operation("delete", x[i - 1]))
    for j in range(1, width):
        cost.set(0, j, j * ci)
        op.set(0, j, Operation("insert", y[j - 1]))

    for i in range(1, height):
        for j in range(1, width):
            # Later candidates only win when strictly cheaper: diagonal, then delete, then insert.
            if x[i - 1] == y[j - 1]:
                best, best_op = cost.get(i - 1, j - 1) + cc, Operation("copy", y[j - 1])
            else:
                best, best_op = cost.get(i - 1, j - 1) + cr, Operation("replace", y[j - 1])
            dele = cost.get(i - 1, j) + cd
            if dele < best:
                best, best_op = dele, Operation("delete", x[i - 1])
            ins = cost.get(i, j - 1) + ci
            if ins < best:
                best, best_op = ins, Operation("insert", y[j - 1])
            cost.set(i, j, best)
            op.set(i, j, best_op)

    t = TransformTable(x=x, y=y, costs=Costs(cc, cr, cd, ci), cost=cost, op=op)
    logger.debug("built transform table %dx%d, cost %d", t.height, t.width, t.total_cost)
    return t


def assemble_transformation(t: TransformTable, i: int, j: int) -> list[Operation]:
    """
    Operations turning x[:i] into y[:j], earliest first.

    The script opens with the NoOp stored at (0, 0).
    """
    ops: list[Operation] = []
    while True:
        step: Operation = t.op.get(i, j)
        ops.append(step)
        if step.op == "noop":
            break
        if step.op in {"copy", "replace"}:
            i -= 1
            j -= 1
        elif step.op == "delete":
            i -= 1
        elif step.op == "insert":
            j -= 1
        else:
            raise ValueError(f"Unknown operation: {step.op}")
    ops.reverse()
    return ops


def apply_transformation(x: str, script: list[Operation]) -> str:
    """
    Replay `script` over `x` from the first operation to the last.
    """
    out: list[str] = []
    pos = 0
    for step in script:
        if step.op == "noop":
            continue
        if step.op == "insert":
            out.append(step.char)
            continue
        if pos >= len(x):
            raise InvalidInputError(f"script consumes more than the {len(x)} characters of its source")
        if step.op == "copy":
            out.append(x[pos])
        elif step.op == "replace":
            out.append(step.char)
        elif step.op != "delete":
            raise ValueError(f"Unknown operation: {step.op}")
        pos += 1
    return "".join(out)


def edit_transform(
    x: str, y: str, costs: Costs = DEFAULT_COSTS
) -> tuple[TransformTable, list[Operation], str]:
    t = build_transform_table(x, y, costs.copy, costs.replace, costs.delete, costs.insert)
    script = assemble_transformation(t, len(x), len(y))
    z = apply_transformation(x, script)
    if z != y:
        logger.error("transformed string does not match target: x=%r y=%r z=%r", x, y, z)
        raise IntegrityError(f"transformed string {z!r} does not match target {y!r}")
    return t, script, z


def edit_counts(script: list[Operation]) -> dict[str, int]:
    counts = {"copy": 0, "replace": 0, "insert": 0, "delete": 0}
    for step in script:
        if step.op in counts:
            counts[step.op] += 1
    return counts
