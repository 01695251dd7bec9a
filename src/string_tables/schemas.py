from __future__ import annotations

from dataclasses import asdict
from typing import Literal, Optional

from pydantic import BaseModel, Field

from .lcs import LCSTable
from .match import StateTable
from .transform import Operation, TransformTable, edit_counts


class OperationModel(BaseModel):
    op: Literal["copy", "replace", "insert", "delete", "noop"]
    char: str


class LcsResult(BaseModel):
    x: str
    y: str
    length: int
    sequence: str
    table: Optional[list[list[int]]] = None

    @classmethod
    def from_table(cls, t: LCSTable, sequence: str, include_table: bool = False) -> "LcsResult":
        return cls(
            x=t.x,
            y=t.y,
            length=t.length,
            sequence=sequence,
            table=t.table.rows() if include_table else None,
        )


class TransformResult(BaseModel):
    x: str
    y: str
    costs: dict[str, int]
    cost: int
    script: list[OperationModel] = Field(default_factory=list)
    counts: dict[str, int] = Field(default_factory=dict)
    reconstructed: str
    cost_table: Optional[list[list[int]]] = None

    @classmethod
    def from_table(
        cls,
        t: TransformTable,
        script: list[Operation],
        reconstructed: str,
        include_table: bool = False,
    ) -> "TransformResult":
        return cls(
            x=t.x,
            y=t.y,
            costs=asdict(t.costs),
            cost=t.total_cost,
            script=[OperationModel(op=o.op, char=o.char) for o in script],
            counts=edit_counts(script),
            reconstructed=reconstructed,
            cost_table=t.cost.rows() if include_table else None,
        )


class MatchResult(BaseModel):
    text: str
    pattern: str
    shifts: list[int] = Field(default_factory=list)
    alphabet: list[str] = Field(default_factory=list)
    state_table: Optional[list[list[int]]] = None

    @classmethod
    def from_table(
        cls, text: str, t: StateTable, shifts: list[int], include_table: bool = False
    ) -> "MatchResult":
        return cls(
            text=text,
            pattern=t.pattern,
            shifts=shifts,
            alphabet=t.alphabet,
            state_table=t.next_state.rows() if include_table else None,
        )


class BenchResult(BaseModel):
    algorithm: Literal["lcs", "transform", "match"]
    string_length: int
    pattern_length: Optional[int] = None
    repeats: int
    build_seconds: float
    traceback_seconds: float

