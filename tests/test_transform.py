import numpy as np
import pytest

import string_tables.transform as transform_mod
from string_tables.config import Costs
from string_tables.errors import IntegrityError, InvalidInputError, TableIndexError
from string_tables.transform import (
    NOOP,
    Operation,
    apply_transformation,
    assemble_transformation,
    build_transform_table,
    edit_counts,
    edit_transform,
)

BOOK = Costs(copy=-1, replace=1, delete=2, insert=2)


def _script_cost(script, costs: Costs) -> int:
    unit = {
        "copy": costs.copy,
        "replace": costs.replace,
        "delete": costs.delete,
        "insert": costs.insert,
        "noop": 0,
    }
    return sum(unit[o.op] for o in script)


def test_book_example():
    t, script, z = edit_transform("ACAAGC", "CCGT", BOOK)
    assert t.cost.get(6, 4) == 4
    assert t.total_cost == 4
    assert z == "CCGT"
    assert script == [
        NOOP,
        Operation("delete", "A"),
        Operation("copy", "C"),
        Operation("delete", "A"),
        Operation("replace", "C"),
        Operation("copy", "G"),
        Operation("replace", "T"),
    ]


def test_book_table_cells():
    t = build_transform_table("ACAAGC", "CCGT", -1, 1, 2, 2)
    assert t.cost.row(2) == [4, 1, 0, 2, 4]
    assert t.op.get(2, 3) == Operation("insert", "G")
    assert t.op.get(3, 1) == Operation("delete", "A")
    assert t.cost.row(6) == [12, 9, 6, 5, 4]


def test_borders():
    t = build_transform_table("AB", "XYZ", 0, 1, 3, 5)
    assert t.cost.get(0, 0) == 0 and t.op.get(0, 0) == NOOP
    assert [t.cost.get(i, 0) for i in range(3)] == [0, 3, 6]
    assert [t.op.get(i, 0) for i in (1, 2)] == [Operation("delete", "A"), Operation("delete", "B")]
    assert t.cost.row(0) == [0, 5, 10, 15]
    assert [t.op.get(0, j).char for j in (1, 2, 3)] == ["X", "Y", "Z"]


def test_ties_prefer_diagonal_then_delete():
    # replace and delete+insert both cost 2: the diagonal wins
    t = build_transform_table("A", "B", 0, 2, 1, 1)
    assert t.op.get(1, 1) == Operation("replace", "B")
    # delete and insert tie from (1, 1): delete wins
    t = build_transform_table("A", "B", 0, 5, 1, 1)
    assert t.op.get(1, 1) == Operation("delete", "A")


@pytest.mark.parametrize(
    "x,y,kind",
    [("", "XYZ", "insert"), ("XYZ", "", "delete"), ("HELLO", "HELLO", "copy")],
)
def test_edge_scripts(x, y, kind):
    _, script, z = edit_transform(x, y, BOOK)
    assert z == y
    assert script[0] == NOOP
    assert {o.op for o in script[1:]} <= {kind}
    assert len(script) == 1 + max(len(x), len(y))


def test_empty_both():
    t, script, z = edit_transform("", "", BOOK)
    assert script == [NOOP] and z == "" and t.total_cost == 0


@pytest.mark.parametrize(
    "costs",
    [BOOK, Costs(0, 1, 1, 1), Costs(0, 0, 0, 0), Costs(-3, 2, 1, 4), Costs(1, 10, 1, 1)],
)
def test_random_round_trips(costs):
    rng = np.random.default_rng(11)
    for _ in range(40):
        n, m = rng.integers(0, 9, size=2)
        x = "".join("ABC"[k] for k in rng.integers(0, 3, size=n))
        y = "".join("ABC"[k] for k in rng.integers(0, 3, size=m))
        t, script, z = edit_transform(x, y, costs)
        assert apply_transformation(x, script) == y == z
        assert _script_cost(script, costs) == t.total_cost


def test_prefix_extraction_and_apply():
    t = build_transform_table("KITTEN", "SITTING", 0, 1, 1, 1)
    script = assemble_transformation(t, 3, 2)
    assert apply_transformation("KIT", script) == "SI"
    counts = edit_counts(assemble_transformation(t, 6, 7))
    assert counts["replace"] + counts["insert"] + counts["delete"] == t.total_cost == 3


def test_apply_rejects_overlong_script():
    with pytest.raises(InvalidInputError):
        apply_transformation("A", [NOOP, Operation("copy", "A"), Operation("delete", "B")])


def test_extract_out_of_range():
    t = build_transform_table("AB", "C", 0, 1, 1, 1)
    with pytest.raises(TableIndexError):
        assemble_transformation(t, 2, 2)


def test_integrity_failure_is_raised(monkeypatch, caplog):
    monkeypatch.setattr(transform_mod, "assemble_transformation", lambda t, i, j: [NOOP])
    with pytest.raises(IntegrityError):
        edit_transform("AB", "AB", BOOK)
    assert "does not match target" in caplog.text
