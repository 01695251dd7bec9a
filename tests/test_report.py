import json

from string_tables.lcs import lcs
from string_tables.match import exact_match
from string_tables.report import (
    format_lcs_table,
    format_state_table,
    format_transform_table,
    write_json,
)
from string_tables.schemas import LcsResult, MatchResult, TransformResult
from string_tables.transform import edit_transform


def test_format_lcs_table():
    t, _ = lcs("CATCGA", "GTACCGTCA")
    lines = format_lcs_table(t).splitlines()
    assert len(lines) == 1 + 7
    assert lines[0].split() == list("GTACCGTCA")
    assert lines[-1].split() == ["A", "0", "1", "1", "2", "2", "2", "3", "3", "3", "4"]


def test_format_transform_table():
    t, _, _ = edit_transform("ACAAGC", "CCGT")
    text = format_transform_table(t)
    lines = text.splitlines()
    assert len(lines) == 1 + 7
    assert "0 ---:-" in lines[1]
    assert lines[-1].split()[-2:] == ["4", "rep:T"]


def test_format_state_table():
    t, _ = exact_match("GTAACAGTAAACG", "AAC")
    lines = format_state_table(t).splitlines()
    assert lines[0].split() == ["G", "T", "A", "C"]
    assert lines[3].split() == ["2", "|", "0", "0", "2", "3"]


def test_json_results(tmp_path):
    t, seq = lcs("CATCGA", "GTACCGTCA")
    p = tmp_path / "lcs.json"
    write_json(LcsResult.from_table(t, seq, include_table=True), p)
    data = json.loads(p.read_text(encoding="utf-8"))
    assert data["sequence"] == "CTCA" and data["length"] == 4
    assert data["table"][6][9] == 4

    tt, script, z = edit_transform("ACAAGC", "CCGT")
    res = TransformResult.from_table(tt, script, z)
    assert res.cost == 4
    assert res.costs["copy"] == -1
    assert res.script[0].op == "noop"
    assert res.counts == {"copy": 2, "replace": 2, "insert": 0, "delete": 2}
    assert res.cost_table is None

    st, shifts = exact_match("GTAACAGTAAACG", "AAC")
    m = MatchResult.from_table("GTAACAGTAAACG", st, shifts, include_table=True)
    assert m.shifts == [2, 9]
    assert m.state_table[2] == [0, 0, 2, 3]
