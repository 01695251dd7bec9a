from __future__ import annotations

from pathlib import Path
from typing import Optional

import numpy as np
import typer

from .bench import bench_lcs, bench_match, bench_transform
from .config import DEFAULT_COSTS, Costs, load_costs
from .errors import InvalidInputError
from .lcs import lcs as run_lcs
from .log import init_logging
from .match import exact_match
from .report import format_lcs_table, format_state_table, format_transform_table, write_json
from .schemas import LcsResult, MatchResult, TransformResult
from .transform import edit_transform


app = typer.Typer(
    add_completion=False,
    help="LCS, weighted edit transforms and automaton string matching.",
    pretty_exceptions_show_locals=False,
)


@app.callback()
def main(
    log_level: str = typer.Option("WARNING", "--log-level", help="DEBUG|INFO|WARNING|ERROR"),
) -> None:
    init_logging(log_level.upper())


def _ensure_parent(path: str | Path | None) -> None:
    if not path:
        return
    p = Path(path)
    if p.parent and not p.parent.exists():
        p.parent.mkdir(parents=True, exist_ok=True)


def _emit(result, out_json: Optional[str]) -> None:
    if out_json:
        _ensure_parent(out_json)
        write_json(result, out_json)
        typer.echo(f"Wrote {out_json}")


@app.command()
def lcs(
    x: str = typer.Argument(..., help="First string."),
    y: str = typer.Argument(..., help="Second string."),
    show_table: bool = typer.Option(False, "--show-table", help="Print the LCS table."),
    out_json: Optional[str] = typer.Option(None, "--out-json", help="Write JSON output."),
) -> None:
    """
    Print one longest common subsequence of X and Y.
    """
    t, seq = run_lcs(x, y)
    if show_table:
        typer.echo(format_lcs_table(t))
    typer.echo(f"length: {t.length}")
    typer.echo(f"lcs: {seq}")
    _emit(LcsResult.from_table(t, seq, include_table=show_table), out_json)


@app.command()
def transform(
    x: str = typer.Argument(..., help="Source string."),
    y: str = typer.Argument(..., help="Target string."),
    copy: Optional[int] = typer.Option(None, "--copy", help="Copy cost (may be negative)."),
    replace: Optional[int] = typer.Option(None, "--replace", help="Replace cost."),
    delete: Optional[int] = typer.Option(None, "--delete", help="Delete cost."),
    insert: Optional[int] = typer.Option(None, "--insert", help="Insert cost."),
    costs_file: Optional[str] = typer.Option(None, "--costs", help="YAML/JSON cost profile."),
    show_table: bool = typer.Option(False, "--show-table", help="Print the cost/op table."),
    out_json: Optional[str] = typer.Option(None, "--out-json", help="Write JSON output."),
) -> None:
    """
    Print the cheapest copy/replace/insert/delete script turning X into Y.
    """
    try:
        base = load_costs(costs_file) if costs_file else DEFAULT_COSTS
    except (ValueError, FileNotFoundError) as e:
        raise typer.BadParameter(str(e), param_hint="--costs") from e
    costs = Costs(
        copy=base.copy if copy is None else copy,
        replace=base.replace if replace is None else replace,
        delete=base.delete if delete is None else delete,
        insert=base.insert if insert is None else insert,
    )

    t, script, z = edit_transform(x, y, costs)
    if show_table:
        typer.echo(format_transform_table(t))
    typer.echo(f"cost: {t.total_cost}")
    typer.echo("script: " + " ".join(f"{o.op}:{o.char}" for o in script))
    typer.echo(f"result: {z}")
    _emit(TransformResult.from_table(t, script, z, include_table=show_table), out_json)


@app.command()
def match(
    text: str = typer.Argument(..., help="Text to search."),
    pattern: str = typer.Argument(..., help="Pattern to find."),
    show_table: bool = typer.Option(False, "--show-table", help="Print the state table."),
    out_json: Optional[str] = typer.Option(None, "--out-json", help="Write JSON output."),
) -> None:
    """
    Print every shift at which PATTERN occurs in TEXT.
    """
    try:
        t, shifts = exact_match(text, pattern)
    except InvalidInputError as e:
        raise typer.BadParameter(str(e), param_hint="PATTERN") from e
    if show_table:
        typer.echo(format_state_table(t))
    typer.echo("shifts: [" + " ".join(str(s) for s in shifts) + "]")
    _emit(MatchResult.from_table(text, t, shifts, include_table=show_table), out_json)


@app.command()
def bench(
    algorithm: str = typer.Argument(..., help="lcs|transform|match"),
    length: int = typer.Option(1000, "--length", help="Length of the random strings."),
    repeats: int = typer.Option(5, "--repeats", help="Number of timed runs."),
    pattern_length: int = typer.Option(5, "--pattern-length", help="Pattern length (match only)."),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for the random strings."),
    out_json: Optional[str] = typer.Option(None, "--out-json", help="Write JSON output."),
) -> None:
    """
    Time table construction and traceback on random alphanumeric strings.
    """
    if algorithm not in {"lcs", "transform", "match"}:
        raise typer.BadParameter("algorithm must be 'lcs', 'transform' or 'match'")
    rng = np.random.default_rng(seed)
    try:
        if algorithm == "lcs":
            res = bench_lcs(length, repeats, rng)
        elif algorithm == "transform":
            res = bench_transform(length, repeats, rng)
        else:
            res = bench_match(length, pattern_length, repeats, rng)
    except ValueError as e:
        raise typer.BadParameter(str(e)) from e

    typer.echo(f"Time to compute {algorithm} table: {res.build_seconds:.6f} s (average per op)")
    typer.echo(f"Time to compute {algorithm} result: {res.traceback_seconds:.6f} s (average per op)")
    _emit(res, out_json)
