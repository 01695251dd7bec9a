from __future__ import annotations

from time import perf_counter
from typing import Optional

import numpy as np

from .config import DEFAULT_COSTS, MAX_STRING_LENGTH, Costs
from .errors import IntegrityError
from .lcs import assemble_lcs, build_lcs_table
from .log import logger
from .match import build_state_table, fa_string_matcher
from .randstring import random_alphanumeric, random_substring
from .schemas import BenchResult
from .transform import apply_transformation, assemble_transformation, build_transform_table


def _check_sizes(string_length: int, repeats: int) -> None:
    if string_length < 0 or string_length > MAX_STRING_LENGTH:
        raise ValueError(f"string_length must be within 0..{MAX_STRING_LENGTH}")
    if repeats < 1:
        raise ValueError("repeats must be at least 1")


def _result(algorithm, string_length, repeats, dt_build, dt_trace, pattern_length=None) -> BenchResult:
    res = BenchResult(
        algorithm=algorithm,
        string_length=string_length,
        pattern_length=pattern_length,
        repeats=repeats,
        build_seconds=dt_build / repeats,
        traceback_seconds=dt_trace / repeats,
    )
    logger.info(
        "%s: build %.6fs, traceback %.6fs (average of %d)",
        algorithm,
        res.build_seconds,
        res.traceback_seconds,
        repeats,
    )
    return res


def bench_lcs(string_length: int, repeats: int, rng: Optional[np.random.Generator] = None) -> BenchResult:
    _check_sizes(string_length, repeats)
    rng = rng if rng is not None else np.random.default_rng()
    x = random_alphanumeric(string_length, rng)
    y = random_alphanumeric(string_length, rng)

    dt_build = dt_trace = 0.0
    for _ in range(repeats):
        t0 = perf_counter()
        t = build_lcs_table(x, y)
        t1 = perf_counter()
        assemble_lcs(t, len(x), len(y))
        t2 = perf_counter()
        dt_build += t1 - t0
        dt_trace += t2 - t1
    return _result("lcs", string_length, repeats, dt_build, dt_trace)


def bench_transform(
    string_length: int,
    repeats: int,
    rng: Optional[np.random.Generator] = None,
    costs: Costs = DEFAULT_COSTS,
) -> BenchResult:
    _check_sizes(string_length, repeats)
    rng = rng if rng is not None else np.random.default_rng()
    x = random_alphanumeric(string_length, rng)
    y = random_alphanumeric(string_length, rng)

    dt_build = dt_trace = 0.0
    for _ in range(repeats):
        t0 = perf_counter()
        t = build_transform_table(x, y, costs.copy, costs.replace, costs.delete, costs.insert)
        t1 = perf_counter()
        z = apply_transformation(x, assemble_transformation(t, len(x), len(y)))
        t2 = perf_counter()
        if z != y:
            raise IntegrityError(f"transformed string {z!r} does not match target {y!r}")
        dt_build += t1 - t0
        dt_trace += t2 - t1
    return _result("transform", string_length, repeats, dt_build, dt_trace)


def bench_match(
    string_length: int,
    pattern_length: int,
    repeats: int,
    rng: Optional[np.random.Generator] = None,
) -> BenchResult:
    _check_sizes(string_length, repeats)
    if pattern_length < 0 or pattern_length > string_length:
        raise ValueError("pattern_length must be within 0..string_length")
    rng = rng if rng is not None else np.random.default_rng()
    text = random_alphanumeric(string_length, rng)
    pattern = random_substring(text, pattern_length, rng)

    dt_build = dt_trace = 0.0
    for _ in range(repeats):
        t0 = perf_counter()
        t = build_state_table(text, pattern)
        t1 = perf_counter()
        fa_string_matcher(text, t)
        t2 = perf_counter()
        dt_build += t1 - t0
        dt_trace += t2 - t1
    return _result("match", string_length, repeats, dt_build, dt_trace, pattern_length=pattern_length)
