from __future__ import annotations

import argparse

import numpy as np

from string_tables.bench import bench_lcs, bench_match, bench_transform
from string_tables.log import init_logging


def main() -> int:
    ap = argparse.ArgumentParser()
    ap.add_argument("string_length", type=int)
    ap.add_argument("repeats", type=int)
    ap.add_argument("--pattern-length", type=int, default=5)
    ap.add_argument("--seed", type=int, default=None)
    args = ap.parse_args()

    init_logging("INFO")
    rng = np.random.default_rng(args.seed)
    results = [
        bench_lcs(args.string_length, args.repeats, rng),
        bench_transform(args.string_length, args.repeats, rng),
        bench_match(args.string_length, min(args.pattern_length, args.string_length), args.repeats, rng),
    ]
    for res in results:
        print(f"{res.algorithm:<10} build {res.build_seconds:.6f}s  result {res.traceback_seconds:.6f}s")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
