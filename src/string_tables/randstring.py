from __future__ import annotations

import string
from typing import Optional

import numpy as np

ALPHANUMERIC = string.digits + string.ascii_uppercase + string.ascii_lowercase


def random_alphanumeric(length: int, rng: Optional[np.random.Generator] = None) -> str:
    if length < 0:
        raise ValueError("length must be non-negative")
    rng = rng if rng is not None else np.random.default_rng()
    idx = rng.integers(0, len(ALPHANUMERIC), size=length)
    return "".join(ALPHANUMERIC[k] for k in idx)


def random_substring(text: str, length: int, rng: Optional[np.random.Generator] = None) -> str:
    """
    A slice of `text` of the given length at a random start, so a match is guaranteed.
    """
    if not 0 <= length <= len(text):
        raise ValueError(f"substring length {length} must be within 0..{len(text)}")
    rng = rng if rng is not None else np.random.default_rng()
    start = int(rng.integers(0, len(text) - length + 1))
    return text[start : start + length]
