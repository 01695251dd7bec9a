from __future__ import annotations

import json
from dataclasses import dataclass, fields
from pathlib import Path

import yaml

# Upper bound on generated benchmark strings; tables grow with the square of this.
MAX_STRING_LENGTH = 40000


@dataclass(frozen=True)
class Costs:
    """
    Unit costs for the edit transform. A negative copy cost rewards kept characters.
    """

    copy: int = -1
    replace: int = 1
    delete: int = 2
    insert: int = 2


DEFAULT_COSTS = Costs()

_COST_KEYS = {f.name for f in fields(Costs)}


def load_costs(path: str | Path | None) -> Costs:
    """
    Read a cost profile from YAML or JSON. Keys left out keep their default value.
    """
    if not path:
        return DEFAULT_COSTS
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(str(path))
    if p.suffix.lower() in {".yml", ".yaml"}:
        data = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    elif p.suffix.lower() == ".json":
        data = json.loads(p.read_text(encoding="utf-8"))
    else:
        raise ValueError("Cost profile must be .yml/.yaml or .json")
    if not isinstance(data, dict):
        raise ValueError("Cost profile must be a mapping of operation -> cost")
    return costs_from_mapping(data)


def costs_from_mapping(data: dict) -> Costs:
    unknown = set(map(str, data)) - _COST_KEYS
    if unknown:
        raise ValueError(f"Unknown cost keys: {', '.join(sorted(unknown))}")
    values: dict[str, int] = {}
    for key, value in data.items():
        # bool is an int subclass but never a meaningful cost
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"Cost for {key!r} must be an integer, got {value!r}")
        values[str(key)] = value
    return Costs(**values)
