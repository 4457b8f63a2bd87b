"""Settings merge: recursive dict merge with array-union semantics."""

from __future__ import annotations

import copy
from collections.abc import Iterable
from typing import Any


def _same(a: Any, b: Any) -> bool:
    # 1 == True and 1 == 1.0 in Python; JSON treats them as distinct values.
    return type(a) is type(b) and a == b


def union(base: list, overlay: list) -> list:
    """All distinct elements of both lists, each once.

    Only membership is guaranteed. The current output happens to be base
    items followed by overlay items not already present, but callers must
    not depend on that order.
    """
    result: list = []
    for item in (*base, *overlay):
        if not any(_same(item, seen) for seen in result):
            result.append(copy.deepcopy(item))
    return result


def deep_merge(base: dict, overlay: dict) -> dict:
    """Merge *overlay* onto *base* and return a new dict.

    dict + dict recurses, list + list is a union, anything else (scalars,
    nulls, type mismatches) takes the overlay value. Neither input is
    mutated.
    """
    result = copy.deepcopy(base)
    for k, v in overlay.items():
        if k in result and isinstance(result[k], dict) and isinstance(v, dict):
            result[k] = deep_merge(result[k], v)
        elif k in result and isinstance(result[k], list) and isinstance(v, list):
            result[k] = union(result[k], v)
        else:
            result[k] = copy.deepcopy(v)
    return result


def merge_all(fragments: Iterable[dict]) -> dict:
    """Left fold of :func:`deep_merge` starting from ``{}``."""
    merged: dict = {}
    for fragment in fragments:
        merged = deep_merge(merged, fragment)
    return merged
