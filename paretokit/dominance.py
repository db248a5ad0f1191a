"""Pareto dominance checks, filtering and objective transformations."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from enum import IntEnum
from itertools import repeat
from typing import Optional

Point = tuple[float, ...]


class Agree(IntEnum):
    """Common optimisation direction shared by all objectives."""

    MINIMISE = -1
    NONE = 0
    MAXIMISE = 1


def create_minmax(maximise: Iterable[Optional[bool]]) -> tuple[int, ...]:
    """Turn per-objective maximise flags into directions.

    True gives 1 (maximise), False gives -1 (minimise), anything else
    gives 0 (ignore).
    """
    result = []
    for flag in maximise:
        if flag is None:
            result.append(int(Agree.NONE))
        elif flag == 1:
            result.append(int(Agree.MAXIMISE))
        elif flag == 0:
            result.append(int(Agree.MINIMISE))
        else:
            result.append(int(Agree.NONE))
    return tuple(result)


def _directions(minmax: Optional[Sequence[int]], agree: int) -> Iterable[int]:
    if agree < 0:
        return repeat(-1)
    if agree > 0:
        return repeat(1)
    if minmax is None:
        raise ValueError("minmax is required when objectives do not agree")
    return minmax


def _compare(pj: Point, pk: Point, minmax, agree: int) -> tuple[bool, bool]:
    j_leq_k = k_leq_j = True
    for a, b, direction in zip(pj, pk, _directions(minmax, agree)):
        if direction < 0:
            j_leq_k = j_leq_k and a <= b
            k_leq_j = k_leq_j and b <= a
        elif direction > 0:
            j_leq_k = j_leq_k and a >= b
            k_leq_j = k_leq_j and b >= a
    return j_leq_k, k_leq_j


def _scan(points, minmax, agree, *, find_dominated: bool, keep_weakly: bool):
    pts = [tuple(point) for point in points]
    agree = int(agree)
    size = len(pts)
    nondom = [True] * size
    for k in range(size - 1):
        for j in range(k + 1, size):
            if not nondom[k]:
                break
            if not nondom[j]:
                continue
            j_leq_k, k_leq_j = _compare(pts[j], pts[k], minmax, agree)
            # k goes if weakly dominated by j; j goes if dominated by k.
            nondom[k] = not j_leq_k or (keep_weakly and k_leq_j)
            nondom[j] = not k_leq_j or j_leq_k
            if find_dominated and not (nondom[k] and nondom[j]):
                return nondom, (j if nondom[k] else k)
    return nondom, None


def find_nondominated_set_agree(points, minmax, agree) -> list[bool]:
    """Return a mask of the nondominated points; duplicates keep the last."""
    nondom, _ = _scan(points, minmax, agree, find_dominated=False, keep_weakly=False)
    return nondom


def find_nondominated_set(points, minmax) -> list[bool]:
    """Return a mask of the nondominated points under ``minmax``."""
    return find_nondominated_set_agree(points, minmax, Agree.NONE)


def find_weak_nondominated_set(points, minmax) -> list[bool]:
    """Return a mask of the points that are not strictly dominated."""
    nondom, _ = _scan(points, minmax, Agree.NONE, find_dominated=False, keep_weakly=True)
    return nondom


def find_dominated_point(points, minmax) -> Optional[int]:
    """Return the index of the first dominated point found, or None."""
    _, position = _scan(points, minmax, Agree.NONE, find_dominated=True, keep_weakly=False)
    return position


def get_nondominated_set(points, minmax) -> list[Point]:
    """Return the nondominated points in their original order."""
    pts = [tuple(point) for point in points]
    mask = find_nondominated_set(pts, minmax)
    return [point for point, keep in zip(pts, mask) if keep]


def _flipped(minmax: Optional[Sequence[int]], agree: int, dim: int) -> list[bool]:
    agree = int(agree)
    if agree == 0:
        return [False] * dim
    if minmax is None:
        raise ValueError("minmax is required to agree objectives")
    return [(agree > 0 and m < 0) or (agree < 0 and m > 0) for m in minmax[:dim]]


def agree_objectives(points, minmax, agree) -> list[Point]:
    """Negate the objectives whose direction differs from ``agree``."""
    pts = [tuple(point) for point in points]
    if not pts:
        return []
    flip = _flipped(minmax, agree, len(pts[0]))
    return [
        tuple(-value if negate else value for value, negate in zip(point, flip))
        for point in pts
    ]


def normalise(points, minmax, agree, lower_range, upper_range, lbound, ubound) -> list[Point]:
    """Map each objective from [lbound, ubound] to [lower_range, upper_range].

    Objectives that were negated to agree are mapped from
    [-ubound, -lbound]. A zero-width bound is treated as width 1.
    """
    span = upper_range - lower_range
    diff = [(hi - lo) or 1.0 for lo, hi in zip(lbound, ubound)]
    flip = _flipped(minmax, agree, len(diff))
    result = []
    for point in points:
        result.append(
            tuple(
                lower_range + span * ((hi + value) if negated else (value - lo)) / width
                for value, lo, hi, width, negated in zip(point, lbound, ubound, diff, flip)
            )
        )
    return result