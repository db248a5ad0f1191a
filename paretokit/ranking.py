"""Nondominated sorting: assign each point the index of its Pareto front.

All objectives are minimised. Rank 1 is the set of points that no other
point strictly dominates, rank 2 is the nondominated set of what remains,
and so on. Duplicated points always share a rank.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

Point = tuple[float, ...]


def _as_points(points: Iterable[Sequence[float]]) -> list[Point]:
    pts = [tuple(float(value) for value in point) for point in points]
    if pts:
        dim = len(pts[0])
        if dim == 0:
            raise ValueError("points must have at least one objective")
        for position, point in enumerate(pts):
            if len(point) != dim:
                raise ValueError(
                    f"point {position} has {len(point)} objectives, expected {dim}"
                )
    return pts


def _weakly_dominates(a: Point, b: Point) -> bool:
    return all(x <= y for x, y in zip(a, b))


def _rank_general(pts: list[Point]) -> list[int]:
    size = len(pts)
    rank = [1] * size
    level = 2
    while True:
        nothing_new = True
        for j in range(size):
            # Skip points already dominated or belonging to an earlier front.
            if rank[j] != level - 1:
                continue
            for k in range(size):
                if k == j or rank[k] != level - 1:
                    continue
                j_leq_k = _weakly_dominates(pts[j], pts[k])
                k_leq_j = _weakly_dominates(pts[k], pts[j])
                if j_leq_k and not k_leq_j:
                    nothing_new = False
                    rank[k] += 1
                elif k_leq_j and not j_leq_k:
                    nothing_new = False
                    rank[j] += 1
                    break
        level += 1
        if nothing_new:
            return rank


def _rank_2d(pts: list[Point]) -> list[int]:
    if not pts:
        return []
    entries = sorted(zip(pts, range(len(pts))), key=lambda entry: entry[0][:2])
    rank = [0] * len(pts)
    first_point, first_index = entries[0]
    front_last: list[Point] = [first_point]
    rank[first_index] = 1
    for point, index in entries[1:]:
        x, y = point
        last = front_last[-1]
        if y < last[1]:
            low, high = 0, len(front_last)
            while low < high:
                mid = low + (high - low) // 2
                mid_x, mid_y = front_last[mid]
                if y < mid_y:
                    high = mid
                elif y > mid_y or (y == mid_y and x > mid_x):
                    low = mid + 1
                else:
                    # Duplicated points are assigned to the same front.
                    low = mid
                    break
            front_last[low] = point
            front = low
        elif y == last[1] and x == last[0]:
            front_last[-1] = point
            front = len(front_last) - 1
        else:
            front_last.append(point)
            front = len(front_last) - 1
        rank[index] = front + 1
    return rank


def pareto_rank_2d(points: Iterable[Sequence[float]]) -> list[int]:
    """Rank two-objective points in O(n log n) time.

    Raises ValueError if any point does not have exactly two objectives.
    """
    pts = _as_points(points)
    if pts and len(pts[0]) != 2:
        raise ValueError(f"expected 2 objectives, got {len(pts[0])}")
    return _rank_2d(pts)


def pareto_rank(points: Iterable[Sequence[float]]) -> list[int]:
    """Return the Pareto front (starting at 1) of every point, in input order."""
    pts = _as_points(points)
    if not pts:
        return []
    if len(pts[0]) == 2:
        return _rank_2d(pts)
    return _rank_general(pts)