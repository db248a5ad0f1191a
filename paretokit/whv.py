"""Exact weighted hypervolume of a two-objective set over weighted rectangles."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def _points(data: Iterable[Sequence[float]]) -> list[tuple[float, float]]:
    result = []
    for position, point in enumerate(data):
        if len(point) != 2:
            raise ValueError(f"point {position} must have 2 objectives, got {len(point)}")
        result.append((float(point[0]), float(point[1])))
    return result


def _rectangles(rows: Iterable[Sequence[float]]) -> list[tuple[float, ...]]:
    result = []
    for position, row in enumerate(rows):
        if len(row) != 5:
            raise ValueError(
                f"rectangle {position} must be (lower0, lower1, upper0, upper1, color)"
            )
        lower0, lower1, upper0, upper1, color = (float(value) for value in row)
        if not lower0 < upper0 or not lower1 < upper1:
            raise ValueError(f"rectangle {position} has its lower corner not below its upper corner")
        if not color >= 0:
            raise ValueError(f"rectangle {position} has a negative color")
        result.append((lower0, lower1, upper0, upper1, color))
    return result


def rect_weighted_hv2d(
    data: Iterable[Sequence[float]], rectangles: Iterable[Sequence[float]]
) -> float:
    """Return the hypervolume dominated by ``data`` inside weighted rectangles.

    ``data`` holds (x, y) points to be minimised. Each rectangle is
    (lower0, lower1, upper0, upper1, color); the area of each rectangle
    dominated by the points counts multiplied by its color.
    """
    points = sorted(_points(data), key=lambda p: (-p[1], p[0]))
    rects = sorted(_rectangles(rectangles), key=lambda r: (-r[3], r[2]))
    if not points or not rects:
        return 0.0

    n = len(points)
    first_upper1 = rects[0][3]
    last_top = rects[-1][3]
    last_right = max(rect[2] for rect in rects)

    whv = 0.0
    pk = 0
    top = first_upper1

    # Skip points lying above all the remaining rectangles.
    while points[pk][1] >= first_upper1:
        top = points[pk][1]
        if pk + 1 >= n or top == last_top or points[pk][0] >= last_right:
            return whv
        pk += 1

    while True:
        px, py = points[pk]
        for lower0, lower1, upper0, upper1, color in rects:
            if py >= upper1:
                break
            if px < upper0 and lower1 < top:
                # The point strictly dominates the upper corner and the
                # strip between it and the previous point is not counted yet.
                whv += (
                    (upper0 - max(px, lower0))
                    * (min(top, upper1) - max(py, lower1))
                    * color
                )
        while True:
            top = points[pk][1]
            if pk + 1 >= n or top == last_top or points[pk][0] >= last_right:
                return whv
            pk += 1
            if not (top == points[pk][1] and points[pk][1] >= first_upper1):
                break