"""Checks and transformations applied to sets of points read from files."""

from __future__ import annotations

import math
import re
import sys
from collections.abc import Iterable, Sequence
from typing import IO, Optional

from .dominance import find_nondominated_set_agree
from .io import POINT_FORMAT, format_vector

Point = tuple[float, ...]

_NUMBER = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)

# Keyed by the sign of a minmax entry.
_DIRECTION_CHARS = {-1: "-", 0: "i", 1: "+"}


def _number_at(text: str, pos: int) -> Optional[tuple[float, int]]:
    match = _NUMBER.match(text, pos)
    if match is None:
        return None
    return float(match.group(1)), match.end()


def _only_space_from(text: str, pos: int) -> bool:
    return not text[pos:].strip()


def read_range(text: str) -> tuple[float, float]:
    """Parse two numbers, such as ``"1 2"``, into (lower, upper)."""
    values = []
    pos = 0
    for _ in range(2):
        found = _number_at(text, pos)
        if found is None:
            raise ValueError(f"invalid range {text!r}")
        value, pos = found
        values.append(value)
    if not _only_space_from(text, pos):
        raise ValueError(f"invalid range {text!r}")
    return values[0], values[1]


def read_point(text: str) -> Point:
    """Parse a whitespace-separated list of numbers into a point."""
    values = []
    pos = 0
    while (found := _number_at(text, pos)) is not None:
        value, pos = found
        values.append(value)
    if not _only_space_from(text, pos) or not values:
        raise ValueError(f"invalid point {text!r}")
    return tuple(values)


def data_bounds(
    points: Iterable[Sequence[float]],
    minimum: Optional[Sequence[float]] = None,
    maximum: Optional[Sequence[float]] = None,
) -> tuple[Point, Point]:
    """Return per-objective (minimum, maximum), extending any bounds given."""
    pts = [tuple(float(v) for v in point) for point in points]
    if minimum is not None:
        dim = len(minimum)
    elif maximum is not None:
        dim = len(maximum)
    elif pts:
        dim = len(pts[0])
    else:
        return (), ()
    low = list(minimum) if minimum is not None else [math.inf] * dim
    high = list(maximum) if maximum is not None else [-sys.float_info.max] * dim
    for point in pts:
        for n, value in enumerate(point[:dim]):
            if low[n] > value:
                low[n] = value
            if high[n] < value:
                high[n] = value
    return tuple(low), tuple(high)


def any_less_than(a: Sequence[float], b: Sequence[float]) -> bool:
    """True if some objective of ``a`` is smaller than that of ``b``."""
    return any(x < y for x, y in zip(a, b))


def _log10(value: float) -> float:
    if value > 0:
        return math.log10(value)
    if value == 0:
        return -math.inf
    return math.nan


def logarithm_scale(points: Iterable[Sequence[float]], logarithm: Sequence[bool]) -> list[Point]:
    """Apply log10 to the objectives flagged in ``logarithm``."""
    return [
        tuple(_log10(v) if flag else v for v, flag in zip(point, logarithm))
        + tuple(point[len(logarithm):])
        for point in (tuple(float(v) for v in p) for p in points)
    ]


def force_bounds(
    sets: Iterable[Iterable[Sequence[float]]],
    lbound: Sequence[float],
    ubound: Sequence[float],
) -> tuple[list[list[Point]], int]:
    """Drop points outside [lbound, ubound].

    Returns the filtered sets, which keep their positions even if they
    become empty, and the number of points removed.
    """
    kept: list[list[Point]] = []
    removed = 0
    for point_set in sets:
        inside = []
        for point in point_set:
            point = tuple(float(v) for v in point)
            if any_less_than(point, lbound) or any_less_than(ubound, point):
                removed += 1
            else:
                inside.append(point)
        kept.append(inside)
    return kept, removed


def check_nondominated(
    filename: str,
    sets: Sequence[Sequence[Sequence[float]]],
    minmax: Optional[Sequence[int]],
    agree: int = 0,
    verbosity: int = 0,
    stream: Optional[IO[str]] = None,
) -> tuple[bool, list[bool]]:
    """Check each set for dominated points.

    Returns whether any set holds a dominated point and a mask, over all
    points in order, of the points that are nondominated within their set.
    Per-set statistics are written to ``stream`` (stderr by default)
    when ``verbosity`` is 1 (only sets with dominated points) or 2.
    """
    out = stream if stream is not None else sys.stderr
    width = max(len(filename), len("filename"))
    first_time = True
    dominated_found = False
    mask: list[bool] = []
    for number, point_set in enumerate(sets, start=1):
        nondom = find_nondominated_set_agree(point_set, minmax, agree)
        old_size = len(nondom)
        new_size = sum(nondom)
        mask.extend(nondom)
        if verbosity >= 2:
            if first_time:
                out.write(f"# {'filename':>{width - 2}}\tset\tsize\tnondom\tdom\n")
                first_time = False
            out.write(
                f"{filename:<{width}}\t{number}\t{old_size}\t{new_size}"
                f"\t{old_size - new_size}\n"
            )
        elif verbosity and new_size < old_size:
            if first_time:
                out.write(f"{'filename':<{width}}\tset\tdom\n")
                first_time = False
            out.write(f"{filename:<{width}}\t{number}\t{old_size - new_size} dominated\n")
        if new_size < old_size:
            dominated_found = True
    return dominated_found, mask


def print_file_info(stream: IO[str], filename: str, minmax: Sequence[int]) -> None:
    """Write the file name and the direction of each objective."""
    stream.write(f"# file: {filename}\n")
    stream.write(f"# objectives ({len(minmax)}): ")
    stream.write("".join(_DIRECTION_CHARS[(m > 0) - (m < 0)] for m in minmax))
    stream.write("\n")


def print_output_header(
    stream: IO[str],
    filename: str,
    minmax: Sequence[int],
    agree: int,
    normalise_range: Optional[tuple[float, float]],
    lbound: Sequence[float],
    ubound: Sequence[float],
    logarithm: Optional[Sequence[bool]] = None,
) -> None:
    """Write the comment header describing how an output file was produced."""
    dim = len(minmax)
    print_file_info(stream, filename, minmax)
    agree_text = "min" if agree < 0 else "max" if agree > 0 else "no"
    stream.write(f"# agree: {agree_text}\n")
    if logarithm is not None:
        flags = "".join("1" if flag else "0" for flag in logarithm[:dim])
        stream.write(f"# logarithm: {flags}\n")
    if normalise_range is not None:
        lower, upper = normalise_range
        stream.write(f"# range: {POINT_FORMAT % lower} {POINT_FORMAT % upper}\n")
    stream.write(f"# lower bound: {format_vector(lbound[:dim])}\n")
    stream.write(f"# upper bound: {format_vector(ubound[:dim])}\n")


def print_input_info(
    stream: IO[str],
    filename: str,
    sets: Sequence[Sequence[Sequence[float]]],
    minmax: Sequence[int],
    minimum: Sequence[float],
    maximum: Sequence[float],
) -> None:
    """Write a summary of the sets read from a file."""
    dim = len(minmax)
    print_file_info(stream, filename, minmax)
    sizes = [len(point_set) for point_set in sets]
    stream.write(f"# sets: {len(sizes)}\n")
    stream.write(f"# sizes: {', '.join(str(size) for size in sizes)}\n")
    stream.write(f"# points: {sum(sizes)}\n")
    stream.write(f"# minimum:{format_vector(minimum[:dim])}\n")
    stream.write(f"# maximum:{format_vector(maximum[:dim])}\n")