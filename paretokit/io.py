"""Reading and writing sets of objective vectors stored as plain text.

A data file holds one point per line as whitespace-separated numbers.
Sets of points are separated by one or more blank lines, and lines whose
first non-blank character is ``#`` are comments.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Iterable, Sequence
from typing import IO, Optional, Union

STDIN_NAME = "<stdin>"
POINT_FORMAT = "% 17.16g"
POINT_SEPARATOR = "\t"

Point = tuple[float, ...]
Source = Union[str, "os.PathLike[str]", IO[str], None]


class ReadDataError(ValueError):
    """Raised when input data cannot be read or is malformed."""

    EMPTY = "empty"
    WRONG_INITIAL_DIM = "wrong_initial_dim"
    FOPEN = "fopen"
    CONVERSION = "conversion"
    COLUMNS = "columns"
    SETS = "sets"

    def __init__(self, message: str, filename: str, reason: str) -> None:
        super().__init__(message)
        self.filename = filename
        self.reason = reason


class ObjectivesIgnoredError(ValueError):
    """Raised when an objective specification ignores every objective."""


def _parse(lines: Iterable[str], filename: str, nobj: Optional[int]) -> list[list[Point]]:
    sets: list[list[Point]] = []
    current: list[Point] = []
    for lineno, line in enumerate(lines, start=1):
        stripped = line.strip()
        if stripped.startswith("#"):
            continue
        if not stripped:
            if current:
                sets.append(current)
                current = []
            continue
        try:
            point = tuple(float(token) for token in stripped.split())
        except ValueError:
            raise ReadDataError(
                f"{filename}: line {lineno}: could not convert string to number",
                filename,
                ReadDataError.CONVERSION,
            ) from None
        if not nobj:
            nobj = len(point)
        elif len(point) != nobj:
            if not sets and not current:
                raise ReadDataError(
                    f"{filename}: line {lineno}: input has dimension {len(point)}"
                    f" while previous data has dimension {nobj}",
                    filename,
                    ReadDataError.WRONG_INITIAL_DIM,
                )
            raise ReadDataError(
                f"{filename}: line {lineno}: found {len(point)} columns,"
                f" expected {nobj}",
                filename,
                ReadDataError.COLUMNS,
            )
        current.append(point)
    if current:
        sets.append(current)
    if not sets:
        raise ReadDataError(f"{filename}: no input data.", filename, ReadDataError.EMPTY)
    return sets


def read_data(source: Source = None, nobj: Optional[int] = None) -> list[list[Point]]:
    """Read sets of points from a path, an open text stream, or stdin (None).

    If ``nobj`` is given, every point must have that many objectives;
    otherwise the first point fixes the number of objectives.
    """
    if source is None:
        return _parse(sys.stdin, STDIN_NAME, nobj)
    if hasattr(source, "read"):
        return _parse(source, str(getattr(source, "name", "<stream>")), nobj)
    filename = os.fspath(source)
    try:
        with open(filename, encoding="utf-8") as stream:
            return _parse(stream, filename, nobj)
    except OSError as exc:
        raise ReadDataError(
            f"{filename}: {exc.strerror or exc}", filename, ReadDataError.FOPEN
        ) from exc


def read_reference_set(source: Source = None, nobj: Optional[int] = None) -> list[Point]:
    """Read a file that must hold exactly one set of points and return it."""
    sets = read_data(source, nobj)
    if len(sets) != 1:
        if source is None:
            filename = STDIN_NAME
        elif hasattr(source, "read"):
            filename = str(getattr(source, "name", "<stream>"))
        else:
            filename = os.fspath(source)
        raise ReadDataError(
            f"{filename}: expected a single set of points, found {len(sets)}",
            filename,
            ReadDataError.SETS,
        )
    return sets[0]


def format_vector(vector: Iterable[float]) -> str:
    """Format a point as tab-separated fixed-width numbers."""
    return POINT_SEPARATOR.join(POINT_FORMAT % value for value in vector)


def write_sets(stream: IO[str], sets: Iterable[Iterable[Sequence[float]]]) -> None:
    """Write each set one point per line, each set followed by a blank line."""
    for point_set in sets:
        for point in point_set:
            stream.write(format_vector(point) + "\n")
        stream.write("\n")


def write_sets_filtered(
    stream: IO[str],
    sets: Sequence[Sequence[Sequence[float]]],
    keep: Iterable[bool],
) -> None:
    """Write only the points whose flag in ``keep`` is true.

    ``keep`` holds one flag per point, over all sets in order.
    """
    flags = list(keep)
    total = sum(len(point_set) for point_set in sets)
    if len(flags) != total:
        raise ValueError(f"expected {total} flags, got {len(flags)}")
    flag_iter = iter(flags)
    for point_set in sets:
        for point, wanted in zip(point_set, flag_iter):
            if wanted:
                stream.write(format_vector(point) + "\n")
        stream.write("\n")


_MINMAX_CHARS = {"+": 1, "-": -1, "0": 0, "i": 0}
_BIT_CHARS = {"1": True, "0": False}


def parse_minmax(text: Optional[str], nobj: Optional[int] = None) -> tuple[tuple[int, ...], int]:
    """Parse an objective specification such as ``"+-i"``.

    Returns the directions (1 maximise, -1 minimise, 0 ignore) and the
    number of objectives given by the text. With no text every one of
    ``nobj`` objectives is minimised. A text shorter than ``nobj`` is
    repeated cyclically up to ``nobj`` entries.
    """
    if text is None:
        if not nobj or nobj <= 0:
            raise ValueError("the number of objectives must be positive")
        return (-1,) * nobj, nobj
    try:
        values = [_MINMAX_CHARS[char] for char in text]
    except KeyError as exc:
        raise ValueError(
            f"invalid character {exc.args[0]!r} in objective specification {text!r}"
        ) from None
    if all(value == 0 for value in values):
        raise ObjectivesIgnoredError(f"all objectives ignored because of --obj={text}")
    if nobj and len(values) < nobj:
        values = [values[i % len(values)] for i in range(nobj)]
    return tuple(values), len(text)


def parse_bitvector(text: Optional[str], nobj: Optional[int] = None) -> tuple[tuple[bool, ...], int]:
    """Parse a string of ``0`` and ``1`` characters into booleans.

    Returns the flags and their number. With no text, ``nobj`` false
    flags are returned.
    """
    if text is None:
        if not nobj or nobj <= 0:
            raise ValueError("the number of objectives must be positive")
        return (False,) * nobj, nobj
    try:
        flags = tuple(_BIT_CHARS[char] for char in text)
    except KeyError as exc:
        raise ValueError(f"invalid character {exc.args[0]!r} in {text!r}") from None
    return flags, len(flags)