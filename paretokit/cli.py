"""Command-line tool that checks, filters and transforms sets of points.

Each input file holds one or more sets of points. The tool reports whether
any set contains dominated points and, on request, writes a transformed
copy of every file: dominated points filtered out, objectives agreed to a
common direction, points outside given bounds removed, objectives on a
logarithmic scale or normalised to a range.

The exit status is 1 if a dominated point was found or an error occurred,
and 0 otherwise.
"""

from __future__ import annotations

import getopt
import os
import sys
from dataclasses import dataclass, replace
from typing import IO, Optional, Sequence

from .dominance import agree_objectives, normalise
from .filters import (
    any_less_than,
    check_nondominated,
    data_bounds,
    force_bounds,
    logarithm_scale,
    print_input_info,
    print_output_header,
    read_point,
    read_range,
)
from .io import (
    STDIN_NAME,
    ObjectivesIgnoredError,
    ReadDataError,
    format_vector,
    parse_bitvector,
    parse_minmax,
    read_data,
    write_sets,
    write_sets_filtered,
)

PROGRAM = "nondominated"
VERSION = "1.0"
DEFAULT_SUFFIX = "_dat"

_SHORT_OPTIONS = "hVvqfo:a:n:u:l:Us:b"
_LONG_OPTIONS = [
    "help",
    "version",
    "verbose",
    "quiet",
    "no-check",
    "filter",
    "force-bounds",
    "obj=",
    "agree=",
    "normalise=",
    "upper-bound=",
    "lower-bound=",
    "union",
    "suffix=",
    "log=",
]


@dataclass
class Options:
    """Settings that control how each input file is processed."""

    verbosity: int = 0
    check: bool = True
    filter: bool = False
    force_bounds: bool = False
    union: bool = False
    normalise_range: Optional[tuple[float, float]] = None
    agree: int = 0
    minmax: Optional[tuple[int, ...]] = None
    logarithm: Optional[tuple[bool, ...]] = None
    suffix: str = DEFAULT_SUFFIX
    dim: Optional[int] = None


def _write_output(out: IO[str], display, options, minmax, lbound, ubound, sets, mask, dominated):
    print_output_header(
        out,
        display,
        minmax,
        options.agree,
        options.normalise_range,
        lbound,
        ubound,
        options.logarithm,
    )
    if options.filter and dominated:
        write_sets_filtered(out, sets, mask)
    else:
        write_sets(out, sets)


def process_file(
    filename,
    options: Options,
    lbound: Optional[Sequence[float]] = None,
    ubound: Optional[Sequence[float]] = None,
    check_minimum: bool = True,
    check_maximum: bool = True,
) -> tuple[bool, tuple[float, ...], tuple[float, ...]]:
    """Check and transform one file; ``None`` reads stdin and writes stdout.

    Returns whether a dominated point was found and the per-objective
    minimum and maximum of the data as read. Raises ValueError if the
    data violates a given bound or an output file cannot be written.
    """
    err = sys.stderr
    display = STDIN_NAME if filename is None else os.fspath(filename)
    sets = read_data(filename, options.dim)
    if options.union:
        sets = [[point for point_set in sets for point in point_set]]
    dim = len(sets[0][0])

    minmax = options.minmax if options.minmax is not None else parse_minmax(None, dim)[0]

    minimum, maximum = data_bounds(point for point_set in sets for point in point_set)

    if options.verbosity >= 2:
        print_input_info(err, display, sets, minmax, minimum, maximum)

    if lbound is None:
        lbound = minimum
    elif check_minimum and not options.force_bounds and any_less_than(minimum, lbound):
        raise ValueError(
            f"{display}: found vector smaller than lower bound:{format_vector(minimum)}"
        )

    if ubound is None:
        ubound = maximum
    elif check_maximum and not options.force_bounds and any_less_than(ubound, maximum):
        raise ValueError(
            f"{display}: found vector larger than upper bound:{format_vector(maximum)}"
        )
    lbound = tuple(lbound)
    ubound = tuple(ubound)

    if options.force_bounds:
        sets, removed = force_bounds(sets, lbound, ubound)
        if options.verbosity >= 2:
            err.write(f"# out of bounds: {removed}\n")

    logarithm_flag = options.logarithm is not None and any(options.logarithm[:dim])
    if logarithm_flag:
        lbound = logarithm_scale([lbound], options.logarithm)[0]
        ubound = logarithm_scale([ubound], options.logarithm)[0]
        sets = [logarithm_scale(point_set, options.logarithm) for point_set in sets]

    if options.agree:
        sets = [agree_objectives(point_set, minmax, options.agree) for point_set in sets]

    if options.normalise_range is not None:
        lower_range, upper_range = options.normalise_range
        sets = [
            normalise(point_set, minmax, options.agree, lower_range, upper_range, lbound, ubound)
            for point_set in sets
        ]

    dominated_found = False
    mask: list[bool] = []
    if options.check or options.filter:
        dominated_found, mask = check_nondominated(
            display, sets, minmax, options.agree, options.verbosity, err
        )

    if options.verbosity >= 2:
        err.write(f"# nondominated: {'FALSE' if dominated_found else 'TRUE'}\n")

    if (
        options.filter
        or options.agree
        or options.normalise_range is not None
        or options.force_bounds
        or logarithm_flag
    ):
        if filename is None:
            outname = "<stdout>"
            _write_output(
                sys.stdout, display, options, minmax, lbound, ubound, sets, mask, dominated_found
            )
        else:
            outname = display + options.suffix
            try:
                with open(outname, "w", encoding="utf-8") as out:
                    _write_output(
                        out, display, options, minmax, lbound, ubound, sets, mask, dominated_found
                    )
            except OSError as exc:
                raise ValueError(f"{outname}: {exc.strerror or exc}") from exc
        if options.verbosity:
            err.write(f"# {display} -> {outname}\n")

    if options.verbosity >= 2:
        err.write("#\n")

    return dominated_found, tuple(minimum), tuple(maximum)


def _usage() -> str:
    return (
        "\n"
        "Usage:\n"
        f"       {PROGRAM} [OPTIONS] [FILES] \n"
        f"       {PROGRAM} [OPTIONS] < [INPUT] > [OUTPUT]\n\n"
        "Obtain information and perform some operations on the nondominated sets "
        "given as input. \n\n"
        "Options:\n"
        " -h, --help          print this summary and exit;\n"
        "     --version       print version number and exit;\n"
        " -v, --verbose       print some extra information;\n"
        " -q, --quiet         print as little as possible;\n"
        "     --no-check      do not check nondominance of sets (faster but unsafe);\n"
        " -o, --obj=[+|-]...  specify whether each objective should be minimised (-)\n"
        "                     or maximised (+). By default all are minimised;\n"
        ' -u, --upper-bound POINT defines an upper bound to check, e.g. "10 5 30";\n'
        " -l, --lower-bound POINT defines a lower bound to check;\n"
        " -U, --union         consider each file as a whole approximation set,\n"
        "                     (by default, approximation sets are separated by an\n"
        "                     empty line within a file);\n"
        f' -s, --suffix=STRING suffix to add to output files. Default is "{DEFAULT_SUFFIX}".\n'
        "                     The empty string means overwrite the input file.\n"
        "                     This is ignored when reading from stdin because output\n"
        "                     is sent to stdout.\n"
        "\n"
        " The following options OVERWRITE output files:\n"
        " -a, --agree=<max|min> transform objectives so all are maximised (or\n"
        "                       minimised). See also the option --obj.\n"
        " -f, --filter        check and filter out dominated points;\n"
        " -b, --force-bound   remove points that do not satisfy the bounds;\n"
        ' -n, --normalise RANGE normalise all objectives to a range, e.g., "1 2".\n'
        "                       If bounds are given with -l and -u, they are used\n"
        "                       for the normalisation.\n"
        " -L, --log=[1|0]...  specify whether each objective should be transformed\n"
        "                     to logarithmic scale (1) or not (0).\n"
    )


def _error(message: str) -> int:
    sys.stderr.write(f"{PROGRAM}: error: {message}\n")
    return 1


def _run(argv: list[str]) -> int:
    try:
        parsed, files = getopt.gnu_getopt(argv, _SHORT_OPTIONS, _LONG_OPTIONS)
    except getopt.GetoptError as exc:
        sys.stderr.write(f"{PROGRAM}: {exc.msg}\n")
        sys.stderr.write(f"Try `{PROGRAM} --help' for more information.\n")
        return 1

    options = Options()
    lower_bound: Optional[tuple[float, ...]] = None
    upper_bound: Optional[tuple[float, ...]] = None

    for opt, value in parsed:
        if opt in ("-h", "--help"):
            sys.stdout.write(_usage())
            return 0
        if opt in ("-V", "--version"):
            sys.stdout.write(f"{PROGRAM} version {VERSION}\n")
            return 0
        if opt in ("-q", "--quiet"):
            options.verbosity = 0
        elif opt in ("-v", "--verbose"):
            options.verbosity = 2
        elif opt == "--no-check":
            options.check = False
        elif opt in ("-f", "--filter"):
            options.filter = True
            options.check = True
        elif opt in ("-b", "--force-bounds"):
            options.force_bounds = True
        elif opt in ("-U", "--union"):
            options.union = True
        elif opt in ("-o", "--obj"):
            try:
                options.minmax, options.dim = parse_minmax(value, options.dim)
            except ObjectivesIgnoredError as exc:
                sys.stderr.write(f"{PROGRAM}: warning: {exc}\n")
                return 0
            except ValueError:
                return _error(
                    f"invalid argument '{value}' for -o, --obj"
                    ", it should be a sequence of '+' or '-'"
                )
        elif opt in ("-a", "--agree"):
            if value == "max":
                options.agree = 1
            elif value == "min":
                options.agree = -1
            else:
                return _error(
                    f"invalid argument '{value}' for -a, --agree"
                    ", it should be either 'min' or 'max'"
                )
        elif opt in ("-n", "--normalise"):
            try:
                lower_range, upper_range = read_range(value)
            except ValueError:
                return _error(
                    f"invalid range '{value}' for -n, --normalise"
                    ', use for example -n "1 2"'
                )
            if lower_range >= upper_range:
                return _error(
                    "lower range must be smaller than upper range for -n, --normalise"
                )
            options.normalise_range = (lower_range, upper_range)
        elif opt in ("-u", "--upper-bound"):
            try:
                upper_bound = read_point(value)
            except ValueError:
                return _error(f"invalid upper bound point '{value}'")
            options.dim = len(upper_bound)
        elif opt in ("-l", "--lower-bound"):
            try:
                lower_bound = read_point(value)
            except ValueError:
                return _error(f"invalid lower bound point '{value}'")
            options.dim = len(lower_bound)
        elif opt in ("-s", "--suffix"):
            options.suffix = value
        elif opt == "--log":
            try:
                options.logarithm, options.dim = parse_bitvector(value, options.dim)
            except ValueError:
                return _error(f"invalid argument to --log '{value}'")

    if (
        lower_bound is not None
        and upper_bound is not None
        and any_less_than(upper_bound, lower_bound)
    ):
        return _error("upper bound must be higher than lower bound.")

    if len(files) <= 1:
        dominated, _, _ = process_file(
            files[0] if files else None, options, lower_bound, upper_bound, True, True
        )
        return int(dominated)

    dominated_found = False
    minimum: Optional[tuple[float, ...]] = None
    maximum: Optional[tuple[float, ...]] = None
    if lower_bound is None or upper_bound is None:
        # Bounds over all input files.
        for name in files:
            sets = read_data(name, options.dim)
            minimum, maximum = data_bounds(
                (point for point_set in sets for point in point_set), minimum, maximum
            )
            options = replace(options, dim=len(minimum))
        remaining = files
    else:
        dominated_found, minimum, maximum = process_file(
            files[0], options, lower_bound, upper_bound, True, True
        )
        options = replace(options, dim=len(minimum))
        remaining = files[1:]

    for name in remaining:
        found, file_min, file_max = process_file(
            name,
            options,
            lower_bound if lower_bound is not None else minimum,
            upper_bound if upper_bound is not None else maximum,
            lower_bound is not None,
            upper_bound is not None,
        )
        dominated_found = dominated_found or found
        options = replace(options, dim=len(file_min))
        if lower_bound is not None and upper_bound is not None:
            minimum = tuple(min(a, b) for a, b in zip(minimum, file_min))
            maximum = tuple(max(a, b) for a, b in zip(maximum, file_max))

    if options.verbosity:
        out = sys.stdout
        out.write(f"# Total files: {len(files)}\n")
        out.write(f"# Total minimum:{format_vector(minimum)}\n")
        out.write(f"# Total maximum:{format_vector(maximum)}\n")
        out.write(f"# Nondominated: {'FALSE' if dominated_found else 'TRUE'}\n")
    return int(dominated_found)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command and return its exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        return _run(args)
    except ReadDataError as exc:
        _error(str(exc))
        if exc.reason == ReadDataError.WRONG_INITIAL_DIM:
            _error(
                "check the argument of either -o, --obj, -u, --upper or -l, --lower."
            )
        return 1
    except (ValueError, OSError) as exc:
        return _error(str(exc))


if __name__ == "__main__":
    sys.exit(main())