# paretokit

Utilities for working with sets of points in multi-objective optimisation:
checking and filtering nondominated sets, Pareto ranking, normalising
objectives, and computing weighted hypervolume in two dimensions.

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Data files

A data file holds one point per line as whitespace-separated numbers.
Sets of points are separated by one or more blank lines, and lines whose
first non-blank character is `#` are comments. Every point in a file must
have the same number of objectives.

## Command line

The `nondominated` command reads one or more data files and reports
whether each set is mutually nondominated. With no file arguments,
standard input is read.

```
nondominated --verbose results.txt
nondominated --obj=+- --filter results.txt
nondominated --normalise "1 2" --lower-bound "0 0" --upper-bound "10 10" a.txt b.txt
```

Options:

- `-o, --obj=[+|-|i|0]...` – whether each objective is maximised (`+`),
  minimised (`-`) or ignored (`i` or `0`); all are minimised by default.
  A specification shorter than the number of objectives is repeated.
- `-f, --filter` – remove dominated points from the output.
- `--no-check` – do not check the sets for dominated points.
- `-a, --agree=<max|min>` – negate objectives so that all are maximised
  or all are minimised.
- `-n, --normalise RANGE` – rescale every objective into a range such as
  `"1 2"`, using the bounds given with `-l` and `-u` or else the bounds of
  the data.
- `-l, --lower-bound POINT`, `-u, --upper-bound POINT` – bounds that the
  data must satisfy; `-b, --force-bounds` drops points outside them
  instead of reporting an error.
- `--log=[1|0]...` – put the objectives flagged with `1` on a base-10
  logarithmic scale.
- `-U, --union` – treat each file as a single set.
- `-s, --suffix=STRING` – suffix appended to input file names to name the
  output files (default `_dat`; the empty string overwrites the input).
- `-v, --verbose`, `-q, --quiet`, `-h, --help`, `--version`.

When filtering, agreeing, normalising, forcing bounds or taking logarithms,
a transformed copy of each file is written, preceded by a `#` comment
header describing the transformation. When reading standard input, this
output goes to standard output. The exit status is 1 if any dominated
point was found or an error occurred, and 0 otherwise.

## Library

```python
from paretokit.dominance import get_nondominated_set
from paretokit.ranking import pareto_rank
from paretokit.whv import rect_weighted_hv2d
from paretokit.whv_hype import hype_dist_unif, whv_hype_estimate

points = [[1.0, 5.0], [2.0, 3.0], [3.0, 4.0], [4.0, 1.0]]
minmax = [-1, -1]

front = get_nondominated_set(points, minmax)   # drops (3, 4)
ranks = pareto_rank(points)                    # [1, 1, 2, 1]

rectangles = [[0.0, 0.0, 5.0, 6.0, 1.0]]   # lower0, lower1, upper0, upper1, weight
whv = rect_weighted_hv2d(points, rectangles)

dist = hype_dist_unif(seed=42)
estimate = whv_hype_estimate(points, [0.0, 0.0], [5.0, 6.0], dist, 10000)
```

Modules:

- `paretokit.io` – `read_data`, `read_reference_set`, `write_sets`,
  `write_sets_filtered`, `format_vector`, `parse_minmax`,
  `parse_bitvector`; malformed input raises `ReadDataError`.
- `paretokit.dominance` – `find_nondominated_set`,
  `find_nondominated_set_agree`, `find_weak_nondominated_set`,
  `find_dominated_point`, `get_nondominated_set`, `agree_objectives`,
  `normalise`, `create_minmax` and the `Agree` enum.
- `paretokit.ranking` – `pareto_rank` (all objectives minimised) and
  `pareto_rank_2d`.
- `paretokit.whv` – `rect_weighted_hv2d`, the exact weighted hypervolume
  of two-objective points over weighted rectangles.
- `paretokit.whv_hype` – Monte-Carlo estimation with `whv_hype_estimate`,
  using a seeded `HypeSampleDist` made by `hype_dist_unif`,
  `hype_dist_exp` or `hype_dist_gaussian`.
- `paretokit.filters` – `read_range`, `read_point`, `data_bounds`,
  `any_less_than`, `logarithm_scale`, `force_bounds`,
  `check_nondominated` and the header printers used by the command.

## Limitations

- Pareto ranking and weighted hypervolume are available only from Python;
  there is no command that ranks or measures the points of a file.
- Both weighted hypervolume functions handle two objectives only.