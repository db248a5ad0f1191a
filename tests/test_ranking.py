import random

import pytest

from paretokit.dominance import find_weak_nondominated_set
from paretokit.ranking import pareto_rank, pareto_rank_2d


def _random_points(seed, size, dim, high=6):
    rng = random.Random(seed)
    return [tuple(rng.randint(0, high) for _ in range(dim)) for _ in range(size)]


def test_chain_of_dominated_points():
    assert pareto_rank([(3, 3, 3), (2, 2, 2), (1, 1, 1)]) == [3, 2, 1]


def test_mutually_nondominated_points_share_first_front():
    points = [(0, 3), (1, 2), (2, 1), (3, 0)]
    assert pareto_rank(points) == [1] * len(points)
    assert pareto_rank_2d(points) == [1] * len(points)


def test_empty_input():
    assert pareto_rank([]) == []
    assert pareto_rank_2d([]) == []


@pytest.mark.parametrize("seed", range(10))
def test_2d_agrees_with_general_algorithm(seed):
    points = _random_points(seed, 30, 2)
    # Padding with a constant third objective does not change dominance.
    padded = [point + (0,) for point in points]
    assert pareto_rank_2d(points) == pareto_rank(padded)


@pytest.mark.parametrize("dim", [2, 3, 4])
def test_first_front_is_weak_nondominated_set(dim):
    points = _random_points(dim, 25, dim)
    ranks = pareto_rank(points)
    mask = find_weak_nondominated_set(points, (-1,) * dim)
    assert [rank == 1 for rank in ranks] == mask


@pytest.mark.parametrize("dim", [2, 3])
def test_duplicates_share_rank(dim):
    points = _random_points(dim + 7, 20, dim, high=3)
    ranks = pareto_rank(points)
    for i, a in enumerate(points):
        for j, b in enumerate(points):
            if a == b:
                assert ranks[i] == ranks[j]


@pytest.mark.parametrize("dim", [2, 3])
def test_dominating_point_has_lower_rank(dim):
    points = _random_points(dim + 20, 25, dim)
    ranks = pareto_rank(points)
    for i, a in enumerate(points):
        for j, b in enumerate(points):
            if a != b and all(x <= y for x, y in zip(a, b)):
                assert ranks[i] < ranks[j]


@pytest.mark.parametrize("dim", [2, 3])
def test_removing_first_front_shifts_ranks(dim):
    points = _random_points(dim + 40, 25, dim)
    ranks = pareto_rank(points)
    rest = [(p, r) for p, r in zip(points, ranks) if r > 1]
    reranked = pareto_rank([p for p, _ in rest])
    assert reranked == [r - 1 for _, r in rest]


def test_rank_2d_rejects_wrong_dimension():
    with pytest.raises(ValueError):
        pareto_rank_2d([(1, 2, 3)])


def test_inconsistent_dimensions_rejected():
    with pytest.raises(ValueError):
        pareto_rank([(1, 2), (1, 2, 3)])