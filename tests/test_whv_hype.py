import pytest

from paretokit.whv_hype import (
    HypeDistType,
    HypeSampleDist,
    hype_dist_exp,
    hype_dist_gaussian,
    hype_dist_unif,
    whv_hype_estimate,
)


def test_constructors_set_type():
    assert hype_dist_unif(1).type is HypeDistType.UNIFORM
    assert hype_dist_exp(0.5, 1).type is HypeDistType.EXPONENTIAL
    assert hype_dist_gaussian((0.5, 0.5), 1).type is HypeDistType.GAUSSIAN


def test_uniform_samples_in_unit_box():
    samples = hype_dist_unif(42).sample(200)
    assert len(samples) == 200
    assert all(len(s) == 2 for s in samples)
    assert all(0.0 <= x < 1.0 and 0.0 <= y < 1.0 for x, y in samples)


def test_same_seed_same_samples():
    uniform = hype_dist_unif(7).sample(20)
    assert len(uniform) == 20
    assert uniform == hype_dist_unif(7).sample(20)
    assert uniform != hype_dist_unif(8).sample(20)

    exponential = hype_dist_exp(0.2, 7).sample(20)
    assert len(exponential) == 20
    assert exponential == hype_dist_exp(0.2, 7).sample(20)
    assert exponential != hype_dist_exp(0.2, 8).sample(20)


def test_exponential_halves():
    samples = hype_dist_exp(0.3, 3).sample(50)
    first, second = samples[:25], samples[25:]
    assert all(x >= 0.0 and 0.0 <= y < 1.0 for x, y in first)
    assert all(0.0 <= x < 1.0 and y >= 0.0 for x, y in second)


def test_gaussian_fully_correlated():
    mu = (0.3, 0.6)
    samples = hype_dist_gaussian(mu, 11).sample(30)
    for x, y in samples:
        assert x - mu[0] == pytest.approx(y - mu[1], abs=1e-12)


def test_gaussian_requires_two_objectives():
    with pytest.raises(ValueError):
        hype_dist_gaussian((0.5,), 1)


def test_negative_sample_count_rejected():
    with pytest.raises(ValueError):
        hype_dist_unif(1).sample(-1)


def test_point_at_ideal_dominates_everything():
    ideal, ref = (0.0, 0.0), (2.0, 3.0)
    whv = whv_hype_estimate([ideal], ideal, ref, hype_dist_unif(5), 500)
    assert whv == pytest.approx(6.0)


def test_point_at_reference_dominates_nothing():
    whv = whv_hype_estimate([(2.0, 3.0)], (0.0, 0.0), (2.0, 3.0), hype_dist_unif(5), 500)
    assert whv == 0.0


def test_estimate_bounded_by_volume():
    ideal, ref = (0.0, 0.0), (1.0, 1.0)
    whv = whv_hype_estimate([(0.2, 0.8), (0.5, 0.5), (0.8, 0.2)], ideal, ref,
                            hype_dist_unif(9), 1000)
    assert 0.0 < whv < 1.0


def test_more_points_never_decrease_estimate():
    ideal, ref = (0.0, 0.0), (1.0, 1.0)
    small = whv_hype_estimate([(0.5, 0.5)], ideal, ref, hype_dist_unif(13), 400)
    large = whv_hype_estimate([(0.5, 0.5), (0.1, 0.9)], ideal, ref, hype_dist_unif(13), 400)
    assert large >= small


def test_gaussian_estimate_keeps_mu():
    dist = hype_dist_gaussian((1.0, 1.0), 2)
    whv_hype_estimate([(0.5, 0.5)], (0.0, 0.0), (2.0, 2.0), dist, 100)
    assert dist.mu == (1.0, 1.0)


def test_invalid_arguments():
    with pytest.raises(ValueError):
        whv_hype_estimate([(0.5, 0.5)], (0.0, 0.0), (1.0, 1.0), hype_dist_unif(1), 0)
    with pytest.raises(ValueError):
        whv_hype_estimate([(0.5, 0.5, 0.5)], (0.0, 0.0), (1.0, 1.0), hype_dist_unif(1), 10)


def test_unknown_type_rejected():
    dist = HypeSampleDist(HypeDistType.UNIFORM, 1)
    dist.type = "bogus"
    with pytest.raises(ValueError):
        dist.sample(3)