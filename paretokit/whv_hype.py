"""Monte-Carlo estimate of the weighted hypervolume of a two-objective set.

Samples are drawn from a weight distribution over the normalised
objective space [0, 1]^2. The estimate counts the fraction of samples
that the normalised points dominate and scales it by the volume of the
box between the ideal and the reference point.
"""

from __future__ import annotations

import math
import random
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from enum import Enum

from .dominance import Agree, normalise

_NOBJ = 2
_SIGMA_X = 0.25
_SIGMA_Y = 0.25
_RHO = 1.0

Sample = tuple[float, float]


class HypeDistType(Enum):
    """Kind of weight distribution used to draw samples."""

    UNIFORM = 0
    EXPONENTIAL = 1
    GAUSSIAN = 2


@dataclass
class HypeSampleDist:
    """A seeded sampling distribution over the two-objective unit box."""

    type: HypeDistType
    seed: int
    mu: tuple[float, ...] = ()
    lower: tuple[float, float] = (0.0, 0.0)
    upper: tuple[float, float] = (1.0, 1.0)
    _rng: random.Random = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self.mu = tuple(float(value) for value in self.mu)
        self._rng = random.Random(self.seed)

    def sample(self, nsamples: int) -> list[Sample]:
        """Draw ``nsamples`` points from the distribution."""
        return self._draw(nsamples, self.mu)

    def _uniform(self) -> float:
        return self._rng.random()

    def _draw(self, nsamples: int, mu: Sequence[float]) -> list[Sample]:
        if nsamples < 0:
            raise ValueError("the number of samples must not be negative")
        if self.type is HypeDistType.UNIFORM:
            return self._draw_uniform(nsamples)
        if self.type is HypeDistType.EXPONENTIAL:
            return self._draw_exponential(nsamples, mu)
        if self.type is HypeDistType.GAUSSIAN:
            return self._draw_gaussian(nsamples, mu)
        raise ValueError(f"unknown sampling distribution type: {self.type!r}")

    def _draw_uniform(self, nsamples: int) -> list[Sample]:
        spans = [hi - lo for lo, hi in zip(self.lower, self.upper)]
        return [
            (self._uniform() * spans[0], self._uniform() * spans[1])
            for _ in range(nsamples)
        ]

    def _exp_tail(self, lower: float, mu: float) -> float:
        # 1 - U lies in (0, 1], so the logarithm is always defined.
        return lower - mu * math.log(1.0 - self._uniform())

    def _draw_exponential(self, nsamples: int, mu: Sequence[float]) -> list[Sample]:
        if len(mu) < 1:
            raise ValueError("the exponential distribution needs a mean")
        rate = mu[0]
        lower, upper = self.lower, self.upper
        half = int(0.5 * nsamples)
        samples: list[Sample] = []
        for _ in range(half):
            x = self._exp_tail(lower[0], rate)
            y = lower[1] + self._uniform() * (upper[1] - lower[1])
            samples.append((x, y))
        for _ in range(nsamples - half):
            x = lower[0] + self._uniform() * (upper[0] - lower[0])
            y = self._exp_tail(lower[1], rate)
            samples.append((x, y))
        return samples

    def _draw_gaussian(self, nsamples: int, mu: Sequence[float]) -> list[Sample]:
        if len(mu) != _NOBJ:
            raise ValueError("the gaussian distribution needs a two-objective mean")
        samples: list[Sample] = []
        coupling = math.sqrt(1.0 - _RHO * _RHO)
        for _ in range(nsamples):
            z1 = self._rng.gauss(0.0, 1.0)
            z2 = self._rng.gauss(0.0, 1.0)
            x = _SIGMA_X * z1
            y = _SIGMA_Y * (_RHO * z1 + coupling * z2)
            samples.append((mu[0] + x, mu[1] + y))
        return samples


def hype_dist_unif(seed: int) -> HypeSampleDist:
    """Uniform weights over the unit box."""
    return HypeSampleDist(HypeDistType.UNIFORM, seed)


def hype_dist_exp(mu: float, seed: int) -> HypeSampleDist:
    """Weights decaying exponentially away from each objective axis."""
    return HypeSampleDist(HypeDistType.EXPONENTIAL, seed, mu=(float(mu),))


def hype_dist_gaussian(mu: Sequence[float], seed: int) -> HypeSampleDist:
    """Gaussian weights centred on ``mu``, given in objective space."""
    centre = tuple(float(value) for value in mu)
    if len(centre) != _NOBJ:
        raise ValueError("the gaussian distribution needs a two-objective mean")
    return HypeSampleDist(HypeDistType.GAUSSIAN, seed, mu=centre)


def _pair(values: Sequence[float], name: str) -> tuple[float, float]:
    pair = tuple(float(value) for value in values)
    if len(pair) != _NOBJ:
        raise ValueError(f"{name} must have 2 objectives, got {len(pair)}")
    return pair  # type: ignore[return-value]


def _estimate(points: Sequence[Sample], samples: Iterable[Sample]) -> float:
    whv = 0.0
    for sx, sy in samples:
        dominators = sum(1 for px, py in points if sx >= px and sy >= py)
        if dominators:
            share = 1.0 / dominators
            for _ in range(dominators):
                whv += share
    return whv


def whv_hype_estimate(
    points: Iterable[Sequence[float]],
    ideal: Sequence[float],
    ref: Sequence[float],
    dist: HypeSampleDist,
    nsamples: int,
) -> float:
    """Estimate the weighted hypervolume of ``points`` between ``ideal`` and ``ref``.

    Draws ``nsamples`` samples from ``dist``, which advances its random state.
    """
    if nsamples <= 0:
        raise ValueError("the number of samples must be positive")
    low = _pair(ideal, "ideal")
    high = _pair(ref, "ref")
    pts = [_pair(point, f"point {position}") for position, point in enumerate(points)]
    minmax = (-1,) * _NOBJ

    mu: Sequence[float] = dist.mu
    if dist.type is HypeDistType.GAUSSIAN:
        mu = normalise([dist.mu], minmax, Agree.MINIMISE, 0.0, 1.0, low, high)[0]

    samples = dist._draw(nsamples, mu)
    scaled = normalise(pts, minmax, Agree.MINIMISE, 0.0, 1.0, low, high)
    whv = _estimate(scaled, samples)
    volume = math.prod(hi - lo for lo, hi in zip(low, high))
    return whv * (volume / nsamples)