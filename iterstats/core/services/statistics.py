from dataclasses import dataclass, asdict
from typing import Iterable

from iterstats.core.ports.statistic import StreamingStatistic
from iterstats.core.domain.accumulators import (
    AbsMin,
    AbsMax,
    Mean,
    GeometricMean,
    HarmonicMean,
)

""" Use example

    values = (float(line) for line in open("data.txt"))
    print("Mean:", mean(values))

    # every call traverses its input once, so a generator has to be
    # re-created per statistic, or use summarize() for all of them at once
    s = summarize(float(line) for line in open("data.txt"))
    print(s.to_dict())
"""


def fold(statistic: StreamingStatistic, values: Iterable[float]) -> float:
    """Feed values into statistic, stop pulling once it is done."""
    for value in values:
        statistic.add(value)
        if statistic.done:
            break
    return statistic.result()


def abs_min(values: Iterable[float]) -> float:
    """Minimum absolute value. NaN if empty or if any entry is NaN."""
    return fold(AbsMin(), values)


def abs_max(values: Iterable[float]) -> float:
    """Maximum absolute value. NaN if empty or if any entry is NaN."""
    return fold(AbsMax(), values)


def mean(values: Iterable[float]) -> float:
    """Sample mean. NaN if empty or if any entry is NaN."""
    return fold(Mean(), values)


def geometric_mean(values: Iterable[float]) -> float:
    """Geometric mean.

    NaN if empty, if an entry is NaN or if an entry is negative.
    0.0 if no entry is negative but some entry is zero.
    """
    return fold(GeometricMean(), values)


def harmonic_mean(values: Iterable[float]) -> float:
    """Harmonic mean.

    NaN if empty, if an entry is NaN or if an entry is negative; stops
    reading at the first negative entry.
    0.0 if no entry is negative but some entry is zero.
    """
    return fold(HarmonicMean(), values)


@dataclass
class Summary:
    count: int
    abs_min: float
    abs_max: float
    mean: float
    geometric_mean: float
    harmonic_mean: float

    def to_dict(self) -> dict:
        return asdict(self)


def summarize(values: Iterable[float]) -> Summary:
    """All five statistics from a single traversal of values."""
    a_min, a_max = AbsMin(), AbsMax()
    m, g, h = Mean(), GeometricMean(), HarmonicMean()
    accumulators = [a_min, a_max, m, g, h]

    for value in values:
        for acc in accumulators:
            if not acc.done:
                acc.add(value)

    return Summary(
        count=m.count,
        abs_min=a_min.result(),
        abs_max=a_max.result(),
        mean=m.result(),
        geometric_mean=g.result(),
        harmonic_mean=h.result(),
    )
