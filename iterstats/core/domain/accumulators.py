import math
from abc import abstractmethod
from typing import Optional

import numpy as np

from iterstats.core.ports.statistic import StreamingStatistic

NAN = float("nan")


class AbsExtreme(StreamingStatistic):
    """Running extreme of |x|, seeded by the first observation.

    A NaN observation always replaces the running extreme and, since no
    comparison against NaN succeeds, is never displaced afterwards.
    """

    def __init__(self):
        self.count = 0
        self.extreme: Optional[float] = None

    @abstractmethod
    def replaces(self, x: float, acc: float) -> bool:
        pass

    def add(self, value: float):
        x = abs(float(value))
        self.count += 1
        if self.extreme is None or self.replaces(x, self.extreme) or math.isnan(x):
            self.extreme = x

    def result(self) -> float:
        if self.extreme is None:
            return NAN
        return self.extreme

    @property
    def done(self) -> bool:
        return self.extreme is not None and math.isnan(self.extreme)


class AbsMin(AbsExtreme):
    def replaces(self, x: float, acc: float) -> bool:
        return x < acc


class AbsMax(AbsExtreme):
    def replaces(self, x: float, acc: float) -> bool:
        return x > acc


class Mean(StreamingStatistic):
    """Arithmetic mean by incremental update, mean += (x - mean) / count."""

    def __init__(self):
        self.count = 0
        self.running_mean = 0.0

    def add(self, value: float):
        self.count += 1
        self.running_mean += (float(value) - self.running_mean) / self.count

    def result(self) -> float:
        if self.count == 0:
            return NAN
        return self.running_mean


class GeometricMean(StreamingStatistic):
    """exp of the mean of logs.

    ln(negative) is NaN and ln(0) is -inf, so negatives give NaN and a zero
    (without negatives) gives exactly 0.0.
    """

    def __init__(self):
        self.count = 0
        self.sum_of_logs = 0.0

    def add(self, value: float):
        self.count += 1
        with np.errstate(divide="ignore", invalid="ignore"):
            self.sum_of_logs += float(np.log(float(value)))

    def result(self) -> float:
        if self.count == 0:
            return NAN
        return float(np.exp(self.sum_of_logs / self.count))


class HarmonicMean(StreamingStatistic):
    """count / sum(1/x).

    1/x stays finite for negative x, so negatives are rejected explicitly
    and freeze the result at NaN. NaN observations are left to propagate
    through the sum. A zero makes the sum +inf and the result 0.0.
    """

    def __init__(self):
        self.count = 0
        self.sum_of_reciprocals = 0.0
        self.negative = False

    def add(self, value: float):
        if self.negative:
            return
        x = float(value)
        self.count += 1
        if x < 0.0:
            self.negative = True
            return
        with np.errstate(divide="ignore"):
            self.sum_of_reciprocals += float(np.divide(1.0, x))

    def result(self) -> float:
        if self.negative or self.count == 0:
            return NAN
        with np.errstate(divide="ignore", invalid="ignore"):
            return float(np.divide(self.count, self.sum_of_reciprocals))

    @property
    def done(self) -> bool:
        return self.negative
