from abc import ABC, abstractmethod


class StreamingStatistic(ABC):
    """Single-pass statistic with O(1) state."""

    @abstractmethod
    def add(self, value: float):
        """fold one observation"""
        pass

    @abstractmethod
    def result(self) -> float:
        """Current value of the statistic, NaN when undefined."""
        pass

    @property
    def done(self) -> bool:
        """True once further observations can no longer change the result."""
        return False
