from abc import ABC, abstractmethod
from typing import Iterator


class ReaderPort(ABC):
    @abstractmethod
    def values(self) -> Iterator[float]:
        """yield observations"""
        pass

    @abstractmethod
    def close(self):
        """close reader."""
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
