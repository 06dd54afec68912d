import logging
import os
from typing import Iterable, Iterator

from iterstats.core.ports.reader import ReaderPort

logger = logging.getLogger(__name__)


class FileReader(ReaderPort):
    def __init__(self, filename: str):
        """
        Text file reader adapter, one value per line.
            :param filename: Path to the file
        """
        if not os.path.exists(filename):
            raise FileNotFoundError(f"File {filename} does not exist")
        self.filename = filename
        self.file = open(filename, "r")
        logger.debug("opened %s", filename)

    def values(self) -> Iterator[float]:
        """
        Yield the values lazily. Blank lines and lines starting with '#' are skipped.
        """
        for lineno, line in enumerate(self.file, start=1):
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            try:
                yield float(line)
            except ValueError:
                raise ValueError(f"{self.filename}:{lineno}: not a number: {line!r}")

    def close(self):
        self.file.close()


class IterableReader(ReaderPort):
    def __init__(self, source: Iterable[float]):
        """
        Adapter over an in-memory iterable or a generator.
            :param source: Values to read; a generator can only be read once
        """
        self.source = source

    def values(self) -> Iterator[float]:
        return iter(self.source)

    def close(self):
        close = getattr(self.source, "close", None)
        if close is not None:
            close()
