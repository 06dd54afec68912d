import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Union

from iterstats.adapters.readers import FileReader
from iterstats.core.config import Config
from iterstats.core.domain.params.reference_params import ReferenceDataset
from iterstats.core.services.statistics import mean

logger = logging.getLogger(__name__)


@dataclass
class ReferenceResult:
    name: str
    expected: float
    actual: float
    tolerance: float
    passed: bool

    @property
    def error(self) -> float:
        return abs(self.actual - self.expected)


def check_dataset(dataset: ReferenceDataset, data_dir: Union[str, Path]) -> ReferenceResult:
    """Stream a dataset file through mean() and compare to its reference value."""
    path = Path(data_dir) / dataset.file
    with FileReader(str(path)) as reader:
        actual = mean(reader.values())

    # NaN never passes: the comparison is False
    passed = abs(actual - dataset.mean) <= dataset.tolerance
    logger.debug(
        "%s: mean=%r expected=%r tolerance=%g", dataset.name, actual, dataset.mean, dataset.tolerance
    )
    return ReferenceResult(
        name=dataset.name,
        expected=dataset.mean,
        actual=actual,
        tolerance=dataset.tolerance,
        passed=passed,
    )


def check_all(cfg: Config) -> List[ReferenceResult]:
    return [check_dataset(dataset, cfg.data_dir) for dataset in cfg.reference_datasets()]
