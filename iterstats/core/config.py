import yaml
from pathlib import Path
from typing import Any, Dict, List

from iterstats.core.domain.params.reference_params import ReferenceDataset


DEFAULT_CONFIG_PATH = "./configs/reference.yaml"
DEFAULT_DATA_DIR = "."


class Config:
    def __init__(self, path: str = DEFAULT_CONFIG_PATH):
        """
        Load YAML configuration from the given path.

        Args:
            path: Path to reference.yaml. Defaults to 'configs/reference.yaml'.
        """
        self.path = Path(path)
        if not self.path.exists():
            raise FileNotFoundError(f"Config file not found: {self.path}")

        with open(self.path, "r") as f:
            self._data: Dict[str, Any] = yaml.safe_load(f) or {}

    def get(self, key: str, default=None):
        """Get a config value by key."""
        return self._data.get(key, default)

    @property
    def data_dir(self) -> Path:
        """Directory holding the dataset files, relative to the config file."""
        raw = self._data.get("data_dir", DEFAULT_DATA_DIR)
        data_dir = Path(raw)
        if not data_dir.is_absolute():
            data_dir = self.path.parent / data_dir
        return data_dir

    def reference_datasets(self) -> List[ReferenceDataset]:
        raw = self._data.get("datasets", [])
        if not isinstance(raw, list):
            raise TypeError(f"datasets must be a list, got {type(raw).__name__}")
        return [ReferenceDataset.from_dict(props) for props in raw]

    def dataset(self, name: str) -> ReferenceDataset:
        for dataset in self.reference_datasets():
            if dataset.name == name:
                return dataset
        raise KeyError(f"Reference dataset not found: {name}")
