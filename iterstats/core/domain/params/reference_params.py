from dataclasses import dataclass
import math

DEFAULT_TOLERANCE = 0.0


@dataclass
class ReferenceDataset:
    name: str
    file: str
    mean: float
    tolerance: float = DEFAULT_TOLERANCE

    @staticmethod
    def from_dict(props: dict) -> "ReferenceDataset":
        name = props.get("name")
        if not name or not isinstance(name, str):
            raise ValueError(f"Reference dataset needs a name, got {name!r}")

        filename = props.get("file", f"{name}.txt")
        if not isinstance(filename, str):
            raise TypeError(f"file must be a string, got {type(filename).__name__}")

        if "mean" not in props:
            raise ValueError(f"Reference dataset '{name}' has no mean")
        expected = props["mean"]
        tolerance = props.get("tolerance", DEFAULT_TOLERANCE)

        # yaml reads 1e-8 (no dot) as a string
        try:
            expected = float(expected)
            tolerance = float(tolerance)
        except (TypeError, ValueError):
            raise ValueError(f"Reference dataset '{name}': mean and tolerance must be numbers")

        if not math.isfinite(expected):
            raise ValueError(f"Reference dataset '{name}': mean must be finite, got {expected}")
        if not tolerance >= 0.0:
            raise ValueError(f"Reference dataset '{name}': tolerance must be >= 0, got {tolerance}")

        return ReferenceDataset(name=name, file=filename, mean=expected, tolerance=tolerance)
