import importlib.util
import logging
import math
from pathlib import Path

import pytest

from iterstats.adapters.readers import FileReader, IterableReader
from iterstats.core.config import Config
from iterstats.core.domain.params.reference_params import ReferenceDataset
from iterstats.core.services.reference import check_all, check_dataset
from iterstats.core.services.statistics import mean

ROOT = Path(__file__).resolve().parent.parent
REFERENCE_CONFIG = ROOT / "configs" / "reference.yaml"


# ------------------------------------------------------------
# Helpers
# ------------------------------------------------------------

def write(path: Path, text: str) -> Path:
    path.write_text(text)
    return path


def load_script(name: str):
    spec = importlib.util.spec_from_file_location(name, ROOT / "scripts" / f"{name}.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


# ------------------------------------------------------------
# NIST datasets
# ------------------------------------------------------------

@pytest.mark.parametrize(
    "name, expected, prec",
    [
        ("numacc1", 10000002.0, 0.0),
        ("numacc2", 1.2, 1e-15),
        ("numacc3", 1000000.2, 0.0),
        ("numacc4", 10000000.2, 1e-8),
        ("michelso", 299.8524, 1e-13),
    ],
)
def test_nist_mean(name, expected, prec):
    data_dir = ROOT / "data" / "nist"
    with FileReader(str(data_dir / f"{name}.txt")) as reader:
        actual = mean(reader.values())
    assert abs(actual - expected) <= prec


def test_numacc3_mean_is_exact():
    with FileReader(str(ROOT / "data" / "nist" / "numacc3.txt")) as reader:
        assert mean(reader.values()) == 1000000.2
    assert Config(str(REFERENCE_CONFIG)).dataset("numacc3").tolerance == 0.0


def test_check_all_bundled_config():
    results = check_all(Config(str(REFERENCE_CONFIG)))
    assert [r.name for r in results] == ["numacc1", "numacc2", "numacc3", "numacc4", "michelso"]
    assert all(r.passed for r in results), results


def test_check_dataset_failure(tmp_path):
    write(tmp_path / "d.txt", "1.0\n2.0\n")
    result = check_dataset(ReferenceDataset("d", "d.txt", 1.0, 0.1), tmp_path)
    assert result.actual == 1.5
    assert result.error == 0.5
    assert not result.passed


def test_check_dataset_empty_file_never_passes(tmp_path):
    write(tmp_path / "empty.txt", "\n")
    result = check_dataset(ReferenceDataset("empty", "empty.txt", 0.0, 1e6), tmp_path)
    assert math.isnan(result.actual)
    assert not result.passed


# ------------------------------------------------------------
# Config
# ------------------------------------------------------------

def test_config_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        Config(str(tmp_path / "nope.yaml"))


def test_config_data_dir_relative_to_config(tmp_path):
    cfg_path = write(tmp_path / "ref.yaml", "data_dir: fixtures\ndatasets: []\n")
    cfg = Config(str(cfg_path))
    assert cfg.data_dir == tmp_path / "fixtures"
    assert cfg.reference_datasets() == []


def test_config_dataset_lookup():
    cfg = Config(str(REFERENCE_CONFIG))
    ds = cfg.dataset("numacc4")
    assert ds.file == "numacc4.txt"
    assert ds.mean == 10000000.2
    assert ds.tolerance == 1e-8
    with pytest.raises(KeyError):
        cfg.dataset("lottery")


def test_config_datasets_must_be_a_list(tmp_path):
    cfg_path = write(tmp_path / "ref.yaml", "datasets:\n  name: x\n")
    with pytest.raises(TypeError):
        Config(str(cfg_path)).reference_datasets()


def test_reference_dataset_from_dict():
    ds = ReferenceDataset.from_dict({"name": "lew", "mean": -177.435, "tolerance": "1e-13"})
    assert ds.file == "lew.txt"
    assert ds.tolerance == 1e-13

    with pytest.raises(ValueError):
        ReferenceDataset.from_dict({"mean": 1.0})
    with pytest.raises(ValueError):
        ReferenceDataset.from_dict({"name": "x"})
    with pytest.raises(ValueError):
        ReferenceDataset.from_dict({"name": "x", "mean": "abc"})
    with pytest.raises(ValueError):
        ReferenceDataset.from_dict({"name": "x", "mean": 1.0, "tolerance": -1.0})
    with pytest.raises(TypeError):
        ReferenceDataset.from_dict({"name": "x", "file": 3, "mean": 1.0})


# ------------------------------------------------------------
# Readers
# ------------------------------------------------------------

def test_file_reader_skips_blank_and_comments(tmp_path):
    path = write(tmp_path / "v.txt", "# header\n1.5\n\n  -2\n1e3\n")
    with FileReader(str(path)) as reader:
        assert list(reader.values()) == [1.5, -2.0, 1000.0]
    assert reader.file.closed


def test_file_reader_bad_line(tmp_path):
    path = write(tmp_path / "v.txt", "1.0\nabc\n")
    with FileReader(str(path)) as reader:
        values = reader.values()
        assert next(values) == 1.0
        with pytest.raises(ValueError, match=":2:"):
            next(values)


def test_file_reader_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        FileReader(str(tmp_path / "missing.txt"))


def test_iterable_reader_closes_generator():
    gen = (float(x) for x in range(10))
    with IterableReader(gen) as reader:
        assert mean(reader.values()) == 4.5
    assert list(gen) == []


# ------------------------------------------------------------
# Scripts
# ------------------------------------------------------------

def test_check_reference_script(caplog):
    script = load_script("check_reference")
    with caplog.at_level(logging.INFO):
        assert script.main(["--config", str(REFERENCE_CONFIG)]) == 0
    assert "5/5 datasets within tolerance" in caplog.text


def test_check_reference_script_failure(tmp_path, caplog):
    write(tmp_path / "d.txt", "1.0\n3.0\n")
    cfg_path = write(
        tmp_path / "ref.yaml",
        "data_dir: .\ndatasets:\n  - name: d\n    mean: 5.0\n",
    )
    script = load_script("check_reference")
    with caplog.at_level(logging.INFO):
        assert script.main(["--config", str(cfg_path)]) == 1
    assert "FAIL" in caplog.text


def test_summarize_script(tmp_path, capsys):
    path = write(tmp_path / "v.txt", "1\n2\n4\n")
    script = load_script("summarize")
    assert script.main([str(path)]) == 0
    out = capsys.readouterr().out
    assert '"count": 3' in out
    assert '"abs_max": 4.0' in out
