import os
import sys
from pathlib import Path

import pytest

# Ensure the src directory is on the path for imports
root = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(root / "src"))

log_dir = root / "logs"
log_dir.mkdir(parents=True, exist_ok=True)
os.environ.setdefault("TSVMAT_LOG_DIR", str(log_dir))


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep persisted settings out of the user's home directory."""

    config_file = tmp_path / "config" / "config.json"
    monkeypatch.setenv("TSVMAT_CONFIG", str(config_file))
    return config_file


@pytest.fixture
def write_matrix(tmp_path):
    """Write ``text`` to a file under ``tmp_path`` and return its path as str."""

    counter = {"n": 0}

    def _write(text, name=None):
        counter["n"] += 1
        path = tmp_path / (name or f"matrix{counter['n']}.tsv")
        path.write_bytes(text.encode("utf-8"))
        return str(path)

    return _write
