import sys
from pathlib import Path

import pytest

# Ensure backend modules are importable whether run from repo root or backend dir
BACKEND_DIR = Path(__file__).resolve().parents[1]
if str(BACKEND_DIR) not in sys.path:
    sys.path.insert(0, str(BACKEND_DIR))


@pytest.fixture()
def asset_root(tmp_path):
    """A built-frontend directory with an entry document and an empty models/."""
    (tmp_path / "index.html").write_text("<!doctype html><div id=\"app\"></div>")
    (tmp_path / "models").mkdir()
    return tmp_path


@pytest.fixture()
def make_models(asset_root):
    def _make(*names):
        for name in names:
            (asset_root / "models" / name).mkdir()
        return asset_root

    return _make
