import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from tests.sitefiles import build_site_source


@pytest.fixture
def site_source(tmp_path) -> Path:
    return build_site_source(tmp_path / "web")


@pytest.fixture
def output_dir(tmp_path) -> Path:
    return tmp_path / "public"


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch):
    monkeypatch.delenv("WEBBUILDER_SOURCE", raising=False)
    monkeypatch.delenv("WEBBUILDER_OUTPUT", raising=False)
