"""Root test configuration: session-level cleanup of runtime artifacts"""

import shutil
from pathlib import Path

import pytest


_PROJECT_ROOT = Path(__file__).parent.parent

_CLEANUP_DIRS = ["reports"]
_ENV_FIELDS = ["APP_NAME", "STRATEGY", "MAX_LINES", "OUTPUT_DIR", "COMPARISON_TYPE", "REPORT_FOOTER", "LOG_LEVEL"]


@pytest.fixture(scope="session", autouse=True)
def cleanup_artifacts():
    """Remove report directories created during the test session."""
    yield
    for name in _CLEANUP_DIRS:
        p = _PROJECT_ROOT / name
        if p.exists():
            shutil.rmtree(p)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Drop POLICYDIFF_* variables inherited from the outer shell."""
    for name in _ENV_FIELDS:
        monkeypatch.delenv(f"POLICYDIFF_{name}", raising=False)
