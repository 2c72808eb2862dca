# ==============================================
# Pytest Configuration and Fixtures
# ==============================================
#
# Shared fixtures for all tests.
#
# FIXTURES:
# ---------
# - fresh_config (autouse)  → drop the cached config singleton around each test
# - config                  → default AppConfig
# - write_file              → write text to a file under tmp_path
# - profile_of              → build a ColumnProfile from a list of raw values
# - sample_csv / sample_json
# ==============================================

import json

import pytest

from datainspect.analysis import ColumnProfile
from datainspect.config import AppConfig, reset_config


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    """Each test reads configuration from a clean environment."""
    for name in (
        "DATAINSPECT_OUTLIER_Z",
        "DATAINSPECT_MAX_MISSING_RATIO",
        "DATAINSPECT_MAX_UNIQUE_RATIO",
        "DATAINSPECT_CONSTANT_TOLERANCE",
        "DATAINSPECT_CSV_DELIMITER",
        "DATAINSPECT_ENCODING",
        "DATAINSPECT_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def config():
    return AppConfig()


@pytest.fixture
def write_file(tmp_path):
    """Return a helper that writes text to tmp_path/name and returns the path."""
    def _write(name, text):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def profile_of():
    """Return a helper that feeds raw values into a new ColumnProfile."""
    def _build(values, name="col", **kwargs):
        profile = ColumnProfile(name=name, **kwargs)
        for value in values:
            profile.update(value)
        return profile
    return _build


@pytest.fixture
def sample_csv(write_file):
    return write_file(
        "people.csv",
        "id,name,score\n"
        "1,alice,3.5\n"
        "2,bob,\n"
        "3,alice,4.5\n",
    )


@pytest.fixture
def sample_json(write_file):
    records = [
        {"id": 1, "name": "a", "active": True, "score": 1.5, "tags": ["x"], "note": None},
        {"id": 2, "name": "b", "active": False, "score": 2.5, "tags": [], "note": "hi"},
    ]
    return write_file("records.json", json.dumps(records))
