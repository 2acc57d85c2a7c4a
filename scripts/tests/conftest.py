"""Pytest fixtures for polar store testing."""

import pytest

from polar_store import Polar, PolarStore
from polar_utils import log


def sample_polar_data(**overrides) -> dict:
    """A complete polar document in its on-disk (camelCase) form."""
    penalty_case = {
        "stdTimerSec": 20,
        "stdRatio": 0.5,
        "proTimerSec": 15,
        "proRatio": 0.7,
        "std": {
            "lw": {"ratio": 0.6, "timer": 25},
            "hw": {"ratio": 0.4, "timer": 30},
        },
    }
    data = {
        "id": "boat1",
        "_id": 3,
        "label": "fleet/boat1",
        "globalSpeedRatio": 1.0,
        "iceSpeedRatio": 0.8,
        "autoSailChangeTolerance": 0.99,
        "badSailTolerance": 0.75,
        "maxSpeed": 35.5,
        "foil": {
            "speedRatio": 1.04,
            "twaMin": 70.0,
            "twaMax": 160.0,
            "twaMerge": 10.0,
            "twsMin": 11.0,
            "twsMax": 40.0,
            "twsMerge": 5.0,
        },
        "hull": {"speedRatio": 1.003},
        "winch": {
            "tack": penalty_case,
            "gybe": penalty_case,
            "sailChange": penalty_case,
            "lws": 10,
            "hws": 30,
        },
        "tws": [0, 10, 20, 30],
        "twa": [0, 45, 90, 135, 180],
        "sail": [
            {"id": 1, "name": "Jib", "speed": [[0.0, 5.5], [6.1, 7.2]]},
            {"id": 2, "name": "Spi", "speed": [[0.0, 4.0], [8.3, 9.9]]},
        ],
    }
    data.update(overrides)
    return data


@pytest.fixture(autouse=True)
def isolated_log(tmp_path, monkeypatch):
    """Send polar_log output to a per-test file."""
    log_file = tmp_path / "logs" / "polars.log"
    monkeypatch.setattr(log, "LOG_FILE", log_file)
    yield log_file


@pytest.fixture
def make_polar():
    def _make(**overrides) -> Polar:
        return Polar.model_validate(sample_polar_data(**overrides))
    return _make


@pytest.fixture
def store(tmp_path) -> PolarStore:
    return PolarStore(tmp_path / "polars", tmp_path / "archived")


@pytest.fixture
def polar_data():
    return sample_polar_data
