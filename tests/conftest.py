import pytest

from config.settings import MonitorConfig


@pytest.fixture
def config() -> MonitorConfig:
    return MonitorConfig()


@pytest.fixture
def make_sample():
    def _make(entity_id="T-01", amplitude=1.0, temperature=900.0, timestamp=0.0, speed=3600.0):
        return {
            "id": entity_id,
            "timestamp": timestamp,
            "amplitude": amplitude,
            "temperature": temperature,
            "speed": speed,
        }

    return _make
