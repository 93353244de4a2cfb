"""Tests for YAML loading and config validation."""

from pathlib import Path

import pytest

from config.config_loader import load_config
from config.settings import MonitorConfig


def test_bundled_settings_match_defaults():
    cfg = MonitorConfig.from_dict(load_config())

    assert cfg == MonitorConfig()
    assert cfg.tick_period_sec == pytest.approx(1.0)


def test_load_config_caches_per_path(tmp_path: Path):
    path = tmp_path / "settings.yaml"
    path.write_text("trend:\n  capacity: 8\n", encoding="utf-8")

    first = load_config(path)
    path.write_text("trend:\n  capacity: 99\n", encoding="utf-8")

    assert load_config(path) is first
    assert first["trend"]["capacity"] == 8


def test_load_config_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError, match="Config file not found"):
        load_config(tmp_path / "absent.yaml")


def test_from_dict_overrides_and_keeps_defaults():
    cfg = MonitorConfig.from_dict(
        {
            "trend": {"capacity": 6, "min_points": 6},
            "rul": {"max_horizon_sec": 300},
            "logging": {"debug_entities": ["T-01"]},
        }
    )

    assert cfg.trend_capacity == 6
    assert cfg.trend_min_points == 6
    assert cfg.rul_max_horizon_sec == 300
    assert cfg.decimation_factor == 50
    assert cfg.debug_entities == ("T-01",)


def test_from_dict_tolerates_empty_input():
    assert MonitorConfig.from_dict(None) == MonitorConfig()


@pytest.mark.parametrize(
    "overrides,message",
    [
        ({"peak_window_capacity": 0}, "peak_window_capacity"),
        ({"trend_min_points": 1}, "trend_min_points"),
        ({"trend_capacity": 4, "trend_min_points": 5}, "trend_min_points"),
        ({"amplitude_alpha": 0.0}, "amplitude_alpha"),
        ({"temperature_alpha": 1.5}, "temperature_alpha"),
        ({"rul_max_horizon_sec": 999.0}, "rul_max_horizon_sec"),
        ({"amplitude_warning": 12.0}, "amplitude_warning"),
        ({"temperature_critical": 900.0}, "temperature_warning"),
        ({"sample_rate_hz": 0}, "sample_rate_hz"),
    ],
)
def test_invalid_values_raise(overrides, message):
    with pytest.raises(ValueError, match=message):
        MonitorConfig(**overrides)
