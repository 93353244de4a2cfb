"""Tests for batch entry validation."""

import pytest

from raw_ingest.validator import SensorSample, parse_batch, validate_sample


def test_valid_entry_is_normalized(make_sample):
    sample = validate_sample(make_sample(amplitude=2, temperature=901))

    assert isinstance(sample, SensorSample)
    assert sample.amplitude == 2.0
    assert isinstance(sample.amplitude, float)
    assert sample.speed == 3600.0


def test_speed_is_optional(make_sample):
    entry = make_sample()
    del entry["speed"]

    assert validate_sample(entry).speed == 0.0


@pytest.mark.parametrize("missing", ["id", "timestamp", "amplitude", "temperature"])
def test_missing_field_is_rejected(make_sample, missing):
    entry = make_sample()
    del entry[missing]

    assert validate_sample(entry) is None


@pytest.mark.parametrize(
    "field,value",
    [
        ("amplitude", "1.5"),
        ("amplitude", None),
        ("amplitude", float("nan")),
        ("temperature", float("inf")),
        ("timestamp", True),
        ("speed", "fast"),
        ("id", ""),
        ("id", 7),
    ],
)
def test_bad_values_are_rejected(make_sample, field, value):
    entry = make_sample()
    entry[field] = value

    assert validate_sample(entry) is None


def test_non_dict_entry_is_rejected():
    assert validate_sample(["T-01", 0, 1, 2]) is None


def test_parse_batch_drops_only_malformed(make_sample):
    batch = [
        make_sample("T-01"),
        {"id": "T-02"},
        make_sample("T-03", amplitude="x"),
        make_sample("T-04"),
    ]

    samples, dropped = parse_batch(batch)

    assert [s.id for s in samples] == ["T-01", "T-04"]
    assert dropped == 2


def test_parse_batch_accepts_updates_envelope(make_sample):
    samples, dropped = parse_batch({"updates": [make_sample("T-09")]})

    assert [s.id for s in samples] == ["T-09"]
    assert dropped == 0


def test_parse_batch_ignores_non_list():
    assert parse_batch("garbage") == ([], 0)
    assert parse_batch({"other": 1}) == ([], 0)
