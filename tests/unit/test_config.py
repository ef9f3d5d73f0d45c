import logging

import pytest

from pathsampler import config


@pytest.mark.unit
def test_defaults_match_original_resolution():
    assert config.TRACE == 5
    assert logging.getLevelName(config.TRACE) == "TRACE"
    assert hasattr(logging.getLogger("pathsampler.test"), "trace")


@pytest.mark.unit
@pytest.mark.parametrize(
    "raw,expected",
    [(None, 1.0), ("", 1.0), ("0.25", 0.25), ("abc", 1.0), ("-2", 1.0), ("0", 1.0)],
)
def test_env_float(monkeypatch, raw, expected):
    if raw is None:
        monkeypatch.delenv("PATHSAMPLER_TEST_FLOAT", raising=False)
    else:
        monkeypatch.setenv("PATHSAMPLER_TEST_FLOAT", raw)
    assert config._env_float("PATHSAMPLER_TEST_FLOAT", 1.0) == expected


@pytest.mark.unit
@pytest.mark.parametrize("raw,expected", [("3", 3), ("-1", 0), ("two", 2)])
def test_env_int(monkeypatch, raw, expected):
    monkeypatch.setenv("PATHSAMPLER_TEST_INT", raw)
    assert config._env_int("PATHSAMPLER_TEST_INT", 2) == expected


@pytest.mark.unit
@pytest.mark.parametrize(
    "raw,expected",
    [("1", True), ("yes", True), ("OFF", False), ("0", False), ("maybe", False)],
)
def test_env_bool(monkeypatch, raw, expected):
    monkeypatch.setenv("PATHSAMPLER_TEST_BOOL", raw)
    assert config._env_bool("PATHSAMPLER_TEST_BOOL", False) is expected


@pytest.mark.unit
def test_max_samples_is_positive():
    assert config.MAX_SAMPLES > 0
