from __future__ import annotations

import pytest

from sqlite_testdb.config import DEFAULTS, get_settings
from sqlite_testdb.config.env import (
    ENV_MAP,
    env_overrides,
    get_env_var_name,
    parse_bool,
    read_setting,
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ENV_MAP.values():
        monkeypatch.delenv(name, raising=False)


def test_env_map_contains_expected_keys():
    for s in ["tmp_dir", "suffix", "log_level", "log_json"]:
        assert s in ENV_MAP  # nosec B101


def test_get_env_var_name():
    assert get_env_var_name("tmp_dir") == "SQLITE_TESTDB_TMPDIR"  # nosec B101
    assert get_env_var_name("LOG_LEVEL") == "SQLITE_TESTDB_LOG_LEVEL"  # nosec B101
    assert get_env_var_name("unknown") is None  # nosec B101
    assert get_env_var_name("") is None  # nosec B101


def test_read_setting_treats_blank_as_unset(monkeypatch):
    monkeypatch.setenv("SQLITE_TESTDB_SUFFIX", "   ")
    assert read_setting("suffix") is None  # nosec B101
    monkeypatch.setenv("SQLITE_TESTDB_SUFFIX", " .sqlite ")
    assert read_setting("suffix") == ".sqlite"  # nosec B101


@pytest.mark.parametrize(
    "raw, expected",
    [("1", True), ("Yes", True), ("off", False), ("0", False), ("maybe", None), (None, None)],
)
def test_parse_bool(raw, expected):
    assert parse_bool(raw) is expected  # nosec B101


def test_env_overrides_coerce_types(monkeypatch):
    monkeypatch.setenv("SQLITE_TESTDB_LOG_JSON", "false")
    monkeypatch.setenv("SQLITE_TESTDB_LOG_LEVEL", "debug")
    assert env_overrides() == {"log_json": False, "log_level": "debug"}  # nosec B101


def test_env_overrides_ignore_unparseable_bool(monkeypatch):
    monkeypatch.setenv("SQLITE_TESTDB_LOG_JSON", "sometimes")
    assert "log_json" not in env_overrides()  # nosec B101


def test_get_settings_merge_order(monkeypatch, tmp_path):
    assert get_settings() == DEFAULTS  # nosec B101

    monkeypatch.setenv("SQLITE_TESTDB_TMPDIR", str(tmp_path))
    monkeypatch.setenv("SQLITE_TESTDB_SUFFIX", ".env-db")
    cfg = get_settings({"suffix": ".override", "prefix": None})
    assert cfg["tmp_dir"] == str(tmp_path)  # nosec B101
    assert cfg["suffix"] == ".override"  # nosec B101
    assert cfg["prefix"] == DEFAULTS["prefix"]  # nosec B101
