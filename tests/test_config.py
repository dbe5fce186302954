"""Tests for search configuration and environment overrides."""

import pytest

from smart_search.config import ConfigError, SearchConfig, load_config


ENV_NAMES = [
    "MAPLE_DEBOUNCE_MS",
    "MAPLE_RELEVANCE_THRESHOLD",
    "MAPLE_MAX_RESULTS",
    "MAPLE_MAX_VISIBLE",
    "MAPLE_MIN_FALLBACK_LENGTH",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    # set-then-delete so monkeypatch also removes anything load_dotenv adds
    for name in ENV_NAMES:
        monkeypatch.setenv(name, "0")
        monkeypatch.delenv(name)


@pytest.fixture
def missing_env_file(tmp_path):
    return str(tmp_path / "missing.env")


def test_defaults():
    config = SearchConfig()
    assert config.debounce_ms == 300
    assert config.debounce_seconds == 0.3
    assert config.relevance_threshold == 0.3
    assert config.max_knowledge_results == 5
    assert config.max_visible_results == 5
    assert config.min_fallback_query_length == 2


def test_load_without_overrides(missing_env_file):
    assert load_config(missing_env_file) == SearchConfig()


def test_environment_overrides(monkeypatch, missing_env_file):
    monkeypatch.setenv("MAPLE_MAX_RESULTS", "3")
    monkeypatch.setenv("MAPLE_RELEVANCE_THRESHOLD", "0.5")
    config = load_config(missing_env_file)
    assert config.max_knowledge_results == 3
    assert config.relevance_threshold == 0.5
    assert config.debounce_ms == 300


def test_blank_value_ignored(monkeypatch, missing_env_file):
    monkeypatch.setenv("MAPLE_DEBOUNCE_MS", "  ")
    assert load_config(missing_env_file).debounce_ms == 300


def test_dotenv_file(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("MAPLE_DEBOUNCE_MS=50\nMAPLE_MAX_VISIBLE=3\n")
    config = load_config(str(env_file))
    assert config.debounce_ms == 50
    assert config.max_visible_results == 3


def test_invalid_number(monkeypatch, missing_env_file):
    monkeypatch.setenv("MAPLE_MAX_RESULTS", "five")
    with pytest.raises(ConfigError, match="MAPLE_MAX_RESULTS"):
        load_config(missing_env_file)


def test_negative_rejected(monkeypatch, missing_env_file):
    monkeypatch.setenv("MAPLE_DEBOUNCE_MS", "-1")
    with pytest.raises(ConfigError):
        load_config(missing_env_file)
