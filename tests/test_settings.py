import logging
from pathlib import Path

from phonewords.settings import Settings, EDITABLE_FIELDS, configure_logging, update_settings, get_editable_settings


def _fresh_settings() -> Settings:
    """Create a fresh Settings instance for testing."""
    return Settings()


def test_defaults():
    cfg = _fresh_settings()
    assert cfg.DEFAULT_STRATEGY == "walk"
    assert cfg.BENCHMARK_RUNS == 500
    assert cfg.CANONICAL_COMPARE is True
    assert cfg.DICTIONARY_PATH.name == "english-words.txt"


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("MAX_DIGITS", "9")
    monkeypatch.setenv("DEBUG", "yes")
    monkeypatch.setenv("DEFAULT_STRATEGY", "split")
    monkeypatch.setenv("DICTIONARY_PATH", str(tmp_path / "words.txt"))
    cfg = _fresh_settings()
    assert cfg.MAX_DIGITS == 9
    assert cfg.DEBUG is True
    assert cfg.DEFAULT_STRATEGY == "split"
    assert cfg.DICTIONARY_PATH == Path(tmp_path / "words.txt")


def test_editable_fields_exist_on_settings():
    """All editable fields must be actual attributes on Settings."""
    cfg = _fresh_settings()
    for field_name in EDITABLE_FIELDS:
        assert hasattr(cfg, field_name), f"{field_name} not found on Settings"


def test_get_editable_settings():
    cfg = _fresh_settings()
    result = get_editable_settings(cfg)
    assert set(result.keys()) == set(EDITABLE_FIELDS.keys())
    assert result["MAX_DIGITS"] == cfg.MAX_DIGITS
    assert result["CANONICAL_COMPARE"] == cfg.CANONICAL_COMPARE


def test_update_int_field():
    cfg = _fresh_settings()
    errors = update_settings(cfg, MAX_DIGITS=7)
    assert errors == {}
    assert cfg.MAX_DIGITS == 7


def test_update_int_from_string():
    cfg = _fresh_settings()
    errors = update_settings(cfg, BENCHMARK_RUNS="25")
    assert errors == {}
    assert cfg.BENCHMARK_RUNS == 25


def test_update_bool_field():
    cfg = _fresh_settings()
    original = cfg.DEBUG
    errors = update_settings(cfg, DEBUG=not original)
    assert errors == {}
    assert cfg.DEBUG is (not original)


def test_update_bool_from_string():
    cfg = _fresh_settings()
    errors = update_settings(cfg, CANONICAL_COMPARE="false")
    assert errors == {}
    assert cfg.CANONICAL_COMPARE is False

    errors = update_settings(cfg, CANONICAL_COMPARE="true")
    assert errors == {}
    assert cfg.CANONICAL_COMPARE is True


def test_update_bad_bool_rejected():
    cfg = _fresh_settings()
    errors = update_settings(cfg, DEBUG="maybe")
    assert "DEBUG" in errors
    assert cfg.DEBUG is False


def test_update_strategy_validated():
    cfg = _fresh_settings()
    assert update_settings(cfg, DEFAULT_STRATEGY="split") == {}
    assert cfg.DEFAULT_STRATEGY == "split"

    errors = update_settings(cfg, DEFAULT_STRATEGY="bfs")
    assert "DEFAULT_STRATEGY" in errors
    assert cfg.DEFAULT_STRATEGY == "split"


def test_update_rejects_non_positive_limits():
    cfg = _fresh_settings()
    errors = update_settings(cfg, MAX_DIGITS=0, BENCHMARK_RUNS=-3)
    assert set(errors) == {"MAX_DIGITS", "BENCHMARK_RUNS"}


def test_update_multiple_fields():
    cfg = _fresh_settings()
    errors = update_settings(cfg, MAX_DIGITS=10, BENCHMARK_RUNS=4, DEFAULT_STRATEGY="split")
    assert errors == {}
    assert cfg.MAX_DIGITS == 10
    assert cfg.BENCHMARK_RUNS == 4
    assert cfg.DEFAULT_STRATEGY == "split"


def test_update_non_editable_field_returns_error():
    cfg = _fresh_settings()
    errors = update_settings(cfg, DICTIONARY_PATH="/tmp/other.txt")
    assert "DICTIONARY_PATH" in errors


def test_update_unknown_field_returns_error():
    cfg = _fresh_settings()
    errors = update_settings(cfg, NONEXISTENT_FIELD=42)
    assert "NONEXISTENT_FIELD" in errors


def test_update_partial_error():
    """Valid fields update even when invalid fields are present."""
    cfg = _fresh_settings()
    errors = update_settings(cfg, MAX_DIGITS=12, BAD_FIELD="nope")
    assert "BAD_FIELD" in errors
    assert cfg.MAX_DIGITS == 12


def test_update_int_rejects_fractional_float():
    cfg = _fresh_settings()
    errors = update_settings(cfg, MAX_DIGITS=3.7)
    assert "MAX_DIGITS" in errors
    assert cfg.MAX_DIGITS == 16

    assert update_settings(cfg, MAX_DIGITS=4.0) == {}
    assert cfg.MAX_DIGITS == 4


def test_update_max_letter_strings():
    cfg = _fresh_settings()
    assert cfg.MAX_LETTER_STRINGS == 100_000
    assert update_settings(cfg, MAX_LETTER_STRINGS=500) == {}
    assert cfg.MAX_LETTER_STRINGS == 500
    assert "MAX_LETTER_STRINGS" in update_settings(cfg, MAX_LETTER_STRINGS=0)


def test_configure_logging_follows_debug_flag():
    logger = logging.getLogger("phonewords")
    original = logger.level
    cfg = _fresh_settings()
    try:
        cfg.DEBUG = True
        configure_logging(cfg)
        assert logger.isEnabledFor(logging.DEBUG)

        cfg.DEBUG = False
        configure_logging(cfg)
        assert not logger.isEnabledFor(logging.DEBUG)
    finally:
        logger.setLevel(original)
