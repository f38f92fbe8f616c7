"""Tests for environment-driven settings."""

from exprcalc.config import DEFAULT_PRECISION, Settings, load_settings


def test_defaults_from_empty_env():
    assert load_settings({}) == Settings()


def test_values_from_env():
    settings = load_settings({
        "EXPRCALC_LOG_LEVEL": "debug",
        "EXPRCALC_STRICT_BRACKETS": "yes",
        "EXPRCALC_PRECISION": "6",
    })
    assert settings.log_level == "DEBUG"
    assert settings.strict_brackets
    assert settings.precision == 6


def test_garbage_falls_back_to_defaults():
    settings = load_settings({
        "EXPRCALC_LOG_LEVEL": "chatty",
        "EXPRCALC_STRICT_BRACKETS": "maybe",
        "EXPRCALC_PRECISION": "-3",
    })
    assert settings == Settings()
    assert load_settings({"EXPRCALC_PRECISION": "many"}).precision == DEFAULT_PRECISION


def test_reads_os_environ(monkeypatch):
    monkeypatch.setenv("EXPRCALC_STRICT_BRACKETS", "1")
    assert load_settings().strict_brackets


def test_configure_logging_installs_rich_handler(console):
    import logging

    from rich.logging import RichHandler

    from exprcalc.logging_config import configure_logging

    configure_logging("debug", console=console)
    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert any(isinstance(h, RichHandler) for h in root.handlers)
    configure_logging("WARNING", console=console)
