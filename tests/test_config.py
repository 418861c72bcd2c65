import logging

import pytest

from sigillium.config import MNEMONIC_PROMPT, Settings, parse_log_level
from sigillium.log import configure_logging


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in (
        "SIGILLIUM_LOG_LEVEL",
        "SIGILLIUM_PHRASE_ATTEMPTS",
        "SIGILLIUM_MNEMONIC_PROMPT",
        "SIGILLIUM_SIGN_PROMPT",
    ):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    s = Settings.from_env()
    assert s.log_level == logging.WARNING
    assert s.phrase_attempts == 3
    assert s.mnemonic_prompt == MNEMONIC_PROMPT
    assert set(s.verify_prompts) == {"public_key", "signature", "message"}


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("SIGILLIUM_LOG_LEVEL", "debug")
    monkeypatch.setenv("SIGILLIUM_PHRASE_ATTEMPTS", "5")
    monkeypatch.setenv("SIGILLIUM_SIGN_PROMPT", "Challenge?")
    s = Settings.from_env()
    assert s.log_level == logging.DEBUG
    assert s.phrase_attempts == 5
    assert s.sign_prompt == "Challenge?"


def test_empty_env_values_fall_back_to_defaults(monkeypatch):
    monkeypatch.setenv("SIGILLIUM_MNEMONIC_PROMPT", "")
    assert Settings.from_env().mnemonic_prompt == MNEMONIC_PROMPT


@pytest.mark.parametrize("value", ["0", "-1", "three"])
def test_bad_attempts_rejected(monkeypatch, value):
    monkeypatch.setenv("SIGILLIUM_PHRASE_ATTEMPTS", value)
    with pytest.raises(ValueError, match="phrase attempts"):
        Settings.from_env()


def test_with_overrides_ignores_none_and_unknown():
    s = Settings().with_overrides(log_level="info", phrase_attempts=None, colour="red")
    assert s.log_level == logging.INFO
    assert s.phrase_attempts == 3
    assert not hasattr(s, "colour")


@pytest.mark.parametrize(
    "value, level",
    [("WARNING", logging.WARNING), (" error ", logging.ERROR), ("10", 10), (20, 20)],
)
def test_parse_log_level(value, level):
    assert parse_log_level(value) == level


def test_parse_log_level_rejects_unknown():
    with pytest.raises(ValueError):
        parse_log_level("chatty")


def test_configure_logging_replaces_its_handler():
    logger = configure_logging("INFO")
    configure_logging(logging.DEBUG)
    ours = [h for h in logger.handlers if getattr(h, "_sigillium", False)]
    assert len(ours) == 1
    assert logger.level == logging.DEBUG
