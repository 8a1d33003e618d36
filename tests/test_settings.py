from __future__ import annotations

import logging

import pytest

from user_manager import logging_config
from user_manager import main as main_module
from user_manager.settings import get_settings


def test_defaults(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("USER_MANAGER_LOG_LEVEL", raising=False)
    monkeypatch.delenv("USER_MANAGER_INDENT", raising=False)
    s = get_settings()
    assert s.log_level == "WARNING"
    assert s.indent == "\t\t"


def test_env_overrides_and_invalid_level_falls_back(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("USER_MANAGER_INDENT", "> ")
    monkeypatch.setenv("USER_MANAGER_LOG_LEVEL", "debug")
    s = get_settings()
    assert s.indent == "> "
    assert s.log_level == "DEBUG"

    monkeypatch.setenv("USER_MANAGER_LOG_LEVEL", "chatty")
    assert get_settings().log_level == "WARNING"


def _closed_stdin(*args, **kwargs):
    raise EOFError


def test_main_exits_zero_on_closed_input(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr("builtins.input", _closed_stdin)
    assert main_module.main([]) == 0


def test_cli_log_level_overrides_env(monkeypatch: pytest.MonkeyPatch):
    seen = []
    monkeypatch.setenv("USER_MANAGER_LOG_LEVEL", "ERROR")
    monkeypatch.setattr(main_module, "configure_logging", seen.append)
    monkeypatch.setattr("builtins.input", _closed_stdin)

    assert main_module.main(["--log-level", "debug"]) == 0
    assert main_module.main([]) == 0
    assert seen == ["debug", "ERROR"]


def test_main_returns_130_on_keyboard_interrupt(monkeypatch: pytest.MonkeyPatch):
    def interrupted(*args, **kwargs):
        raise KeyboardInterrupt

    monkeypatch.setattr(main_module, "configure_logging", lambda level: None)
    monkeypatch.setattr("builtins.input", interrupted)
    assert main_module.main([]) == 130


def test_configure_logging_falls_back_to_warning(monkeypatch: pytest.MonkeyPatch):
    calls = []
    monkeypatch.setattr(logging_config.logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

    logging_config.configure_logging("chatty")
    logging_config.configure_logging("debug")

    assert [c["level"] for c in calls] == [logging.WARNING, logging.DEBUG]
