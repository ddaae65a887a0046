"""Tests for the logging bootstrap."""

import logging

import command_runner.io.logging_setup as logging_setup


def test_configure_file_only(isolated_env, monkeypatch):
    log_file = isolated_env / "logs" / "run.log"
    monkeypatch.setenv("COMMAND_RUNNER_LOG_FILE", str(log_file))
    runtime = logging_setup.configure(console=False)

    assert runtime.file_path == str(log_file)
    assert runtime.console is False
    logger = logging.getLogger("command_runner")
    assert [type(h).__name__ for h in logger.handlers] == ["RotatingFileHandler"]
    assert logger.propagate is False

    logging.getLogger("command_runner.catalog").info("hello from test")
    for handler in logger.handlers:
        handler.flush()
    assert "hello from test" in log_file.read_text(encoding="utf-8")


def test_configure_is_idempotent():
    first = logging_setup.configure(console=True)
    second = logging_setup.configure(console=False)
    assert first is second
    assert logging_setup.get_runtime() is first
    assert len(logging.getLogger("command_runner").handlers) == 2


def test_default_path_under_log_dir(isolated_env):
    runtime = logging_setup.configure(console=False)
    assert runtime.file_path.startswith(str(isolated_env / "logs"))


def test_level_from_env(monkeypatch):
    monkeypatch.setenv("COMMAND_RUNNER_LOG_LEVEL", "debug")
    runtime = logging_setup.configure(console=False)
    assert runtime.level == logging.DEBUG
    assert runtime.level_name == "DEBUG"


def test_bad_level_falls_back_to_info(monkeypatch):
    monkeypatch.setenv("COMMAND_RUNNER_LOG_LEVEL", "chatty")
    assert logging_setup.configure(console=False).level == logging.INFO


def test_reset_forgets_runtime():
    logging_setup.configure(console=False)
    logging_setup.reset()
    assert logging_setup.get_runtime() is None
    assert logging.getLogger("command_runner").handlers == []
