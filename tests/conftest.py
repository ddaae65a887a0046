"""Pytest configuration and shared fixtures for command-runner tests."""

import json

import pytest

import command_runner.io.logging_setup


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Point config and log locations at a temp dir; never touch the real home."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("COMMAND_RUNNER_LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.delenv("COMMAND_RUNNER_LOG_FILE", raising=False)
    monkeypatch.delenv("COMMAND_RUNNER_LOG_LEVEL", raising=False)
    monkeypatch.delenv("COMMAND_RUNNER_CATALOG", raising=False)
    yield tmp_path
    command_runner.io.logging_setup.reset()


@pytest.fixture
def write_catalog(tmp_path):
    """Write a catalog document (dict or raw text) and return its path."""
    def _write(content, name="commands.json"):
        path = tmp_path / name
        text = content if isinstance(content, str) else json.dumps(content)
        path.write_text(text, encoding="utf-8")
        return path

    return _write
