"""Tests for cargo_climate.cargo: running cargo and capturing its output."""

import logging
import subprocess

import pytest

from cargo_climate.cargo import run_cargo
from cargo_climate.config import Config
from cargo_climate.errors import CargoError


def _fake_run(stdout: bytes, returncode: int = 0, calls=None):
    def run(cmd, **kwargs):
        if calls is not None:
            calls.append((cmd, kwargs))
        return subprocess.CompletedProcess(cmd, returncode, stdout=stdout)

    return run


def test_run_cargo_returns_stdout_lines(monkeypatch):
    calls = []
    monkeypatch.setattr(subprocess, "run", _fake_run(b'{"a":1}\n{"b":2}\n', calls=calls))
    lines = run_cargo(Config(program="cargo"))
    assert lines == [b'{"a":1}', b'{"b":2}']
    cmd, kwargs = calls[0]
    assert cmd == ["cargo", "check", "--message-format", "json"]
    assert kwargs["stdout"] == subprocess.PIPE


def test_nonzero_exit_is_not_an_error(monkeypatch, caplog):
    monkeypatch.setattr(subprocess, "run", _fake_run(b'{"reason":"build-finished","success":false}\n', 101))
    with caplog.at_level(logging.INFO):
        lines = run_cargo(Config(program="cargo"))
    assert len(lines) == 1
    assert "exited with status 101" in caplog.text


def test_missing_cargo_raises(monkeypatch):
    def run(cmd, **kwargs):
        raise FileNotFoundError(2, "No such file or directory", cmd[0])

    monkeypatch.setattr(subprocess, "run", run)
    with pytest.raises(CargoError, match="no-such-cargo check --message-format json failed"):
        run_cargo(Config(program="no-such-cargo"))
