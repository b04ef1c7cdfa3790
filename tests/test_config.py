"""Tests for cargo_climate.config: defaults and cargo argv construction."""

from pathlib import Path

from cargo_climate.config import Config, cargo_command, get_default_config


def test_default_command(monkeypatch):
    monkeypatch.delenv("CARGO", raising=False)
    assert cargo_command() == ["cargo", "check", "--message-format", "json"]


def test_program_from_cargo_env(monkeypatch):
    monkeypatch.setenv("CARGO", "/opt/rust/bin/cargo")
    assert get_default_config().program == "/opt/rust/bin/cargo"


def test_full_command():
    config = Config(
        program="cargo",
        subcommand="clippy",
        extra_args=["--all-targets", "--", "-W", "clippy::pedantic"],
        manifest_path=Path("crates/demo/Cargo.toml"),
    )
    assert cargo_command(config) == [
        "cargo",
        "clippy",
        "--message-format",
        "json",
        "--manifest-path",
        str(Path("crates/demo/Cargo.toml")),
        "--all-targets",
        "--",
        "-W",
        "clippy::pedantic",
    ]
