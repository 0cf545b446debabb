"""Shared pytest fixtures for Script Picker tests."""

import json
from pathlib import Path

import pytest

from script_picker.core.picker import BasePicker
from script_picker.core.runner import BaseRunner


class RecordingRunner(BaseRunner):
    """Runner that records commands instead of executing them."""

    def __init__(self):
        self.calls = []

    def run(self, command: str, cwd: Path) -> None:
        self.calls.append((command, cwd))


class ScriptedPicker(BasePicker):
    """Picker that returns a fixed answer and remembers what it was offered."""

    def __init__(self, answer):
        self.answer = answer
        self.offered = None

    def pick(self, choices: list[str]) -> str | None:
        self.offered = list(choices)
        return self.answer


@pytest.fixture(autouse=True)
def isolated_home(tmp_path_factory, monkeypatch):
    """Keep the user's real config file out of the tests."""
    home = tmp_path_factory.mktemp("home")
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("SCRIPT_PICKER_PACKAGE_MANAGER", raising=False)
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
    return home


@pytest.fixture
def recording_runner():
    """Runner that records (command, cwd) pairs."""
    return RecordingRunner()


@pytest.fixture
def npm_project(tmp_path):
    """Project with build/test/start scripts and no lock file."""
    (tmp_path / "package.json").write_text(
        json.dumps({
            "name": "app",
            "version": "1.0.0",
            "scripts": {"build": "tsc", "test": "jest", "start": "node index.js"},
        })
    )
    return tmp_path


@pytest.fixture
def pnpm_project(tmp_path):
    """Project with a single start script and a pnpm lock file."""
    (tmp_path / "package.json").write_text(
        json.dumps({"name": "app", "scripts": {"start": "node index.js"}})
    )
    (tmp_path / "pnpm-lock.yaml").write_text("lockfileVersion: '9.0'\n")
    return tmp_path


@pytest.fixture
def bun_project(tmp_path):
    """Project with a bun lock file."""
    (tmp_path / "package.json").write_text(
        json.dumps({"name": "app", "scripts": {"dev": "vite"}})
    )
    (tmp_path / "bun.lockb").write_bytes(b"\x00bun-lockfile")
    return tmp_path


@pytest.fixture
def nested_project(npm_project):
    """Start directory three levels below a project root."""
    nested = npm_project / "src" / "components" / "button"
    nested.mkdir(parents=True)
    return nested


@pytest.fixture
def empty_scripts_project(tmp_path):
    """package.json with an empty scripts object."""
    (tmp_path / "package.json").write_text(json.dumps({"name": "app", "scripts": {}}))
    return tmp_path


@pytest.fixture
def no_scripts_project(tmp_path):
    """package.json without a scripts key."""
    (tmp_path / "package.json").write_text(json.dumps({"name": "app"}))
    return tmp_path


@pytest.fixture
def malformed_project(tmp_path):
    """package.json with invalid JSON."""
    (tmp_path / "package.json").write_text('{"name": "broken", "scripts": {')
    return tmp_path
