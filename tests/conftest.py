"""Shared pytest fixtures for all tests."""

from pathlib import Path
from typing import Iterable, List, Optional, Tuple

import pytest

from maintenance_tool.api.exceptions import ExternalProcessError
from maintenance_tool.constants import PROJECT_CONFIG_FILE
from maintenance_tool.core.command_runner import CommandRunner
from maintenance_tool.models import CommandResult, ToggleConfig

MAINTENANCE_HTML = b"<!DOCTYPE html><html><body><h1>Back soon</h1></body></html>\n"
FAVICON_PNG = b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR\x00\x00\x00\x10\x00\x00\x00\x10"


class FakeRunner(CommandRunner):
    """Records commands instead of running them."""

    def __init__(self, fail_on: Optional[Iterable[str]] = None, returncode: int = 1):
        self.calls: List[Tuple[str, Optional[Path]]] = []
        self.fail_on = set(fail_on or [])
        self.returncode = returncode

    @property
    def commands(self) -> List[str]:
        return [command for command, _ in self.calls]

    def run(self, command, cwd=None):
        self.calls.append((command, cwd))
        if command in self.fail_on:
            raise ExternalProcessError(command, self.returncode, stderr="simulated failure")
        return CommandResult(command=command, returncode=0)


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """Project root holding a maintenance bundle and no publish directory."""
    web = tmp_path / "web"
    web.mkdir()
    (web / "maintenance.html").write_bytes(MAINTENANCE_HTML)
    (web / "favicon.png").write_bytes(FAVICON_PNG)
    return tmp_path


@pytest.fixture
def config(project: Path) -> ToggleConfig:
    """Default configuration rooted at the sample project."""
    return ToggleConfig(project_root=project)


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def config_file(project: Path) -> Path:
    """Path of the project config file (not created)."""
    return project / PROJECT_CONFIG_FILE


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch):
    """Keep developer environment variables out of the tests."""
    for name in ("MAINTENANCE_TOOL_CONFIG", "MAINTENANCE_TOOL_PROJECT_ROOT", "MAINTENANCE_TOOL_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
