"""
Shared test fixtures and configuration.
"""

import stat
from pathlib import Path

import pytest

from profilekit.core.services.command_cache import CommandAvailabilityCache
from profilekit.core.services.detection.static_probe import StaticProbe


@pytest.fixture
def static_probe() -> StaticProbe:
    """Probe backing store with git present and nothing else."""
    return StaticProbe({"git": "/usr/bin/git"})


@pytest.fixture
def cache(static_probe: StaticProbe) -> CommandAvailabilityCache:
    """Availability cache over the static probe."""
    return CommandAvailabilityCache(probe=static_probe)


@pytest.fixture
def bin_dir(tmp_path: Path) -> Path:
    """An empty directory to put fake executables in."""
    d = tmp_path / "bin"
    d.mkdir()
    return d


def make_executable(directory: Path, name: str, body: str = "#!/bin/sh\nexit 0\n") -> Path:
    """Create an executable script in ``directory``."""
    path = directory / name
    path.write_text(body)
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return path


@pytest.fixture
def isolated_path(monkeypatch: pytest.MonkeyPatch, bin_dir: Path) -> Path:
    """Point PATH at ``bin_dir`` only."""
    monkeypatch.setenv("PATH", str(bin_dir))
    monkeypatch.delenv(  # keep notices audible regardless of the host env
        "PK_SUPPRESS_MISSING_TOOL_WARNINGS", raising=False,
    )
    return bin_dir


@pytest.fixture
def make_exe():
    """Factory for executable scripts: ``make_exe(directory, name)``."""
    return make_executable
