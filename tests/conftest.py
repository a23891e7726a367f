"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from pathlib import Path
from unittest.mock import MagicMock

import pytest
from pkgup.core.scratch import ScratchFile
from pkgup.managers.base import ManagerAdapter
from pkgup.models.environment import PackageManagerKind


@pytest.fixture(autouse=True)
def isolated_xdg(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point XDG config and state directories at a temporary location."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_STATE_HOME", str(tmp_path / "state"))
    return tmp_path


@pytest.fixture
def scratch(tmp_path: Path) -> ScratchFile:
    """Fresh scratch file in a temporary directory."""
    return ScratchFile.create(directory=tmp_path)


@pytest.fixture
def mock_adapter() -> MagicMock:
    """Adapter double reporting no pending updates."""
    adapter = MagicMock(spec=ManagerAdapter)
    adapter.kind = PackageManagerKind.PACMAN
    adapter.format_pending.return_value = []
    return adapter


@pytest.fixture
def mock_pacman_output() -> str:
    """Sample pacman -Qu output for testing."""
    return """linux 6.6.1.arch1-1 -> 6.6.2.arch1-1
firefox 128.0-1 -> 128.0.3-1
glibc 2.38-7 -> 2.38-8 [ignored]"""


@pytest.fixture
def mock_apt_output() -> str:
    """Sample apt list --upgradable output for testing."""
    return """Listing...
bash/jammy-updates 5.1-6ubuntu1.1 amd64 [upgradable from: 5.1-6ubuntu1]
curl/jammy-security 7.81.0-1ubuntu1.15 amd64 [upgradable from: 7.81.0-1ubuntu1.14]"""


@pytest.fixture
def mock_apk_output() -> str:
    """Sample apk version -l '<' output for testing."""
    return """Installed:                                Available:
busybox-1.36.1-r2                       < 1.36.1-r5
py3-setuptools-68.0.0-r0                < 68.2.2-r0"""


@pytest.fixture
def mock_dnf_output() -> str:
    """Sample dnf -q check-update output for testing."""
    return """
kernel.x86_64                     6.5.12-300.fc39                 updates
vim-enhanced.x86_64               2:9.0.2120-1.fc39               updates
"""


@pytest.fixture
def mock_empty_output() -> str:
    """Empty output for testing edge cases."""
    return ""
