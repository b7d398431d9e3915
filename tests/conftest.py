from __future__ import annotations

import subprocess
from pathlib import Path

import pytest

from yeet.history import HistoryLedger


DESKTOP_TEMPLATE = """[Desktop Entry]
Type=Application
Name={name}
Exec={exec}
{extra}
"""


@pytest.fixture
def write_desktop():
    """Factory writing a minimal .desktop file into a directory."""
    def _write(directory: Path, file_name: str, name: str, exec: str = "true", extra: str = "") -> Path:
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / file_name
        path.write_text(DESKTOP_TEMPLATE.format(name=name, exec=exec, extra=extra), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def ledger(tmp_path) -> HistoryLedger:
    return HistoryLedger(tmp_path / "yeet" / "history.txt", max_lines=200)


class FakePopen:
    """Stands in for subprocess.Popen and remembers how it was called."""
    calls = []

    def __init__(self, args, **kwargs):
        self.args = args
        self.kwargs = kwargs
        FakePopen.calls.append(self)


@pytest.fixture
def fake_popen(monkeypatch):
    FakePopen.calls = []
    monkeypatch.setattr(subprocess, "Popen", FakePopen)
    return FakePopen
