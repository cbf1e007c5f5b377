from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from coreswitch.context import POINTER_FILENAME, Context, PlatformRoots


class CapturingSink:
    def __init__(self) -> None:
        self.events: list[tuple[str, dict[str, Any]]] = []

    def record(self, event: str, **fields: Any) -> None:
        self.events.append((event, fields))

    def names(self) -> list[str]:
        return [name for name, _ in self.events]


def write_pointer(directory: Path, version: str) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / POINTER_FILENAME
    path.write_text(f'{{"sdk": {{"version": "{version}"}}}}', encoding="utf-8")
    return path


@pytest.fixture
def sink() -> CapturingSink:
    return CapturingSink()


@pytest.fixture
def roots(tmp_path: Path) -> PlatformRoots:
    home = tmp_path / "home"
    sdk_root = tmp_path / "opt" / "dotnet" / "sdk"
    home.mkdir()
    sdk_root.mkdir(parents=True)
    return PlatformRoots(home=home, sdk_root=sdk_root, toolchain_exe=tmp_path / "opt" / "dotnet" / "dotnet")


@pytest.fixture
def make_ctx(roots: PlatformRoots, sink: CapturingSink):
    def _make(cwd: Path) -> Context:
        cwd.mkdir(parents=True, exist_ok=True)
        return Context(roots=roots, cwd=cwd, sink=sink)

    return _make


@pytest.fixture
def no_toolchain(monkeypatch):
    def _fail(*args, **kwargs):
        raise AssertionError("toolchain should not be queried")

    monkeypatch.setattr("coreswitch.resolver.subprocess.run", _fail)
