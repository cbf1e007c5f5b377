from __future__ import annotations

from pathlib import Path

import pytest

from coreswitch import errors
from coreswitch.context import Context, PlatformRoots, Scope, resolve_roots


@pytest.mark.parametrize("system", ["Linux", "Darwin"])
def test_unix_roots_use_home_and_opt(system: str) -> None:
    roots = resolve_roots(system=system, environ={"HOME": "/home/dev"})

    assert roots == PlatformRoots(
        home=Path("/home/dev"),
        sdk_root=Path("/opt/dotnet/sdk"),
        toolchain_exe=Path("/opt/dotnet/dotnet"),
    )


def test_windows_roots_use_userprofile_and_program_files() -> None:
    environ = {"USERPROFILE": "C:\\Users\\dev", "ProgramFiles": "C:\\Program Files", "HOME": "/ignored"}

    roots = resolve_roots(system="Windows", environ=environ)

    assert roots.home == Path("C:\\Users\\dev")
    assert roots.sdk_root == Path("C:\\Program Files", "dotnet", "sdk")
    assert roots.toolchain_exe == Path("C:\\Program Files", "dotnet", "dotnet.exe")


def test_resolution_is_deterministic() -> None:
    environ = {"HOME": "/home/dev"}

    assert resolve_roots(system="Linux", environ=environ) == resolve_roots(system="Linux", environ=environ)


@pytest.mark.parametrize("system", ["FreeBSD", "Java", ""])
def test_other_systems_are_unsupported(system: str) -> None:
    with pytest.raises(errors.UnsupportedPlatform):
        resolve_roots(system=system, environ={"HOME": "/home/dev"})


def test_missing_home_invalidates_roots() -> None:
    with pytest.raises(errors.UnsupportedPlatform, match="HOME"):
        resolve_roots(system="Linux", environ={})


def test_windows_without_program_files_invalidates_roots() -> None:
    with pytest.raises(errors.UnsupportedPlatform, match="ProgramFiles"):
        resolve_roots(system="Windows", environ={"USERPROFILE": "C:\\Users\\dev"})


def test_start_dir_depends_on_scope(roots: PlatformRoots, tmp_path: Path) -> None:
    ctx = Context(roots=roots, cwd=tmp_path / "work")

    assert ctx.start_dir(Scope.LOCAL) == tmp_path / "work"
    assert ctx.start_dir(Scope.GLOBAL) == roots.home
