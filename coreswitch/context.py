import dataclasses
import enum
import os
import platform
from pathlib import Path
from typing import Mapping, Optional

from coreswitch import errors
from coreswitch.events import EventSink, NullSink

__all__ = ("Scope", "PlatformRoots", "resolve_roots", "Context")

VENDOR = "dotnet"
TOOLCHAIN = "dotnet"
POINTER_FILENAME = "global.json"
WINDOWS = "Windows"
LINUX = "Linux"
MACOS = "Darwin"
SUPPORTED_SYSTEMS = (WINDOWS, LINUX, MACOS)


class Scope(enum.Enum):
    LOCAL = "local"
    GLOBAL = "global"


@dataclasses.dataclass(frozen=True)
class PlatformRoots:
    home: Path
    sdk_root: Path
    toolchain_exe: Path


def _require(environ: Mapping[str, str], name: str, system: str) -> str:
    value = environ.get(name)

    if not value:
        raise errors.UnsupportedPlatform(f"{name} is not set on {system}")

    return value


def resolve_roots(
    *, system: Optional[str] = None, environ: Optional[Mapping[str, str]] = None
) -> PlatformRoots:
    system = platform.system() if system is None else system
    environ = os.environ if environ is None else environ

    if system not in SUPPORTED_SYSTEMS:
        raise errors.UnsupportedPlatform(f"Unsupported platform: {system or 'unknown'}")

    if system == WINDOWS:
        home = _require(environ, "USERPROFILE", system)
        install_dir = Path(_require(environ, "ProgramFiles", system), VENDOR)

        return PlatformRoots(
            home=Path(home),
            sdk_root=install_dir / "sdk",
            toolchain_exe=install_dir / f"{TOOLCHAIN}.exe",
        )

    # TODO: confirm the macOS installer layout; pkg installs land in /usr/local/share/dotnet
    home = _require(environ, "HOME", system)
    install_dir = Path("/opt") / VENDOR

    return PlatformRoots(
        home=Path(home),
        sdk_root=install_dir / "sdk",
        toolchain_exe=install_dir / TOOLCHAIN,
    )


@dataclasses.dataclass(frozen=True)
class Context:
    roots: PlatformRoots
    cwd: Path
    sink: EventSink = dataclasses.field(default_factory=NullSink)

    def start_dir(self, scope: Scope) -> Path:
        return self.roots.home if scope is Scope.GLOBAL else self.cwd
