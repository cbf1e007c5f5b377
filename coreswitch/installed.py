from pathlib import Path

from coreswitch import errors
from coreswitch.context import PlatformRoots
from coreswitch.outcome import Outcome, capture

__all__ = ("list_installed", "resolve_latest", "is_installed")

LATEST = "latest"


def _list_version_dirs(sdk_root: Path) -> list[str]:
    if not sdk_root.is_dir():
        raise errors.NotFound(f"No SDK installation found at {sdk_root}")

    try:
        return [entry.name for entry in sdk_root.iterdir() if entry.is_dir()]
    except OSError as error:
        raise errors.NotFound(f"Could not read {sdk_root}: {error}") from error


def list_installed(roots: PlatformRoots) -> Outcome[list[str]]:
    return capture(_list_version_dirs, roots.sdk_root)


# NOTE: Picks whatever the filesystem listed last, not the highest version
def resolve_latest(versions: list[str]) -> str:
    if not versions:
        raise errors.NotFound("No SDKs are installed")

    return versions[-1]


def is_installed(version: str, versions: list[str]) -> bool:
    return version in versions
