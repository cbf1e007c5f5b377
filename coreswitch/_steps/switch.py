import re

from coreswitch import errors, installed, shims
from coreswitch.context import Context, Scope
from coreswitch.outcome import Outcome

__all__ = ("pick_version", "switch")

VERSION_PATTERN = re.compile(r"^[0-9]+\.[0-9]+\.[0-9]+(-\S+)?$")


def pick_version(requested: str, versions: list[str]) -> str:
    requested = requested.strip()

    if requested == installed.LATEST:
        return installed.resolve_latest(versions)

    if not VERSION_PATTERN.match(requested):
        raise errors.InvalidVersion(f'"{requested}" is not a version number or "latest"')

    if not installed.is_installed(requested, versions):
        available = ", ".join(versions) or "none"

        raise errors.InvalidVersion(f"{requested} is not installed (installed: {available})")

    return requested


def switch(ctx: Context, version: str, *, scope: Scope, force: bool) -> Outcome[shims.Written]:
    written = shims.write_version(ctx, version, scope, force)

    if written.ok:
        ctx.sink.record("writer.done", version=version, path=written.value.path)

    return written
