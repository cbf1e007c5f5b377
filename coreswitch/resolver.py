"""
Work out which SDK version is active for a scope.

A pointer file found by walking up from the scope's start directory wins.
When there is none, or it cannot be read, the installed toolchain is asked
for its own version instead, which always counts as the global answer.
"""
import dataclasses
import shutil
import subprocess
from pathlib import Path
from typing import Optional

from coreswitch import errors, shims
from coreswitch.context import POINTER_FILENAME, TOOLCHAIN, Context, Scope
from coreswitch.outcome import Outcome, capture, first_success

__all__ = ("Resolution", "resolve_current")

VERSION_ARGUMENT = "--version"
POINTER_FILE = "pointer-file"
TOOLCHAIN_QUERY = "toolchain"


@dataclasses.dataclass(frozen=True)
class Resolution:
    version: Optional[str]
    is_global: bool
    ok: bool
    found: bool = False
    source: Optional[str] = None
    path: Optional[Path] = None
    reasons: tuple[errors.CoreSwitchError, ...] = ()


@dataclasses.dataclass(frozen=True)
class _Answer:
    version: str
    is_global: bool
    source: str
    path: Optional[Path] = None


def _toolchain_command(ctx: Context) -> list[str]:
    exe = ctx.roots.toolchain_exe

    if exe.is_file():
        return [str(exe), VERSION_ARGUMENT]

    return [shutil.which(TOOLCHAIN) or TOOLCHAIN, VERSION_ARGUMENT]


def _run_command(command: list[str]) -> str:
    try:
        process = subprocess.run(command, capture_output=True, check=False)
    except OSError as error:
        raise errors.ProcessLaunchError(f'Failed to run command "{" ".join(command)}": {error}') from error

    try:
        output = (process.stdout or b"").decode("utf-8").strip()
    except UnicodeDecodeError as error:
        raise errors.DecodeError(f'"{" ".join(command)}" printed a version that is not UTF-8') from error

    if not output:
        raise errors.ProcessLaunchError(
            f'"{" ".join(command)}" exited with {process.returncode} and printed no version'
        )

    return output


def _from_pointer_file(location: Outcome[shims.Location]) -> Outcome[_Answer]:
    if not location.ok:
        return Outcome.failure(location.error)

    found = location.value

    if found.file is None:
        return Outcome.failure(errors.NotFound(f"No {POINTER_FILENAME} found up to {found.directory}"))

    version = capture(shims.read_pointer, found.file)

    if not version.ok:
        return Outcome.failure(version.error)

    return Outcome.success(
        _Answer(
            version=version.value,
            is_global=found.stopped_at_home,
            source=POINTER_FILE,
            path=found.file,
        )
    )


def _from_toolchain(ctx: Context) -> Outcome[_Answer]:
    command = _toolchain_command(ctx)

    ctx.sink.record("resolver.fallback", command=" ".join(command))

    version = capture(_run_command, command)

    if not version.ok:
        return Outcome.failure(version.error)

    return Outcome.success(
        _Answer(version=version.value, is_global=True, source=TOOLCHAIN_QUERY)
    )


def resolve_current(ctx: Context, scope: Scope, force: bool) -> Resolution:
    location = shims.find_pointer_file(ctx, scope, force)
    found = location.ok and location.value is not None and location.value.found
    answer = first_success(
        lambda: _from_pointer_file(location),
        lambda: _from_toolchain(ctx),
    )

    for reason in answer.reasons:
        ctx.sink.record("resolver.reason", kind=type(reason).__name__, detail=reason)

    if not answer.ok:
        return Resolution(version=None, is_global=True, ok=False, found=found, reasons=answer.reasons)

    return Resolution(
        version=answer.value.version,
        is_global=answer.value.is_global,
        ok=True,
        found=found,
        source=answer.value.source,
        path=answer.value.path,
        reasons=answer.reasons,
    )
