import dataclasses
import json
from pathlib import Path
from typing import Optional, TypedDict

from coreswitch import errors
from coreswitch.context import POINTER_FILENAME, Context, Scope
from coreswitch.outcome import Outcome, capture

__all__ = (
    "Location",
    "WriteTarget",
    "Written",
    "decode_pointer",
    "encode_pointer",
    "read_pointer",
    "find_pointer_file",
    "choose_write_target",
    "write_version",
)


class SdkConfig(TypedDict):
    version: str


class PointerDocument(TypedDict):
    sdk: SdkConfig


@dataclasses.dataclass(frozen=True)
class Location:
    directory: Path
    file: Optional[Path]
    stopped_at_home: bool

    @property
    def found(self) -> bool:
        return self.file is not None


@dataclasses.dataclass(frozen=True)
class WriteTarget:
    path: Path
    is_new_file: bool


@dataclasses.dataclass(frozen=True)
class Written:
    version: str
    path: Path
    is_new_file: bool


def decode_pointer(text: str) -> str:
    try:
        document = PointerDocument(**json.loads(text))
        version = document["sdk"]["version"]
    except (ValueError, KeyError, TypeError) as error:
        raise errors.DecodeError(f"Malformed pointer file: {error}") from error

    if not isinstance(version, str):
        raise errors.DecodeError(f"sdk.version must be a string, got {version!r}")

    return version


def encode_pointer(version: str) -> str:
    document = PointerDocument(sdk=SdkConfig(version=version))

    return json.dumps(document, indent=2) + "\n"


def read_pointer(path: Path) -> str:
    try:
        with path.open("r", encoding="utf-8-sig") as fh:
            text = fh.read()
    except FileNotFoundError as error:
        raise errors.NotFound(f"{path} does not exist") from error
    except UnicodeDecodeError as error:
        raise errors.DecodeError(f"{path} is not valid UTF-8") from error
    except OSError as error:
        raise errors.NotFound(f"Could not read {path}: {error}") from error

    return decode_pointer(text)


def _same_directory(left: Path, right: Path) -> bool:
    return left.resolve() == right.resolve()


def _walk(ctx: Context, scope: Scope, force: bool) -> Location:
    home = ctx.roots.home
    directory = ctx.start_dir(scope)

    if not directory.is_dir():
        raise errors.DirectoryNotFound(f"Directory {directory} does not exist")

    directory = directory.resolve()
    file = None

    while True:
        candidate = directory / POINTER_FILENAME

        if candidate.is_file():
            file = candidate
            break

        parent = directory.parent

        if parent == directory:
            if scope is Scope.GLOBAL and not force:
                directory = home
                candidate = home / POINTER_FILENAME
                file = candidate if candidate.is_file() else None

            break

        directory = parent

    ctx.sink.record("locator.walk", scope=scope.value, force=force, stopped=directory, found=bool(file))

    if file is not None:
        ctx.sink.record("locator.found", path=file)

    return Location(
        directory=directory,
        file=file,
        stopped_at_home=_same_directory(directory, home),
    )


def find_pointer_file(ctx: Context, scope: Scope, force: bool) -> Outcome[Location]:
    return capture(_walk, ctx, scope, force)


def choose_write_target(
    ctx: Context, location: Optional[Location], scope: Scope, force: bool
) -> WriteTarget:
    found = location is not None and location.found
    stopped_at_home = location is not None and location.stopped_at_home
    mismatched = force and (
        (scope is Scope.GLOBAL and not stopped_at_home)
        or (scope is Scope.LOCAL and stopped_at_home)
    )

    if not found or mismatched:
        return WriteTarget(path=ctx.start_dir(scope) / POINTER_FILENAME, is_new_file=True)

    return WriteTarget(path=location.file, is_new_file=False)


def _write(path: Path, version: str) -> None:
    try:
        with path.open("w", encoding="utf-8") as fh:
            fh.write(encode_pointer(version))
    except OSError as error:
        raise errors.WriteError(path, error.strerror or str(error)) from error


def write_version(ctx: Context, version: str, scope: Scope, force: bool) -> Outcome[Written]:
    located = find_pointer_file(ctx, scope, force)
    target = choose_write_target(ctx, located.value, scope, force)

    ctx.sink.record("writer.target", path=target.path, new_file=target.is_new_file)

    written = capture(_write, target.path, version)

    if not written.ok:
        return Outcome.failure(written.error, reasons=located.reasons + written.reasons)

    return Outcome.success(
        Written(version=version, path=target.path, is_new_file=target.is_new_file),
        reasons=located.reasons,
    )
