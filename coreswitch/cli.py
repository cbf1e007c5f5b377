import argparse
import os
import sys
from pathlib import Path
from typing import Optional

from coreswitch import _steps, errors, resolver
from coreswitch.context import Scope
from coreswitch.events import LoggingSink
from coreswitch.log import get_logger, setup_logging

__all__ = ("main",)

SUCCESS = 0
FAILURE = 1
USAGE = 2
CANCELLED = 130
LOG_LEVEL_VARIABLE = "CORESWITCH_LOG_LEVEL"
LOG_LEVELS = ("debug", "info", "warning", "error", "critical")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="coreswitch", description="Switch the active .NET SDK via global.json"
    )
    parser.add_argument("version", nargs="?", help='SDK version to switch to, or "latest"')
    parser.add_argument(
        "-g", "--global", dest="use_global", action="store_true", help="Use the global.json in your home directory"
    )
    parser.add_argument(
        "-f",
        "--force",
        action="store_true",
        help="Write global.json exactly at the scope's root instead of the nearest one found",
    )
    parser.add_argument(
        "--log-level",
        type=str.lower,
        default=os.environ.get(LOG_LEVEL_VARIABLE, "warning").lower(),
        help=f"Diagnostic log level: {', '.join(LOG_LEVELS)} (default ${LOG_LEVEL_VARIABLE} or warning)",
    )
    parser.add_argument("--log-file", type=Path, default=None, help="Also write diagnostics as JSON lines here")
    return parser


def _run(parsed: argparse.Namespace) -> int:
    setup_logging(parsed.log_level, parsed.log_file)
    scope = Scope.GLOBAL if parsed.use_global else Scope.LOCAL

    try:
        ctx = _steps.init(sink=LoggingSink(get_logger()))
    except errors.UnsupportedPlatform as error:
        print(error, file=sys.stderr)

        return FAILURE

    overview = _steps.show(ctx, scope=scope, force=parsed.force)

    if not overview.installed.ok:
        print("Could not find any installed sdks.")

        return FAILURE

    versions = overview.installed.value

    for version in versions:
        print(f"v{version}")

    current = overview.current

    if current.ok:
        suffix = " (global)" if current.is_global else ""

        print(f"Selected version: {current.version}{suffix}")
    else:
        print("Could not determine active sdk version.")

        if parsed.version is None:
            return FAILURE

    if parsed.version is None:
        return SUCCESS

    try:
        version = _steps.pick_version(parsed.version, versions)
    except errors.CoreSwitchError as error:
        print(error, file=sys.stderr)

        return USAGE

    pinned = current.ok and current.source == resolver.POINTER_FILE

    if pinned and not parsed.force and current.version == version:
        print(f"Already using {version}.")

        return SUCCESS

    written = _steps.switch(ctx, version, scope=scope, force=parsed.force)

    if not written.ok:
        print(written.error, file=sys.stderr)

        return FAILURE

    print(f"Switched to {written.value.version} ({written.value.path})")

    return SUCCESS


def main(argv: Optional[list[str]] = None) -> int:
    parser = _build_parser()
    parsed = parser.parse_args(sys.argv[1:] if argv is None else argv)

    if parsed.log_level not in LOG_LEVELS:
        parser.error(f"unknown log level '{parsed.log_level}' (choose from {', '.join(LOG_LEVELS)})")

    try:
        return _run(parsed)
    except KeyboardInterrupt:
        print("Cancelling...")

        return CANCELLED
