from pathlib import Path
from typing import Mapping, Optional

from coreswitch.context import Context, resolve_roots
from coreswitch.events import EventSink, NullSink

__all__ = ("init",)


def init(
    *,
    cwd: Optional[Path] = None,
    sink: Optional[EventSink] = None,
    system: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
):
    roots = resolve_roots(system=system, environ=environ)

    return Context(roots=roots, cwd=cwd or Path.cwd(), sink=sink or NullSink())
