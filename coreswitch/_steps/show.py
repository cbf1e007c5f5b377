import dataclasses
from typing import Optional

from coreswitch import installed, resolver
from coreswitch.context import Context, Scope
from coreswitch.outcome import Outcome

__all__ = ("Overview", "show")


@dataclasses.dataclass(frozen=True)
class Overview:
    installed: Outcome[list[str]]
    current: Optional[resolver.Resolution] = None


def show(ctx: Context, *, scope: Scope, force: bool) -> Overview:
    versions = installed.list_installed(ctx.roots)

    if not versions.ok:
        return Overview(installed=versions)

    ctx.sink.record("installed.listed", count=len(versions.value))

    return Overview(installed=versions, current=resolver.resolve_current(ctx, scope, force))
