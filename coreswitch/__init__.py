from coreswitch import errors
from coreswitch.context import Context, PlatformRoots, Scope, resolve_roots
from coreswitch.installed import list_installed
from coreswitch.resolver import Resolution, resolve_current
from coreswitch.shims import find_pointer_file, write_version

__all__ = (
    "errors",
    "Context",
    "PlatformRoots",
    "Scope",
    "resolve_roots",
    "list_installed",
    "Resolution",
    "resolve_current",
    "find_pointer_file",
    "write_version",
)

__version__ = "0.1.0"
