__all__ = (
    "CoreSwitchError",
    "UnsupportedPlatform",
    "NotFound",
    "DirectoryNotFound",
    "DecodeError",
    "ProcessLaunchError",
    "WriteError",
    "InvalidVersion",
)


class CoreSwitchError(Exception):
    pass


class UnsupportedPlatform(CoreSwitchError):
    pass


class NotFound(CoreSwitchError):
    pass


class DirectoryNotFound(NotFound):
    pass


class DecodeError(CoreSwitchError):
    pass


class ProcessLaunchError(CoreSwitchError):
    pass


class WriteError(CoreSwitchError):
    def __init__(self, path, reason):
        super().__init__(f"Failed to write {path}: {reason}")
        self.path = path
        self.reason = reason


class InvalidVersion(CoreSwitchError):
    pass
