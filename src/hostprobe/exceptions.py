class HostProbeError(Exception):
    pass


class CommandError(HostProbeError):
    """An external command could not be spawned or did not finish in time."""


class CollectionError(HostProbeError):
    """The critical query of a platform adapter failed."""


class UnsupportedPlatformError(HostProbeError):
    pass


class ProcessKillError(HostProbeError):
    pass


class InvalidProcessIdError(ProcessKillError, ValueError):
    pass


class ConfigurationError(HostProbeError, ValueError):
    pass
