"""Host OS and hardware snapshots.

One adapter per platform family gathers raw data (PowerShell on Windows,
system_profiler on macOS, pseudo-files on Linux) and normalises it into
SystemInfo.
"""

from hostprobe.hwosinfo.manager import get_platform_adapter, get_system_info, get_system_info_async
from hostprobe.hwosinfo.models import NetworkAdapter, SystemInfo

__all__ = [
    "get_platform_adapter",
    "get_system_info",
    "get_system_info_async",
    "NetworkAdapter",
    "SystemInfo",
]
