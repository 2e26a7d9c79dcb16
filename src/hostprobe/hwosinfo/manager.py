import asyncio
import logging
import platform
from typing import Optional

from hostprobe.exceptions import UnsupportedPlatformError
from hostprobe.hwosinfo.base import PlatformAdapter
from hostprobe.hwosinfo.linux import LinuxAdapter
from hostprobe.hwosinfo.macos import MacOSAdapter
from hostprobe.hwosinfo.models import SystemInfo
from hostprobe.hwosinfo.windows import WindowsAdapter

logger = logging.getLogger(__name__)

CURRENT_PLATFORM = platform.system()

NOT_IMPLEMENTED_MESSAGE = "Not implemented for this OS yet"


def get_platform_adapter(system: Optional[str] = None) -> PlatformAdapter:
    system = system or CURRENT_PLATFORM
    if system == "Windows":
        return WindowsAdapter()
    elif system == "Darwin":
        return MacOSAdapter()
    elif system == "Linux":
        return LinuxAdapter()
    else:
        raise UnsupportedPlatformError(NOT_IMPLEMENTED_MESSAGE)


def get_system_info(system: Optional[str] = None) -> SystemInfo:
    """Take a snapshot of this host with the adapter for its platform."""
    adapter = get_platform_adapter(system)
    logger.info(f"Collecting system information with the {adapter.name} adapter")
    return adapter.collect()


async def get_system_info_async(system: Optional[str] = None) -> SystemInfo:
    return await asyncio.to_thread(get_system_info, system)
