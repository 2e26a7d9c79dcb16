import logging
import os
from typing import Dict, List, Optional

from hostprobe.config.settings import config
from hostprobe.hwosinfo import posix
from hostprobe.hwosinfo.base import PlatformAdapter
from hostprobe.hwosinfo.defaults import (
    LINUX_ADAPTER_DEFAULTS,
    LINUX_DEFAULTS,
    build_network_adapter,
    build_system_info,
    fits_uint64,
)
from hostprobe.hwosinfo.models import NetworkAdapter, SystemInfo

logger = logging.getLogger(__name__)

LOOPBACK_INTERFACE = "lo"

# /sys/class/dmi/id entry -> SystemInfo field
DMI_FIELDS = {
    "sys_vendor": "system_manufacturer",
    "product_name": "system_model",
    "bios_vendor": "bios_manufacturer",
    "bios_version": "bios_version",
}


def parse_os_release(content: str) -> Dict[str, str]:
    """Parse KEY="value" lines of an os-release file."""
    data = {}
    for line in content.splitlines():
        line = line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        value = value.strip()
        if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
            value = value[1:-1]
        data[key.strip()] = value
    return data


def parse_meminfo_total(content: str) -> Optional[int]:
    """Return MemTotal from /proc/meminfo content in bytes."""
    for line in content.splitlines():
        if line.startswith("MemTotal:"):
            parts = line.split()
            if len(parts) < 2:
                return None
            try:
                size = int(parts[1]) * 1024
            except ValueError:
                return None
            return size if fits_uint64(size) else None
    return None


class LinuxAdapter(PlatformAdapter):
    """
    Reads the os-release file and the /proc and /sys pseudo-files directly.
    Every field is sourced independently; a missing or unreadable file only
    leaves its own field at the default.
    """
    name = "linux"

    def __init__(self, os_release_path: str = None, proc_root: str = None, sys_root: str = None):
        self.os_release_path = os_release_path or config.os_release_path
        self.proc_root = proc_root or config.proc_root
        self.sys_root = sys_root or config.sys_root

    def _read(self, path: str) -> Optional[str]:
        try:
            with open(path, "r", errors="replace") as f:
                return f.read()
        except OSError as e:
            logger.debug(f"Could not read {path}: {e}")
            return None

    def _read_value(self, path: str) -> Optional[str]:
        content = self._read(path)
        if content is None:
            return None
        return content.strip() or None

    def get_os_release(self) -> Dict[str, Optional[str]]:
        content = self._read(self.os_release_path)
        if content is None:
            logger.warning(f"Could not read {self.os_release_path}")
            return {"os_name": None, "os_version": None}
        data = parse_os_release(content)
        return {
            "os_name": data.get("PRETTY_NAME") or data.get("NAME") or None,
            "os_version": data.get("VERSION_ID") or None,
        }

    def get_dmi_info(self) -> Dict[str, Optional[str]]:
        dmi_path = os.path.join(self.sys_root, "class", "dmi", "id")
        return {
            field: self._read_value(os.path.join(dmi_path, entry))
            for entry, field in DMI_FIELDS.items()
        }

    def get_total_memory(self) -> Optional[int]:
        content = self._read(os.path.join(self.proc_root, "meminfo"))
        if content is None:
            return None
        return parse_meminfo_total(content)

    def get_network_adapters(self) -> List[NetworkAdapter]:
        net_path = os.path.join(self.sys_root, "class", "net")
        try:
            interfaces = sorted(os.listdir(net_path))
        except OSError as e:
            logger.warning(f"Could not list network interfaces in {net_path}: {e}")
            return []

        adapters = []
        for iface in interfaces:
            if iface == LOOPBACK_INTERFACE:
                continue
            iface_path = os.path.join(net_path, iface)
            values = {
                "name": iface,
                "description": iface,
                "mac_address": self._read_value(os.path.join(iface_path, "address")),
                "status": self._read_value(os.path.join(iface_path, "operstate")),
            }
            adapters.append(build_network_adapter(values, LINUX_ADAPTER_DEFAULTS))
        return adapters

    def collect(self) -> SystemInfo:
        values = self.get_os_release()
        values.update(self.get_dmi_info())
        values.update({
            "os_build": posix.get_kernel_release(),
            "os_architecture": posix.get_machine(),
            "total_memory_bytes": self.get_total_memory(),
            "time_zone": posix.get_time_zone(),
        })

        return build_system_info(
            values,
            LINUX_DEFAULTS,
            network_adapters=self.get_network_adapters(),
        )
