import json
import logging
import re
from typing import Any, Dict, List

from hostprobe.exceptions import CollectionError, CommandError
from hostprobe.hwosinfo import posix
from hostprobe.hwosinfo.base import PlatformAdapter
from hostprobe.hwosinfo.defaults import (
    MACOS_ADAPTER_DEFAULTS,
    MACOS_DEFAULTS,
    build_network_adapter,
    build_system_info,
    fits_uint64,
    to_text,
)
from hostprobe.hwosinfo.models import NetworkAdapter, SystemInfo
from hostprobe.runner import run_command

logger = logging.getLogger(__name__)

PROFILER_DATA_TYPES = ["SPSoftwareDataType", "SPHardwareDataType", "SPNetworkDataType"]

MEMORY_UNITS = {
    "KB": 1024,
    "MB": 1024 ** 2,
    "GB": 1024 ** 3,
    "TB": 1024 ** 4,
}

# "macOS 14.2.1 (23C71)"
OS_VERSION_PATTERN = re.compile(r"^(?P<name>.*?)\s+(?P<version>\d[\w.]*)(?:\s*\((?P<build>[^)]+)\))?$")


def parse_memory_size(text: Any) -> int:
    """
    Convert system_profiler's physical_memory ("16 GB") to bytes.
    Units are binary multiples. Anything unparseable, or too large for an
    unsigned 64-bit count, gives 0.
    """
    parts = str(text or "").split()
    if len(parts) < 2:
        return 0
    try:
        number = int(parts[0])
    except ValueError:
        return 0
    multiplier = MEMORY_UNITS.get(parts[1].upper())
    if multiplier is None:
        return 0
    size = number * multiplier
    return size if fits_uint64(size) else 0


def split_os_version(text: Any) -> Dict[str, Any]:
    """Split 'macOS 14.2.1 (23C71)' into name, version and build."""
    value = to_text(text)
    if value is None:
        return {"os_name": None, "os_version": None, "os_build": None}
    match = OS_VERSION_PATTERN.match(value)
    if not match:
        return {"os_name": value, "os_version": None, "os_build": None}
    return {
        "os_name": match.group("name") or None,
        "os_version": match.group("version"),
        "os_build": to_text(match.group("build")),
    }


def _first_item(data: Any, category: str) -> Dict[str, Any]:
    items = data.get(category) if isinstance(data, dict) else None
    if isinstance(items, list) and items and isinstance(items[0], dict):
        return items[0]
    return {}


class MacOSAdapter(PlatformAdapter):
    name = "macos"

    def get_profile(self) -> Dict[str, Any]:
        """Critical query: system_profiler JSON for software, hardware and network."""
        try:
            output = run_command("system_profiler", PROFILER_DATA_TYPES + ["-json"])
        except CommandError as e:
            raise CollectionError(f"Failed to execute system_profiler: {e}") from e

        if not output.success:
            raise CollectionError(f"system_profiler failed: {output.stderr_text.strip()}")

        json_str = output.stdout_text
        try:
            data = json.loads(json_str)
        except ValueError as e:
            raise CollectionError(f"Failed to parse JSON: {e} | Input: {json_str}") from e
        if not isinstance(data, dict):
            raise CollectionError(f"Failed to parse JSON: expected an object | Input: {json_str}")
        return data

    def get_network_adapters(self, profile: Dict[str, Any]) -> List[NetworkAdapter]:
        entries = profile.get("SPNetworkDataType")
        if not isinstance(entries, list):
            return []

        adapters = []
        for entry in entries:
            if not isinstance(entry, dict):
                continue
            ethernet = entry.get("Ethernet")
            mac_address = ethernet.get("MAC Address") if isinstance(ethernet, dict) else None
            values = {
                "name": to_text(entry.get("_name")),
                "description": to_text(entry.get("interface")),
                "mac_address": to_text(mac_address),
            }
            adapters.append(build_network_adapter(values, MACOS_ADAPTER_DEFAULTS))
        return adapters

    def collect(self) -> SystemInfo:
        profile = self.get_profile()
        software = _first_item(profile, "SPSoftwareDataType")
        hardware = _first_item(profile, "SPHardwareDataType")

        values = split_os_version(software.get("os_version"))
        values.update({
            "os_architecture": posix.get_machine(),
            "system_model": to_text(hardware.get("machine_model")) or to_text(hardware.get("machine_name")),
            "bios_version": to_text(hardware.get("boot_rom_version")),
            "total_memory_bytes": parse_memory_size(hardware.get("physical_memory")),
            "time_zone": posix.get_time_zone(),
        })

        return build_system_info(
            values,
            MACOS_DEFAULTS,
            network_adapters=self.get_network_adapters(profile),
        )
