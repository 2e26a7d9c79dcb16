import json
import logging
from typing import Any, Dict, List

from hostprobe.config.settings import config
from hostprobe.exceptions import CollectionError, CommandError
from hostprobe.hwosinfo.base import PlatformAdapter
from hostprobe.hwosinfo.defaults import (
    WINDOWS_ADAPTER_DEFAULTS,
    WINDOWS_DEFAULTS,
    build_network_adapter,
    build_system_info,
    to_count,
    to_text,
)
from hostprobe.hwosinfo.models import NetworkAdapter, SystemInfo
from hostprobe.runner import run_command

logger = logging.getLogger(__name__)

UTF8_OUTPUT = "[Console]::OutputEncoding = [System.Text.Encoding]::UTF8; "

COMPUTER_INFO_SCRIPT = UTF8_OUTPUT + (
    "Get-ComputerInfo | Select-Object OsName, OsVersion, OsBuildNumber, OsManufacturer, "
    "OsArchitecture, CsManufacturer, CsModel, BiosManufacturer, BiosVersion, TimeZone, "
    "TotalPhysicalMemory | ConvertTo-Json -Compress"
)
HOTFIX_SCRIPT = UTF8_OUTPUT + "Get-HotFix | Select-Object -ExpandProperty HotFixID | ConvertTo-Json -Compress"
NET_ADAPTER_SCRIPT = UTF8_OUTPUT + (
    "Get-NetAdapter | Select-Object Name, InterfaceDescription, MacAddress, Status | ConvertTo-Json -Compress"
)

# Get-ComputerInfo property -> SystemInfo field
COMPUTER_INFO_FIELDS = {
    "OsName": "os_name",
    "OsVersion": "os_version",
    "OsBuildNumber": "os_build",
    "OsManufacturer": "os_manufacturer",
    "OsArchitecture": "os_architecture",
    "CsManufacturer": "system_manufacturer",
    "CsModel": "system_model",
    "BiosManufacturer": "bios_manufacturer",
    "BiosVersion": "bios_version",
    "TimeZone": "time_zone",
}

NET_ADAPTER_FIELDS = {
    "Name": "name",
    "InterfaceDescription": "description",
    "MacAddress": "mac_address",
    "Status": "status",
}


def decode_collection(payload: str) -> List[Any]:
    """
    Decode ConvertTo-Json output for a pipeline that may yield many objects.

    PowerShell collapses a single-item pipeline into a bare value rather than
    a one-element array, so `"KB5031356"` and `["KB5031356"]` describe the
    same result. The payload is decoded as a generic value first, then a
    payload that does not open with an array marker is wrapped. An empty
    payload means the pipeline produced nothing.
    """
    text = payload.strip().lstrip("\ufeff")
    if not text:
        return []
    value = json.loads(text)
    if text.startswith("["):
        return list(value)
    if value is None:
        return []
    return [value]


def _status_text(value: Any) -> Any:
    # Windows PowerShell 5.1 can serialise the Status enum as an object
    if isinstance(value, dict):
        return value.get("Value", value.get("value"))
    return value


class WindowsAdapter(PlatformAdapter):
    name = "windows"

    def _powershell(self, script: str):
        return run_command(
            config.powershell,
            ["-NoProfile", "-NonInteractive", "-Command", script],
            no_window=True,
        )

    def get_computer_info(self) -> Dict[str, Any]:
        """Critical query: any failure aborts the collection."""
        try:
            output = self._powershell(COMPUTER_INFO_SCRIPT)
        except CommandError as e:
            raise CollectionError(f"Failed to execute PowerShell command: {e}") from e

        if not output.success:
            raise CollectionError(f"PowerShell command failed: {output.stderr_text.strip()}")

        json_str = output.stdout_text
        try:
            data = json.loads(json_str.strip().lstrip("\ufeff"))
        except ValueError as e:
            raise CollectionError(f"Failed to parse JSON: {e} | Input: {json_str}") from e
        if not isinstance(data, dict):
            raise CollectionError(f"Failed to parse JSON: expected an object | Input: {json_str}")
        return data

    def _best_effort_collection(self, script: str, what: str) -> List[Any]:
        try:
            output = self._powershell(script)
            if not output.success:
                logger.warning(f"Could not list {what}: {output.stderr_text.strip()}")
                return []
            return decode_collection(output.stdout_text)
        except (CommandError, ValueError) as e:
            logger.warning(f"Could not list {what}: {e}")
            return []

    def get_hotfixes(self) -> List[str]:
        hotfixes = []
        for item in self._best_effort_collection(HOTFIX_SCRIPT, "hotfixes"):
            hotfix_id = to_text(item)
            if hotfix_id:
                hotfixes.append(hotfix_id)
        return hotfixes

    def get_network_adapters(self) -> List[NetworkAdapter]:
        adapters = []
        for item in self._best_effort_collection(NET_ADAPTER_SCRIPT, "network adapters"):
            if not isinstance(item, dict):
                logger.debug(f"Skipping unexpected network adapter entry: {item!r}")
                continue
            values = {field: to_text(item.get(key)) for key, field in NET_ADAPTER_FIELDS.items()}
            values["status"] = to_text(_status_text(item.get("Status")))
            adapters.append(build_network_adapter(values, WINDOWS_ADAPTER_DEFAULTS))
        return adapters

    def collect(self) -> SystemInfo:
        info = self.get_computer_info()

        values = {field: to_text(info.get(key)) for key, field in COMPUTER_INFO_FIELDS.items()}
        values["total_memory_bytes"] = to_count(info.get("TotalPhysicalMemory"))

        return build_system_info(
            values,
            WINDOWS_DEFAULTS,
            hotfixes=self.get_hotfixes(),
            network_adapters=self.get_network_adapters(),
        )
