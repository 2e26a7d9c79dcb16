"""
Default-fill step shared by all platform adapters.

Adapters decode their raw sources into plain dicts keyed by SystemInfo /
NetworkAdapter field names, with None for anything they could not collect.
The tables below say what each platform reports for such a field, so no
snapshot ever carries a missing value.
"""
from typing import Any, Dict, Iterable, Optional

from hostprobe.hwosinfo.models import MAX_UINT64, NetworkAdapter, SystemInfo

UNKNOWN = "Unknown"
APPLE = "Apple Inc."

TEXT_FIELDS = (
    "os_name",
    "os_version",
    "os_build",
    "os_manufacturer",
    "os_architecture",
    "system_manufacturer",
    "system_model",
    "bios_manufacturer",
    "bios_version",
    "time_zone",
)
ADAPTER_FIELDS = ("name", "description", "mac_address", "status")

WINDOWS_DEFAULTS: Dict[str, Any] = {**dict.fromkeys(TEXT_FIELDS, ""), "total_memory_bytes": 0}

MACOS_DEFAULTS: Dict[str, Any] = {
    **dict.fromkeys(TEXT_FIELDS, UNKNOWN),
    # system_profiler has no manufacturer fields
    "os_manufacturer": APPLE,
    "system_manufacturer": APPLE,
    "bios_manufacturer": APPLE,
    "total_memory_bytes": 0,
}

LINUX_DEFAULTS: Dict[str, Any] = {
    **dict.fromkeys(TEXT_FIELDS, UNKNOWN),
    "os_name": "Linux",
    "total_memory_bytes": 0,
}

WINDOWS_ADAPTER_DEFAULTS = dict.fromkeys(ADAPTER_FIELDS, "")
# system_profiler reports no link state, status is always the placeholder
MACOS_ADAPTER_DEFAULTS = dict.fromkeys(ADAPTER_FIELDS, UNKNOWN)
LINUX_ADAPTER_DEFAULTS = dict.fromkeys(ADAPTER_FIELDS, "")


def to_text(value: Any) -> Optional[str]:
    """Coerce a decoded leaf to a stripped string. None or blank gives None."""
    if value is None:
        return None
    if isinstance(value, (list, tuple)):
        value = ", ".join(str(v) for v in value if v is not None)
    elif not isinstance(value, str):
        value = str(value)
    value = value.strip()
    return value or None


def fits_uint64(number: int) -> bool:
    return 0 <= number < MAX_UINT64


def to_count(value: Any) -> Optional[int]:
    """Coerce a decoded leaf to an int that fits an unsigned 64-bit field, or None."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = int(value)
    except (TypeError, ValueError, OverflowError):
        return None
    return number if fits_uint64(number) else None


def fill_defaults(values: Dict[str, Any], defaults: Dict[str, Any]) -> Dict[str, Any]:
    filled = dict(defaults)
    for key, value in values.items():
        if key not in defaults:
            raise KeyError(f"No default declared for field '{key}'")
        if value is not None:
            filled[key] = value
    return filled


def build_network_adapter(values: Dict[str, Any], defaults: Dict[str, Any]) -> NetworkAdapter:
    return NetworkAdapter(**fill_defaults(values, defaults))


def build_system_info(
    values: Dict[str, Any],
    defaults: Dict[str, Any],
    hotfixes: Iterable[str] = (),
    network_adapters: Iterable[NetworkAdapter] = (),
) -> SystemInfo:
    return SystemInfo(
        **fill_defaults(values, defaults),
        hotfixes=tuple(hotfixes),
        network_adapters=tuple(network_adapters),
    )
