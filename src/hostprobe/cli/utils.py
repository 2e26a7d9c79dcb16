from typing import List

from hostprobe.hwosinfo.models import SystemInfo


def format_bytes(num_bytes: int, decimals: int = 2) -> str:
    """Human readable size using binary multiples, e.g. 17179869184 -> '16 GB'."""
    if num_bytes <= 0:
        return "0 B"
    units = ["B", "KB", "MB", "GB", "TB", "PB"]
    value = float(num_bytes)
    index = 0
    while value >= 1024 and index < len(units) - 1:
        value /= 1024
        index += 1
    return f"{round(value, decimals):g} {units[index]}"


def render_system_info(info: SystemInfo) -> str:
    """Plain text report laid out like Windows' systeminfo."""
    width = 27
    indent = " " * width
    rows = [
        ("OS Name", info.os_name),
        ("OS Version", info.os_version),
        ("OS Build", info.os_build),
        ("OS Manufacturer", info.os_manufacturer),
        ("System Type", info.os_architecture),
        ("System Manufacturer", info.system_manufacturer),
        ("System Model", info.system_model),
        ("BIOS Manufacturer", info.bios_manufacturer),
        ("BIOS Version", info.bios_version),
        ("Total Physical Memory", format_bytes(info.total_memory_bytes)),
        ("Time Zone", info.time_zone),
    ]
    lines: List[str] = [f"{label + ':':<{width}}{value}" for label, value in rows]

    lines.append(f"{'Hotfix(s):':<{width}}{len(info.hotfixes)} Hotfix(s) Installed.")
    for i, hotfix in enumerate(info.hotfixes, start=1):
        lines.append(f"{indent}[{i:02d}]: {hotfix}")

    lines.append(f"{'Network Card(s):':<{width}}{len(info.network_adapters)} NIC(s) Installed.")
    for i, adapter in enumerate(info.network_adapters, start=1):
        lines.append(f"{indent}[{i:02d}]: {adapter.name}")
        lines.append(f"{indent}      Description: {adapter.description}")
        lines.append(f"{indent}      MAC Address: {adapter.mac_address}")
        lines.append(f"{indent}      Status:      {adapter.status}")

    return "\n".join(lines)
