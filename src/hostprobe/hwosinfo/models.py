from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

MAX_UINT64 = 2 ** 64


class _Snapshot(BaseModel):
    # camelCase on the wire, snake_case in Python; never mutated once built
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class NetworkAdapter(_Snapshot):
    name: str = ""
    description: str = ""
    mac_address: str = ""
    status: str = ""


class SystemInfo(_Snapshot):
    os_name: str = ""
    os_version: str = ""
    os_build: str = ""
    os_manufacturer: str = ""
    os_architecture: str = ""
    system_manufacturer: str = ""
    system_model: str = ""
    bios_manufacturer: str = ""
    bios_version: str = ""
    total_memory_bytes: int = Field(default=0, ge=0, lt=MAX_UINT64)
    time_zone: str = ""
    hotfixes: Tuple[str, ...] = ()
    network_adapters: Tuple[NetworkAdapter, ...] = ()
