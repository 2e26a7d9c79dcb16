import os
from unittest.mock import patch

import pytest

from hostprobe.exceptions import CommandError
from hostprobe.hwosinfo.linux import LinuxAdapter, parse_meminfo_total, parse_os_release
from hostprobe.runner import CommandOutput

OS_RELEASE = '''PRETTY_NAME="Ubuntu 24.04.1 LTS"
NAME="Ubuntu"
VERSION_ID="24.04"
VERSION="24.04.1 LTS (Noble Numbat)"
ID=ubuntu
'''

MEMINFO = """MemTotal:       32594360 kB
MemFree:         1186224 kB
MemAvailable:   20419800 kB
"""


def write(path, content):
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, "w") as f:
        f.write(content)


@pytest.fixture
def fake_host(tmp_path):
    """A minimal /etc/os-release, /proc and /sys tree."""
    write(str(tmp_path / "etc" / "os-release"), OS_RELEASE)
    write(str(tmp_path / "proc" / "meminfo"), MEMINFO)

    dmi = tmp_path / "sys" / "class" / "dmi" / "id"
    write(str(dmi / "sys_vendor"), "Dell Inc.\n")
    write(str(dmi / "product_name"), "XPS 13 9310\n")
    write(str(dmi / "bios_vendor"), "Dell Inc.\n")
    write(str(dmi / "bios_version"), "3.21.0\n")

    net = tmp_path / "sys" / "class" / "net"
    write(str(net / "lo" / "address"), "00:00:00:00:00:00\n")
    write(str(net / "lo" / "operstate"), "unknown\n")
    write(str(net / "wlp0s20f3" / "address"), "f4:26:79:aa:bb:cc\n")
    write(str(net / "wlp0s20f3" / "operstate"), "up\n")
    write(str(net / "enp0s31f6" / "address"), "8c:47:be:01:02:03\n")
    write(str(net / "enp0s31f6" / "operstate"), "down\n")
    return tmp_path


@pytest.fixture
def adapter(fake_host):
    return LinuxAdapter(
        os_release_path=str(fake_host / "etc" / "os-release"),
        proc_root=str(fake_host / "proc"),
        sys_root=str(fake_host / "sys"),
    )


@pytest.fixture(autouse=True)
def posix_commands():
    def run(program, args, no_window=False, timeout=None):
        if program == "uname":
            return CommandOutput(returncode=0, stdout=b"6.8.0-45-generic\n")
        return CommandOutput(returncode=0, stdout=b"UTC\n")

    with patch("hostprobe.hwosinfo.posix.run_command", side_effect=run) as mock_run, \
            patch("hostprobe.hwosinfo.posix.platform.machine", return_value="x86_64"):
        yield mock_run


def test_parse_os_release_strips_quotes_and_comments():
    data = parse_os_release('# comment\nNAME="Fedora Linux"\nVERSION_ID=40\n\nID=\'fedora\'\n')
    assert data == {"NAME": "Fedora Linux", "VERSION_ID": "40", "ID": "fedora"}


def test_parse_meminfo_total():
    assert parse_meminfo_total(MEMINFO) == 32594360 * 1024
    assert parse_meminfo_total("MemFree: 10 kB\n") is None
    assert parse_meminfo_total("MemTotal: 99999999999999999999 kB\n") is None
    assert parse_meminfo_total("MemTotal: -1 kB\n") is None


def test_collect_reads_pseudo_files(adapter):
    info = adapter.collect()

    assert info.os_name == "Ubuntu 24.04.1 LTS"
    assert info.os_version == "24.04"
    assert info.os_build == "6.8.0-45-generic"
    assert info.os_architecture == "x86_64"
    assert info.system_manufacturer == "Dell Inc."
    assert info.system_model == "XPS 13 9310"
    assert info.bios_manufacturer == "Dell Inc."
    assert info.bios_version == "3.21.0"
    assert info.total_memory_bytes == 33376624640
    assert info.time_zone == "UTC"
    assert info.hotfixes == ()


def test_loopback_is_excluded(adapter):
    adapters = adapter.collect().network_adapters

    assert "lo" not in [a.name for a in adapters]
    assert [a.name for a in adapters] == ["enp0s31f6", "wlp0s20f3"]
    assert adapters[1].mac_address == "f4:26:79:aa:bb:cc"
    assert adapters[1].status == "up"


def test_unreadable_bios_vendor_only_affects_that_field(adapter, fake_host):
    os.remove(str(fake_host / "sys" / "class" / "dmi" / "id" / "bios_vendor"))

    info = adapter.collect()

    assert info.bios_manufacturer == "Unknown"
    assert info.bios_version == "3.21.0"
    assert info.system_model == "XPS 13 9310"
    assert info.total_memory_bytes == 33376624640


def test_empty_dmi_value_defaults_to_unknown(adapter, fake_host):
    write(str(fake_host / "sys" / "class" / "dmi" / "id" / "product_name"), "\n")

    assert adapter.collect().system_model == "Unknown"


def test_missing_interface_files_default_to_empty(adapter, fake_host):
    os.remove(str(fake_host / "sys" / "class" / "net" / "enp0s31f6" / "operstate"))

    enp = adapter.collect().network_adapters[0]

    assert enp.status == ""
    assert enp.mac_address == "8c:47:be:01:02:03"


def test_missing_os_release_and_meminfo_keep_defaults(tmp_path):
    adapter = LinuxAdapter(
        os_release_path=str(tmp_path / "missing"),
        proc_root=str(tmp_path / "proc"),
        sys_root=str(tmp_path / "sys"),
    )

    info = adapter.collect()

    assert info.os_name == "Linux"
    assert info.os_version == "Unknown"
    assert info.system_manufacturer == "Unknown"
    assert info.total_memory_bytes == 0
    assert info.network_adapters == ()


def test_command_failures_default_to_unknown(adapter, posix_commands):
    posix_commands.side_effect = CommandError("Failed to execute date: not found")

    info = adapter.collect()

    assert info.time_zone == "Unknown"
    assert info.os_build == "Unknown"
    assert info.os_name == "Ubuntu 24.04.1 LTS"


def test_oversized_memtotal_degrades_to_zero(adapter, fake_host):
    write(str(fake_host / "proc" / "meminfo"), "MemTotal:       99999999999999999999 kB\n")

    info = adapter.collect()

    assert info.total_memory_bytes == 0
    assert info.os_name == "Ubuntu 24.04.1 LTS"
