import asyncio
import logging
import platform
from typing import List, Optional

from hostprobe.exceptions import CommandError, InvalidProcessIdError, ProcessKillError
from hostprobe.runner import run_command

logger = logging.getLogger(__name__)


def get_kill_command(pid: int, system: Optional[str] = None) -> List[str]:
    """Forceful kill command for this platform."""
    system = system or platform.system()
    if system == "Windows":
        # /T takes the whole process tree down with it
        return ["taskkill", "/PID", str(pid), "/T", "/F"]
    return ["kill", "-9", str(pid)]


def kill_process(pid: int, system: Optional[str] = None):
    """
    Forcefully terminate a process.
    Success only means the kill tool exited with status 0; the process is
    not checked afterwards.
    """
    if isinstance(pid, bool) or not isinstance(pid, int) or pid <= 0:
        raise InvalidProcessIdError("invalid pid")

    system = system or platform.system()
    cmd = get_kill_command(pid, system)
    logger.info(f"Killing process {pid}: {' '.join(cmd)}")

    try:
        output = run_command(cmd[0], cmd[1:], no_window=(system == "Windows"))
    except CommandError as e:
        raise ProcessKillError(str(e)) from e

    if not output.success:
        detail = output.stderr_text.strip() or output.stdout_text.strip()
        message = f"{cmd[0]} failed: exit status {output.returncode}"
        if detail:
            message = f"{message}: {detail}"
        raise ProcessKillError(message)


async def kill_process_async(pid: int, system: Optional[str] = None):
    await asyncio.to_thread(kill_process, pid, system)
