import logging
import platform
from typing import List, Optional

from hostprobe.exceptions import CommandError
from hostprobe.runner import run_command

logger = logging.getLogger(__name__)


def _first_line(program: str, args: List[str]) -> Optional[str]:
    """Run a best-effort command and return its first output line, or None."""
    try:
        output = run_command(program, args)
    except CommandError as e:
        logger.warning(f"{e}")
        return None

    if not output.success:
        logger.warning(f"{program} exited with status {output.returncode}: {output.stderr_text.strip()}")
        return None

    lines = output.stdout_text.strip().splitlines()
    return lines[0].strip() if lines else None


def get_time_zone() -> Optional[str]:
    """Current time zone abbreviation, e.g. 'CET'."""
    return _first_line("date", ["+%Z"])


def get_kernel_release() -> Optional[str]:
    return _first_line("uname", ["-r"])


def get_machine() -> Optional[str]:
    return platform.machine() or None
