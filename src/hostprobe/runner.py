import logging
import subprocess
import sys
from typing import List, Optional

from pydantic import BaseModel

from hostprobe.config.settings import config
from hostprobe.exceptions import CommandError

logger = logging.getLogger(__name__)

# Windows process creation flag that keeps console programs from opening a window
CREATE_NO_WINDOW = 0x08000000


class CommandOutput(BaseModel):
    returncode: int
    stdout: bytes = b""
    stderr: bytes = b""

    @property
    def success(self) -> bool:
        return self.returncode == 0

    @property
    def stdout_text(self) -> str:
        return self.stdout.decode("utf-8", errors="replace")

    @property
    def stderr_text(self) -> str:
        return self.stderr.decode("utf-8", errors="replace")


def run_command(
    program: str,
    args: List[str],
    no_window: bool = False,
    timeout: Optional[float] = None,
) -> CommandOutput:
    """
    Run an external program and capture its output.

    A non-zero exit status is returned, not raised; callers decide whether
    the query is critical. CommandError is raised when the program cannot
    be spawned or runs past the deadline (the child is killed in that case).
    """
    cmd = [program] + list(args)
    if timeout is None:
        timeout = config.command_timeout

    kwargs = {}
    if no_window and sys.platform == "win32":
        kwargs["creationflags"] = CREATE_NO_WINDOW

    logger.debug(f"Running command: {cmd} (timeout={timeout}s)")
    try:
        result = subprocess.run(cmd, capture_output=True, timeout=timeout, **kwargs)
    except subprocess.TimeoutExpired as e:
        raise CommandError(f"{program} timed out after {e.timeout} seconds") from e
    except OSError as e:
        raise CommandError(f"Failed to execute {program}: {e}") from e

    if result.returncode != 0:
        logger.debug(f"Command {cmd} exited with status {result.returncode}")

    return CommandOutput(
        returncode=result.returncode,
        stdout=result.stdout or b"",
        stderr=result.stderr or b"",
    )
