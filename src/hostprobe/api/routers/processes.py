from fastapi import APIRouter, HTTPException
from fastapi.logger import logger

from hostprobe.api.dtos import SuccessResponse
from hostprobe.exceptions import InvalidProcessIdError, ProcessKillError
from hostprobe.process.manager import kill_process

router = APIRouter(prefix="/processes", tags=["Processes"])


@router.delete("/{pid}", response_model=SuccessResponse)
def kill_process_endpoint(pid: int):
    """Forcefully terminate a process (and its children on Windows)."""
    try:
        kill_process(pid)
    except InvalidProcessIdError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except ProcessKillError as e:
        logger.error(f"Error killing process {pid}: {e}")
        raise HTTPException(status_code=500, detail=str(e))
    return SuccessResponse(message=f"Process {pid} terminated")
