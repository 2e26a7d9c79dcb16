import traceback

from fastapi import APIRouter, HTTPException
from fastapi.logger import logger

from hostprobe.api.dtos import SystemInfoResponse
from hostprobe.exceptions import CollectionError, UnsupportedPlatformError
from hostprobe.hwosinfo.manager import get_system_info

router = APIRouter(prefix="/info", tags=["Info"])


@router.get("/system", response_model=SystemInfoResponse)
def get_system_info_endpoint():
    try:
        return SystemInfoResponse(data=get_system_info())
    except UnsupportedPlatformError as e:
        raise HTTPException(status_code=501, detail=str(e))
    except CollectionError as e:
        logger.error(f"Error collecting system info: {e}")
        raise HTTPException(status_code=500, detail=str(e))
    except Exception as e:
        logger.error(f"Error collecting system info: {e}\n{traceback.format_exc()}")
        raise HTTPException(status_code=500, detail=str(e))
