from typing import Optional

from pydantic import BaseModel

from hostprobe.hwosinfo.models import SystemInfo


class BaseResponse(BaseModel):
    status: str = "success"
    message: Optional[str] = None


class SuccessResponse(BaseResponse):
    pass


class SystemInfoResponse(BaseResponse):
    data: SystemInfo
