"""
Schemas for the geolocation options endpoint.
"""

from typing import Dict

from pydantic import BaseModel, Field


class GeolocationOptionsResponse(BaseModel):
    """
    Position options and failure messages for the browser's one-shot
    geolocation request.

    The front end passes the options straight to getCurrentPosition and
    looks up the message for a failure by its error code.
    """
    enable_high_accuracy: bool = Field(..., examples=[True])
    timeout_ms: int = Field(..., examples=[10000])
    maximum_age_ms: int = Field(..., examples=[0])
    error_messages: Dict[int, str] = Field(
        ...,
        description="User-facing message per GeolocationPositionError code (0 = unsupported)",
        examples=[{1: "您已拒絕位置資訊存取權限。請在瀏覽器設定中啟用它。"}]
    )
