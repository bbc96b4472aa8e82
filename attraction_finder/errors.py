"""
Error taxonomy for the AI Attraction Finder backend.

Every failure the service can surface to the front end is one of these
exceptions. Each carries:
- error: machine-readable code returned in the HTTP error body
- user_message: human-readable (zh-TW) text the front end displays as-is

An empty parse result is NOT an error: it is a valid outcome reported by the
list endpoint as status="NO_ATTRACTIONS".
"""

from enum import Enum
from typing import Optional


class AttractionFinderError(Exception):
    """Base class for all user-facing service errors."""

    error: str = "attraction_finder_error"
    default_message: str = "發生未知錯誤。"

    def __init__(self, user_message: Optional[str] = None):
        self.user_message = user_message or self.default_message
        super().__init__(self.user_message)


class ConfigurationError(AttractionFinderError):
    """No Gemini credential is configured. Raised before any network call."""

    error = "configuration_error"
    default_message = "未設定 API Key。請確認環境變數 GEMINI_API_KEY 或本地 .env 檔案。"


class GeolocationErrorKind(int, Enum):
    """
    Classified geolocation failures.

    Values 1-3 mirror the browser's GeolocationPositionError codes so a code
    reported by the front end maps directly onto a kind.
    """
    UNSUPPORTED = 0
    PERMISSION_DENIED = 1
    POSITION_UNAVAILABLE = 2
    TIMEOUT = 3


GEOLOCATION_ERROR_MESSAGES = {
    GeolocationErrorKind.UNSUPPORTED: "您的瀏覽器不支援地理位置功能。",
    GeolocationErrorKind.PERMISSION_DENIED: "您已拒絕位置資訊存取權限。請在瀏覽器設定中啟用它。",
    GeolocationErrorKind.POSITION_UNAVAILABLE: "目前無法取得位置資訊。",
    GeolocationErrorKind.TIMEOUT: "取得位置資訊超時。",
}


class GeolocationError(AttractionFinderError):
    """The user's position could not be acquired. Recoverable by the user."""

    error = "geolocation_error"
    default_message = "無法取得您的位置。"

    def __init__(self, kind: GeolocationErrorKind):
        self.kind = kind
        super().__init__(GEOLOCATION_ERROR_MESSAGES[kind])


class BackendErrorKind(str, Enum):
    """Best-effort classification of a Gemini fault."""
    AUTH = "auth"
    FORBIDDEN = "forbidden"
    RATE_LIMIT = "rate_limit"
    NOT_FOUND = "not_found"
    UNKNOWN = "unknown"


class BackendError(AttractionFinderError):
    """
    A network or Gemini-reported fault.

    Attributes:
        cause: The original exception raised by the Gemini client
        classification: Which BackendErrorKind the fault was mapped to
    """

    error = "backend_error"
    classification = BackendErrorKind.UNKNOWN

    def __init__(self, cause: BaseException, user_message: Optional[str] = None):
        self.cause = cause
        super().__init__(user_message)


class AuthError(BackendError):
    error = "backend_auth_error"
    classification = BackendErrorKind.AUTH
    default_message = "API 錯誤: API Key 無效或未設定。"


class ForbiddenError(BackendError):
    error = "backend_forbidden"
    classification = BackendErrorKind.FORBIDDEN
    default_message = "API 錯誤: 存取被拒 (403)。請檢查 API Key 是否正確，或是否有權限使用此模型。"


class RateLimitError(BackendError):
    error = "backend_rate_limited"
    classification = BackendErrorKind.RATE_LIMIT
    default_message = "API 錯誤: 請求過多 (429) 或額度已滿。請稍後再試。"


class NotFoundError(BackendError):
    error = "backend_not_found"
    classification = BackendErrorKind.NOT_FOUND
    default_message = "API 錯誤: 找不到模型 (404)。該模型可能尚未在您的區域開放，或名稱有誤。"


class UnknownBackendError(BackendError):
    """Catch-all for faults no marker matched. Keeps the raw message."""

    error = "backend_error"
    classification = BackendErrorKind.UNKNOWN

    def __init__(self, cause: BaseException, raw_message: str):
        self.raw_message = raw_message
        super().__init__(cause, f"API 錯誤: {raw_message}")


class DetailDecodeError(AttractionFinderError):
    """
    The detail reply was not a JSON object matching the detail schema.

    raw_text is kept for diagnostics (logs); it is not sent to the client.
    """

    error = "detail_decode_error"
    default_message = "無法獲取詳細資訊: AI 回應的格式不正確。"

    def __init__(self, raw_text: str, reason: str):
        self.raw_text = raw_text
        self.reason = reason
        super().__init__()

    def __str__(self) -> str:
        return f"{self.user_message} ({self.reason})"
