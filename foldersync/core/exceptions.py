from typing import Any, Dict, List, Optional
from starlette import status


class AppError(Exception):
    def __init__(
        self,
        message: str,
        *,
        status_code: int = status.HTTP_400_BAD_REQUEST,
        code: str = "bad_request",
        field: Optional[str] = None,
        errors: Optional[List[dict]] = None,  # [{'code':..., 'message':..., 'field':...}]
        details: Optional[Dict[str, Any]] = None,  # Additional details for the error
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.code = code
        self.field = field
        self.errors = errors
        self.details = details


class InvalidInputError(AppError):
    """Rejected request data, e.g. an empty folder name"""

    def __init__(self, message: str, *, code: str = "invalid_input", **kwargs):
        super().__init__(message, status_code=status.HTTP_400_BAD_REQUEST, code=code, **kwargs)


class NotFoundError(AppError):
    """Referenced folder, file or device does not exist for the device"""

    def __init__(self, message: str, *, code: str = "not_found", **kwargs):
        super().__init__(message, status_code=status.HTTP_404_NOT_FOUND, code=code, **kwargs)


class InvalidMoveError(AppError):
    """Move would parent a folder to itself or to one of its descendants"""

    def __init__(self, message: str, *, code: str = "invalid_move", **kwargs):
        super().__init__(message, status_code=status.HTTP_400_BAD_REQUEST, code=code, **kwargs)


class StoreFailureError(AppError):
    """Unclassified persistence failure"""

    def __init__(self, message: str, *, code: str = "store_failure", **kwargs):
        super().__init__(message, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, code=code, **kwargs)
