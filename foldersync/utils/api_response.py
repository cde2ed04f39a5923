from typing import Any, Dict, Optional

from starlette.responses import JSONResponse, Response
from starlette import status

from foldersync.schemas.response import ApiResponse


def ok(
    data: Any = None,
    message: Optional[str] = None,
    status_code: int = status.HTTP_200_OK,
    headers: Optional[Dict[str, str]] = None,
):
    body = ApiResponse[Any](success=True, message=message, data=data).model_dump(mode="json", exclude_none=True)
    return JSONResponse(content=body, status_code=status_code, headers=headers)


def created(
    data: Any = None,
    message: str = "Created",
    headers: Optional[Dict[str, str]] = None,
):
    body = ApiResponse[Any](success=True, message=message, data=data).model_dump(mode="json", exclude_none=True)
    return JSONResponse(content=body, status_code=status.HTTP_201_CREATED, headers=headers)


def no_content() -> Response:
    return Response(status_code=status.HTTP_204_NO_CONTENT)
