"""Client-facing API errors, rendered as ``{"message": ...}`` bodies."""

from fastapi import Request
from fastapi.responses import JSONResponse


class ApiError(Exception):
    """An error answer with a status code and a message safe to show callers."""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(message)


class InvalidInputError(ApiError):
    def __init__(self, message: str):
        super().__init__(400, message)


class NotFoundError(ApiError):
    def __init__(self, message: str):
        super().__init__(404, message)


class UpstreamFetchError(ApiError):
    def __init__(self, message: str):
        super().__init__(502, message)


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})
