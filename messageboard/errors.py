"""
Exception types and the app-level handlers that turn them into responses.
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from loguru import logger


class MessageboardError(Exception):
    """Base class for messageboard errors."""


class DataAccessError(MessageboardError):
    """A query could not be executed (connectivity, bad SQL, constraint...)."""


class UserNotFoundError(MessageboardError):
    def __init__(self, user_id: int):
        super().__init__(f"User {user_id} not found")
        self.user_id = user_id


async def data_access_error_handler(request: Request, exc: DataAccessError):
    # details are logged, never returned to the client
    logger.error(f"{request.method} {request.url.path} failed: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Database error"},
    )


async def user_not_found_handler(request: Request, exc: UserNotFoundError):
    logger.info(f"{request.method} {request.url.path}: user {exc.user_id} not found")
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"detail": "User not found"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DataAccessError, data_access_error_handler)
    app.add_exception_handler(UserNotFoundError, user_not_found_handler)
