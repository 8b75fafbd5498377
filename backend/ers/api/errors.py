# backend/ers/api/errors.py

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from ers.core.errors import AppError, ErrorKind

logger = logging.getLogger(__name__)

STATUS_BY_KIND = {
    ErrorKind.BAD_REQUEST: status.HTTP_400_BAD_REQUEST,
    ErrorKind.AUTHENTICATION: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.AUTHORIZATION: status.HTTP_403_FORBIDDEN,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.RESOURCE_PERSISTENCE: status.HTTP_409_CONFLICT,
    ErrorKind.STATE_CONFLICT: status.HTTP_409_CONFLICT,
    ErrorKind.INTERNAL: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def status_for(kind: ErrorKind) -> int:
    return STATUS_BY_KIND.get(kind, status.HTTP_500_INTERNAL_SERVER_ERROR)


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    code = status_for(exc.kind)

    if code >= 500:
        logger.error("%s %s -> %s: %s", request.method, request.url.path, code, exc.message)
    else:
        logger.info("%s %s -> %s: %s", request.method, request.url.path, code, exc.message)

    headers = {"WWW-Authenticate": "Bearer"} if exc.kind is ErrorKind.AUTHENTICATION else None
    return JSONResponse(
        status_code=code,
        content={"status": code, "code": exc.kind.value, "message": exc.message},
        headers=headers,
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
