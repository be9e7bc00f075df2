from __future__ import annotations

from fastapi import HTTPException, Request
from fastapi.responses import JSONResponse

from uritmix.domain.errors import AppError, ErrorKind
from uritmix.domain.exceptions import DomainError


ERROR_STATUS_CODES: dict[ErrorKind, int] = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.POLICY_VIOLATION: 422,
    ErrorKind.TOKEN_INVALID: 401,
    ErrorKind.TOKEN_REVOKED: 401,
    ErrorKind.INVALID_CREDENTIALS: 401,
    ErrorKind.ACCOUNT_BLOCKED: 403,
    ErrorKind.ACCOUNT_NOT_ACTIVATED: 403,
    ErrorKind.INVALID_INPUT: 400,
}


def to_http_exception(error: AppError) -> HTTPException:
    return HTTPException(
        status_code=ERROR_STATUS_CODES.get(error.kind, 400),
        detail={"code": error.code.value, "message": error.message},
    )


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    return JSONResponse(
        status_code=ERROR_STATUS_CODES[ErrorKind.INVALID_INPUT],
        content={"detail": {"code": ErrorKind.INVALID_INPUT.value, "message": str(exc)}},
    )
