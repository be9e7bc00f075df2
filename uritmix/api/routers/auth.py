from __future__ import annotations

from fastapi import APIRouter, Depends

from uritmix.api.deps import (
    get_login_local_use_case,
    get_logout_session_use_case,
    get_refresh_session_use_case,
)
from uritmix.api.errors import to_http_exception
from uritmix.api.schemas.auth import (
    LoggedPersonResponse,
    LoginRequest,
    LogoutRequest,
    LogoutResponse,
    RefreshRequest,
)
from uritmix.application.dto.auth import (
    LoggedPersonOutput,
    LoginLocalInput,
    LogoutInput,
    RefreshSessionInput,
)
from uritmix.application.use_cases.login_local import LoginLocalUseCase
from uritmix.application.use_cases.logout_session import LogoutSessionUseCase
from uritmix.application.use_cases.refresh_session import RefreshSessionUseCase
from uritmix.domain.result import Failure


router = APIRouter()


def _logged_person_response(output: LoggedPersonOutput) -> LoggedPersonResponse:
    return LoggedPersonResponse(
        first_name=output.first_name,
        last_name=output.last_name,
        role=output.role,
        email=output.email,
        access_token=output.access_token,
        refresh_token=output.refresh_token,
    )


@router.post("/v1/auth/login", response_model=LoggedPersonResponse)
async def login_local(
    req: LoginRequest,
    use_case: LoginLocalUseCase = Depends(get_login_local_use_case),
):
    result = await use_case.execute(LoginLocalInput(email=req.email, password=req.password))
    if isinstance(result, Failure):
        raise to_http_exception(result.error)
    return _logged_person_response(result.value)


@router.post("/v1/auth/refresh", response_model=LoggedPersonResponse)
async def refresh_auth(
    req: RefreshRequest,
    use_case: RefreshSessionUseCase = Depends(get_refresh_session_use_case),
):
    result = await use_case.execute(RefreshSessionInput(refresh_token=req.refresh_token))
    if isinstance(result, Failure):
        raise to_http_exception(result.error)
    return _logged_person_response(result.value)


@router.post("/v1/auth/logout", response_model=LogoutResponse)
async def logout_auth(
    req: LogoutRequest,
    use_case: LogoutSessionUseCase = Depends(get_logout_session_use_case),
):
    await use_case.execute(LogoutInput(refresh_token=req.refresh_token))
    return LogoutResponse(ok=True)
