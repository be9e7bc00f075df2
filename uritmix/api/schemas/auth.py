from __future__ import annotations

from pydantic import BaseModel, Field

from uritmix.domain.entities.person import AuthRole


class LoginRequest(BaseModel):
    email: str = Field(..., min_length=3, max_length=255)
    password: str = Field(..., min_length=1, max_length=256)


class RefreshRequest(BaseModel):
    refresh_token: str = Field(..., min_length=1)


class LogoutRequest(BaseModel):
    refresh_token: str = Field(..., min_length=1)


class LoggedPersonResponse(BaseModel):
    first_name: str
    last_name: str
    role: AuthRole
    email: str
    access_token: str
    refresh_token: str
    token_type: str = "bearer"


class LogoutResponse(BaseModel):
    ok: bool
