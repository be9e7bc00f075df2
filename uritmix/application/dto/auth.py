from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from uritmix.domain.entities.person import AuthRole


@dataclass(frozen=True)
class LoginLocalInput:
    email: str
    password: str


@dataclass(frozen=True)
class RefreshSessionInput:
    refresh_token: str


@dataclass(frozen=True)
class LogoutInput:
    refresh_token: str


@dataclass(frozen=True)
class LoggedPersonOutput:
    person_id: int
    first_name: str
    last_name: str
    role: AuthRole
    email: str
    access_token: str
    refresh_token: str


@dataclass(frozen=True)
class AccessTokenPayload:
    person_id: int
    email: str
    role: AuthRole


class RefreshTokenVerdict(str, Enum):
    VALID = "valid"
    INVALID = "invalid"
    EXPIRED = "expired"


@dataclass(frozen=True)
class RefreshTokenResolution:
    verdict: RefreshTokenVerdict
    token_id: int | None
