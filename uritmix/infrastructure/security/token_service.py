from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Callable

import jwt

from uritmix.application.dto.auth import (
    AccessTokenPayload,
    RefreshTokenResolution,
    RefreshTokenVerdict,
)
from uritmix.application.ports.token_port import TokenPort
from uritmix.domain.entities.person import AuthRole


ALGORITHM = "HS256"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class JwtTokenService(TokenPort):
    def __init__(
        self,
        *,
        jwt_secret: str,
        access_ttl_minutes: int,
        refresh_ttl_days: int,
        clock: Callable[[], datetime] = utcnow,
    ):
        self._jwt_secret = jwt_secret
        self._access_ttl_minutes = access_ttl_minutes
        self._refresh_ttl_days = refresh_ttl_days
        self._clock = clock

    def create_access_token(self, *, person_id: int, email: str, role: AuthRole) -> str:
        now = self._clock()
        exp = now + timedelta(minutes=self._access_ttl_minutes)
        payload = {
            "sub": str(person_id),
            "email": email,
            "role": role.value,
            "type": "access",
            "iat": int(now.timestamp()),
            "exp": int(exp.timestamp()),
        }
        return jwt.encode(payload, self._jwt_secret, algorithm=ALGORITHM)

    def decode_access_token(self, *, token: str) -> AccessTokenPayload:
        try:
            payload = jwt.decode(token, self._jwt_secret, algorithms=[ALGORITHM])
        except jwt.PyJWTError as exc:
            raise ValueError("Invalid access token.") from exc

        if payload.get("type") != "access":
            raise ValueError("Invalid token type.")

        try:
            person_id = int(payload.get("sub"))
            role = AuthRole(payload.get("role"))
        except (TypeError, ValueError) as exc:
            raise ValueError("Invalid token subject.") from exc

        email = payload.get("email")
        if not email or not isinstance(email, str):
            raise ValueError("Invalid token subject.")

        return AccessTokenPayload(person_id=person_id, email=email, role=role)

    def create_refresh_token(self, *, email: str, token_id: int) -> str:
        now = self._clock()
        exp = now + timedelta(days=self._refresh_ttl_days)
        payload = {
            "sub": email,
            "jti": str(token_id),
            "type": "refresh",
            "iat": int(now.timestamp()),
            "exp": int(exp.timestamp()),
        }
        return jwt.encode(payload, self._jwt_secret, algorithm=ALGORITHM)

    def resolve_refresh_token(self, *, token: str) -> RefreshTokenResolution:
        try:
            payload = jwt.decode(token, self._jwt_secret, algorithms=[ALGORITHM])
        except jwt.ExpiredSignatureError:
            return RefreshTokenResolution(verdict=RefreshTokenVerdict.EXPIRED, token_id=None)
        except jwt.PyJWTError:
            return RefreshTokenResolution(verdict=RefreshTokenVerdict.INVALID, token_id=None)

        if payload.get("type") != "refresh" or not payload.get("sub"):
            return RefreshTokenResolution(verdict=RefreshTokenVerdict.INVALID, token_id=None)

        try:
            token_id = int(payload.get("jti"))
        except (TypeError, ValueError):
            return RefreshTokenResolution(verdict=RefreshTokenVerdict.INVALID, token_id=None)

        return RefreshTokenResolution(verdict=RefreshTokenVerdict.VALID, token_id=token_id)
