from __future__ import annotations

from typing import Protocol

from uritmix.application.dto.auth import AccessTokenPayload, RefreshTokenResolution
from uritmix.domain.entities.person import AuthRole


class TokenPort(Protocol):
    def create_access_token(self, *, person_id: int, email: str, role: AuthRole) -> str:
        ...

    def decode_access_token(self, *, token: str) -> AccessTokenPayload:
        ...

    def create_refresh_token(self, *, email: str, token_id: int) -> str:
        ...

    def resolve_refresh_token(self, *, token: str) -> RefreshTokenResolution:
        ...
