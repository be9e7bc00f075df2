from __future__ import annotations

from functools import lru_cache

from fastapi import Depends, HTTPException

from uritmix.application.dto.auth import AccessTokenPayload
from uritmix.application.use_cases.login_local import LoginLocalUseCase
from uritmix.application.use_cases.logout_session import LogoutSessionUseCase
from uritmix.application.use_cases.refresh_session import RefreshSessionUseCase
from uritmix.application.use_cases.sale_abonnement import SaleAbonnementUseCase
from uritmix.core.auth import require_jwt
from uritmix.domain.entities.person import AuthRole
from uritmix.infrastructure.db.engine import get_engine
from uritmix.infrastructure.db.repositories.abonnement_repository import (
    SqlAbonnementRepository,
    SqlSoldAbonnementRepository,
)
from uritmix.infrastructure.db.repositories.person_repository import SqlPersonRepository
from uritmix.infrastructure.db.repositories.refresh_token_repository import SqlRefreshTokenRepository
from uritmix.infrastructure.security.password_hasher import PasswordHasher
from uritmix.infrastructure.security.token_service import JwtTokenService
from uritmix.shared.config import get_settings


def _get_db_engine():
    settings = get_settings()
    if not settings.postgres_dsn:
        raise HTTPException(status_code=500, detail="POSTGRES_DSN is required.")
    return get_engine(settings.postgres_dsn)


@lru_cache(maxsize=1)
def _get_password_hasher() -> PasswordHasher:
    return PasswordHasher()


@lru_cache(maxsize=1)
def _get_token_service() -> JwtTokenService:
    settings = get_settings()
    if not settings.jwt_secret:
        raise HTTPException(status_code=500, detail="JWT_SECRET is required.")
    return JwtTokenService(
        jwt_secret=settings.jwt_secret,
        access_ttl_minutes=settings.jwt_access_ttl_minutes,
        refresh_ttl_days=settings.jwt_refresh_ttl_days,
    )


def get_token_service() -> JwtTokenService:
    return _get_token_service()


def get_sale_abonnement_use_case() -> SaleAbonnementUseCase:
    engine = _get_db_engine()
    return SaleAbonnementUseCase(
        abonnement_port=SqlAbonnementRepository(engine),
        person_port=SqlPersonRepository(engine),
        sold_abonnement_port=SqlSoldAbonnementRepository(engine),
    )


def get_login_local_use_case() -> LoginLocalUseCase:
    engine = _get_db_engine()
    return LoginLocalUseCase(
        person_port=SqlPersonRepository(engine),
        refresh_token_port=SqlRefreshTokenRepository(engine),
        password_hasher=_get_password_hasher(),
        token_port=_get_token_service(),
    )


def get_refresh_session_use_case() -> RefreshSessionUseCase:
    return RefreshSessionUseCase(
        refresh_token_port=SqlRefreshTokenRepository(_get_db_engine()),
        token_port=_get_token_service(),
    )


def get_logout_session_use_case() -> LogoutSessionUseCase:
    return LogoutSessionUseCase(
        refresh_token_port=SqlRefreshTokenRepository(_get_db_engine()),
        token_port=_get_token_service(),
    )


def get_current_principal(
    token: str = Depends(require_jwt),
    token_service: JwtTokenService = Depends(get_token_service),
) -> AccessTokenPayload:
    try:
        return token_service.decode_access_token(token=token)
    except ValueError as exc:
        raise HTTPException(status_code=401, detail=str(exc)) from exc


def require_role(*roles: AuthRole):
    allowed = set(roles)

    def _dependency(principal: AccessTokenPayload = Depends(get_current_principal)) -> AccessTokenPayload:
        if principal.role not in allowed:
            raise HTTPException(status_code=403, detail="Role is not allowed.")
        return principal

    return _dependency
