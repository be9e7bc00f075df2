from __future__ import annotations

import logging

from uritmix.application.dto.auth import LogoutInput, RefreshTokenVerdict
from uritmix.application.ports.refresh_token_port import RefreshTokenPort
from uritmix.application.ports.token_port import TokenPort
from uritmix.domain.errors import AppError
from uritmix.domain.result import Result, Success


logger = logging.getLogger(__name__)


class LogoutSessionUseCase:
    """Revoga o refresh token informado. Sempre devolve sucesso."""

    def __init__(self, *, refresh_token_port: RefreshTokenPort, token_port: TokenPort):
        self._refresh_token_port = refresh_token_port
        self._token_port = token_port

    async def execute(self, command: LogoutInput) -> Result[None, AppError]:
        token = command.refresh_token.strip()
        if not token:
            return Success(None)

        resolution = self._token_port.resolve_refresh_token(token=token)
        if resolution.verdict != RefreshTokenVerdict.VALID or resolution.token_id is None:
            return Success(None)

        stored = await self._refresh_token_port.get(token_id=resolution.token_id)
        if stored is None or stored.is_revoked:
            return Success(None)

        await self._refresh_token_port.revoke(token_id=stored.id)
        logger.info("logout_session: revoked token_id=%s person_id=%s", stored.id, stored.person_id)
        return Success(None)
