from __future__ import annotations

import logging

from uritmix.application.dto.auth import LoggedPersonOutput, RefreshSessionInput, RefreshTokenVerdict
from uritmix.application.ports.refresh_token_port import RefreshTokenPort
from uritmix.application.ports.token_port import TokenPort
from uritmix.domain.entities.person import AuthStatus
from uritmix.domain.errors import AppError, ErrorCode, app_error
from uritmix.domain.result import Failure, Result, Success

from .auth_common import issue_tokens


logger = logging.getLogger(__name__)


class RefreshSessionUseCase:
    def __init__(self, *, refresh_token_port: RefreshTokenPort, token_port: TokenPort):
        self._refresh_token_port = refresh_token_port
        self._token_port = token_port

    async def execute(self, command: RefreshSessionInput) -> Result[LoggedPersonOutput, AppError]:
        token = command.refresh_token.strip()
        if not token:
            return Failure(app_error(ErrorCode.REFRESH_TOKEN_INVALID))

        resolution = self._token_port.resolve_refresh_token(token=token)
        if resolution.verdict != RefreshTokenVerdict.VALID or resolution.token_id is None:
            logger.warning("refresh_session: token rejected verdict=%s", resolution.verdict.value)
            return Failure(app_error(ErrorCode.REFRESH_TOKEN_INVALID))

        # Missing record and malformed token share one error code.
        stored = await self._refresh_token_port.get(token_id=resolution.token_id)
        if stored is None or stored.person is None or stored.person.auth is None:
            logger.warning("refresh_session: token not found token_id=%s", resolution.token_id)
            return Failure(app_error(ErrorCode.REFRESH_TOKEN_INVALID))

        if stored.is_revoked:
            logger.warning(
                "refresh_session: revoked token used token_id=%s person_id=%s",
                stored.id,
                stored.person_id,
            )
            return Failure(app_error(ErrorCode.REFRESH_TOKEN_REVOKED))

        person = stored.person
        auth = person.auth
        if auth.status == AuthStatus.BLOCKED:
            logger.warning("refresh_session: blocked account person_id=%s", person.id)
            return Failure(app_error(ErrorCode.ACCOUNT_BLOCKED))

        output = await issue_tokens(
            person=person,
            auth=auth,
            refresh_token_port=self._refresh_token_port,
            token_port=self._token_port,
        )
        logger.info("refresh_session: rotated token_id=%s person_id=%s", stored.id, person.id)
        return Success(output)
