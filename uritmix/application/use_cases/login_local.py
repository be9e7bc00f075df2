from __future__ import annotations

import logging

from uritmix.application.dto.auth import LoggedPersonOutput, LoginLocalInput
from uritmix.application.ports.password_hasher_port import PasswordHasherPort
from uritmix.application.ports.person_port import PersonPort
from uritmix.application.ports.refresh_token_port import RefreshTokenPort
from uritmix.application.ports.token_port import TokenPort
from uritmix.domain.entities.person import AuthStatus
from uritmix.domain.errors import AppError, ErrorCode, app_error
from uritmix.domain.result import Failure, Result, Success

from .auth_common import issue_tokens, normalize_email


logger = logging.getLogger(__name__)


class LoginLocalUseCase:
    def __init__(
        self,
        *,
        person_port: PersonPort,
        refresh_token_port: RefreshTokenPort,
        password_hasher: PasswordHasherPort,
        token_port: TokenPort,
    ):
        self._person_port = person_port
        self._refresh_token_port = refresh_token_port
        self._password_hasher = password_hasher
        self._token_port = token_port

    async def execute(self, command: LoginLocalInput) -> Result[LoggedPersonOutput, AppError]:
        email = normalize_email(command.email)
        person = await self._person_port.get_by_email(email=email)
        if person is None or person.auth is None or not person.auth.password_hash:
            return Failure(app_error(ErrorCode.INVALID_CREDENTIALS))

        auth = person.auth
        if not self._password_hasher.verify(command.password, auth.password_hash):
            logger.warning("login_local: wrong password person_id=%s", person.id)
            return Failure(app_error(ErrorCode.INVALID_CREDENTIALS))

        if auth.status == AuthStatus.BLOCKED:
            return Failure(app_error(ErrorCode.ACCOUNT_BLOCKED))
        if auth.status == AuthStatus.NOT_ACTIVATED:
            return Failure(app_error(ErrorCode.ACCOUNT_NOT_ACTIVATED))

        output = await issue_tokens(
            person=person,
            auth=auth,
            refresh_token_port=self._refresh_token_port,
            token_port=self._token_port,
        )
        logger.info("login_local: person_id=%s role=%s", person.id, auth.role.value)
        return Success(output)
