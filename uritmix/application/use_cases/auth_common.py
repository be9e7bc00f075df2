from __future__ import annotations

from uritmix.application.dto.auth import LoggedPersonOutput
from uritmix.application.ports.refresh_token_port import RefreshTokenPort
from uritmix.application.ports.token_port import TokenPort
from uritmix.domain.entities.person import AuthAccount, Person, RefreshToken


def normalize_email(email: str) -> str:
    return email.strip().lower()


async def issue_tokens(
    *,
    person: Person,
    auth: AuthAccount,
    refresh_token_port: RefreshTokenPort,
    token_port: TokenPort,
) -> LoggedPersonOutput:
    token = await refresh_token_port.create_or_update(
        record=RefreshToken(id=None, person_id=person.id, is_revoked=False)
    )
    return LoggedPersonOutput(
        person_id=person.id,
        first_name=person.first_name,
        last_name=person.last_name,
        role=auth.role,
        email=auth.email,
        access_token=token_port.create_access_token(
            person_id=person.id,
            email=auth.email,
            role=auth.role,
        ),
        refresh_token=token_port.create_refresh_token(email=auth.email, token_id=token.id),
    )
