from __future__ import annotations

import logging

from sqlalchemy import text

from uritmix.application.ports.refresh_token_port import RefreshTokenPort
from uritmix.domain.entities.person import RefreshToken
from uritmix.infrastructure.db.mappers.studio_mapper import map_row_to_refresh_token


logger = logging.getLogger(__name__)


class SqlRefreshTokenRepository(RefreshTokenPort):
    def __init__(self, engine):
        self._engine = engine

    async def get(self, *, token_id: int) -> RefreshToken | None:
        sql = """
            SELECT t.id, t.person_id, t.is_revoked,
                   p.first_name, p.last_name,
                   a.email, a.role, a.status, a.password_hash
            FROM public.refresh_token t
            LEFT JOIN public.person p ON p.id = t.person_id
            LEFT JOIN public.auth a ON a.person_id = t.person_id
            WHERE t.id = :token_id
            LIMIT 1
        """
        async with self._engine.connect() as conn:
            row = (await conn.execute(text(sql), {"token_id": token_id})).mappings().first()
        if row is None:
            return None
        return map_row_to_refresh_token(row)

    async def create_or_update(self, *, record: RefreshToken) -> RefreshToken:
        if record.id is not None:
            sql = """
                UPDATE public.refresh_token
                SET is_revoked = is_revoked OR CAST(:is_revoked AS boolean)
                WHERE id = :token_id
                RETURNING id, person_id, is_revoked
            """
            async with self._engine.begin() as conn:
                row = (
                    await conn.execute(text(sql), {"token_id": record.id, "is_revoked": record.is_revoked})
                ).mappings().one()
            return map_row_to_refresh_token(row)

        # One live token per person: revoke the previous chain in the same transaction.
        revoke_sql = """
            UPDATE public.refresh_token
            SET is_revoked = true
            WHERE person_id = :person_id
              AND is_revoked = false
        """
        insert_sql = """
            INSERT INTO public.refresh_token (person_id, is_revoked, created_at)
            VALUES (:person_id, :is_revoked, now())
            RETURNING id, person_id, is_revoked
        """
        async with self._engine.begin() as conn:
            revoked = await conn.execute(text(revoke_sql), {"person_id": record.person_id})
            row = (
                await conn.execute(
                    text(insert_sql),
                    {"person_id": record.person_id, "is_revoked": record.is_revoked},
                )
            ).mappings().one()
        logger.info(
            "refresh_token_repo: issued id=%s person_id=%s revoked_previous=%s",
            row["id"],
            row["person_id"],
            revoked.rowcount,
        )
        return map_row_to_refresh_token(row)

    async def revoke(self, *, token_id: int) -> None:
        sql = """
            UPDATE public.refresh_token
            SET is_revoked = true
            WHERE id = :token_id
        """
        async with self._engine.begin() as conn:
            await conn.execute(text(sql), {"token_id": token_id})
