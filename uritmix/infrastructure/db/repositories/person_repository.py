from __future__ import annotations

from sqlalchemy import text

from uritmix.application.ports.person_port import PersonPort
from uritmix.domain.entities.person import Person
from uritmix.infrastructure.db.mappers.studio_mapper import map_row_to_person


_PERSON_SELECT = """
    SELECT p.id AS person_id, p.first_name, p.last_name,
           a.email, a.role, a.status, a.password_hash
    FROM public.person p
    LEFT JOIN public.auth a ON a.person_id = p.id
"""


class SqlPersonRepository(PersonPort):
    def __init__(self, engine):
        self._engine = engine

    async def get(self, *, person_id: int) -> Person | None:
        sql = _PERSON_SELECT + """
            WHERE p.id = :person_id
            LIMIT 1
        """
        async with self._engine.connect() as conn:
            row = (await conn.execute(text(sql), {"person_id": person_id})).mappings().first()
        if row is None:
            return None
        return map_row_to_person(row)

    async def get_by_email(self, *, email: str) -> Person | None:
        sql = _PERSON_SELECT + """
            WHERE lower(a.email) = :email
            LIMIT 1
        """
        async with self._engine.connect() as conn:
            row = (await conn.execute(text(sql), {"email": email.lower()})).mappings().first()
        if row is None:
            return None
        return map_row_to_person(row)
