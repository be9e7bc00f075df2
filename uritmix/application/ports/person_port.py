from __future__ import annotations

from typing import Protocol

from uritmix.domain.entities.person import Person


class PersonPort(Protocol):
    async def get(self, *, person_id: int) -> Person | None:
        ...

    async def get_by_email(self, *, email: str) -> Person | None:
        ...
