from __future__ import annotations

from typing import Protocol

from uritmix.domain.entities.abonnement import Abonnement, SoldAbonnement


class AbonnementPort(Protocol):
    async def get(self, *, abonnement_id: int) -> Abonnement | None:
        ...


class SoldAbonnementPort(Protocol):
    async def create(self, *, record: SoldAbonnement) -> SoldAbonnement:
        ...
