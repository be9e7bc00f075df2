from __future__ import annotations

from typing import Protocol

from uritmix.domain.entities.person import RefreshToken


class RefreshTokenPort(Protocol):
    async def get(self, *, token_id: int) -> RefreshToken | None:
        ...

    async def create_or_update(self, *, record: RefreshToken) -> RefreshToken:
        """Persiste um novo token e revoga os tokens ativos anteriores da pessoa."""
        ...

    async def revoke(self, *, token_id: int) -> None:
        ...
