"""Creates the studio schema on the database pointed to by POSTGRES_DSN."""
from __future__ import annotations

import asyncio
import logging

from sqlalchemy.exc import SQLAlchemyError

from uritmix.infrastructure.db.engine import Base, get_engine
from uritmix.infrastructure.db.models import studio  # noqa: F401
from uritmix.shared.config import get_settings


logger = logging.getLogger(__name__)


async def create_all(dsn: str) -> None:
    engine = get_engine(dsn)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    await engine.dispose()


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    settings = get_settings()
    if not settings.postgres_dsn:
        raise SystemExit("POSTGRES_DSN is required.")
    try:
        asyncio.run(create_all(settings.postgres_dsn))
    except SQLAlchemyError as exc:
        raise SystemExit(f"Failed to create tables: {exc}") from exc
    logger.info("create_tables: schema created")


if __name__ == "__main__":
    main()
