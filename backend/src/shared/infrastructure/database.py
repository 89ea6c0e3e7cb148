from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from shared.config import settings

engine = create_async_engine(settings.DATABASE_URL, pool_pre_ping=True)

async_session = async_sessionmaker(engine, expire_on_commit=False)


class Base(DeclarativeBase):
    pass


async def check_connection(bind: AsyncEngine = engine) -> None:
    """Open one pooled connection so a bad DSN fails before serving traffic."""
    async with bind.connect() as conn:
        await conn.execute(text("SELECT 1"))
