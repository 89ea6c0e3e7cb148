from collections.abc import AsyncGenerator

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncSession

from shared.build_info import BuildInfo
from shared.config import settings
from shared.infrastructure.database import async_session
from shared.infrastructure.redis import get_redis_pool
from users.domain.repository import UserEvents
from users.infrastructure.events import LoggingUserEvents, RedisUserEvents

build_info = BuildInfo.from_settings(settings)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    async with async_session() as session:
        yield session


def get_build_info() -> BuildInfo:
    return build_info


def get_user_events() -> UserEvents:
    if settings.USER_EVENTS_BACKEND == "redis":
        return RedisUserEvents(get_redis_pool(), settings.USER_EVENTS_CHANNEL)
    return LoggingUserEvents()


def _first_values(*sources) -> dict[str, str]:
    # First occurrence wins, body before query string; uploads are ignored.
    fields: dict[str, str] = {}
    for items in sources:
        for key, value in items:
            if isinstance(value, str):
                fields.setdefault(key, value)
    return fields


async def get_form_fields(request: Request) -> dict[str, str]:
    form = await request.form()
    return _first_values(form.multi_items(), request.query_params.multi_items())


def get_query_fields(request: Request) -> dict[str, str]:
    return _first_values(request.query_params.multi_items())
