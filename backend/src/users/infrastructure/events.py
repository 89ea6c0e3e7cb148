import json
import logging

from redis.asyncio import Redis

from users.domain.entities import UserChange

logger = logging.getLogger(__name__)


class LoggingUserEvents:
    async def users_changed(self, change: UserChange) -> None:
        logger.info("UsersChanged. user %s", change)


class RedisUserEvents:
    """Publishes each change on a Redis channel for out-of-process listeners."""

    def __init__(self, redis: Redis, channel: str):
        self.redis = redis
        self.channel = channel

    async def users_changed(self, change: UserChange) -> None:
        logger.info("UsersChanged. user %s", change)
        await self.redis.publish(self.channel, json.dumps({"change": str(change)}))
