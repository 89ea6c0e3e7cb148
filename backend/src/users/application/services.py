import logging
import re
from collections.abc import Mapping

from shared.exceptions import BadRequestError, NotFoundError, StorageError
from users.application.clauses import collect_clauses
from users.domain.entities import USER_FIELDS, User, UserChange
from users.domain.repository import UserEvents, UserRepository

logger = logging.getLogger(__name__)

_USER_ID = re.compile(r"-?[0-9]+")

# Bounds of the 32-bit INTEGER id column.
_ID_MIN, _ID_MAX = -(2**31), 2**31 - 1


def parse_user_id(raw: str) -> int:
    """Parse a path id the way the integer column would, rejecting anything else."""
    # The length cap keeps int() away from its digit limit.
    if len(raw) <= 11 and _USER_ID.fullmatch(raw) and _ID_MIN <= int(raw) <= _ID_MAX:
        return int(raw)
    raise StorageError(f'invalid input syntax for type integer: "{raw}"')


async def create_user(repo: UserRepository, form: Mapping[str, str]) -> None:
    if not form.get("email"):
        raise BadRequestError("email is required.")
    await repo.create({name: form.get(name) or "" for name in USER_FIELDS})


async def list_users(repo: UserRepository, query: Mapping[str, str]) -> list[User]:
    return await repo.find(collect_clauses(query.get))


async def update_user(repo: UserRepository, user_id: int, form: Mapping[str, str]) -> None:
    assignments = collect_clauses(form.get)
    if not assignments:
        raise BadRequestError("You did not provide any fields to update")

    if await repo.update(user_id, assignments) == 0:
        raise NotFoundError("User", str(user_id))


async def delete_user(repo: UserRepository, user_id: int) -> None:
    if await repo.delete(user_id) == 0:
        raise NotFoundError("User", str(user_id))


async def notify_users_changed(events: UserEvents, change: UserChange) -> None:
    """Run the change hook; its failures are logged and never reach the caller."""
    try:
        await events.users_changed(change)
    except Exception:
        logger.exception("UsersChanged hook failed for user %s", change)
