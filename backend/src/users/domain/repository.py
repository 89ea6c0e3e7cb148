from typing import Protocol

from users.domain.entities import User, UserChange


class UserRepository(Protocol):
    async def create(self, fields: dict[str, str]) -> None: ...

    async def find(self, filters: list[tuple[str, str]]) -> list[User]: ...

    async def update(self, user_id: int, assignments: list[tuple[str, str]]) -> int: ...

    async def delete(self, user_id: int) -> int: ...


class UserEvents(Protocol):
    """Receives a notification after a user mutation has been committed."""

    async def users_changed(self, change: UserChange) -> None: ...
