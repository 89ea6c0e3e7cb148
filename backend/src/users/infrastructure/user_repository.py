from sqlalchemy import delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from shared.exceptions import StorageError
from users.domain.entities import User
from users.infrastructure.orm_models import UserModel


class DbUserRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, fields: dict[str, str]) -> None:
        self.session.add(UserModel(**fields))
        await self.session.commit()

    async def find(self, filters: list[tuple[str, str]]) -> list[User]:
        stmt = select(UserModel).order_by(UserModel.id)
        if filters:
            stmt = stmt.where(*(getattr(UserModel, name) == value for name, value in filters))

        # Rows are decoded while the result is buffered, so decoding errors
        # can surface from execute() as well as from scalars().
        try:
            result = await self.session.execute(stmt)
            return [_to_entity(m) for m in result.scalars().all()]
        except (TypeError, ValueError) as exc:
            raise StorageError(f"can't scan user row: {exc}") from exc

    async def update(self, user_id: int, assignments: list[tuple[str, str]]) -> int:
        result = await self.session.execute(
            update(UserModel)
            .where(UserModel.id == user_id)
            .values({**dict(assignments), "updated_at": func.now()})
            .execution_options(synchronize_session=False)
        )
        await self.session.commit()
        return result.rowcount

    async def delete(self, user_id: int) -> int:
        result = await self.session.execute(
            delete(UserModel)
            .where(UserModel.id == user_id)
            .execution_options(synchronize_session=False)
        )
        await self.session.commit()
        return result.rowcount


def _to_entity(model: UserModel) -> User:
    return User(
        id=model.id,
        first_name=model.first_name,
        last_name=model.last_name,
        nickname=model.nickname,
        password=model.password,
        email=model.email,
        country=model.country,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )
