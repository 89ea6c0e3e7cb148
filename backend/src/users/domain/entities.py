from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum

# Order matters: clause fragments are emitted in this order.
USER_FIELDS: tuple[str, ...] = (
    "first_name",
    "last_name",
    "nickname",
    "password",
    "email",
    "country",
)


class UserChange(StrEnum):
    CREATED = "created"
    UPDATED = "updated"
    DELETED = "deleted"


@dataclass
class User:
    email: str
    first_name: str = ""
    last_name: str = ""
    nickname: str = ""
    password: str = ""
    country: str = ""
    id: int | None = field(default=None)
    created_at: datetime | None = field(default=None)
    updated_at: datetime | None = field(default=None)
