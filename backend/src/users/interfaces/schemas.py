from datetime import datetime, timezone

from pydantic import BaseModel, field_serializer


def format_rfc3339(value: datetime) -> str:
    """Format like ``2006-01-02T15:04:05Z07:00``; naive values are read as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    text = value.replace(microsecond=0).isoformat()
    return text[:-6] + "Z" if text.endswith("+00:00") else text


class OkResponse(BaseModel):
    ok: bool = True


class ErrorResponse(BaseModel):
    ok: bool = False
    message: str


class UserResponse(BaseModel):
    id: int
    first_name: str
    last_name: str
    nickname: str
    password: str
    email: str
    country: str
    created_at: datetime
    updated_at: datetime

    @field_serializer("created_at", "updated_at")
    def serialize_timestamp(self, value: datetime) -> str:
        return format_rfc3339(value)
