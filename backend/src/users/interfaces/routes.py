from fastapi import APIRouter, BackgroundTasks, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from shared.dependencies import get_db, get_form_fields, get_query_fields, get_user_events
from users.application.services import (
    create_user,
    delete_user,
    list_users,
    notify_users_changed,
    parse_user_id,
    update_user,
)
from users.domain.entities import UserChange
from users.domain.repository import UserEvents
from users.infrastructure.user_repository import DbUserRepository
from users.interfaces.schemas import ErrorResponse, OkResponse, UserResponse

router = APIRouter(tags=["users"])

STORAGE_ERROR = {500: {"model": ErrorResponse, "description": "Storage error"}}
BAD_REQUEST = {400: {"model": ErrorResponse, "description": "Missing or empty fields"}}
NOT_FOUND = {404: {"model": ErrorResponse, "description": "No user with that id"}}


@router.post(
    "/user",
    response_model=OkResponse,
    status_code=201,
    responses={**BAD_REQUEST, **STORAGE_ERROR},
)
async def create(
    background_tasks: BackgroundTasks,
    form: dict[str, str] = Depends(get_form_fields),
    db: AsyncSession = Depends(get_db),
    events: UserEvents = Depends(get_user_events),
):
    """Create a user from form fields; ``email`` is required."""
    await create_user(DbUserRepository(db), form)
    background_tasks.add_task(notify_users_changed, events, UserChange.CREATED)
    return OkResponse()


@router.get("/users", response_model=list[UserResponse], responses=STORAGE_ERROR)
async def list_all(
    query: dict[str, str] = Depends(get_query_fields),
    db: AsyncSession = Depends(get_db),
):
    """List users, e.g. ``/users?country=USA&first_name=Hulk`` ANDs both filters."""
    return await list_users(DbUserRepository(db), query)


@router.patch(
    "/user/{user_id}",
    response_model=OkResponse,
    responses={**BAD_REQUEST, **NOT_FOUND, **STORAGE_ERROR},
)
async def update(
    user_id: str,
    background_tasks: BackgroundTasks,
    form: dict[str, str] = Depends(get_form_fields),
    db: AsyncSession = Depends(get_db),
    events: UserEvents = Depends(get_user_events),
):
    await update_user(DbUserRepository(db), parse_user_id(user_id), form)
    background_tasks.add_task(notify_users_changed, events, UserChange.UPDATED)
    return OkResponse()


@router.delete(
    "/user/{user_id}",
    response_model=OkResponse,
    responses={**NOT_FOUND, **STORAGE_ERROR},
)
async def delete(
    user_id: str,
    background_tasks: BackgroundTasks,
    db: AsyncSession = Depends(get_db),
    events: UserEvents = Depends(get_user_events),
):
    await delete_user(DbUserRepository(db), parse_user_id(user_id))
    background_tasks.add_task(notify_users_changed, events, UserChange.DELETED)
    return OkResponse()
