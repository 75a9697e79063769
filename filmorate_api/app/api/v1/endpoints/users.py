"""
User endpoints for API v1.

Provide registration, profile updates and the friendship operations.
Domain errors raised by ``UserService`` are turned into HTTP responses
by the handlers registered in ``api.errors``.
"""

from typing import List

from fastapi import APIRouter, Depends, Response, status

from filmorate_api.app.api.deps import get_user_service
from filmorate_api.app.schemas.user import UserCreate, UserRead, UserUpdate
from filmorate_api.app.services.user_service import UserService


router = APIRouter()


@router.get("", response_model=List[UserRead])
async def list_users(service: UserService = Depends(get_user_service)) -> List[UserRead]:
    """Получить список всех пользователей."""
    return [UserRead.from_entity(user) for user in service.list_users()]


@router.get("/{user_id}", response_model=UserRead)
async def get_user(user_id: int, service: UserService = Depends(get_user_service)) -> UserRead:
    return UserRead.from_entity(service.get_user(user_id))


@router.post("", response_model=UserRead, status_code=status.HTTP_201_CREATED)
async def create_user(user: UserCreate, service: UserService = Depends(get_user_service)) -> UserRead:
    """Зарегистрировать нового пользователя.

    Если имя не передано или пустое, вместо него используется логин.
    """
    return UserRead.from_entity(service.create_user(user.to_entity()))


@router.put("", response_model=UserRead)
async def update_user(user: UserUpdate, service: UserService = Depends(get_user_service)) -> UserRead:
    """Replace a user's profile.

    The user is identified by ``id`` in the body; an unknown or missing
    id results in 404.  The friend list is not changed.
    """
    return UserRead.from_entity(service.update_user(user.to_entity()))


@router.put("/{user_id}/friends/{friend_id}")
async def add_friend(
    user_id: int,
    friend_id: int,
    service: UserService = Depends(get_user_service),
) -> Response:
    """Add a mutual friendship; 409 if the users are already friends."""
    service.add_friend(user_id, friend_id)
    return Response(status_code=status.HTTP_200_OK)


@router.delete("/{user_id}/friends/{friend_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_friend(
    user_id: int,
    friend_id: int,
    service: UserService = Depends(get_user_service),
) -> Response:
    """Удалить пользователя из друзей.

    Удаление несуществующей дружбы не считается ошибкой.
    """
    service.remove_friend(user_id, friend_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{user_id}/friends", response_model=List[UserRead])
async def list_friends(user_id: int, service: UserService = Depends(get_user_service)) -> List[UserRead]:
    return [UserRead.from_entity(user) for user in service.list_friends(user_id)]


@router.get("/{user_id}/friends/common/{other_id}", response_model=List[UserRead])
async def common_friends(
    user_id: int,
    other_id: int,
    service: UserService = Depends(get_user_service),
) -> List[UserRead]:
    """List users who are friends of both ``user_id`` and ``other_id``."""
    return [UserRead.from_entity(user) for user in service.common_friends(user_id, other_id)]
