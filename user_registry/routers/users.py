from __future__ import annotations

from fastapi import APIRouter, Body, Depends, HTTPException, Response

from user_registry.deps import get_registry
from user_registry.errors import ErrorKind, RegistryError
from user_registry.models import ErrorResponse, UserCount, UserOut, UserPayload
from user_registry.user_store import InMemoryUserRegistry

router = APIRouter(prefix="/api/users", tags=["users"])

_STATUS_BY_KIND = {
    ErrorKind.not_found: 404,
    ErrorKind.duplicate_email: 409,
}

_NOT_FOUND = {404: {"model": ErrorResponse, "description": "User not found"}}
_BAD_REQUEST = {400: {"model": ErrorResponse, "description": "Invalid input data"}}
_CONFLICT = {409: {"model": ErrorResponse, "description": "User already exists"}}


def _to_http(e: RegistryError) -> HTTPException:
    return HTTPException(status_code=_STATUS_BY_KIND.get(e.kind, 500), detail=e.message)


@router.get("", response_model=list[UserOut], summary="Get all users")
def list_users(registry: InMemoryUserRegistry = Depends(get_registry)) -> list[UserOut]:
    return [UserOut.from_record(u) for u in registry.list()]


@router.get("/count", response_model=UserCount, summary="Count users")
def count_users(registry: InMemoryUserRegistry = Depends(get_registry)) -> UserCount:
    return UserCount(count=registry.count())


@router.get("/{user_id}", response_model=UserOut, summary="Get user by ID", responses={**_NOT_FOUND, **_BAD_REQUEST})
def get_user(user_id: int, registry: InMemoryUserRegistry = Depends(get_registry)) -> UserOut:
    try:
        return UserOut.from_record(registry.get(user_id))
    except RegistryError as e:
        raise _to_http(e)


@router.post(
    "",
    response_model=UserOut,
    status_code=201,
    summary="Create user",
    responses={**_BAD_REQUEST, **_CONFLICT},
)
def create_user(
    payload: UserPayload = Body(...),
    registry: InMemoryUserRegistry = Depends(get_registry),
) -> UserOut:
    try:
        return UserOut.from_record(registry.create(payload.to_record()))
    except RegistryError as e:
        raise _to_http(e)


@router.put(
    "/{user_id}",
    response_model=UserOut,
    summary="Update user",
    responses={**_NOT_FOUND, **_BAD_REQUEST, **_CONFLICT},
)
def update_user(
    user_id: int,
    payload: UserPayload = Body(...),
    registry: InMemoryUserRegistry = Depends(get_registry),
) -> UserOut:
    # Path id wins over any id in the body.
    try:
        return UserOut.from_record(registry.update(user_id, payload.to_record()))
    except RegistryError as e:
        raise _to_http(e)


@router.delete("/{user_id}", status_code=204, summary="Delete user", responses=_NOT_FOUND)
def delete_user(user_id: int, registry: InMemoryUserRegistry = Depends(get_registry)) -> Response:
    try:
        registry.delete(user_id)
    except RegistryError as e:
        raise _to_http(e)
    return Response(status_code=204)
