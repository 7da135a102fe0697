from fastapi import APIRouter, Depends, Path, status
from typing import Annotated, List
from app.errors import INVALID_ID_MESSAGE, InvalidRequestError
from app.schema.schemas import (
    UserCreate,
    UserPatch,
    UserResponse,
    UserUpdate,
)
from app.services.user_service import UserService

router = APIRouter(tags=["[Sample] Users"])

INVALID_REQUEST = {400: {"description": "Invalid Request"}}
NOT_FOUND = {404: {"description": "User Not Found"}}

# Same bounds as a signed 64-bit integer.
MIN_USER_ID = -(2**63)
MAX_USER_ID = 2**63 - 1


def parse_user_id(
    user_id: Annotated[str, Path(pattern=r"^[+-]?[0-9]+$", description="User ID")],
) -> int:
    """Accept only plain decimal integers: no padding, no fractions."""
    if len(user_id.lstrip("+-").lstrip("0")) > 19:
        raise InvalidRequestError(INVALID_ID_MESSAGE)
    value = int(user_id)
    if not MIN_USER_ID <= value <= MAX_USER_ID:
        raise InvalidRequestError(INVALID_ID_MESSAGE)
    return value


UserId = Annotated[int, Depends(parse_user_id)]


@router.get(
    "",
    response_model=List[UserResponse],
    summary="Get a list of users",
    description="Get information of all users.",
)
def get_users():
    return UserService.list_users()


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    summary="Get specific user information",
    description="Get information of a user with a specific ID.",
    responses={**INVALID_REQUEST, **NOT_FOUND},
)
def get_user(user_id: UserId):
    return UserService.get_user(user_id)


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new user",
    description="Create a new user with the given information.",
    responses=INVALID_REQUEST,
)
def create_user(user: UserCreate):
    return UserService.create_user(user)


@router.put(
    "/{user_id}",
    response_model=UserResponse,
    summary="Update a user",
    description="Update a user with the given information.",
    responses=INVALID_REQUEST,
)
def update_user(user_id: UserId, user: UserUpdate):
    return UserService.replace_user(user_id, user)


@router.patch(
    "/{user_id}",
    response_model=UserResponse,
    summary="Patch a user",
    description="Patch a user with the given information.",
    responses=INVALID_REQUEST,
)
def patch_user(user_id: UserId, user: UserPatch):
    return UserService.patch_user(user_id, user)


@router.delete(
    "/{user_id}",
    response_model=str,
    summary="Delete a user",
    description="Delete a user with the given ID.",
    responses={**INVALID_REQUEST, **NOT_FOUND},
)
def delete_user(user_id: UserId):
    return UserService.delete_user(user_id)
