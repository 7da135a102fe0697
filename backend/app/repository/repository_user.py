from typing import List, Optional
from app.schema.schemas import UserResponse

# Placeholder ids handed out by create; a real store allocates ids itself.
CREATED_USER_ID = 100
FALLBACK_CREATED_USER_ID = 101

_SAMPLE_USERS = (
    (1, "John Doe", "john@example.com"),
    (2, "Anne Jacqueline Hathaway", "Anne@example.com"),
    (3, "Robert John Downey Jr.", "Robert@example.com"),
)

# Only this record can be fetched or deleted by id.
_REGISTERED_USER_IDS = frozenset({1})


def _build(row) -> UserResponse:
    user_id, name, email = row
    return UserResponse(id=user_id, name=name, email=email)


def get_all_users() -> List[UserResponse]:
    return [_build(row) for row in _SAMPLE_USERS]


def get_sample_user(user_id: int) -> Optional[UserResponse]:
    """Any record of the listing set, registered or not."""
    for row in _SAMPLE_USERS:
        if row[0] == user_id:
            return _build(row)
    return None


def get_user_by_id(user_id: int) -> Optional[UserResponse]:
    if user_id not in _REGISTERED_USER_IDS:
        return None
    return get_sample_user(user_id)


def allocate_user_id(requested: Optional[int] = None) -> int:
    """Pick the id for a new user; never the one the client asked for."""
    if requested == CREATED_USER_ID:
        return FALLBACK_CREATED_USER_ID
    return CREATED_USER_ID
