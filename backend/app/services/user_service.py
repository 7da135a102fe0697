from typing import List

from app.errors import UserNotFoundError
from app.repository.repository_user import (
    allocate_user_id,
    get_all_users,
    get_sample_user,
    get_user_by_id,
)
from app.schema.schemas import (
    UserCreate,
    UserPatch,
    UserResponse,
    UserUpdate,
)
from app.utils.logger import get_logger

logger = get_logger(__name__)

DELETE_CONFIRMATION = "User deletion successful"


# ============================================================
# USER SERVICE
# ------------------------------------------------------------
# Works over the hardcoded sample set from the repository.
# Nothing is stored: create/update echo the payload back with
# the id the server decides on, patch lays it over the sample.
# ============================================================

class UserService:

    @staticmethod
    def list_users() -> List[UserResponse]:
        return get_all_users()

    @staticmethod
    def get_user(user_id: int) -> UserResponse:
        user = get_user_by_id(user_id)
        if user is None:
            raise UserNotFoundError()
        return user

    @staticmethod
    def create_user(payload: UserCreate) -> UserResponse:
        """The id is always server-assigned and never equals a client-supplied one."""
        user = UserResponse(
            id=allocate_user_id(payload.id), name=payload.name, email=payload.email
        )
        logger.info("user_created", user_id=user.id)
        return user

    @staticmethod
    def replace_user(user_id: int, payload: UserUpdate) -> UserResponse:
        # the path id wins over payload.id
        user = UserResponse(id=user_id, name=payload.name, email=payload.email)
        logger.info("user_replaced", user_id=user_id)
        return user

    @staticmethod
    def patch_user(user_id: int, payload: UserPatch) -> UserResponse:
        """Apply the sent fields over the sample record, or over a blank user."""
        changes = payload.model_dump(exclude_unset=True)
        current = get_sample_user(user_id) or UserResponse(id=user_id, name="", email="")
        user = current.model_copy(update=changes)
        logger.info("user_patched", user_id=user_id, fields=sorted(changes))
        return user

    @staticmethod
    def delete_user(user_id: int) -> str:
        UserService.get_user(user_id)
        logger.info("user_deleted", user_id=user_id)
        return DELETE_CONFIRMATION
