from pydantic import BaseModel, ConfigDict, StrictInt
from typing import Optional


# -------------------
# User Schemas
# -------------------
class UserBase(BaseModel):
    name: str
    email: str


class UserCreate(UserBase):
    id: Optional[StrictInt] = None  # never used as the new id

    model_config = ConfigDict(
        json_schema_extra={"example": {"name": "John Doe", "email": "john@example.com"}}
    )


class UserUpdate(UserBase):
    id: Optional[StrictInt] = None  # always replaced by the id in the path


class UserPatch(BaseModel):
    # null is rejected; an absent field keeps its current value
    name: str = ""
    email: str = ""


class UserResponse(UserBase):
    id: int

    model_config = ConfigDict(from_attributes=True)
