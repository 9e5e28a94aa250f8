"""User response schemas."""

from pydantic import BaseModel, ConfigDict


class UserRead(BaseModel):
    id: int
    name: str
    email: str

    model_config = ConfigDict(from_attributes=True, frozen=True)
