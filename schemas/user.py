from typing import Optional

from pydantic import BaseModel, field_validator


class UserCreate(BaseModel):
    username: str
    email: str
    password: str

    @field_validator("email")
    @classmethod
    def normalise_email(cls, value: str) -> str:
        return value.lower()


class UserUpdate(BaseModel):
    id: str
    username: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None

    @field_validator("username", "email", "password", mode="before")
    @classmethod
    def blank_as_missing(cls, value):
        # An empty string means "leave unchanged"
        return None if value == "" else value

    @field_validator("email")
    @classmethod
    def normalise_email(cls, value: Optional[str]) -> Optional[str]:
        return value.lower() if value is not None else None

    def changes(self) -> dict:
        """Fields the client actually supplied, without the id."""
        return self.model_dump(exclude={"id"}, exclude_none=True)
