from typing import List, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from app.models import Status


class TaskCreate(BaseModel):
    subject: str
    description: Optional[str] = None
    status: Status
    username: str

    @field_validator("description", mode="before")
    @classmethod
    def blank_as_missing(cls, value):
        return None if value == "" else value


class TaskUpdate(BaseModel):
    id: str
    subject: Optional[str] = None
    description: Optional[str] = None
    status: Optional[Status] = None

    @field_validator("subject", "description", "status", mode="before")
    @classmethod
    def blank_as_missing(cls, value):
        return None if value == "" else value

    def changes(self) -> dict:
        return self.model_dump(exclude={"id"}, exclude_none=True, mode="json")


class TaskOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    subject: str
    description: Optional[str] = None
    status: str
    username: str


class TaskListResponse(BaseModel):
    data: List[TaskOut]


class TaskResponse(BaseModel):
    data: TaskOut
