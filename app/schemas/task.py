# app/schemas/task.py
from __future__ import annotations

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field, field_validator


# ===== Input =====

class TaskCreate(BaseModel):
    title: Optional[str] = Field(default=None, description="Task title")
    description: Optional[str] = Field(default=None, description="Free-form details")
    completed: bool = Field(default=False, description="Completion flag")


class TaskUpdate(BaseModel):
    """Partial update: only the fields present in the body are applied."""

    title: Optional[str] = None
    description: Optional[str] = None
    completed: Optional[bool] = None

    @field_validator("completed")
    @classmethod
    def _completed_not_null(cls, value: Optional[bool]) -> bool:
        # only reached when the client sent the key explicitly
        if value is None:
            raise ValueError("completed must be a boolean")
        return value


# ===== Output =====

class TaskRead(BaseModel):
    id: UUID
    title: Optional[str] = None
    description: Optional[str] = None
    completed: bool = False


class TaskMessage(BaseModel):
    message: str
    task: Optional[TaskRead] = None


class MessageOut(BaseModel):
    message: str


class ErrorOut(BaseModel):
    error: str
