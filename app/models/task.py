from sqlmodel import SQLModel, Field
from uuid import UUID, uuid4
from typing import Optional


class Task(SQLModel, table=True):
    __tablename__ = "tasks"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    title: Optional[str] = None
    description: Optional[str] = None
    completed: bool = False
