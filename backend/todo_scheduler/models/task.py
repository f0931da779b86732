import datetime as dt
from enum import Enum
from typing import Optional

from sqlmodel import SQLModel, Field


class TaskStatus(str, Enum):
    pending = "pending"
    completed = "completed"
    # set by the user; nothing moves a task here automatically
    overdue = "overdue"


class Task(SQLModel, table=True):
    __tablename__ = "tasks"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(index=True, foreign_key="users.id")

    title: str
    description: Optional[str] = None
    date: dt.date = Field(index=True)
    start_time: Optional[str] = None  # "HH:mm"
    end_time: Optional[str] = None  # "HH:mm"
    is_important: bool = False
    status: TaskStatus = TaskStatus.pending
    progress: int = Field(default=0, ge=0, le=100)

    created_at: dt.datetime = Field(default_factory=lambda: dt.datetime.now(dt.timezone.utc))
    updated_at: dt.datetime = Field(default_factory=lambda: dt.datetime.now(dt.timezone.utc))
