import datetime as dt
from typing import Optional

from pydantic import AliasChoices, Field, field_validator

from todo_scheduler.models import TaskStatus
from .base import APIModel

HHMM = r"^([01]\d|2[0-3]):[0-5]\d$"


def _coerce_date(value):
    # A timestamp names a calendar day only at midnight in its own offset
    # ("2030-03-04T00:00:00+05:30"). Anything else, such as a local
    # midnight converted to UTC, could land on the wrong day.
    if isinstance(value, str) and "T" in value:
        try:
            value = dt.datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            return value
    if isinstance(value, dt.datetime):
        if value.time() != dt.time(0, 0):
            raise ValueError(
                "date must be YYYY-MM-DD or a midnight timestamp in the user's own UTC offset"
            )
        return value.date()
    return value


def _blank_to_none(value):
    if isinstance(value, str) and not value.strip():
        return None
    return value


class TaskCreate(APIModel):
    title: str = Field(min_length=1, max_length=200)
    description: Optional[str] = Field(default=None, max_length=2000)
    date: dt.date
    start_time: Optional[str] = Field(default=None, pattern=HHMM)
    end_time: Optional[str] = Field(default=None, pattern=HHMM)
    is_important: bool = False
    status: TaskStatus = TaskStatus.pending
    progress: int = Field(default=0, ge=0, le=100)

    @field_validator("date", mode="before")
    @classmethod
    def parse_date(cls, value):
        return _coerce_date(value)

    @field_validator("start_time", "end_time", "description", mode="before")
    @classmethod
    def empty_is_none(cls, value):
        return _blank_to_none(value)


class TaskUpdate(APIModel):
    """Partial update; only keys present in the request body are applied."""

    title: Optional[str] = Field(default=None, min_length=1, max_length=200)
    description: Optional[str] = Field(default=None, max_length=2000)
    date: Optional[dt.date] = None
    start_time: Optional[str] = Field(default=None, pattern=HHMM)
    end_time: Optional[str] = Field(default=None, pattern=HHMM)
    is_important: Optional[bool] = None
    status: Optional[TaskStatus] = None
    progress: Optional[int] = Field(default=None, ge=0, le=100)

    @field_validator("date", mode="before")
    @classmethod
    def parse_date(cls, value):
        return _coerce_date(value)

    @field_validator("start_time", "end_time", "description", mode="before")
    @classmethod
    def empty_is_none(cls, value):
        return _blank_to_none(value)

    @field_validator("title", "date", "is_important", "status", "progress")
    @classmethod
    def reject_null(cls, value, info):
        if value is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return value


class TaskOut(APIModel):
    id: int = Field(
        validation_alias=AliasChoices("id", "_id"),
        serialization_alias="_id",
    )
    user_id: int
    title: str
    description: Optional[str] = None
    date: dt.date
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    is_important: bool
    status: TaskStatus
    progress: int
    created_at: dt.datetime
    updated_at: dt.datetime


class TaskStatsOut(APIModel):
    total: int
    completed: int
    pending: int
    overdue: int
    important: int
    completion_rate: int
    average_progress: int
