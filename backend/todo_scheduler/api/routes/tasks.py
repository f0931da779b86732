import datetime as dt
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlmodel import Session, select

from todo_scheduler.api.deps import get_current_user
from todo_scheduler.core.database import get_session
from todo_scheduler.models import Task, TaskStatus, User
from todo_scheduler.schemas.task import TaskCreate, TaskOut, TaskStatsOut, TaskUpdate
from todo_scheduler.services.stats import summarize

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tasks", tags=["tasks"])


def _get_owned_task(session: Session, task_id: int, user: User) -> Task:
    task = session.get(Task, task_id)
    if not task:
        raise HTTPException(status_code=404, detail="Task not found")
    if task.user_id != user.id:
        logger.warning("User id=%s denied access to task id=%s", user.id, task_id)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="User not authorized")
    return task


@router.get("", response_model=list[TaskOut])
def list_tasks(
    start_date: Optional[dt.date] = Query(default=None, alias="startDate"),
    end_date: Optional[dt.date] = Query(default=None, alias="endDate"),
    status_filter: Optional[TaskStatus] = Query(default=None, alias="status"),
    important: Optional[bool] = None,
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    if start_date and end_date and start_date > end_date:
        raise HTTPException(status_code=400, detail="startDate must not be after endDate")

    statement = select(Task).where(Task.user_id == user.id)
    if start_date is not None:
        statement = statement.where(Task.date >= start_date)
    if end_date is not None:
        statement = statement.where(Task.date <= end_date)
    if status_filter is not None:
        statement = statement.where(Task.status == status_filter)
    if important is not None:
        statement = statement.where(Task.is_important == important)

    statement = statement.order_by(Task.date.asc(), Task.start_time.asc().nulls_first(), Task.id.asc())
    return session.exec(statement).all()


@router.get("/stats", response_model=TaskStatsOut)
def task_stats(user: User = Depends(get_current_user), session: Session = Depends(get_session)):
    tasks = session.exec(select(Task).where(Task.user_id == user.id)).all()
    stats = summarize(tasks)
    return TaskStatsOut(
        total=stats.total,
        completed=stats.completed,
        pending=stats.pending,
        overdue=stats.overdue,
        important=stats.important,
        completion_rate=stats.completion_rate,
        average_progress=stats.average_progress,
    )


@router.post("", response_model=TaskOut, status_code=201)
def create_task(data: TaskCreate, user: User = Depends(get_current_user), session: Session = Depends(get_session)):
    task = Task(user_id=user.id, **data.model_dump())
    session.add(task)
    session.commit()
    session.refresh(task)
    logger.info("Task id=%s created by user id=%s", task.id, user.id)
    return task


@router.get("/{task_id}", response_model=TaskOut)
def get_task(task_id: int, user: User = Depends(get_current_user), session: Session = Depends(get_session)):
    return _get_owned_task(session, task_id, user)


@router.put("/{task_id}", response_model=TaskOut)
def update_task(
    task_id: int,
    data: TaskUpdate,
    user: User = Depends(get_current_user),
    session: Session = Depends(get_session),
):
    task = _get_owned_task(session, task_id, user)

    changes = data.model_dump(exclude_unset=True)
    for key, value in changes.items():
        setattr(task, key, value)

    task.updated_at = dt.datetime.now(dt.timezone.utc)
    session.add(task)
    session.commit()
    session.refresh(task)
    logger.info("Task id=%s updated (%s)", task.id, ", ".join(sorted(changes)) or "no fields")
    return task


@router.delete("/{task_id}")
def delete_task(task_id: int, user: User = Depends(get_current_user), session: Session = Depends(get_session)):
    task = _get_owned_task(session, task_id, user)
    session.delete(task)
    session.commit()
    logger.info("Task id=%s deleted by user id=%s", task_id, user.id)
    return {"id": task_id}
