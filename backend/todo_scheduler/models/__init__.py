from .user import User
from .task import Task, TaskStatus

__all__ = ["User", "Task", "TaskStatus"]
