from .auth import router as auth_router
from .tasks import router as tasks_router
from .notifications import router as notifications_router

__all__ = ["auth_router", "tasks_router", "notifications_router"]
