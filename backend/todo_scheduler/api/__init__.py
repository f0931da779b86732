from fastapi import APIRouter
from todo_scheduler.api.routes import auth_router, tasks_router, notifications_router

api_router = APIRouter(prefix="/api")
api_router.include_router(auth_router)
api_router.include_router(tasks_router)
api_router.include_router(notifications_router)
