"""
API Router for Tasks app.

Routes keep the legacy client's paths and status codes:
- GET    /tasks              list (authenticated + TASKS_LIST)
- POST   /addtask            create (authenticated)
- GET    /task/{id}          show
- PUT    /updatetask/{id}    update (answers 201)
- DELETE /task/{id}          destroy
"""
import logging
from typing import List
from django.conf import settings
from django.http import HttpRequest
from ninja import Router
from ninja.errors import HttpError

from apps.core.schemas import ErrorOut, MessageOut
from apps.identity.api import require_permission
from apps.identity.permissions import Permissions

from . import services
from .schemas import TaskIn, TaskOut, TaskUpdateIn

logger = logging.getLogger(__name__)

router = Router(tags=["Tasks"])


def failure_message(action: str, exc: Exception) -> str:
    """Underlying error text is only exposed in DEBUG."""
    if settings.DEBUG:
        return f"Failed to {action}: {exc}"
    return f"Failed to {action}"


@router.get("/tasks", response=List[TaskOut], auth=None)
def list_tasks(request: HttpRequest):
    """
    List every task in the store.

    Requires a bearer token and the TASKS_LIST permission. The result is not
    filtered by owner.
    """
    require_permission(request, Permissions.TASKS_LIST)
    try:
        return services.list_tasks()
    except Exception as e:
        logger.exception("Failed to retrieve tasks")
        raise HttpError(500, failure_message("retrieve tasks", e))


@router.post("/addtask", response={201: TaskOut}, auth=None)
def create_task(request: HttpRequest, payload: TaskIn):
    """Create a task owned by the authenticated caller."""
    owner = require_permission(request, Permissions.TASKS_CREATE)
    try:
        task = services.create_task(owner, payload)
    except Exception as e:
        logger.exception(f"Failed to create task for user {owner.id}")
        raise HttpError(500, failure_message("create task", e))
    return 201, task


@router.get("/task/{task_id}", response={200: TaskOut, 404: ErrorOut}, auth=None)
def show_task(request: HttpRequest, task_id: str):
    return 200, services.get_task(task_id)


@router.put("/updatetask/{task_id}", response={201: TaskOut, 404: ErrorOut}, auth=None)
def update_task(request: HttpRequest, task_id: str, payload: TaskUpdateIn):
    """
    Partial update. Only fields present in the body change.

    Answers 201 rather than 200; existing clients depend on it.
    """
    task = services.update_task(task_id, payload.model_dump(exclude_unset=True))
    return 201, task


@router.delete("/task/{task_id}", response={200: MessageOut, 404: ErrorOut}, auth=None)
def destroy_task(request: HttpRequest, task_id: str):
    services.delete_task(task_id)
    return 200, {"message": "Task deleted successfully"}
