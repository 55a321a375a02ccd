"""
Task service: ownership-scoped CRUD against the Task table.

Callers pass identity explicitly (`owner`); nothing here reads a
request-bound current user.
"""
import logging
from typing import List

from apps.core.errors import NotFoundError

from .models import Task
from .schemas import TaskIn

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ('title', 'description', 'completed')


class TaskNotFound(NotFoundError):
    default_message = "Task not found"


def list_tasks() -> List[Task]:
    """
    Every task in the store, across all owners.

    Not scoped to the caller even though the route is authenticated.
    """
    return list(Task.objects.all())


def get_task(task_id) -> Task:
    """
    Look up a task by id. Any token that isn't a valid primary key is
    treated the same as a missing row.
    """
    try:
        return Task.objects.get(pk=task_id)
    except (Task.DoesNotExist, ValueError, TypeError, OverflowError):
        raise TaskNotFound()


def create_task(owner, payload: TaskIn) -> Task:
    task = owner.tasks.create(
        title=payload.title,
        description=payload.description,
    )
    logger.info(f"User {owner.id} created task {task.id}")
    return task


def save_task_changes(task: Task, changes: dict) -> Task:
    """
    Apply field changes to a loaded task and persist the whole row.

    None values and unknown keys are ignored. The full-row save means two
    writers holding the same stale row overwrite each other (last write wins).
    """
    for field, value in changes.items():
        if field in UPDATABLE_FIELDS and value is not None:
            setattr(task, field, value)
    task.save()
    return task


def update_task(task_id, changes: dict) -> Task:
    task = get_task(task_id)
    save_task_changes(task, changes)
    logger.info(f"Updated task {task.id}: {sorted(changes)}")
    return task


def delete_task(task_id) -> None:
    task = get_task(task_id)
    pk = task.pk
    task.delete()
    logger.info(f"Deleted task {pk}")
