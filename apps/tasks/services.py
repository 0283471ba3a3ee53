"""
Task store access.

Every statement here is filtered by the owning user's id; no task is ever
addressed by its id alone. That filter is the only authorization the API
performs, so new queries must keep it.
"""
import logging
from typing import List
from uuid import UUID

from django.db import transaction
from django.db.models import Case, Value, When

from apps.core.db import store_errors
from apps.core.exceptions import NotFound
from .dtos import TaskDTO
from .models import Task

logger = logging.getLogger(__name__)

TASK_FIELDS = ('id', 'task', 'status')


def _owned_by(user_id: UUID):
    return Task.objects.filter(user_id=user_id)


def _get_owned(user_id: UUID, task_id: int) -> TaskDTO:
    try:
        row = _owned_by(user_id).values_list(*TASK_FIELDS).get(id=task_id)
    except Task.DoesNotExist:
        raise NotFound(f"task {task_id} not found")
    return TaskDTO(*row)


def list_tasks(user_id: UUID) -> List[TaskDTO]:
    """All of a user's tasks in insertion order; empty list when none."""
    with store_errors():
        rows = _owned_by(user_id).order_by('id').values_list(*TASK_FIELDS)
        return [TaskDTO(*row) for row in rows]


def add_task(user_id: UUID, description: str, status: bool = False) -> TaskDTO:
    """Insert a task for the user. The store assigns the id."""
    with store_errors():
        task = Task.objects.create(user_id=user_id, task=description, status=status)

    logger.info(f"User {user_id} added task {task.id}")
    return TaskDTO(id=task.id, task=task.task, status=task.status)


def delete_task(user_id: UUID, task_id: int) -> List[TaskDTO]:
    """
    Delete one of the user's tasks and return the ones left.

    Deleting an id that does not exist, or belongs to someone else, removes
    nothing and is not an error.
    """
    with store_errors():
        deleted, _ = _owned_by(user_id).filter(id=task_id).delete()

    if deleted:
        logger.info(f"User {user_id} deleted task {task_id}")
    else:
        logger.debug(f"User {user_id} deleted nothing for task {task_id}")
    return list_tasks(user_id)


def edit_task(user_id: UUID, task_id: int, description: str) -> TaskDTO:
    """Replace a task's description. The completion status is left alone."""
    with store_errors(), transaction.atomic():
        updated = _owned_by(user_id).filter(id=task_id).update(task=description)
        if not updated:
            raise NotFound(f"task {task_id} not found")
        return _get_owned(user_id, task_id)


def toggle_done(user_id: UUID, task_id: int) -> TaskDTO:
    """
    Flip a task's completion status.

    The flip is a single `UPDATE ... SET status = NOT status`, so concurrent
    toggles of the same task each take effect.
    """
    with store_errors(), transaction.atomic():
        updated = _owned_by(user_id).filter(id=task_id).update(
            status=Case(When(status=True, then=Value(False)), default=Value(True)),
        )
        if not updated:
            raise NotFound(f"task {task_id} not found")
        return _get_owned(user_id, task_id)
