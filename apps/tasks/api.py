"""
Task list API endpoints with bearer token authentication.

Every route resolves the caller from the verified token first and passes
that user id to the store layer, which scopes each statement by it.
"""
import re
from typing import List

from django.http import HttpRequest
from ninja import Router

from apps.core.exceptions import InvalidId
from apps.identity.jwt_auth import BearerTokenAuth
from apps.identity.services import resolve_request_user
from .dtos import TaskIn, TaskOut
from .services import add_task, delete_task, edit_task, list_tasks, toggle_done

router = Router(tags=["Tasks"], auth=BearerTokenAuth())

_ID_PATTERN = re.compile(r'[+-]?[0-9]+')
_ID_MIN, _ID_MAX = -(2 ** 63), 2 ** 63 - 1


def parse_task_id(raw: str) -> int:
    """Parse a base-10 task id path segment."""
    if not _ID_PATTERN.fullmatch(raw):
        raise InvalidId(f"invalid task id {raw!r}: not a base-10 integer")
    value = int(raw)
    if not _ID_MIN <= value <= _ID_MAX:
        raise InvalidId(f"invalid task id {raw!r}: value out of range")
    return value


@router.get("", response=List[TaskOut])
def get_list(request: HttpRequest):
    """List the caller's tasks."""
    user_id = resolve_request_user(request)
    return list_tasks(user_id)


@router.post("/add", response=TaskOut)
def add_task_api(request: HttpRequest, payload: TaskIn):
    """Create a task. Any `id` in the body is ignored."""
    user_id = resolve_request_user(request)
    return add_task(user_id, payload.task, payload.status)


@router.delete("/delete/{task_id}", response=List[TaskOut])
def delete_task_api(request: HttpRequest, task_id: str):
    """Delete a task and return the caller's remaining tasks."""
    number = parse_task_id(task_id)
    user_id = resolve_request_user(request)
    return delete_task(user_id, number)


@router.put("/edit/{task_id}", response=TaskOut)
def edit_task_api(request: HttpRequest, task_id: str, payload: TaskIn):
    """Change a task's description. `status` in the body is ignored."""
    number = parse_task_id(task_id)
    user_id = resolve_request_user(request)
    return edit_task(user_id, number, payload.task)


@router.put("/done/{task_id}", response=TaskOut)
def done_task_api(request: HttpRequest, task_id: str):
    """Flip a task's completion status."""
    number = parse_task_id(task_id)
    user_id = resolve_request_user(request)
    return toggle_done(user_id, number)
