"""DTOs and request/response schemas for the Tasks app."""
from dataclasses import dataclass

from ninja import Schema
from pydantic import StrictBool, StrictStr, field_validator


@dataclass(frozen=True)
class TaskDTO:
    id: int
    task: str
    status: bool


class TaskIn(Schema):
    # Absent or null fields fall back to empty/false; `id` is ignored if sent
    task: StrictStr = ""
    status: StrictBool = False

    @field_validator('task', mode='before')
    @classmethod
    def null_task(cls, value):
        return "" if value is None else value

    @field_validator('status', mode='before')
    @classmethod
    def null_status(cls, value):
        return False if value is None else value


class TaskOut(Schema):
    id: int
    task: str
    status: bool
