from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


Domain = Literal["exam", "moving", "pc", "travel", "fitness", "generic"]

Role = Literal["research", "plan", "resources", "execute", "review"]

OutcomeKind = Literal[
    "success",
    "configuration_error",
    "transport_error",
    "remote_rejection",
]

NoticeType = Literal["success", "error", "info"]


class Task(BaseModel):
    id: str = Field(..., min_length=1)
    name: str
    description: str = ""
    timeframe: str = ""
    completed: bool = False


class TaskUpdate(BaseModel):
    """Partial edit of a task. Fields left unset keep their current value."""

    name: Optional[str] = None
    description: Optional[str] = None
    timeframe: Optional[str] = None


class TaskSnapshot(BaseModel):
    id: str
    name: str
    description: str
    timeframe: str
    completed: bool = True


class NotificationPayload(BaseModel):
    event: Literal["task_completed"] = "task_completed"
    timestamp: str
    source: str = "taskgen-local-app"
    version: int = 1
    task: TaskSnapshot
    context: str = ""


class NotifyOutcome(BaseModel):
    model_config = ConfigDict(frozen=True)

    ok: bool
    kind: OutcomeKind
    message: str
    # only set for remote rejections
    status_code: Optional[int] = None
    status_text: Optional[str] = None


class Notice(BaseModel):
    type: NoticeType = "info"
    message: str
