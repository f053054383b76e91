from __future__ import annotations

import json
import logging
from typing import List, Optional

from pydantic import ValidationError

from generation.catalog import timeframe_at
from storage.kv_store import KeyValueStore
from taskgen.ids import generate_id
from taskgen.models import Task, TaskUpdate

logger = logging.getLogger(__name__)

TASKS_KEY = "taskgen.tasks.v1"
WEBHOOK_URL_KEY = "taskgen.webhookUrl.v1"
CONTEXT_KEY = "taskgen.context.v1"


class TaskStore:
    """Owns the persisted task list, webhook URL and last generation context."""

    def __init__(self, kv: KeyValueStore):
        self.kv = kv

    # ---- task list ----

    def load(self) -> List[Task]:
        raw = self.kv.get(TASKS_KEY)
        if not raw:
            return []
        try:
            data = json.loads(raw)
            if not isinstance(data, list):
                logger.warning("Stored tasks are not a list, starting empty")
                return []
            return [Task(**item) for item in data]
        except (ValueError, TypeError, ValidationError) as e:
            logger.warning(f"Failed to parse stored tasks: {e}")
            return []

    def save(self, tasks: List[Task]) -> None:
        self.kv.set(TASKS_KEY, json.dumps([t.model_dump() for t in tasks], ensure_ascii=False))

    def get(self, task_id: str) -> Optional[Task]:
        return next((t for t in self.load() if t.id == task_id), None)

    def replace(self, tasks: List[Task]) -> List[Task]:
        self.save(tasks)
        return tasks

    def add_blank(self) -> Task:
        tasks = self.load()
        task = Task(
            id=generate_id(),
            name="New Task",
            description="Describe the task...",
            timeframe=timeframe_at(len(tasks)),
            completed=False,
        )
        tasks.append(task)
        self.save(tasks)
        return task

    def edit(self, task_id: str, update: TaskUpdate) -> Optional[Task]:
        changes = update.model_dump(exclude_unset=True, exclude_none=True)
        tasks = self.load()
        for i, t in enumerate(tasks):
            if t.id == task_id:
                tasks[i] = t.model_copy(update=changes)
                self.save(tasks)
                return tasks[i]
        return None

    def delete(self, task_id: str) -> bool:
        tasks = self.load()
        kept = [t for t in tasks if t.id != task_id]
        if len(kept) == len(tasks):
            return False
        self.save(kept)
        return True

    def toggle(self, task_id: str) -> Optional[Task]:
        tasks = self.load()
        for i, t in enumerate(tasks):
            if t.id == task_id:
                tasks[i] = t.model_copy(update={"completed": not t.completed})
                self.save(tasks)
                return tasks[i]
        return None

    # ---- settings ----

    def webhook_url(self) -> str:
        return self.kv.get(WEBHOOK_URL_KEY) or ""

    def set_webhook_url(self, url: Optional[str]) -> None:
        self.kv.set(WEBHOOK_URL_KEY, url or "")

    def context(self) -> str:
        return self.kv.get(CONTEXT_KEY) or ""

    def set_context(self, context: str) -> None:
        self.kv.set(CONTEXT_KEY, context)
