import logging
import time
from typing import Optional

import httpx
from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException
from pydantic import BaseModel

from api import state
from api.backend import BackendAPI
from api.dependencies import get_backend, get_task_store, get_webhook_client, get_webhook_url
from api.metrics import (
    NOTIFICATIONS_TOTAL,
    REQUESTS_TOTAL,
    REQUEST_LATENCY_SECONDS,
    TASKS_CURRENT,
    TASKS_GENERATED_TOTAL,
)
from notification.webhook_notifier import notify_completion_async
from storage.task_store import TaskStore
from taskgen.models import NotifyOutcome, Task, TaskUpdate

router = APIRouter()
logger = logging.getLogger(__name__)


class GenerateIn(BaseModel):
    context: str = ""


class ToggleIn(BaseModel):
    # text currently in the context field; falls back to the last generation context
    context: Optional[str] = None


def _tasks_body(tasks: list[Task]) -> dict:
    return {
        "tasks": [t.model_dump() for t in tasks],
        "total": len(tasks),
        "completed": sum(1 for t in tasks if t.completed),
    }


def _not_found(task_id: str) -> HTTPException:
    return HTTPException(status_code=404, detail=f"Task {task_id} not found")


def _record_outcome(outcome: NotifyOutcome) -> None:
    state.set_notice("success" if outcome.ok else "error", outcome.message)
    NOTIFICATIONS_TOTAL.labels(outcome=outcome.kind).inc()


async def _send_completion(
    task: Task,
    context: str,
    destination: str,
    client: Optional[httpx.AsyncClient],
) -> None:
    outcome = await notify_completion_async(task, context, destination, client=client)
    logger.info(f"Completion webhook for {task.id}: {outcome.kind}")
    _record_outcome(outcome)


@router.post("/generate")
async def generate_tasks(
    payload: GenerateIn,
    store: TaskStore = Depends(get_task_store),
    backend: BackendAPI = Depends(get_backend),
) -> dict:
    start = time.time()
    context = payload.context.strip()
    if not context:
        state.set_notice("error", "Please enter some context first.")
        REQUESTS_TOTAL.labels(endpoint="/generate", status="rejected").inc()
        raise HTTPException(status_code=400, detail="Please enter some context first.")

    result = backend.generate(context)
    tasks = store.replace(result["tasks"])
    store.set_context(context)
    logger.info(f"Generated {len(tasks)} task(s) for domain '{result['domain']}'")

    notice = state.set_notice("success", f"Generated {len(tasks)} task(s).")

    REQUESTS_TOTAL.labels(endpoint="/generate", status="ok").inc()
    REQUEST_LATENCY_SECONDS.labels(endpoint="/generate").observe(time.time() - start)
    TASKS_GENERATED_TOTAL.labels(domain=result["domain"]).inc(len(tasks))
    TASKS_CURRENT.set(len(tasks))

    return {
        "domain": result["domain"],
        "notice": notice.model_dump(),
        **_tasks_body(tasks),
    }


@router.get("/tasks")
async def list_tasks(store: TaskStore = Depends(get_task_store)) -> dict:
    return _tasks_body(store.load())


@router.post("/tasks", status_code=201)
async def add_blank_task(store: TaskStore = Depends(get_task_store)) -> dict:
    task = store.add_blank()
    TASKS_CURRENT.inc()
    return {"task": task.model_dump()}


@router.patch("/tasks/{task_id}")
async def edit_task(
    task_id: str,
    payload: TaskUpdate,
    store: TaskStore = Depends(get_task_store),
) -> dict:
    task = store.edit(task_id, payload)
    if task is None:
        raise _not_found(task_id)
    return {"task": task.model_dump()}


@router.delete("/tasks/{task_id}")
async def delete_task(task_id: str, store: TaskStore = Depends(get_task_store)) -> dict:
    if not store.delete(task_id):
        raise _not_found(task_id)
    TASKS_CURRENT.dec()
    return {"status": "deleted", "id": task_id}


@router.post("/tasks/{task_id}/toggle")
async def toggle_task(
    task_id: str,
    background_tasks: BackgroundTasks,
    payload: Optional[ToggleIn] = None,
    store: TaskStore = Depends(get_task_store),
    client: Optional[httpx.AsyncClient] = Depends(get_webhook_client),
) -> dict:
    """Flip completion. Only the transition to completed fires the webhook, after the response."""
    task = store.toggle(task_id)
    if task is None:
        raise _not_found(task_id)

    if not task.completed:
        return {"task": task.model_dump(), "notification": "skipped"}

    context = payload.context if payload and payload.context is not None else store.context()
    background_tasks.add_task(
        _send_completion, task, context, get_webhook_url(store), client
    )
    return {"task": task.model_dump(), "notification": "scheduled"}
