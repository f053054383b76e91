from fastapi import APIRouter, Depends
from pydantic import BaseModel

from api import state
from api.dependencies import get_task_store, get_webhook_url
from storage.task_store import TaskStore

router = APIRouter()


class WebhookIn(BaseModel):
    url: str = ""


@router.get("/settings/webhook")
async def get_webhook(store: TaskStore = Depends(get_task_store)) -> dict:
    return {"url": get_webhook_url(store)}


@router.put("/settings/webhook")
async def set_webhook(payload: WebhookIn, store: TaskStore = Depends(get_task_store)) -> dict:
    store.set_webhook_url(payload.url.strip())
    return {"url": get_webhook_url(store)}


@router.get("/notice")
async def get_notice() -> dict:
    notice = state.notice
    return {"notice": notice.model_dump() if notice is not None else None}


@router.delete("/notice")
async def dismiss_notice() -> dict:
    state.clear_notice()
    return {"notice": None}
