import logging

from fastapi import APIRouter, Depends, Response
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST

from api import state
from api.dependencies import get_task_store
from api.metrics import TASKS_CURRENT
from storage.task_store import TaskStore

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/health")
async def health_check(store: TaskStore = Depends(get_task_store)) -> dict:
    """Health check endpoint for container orchestration."""
    return {
        "status": "healthy",
        "store": "file" if state.DATA_PATH else "in-memory",
        "tasks": len(store.load()),
    }


@router.get("/metrics")
async def metrics(store: TaskStore = Depends(get_task_store)) -> Response:
    """
    Prometheus scrape endpoint.
    """
    TASKS_CURRENT.set(len(store.load()))
    data = generate_latest()
    return Response(content=data, media_type=CONTENT_TYPE_LATEST)
