from typing import Optional

import httpx

from api import state
from api.backend import BackendAPI
from storage.task_store import TaskStore

backend = BackendAPI()


def get_task_store() -> TaskStore:
    return state.task_store


def get_backend() -> BackendAPI:
    return backend


def get_webhook_client() -> Optional[httpx.AsyncClient]:
    return state.webhook_client


def get_webhook_url(store: TaskStore) -> str:
    return store.webhook_url() or state.DEFAULT_WEBHOOK_URL
