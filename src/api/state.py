import os
from typing import Optional

import httpx

from storage.kv_store import InMemoryStore, JsonFileStore, KeyValueStore
from storage.task_store import TaskStore
from taskgen.models import Notice, NoticeType

# An empty path keeps everything in memory (tests, throwaway sessions).
DATA_PATH = os.getenv("TASKGEN_DATA_PATH", "data/taskgen.json").strip()
DEFAULT_WEBHOOK_URL = os.getenv("TASKGEN_WEBHOOK_URL", "").strip()


def _make_kv_store() -> KeyValueStore:
    if not DATA_PATH:
        return InMemoryStore()
    return JsonFileStore(DATA_PATH)


task_store: TaskStore = TaskStore(_make_kv_store())

# Shared client for outbound webhooks, opened on startup; None means one client per request.
webhook_client: Optional[httpx.AsyncClient] = None

# Transient, dismissible notice shown to the user (last one wins)
notice: Optional[Notice] = None


def set_notice(notice_type: NoticeType, message: str) -> Notice:
    global notice
    notice = Notice(type=notice_type, message=message)
    return notice


def clear_notice() -> None:
    global notice
    notice = None
