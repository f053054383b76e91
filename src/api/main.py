import logging
import os

import httpx
from fastapi import FastAPI

from api import state
from api.routers import ops, settings, tasks

# Logging configuration
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s [%(levelname)s] %(message)s"
)
logger = logging.getLogger(__name__)

app = FastAPI(title="taskgen")

app.include_router(tasks.router)
app.include_router(settings.router)
app.include_router(ops.router)


@app.on_event("startup")
async def startup() -> None:
    where = state.DATA_PATH or "memory"
    logger.info(f"taskgen started, store: {where}")
    if state.webhook_client is None:
        state.webhook_client = httpx.AsyncClient()
    if not state.task_store.webhook_url() and not state.DEFAULT_WEBHOOK_URL:
        logger.info("No webhook URL configured; completions will not be delivered")


@app.on_event("shutdown")
async def shutdown() -> None:
    if state.webhook_client is not None:
        await state.webhook_client.aclose()
        state.webhook_client = None


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=int(os.getenv("PORT", "8000")))
