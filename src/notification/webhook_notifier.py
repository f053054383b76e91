from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable, Optional

import httpx

from taskgen.models import NotificationPayload, NotifyOutcome, Task, TaskSnapshot

logger = logging.getLogger(__name__)

SOURCE = "taskgen-local-app"
SCHEMA_VERSION = 1
HEADERS = {"Content-Type": "application/json"}

MISSING_DESTINATION_MESSAGE = "No webhook URL set. Open Settings to add one."


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _iso_timestamp(now: datetime) -> str:
    now = now.astimezone(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def build_payload(
    task: Task,
    context: Optional[str],
    now: Optional[Callable[[], datetime]] = None,
) -> NotificationPayload:
    """Snapshot ``task`` as completed, stamped with the current UTC time."""
    now = now or _utc_now
    return NotificationPayload(
        timestamp=_iso_timestamp(now()),
        source=SOURCE,
        version=SCHEMA_VERSION,
        task=TaskSnapshot(
            id=task.id,
            name=task.name,
            description=task.description,
            timeframe=task.timeframe,
            completed=True,
        ),
        context=context or "",
    )


def _missing_destination() -> NotifyOutcome:
    logger.warning("Webhook skipped: no destination configured")
    return NotifyOutcome(
        ok=False,
        kind="configuration_error",
        message=MISSING_DESTINATION_MESSAGE,
    )


def _from_response(response: httpx.Response, body_text: str) -> NotifyOutcome:
    if response.is_success:
        logger.info(f"Webhook delivered ({response.status_code})")
        return NotifyOutcome(ok=True, kind="success", message="Webhook sent successfully.")

    status_text = response.reason_phrase or ""
    if body_text:
        logger.warning(f"Webhook error body: {body_text}")
    return NotifyOutcome(
        ok=False,
        kind="remote_rejection",
        message=f"Webhook failed: {response.status_code} {status_text}".rstrip(),
        status_code=response.status_code,
        status_text=status_text,
    )


def _from_transport_error(err: Exception) -> NotifyOutcome:
    logger.error(f"Webhook error: {err!r}")
    return NotifyOutcome(
        ok=False,
        kind="transport_error",
        message=f"Webhook error: {str(err) or 'Network error'}",
    )


def notify_completion(
    task: Task,
    context: Optional[str],
    destination: Optional[str],
    *,
    client: Optional[httpx.Client] = None,
    now: Optional[Callable[[], datetime]] = None,
) -> NotifyOutcome:
    """POST a ``task_completed`` event to ``destination``. Single attempt, never raises."""
    url = (destination or "").strip()
    if not url:
        return _missing_destination()

    payload = build_payload(task, context, now=now).model_dump()

    try:
        if client is None:
            with httpx.Client() as owned:
                response = owned.post(url, json=payload, headers=HEADERS)
        else:
            response = client.post(url, json=payload, headers=HEADERS)
    # ValueError: body text httpx cannot encode, e.g. lone surrogates
    except (httpx.HTTPError, httpx.InvalidURL, ValueError) as e:
        return _from_transport_error(e)

    return _from_response(response, response.text)


async def notify_completion_async(
    task: Task,
    context: Optional[str],
    destination: Optional[str],
    *,
    client: Optional[httpx.AsyncClient] = None,
    now: Optional[Callable[[], datetime]] = None,
) -> NotifyOutcome:
    url = (destination or "").strip()
    if not url:
        return _missing_destination()

    payload = build_payload(task, context, now=now).model_dump()

    try:
        if client is None:
            async with httpx.AsyncClient() as owned:
                response = await owned.post(url, json=payload, headers=HEADERS)
        else:
            response = await client.post(url, json=payload, headers=HEADERS)
    # ValueError: body text httpx cannot encode, e.g. lone surrogates
    except (httpx.HTTPError, httpx.InvalidURL, ValueError) as e:
        return _from_transport_error(e)

    return _from_response(response, response.text)
