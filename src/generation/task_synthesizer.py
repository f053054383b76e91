from __future__ import annotations

import logging
import re
from typing import Callable, Optional

from classification.domain_classifier import classify
from generation.catalog import ROLES, hint_for, timeframe_at
from taskgen.ids import generate_id
from taskgen.models import Domain, Task

logger = logging.getLogger(__name__)

MIN_TASKS = 3
MAX_TASKS = 5

_COUNT_RE = re.compile(r"([0-9]+)\s*task")


def requested_count(context: Optional[str]) -> int:
    """Number of tasks asked for via "<N> task(s)" in the context, clamped to [3, 5]."""
    match = _COUNT_RE.search(context or "")
    if match is None:
        return len(ROLES)
    return min(MAX_TASKS, max(MIN_TASKS, int(match.group(1))))


def synthesize(
    context: Optional[str],
    *,
    id_factory: Callable[[], str] = generate_id,
    domain: Optional[Domain] = None,
) -> list[Task]:
    if domain is None:
        domain = classify(context)
    # generic tasks start one step later in the timeframe cycle
    offset = 1 if domain == "generic" else 0

    tasks = [
        Task(
            id=id_factory(),
            name=name,
            description=hint_for(domain, role),
            timeframe=timeframe_at(i + offset),
            completed=False,
        )
        for i, (role, name) in enumerate(ROLES)
    ]

    desired = requested_count(context)
    logger.debug(f"Synthesized {desired} task(s) for domain '{domain}'")
    return tasks[:desired]


class TaskSynthesizer:

    def __init__(self, id_factory: Callable[[], str] = generate_id):
        self.id_factory = id_factory

    def synthesize(self, context: Optional[str], domain: Optional[Domain] = None) -> list[Task]:
        return synthesize(context, id_factory=self.id_factory, domain=domain)
