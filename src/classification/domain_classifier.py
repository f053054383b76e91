from __future__ import annotations

import re
from typing import Optional

from taskgen.models import Domain

# Checked in order; the first group that matches wins.
DOMAIN_PATTERNS: list[tuple[Domain, re.Pattern[str]]] = [
    ("exam", re.compile(r"exam|study|college|test|syllabus")),
    ("moving", re.compile(r"move|relocat|apartment|pack|shifting")),
    ("pc", re.compile(r"pc|build.*computer|gaming.*rig|components|parts")),
    ("travel", re.compile(r"travel|trip|itinerary|flight|hotel")),
    ("fitness", re.compile(r"fitness|workout|diet|health|gym")),
]


def classify(context: Optional[str]) -> Domain:
    lc = (context or "").lower()
    if not lc.strip():
        return "generic"

    for domain, pattern in DOMAIN_PATTERNS:
        if pattern.search(lc):
            return domain
    return "generic"


class DomainClassifier:
    """Keyword-based classifier mapping free-text context to a task domain."""

    def classify(self, context: Optional[str]) -> Domain:
        return classify(context)
