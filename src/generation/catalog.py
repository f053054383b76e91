from __future__ import annotations

from typing import Dict

from taskgen.models import Domain, Role

# Fixed role order; synthesized lists are truncations of this sequence.
ROLES: list[tuple[Role, str]] = [
    ("research", "Research essentials"),
    ("plan", "Draft a plan"),
    ("resources", "List resources & tools"),
    ("execute", "Execute first milestone"),
    ("review", "Review & next steps"),
]

DOMAIN_HINTS: Dict[Domain, Dict[Role, str]] = {
    "exam": {
        "research": "Outline subjects and weightage from the syllabus.",
        "plan": "Create a 2-week timetable with daily topics.",
        "resources": "Gather notes, past papers, and flashcards.",
        "execute": "Study the first topic and attempt 10 practice questions.",
        "review": "Revise mistakes and adjust timetable.",
    },
    "moving": {
        "research": "List must-have vs. discard items.",
        "plan": "Create packing schedule and room-wise checklist.",
        "resources": "Arrange boxes, labels, and transport.",
        "execute": "Pack non-essentials and label boxes.",
        "review": "Confirm mover timings; update address where needed.",
    },
    "pc": {
        "research": "Pick target use-case, budget, and performance goals.",
        "plan": "Draft parts list (CPU, GPU, RAM, SSD, PSU, case).",
        "resources": "Compare prices; ensure component compatibility.",
        "execute": "Order parts or assemble a mock build in a part-picker tool.",
        "review": "Cable-manage, run benchmarks, and validate thermals.",
    },
    "travel": {
        "research": "Choose destination, season, and budget.",
        "plan": "Sketch a 3–5 day itinerary with must-see spots.",
        "resources": "Check visas, flights, accommodation, and insurance.",
        "execute": "Book flights/hotels and set calendar reminders.",
        "review": "Share itinerary and offline maps to your phone.",
    },
    "fitness": {
        "research": "Define goals (strength, fat-loss, endurance).",
        "plan": "Schedule 3–4 weekly sessions with progressive overload.",
        "resources": "Set up gear, nutrition plan, and tracker app.",
        "execute": "Complete first workout and log metrics.",
        "review": "Assess soreness, sleep, and adjust plan.",
    },
    "generic": {
        "research": "Clarify objectives and success criteria.",
        "plan": "Break work into 3–5 milestones.",
        "resources": "List tools, people, or budget needed.",
        "execute": "Complete first milestone with a small deliverable.",
        "review": "Retrospect and plan the next block.",
    },
}

TIMEFRAMES: list[str] = [
    "15 minutes",
    "30 minutes",
    "1 hour",
    "2 hours",
    "Half day",
    "1 day",
    "2–3 days",
]


def hint_for(domain: Domain, role: Role) -> str:
    return DOMAIN_HINTS[domain][role]


def timeframe_at(index: int) -> str:
    """Return the duration label at ``index``, wrapping around the cycle."""
    if index < 0:
        raise ValueError("timeframe index must be non-negative")
    return TIMEFRAMES[index % len(TIMEFRAMES)]
