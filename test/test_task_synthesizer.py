import itertools

import pytest

from generation.catalog import DOMAIN_HINTS, ROLES, TIMEFRAMES
from generation.task_synthesizer import TaskSynthesizer, requested_count, synthesize

ROLE_NAMES = [name for _, name in ROLES]


def test_exam_with_four_tasks():
    tasks = synthesize("I need to prepare for an exam, make 4 tasks")
    assert len(tasks) == 4
    assert [t.name for t in tasks] == ROLE_NAMES[:4]
    assert [t.description for t in tasks] == [
        DOMAIN_HINTS["exam"][role] for role, _ in ROLES[:4]
    ]
    assert [t.timeframe for t in tasks] == TIMEFRAMES[0:4]
    assert not any(t.completed for t in tasks)


def test_generic_request_of_one_is_clamped_and_offset():
    tasks = synthesize("random babble, 1 task")
    assert len(tasks) == 3
    assert [t.timeframe for t in tasks] == [TIMEFRAMES[1], TIMEFRAMES[2], TIMEFRAMES[3]]
    assert tasks[0].description == DOMAIN_HINTS["generic"]["research"]


def test_default_is_full_role_list():
    tasks = synthesize("Plan a trip to Lisbon")
    assert [t.name for t in tasks] == ROLE_NAMES
    assert tasks[-1].description == DOMAIN_HINTS["travel"]["review"]


@pytest.mark.parametrize(
    "text,expected",
    [
        ("0 tasks", 3),
        ("1 task", 3),
        ("4 tasks", 4),
        ("10 tasks", 5),
        ("3task", 3),
        ("give me 5   tasks", 5),
        ("no count here", 5),
        ("4 Tasks", 5),
        ("4 tasks, no wait 3 tasks", 4),
        ("exam 4\u00a0tasks", 4),
        ("\u0664 tasks", 5),
    ],
)
def test_requested_count(text, expected):
    assert requested_count(text) == expected


@pytest.mark.parametrize(
    "text",
    ["", "exam", "move 2 tasks", "99 tasks for my gym plan", "a b c", "7 tasks about parts"],
)
def test_length_and_role_order(text):
    tasks = synthesize(text)
    assert 3 <= len(tasks) <= 5
    assert [t.name for t in tasks] == ROLE_NAMES[: len(tasks)]
    assert len({t.id for t in tasks}) == len(tasks)


def test_injected_id_factory():
    counter = itertools.count()
    synth = TaskSynthesizer(id_factory=lambda: f"id-{next(counter)}")
    tasks = synth.synthesize("pack boxes, 3 tasks")
    assert [t.id for t in tasks] == ["id-0", "id-1", "id-2"]
