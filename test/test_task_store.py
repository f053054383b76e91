import json

from generation.catalog import timeframe_at
from generation.task_synthesizer import synthesize
from storage.kv_store import InMemoryStore, JsonFileStore
from storage.task_store import CONTEXT_KEY, TASKS_KEY, WEBHOOK_URL_KEY, TaskStore
from taskgen.models import TaskUpdate


def test_empty_store_loads_empty_list(task_store):
    assert task_store.load() == []
    assert task_store.webhook_url() == ""


def test_replace_then_load(task_store):
    tasks = synthesize("exam prep")
    task_store.replace(tasks)
    assert task_store.load() == tasks


def test_malformed_json_falls_back_to_empty():
    store = TaskStore(InMemoryStore({TASKS_KEY: "{not valid json"}))
    assert store.load() == []


def test_non_list_falls_back_to_empty():
    store = TaskStore(InMemoryStore({TASKS_KEY: json.dumps({"id": "x"})}))
    assert store.load() == []


def test_invalid_items_fall_back_to_empty():
    store = TaskStore(InMemoryStore({TASKS_KEY: json.dumps([{"name": "no id"}])}))
    assert store.load() == []


def test_add_blank_uses_list_length_for_timeframe(task_store):
    task_store.replace(synthesize("exam, 3 tasks"))
    task = task_store.add_blank()
    assert task.name == "New Task"
    assert task.description == "Describe the task..."
    assert task.timeframe == timeframe_at(3)
    assert not task.completed
    assert task_store.load()[-1] == task


def test_add_blank_ids_are_unique(task_store):
    ids = {task_store.add_blank().id for _ in range(20)}
    assert len(ids) == 20


def test_edit_keeps_id_and_unset_fields(task_store):
    original = task_store.add_blank()
    edited = task_store.edit(original.id, TaskUpdate(name="Pack kitchen", timeframe="3 hours"))
    assert edited.id == original.id
    assert edited.name == "Pack kitchen"
    assert edited.timeframe == "3 hours"
    assert edited.description == original.description
    assert task_store.get(original.id) == edited


def test_edit_missing_returns_none(task_store):
    assert task_store.edit("nope", TaskUpdate(name="x")) is None


def test_delete(task_store):
    a = task_store.add_blank()
    b = task_store.add_blank()
    assert task_store.delete(a.id)
    assert [t.id for t in task_store.load()] == [b.id]
    assert not task_store.delete(a.id)


def test_toggle_flips_both_ways(task_store):
    t = task_store.add_blank()
    assert task_store.toggle(t.id).completed is True
    assert task_store.toggle(t.id).completed is False
    assert task_store.toggle("missing") is None


def test_settings_roundtrip():
    kv = InMemoryStore()
    store = TaskStore(kv)
    store.set_webhook_url("https://example.com/hook")
    store.set_context("moving out")
    assert kv.get(WEBHOOK_URL_KEY) == "https://example.com/hook"
    assert kv.get(CONTEXT_KEY) == "moving out"
    store.set_webhook_url(None)
    assert store.webhook_url() == ""


def test_json_file_store_persists(tmp_path):
    path = tmp_path / "data" / "store.json"
    store = TaskStore(JsonFileStore(path=str(path)))
    task = store.add_blank()

    reopened = TaskStore(JsonFileStore(path=str(path)))
    assert reopened.load() == [task]


def test_json_file_store_corrupted_file(tmp_path):
    p = tmp_path / "store.json"
    p.write_text("{not valid json")
    kv = JsonFileStore(path=str(p))
    assert kv.get(TASKS_KEY) is None
    assert TaskStore(kv).load() == []


def test_json_file_store_non_object(tmp_path):
    p = tmp_path / "store.json"
    p.write_text("[1, 2, 3]")
    assert JsonFileStore(path=str(p)).get("anything") is None
