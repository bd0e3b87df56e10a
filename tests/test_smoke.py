# tests/test_smoke.py
import os

import httpx
import pytest

BASE = os.getenv("MYTASKS_BASE_URL")  # e.g. "http://localhost:8000" with `python -m mytasks` running

pytestmark = pytest.mark.skipif(not BASE, reason="MYTASKS_BASE_URL not set")


def test_smoke_happy_path():
    assert httpx.get(f"{BASE}/health").status_code == 200

    before = httpx.get(f"{BASE}/tasks").json()["count"]

    # Create a task
    t = httpx.post(f"{BASE}/tasks", json={
        "title": "Buy milk",
        "location": "Store",
        "date": "2024-01-01T10:00:00Z",
    })
    assert t.status_code == 201
    assert t.json()["status"] == "pending"
    task_id = t.json()["id"]

    lst = httpx.get(f"{BASE}/tasks")
    assert lst.status_code == 200
    assert lst.json()["count"] == before + 1
    assert any(x["id"] == task_id for x in lst.json()["tasks"])

    # Update task to completed
    upd = httpx.put(f"{BASE}/tasks/{task_id}", json={"status": "completed"})
    assert upd.status_code == 200
    assert httpx.get(f"{BASE}/tasks/{task_id}").json()["status"] == "completed"

    # Delete task (cleanup)
    assert httpx.delete(f"{BASE}/tasks/{task_id}").status_code == 428
    d = httpx.delete(f"{BASE}/tasks/{task_id}", params={"confirm": "true"})
    assert d.status_code == 204
    assert httpx.get(f"{BASE}/tasks/{task_id}").status_code == 404
