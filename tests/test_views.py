# tests/test_views.py

from __future__ import annotations

from datetime import datetime, timezone

from mytasks.models import Task
from mytasks.views import (
    blank_form,
    build_detail_view,
    build_list_view,
    long_date_label,
    parse_date,
    short_date_label,
    sort_tasks,
    status_label,
)


def make(id: str, date: str = "2024-01-01T10:00:00.000Z", status: str = "pending", **kw) -> Task:
    return Task(id=id, title=kw.pop("title", id), date=date, location="Home", status=status, **kw)


def test_parse_date_accepts_z_offsets_and_naive_values() -> None:
    assert parse_date("2024-01-01T10:00:00Z") == datetime(2024, 1, 1, 10, tzinfo=timezone.utc)
    assert parse_date("2024-01-01T10:00:00") == datetime(2024, 1, 1, 10, tzinfo=timezone.utc)
    assert parse_date("garbage") is None


def test_sort_tasks_returns_copy() -> None:
    tasks = [make("late", "2024-02-01T00:00:00Z"), make("early", "2024-01-01T00:00:00Z")]
    result = sort_tasks(tasks, "date")
    assert [t.id for t in result] == ["early", "late"]
    assert [t.id for t in tasks] == ["late", "early"]


def test_sort_by_date_keeps_ties_in_stored_order() -> None:
    tasks = [make("1"), make("2"), make("3", "2023-12-31T23:59:59.999Z")]
    assert [t.id for t in sort_tasks(tasks, "date")] == ["3", "1", "2"]


def test_labels() -> None:
    assert status_label("inProgress") == "In Progress"
    assert status_label("cancelled") == "cancelled"
    assert short_date_label("2024-07-04T15:30:00.000Z") == "Jul 4, 2024 - 03:30 PM"
    assert long_date_label("2024-07-04T15:30:00.000Z") == "July 4, 2024 at 03:30 PM"
    assert long_date_label("") == "Invalid Date"


def test_list_view_rows() -> None:
    view = build_list_view([make("1", status="inProgress", title="Write report")], "status")
    assert view.count == 1
    assert view.empty_message is None
    row = view.tasks[0]
    assert row.title == "Write report"
    assert row.status_label == "In Progress"
    assert row.href == "/tasks/1"


def test_detail_view_keeps_description() -> None:
    detail = build_detail_view(make("1", status="completed", description="2% organic"))
    assert detail.description_label == "2% organic"
    assert [a.status for a in detail.actions if a.disabled] == ["completed"]


def test_blank_form_uses_given_moment() -> None:
    form = blank_form(datetime(2024, 1, 1, 10, tzinfo=timezone.utc))
    assert form.date == "2024-01-01T10:00:00.000Z"
    assert form.title == form.description == form.location == ""
