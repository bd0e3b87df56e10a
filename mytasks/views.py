"""Screen state derived from the stored tasks: sorting, labels, actions."""
from datetime import datetime, timezone
from typing import List, Optional

from mytasks.models import (
    STATUSES,
    SortMode,
    StatusAction,
    Task,
    TaskDetail,
    TaskForm,
    TaskListResponse,
    TaskRow,
)
from mytasks.store import to_iso

EMPTY_MESSAGE = "No tasks yet. Add one!"
NO_DESCRIPTION = "No description provided."
INVALID_DATE = "Invalid Date"

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def parse_date(value: str) -> Optional[datetime]:
    """Parse a stored ISO-8601 date; naive values are taken as UTC."""
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    try:
        moment = datetime.fromisoformat(value)
    except ValueError:
        return None
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment


def sort_tasks(tasks: List[Task], mode: SortMode) -> List[Task]:
    """Return a sorted copy; the stored order is left alone and ties keep it."""
    if mode == "status":
        return sorted(tasks, key=lambda t: t.status)

    def by_date(task: Task):
        moment = parse_date(task.date)
        # unparseable dates go last
        return (moment is None, moment or _EPOCH)

    return sorted(tasks, key=by_date)


def status_label(status: str) -> str:
    return "In Progress" if status == "inProgress" else status


def action_label(status: str) -> str:
    return "in progress" if status == "inProgress" else status


def short_date_label(value: str) -> str:
    moment = parse_date(value)
    if moment is None:
        return INVALID_DATE
    return f"{moment:%b} {moment.day}, {moment.year} - {moment:%I:%M %p}"


def long_date_label(value: str) -> str:
    moment = parse_date(value)
    if moment is None:
        return INVALID_DATE
    return f"{moment:%B} {moment.day}, {moment.year} at {moment:%I:%M %p}"


def status_actions(current: str) -> List[StatusAction]:
    return [
        StatusAction(status=st, label=action_label(st), disabled=st == current)
        for st in STATUSES
    ]


def build_list_view(tasks: List[Task], mode: SortMode) -> TaskListResponse:
    if not tasks:
        return TaskListResponse(sort=mode, count=0, empty_message=EMPTY_MESSAGE)
    rows = [
        TaskRow(
            id=t.id,
            title=t.title,
            date=t.date,
            date_label=short_date_label(t.date),
            status=t.status,
            status_label=status_label(t.status),
            href=f"/tasks/{t.id}",
        )
        for t in sort_tasks(tasks, mode)
    ]
    return TaskListResponse(sort=mode, count=len(rows), tasks=rows)


def build_detail_view(task: Task) -> TaskDetail:
    return TaskDetail(
        id=task.id,
        title=task.title,
        description=task.description,
        description_label=task.description or NO_DESCRIPTION,
        date=task.date,
        date_label=long_date_label(task.date),
        location=task.location,
        status=task.status,
        status_label=status_label(task.status),
        actions=status_actions(task.status),
    )


def blank_form(now: Optional[datetime] = None) -> TaskForm:
    return TaskForm(date=to_iso(now or datetime.now(timezone.utc)))
