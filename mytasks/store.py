"""Redis-backed accessor for the stored task list.

The whole collection lives as one JSON array under a single key. Every
operation reads the full array, changes it in memory and writes it back.
Entries are written back as they were read; only the matched one changes.
"""
import json
import logging
import time
from datetime import datetime, timezone
from typing import Any, Collection, List, Optional

import redis
from pydantic import ValidationError

from mytasks.models import Status, Task

logger = logging.getLogger(__name__)

TASKS_KEY = "my-tasks"


class StorageError(Exception):
    """The stored task list could not be read or written."""


class StatusUnchanged(Exception):
    """The task already has the requested status; nothing was written."""

    def __init__(self, task: Task):
        super().__init__(f"task {task.id} is already {task.status}")
        self.task = task


def new_task_id(taken: Collection[str], now: Optional[float] = None) -> str:
    """Millisecond timestamp id, bumped past any id already in the list."""
    stamp = int((time.time() if now is None else now) * 1000)
    while str(stamp) in taken:
        stamp += 1
    return str(stamp)


def to_iso(moment: datetime) -> str:
    """UTC ISO-8601 with millisecond precision and a trailing Z."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"


def _matches(item: Any, task_id: str) -> bool:
    return isinstance(item, dict) and item.get("id") == task_id


class TaskStore:
    def __init__(self, client: redis.Redis, key: str = TASKS_KEY):
        self.r = client
        self.key = key

    def load_raw(self) -> List[Any]:
        """The stored array exactly as decoded, unknown entries included."""
        try:
            raw = self.r.get(self.key)
        except redis.RedisError as exc:
            raise StorageError(f"could not read {self.key!r}") from exc
        if raw is None:
            return []
        try:
            items = json.loads(raw)
        except ValueError as exc:
            raise StorageError(f"{self.key!r} does not hold valid JSON") from exc
        if not isinstance(items, list):
            raise StorageError(f"{self.key!r} does not hold a JSON array")
        return items

    def save_raw(self, items: List[Any]) -> None:
        try:
            self.r.set(self.key, json.dumps(items))
        except redis.RedisError as exc:
            raise StorageError(f"could not write {self.key!r}") from exc
        logger.debug("Saved %d entries under %r", len(items), self.key)

    def load_tasks(self) -> List[Task]:
        """Readable tasks only; entries that don't validate are skipped, not deleted."""
        tasks = []
        for item in self.load_raw():
            try:
                tasks.append(Task.model_validate(item))
            except ValidationError:
                logger.warning("Skipping unreadable task record: %r", item)
        return tasks

    def get_task(self, task_id: str) -> Optional[Task]:
        for item in self.load_raw():
            if _matches(item, task_id):
                try:
                    return Task.model_validate(item)
                except ValidationError:
                    logger.warning("Task %s is stored in an unreadable shape: %r", task_id, item)
                    return None
        return None

    def add_task(
        self,
        title: str,
        location: str,
        description: str = "",
        date: Optional[datetime] = None,
    ) -> Task:
        items = self.load_raw()
        taken = {str(item.get("id")) for item in items if isinstance(item, dict)}
        task = Task(
            id=new_task_id(taken),
            title=title.strip(),
            description=description.strip(),
            date=to_iso(date or datetime.now(timezone.utc)),
            location=location.strip(),
            status="pending",
        )
        items.append(task.model_dump())
        self.save_raw(items)
        logger.info("Created task %s", task.id)
        return task

    def set_status(self, task_id: str, status: Status) -> Optional[Task]:
        """Patch the status of one entry and rewrite the list.

        Returns None if the id is unknown (or its entry is unreadable) and
        raises StatusUnchanged when the task already has that status.
        """
        items = self.load_raw()
        for i, item in enumerate(items):
            if not _matches(item, task_id):
                continue
            try:
                current = Task.model_validate(item)
            except ValidationError:
                logger.warning("Task %s is stored in an unreadable shape: %r", task_id, item)
                return None
            if current.status == status:
                raise StatusUnchanged(current)
            items[i] = {**item, "status": status}
            self.save_raw(items)
            logger.info("Task %s is now %s", task_id, status)
            return Task.model_validate(items[i])
        return None

    def remove_task(self, task_id: str) -> bool:
        items = self.load_raw()
        remaining = [item for item in items if not _matches(item, task_id)]
        if len(remaining) == len(items):
            return False
        self.save_raw(remaining)
        logger.info("Deleted task %s", task_id)
        return True
