from typing import List, Literal, Optional

from pydantic import BaseModel

from mytasks.models.Task import Status

SortMode = Literal["date", "status"]


class TaskRow(BaseModel):
    id: str
    title: str
    date: str
    date_label: str
    status: Status
    status_label: str
    href: str


class TaskListResponse(BaseModel):
    sort: SortMode
    count: int
    tasks: Optional[List[TaskRow]] = None
    empty_message: Optional[str] = None
    add_href: str = "/tasks/new"


class StatusAction(BaseModel):
    status: Status
    label: str
    disabled: bool


class TaskDetail(BaseModel):
    id: str
    title: str
    description: str
    description_label: str
    date: str
    date_label: str
    location: str
    status: Status
    status_label: str
    actions: List[StatusAction]
    list_href: str = "/tasks"


class TaskForm(BaseModel):
    title: str = ""
    description: str = ""
    location: str = ""
    date: str
