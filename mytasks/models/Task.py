from typing import Literal, Optional, Tuple, get_args

from pydantic import BaseModel, ConfigDict, field_validator

Status = Literal["pending", "inProgress", "completed", "cancelled"]
STATUSES: Tuple[str, ...] = get_args(Status)


class Task(BaseModel):
    """One record of the stored task list, as it is persisted.

    Keys this model does not know are kept, so they survive a rewrite.
    """

    model_config = ConfigDict(extra="allow")

    id: str
    title: str
    description: str = ""
    date: str
    location: str
    status: Status = "pending"

    @field_validator("description", mode="before")
    @classmethod
    def _none_description(cls, value: Optional[str]) -> str:
        return "" if value is None else value
