from pydantic import BaseModel

from mytasks.models.Task import Status


class TaskUpdate(BaseModel):
    status: Status
