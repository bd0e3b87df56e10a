from mytasks.models.Task import Task


class TaskResponse(Task):
    list_href: str = "/tasks"
