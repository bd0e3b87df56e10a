from .Task import STATUSES, Status, Task
from .TaskCreate import TaskCreate
from .TaskResponse import TaskResponse
from .TaskUpdate import TaskUpdate
from .TaskView import SortMode, StatusAction, TaskDetail, TaskForm, TaskListResponse, TaskRow
