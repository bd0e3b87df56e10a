import logging
from functools import lru_cache

import redis
from fastapi import Depends, FastAPI, HTTPException, Query, Response

from mytasks.config import get_settings
from mytasks.models import SortMode, TaskCreate, TaskDetail, TaskForm, TaskListResponse, TaskResponse, TaskUpdate
from mytasks.store import StatusUnchanged, StorageError, TaskStore
from mytasks.views import blank_form, build_detail_view, build_list_view

logger = logging.getLogger(__name__)

app = FastAPI(title="My Tasks")

CONFIRM_DELETE = "Are you sure you want to delete this task?"


@lru_cache(maxsize=1)
def get_store() -> TaskStore:
    settings = get_settings()
    r = redis.Redis(
        host=settings.redis_host,
        port=settings.redis_port,
        db=settings.redis_db,
        decode_responses=True,
    )
    return TaskStore(r, key=settings.tasks_key)


@app.get("/health")
async def health():
    return {"status": "healthy"}


@app.get("/tasks", response_model=TaskListResponse)
async def list_tasks(sort: SortMode = Query(default="date"), store: TaskStore = Depends(get_store)):
    try:
        tasks = store.load_tasks()
    except StorageError:
        logger.exception("Error fetching tasks")
        tasks = []
    return build_list_view(tasks, sort)


@app.get("/tasks/new", response_model=TaskForm)
async def new_task_form():
    return blank_form()


@app.post("/tasks", status_code=201, response_model=TaskResponse)
async def create_task(task: TaskCreate, store: TaskStore = Depends(get_store)):
    error = task.validation_error()
    if error:
        raise HTTPException(status_code=422, detail=error)
    try:
        created = store.add_task(
            title=task.title,
            location=task.location,
            description=task.description or "",
            date=task.date,
        )
    except StorageError:
        logger.exception("Failed to save task")
        raise HTTPException(status_code=503, detail="Failed to save task. Please try again.")
    return TaskResponse(**created.model_dump())


@app.get("/tasks/{task_id}", response_model=TaskDetail)
async def get_task(task_id: str, store: TaskStore = Depends(get_store)):
    try:
        task = store.get_task(task_id)
    except StorageError:
        logger.exception("Failed to fetch task details")
        raise HTTPException(status_code=503, detail="Could not load task details.")
    if task is None:
        raise HTTPException(status_code=404, detail="Task not found")
    return build_detail_view(task)


@app.put("/tasks/{task_id}", response_model=TaskResponse)
async def update_task(task_id: str, update: TaskUpdate, store: TaskStore = Depends(get_store)):
    try:
        updated = store.set_status(task_id, update.status)
    except StatusUnchanged:
        raise HTTPException(status_code=409, detail=f"Task is already {update.status}.")
    except StorageError:
        logger.exception("Could not update status of task %s", task_id)
        raise HTTPException(status_code=503, detail="Could not update task status.")
    if updated is None:
        raise HTTPException(status_code=404, detail="Task not found")
    return TaskResponse(**updated.model_dump())


@app.delete("/tasks/{task_id}", status_code=204)
async def delete_task(task_id: str, confirm: bool = Query(default=False), store: TaskStore = Depends(get_store)):
    if not confirm:
        raise HTTPException(status_code=428, detail=CONFIRM_DELETE)
    try:
        removed = store.remove_task(task_id)
    except StorageError:
        logger.exception("Could not delete task %s", task_id)
        raise HTTPException(status_code=503, detail="Could not delete task.")
    if not removed:
        raise HTTPException(status_code=404, detail="Task not found")
    return Response(status_code=204)
