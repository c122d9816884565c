# app/routers/task.py
import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlmodel import Session

from app.core.errors import TaskServiceError
from app.db.session import get_session
from app.models.task import Task
from app.schemas.task import (
    ErrorOut,
    MessageOut,
    TaskCreate,
    TaskMessage,
    TaskRead,
    TaskUpdate,
)
from app.services.task_store import TaskStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tasks", tags=["Tasks"])

_EXAMPLE_TASK = {
    "id": "0b6f8b4e-5f5c-4a3e-9a51-2f0c3c1f7d11",
    "title": "New Task",
    "description": "Description for the new task",
    "completed": False,
}


def _bad_request(example: str) -> dict:
    return {
        "model": ErrorOut,
        "description": "Bad Request",
        "content": {"application/json": {"example": {"error": example}}},
    }


def get_task_store(db: Session = Depends(get_session)) -> TaskStore:
    return TaskStore(db)


def _serialize(task: Task) -> TaskRead:
    return TaskRead.model_validate(task, from_attributes=True)


def _error(status_code: int, exc: Exception) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": str(exc)})


@router.get(
    "",
    response_model=list[TaskRead],
    summary="Get all tasks",
    description="Retrieve a list of all tasks",
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": [
                        _EXAMPLE_TASK,
                        {
                            "id": "5d0e2c1a-8b0f-4c47-b1d6-64f8c3a2e9b0",
                            "title": "Task 2",
                            "description": "Description for Task 2",
                            "completed": True,
                        },
                    ]
                }
            }
        },
        500: {"model": ErrorOut, "description": "Internal server error"},
    },
)
def list_tasks(store: TaskStore = Depends(get_task_store)):
    try:
        tasks = store.find_all()
    except TaskServiceError as exc:
        logger.error("Listing tasks failed: %s", exc)
        return _error(500, exc)
    return [_serialize(t) for t in tasks]


@router.post(
    "",
    response_model=TaskMessage,
    summary="Create a new task",
    description="Create a new task with the provided data",
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {"message": "Added successfully!", "task": _EXAMPLE_TASK}
                }
            }
        },
        400: _bad_request("Invalid data provided"),
    },
)
def create_task(payload: TaskCreate, store: TaskStore = Depends(get_task_store)):
    try:
        task = store.create(payload)
    except TaskServiceError as exc:
        logger.warning("Creating task failed: %s", exc)
        return _error(400, exc)
    return TaskMessage(message="Added successfully!", task=_serialize(task))


@router.put(
    "/{task_id}",
    response_model=TaskMessage,
    summary="Update a task",
    description=(
        "Update a task with the provided data. Only the fields present in the "
        "body change. An unknown id yields `task: null` and creates nothing."
    ),
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "message": "Updated Successfully!",
                        "task": {**_EXAMPLE_TASK, "completed": True},
                    }
                }
            }
        },
        400: _bad_request("Invalid data provided"),
    },
)
def update_task(
    task_id: str,
    payload: TaskUpdate,
    store: TaskStore = Depends(get_task_store),
):
    try:
        task = store.update(task_id, payload)
    except TaskServiceError as exc:
        logger.warning("Updating task %s failed: %s", task_id, exc)
        return _error(400, exc)
    return TaskMessage(
        message="Updated Successfully!",
        task=_serialize(task) if task is not None else None,
    )


@router.delete(
    "/{task_id}",
    response_model=MessageOut,
    summary="Delete a task",
    description="Delete a task by its ID. Deleting an unknown id also succeeds.",
    responses={
        200: {
            "content": {
                "application/json": {"example": {"message": "Deleted successfully!"}}
            }
        },
        400: _bad_request("Invalid ID provided"),
    },
)
def delete_task(task_id: str, store: TaskStore = Depends(get_task_store)):
    try:
        store.delete(task_id)
    except TaskServiceError as exc:
        logger.warning("Deleting task %s failed: %s", task_id, exc)
        return _error(400, exc)
    return MessageOut(message="Deleted successfully!")
