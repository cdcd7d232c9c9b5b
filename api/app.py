# taskboard/api/app.py
"""HTTP layer over the task store: list/get/create/update/delete under ``/api``."""
from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, Depends, FastAPI, Request, Response, status
from fastapi.responses import JSONResponse

from core.settings import API, APP_NAME
from models.schemas import TaskCreate, TaskRead, TaskUpdate
from storage.task_store import TaskNotFoundError, TaskStore

logger = logging.getLogger("taskboard.api")

router = APIRouter(prefix="/tasks", tags=["tasks"])


def get_store(request: Request) -> TaskStore:
    return request.app.state.store


@router.get("", response_model=List[TaskRead])
def list_tasks(store: TaskStore = Depends(get_store)):
    return store.list_all()


@router.get("/{task_id}", response_model=TaskRead)
def get_task(task_id: str, store: TaskStore = Depends(get_store)):
    task = store.get(task_id)
    if task is None:
        raise TaskNotFoundError(task_id)
    return task


@router.post("", response_model=TaskRead, status_code=status.HTTP_201_CREATED)
def create_task(body: TaskCreate, store: TaskStore = Depends(get_store)):
    return store.add(body)


@router.put("/{task_id}", response_model=TaskRead)
def update_task(task_id: str, body: TaskUpdate, store: TaskStore = Depends(get_store)):
    return store.replace(task_id, body)


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_task(task_id: str, store: TaskStore = Depends(get_store)):
    store.delete(task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


async def _task_not_found(request: Request, exc: TaskNotFoundError) -> JSONResponse:
    logger.warning("%s %s: task %s not found", request.method, request.url.path, exc.task_id)
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": "Task not found"})


def create_app(store: TaskStore) -> FastAPI:
    app = FastAPI(title=f"{APP_NAME} API")
    app.state.store = store
    app.include_router(router, prefix=API.prefix)
    app.add_exception_handler(TaskNotFoundError, _task_not_found)
    return app


__all__ = ["create_app", "router"]
