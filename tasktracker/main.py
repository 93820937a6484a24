"""FastAPI application entry point."""

import logging
import time
from collections.abc import Awaitable, Callable
from typing import Any

from fastapi import Body, Depends, FastAPI, Query, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response

from tasktracker.config import get_settings
from tasktracker.errors import (
    InvalidStatusError,
    StorageUnavailableError,
    TaskNotFoundError,
    TaskValidationError,
)
from tasktracker.logging_config import configure_logging
from tasktracker.models import (
    HealthResponse,
    MessageResponse,
    StatsResponse,
    TaskListResponse,
    TaskResponse,
)
from tasktracker.service import TaskService
from tasktracker.store import store

settings = get_settings()
configure_logging(settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.app_title,
    description="Manage tasks with status, priority, due dates and tags.",
    version=settings.app_version,
)

# Configure CORS for frontend access
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def get_task_service() -> TaskService:
    return TaskService(store)


@app.middleware("http")
async def log_requests(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = int((time.perf_counter() - started) * 1000)
    logger.info(
        "%s %s status=%s elapsed_ms=%s",
        request.method,
        request.url.path,
        response.status_code,
        elapsed_ms,
    )
    return response


@app.exception_handler(TaskValidationError)
async def validation_failed(request: Request, exc: TaskValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "success": False,
            "message": exc.message,
            "errors": [error.model_dump() for error in exc.errors],
        },
    )


@app.exception_handler(InvalidStatusError)
async def invalid_status(request: Request, exc: InvalidStatusError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"success": False, "message": exc.message},
    )


@app.exception_handler(TaskNotFoundError)
async def task_not_found(request: Request, exc: TaskNotFoundError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"success": False, "message": exc.message},
    )


@app.exception_handler(StorageUnavailableError)
async def storage_unavailable(request: Request, exc: StorageUnavailableError) -> JSONResponse:
    logger.error("%s: %r", exc.message, exc.cause)
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={
            "success": False,
            "message": exc.message,
            "error": str(exc.cause) if exc.cause is not None else None,
        },
    )


@app.get("/api/health", response_model=HealthResponse, tags=["System"])
async def health_check() -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse(version=settings.app_version)


@app.get("/api/tasks", response_model=TaskListResponse, tags=["Tasks"])
async def list_tasks(
    status_filter: str | None = Query(default=None, alias="status"),
    priority: str | None = None,
    sort_by: str | None = Query(default=None, alias="sortBy"),
    sort_order: str | None = Query(default=None, alias="sortOrder"),
    service: TaskService = Depends(get_task_service),
) -> TaskListResponse:
    """List tasks with optional filtering and sorting."""
    tasks = await service.list_tasks(
        status=status_filter,
        priority=priority,
        sort_by=sort_by,
        sort_order=sort_order,
    )
    return TaskListResponse(count=len(tasks), data=tasks)


@app.get("/api/tasks/stats/summary", response_model=StatsResponse, tags=["Tasks"])
async def task_stats(service: TaskService = Depends(get_task_service)) -> StatsResponse:
    """Task counts by status and priority, plus completion rate."""
    return StatsResponse(data=await service.stats())


@app.post(
    "/api/tasks",
    response_model=TaskResponse,
    status_code=status.HTTP_201_CREATED,
    tags=["Tasks"],
)
async def create_task(
    payload: Any = Body(...),
    service: TaskService = Depends(get_task_service),
) -> TaskResponse:
    """Create a new task."""
    task = await service.create_task(payload)
    return TaskResponse(message="Task created successfully", data=task)


@app.get("/api/tasks/{task_id}", response_model=TaskResponse, tags=["Tasks"])
async def get_task(
    task_id: str,
    service: TaskService = Depends(get_task_service),
) -> TaskResponse:
    """Get a specific task by ID."""
    return TaskResponse(data=await service.get_task(task_id))


@app.api_route(
    "/api/tasks/{task_id}",
    methods=["PUT", "PATCH"],
    response_model=TaskResponse,
    tags=["Tasks"],
)
async def update_task(
    task_id: str,
    payload: Any = Body(...),
    service: TaskService = Depends(get_task_service),
) -> TaskResponse:
    """Update an existing task. Only the fields sent are changed."""
    task = await service.update_task(task_id, payload)
    return TaskResponse(message="Task updated successfully", data=task)


@app.patch("/api/tasks/{task_id}/status", response_model=TaskResponse, tags=["Tasks"])
async def update_task_status(
    task_id: str,
    payload: Any = Body(...),
    service: TaskService = Depends(get_task_service),
) -> TaskResponse:
    """Change only the status of a task."""
    target = payload.get("status") if isinstance(payload, dict) else None
    task = await service.set_status(task_id, target)
    return TaskResponse(message="Task status updated successfully", data=task)


@app.delete("/api/tasks/{task_id}", response_model=MessageResponse, tags=["Tasks"])
async def delete_task(
    task_id: str,
    service: TaskService = Depends(get_task_service),
) -> MessageResponse:
    """Delete a task."""
    await service.delete_task(task_id)
    return MessageResponse(message="Task deleted successfully")
