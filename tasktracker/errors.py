"""Failures raised by task operations."""

from tasktracker.models import FieldError


class TaskError(Exception):
    """Base class for task operation failures."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class TaskValidationError(TaskError):
    """Raised when a payload fails validation. Never reaches storage."""

    def __init__(self, errors: list[FieldError]):
        super().__init__("Validation failed")
        self.errors = errors


class TaskNotFoundError(TaskError):
    def __init__(self, task_id: str):
        super().__init__("Task not found")
        self.task_id = task_id


class InvalidStatusError(TaskError):
    """Raised by the status shortcut for a value outside the known states."""

    def __init__(self, value: object):
        super().__init__("Invalid status. Must be pending, in-progress, or completed")
        self.value = value


class StorageUnavailableError(TaskError):
    """Raised when the task repository fails in any way."""

    def __init__(self, message: str, *, cause: BaseException | None = None):
        super().__init__(message)
        self.cause = cause
