"""Validation of raw task payloads.

Payloads are checked in full and every offending field is reported, one
message per field, before anything is written.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ValidationError

from tasktracker.errors import TaskValidationError
from tasktracker.models import (
    DESCRIPTION_MAX_LENGTH,
    TITLE_MAX_LENGTH,
    FieldError,
    TaskCreate,
    TaskUpdate,
)

_FIELD_MESSAGES = {
    "title": "Title is required",
    "description": f"Description must be text of at most {DESCRIPTION_MAX_LENGTH} characters",
    "status": "Status must be pending, in-progress, or completed",
    "priority": "Priority must be low, medium, or high",
    "dueDate": "Due date must be a valid date",
    "tags": "Tags must be an array of strings",
}

_TOO_LONG_MESSAGES = {
    "title": f"Title cannot exceed {TITLE_MAX_LENGTH} characters",
    "description": f"Description cannot exceed {DESCRIPTION_MAX_LENGTH} characters",
}


def _field_name(model: type[BaseModel], loc: tuple) -> str:
    if not loc:
        return "body"
    name = str(loc[0])
    # snake_case input is reported under its wire name
    info = model.model_fields.get(name)
    if info is not None and info.alias:
        return info.alias
    return name


def _field_errors(model: type[BaseModel], exc: ValidationError) -> list[FieldError]:
    errors: dict[str, FieldError] = {}
    for error in exc.errors():
        field = _field_name(model, error["loc"])
        if field in errors:
            # tags can fail once per element
            continue
        if error["type"] == "string_too_long" and field in _TOO_LONG_MESSAGES:
            message = _TOO_LONG_MESSAGES[field]
        else:
            message = _FIELD_MESSAGES.get(field, error["msg"])
        errors[field] = FieldError(field=field, message=message)
    return list(errors.values())


def _validate(model: type[BaseModel], payload: Any) -> BaseModel:
    if not isinstance(payload, Mapping):
        raise TaskValidationError(
            [FieldError(field="body", message="Task payload must be an object")]
        )
    try:
        return model.model_validate(dict(payload))
    except ValidationError as exc:
        raise TaskValidationError(_field_errors(model, exc)) from exc


def validate_create(payload: Any) -> TaskCreate:
    """Validate a full task payload, applying defaults for omitted fields."""
    return _validate(TaskCreate, payload)


def validate_update(payload: Any) -> dict[str, Any]:
    """Validate a partial payload.

    Returns only the fields the caller sent, keyed by attribute name, ready
    to hand to ``TaskRepository.update_by_id``.
    """
    update = _validate(TaskUpdate, payload)
    return update.model_dump(exclude_unset=True)
