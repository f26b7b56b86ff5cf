"""
Partial update helper shared by the update use cases.
"""

from typing import Any, Dict, TypeVar

from pydantic import ValidationError

from libs.result import Error, Result, Return
from src.domain.base import BaseModel, utc_now

M = TypeVar("M", bound=BaseModel)


def validation_error(exc: ValidationError) -> Error:
    details = [
        {"field": ".".join(str(p) for p in err["loc"]), "message": err["msg"]}
        for err in exc.errors()
    ]
    return Error("VALIDATION_ERROR", "Invalid input", details)


def apply_changes(entity: M, changes: Dict[str, Any]) -> Result[M]:
    """
    Merge changes over entity and re-validate the whole thing.

    Refreshes updated_at. The original entity is left untouched.
    """
    merged = {**entity.model_dump(), **changes, "updated_at": utc_now()}
    try:
        return Return.ok(type(entity).model_validate(merged))
    except ValidationError as exc:
        return Return.err(validation_error(exc))
