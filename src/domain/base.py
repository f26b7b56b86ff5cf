import uuid
from datetime import UTC, date, datetime
from typing import Annotated

from pydantic import AfterValidator, StringConstraints
from sqlmodel import SQLModel


def generate_uuid() -> str:
    return str(uuid.uuid4())


def utc_now() -> datetime:
    return datetime.now(UTC)


def today_iso() -> str:
    return date.today().isoformat()


ISO_DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"


def check_calendar_date(value: str) -> str:
    """Reject shape-valid strings that name no real day, e.g. 2024-02-30"""
    date.fromisoformat(value)
    return value


# Zero-padded YYYY-MM-DD of a real calendar day; string order is date order
IsoDate = Annotated[
    str,
    StringConstraints(pattern=ISO_DATE_PATTERN),
    AfterValidator(check_calendar_date),
]


class BaseModel(SQLModel):
    pass
