"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from datetime import datetime, timezone
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel


def utc_now() -> datetime:
    """Current time as an aware UTC datetime, at stored (millisecond) precision."""
    return ensure_utc(datetime.now(timezone.utc))


def ensure_utc(value: datetime) -> datetime:
    """
    Normalize a datetime to aware UTC (naive values are taken as UTC).

    Sub-millisecond digits are dropped, so a value compares the same in
    memory as it does after a round trip through the store file.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    else:
        value = value.astimezone(timezone.utc)
    return value.replace(microsecond=value.microsecond // 1000 * 1000)


def format_timestamp(value: datetime) -> str:
    """
    Render a datetime in the canonical stored form.

    Always UTC, millisecond precision, "Z" suffix:
    2026-10-18T09:30:00.000Z. Fixed width, so stored timestamps
    compare lexicographically in time order.
    """
    value = ensure_utc(value)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


def utc_day(value: datetime) -> str:
    """UTC calendar day (YYYY-MM-DD) of a datetime."""
    return ensure_utc(value).date().isoformat()


Timestamp = Annotated[
    datetime,
    AfterValidator(ensure_utc),
    PlainSerializer(format_timestamp, return_type=str),
]


class CamelModel(BaseModel):
    """Base for API payloads: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class StoreRecord(CamelModel):
    """
    Base class for records held in the document store.

    Records are immutable; services produce updated copies with
    model_copy(). Fields the current code does not know about are kept
    (extra="allow") so they survive a load/persist cycle.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="allow",
    )

    id: str

    def to_document(self) -> dict:
        """Serialize to the persisted (camelCase, JSON-safe) form."""
        return self.model_dump(mode="json", by_alias=True)
