"""Base class for all persisted records."""

from datetime import datetime, timezone

from pydantic import AwareDatetime, BaseModel, Field, field_validator


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Record(BaseModel):
    """Common fields shared by every stored record.

    ``id`` is left as None until the record is added to a store,
    which assigns the next id for its kind. Timestamps must carry a
    timezone and are stored in UTC; naive datetimes are rejected.
    """

    id: int | None = Field(default=None, description="Store-assigned identifier")
    created_at: AwareDatetime = Field(
        default_factory=utc_now, frozen=True, description="Creation timestamp (UTC)",
    )
    updated_at: AwareDatetime | None = Field(default=None, description="Last update timestamp (UTC)")

    @field_validator("created_at", "updated_at")
    @classmethod
    def _to_utc(cls, value: datetime | None) -> datetime | None:
        if value is None:
            return value
        return value.astimezone(timezone.utc)
