from __future__ import annotations

from datetime import date, datetime
from typing import Any, Sequence

from pydantic import BaseModel, ConfigDict, Field, field_validator

from uocplay.config import settings
from uocplay.domain.subscription import Subscription
from uocplay.domain.watchlist import Watchlist

_SUBSCRIPTION_FIELDS = (
    "id",
    "document",
    "start_date",
    "end_date",
    "plan",
    "price",
    "num_devices",
)


def parse_date(raw: str) -> date:
    """Parse a fixed-width `DD/MM/YYYY` date."""
    text = (raw or "").strip()
    if len(text) != settings.DATE_LENGTH:
        raise ValueError(f"date must be {settings.DATE_LENGTH} characters (DD/MM/YYYY), got {raw!r}")
    return datetime.strptime(text, settings.DATE_FORMAT).date()


class SubscriptionRow(BaseModel):
    """Validated raw subscription row (one CSV entry)."""

    model_config = ConfigDict(frozen=True)

    id: int
    document: str
    start_date: date
    end_date: date
    plan: str
    price: float = Field(ge=0)
    num_devices: int = Field(ge=1)

    @field_validator("document")
    @classmethod
    def _check_document(cls, value: str) -> str:
        if len(value) != settings.DOCUMENT_LENGTH:
            raise ValueError(f"document must be exactly {settings.DOCUMENT_LENGTH} characters")
        return value

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def _parse_dates(cls, value: Any) -> Any:
        if isinstance(value, str):
            return parse_date(value)
        return value

    @field_validator("plan")
    @classmethod
    def _check_plan(cls, value: str) -> str:
        if len(value) > settings.MAX_PLAN_LENGTH:
            raise ValueError(f"plan must be at most {settings.MAX_PLAN_LENGTH} characters")
        return value

    def to_subscription(self) -> Subscription:
        return Subscription(
            id=self.id,
            document=self.document,
            start_date=self.start_date,
            end_date=self.end_date,
            plan=self.plan,
            price=self.price,
            num_devices=self.num_devices,
            watchlist=Watchlist(),
        )


def parse_subscription(fields: Sequence[str]) -> Subscription:
    """Build a subscription with an empty watchlist from raw row fields.

    Raises:
        ValueError: wrong number of fields or a field out of range
            (pydantic's ValidationError is a ValueError).
    """
    if len(fields) != settings.NUM_FIELDS_SUBSCRIPTION:
        raise ValueError(
            f"subscription row needs {settings.NUM_FIELDS_SUBSCRIPTION} fields, got {len(fields)}"
        )
    row = SubscriptionRow.model_validate(dict(zip(_SUBSCRIPTION_FIELDS, fields)))
    return row.to_subscription()


def parse_subscription_line(line: str, separator: str = ";") -> Subscription:
    return parse_subscription(line.rstrip("\r\n").split(separator))
