"""
Pydantic models for /dates request bodies.

Each mutating endpoint declares one of these models, so a body with the
wrong shape is rejected before any storage access.
"""

from __future__ import annotations

from datetime import date
from typing import Annotated

from pydantic import AfterValidator, BaseModel, Field, StrictStr

from datestore.domain.dates import parse_date


def _check_date(value: str) -> str:
    # InvalidDateError is a ValueError, which pydantic reports as a validation error
    parse_date(value)
    return value


DateString = Annotated[StrictStr, AfterValidator(_check_date)]


class AvailableDatesIn(BaseModel):
    available_dates: list[DateString] = Field(..., alias="availableDates", description="YYYY-MM-DD dates")


class OccupiedDatesIn(BaseModel):
    occupied_dates: list[DateString] = Field(..., alias="occupiedDates", description="YYYY-MM-DD dates")


class DateRangeIn(BaseModel):
    """Inclusive range of days to add to a collection."""

    from_date: DateString = Field(..., alias="fromDate", examples=["2024-01-30"])
    to_date: DateString = Field(..., alias="toDate", examples=["2024-02-02"])

    @property
    def start(self) -> date:
        return parse_date(self.from_date)

    @property
    def end(self) -> date:
        return parse_date(self.to_date)
