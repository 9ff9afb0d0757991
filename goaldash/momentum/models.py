"""Data models for the Momentum goal status payload."""

import datetime
from typing import Annotated, Optional

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, model_validator


def _check_calendar_date(value: tuple[int, int, int]) -> tuple[int, int, int]:
    """Reject triples that are not real calendar dates (e.g. [2023, 2, 30])."""
    try:
        datetime.date(*value)
    except OverflowError as e:
        raise ValueError(f"date out of range: {list(value)}") from e
    return value


# [year, month, day], 1-indexed month and day
CalendarDate = Annotated[tuple[int, int, int], AfterValidator(_check_calendar_date)]


class _Payload(BaseModel):
    """Base for backend models: camelCase on the wire, immutable once parsed."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class EventSummary(_Payload):
    """Summed measurement for one day of the rolling window."""

    date: CalendarDate
    summed_measurement: float = Field(alias="summedMeasurement")


class GoalStatus(_Payload):
    """Evaluation of a goal over its rolling window."""

    sum: float
    status_message: str = Field(alias="statusMessage")
    status_enum: Optional[str] = Field(default=None, alias="statusEnum")
    event_summary_list: list[EventSummary] = Field(alias="eventSummaryList")


class EventModel(_Payload):
    """A single recorded entry against a goal."""

    goal_id: str = Field(alias="goalId")
    event_id: str = Field(alias="eventId")
    date_of_event: CalendarDate = Field(alias="dateOfEvent")
    measurement: float


class GoalStatusPayload(_Payload):
    """Everything the goal details pages need for one goal."""

    goal_name: str = Field(alias="goalName")
    goal_summary_message: str = Field(alias="goalSummaryMessage")
    unit: str
    status_string: str = Field(alias="statusString")
    status: GoalStatus
    event_model_list: list[EventModel] = Field(alias="eventModelList")

    @model_validator(mode="before")
    @classmethod
    def _derive_status_string(cls, data):
        """Fill statusString from status.statusEnum (IN_MOMENTUM -> In Momentum)."""
        if not isinstance(data, dict) or data.get("statusString"):
            return data

        status = data.get("status")
        if isinstance(status, dict) and status.get("statusEnum"):
            label = status["statusEnum"].replace("_", " ").title()
            return {**data, "statusString": label}

        return data
