"""View models derived from a goal status payload."""

from dataclasses import dataclass
from urllib.parse import urlencode

from goaldash.dashboard.dates import day_of_week, format_date
from goaldash.momentum.models import GoalStatusPayload


@dataclass(frozen=True)
class GoalSummary:
    """Status block shown at the top of the goal page."""

    status_label: str
    aggregate_text: str
    message_text: str
    goal_summary_message: str = ""
    create_event_href: str = ""


@dataclass(frozen=True)
class DisplayRow:
    """One table row: a date and a measurement."""

    weekday: str
    formatted_date: str
    value: float
    unit: str
    is_zero: bool = False
    is_last_row: bool = False

    @property
    def date_label(self) -> str:
        return f"{self.weekday}, {self.formatted_date}"

    @property
    def display_value(self) -> str:
        # Zero days are shown without a unit so the cell can be dimmed
        if self.is_zero:
            return f"{self.value}"
        return f"{self.value} {self.unit}"


def build_summary(payload: GoalStatusPayload) -> GoalSummary:
    """
    Build the status block for a goal.

    Args:
        payload: Fetched goal status

    Returns:
        GoalSummary with the status label, "Sum: {sum} {unit}" and the status message
    """
    query = urlencode({"goalName": payload.goal_name, "unit": payload.unit})

    return GoalSummary(
        status_label=payload.status_string,
        aggregate_text=f"Sum: {payload.status.sum} {payload.unit}",
        message_text=payload.status.status_message,
        goal_summary_message=payload.goal_summary_message,
        create_event_href=f"createEvent.html?{query}",
    )


def build_daily_rows(payload: GoalStatusPayload) -> list[DisplayRow]:
    """
    Build the daily summary rows, in the order the backend sent them.

    A day whose summed measurement is exactly 0 is marked is_zero.
    Only the final row is marked is_last_row.
    """
    summaries = payload.status.event_summary_list
    last_index = len(summaries) - 1

    return [
        DisplayRow(
            weekday=day_of_week(summary.date),
            formatted_date=format_date(summary.date),
            value=summary.summed_measurement,
            unit=payload.unit,
            is_zero=summary.summed_measurement == 0,
            is_last_row=index == last_index,
        )
        for index, summary in enumerate(summaries)
    ]


def build_all_entries_rows(payload: GoalStatusPayload) -> list[DisplayRow]:
    """Build one row per recorded entry, in received order."""
    return [
        DisplayRow(
            weekday=day_of_week(event.date_of_event),
            formatted_date=format_date(event.date_of_event),
            value=event.measurement,
            unit=payload.unit,
        )
        for event in payload.event_model_list
    ]
