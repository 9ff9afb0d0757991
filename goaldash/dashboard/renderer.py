"""Goal details page renderer."""

import logging
from html import escape
from typing import Optional, Protocol

from goaldash.dashboard.viewmodels import DisplayRow, GoalSummary

logger = logging.getLogger(__name__)

CRITERIA_REGION = "search-criteria-display"
SUMMARY_MESSAGE_REGION = "goal-summary-message"
SUMMARY_REGION = "col1"
DAILY_REGION = "col1b"
ENTRIES_REGION = "col2"

REGIONS = (
    CRITERIA_REGION,
    SUMMARY_MESSAGE_REGION,
    SUMMARY_REGION,
    DAILY_REGION,
    ENTRIES_REGION,
)


class RenderingPort(Protocol):
    """Everything the controller may do to the page."""

    def write_criteria(self, criteria: str) -> None: ...

    def write_summary(self, summary: GoalSummary) -> None: ...

    def write_daily_table(self, rows: list[DisplayRow]) -> None: ...

    def write_entries_table(self, rows: list[DisplayRow]) -> None: ...

    def set_panel_visible(self, visible: bool) -> None: ...

    def clear(self) -> None: ...


class HtmlPageRenderer:
    """Renders goal details into named HTML regions and assembles the page."""

    def __init__(self, title: str = "Goal Details"):
        """
        Initialize renderer.

        Args:
            title: Page title and main heading
        """
        self.title = title
        self.regions: dict[str, str] = {}
        self.create_event_href: Optional[str] = None
        self.panel_visible = False
        self.clear()

    def clear(self):
        """Empty every region."""
        self.regions = {region: "" for region in REGIONS}
        self.create_event_href = None

    def write_criteria(self, criteria: str):
        self.regions[CRITERIA_REGION] = escape(criteria)

    def write_summary(self, summary: GoalSummary):
        """Write the status block and the goal summary line."""
        self.regions[SUMMARY_MESSAGE_REGION] = escape(summary.goal_summary_message)
        self.create_event_href = summary.create_event_href or None

        self.regions[SUMMARY_REGION] = (
            "<div>"
            f"<h4>Status: {escape(summary.status_label)}</h4>"
            f"<p>{escape(summary.aggregate_text)}</p>"
            f"<p>{escape(summary.message_text)}</p>"
            "</div>"
        )

    def write_daily_table(self, rows: list[DisplayRow]):
        """Write the per-day table, dimming zero days and marking the last row."""
        self.regions[DAILY_REGION] = self._render_table(
            "Daily Event Summaries", "Daily Sum", rows
        )

    def write_entries_table(self, rows: list[DisplayRow]):
        self.regions[ENTRIES_REGION] = self._render_table(
            "All Entries", "Measurement", rows
        )

    def set_panel_visible(self, visible: bool):
        self.panel_visible = visible

    def _render_table(self, title: str, value_header: str, rows: list[DisplayRow]) -> str:
        """Render a titled Date/value table."""
        body = "".join(self._render_row(row) for row in rows)

        return (
            "<div>"
            f"<h4>{escape(title)}</h4>"
            "<table>"
            f"<thead><tr><th>Date</th><th>{escape(value_header)}</th></tr></thead>"
            f"<tbody>{body}</tbody>"
            "</table>"
            "</div>"
        )

    def _render_row(self, row: DisplayRow) -> str:
        row_class = ' class="last-row"' if row.is_last_row else ""
        cell_class = ' class="hide-zero"' if row.is_zero else ""

        return (
            f"<tr{row_class}>"
            f'<td style="text-align: right;">{escape(row.date_label)}</td>'
            f'<td style="text-align: right;"{cell_class}>{escape(row.display_value)}</td>'
            "</tr>"
        )

    def render_page(
        self,
        toggle_action: str,
        form_action: Optional[str] = None,
        notice: Optional[str] = None,
    ) -> str:
        """
        Assemble the full HTML document from the current regions.

        Args:
            toggle_action: URL the "View Events" button posts to
            form_action: URL for the goal search form (omitted when None)
            notice: Page-level message, e.g. a fetch failure

        Returns:
            HTML document as a string
        """
        criteria = self.regions[CRITERIA_REGION]
        logger.debug(f"Rendering page '{self.title}' (criteria='{criteria}')")

        parts = [
            "<!DOCTYPE html>",
            "<html>",
            f"<head><meta charset=\"utf-8\"><title>{escape(self.title)}</title></head>",
            "<body>",
            f"<h1>{escape(self.title)}</h1>",
        ]

        if notice:
            parts.append(f'<div class="notice" role="alert">{escape(notice)}</div>')

        if form_action is not None:
            parts.append(
                f'<form id="goalDetails-form" method="post" action="{escape(form_action)}">'
                f'<input type="text" id="search-criteria" name="search-criteria" value="{criteria}">'
                '<button type="submit" id="goalDetails-btn">Search</button>'
                "</form>"
            )

        parts.append(f'<h2 id="{CRITERIA_REGION}">{criteria}</h2>')
        parts.append(
            f'<p id="{SUMMARY_MESSAGE_REGION}">{self.regions[SUMMARY_MESSAGE_REGION]}</p>'
        )

        if criteria:
            if self.create_event_href:
                parts.append(
                    f'<a id="create-event-button" href="{escape(self.create_event_href)}">New Event</a>'
                )

            panel_style = "block" if self.panel_visible else "none"
            parts.extend(
                [
                    f'<form method="post" action="{escape(toggle_action)}">'
                    '<button type="submit" id="view-events-button">View Events</button>'
                    "</form>",
                    '<div id="cont" class="container"><div class="row">',
                    '<div class="col-md-6">',
                    f'<div class="custom-bg" id="{SUMMARY_REGION}">{self.regions[SUMMARY_REGION]}</div>',
                    f'<div class="custom-bg" id="{DAILY_REGION}">{self.regions[DAILY_REGION]}</div>',
                    "</div>",
                    '<div class="col-md-6">',
                    f'<div class="custom-bg" id="{ENTRIES_REGION}" style="display: {panel_style};">'
                    f"{self.regions[ENTRIES_REGION]}</div>",
                    "</div>",
                    "</div></div>",
                ]
            )

        parts.extend(["</body>", "</html>"])
        return "\n".join(parts)
