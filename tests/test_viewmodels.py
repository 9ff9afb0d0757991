"""Tests for view models built from a goal status payload."""

from goaldash.dashboard.viewmodels import (
    DisplayRow,
    build_all_entries_rows,
    build_daily_rows,
    build_summary,
)


class TestBuildSummary:
    def test_summary_fields(self, payload):
        summary = build_summary(payload)

        assert summary.status_label == "In Momentum"
        assert summary.aggregate_text == "Sum: 240.0 minutes"
        assert summary.message_text == "You have a surplus of 90 minutes. Keep it up!"
        assert summary.goal_summary_message == (
            "Target: 150 minutes within a rolling 7 day period."
        )

    def test_create_event_link_is_encoded(self, payload):
        summary = build_summary(payload.model_copy(update={"goal_name": "Morning Run"}))

        assert summary.create_event_href == (
            "createEvent.html?goalName=Morning+Run&unit=minutes"
        )


class TestBuildDailyRows:
    def test_keeps_order_and_count(self, payload):
        rows = build_daily_rows(payload)

        assert len(rows) == 8
        assert [row.formatted_date for row in rows] == [
            "9/9/23", "9/8/23", "9/7/23", "9/6/23",
            "9/5/23", "9/4/23", "9/3/23", "9/2/23",
        ]
        assert rows[0].weekday == "Sat"

    def test_only_final_row_is_last(self, payload):
        rows = build_daily_rows(payload)

        assert [i for i, row in enumerate(rows) if row.is_last_row] == [7]

    def test_zero_days(self, payload):
        rows = build_daily_rows(payload)

        zero_dates = [row.formatted_date for row in rows if row.is_zero]
        assert zero_dates == ["9/9/23", "9/7/23", "9/4/23", "9/3/23", "9/2/23"]

    def test_zero_day_drops_unit(self, payload):
        rows = build_daily_rows(payload)

        assert rows[0].display_value == "0.0"
        assert rows[1].display_value == "140.0 minutes"
        assert rows[1].date_label == "Fri, 9/8/23"

    def test_empty_window(self, payload):
        status = payload.status.model_copy(update={"event_summary_list": []})

        assert build_daily_rows(payload.model_copy(update={"status": status})) == []


class TestBuildAllEntriesRows:
    def test_one_row_per_entry_with_unit(self, payload):
        rows = build_all_entries_rows(payload)

        assert len(rows) == 3
        assert [row.display_value for row in rows] == [
            "65.0 minutes",
            "35.0 minutes",
            "140.0 minutes",
        ]
        assert [row.date_label for row in rows] == [
            "Tue, 9/5/23",
            "Wed, 9/6/23",
            "Fri, 9/8/23",
        ]

    def test_no_zero_or_last_row_marking(self, payload):
        entry = payload.event_model_list[0].model_copy(update={"measurement": 0.0})
        rows = build_all_entries_rows(payload.model_copy(update={"event_model_list": [entry]}))

        assert rows == [
            DisplayRow(
                weekday="Tue",
                formatted_date="9/5/23",
                value=0.0,
                unit="minutes",
                is_zero=False,
                is_last_row=False,
            )
        ]
        assert rows[0].display_value == "0.0 minutes"
