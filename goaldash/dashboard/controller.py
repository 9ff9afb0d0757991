"""Goal details page controller."""

import logging
from collections.abc import Mapping
from typing import Optional, Protocol

from goaldash.dashboard.renderer import RenderingPort
from goaldash.dashboard.store import DataStore
from goaldash.dashboard.toggle import SectionToggle
from goaldash.dashboard.viewmodels import (
    build_all_entries_rows,
    build_daily_rows,
    build_summary,
)
from goaldash.momentum.models import GoalStatusPayload

logger = logging.getLogger(__name__)

SEARCH_CRITERIA_KEY = "search-criteria"
SEARCH_RESULTS_KEY = "search-results"
EMPTY_STATE = {
    SEARCH_CRITERIA_KEY: "",
    SEARCH_RESULTS_KEY: None,
}


class GoalFetcher(Protocol):
    async def get_goal_details(self, goal_name: str) -> GoalStatusPayload: ...


class IdentifierSource(Protocol):
    """Where a page gets its goal identifier from."""

    field_name: str

    def extract(self, params: Mapping[str, str]) -> str: ...

    def should_skip(self, identifier: str, current_criteria: str) -> bool: ...


class QueryParameterSource:
    """Goal name from the page URL (?goalName=...), read once at mount."""

    def __init__(self, field_name: str = "goalName"):
        self.field_name = field_name

    def extract(self, params: Mapping[str, str]) -> str:
        return params.get(self.field_name) or ""

    def should_skip(self, identifier: str, current_criteria: str) -> bool:
        # Every mount fetches fresh data
        return False


class FormFieldSource:
    """Goal name from a submitted search form."""

    def __init__(self, field_name: str = "search-criteria"):
        self.field_name = field_name

    def extract(self, params: Mapping[str, str]) -> str:
        return params.get(self.field_name) or ""

    def should_skip(self, identifier: str, current_criteria: str) -> bool:
        # Resubmitting the displayed goal does nothing
        return identifier == current_criteria


class GoalDetailsController:
    """Loads a goal into the page state and renders it on every state change."""

    def __init__(
        self,
        client: GoalFetcher,
        store: DataStore,
        renderer: RenderingPort,
        source: IdentifierSource,
        toggle: Optional[SectionToggle] = None,
    ):
        """
        Initialize controller and subscribe it to the store.

        Args:
            client: Fetches goal status payloads
            store: Page state, owned by this controller
            renderer: Page regions to write into
            source: Strategy for reading the goal identifier from a request
            toggle: Visibility of the all-entries panel
        """
        self.client = client
        self.store = store
        self.renderer = renderer
        self.source = source
        self.toggle = toggle or SectionToggle()
        self._request_seq = 0

        self.store.add_change_listener(self.on_state_change)

    @property
    def search_criteria(self) -> str:
        return self.store.get(SEARCH_CRITERIA_KEY) or ""

    async def handle(self, params: Mapping[str, str]) -> bool:
        """
        Load the goal named in a page request.

        Args:
            params: Query parameters or form fields of the request

        Returns:
            False if the source decided the request is a no-op, True otherwise
        """
        identifier = self.source.extract(params)

        if self.source.should_skip(identifier, self.search_criteria):
            logger.debug(f"Goal '{identifier}' already displayed, skipping fetch")
            return False

        await self.load_goal(identifier)
        return True

    async def load_goal(self, identifier: Optional[str]):
        """
        Fetch a goal and store it, or reset to the empty state.

        Fetch errors propagate and leave the state untouched. A fetch that
        resolves after a newer load_goal() call was issued is dropped.
        """
        self._request_seq += 1
        request_id = self._request_seq

        if not identifier:
            logger.info("No goal requested, showing empty state")
            self.store.set_state(EMPTY_STATE)
            return

        results = await self.client.get_goal_details(identifier)

        if request_id != self._request_seq:
            logger.warning(
                f"Discarding stale result for '{identifier}' "
                f"(request {request_id}, latest {self._request_seq})"
            )
            return

        self.store.set_state(
            {
                SEARCH_CRITERIA_KEY: identifier,
                SEARCH_RESULTS_KEY: results,
            }
        )

    def on_state_change(self):
        """Render the current state into the page regions."""
        criteria = self.search_criteria
        results: Optional[GoalStatusPayload] = self.store.get(SEARCH_RESULTS_KEY)

        if not criteria or results is None:
            self.renderer.clear()
            self.renderer.set_panel_visible(self.toggle.is_visible)
            return

        logger.info(f"Rendering goal '{criteria}'")

        self.renderer.write_criteria(criteria)
        self.renderer.write_summary(build_summary(results))
        self.renderer.write_daily_table(build_daily_rows(results))
        self.renderer.write_entries_table(build_all_entries_rows(results))
        self.renderer.set_panel_visible(self.toggle.is_visible)

    def toggle_panel(self) -> bool:
        """Show or hide the all-entries panel. Returns the new visibility."""
        self.toggle.toggle()
        self.renderer.set_panel_visible(self.toggle.is_visible)
        return self.toggle.is_visible


async def demo_goal_details(goal_name: str):
    """Demo: Fetch one goal and print the rendered page."""
    import os
    from dotenv import load_dotenv
    from goaldash.dashboard.renderer import HtmlPageRenderer
    from goaldash.momentum.client import MomentumClient

    load_dotenv()

    api_url = os.getenv("MOMENTUM_API_URL")

    if not api_url:
        print("Error: MOMENTUM_API_URL must be set in .env file")
        return

    renderer = HtmlPageRenderer()
    controller = GoalDetailsController(
        client=MomentumClient(api_url),
        store=DataStore(EMPTY_STATE),
        renderer=renderer,
        source=QueryParameterSource(),
    )

    await controller.handle({"goalName": goal_name})
    controller.toggle_panel()

    print(renderer.render_page(toggle_action="#"))


if __name__ == "__main__":
    import asyncio
    import sys

    logging.basicConfig(level=logging.INFO)
    asyncio.run(demo_goal_details(sys.argv[1] if len(sys.argv) > 1 else ""))
