"""Main FastAPI application."""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from urllib.parse import urlencode

from fastapi import FastAPI, Form, HTTPException, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from .config import Settings, settings
from .dashboard.controller import (
    EMPTY_STATE,
    FormFieldSource,
    GoalDetailsController,
    GoalFetcher,
    QueryParameterSource,
)
from .dashboard.renderer import HtmlPageRenderer
from .dashboard.store import DataStore
from .momentum.client import GoalNotFoundError, MomentumClient, MomentumClientError

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

DETAILS_FLOW = "details"
SEARCH_FLOW = "search"


@dataclass
class PageFlow:
    """One goal page: its controller and the renderer it writes into."""

    controller: GoalDetailsController
    renderer: HtmlPageRenderer


def build_flow(client: GoalFetcher, source, title: str) -> PageFlow:
    """Wire a controller to its own store and renderer."""
    renderer = HtmlPageRenderer(title=title)
    controller = GoalDetailsController(
        client=client,
        store=DataStore(EMPTY_STATE),
        renderer=renderer,
        source=source,
    )
    return PageFlow(controller=controller, renderer=renderer)


def create_app(
    app_settings: Optional[Settings] = None,
    client: Optional[GoalFetcher] = None,
) -> FastAPI:
    """
    Build the application.

    Args:
        app_settings: Settings to use (defaults to environment settings)
        client: Goal fetcher (defaults to a MomentumClient for the configured API)

    Returns:
        Configured FastAPI app
    """
    app_settings = app_settings or settings
    client = client or MomentumClient(
        app_settings.momentum_api_url,
        timeout=app_settings.momentum_request_timeout,
    )

    app = FastAPI(
        title="Momentum Goal Dashboard",
        description="Goal progress pages for the Momentum tracker",
        version="1.0.0",
    )
    app.state.settings = app_settings
    app.state.flows = {
        DETAILS_FLOW: build_flow(client, QueryParameterSource(), "Goal Details"),
        SEARCH_FLOW: build_flow(client, FormFieldSource(), "Find a Goal"),
    }

    async def load(flow: PageFlow, params: dict) -> tuple[Optional[str], int]:
        """Run a page load, turning fetch failures into a page notice."""
        try:
            await flow.controller.handle(params)
        except GoalNotFoundError as e:
            logger.error(f"Goal lookup failed: {e}")
            return str(e), 404
        except MomentumClientError as e:
            logger.error(f"Could not load goal: {e}")
            return f"Could not load goal: {e}", 502
        return None, 200

    def page_response(flow_name: str, notice: Optional[str] = None, status_code: int = 200):
        flow: PageFlow = app.state.flows[flow_name]
        html = flow.renderer.render_page(
            toggle_action=f"/goals/{flow_name}/toggle",
            form_action="/goals/search" if flow_name == SEARCH_FLOW else None,
            notice=notice,
        )
        return HTMLResponse(html, status_code=status_code)

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {
            "message": "Momentum Goal Dashboard",
            "version": "1.0.0",
            "endpoints": {
                "details": "/goals/details?goalName=...",
                "search": "/goals/search",
                "toggle": "/goals/{flow}/toggle",
                "status": "/status",
            },
        }

    @app.get("/status")
    async def status():
        """Server status endpoint."""
        return {
            "status": "running",
            "version": "1.0.0",
            "timestamp": datetime.utcnow().isoformat(),
            "momentum_api_url": app.state.settings.momentum_api_url,
        }

    @app.get("/goals/details", response_class=HTMLResponse)
    async def goal_details(request: Request):
        """Goal page driven by the goalName query parameter."""
        flow: PageFlow = app.state.flows[DETAILS_FLOW]
        logger.info(f"Goal details request: {dict(request.query_params)}")

        notice, status_code = await load(flow, dict(request.query_params))
        return page_response(DETAILS_FLOW, notice, status_code)

    @app.get("/goals/search", response_class=HTMLResponse)
    async def goal_search_page():
        """Search page showing whatever goal is currently displayed."""
        return page_response(SEARCH_FLOW)

    @app.post("/goals/search", response_class=HTMLResponse)
    async def goal_search_submit(
        search_criteria: str = Form("", alias="search-criteria"),
    ):
        """Search form submission."""
        flow: PageFlow = app.state.flows[SEARCH_FLOW]
        logger.info(f"Goal search submitted: '{search_criteria}'")

        notice, status_code = await load(flow, {"search-criteria": search_criteria})
        return page_response(SEARCH_FLOW, notice, status_code)

    @app.post("/goals/{flow_name}/toggle")
    async def toggle_panel(flow_name: str):
        """Show or hide the all-entries panel, then go back to the page."""
        flow: Optional[PageFlow] = app.state.flows.get(flow_name)
        if flow is None:
            raise HTTPException(status_code=404, detail=f"Unknown page: {flow_name}")

        visible = flow.controller.toggle_panel()
        logger.info(f"All-entries panel on '{flow_name}' page is now {'visible' if visible else 'hidden'}")

        url = f"/goals/{flow_name}"
        criteria = flow.controller.search_criteria
        if flow_name == DETAILS_FLOW and criteria:
            url += "?" + urlencode({"goalName": criteria})

        return RedirectResponse(url, status_code=303)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        app,
        host=settings.server_host,
        port=settings.server_port,
        log_level=settings.log_level.lower(),
    )
