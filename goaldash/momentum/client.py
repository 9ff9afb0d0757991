"""Momentum backend HTTP client."""

import logging
from typing import Optional
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from .models import GoalStatusPayload

logger = logging.getLogger(__name__)


class MomentumClientError(Exception):
    """Raised when a goal's status cannot be fetched from the backend."""


class GoalNotFoundError(MomentumClientError):
    """Raised when the backend has no goal with the requested name."""


class PayloadError(MomentumClientError):
    """Raised when the backend answers with a body that is not a goal status."""


class MomentumClient:
    """HTTP client for the Momentum goals API."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize Momentum client.

        Args:
            base_url: Momentum API URL (e.g., http://localhost:3000)
            timeout: Request timeout in seconds
            transport: Optional httpx transport (tests pass a MockTransport)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    async def get_goal_details(self, goal_name: str) -> GoalStatusPayload:
        """
        Fetch the current status of a goal.

        Args:
            goal_name: Name of the goal (e.g., "Run")

        Returns:
            Parsed goal status payload

        Raises:
            GoalNotFoundError: If the backend does not know the goal
            PayloadError: If the response body is not a valid goal status
            MomentumClientError: On any other network or HTTP failure
        """
        url = f"{self.base_url}/goals/{quote(goal_name, safe='')}"
        logger.info(f"Fetching goal details for '{goal_name}'")

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self.transport
            ) as client:
                response = await client.get(url)
        except httpx.HTTPError as e:
            logger.error(f"Request for goal '{goal_name}' failed: {e}")
            raise MomentumClientError(f"Could not reach Momentum API: {e}") from e

        if response.status_code == 404:
            raise GoalNotFoundError(f"Goal not found: {goal_name}")

        if response.status_code >= 400:
            raise MomentumClientError(
                f"Momentum API returned {response.status_code} for goal '{goal_name}'"
            )

        try:
            body = response.json()
        except ValueError as e:
            raise PayloadError(f"Response for goal '{goal_name}' is not JSON") from e

        return self.parse_payload(body)

    @staticmethod
    def parse_payload(body) -> GoalStatusPayload:
        """
        Validate a response body into a GoalStatusPayload.

        Accepts both the wrapped form ({"goalDetailsModel": {...}}) and a bare payload.

        Raises:
            PayloadError: If required fields are missing or have the wrong type
        """
        if isinstance(body, dict) and "goalDetailsModel" in body:
            body = body["goalDetailsModel"]

        try:
            payload = GoalStatusPayload.model_validate(body)
        except ValidationError as e:
            logger.error(f"Malformed goal payload: {e.error_count()} validation errors")
            raise PayloadError(f"Malformed goal payload: {e}") from e

        logger.debug(
            f"Parsed payload for '{payload.goal_name}': "
            f"{len(payload.status.event_summary_list)} days, "
            f"{len(payload.event_model_list)} entries"
        )
        return payload
