"""Pytest fixtures for goal dashboard tests."""

import asyncio
import copy

import pytest

from goaldash.dashboard.controller import EMPTY_STATE, GoalDetailsController, QueryParameterSource
from goaldash.dashboard.renderer import HtmlPageRenderer
from goaldash.dashboard.store import DataStore
from goaldash.momentum.client import MomentumClient

GOAL_DETAILS_RESPONSE = {
    "goalDetailsModel": {
        "status": {
            "statusEnum": "IN_MOMENTUM",
            "statusMessage": "You have a surplus of 90 minutes. Keep it up!",
            "eventSummaryList": [
                {"date": [2023, 9, 9], "summedMeasurement": 0.0},
                {"date": [2023, 9, 8], "summedMeasurement": 140.0},
                {"date": [2023, 9, 7], "summedMeasurement": 0.0},
                {"date": [2023, 9, 6], "summedMeasurement": 35.0},
                {"date": [2023, 9, 5], "summedMeasurement": 65.0},
                {"date": [2023, 9, 4], "summedMeasurement": 0.0},
                {"date": [2023, 9, 3], "summedMeasurement": 0.0},
                {"date": [2023, 9, 2], "summedMeasurement": 0.0},
            ],
            "sum": 240.0,
        },
        "eventModelList": [
            {
                "goalId": "griffin.scott88@gmail.comRun",
                "eventId": "ace7dde3-6a10-4ce1-beca-e4c2fcbfa044",
                "dateOfEvent": [2023, 9, 5],
                "measurement": 65.0,
            },
            {
                "goalId": "griffin.scott88@gmail.comRun",
                "eventId": "47abf438-204c-4b7a-8be4-13f262680f3d",
                "dateOfEvent": [2023, 9, 6],
                "measurement": 35.0,
            },
            {
                "goalId": "griffin.scott88@gmail.comRun",
                "eventId": "d57af852-fdde-4931-9a7b-437c3c233ede",
                "dateOfEvent": [2023, 9, 8],
                "measurement": 140.0,
            },
        ],
        "goalSummaryMessage": "Target: 150 minutes within a rolling 7 day period.",
        "goalName": "Run",
        "unit": "minutes",
    }
}


def make_payload(goal_name: str = "Run"):
    """Parse a copy of the example response, renamed to goal_name."""
    body = copy.deepcopy(GOAL_DETAILS_RESPONSE)
    body["goalDetailsModel"]["goalName"] = goal_name
    return MomentumClient.parse_payload(body)


class FakeMomentumClient:
    """Goal fetcher that serves canned payloads and records every call."""

    def __init__(self, payloads=None, error=None):
        self.payloads = payloads if payloads is not None else {"Run": make_payload("Run")}
        self.error = error
        self.calls = []

    async def get_goal_details(self, goal_name):
        self.calls.append(goal_name)
        if self.error:
            raise self.error
        return self.payloads[goal_name]


class GatedMomentumClient(FakeMomentumClient):
    """Fake client whose fetches block until the test releases them."""

    def __init__(self, payloads):
        super().__init__(payloads)
        self.gates = {name: asyncio.Event() for name in payloads}

    async def get_goal_details(self, goal_name):
        self.calls.append(goal_name)
        await self.gates[goal_name].wait()
        return self.payloads[goal_name]


@pytest.fixture
def response_body() -> dict:
    """The example backend response, safe to mutate."""
    return copy.deepcopy(GOAL_DETAILS_RESPONSE)


@pytest.fixture
def payload():
    """The example response parsed into a GoalStatusPayload."""
    return make_payload("Run")


@pytest.fixture
def fake_client() -> FakeMomentumClient:
    return FakeMomentumClient()


@pytest.fixture
def renderer() -> HtmlPageRenderer:
    return HtmlPageRenderer()


@pytest.fixture
def controller(fake_client, renderer) -> GoalDetailsController:
    """Query-parameter controller over the fake client."""
    return GoalDetailsController(
        client=fake_client,
        store=DataStore(EMPTY_STATE),
        renderer=renderer,
        source=QueryParameterSource(),
    )
