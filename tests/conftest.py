"""Pytest configuration and fixtures."""
from datetime import date

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from app.main import app
from app.routers.pacing import get_today
from app.store import goal_store

# A Thursday in the middle of a 30-day month
TODAY = date(2026, 11, 12)


@pytest.fixture
def make_goal():
    """Factory for Goal objects with sensible defaults."""
    from app.models.goal import Goal

    def _make_goal(goal_id=1, name="Appointments", target=50, current=20, color="bg-blue-500"):
        return Goal(
            id=goal_id,
            name=name,
            target=target,
            current=current,
            color=color,
            label_color=color.replace("bg-", "text-"),
        )

    return _make_goal


@pytest_asyncio.fixture
async def app_client():
    """
    Create a test client with a freshly seeded goal store.

    This fixture:
    - Seeds the default goals
    - Pins today to TODAY
    - Yields an async HTTP client for testing
    - Clears the store and overrides afterwards
    """
    goal_store.open(seed=True)
    app.dependency_overrides[get_today] = lambda: TODAY

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as client:
        yield client

    app.dependency_overrides.clear()
    goal_store.close()
