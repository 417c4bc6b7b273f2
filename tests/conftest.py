"""Pytest fixtures and configuration"""

from typing import AsyncGenerator, Callable, List
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.database import get_db
from app.main import app
from app.schemas.settlement import ExpenseRecord


@pytest.fixture
def make_record() -> Callable[..., ExpenseRecord]:
    """Factory for spend records with fresh participant IDs"""

    def _make_record(name: str, amount="0", payout_address: str = "") -> ExpenseRecord:
        return ExpenseRecord(
            participant_id=uuid4(),
            display_name=name,
            payout_address=payout_address or f"{name.lower()}@pay.example",
            amount_spent=amount,
        )

    return _make_record


@pytest.fixture
def make_records(make_record) -> Callable[..., List[ExpenseRecord]]:
    """Build records named A, B, C, ... from a list of amounts"""

    def _make_records(*amounts) -> List[ExpenseRecord]:
        return [
            make_record(chr(ord("A") + index), amount)
            for index, amount in enumerate(amounts)
        ]

    return _make_records


@pytest.fixture
def mock_db():
    """Mock database session"""
    return AsyncMock()


@pytest_asyncio.fixture
async def client(mock_db) -> AsyncGenerator[AsyncClient, None]:
    """Create test client with database session override"""

    async def override_get_db():
        yield mock_db

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
