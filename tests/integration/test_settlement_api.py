"""Integration tests for settlement and expense API endpoints"""

from datetime import datetime
from decimal import Decimal
from types import SimpleNamespace
from unittest.mock import AsyncMock, patch
from uuid import uuid4

import pytest
from httpx import AsyncClient

from app.core.exceptions import (BalanceInvariantViolation, InvalidAmount,
                                 NotFoundError)
from app.services.settlement_service import SettlementService


@pytest.fixture
def event_id():
    return uuid4()


@pytest.fixture
def settlement(event_id, make_records):
    """Settlement of A=30, B=0, C=0"""
    return SettlementService.compute(event_id, make_records("30", "0", "0"))


class TestGetSettlement:
    """Test the event settlement endpoint"""

    @pytest.mark.asyncio
    async def test_get_settlement(self, client: AsyncClient, mock_db, event_id, settlement):
        with patch(
            "app.api.v1.events.SettlementService.get_event_settlement",
            new_callable=AsyncMock,
            return_value=settlement,
        ) as mock_get:
            response = await client.get(f"/api/v1/events/{event_id}/settlement")

        assert response.status_code == 200
        data = response.json()
        assert data["event_id"] == str(event_id)
        assert data["participant_count"] == 3
        assert Decimal(data["total_spent"]) == Decimal("30.00")
        assert Decimal(data["fair_share"]) == Decimal("10.00")

        transfers = data["transfers"]
        assert [(t["from_name"], t["to_name"]) for t in transfers] == [("B", "A"), ("C", "A")]
        assert all(Decimal(t["amount"]) == Decimal("10.00") for t in transfers)
        assert transfers[0]["to_payout_address"] == "a@pay.example"

        positions = {p["display_name"]: p for p in data["positions"]}
        assert positions["A"]["is_receiving"] is True
        assert len(positions["A"]["receives"]) == 2
        assert len(positions["B"]["pays"]) == 1

        mock_get.assert_awaited_once_with(event_id, mock_db, use_cache=True)

    @pytest.mark.asyncio
    async def test_get_settlement_bypass_cache(
        self, client: AsyncClient, mock_db, event_id, settlement
    ):
        with patch(
            "app.api.v1.events.SettlementService.get_event_settlement",
            new_callable=AsyncMock,
            return_value=settlement,
        ) as mock_get:
            response = await client.get(
                f"/api/v1/events/{event_id}/settlement", params={"use_cache": "false"}
            )

        assert response.status_code == 200
        mock_get.assert_awaited_once_with(event_id, mock_db, use_cache=False)

    @pytest.mark.asyncio
    async def test_event_not_found(self, client: AsyncClient, event_id):
        with patch(
            "app.api.v1.events.SettlementService.get_event_settlement",
            new_callable=AsyncMock,
            side_effect=NotFoundError(f"Event with ID {event_id} not found"),
        ):
            response = await client.get(f"/api/v1/events/{event_id}/settlement")

        assert response.status_code == 404
        error = response.json()["error"]
        assert error["type"] == "NotFoundError"
        assert error["path"] == f"/api/v1/events/{event_id}/settlement"

    @pytest.mark.asyncio
    async def test_invalid_amount(self, client: AsyncClient, event_id):
        with patch(
            "app.api.v1.events.SettlementService.get_event_settlement",
            new_callable=AsyncMock,
            side_effect=InvalidAmount("Amount spent by B cannot be negative (-1)"),
        ):
            response = await client.get(f"/api/v1/events/{event_id}/settlement")

        assert response.status_code == 400
        assert response.json()["error"]["type"] == "InvalidAmount"

    @pytest.mark.asyncio
    async def test_balance_invariant_violation(self, client: AsyncClient, event_id):
        with patch(
            "app.api.v1.events.SettlementService.get_event_settlement",
            new_callable=AsyncMock,
            side_effect=BalanceInvariantViolation("Balances sum to 5 instead of 0"),
        ):
            response = await client.get(f"/api/v1/events/{event_id}/settlement")

        assert response.status_code == 500
        assert response.json()["error"]["type"] == "BalanceInvariantViolation"

    @pytest.mark.asyncio
    async def test_invalid_event_id(self, client: AsyncClient):
        response = await client.get("/api/v1/events/not-a-uuid/settlement")

        assert response.status_code == 422


class TestExpenseEndpoints:
    """Test recording spend"""

    @pytest.fixture
    def participant_id(self):
        return uuid4()

    @pytest.fixture
    def entry(self, event_id, participant_id):
        return SimpleNamespace(
            event_id=event_id,
            participant_id=participant_id,
            amount_spent=Decimal("15.50"),
            description="Ice\nCoal",
            confirmed=True,
            updated_at=datetime(2026, 1, 10, 12, 0),
        )

    @pytest.mark.asyncio
    async def test_add_expense(
        self, client: AsyncClient, mock_db, event_id, participant_id, entry
    ):
        with patch(
            "app.api.v1.expenses.ExpenseService.add_expense",
            new_callable=AsyncMock,
            return_value=entry,
        ) as mock_add:
            response = await client.post(
                f"/api/v1/events/{event_id}/participants/{participant_id}/expenses",
                json={"amount": "5.50", "description": "Coal"},
            )

        assert response.status_code == 200
        data = response.json()
        assert Decimal(data["amount_spent"]) == Decimal("15.50")
        assert data["description"] == "Ice\nCoal"

        args = mock_add.await_args.args
        assert args[0] == event_id
        assert args[1] == participant_id
        assert args[2].amount == Decimal("5.50")
        assert args[3] is mock_db

    @pytest.mark.asyncio
    async def test_set_expense(self, client: AsyncClient, event_id, participant_id, entry):
        with patch(
            "app.api.v1.expenses.ExpenseService.set_expense",
            new_callable=AsyncMock,
            return_value=entry,
        ) as mock_set:
            response = await client.put(
                f"/api/v1/events/{event_id}/participants/{participant_id}/expenses",
                json={"amount": 15.5},
            )

        assert response.status_code == 200
        assert mock_set.await_args.args[2].description is None

    @pytest.mark.asyncio
    async def test_negative_amount_rejected(self, client: AsyncClient, event_id, participant_id):
        with patch(
            "app.api.v1.expenses.ExpenseService.add_expense",
            new_callable=AsyncMock,
        ) as mock_add:
            response = await client.post(
                f"/api/v1/events/{event_id}/participants/{participant_id}/expenses",
                json={"amount": "-3"},
            )

        assert response.status_code == 422
        mock_add.assert_not_awaited()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("amount", ["abc", "1e27", "10000000000"])
    async def test_unusable_amount_rejected(
        self, client: AsyncClient, event_id, participant_id, amount
    ):
        with patch(
            "app.api.v1.expenses.ExpenseService.add_expense",
            new_callable=AsyncMock,
        ) as mock_add:
            response = await client.post(
                f"/api/v1/events/{event_id}/participants/{participant_id}/expenses",
                json={"amount": amount},
            )

        assert response.status_code == 422
        mock_add.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unknown_participant(self, client: AsyncClient, event_id, participant_id):
        with patch(
            "app.api.v1.expenses.ExpenseService.set_expense",
            new_callable=AsyncMock,
            side_effect=NotFoundError("Participant is not part of event"),
        ):
            response = await client.put(
                f"/api/v1/events/{event_id}/participants/{participant_id}/expenses",
                json={"amount": "1"},
            )

        assert response.status_code == 404
        assert response.json()["error"]["message"] == "Participant is not part of event"


class TestRoot:
    """Test service endpoints"""

    @pytest.mark.asyncio
    async def test_root(self, client: AsyncClient):
        response = await client.get("/")

        assert response.status_code == 200
        assert "docs_url" in response.json()

    @pytest.mark.asyncio
    async def test_health_reports_cache_state(self, client: AsyncClient):
        with patch(
            "app.main.CacheService.health_check",
            new_callable=AsyncMock,
            return_value=False,
        ):
            response = await client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "cache": "down"}
