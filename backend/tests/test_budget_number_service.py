"""
Testes unitários do contador de orçamentos.
"""

import pytest
from sqlalchemy.dialects import postgresql

from orcafast.models import BudgetCounter
from orcafast.services.budget_number_service import BudgetNumberService

from conftest import MockCounter, make_result


@pytest.fixture
def service():
    return BudgetNumberService(initial_number=101)


class TestGetNextBudgetNumber:
    """Testes da consulta do próximo número."""

    @pytest.mark.asyncio
    async def test_existing_counter(self, service, mock_db):
        mock_db.execute.return_value = make_result(scalar_one_or_none=MockCounter(105))

        assert await service.get_next_budget_number(mock_db) == 105
        mock_db.add.assert_not_called()

    @pytest.mark.asyncio
    async def test_missing_counter_starts_at_initial_number(self, service, mock_db):
        mock_db.execute.return_value = make_result(scalar_one_or_none=None)

        assert await service.get_next_budget_number(mock_db) == 101
        created = mock_db.add.call_args[0][0]
        assert isinstance(created, BudgetCounter)
        assert created.next_budget_number == 101

    @pytest.mark.asyncio
    async def test_peek_does_not_consume(self, service, mock_db):
        counter = MockCounter(110)
        mock_db.execute.return_value = make_result(scalar_one_or_none=counter)

        await service.get_next_budget_number(mock_db)
        await service.get_next_budget_number(mock_db)

        assert counter.next_budget_number == 110


class TestReserveBudgetNumber:
    """Testes da reserva de números."""

    @pytest.mark.asyncio
    async def test_reserve_returns_current_and_advances(self, service, mock_db):
        counter = MockCounter(101)
        mock_db.execute.return_value = make_result(scalar_one_or_none=counter)

        reserved = await service.reserve_next_budget_number(mock_db)

        assert reserved == 101
        assert counter.next_budget_number == 102
        mock_db.flush.assert_awaited()

    @pytest.mark.asyncio
    async def test_consecutive_reservations(self, service, mock_db):
        counter = MockCounter(101)
        mock_db.execute.return_value = make_result(scalar_one_or_none=counter)

        numbers = [await service.reserve_next_budget_number(mock_db) for _ in range(3)]

        assert numbers == [101, 102, 103]
        assert counter.next_budget_number == 104

    @pytest.mark.asyncio
    async def test_reserve_creates_counter(self, service, mock_db):
        mock_db.execute.return_value = make_result(scalar_one_or_none=None)

        reserved = await service.reserve_next_budget_number(mock_db)

        assert reserved == 101
        assert mock_db.add.call_args[0][0].next_budget_number == 102

    @pytest.mark.asyncio
    async def test_reserve_locks_counter_row(self, service, mock_db):
        """Test a reserva usa SELECT ... FOR UPDATE."""
        mock_db.execute.return_value = make_result(scalar_one_or_none=MockCounter(101))

        await service.reserve_next_budget_number(mock_db)

        statement = mock_db.execute.call_args[0][0]
        assert "FOR UPDATE" in str(statement.compile(dialect=postgresql.dialect()))
