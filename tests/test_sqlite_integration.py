"""
Customer Service - Storage-Backed Tests (SQLite)
=================================================

What:  Repository and full-stack behavior against a real (in-memory)
       SQLite database through aiosqlite.

What we test:
    ✅ N successful creates → retrieve_all returns N records
    ✅ find_by_id after create returns an equal record
    ✅ A failed write (duplicate id) leaves committed rows unchanged
    ✅ The HTTP API end to end, including the session rollback path
"""

import pytest

from customer_service.exceptions import CustomerNotFoundError, OperationError
from customer_service.repositories.customer_repository import CustomerDbRepository
from customer_service.schemas.customer import Customer


async def _create(session_factory, customer):
    async with session_factory() as session:
        await CustomerDbRepository(session).create(customer)
        await session.commit()


async def _retrieve_all(session_factory):
    async with session_factory() as session:
        return await CustomerDbRepository(session).retrieve_all()


class TestRepositoryOnSqlite:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("count", [0, 1, 5])
    async def test_retrieve_all_after_n_creates(self, sqlite_session_factory, count):
        """N committed creates should list exactly N records."""
        for i in range(count):
            await _create(
                sqlite_session_factory,
                Customer(id=f"C{i:03d}", name=f"Name {i}", address=f"Address {i}"),
            )

        customers = await _retrieve_all(sqlite_session_factory)

        assert len(customers) == count

    @pytest.mark.asyncio
    async def test_find_by_id_returns_created_record(self, sqlite_session_factory, dummy_customers):
        """A created record should read back equal."""
        await _create(sqlite_session_factory, dummy_customers[1])

        async with sqlite_session_factory() as session:
            found = await CustomerDbRepository(session).find_by_id("C002")

        assert found == dummy_customers[1]

    @pytest.mark.asyncio
    async def test_find_by_id_unknown_raises(self, sqlite_session_factory):
        """Looking up an absent id should raise CustomerNotFoundError."""
        async with sqlite_session_factory() as session:
            with pytest.raises(CustomerNotFoundError):
                await CustomerDbRepository(session).find_by_id("C999")

    @pytest.mark.asyncio
    async def test_failed_create_leaves_committed_rows(self, sqlite_session_factory, dummy_customers):
        """A duplicate insert should fail without touching earlier rows."""
        for customer in dummy_customers:
            await _create(sqlite_session_factory, customer)

        duplicate = Customer(id="C001", name="Someone Else", address="Elsewhere")
        async with sqlite_session_factory() as session:
            with pytest.raises(OperationError) as exc_info:
                await CustomerDbRepository(session).create(duplicate)
            await session.rollback()

        assert exc_info.value.message
        assert await _retrieve_all(sqlite_session_factory) == dummy_customers


class TestApiOnSqlite:

    @pytest.mark.asyncio
    async def test_register_then_read_back(self, sqlite_client):
        """A registered customer should appear in the list and by id."""
        payload = {"Id": "C001", "Nama": "Dummy Name 1", "Address": "Dummy Address 1"}

        created = await sqlite_client.post("/customer", json=payload)
        listed = await sqlite_client.get("/customer")
        fetched = await sqlite_client.get("/customer/C001")

        assert created.status_code == 200
        assert created.json() == payload
        assert listed.status_code == 200
        assert listed.json() == [payload]
        assert fetched.status_code == 200
        assert fetched.json() == payload

    @pytest.mark.asyncio
    async def test_empty_table_lists_empty_array(self, sqlite_client):
        """An empty table should list as []."""
        response = await sqlite_client.get("/customer")

        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.asyncio
    async def test_duplicate_register_is_500_and_not_visible(self, sqlite_client):
        """A duplicate register should answer 500 and leave the first row alone."""
        first = {"Id": "C001", "Nama": "Dummy Name 1", "Address": "Dummy Address 1"}
        duplicate = {"Id": "C001", "Nama": "Other", "Address": "Other Address"}

        await sqlite_client.post("/customer", json=first)
        response = await sqlite_client.post("/customer", json=duplicate)
        listed = await sqlite_client.get("/customer")

        assert response.status_code == 500
        assert response.json()["err"]
        assert listed.json() == [first]

    @pytest.mark.asyncio
    async def test_unknown_id_is_500(self, sqlite_client):
        """An unknown id should answer 500 with the not-found message."""
        response = await sqlite_client.get("/customer/C404")

        assert response.status_code == 500
        assert response.json() == {"err": "customer with id 'C404' was not found"}

    @pytest.mark.asyncio
    async def test_health_reports_connected(self, sqlite_client):
        """A reachable database should report healthy."""
        response = await sqlite_client.get("/health")

        assert response.status_code == 200
        assert response.json()["database"] == "connected"
        assert response.json()["status"] == "healthy"
