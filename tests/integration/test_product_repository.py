"""Integration tests for SQLAlchemyProductRepository.

Runs the repository against a real SQLite database (aiosqlite) created
from the models, one fresh database file per test.

Tests cover:
- Create/read/update/delete round trips across sessions
- Stable ordering and offset/limit slicing
- NOT_FOUND and CONFLICT error values
- SQLAlchemy failures mapped to DatabaseError
"""

from pathlib import Path
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from sqlalchemy.exc import OperationalError
from uuid_extensions import uuid7

from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from src.infrastructure.enums import InfrastructureErrorCode
from src.infrastructure.errors import DatabaseError, StorageError
from src.infrastructure.persistence.database import Database
from src.infrastructure.persistence.repositories import SQLAlchemyProductRepository
from tests.conftest import create_product


@pytest_asyncio.fixture
async def database(tmp_path: Path):
    """Fresh SQLite database with the schema created."""
    db = Database(f"sqlite+aiosqlite:///{tmp_path / 'catalog.db'}")
    await db.create_all()
    yield db
    await db.drop_all()
    await db.close()


async def _add(database: Database, *products) -> None:
    async with database.get_session() as session:
        repo = SQLAlchemyProductRepository(session=session)
        for product in products:
            result = await repo.add(product)
            assert isinstance(result, Success)


@pytest.mark.integration
class TestProductRepositoryReads:
    """get_by_id, get_all, count."""

    async def test_add_then_get_by_id_in_new_session(self, database: Database):
        product = create_product("Laptop", 10, 149)
        await _add(database, product)

        async with database.get_session() as session:
            result = await SQLAlchemyProductRepository(session=session).get_by_id(
                product.id
            )

        assert isinstance(result, Success)
        assert result.value == product

    async def test_get_by_id_missing_returns_not_found(self, database: Database):
        async with database.get_session() as session:
            result = await SQLAlchemyProductRepository(session=session).get_by_id(
                uuid7()
            )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.NOT_FOUND
        assert result.error.message == "Product not found"

    async def test_get_all_orders_by_create_date(self, database: Database):
        newest = create_product("TV", offset_minutes=30)
        oldest = create_product("Laptop", offset_minutes=0)
        middle = create_product("Mobile Phone", offset_minutes=10)
        await _add(database, newest, oldest, middle)

        async with database.get_session() as session:
            result = await SQLAlchemyProductRepository(session=session).get_all()

        assert isinstance(result, Success)
        assert [p.name for p in result.value] == ["Laptop", "Mobile Phone", "TV"]

    async def test_get_all_offset_and_limit(self, database: Database):
        products = [create_product(f"P{i}", offset_minutes=i) for i in range(5)]
        await _add(database, *products)

        async with database.get_session() as session:
            result = await SQLAlchemyProductRepository(session=session).get_all(
                offset=2, limit=2
            )

        assert isinstance(result, Success)
        assert [p.name for p in result.value] == ["P2", "P3"]

    async def test_count(self, database: Database):
        await _add(database, create_product("A"), create_product("B"))

        async with database.get_session() as session:
            result = await SQLAlchemyProductRepository(session=session).count()

        assert result == Success(value=2)


@pytest.mark.integration
class TestProductRepositoryWrites:
    """add, update, delete."""

    async def test_add_duplicate_id_returns_conflict(self, database: Database):
        product = create_product("Laptop")
        await _add(database, product)

        async with database.get_session() as session:
            result = await SQLAlchemyProductRepository(session=session).add(product)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.CONFLICT

    async def test_update_preserves_create_date(self, database: Database):
        product = create_product("Laptop", 10, 149)
        await _add(database, product)

        changed = product.with_changes(name="Laptop Pro", quality=9, quantity=3)
        async with database.get_session() as session:
            result = await SQLAlchemyProductRepository(session=session).update(changed)
        async with database.get_session() as session:
            stored = await SQLAlchemyProductRepository(session=session).get_by_id(
                product.id
            )

        assert isinstance(result, Success)
        assert isinstance(stored, Success)
        assert stored.value.name == "Laptop Pro"
        assert stored.value.quality == 9
        assert stored.value.quantity == 3
        assert stored.value.create_date == product.create_date

    async def test_update_missing_returns_not_found(self, database: Database):
        async with database.get_session() as session:
            result = await SQLAlchemyProductRepository(session=session).update(
                create_product()
            )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.NOT_FOUND

    async def test_delete_then_get_returns_not_found(self, database: Database):
        product = create_product()
        await _add(database, product)

        async with database.get_session() as session:
            deleted = await SQLAlchemyProductRepository(session=session).delete(
                product.id
            )
        async with database.get_session() as session:
            result = await SQLAlchemyProductRepository(session=session).get_by_id(
                product.id
            )

        assert deleted == Success(value=product.id)
        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.NOT_FOUND

    async def test_delete_missing_returns_not_found(self, database: Database):
        async with database.get_session() as session:
            result = await SQLAlchemyProductRepository(session=session).delete(uuid7())

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.NOT_FOUND


@pytest.mark.integration
class TestProductRepositoryStorageFailures:
    """SQLAlchemy exceptions become DatabaseError values."""

    async def test_operational_error_mapped_to_database_error(
        self, database: Database
    ):
        async with database.get_session() as session:
            session.execute = AsyncMock(  # type: ignore[method-assign]
                side_effect=OperationalError("SELECT", {}, Exception("db down"))
            )
            result = await SQLAlchemyProductRepository(session=session).count()

        assert isinstance(result, Failure)
        assert isinstance(result.error, DatabaseError)
        assert isinstance(result.error, StorageError)
        assert result.error.code == ErrorCode.STORAGE_FAILURE
        assert (
            result.error.infrastructure_code
            == InfrastructureErrorCode.DATABASE_CONNECTION_FAILED
        )

    async def test_missing_table_is_storage_failure(self, database: Database):
        await database.drop_all()

        async with database.get_session() as session:
            result = await SQLAlchemyProductRepository(session=session).get_all()

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.STORAGE_FAILURE
