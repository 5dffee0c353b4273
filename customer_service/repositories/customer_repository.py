"""
Customer Service - Customer Repository
=======================================

What:  Issues the three customer statements and maps rows to records.
How:   Each method runs exactly one statement on the request's
       AsyncSession. Storage failures are converted to OperationError
       carrying the driver's own message.
Who:   Called by CustomerUseCaseImpl.

Statements:
    retrieve_all   SELECT id, nama, address FROM customer
    find_by_id     SELECT id, nama, address FROM customer WHERE id = :id
    create         INSERT INTO customer (id, nama, address) VALUES (:id, :nama, :address)

There is no existence check before insert: a duplicate id is rejected by the
primary key constraint and surfaces as a plain OperationError.
"""

import logging
from abc import ABC, abstractmethod
from typing import List

from sqlalchemy import insert, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from customer_service.exceptions import CustomerNotFoundError, storage_error
from customer_service.models.customer import CustomerRow
from customer_service.schemas.customer import Customer

logger = logging.getLogger(__name__)


class CustomerRepository(ABC):
    """
    Abstract persistence contract for Customer records.

    Contract:
        - Every method performs exactly one round trip to storage
        - No retries, batching or caching
        - Failures raise OperationError; nothing partial is returned
    """

    @abstractmethod
    async def retrieve_all(self) -> List[Customer]:
        """
        Return every stored customer, in the order storage returns them.

        Returns an empty list when the table is empty.

        Raises:
            OperationError: The query failed.
        """
        ...

    @abstractmethod
    async def find_by_id(self, customer_id: str) -> Customer:
        """
        Return the customer with the given id.

        Raises:
            CustomerNotFoundError: No row has this id.
            OperationError: The query failed.
        """
        ...

    @abstractmethod
    async def create(self, customer: Customer) -> None:
        """
        Insert one customer.

        Raises:
            OperationError: The insert failed (including duplicate id).
        """
        ...


def _to_record(row: CustomerRow) -> Customer:
    return Customer(id=row.id, name=row.nama, address=row.address)


class CustomerDbRepository(CustomerRepository):
    """CustomerRepository backed by an async SQLAlchemy session."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def retrieve_all(self) -> List[Customer]:
        try:
            result = await self._session.execute(select(CustomerRow))
            rows = result.scalars().all()
        except SQLAlchemyError as e:
            logger.error("Database error listing customers: %s", str(e))
            raise storage_error(e) from e

        return [_to_record(row) for row in rows]

    async def find_by_id(self, customer_id: str) -> Customer:
        try:
            result = await self._session.execute(
                select(CustomerRow).where(CustomerRow.id == customer_id)
            )
            row = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error("Database error fetching customer %s: %s", customer_id, str(e))
            raise storage_error(e) from e

        if row is None:
            raise CustomerNotFoundError(customer_id)

        return _to_record(row)

    async def create(self, customer: Customer) -> None:
        try:
            await self._session.execute(
                insert(CustomerRow).values(
                    id=customer.id,
                    nama=customer.name,
                    address=customer.address,
                )
            )
        except SQLAlchemyError as e:
            logger.error("Database error creating customer %s: %s", customer.id, str(e))
            raise storage_error(e) from e

        logger.info("Customer %s created", customer.id)
