"""
Customer Service - Customer Use Case
=====================================

What:  Business-facing customer operations.
How:   Each operation delegates 1:1 to the repository and returns its
       result unchanged. Exceptions from the repository propagate as-is.
Who:   Called by the customer routes; calls a CustomerRepository.

Operations:
    get_all_customer      → CustomerRepository.retrieve_all
    find_customer_by_id   → CustomerRepository.find_by_id
    register_customer     → CustomerRepository.create

Validation or authorization rules for customers belong in
CustomerUseCaseImpl; neither the routes nor the repository need to change.
"""

from abc import ABC, abstractmethod
from typing import List

from customer_service.repositories.customer_repository import CustomerRepository
from customer_service.schemas.customer import Customer


class CustomerUseCase(ABC):
    """Abstract interface for customer business operations."""

    @abstractmethod
    async def get_all_customer(self) -> List[Customer]:
        """Return all customers. Raises OperationError on failure."""
        ...

    @abstractmethod
    async def find_customer_by_id(self, customer_id: str) -> Customer:
        """Return one customer. Raises OperationError on failure or no match."""
        ...

    @abstractmethod
    async def register_customer(self, customer: Customer) -> None:
        """Persist a new customer. Raises OperationError on failure."""
        ...


class CustomerUseCaseImpl(CustomerUseCase):
    """CustomerUseCase that passes every call through to the repository."""

    def __init__(self, repository: CustomerRepository):
        self._repository = repository

    async def get_all_customer(self) -> List[Customer]:
        return await self._repository.retrieve_all()

    async def find_customer_by_id(self, customer_id: str) -> Customer:
        return await self._repository.find_by_id(customer_id)

    async def register_customer(self, customer: Customer) -> None:
        await self._repository.create(customer)
