"""
Customer Service - Repository Layer
====================================

What:  Translates between Customer records and rows of the `customer` table.

Repository Inventory:
    - CustomerRepository (abstract): retrieve_all / find_by_id / create
    - CustomerDbRepository: implementation over an async SQLAlchemy session
"""

from customer_service.repositories.customer_repository import (
    CustomerDbRepository,
    CustomerRepository,
)

__all__ = ["CustomerRepository", "CustomerDbRepository"]
