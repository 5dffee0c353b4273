"""
Customer Service - Customer Route Handlers
===========================================

What:  GET /customer, GET /customer/{id} and POST /customer.
How:   Binds the request, calls the CustomerUseCase, returns the record(s)
       as JSON. Failures are raised and turned into `{"err": ...}` by the
       global exception handlers in main.py:
         - unbindable POST body   → 400 (use case never invoked)
         - any use-case failure   → 500
Who:   Any HTTP client of the customer API.

Each request gets its own use case, repository and session through
`get_customer_usecase`; tests replace it with a mock through
`app.dependency_overrides`.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from customer_service.database import get_db_session
from customer_service.repositories.customer_repository import CustomerDbRepository
from customer_service.schemas.customer import Customer, ErrorResponse
from customer_service.services.customer_usecase import (
    CustomerUseCase,
    CustomerUseCaseImpl,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Customer"])


async def get_customer_usecase(
    db: AsyncSession = Depends(get_db_session, scope="function"),
) -> CustomerUseCase:
    """
    Wire use case → repository → request session.

    Function scope: the session commits (or rolls back) as soon as the
    route returns, so a failed commit still reaches the error handlers.
    """
    return CustomerUseCaseImpl(CustomerDbRepository(db))


@router.get(
    "/customer",
    response_model=List[Customer],
    responses={
        200: {"description": "All customers (empty array when none)"},
        500: {"description": "Storage failure", "model": ErrorResponse},
    },
    summary="List all customers",
)
async def get_all_customer(
    usecase: CustomerUseCase = Depends(get_customer_usecase),
) -> List[Customer]:
    return await usecase.get_all_customer()


@router.get(
    "/customer/{customer_id}",
    response_model=Customer,
    responses={
        200: {"description": "The customer"},
        500: {"description": "Storage failure or no customer with this id", "model": ErrorResponse},
    },
    summary="Get a single customer by id",
)
async def get_customer_by_id(
    customer_id: str,
    usecase: CustomerUseCase = Depends(get_customer_usecase),
) -> Customer:
    """
    Look up one customer.

    A missing customer is reported like any other lookup failure (500).
    """
    return await usecase.find_customer_by_id(customer_id)


@router.post(
    "/customer",
    response_model=Customer,
    responses={
        200: {"description": "The submitted customer, echoed back"},
        400: {"description": "Request body could not be bound", "model": ErrorResponse},
        500: {"description": "Storage failure (e.g. duplicate id)", "model": ErrorResponse},
    },
    summary="Register a new customer",
)
async def register_customer(
    customer: Customer,
    usecase: CustomerUseCase = Depends(get_customer_usecase),
) -> Customer:
    """
    Register a customer and echo the submitted record.

    The response is the bound input, not a fresh read from storage.
    """
    await usecase.register_customer(customer)
    return customer
