"""
Customer Service - Customer SQLAlchemy Model
=============================================

What:  ORM mapping of the `customer` table.
Who:   Used only by CustomerDbRepository; other layers see the pydantic
       `Customer` record instead.

Table:
    customer (
        id       VARCHAR  PRIMARY KEY,   -- assigned by the caller
        nama     VARCHAR  NOT NULL,
        address  VARCHAR  NOT NULL
    )

The table is provisioned outside this service; `Base.metadata` is only
used by the test-suite to create it in SQLite.
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from customer_service.database import Base


class CustomerRow(Base):
    """One row of the `customer` table."""

    __tablename__ = "customer"

    id: Mapped[str] = mapped_column(String, primary_key=True)

    # Column is `nama`; the attribute keeps the column name so that the
    # mapping to Customer.name happens in exactly one place (the repository)
    nama: Mapped[str] = mapped_column(String, nullable=False)

    address: Mapped[str] = mapped_column(String, nullable=False)

    def __repr__(self) -> str:
        return f"<CustomerRow(id='{self.id}', nama='{self.nama}')>"
