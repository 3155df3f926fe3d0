"""
Pydantic models for product transaction rows.

``ProductTransaction`` mirrors a row of the ``products`` table.  The
source dataset is imported verbatim and SQLite keeps values that do not
match a column's type, so every attribute except the ``id`` primary key
accepts any JSON value and is returned unchanged.
"""

from typing import Any, List

from pydantic import BaseModel, Field


class ProductTransaction(BaseModel):
    id: int = Field(..., example=1)
    title: Any = Field(None, example="Fjallraven Foldsack No. 1 Backpack")
    price: Any = Field(None, example=329.85)
    description: Any = None
    category: Any = Field(None, example="men's clothing")
    image: Any = None
    sold: Any = Field(None, example=0)
    dateOfSale: Any = Field(None, example="2021-11-27T20:29:54+05:30")


class TransactionPage(BaseModel):
    """One page of month‑filtered transactions."""

    page: int
    perPage: int
    transactions: List[ProductTransaction]


class TransactionDump(BaseModel):
    """Every stored transaction, unpaginated."""

    transactions: List[ProductTransaction]
