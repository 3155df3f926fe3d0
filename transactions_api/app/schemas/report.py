"""
Pydantic models for the monthly reports.

The statistics, bar chart and pie chart payloads are returned on their
own by the dedicated endpoints and together by ``/combined-response``.
"""

from typing import Any, List

from pydantic import BaseModel, Field

from .transaction import ProductTransaction


class Statistics(BaseModel):
    selectedMonth: str = Field(..., example="march")
    totalSaleAmount: int = Field(..., example=0)
    totalSoldItems: int = Field(..., example=0)
    totalNotSoldItems: int = Field(..., example=0)


class PriceRangeCount(BaseModel):
    priceRange: str = Field(..., example="0 - 100")
    itemCount: int


class CategoryCount(BaseModel):
    category: Any = Field(None, example="electronics")
    itemCount: int


class CombinedResponse(BaseModel):
    """All month reports in one payload."""

    transactions: List[ProductTransaction]
    statistics: Statistics
    barChart: List[PriceRangeCount]
    pieChart: List[CategoryCount]


class ErrorResponse(BaseModel):
    """Body of every 4xx and 5xx response."""

    error: str
