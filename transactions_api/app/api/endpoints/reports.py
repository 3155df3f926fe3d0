"""
Monthly report endpoints.

Every route accepts a ``month`` query parameter (English month name,
case insensitive, ``march`` when omitted).  Unknown month names are
rejected with HTTP 400 by the ``get_month`` dependency.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from transactions_api.app.api.deps import get_month, get_store, server_error
from transactions_api.app.core.db import ProductStore
from transactions_api.app.schemas.report import (
    CategoryCount,
    CombinedResponse,
    PriceRangeCount,
    Statistics,
)
from transactions_api.app.services.filters import MonthSelection, parse_int_param
from transactions_api.app.services.report_service import ReportService

logger = logging.getLogger(__name__)

router = APIRouter()

NO_DATA = "No data found for the selected month."


@router.get("/statistics", response_model=Statistics)
async def get_statistics(
    month: MonthSelection = Depends(get_month),
    store: ProductStore = Depends(get_store),
) -> Statistics:
    """Total sale amount of sold items and sold/unsold counts for a month.

    A month without transactions reports zeros.
    """
    try:
        statistics = await ReportService.statistics(store, month.name, month.code)
    except Exception as exc:
        logger.exception("Error computing statistics for %s", month.name)
        raise server_error() from exc
    if statistics is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NO_DATA)
    return statistics


@router.get("/bar-chart", response_model=List[PriceRangeCount])
async def get_bar_chart(
    month: MonthSelection = Depends(get_month),
    store: ProductStore = Depends(get_store),
) -> List[PriceRangeCount]:
    """Number of items per price range; empty ranges are omitted."""
    try:
        return await ReportService.bar_chart(store, month.code)
    except Exception as exc:
        logger.exception("Error building bar chart for %s", month.name)
        raise server_error() from exc


@router.get("/pie-chart", response_model=List[CategoryCount])
async def get_pie_chart(
    month: MonthSelection = Depends(get_month),
    store: ProductStore = Depends(get_store),
) -> List[CategoryCount]:
    """Number of items per category."""
    try:
        return await ReportService.pie_chart(store, month.code)
    except Exception as exc:
        logger.exception("Error building pie chart for %s", month.name)
        raise server_error() from exc


@router.get("/combined-response", response_model=CombinedResponse)
async def get_combined_response(
    page: Optional[str] = Query(None),
    per_page: Optional[str] = Query(None, alias="perPage"),
    search: Optional[str] = Query(None),
    month: MonthSelection = Depends(get_month),
    store: ProductStore = Depends(get_store),
) -> CombinedResponse:
    """Transactions page, statistics, bar chart and pie chart in one payload."""
    try:
        combined = await ReportService.combined(
            store,
            month.name,
            month.code,
            page=parse_int_param(page, 1),
            per_page=parse_int_param(per_page, 10),
            search=search,
        )
    except Exception as exc:
        logger.exception("Error building combined response for %s", month.name)
        raise server_error() from exc
    if combined is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NO_DATA)
    return combined
