"""
Transaction listing endpoints.

``GET /transactions`` returns one page of a month's transactions,
optionally filtered by a search term matched against title,
description and price.  ``GET /all-transactions`` dumps every stored
row and is meant for diagnostics and export.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query

from transactions_api.app.api.deps import get_month, get_store, server_error
from transactions_api.app.core.db import ProductStore
from transactions_api.app.schemas.transaction import TransactionDump, TransactionPage
from transactions_api.app.services.filters import MonthSelection, parse_int_param
from transactions_api.app.services.transaction_service import TransactionService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/transactions", response_model=TransactionPage)
async def list_transactions(
    page: Optional[str] = Query(None, description="Page number, defaults to 1"),
    per_page: Optional[str] = Query(None, alias="perPage", description="Page size, defaults to 10"),
    search: Optional[str] = Query(None, description="Case‑insensitive substring"),
    month: MonthSelection = Depends(get_month),
    store: ProductStore = Depends(get_store),
) -> TransactionPage:
    """Return a page of transactions sold in ``month``.

    ``page`` and ``perPage`` that are not integers fall back to their
    defaults; any integer, including zero or a negative value, is used
    as given.
    """
    try:
        return await TransactionService.list_transactions(
            store,
            month.code,
            page=parse_int_param(page, 1),
            per_page=parse_int_param(per_page, 10),
            search=search,
        )
    except Exception as exc:
        logger.exception("Error fetching transactions")
        raise server_error() from exc


@router.get("/all-transactions", response_model=TransactionDump)
async def list_all_transactions(store: ProductStore = Depends(get_store)) -> TransactionDump:
    try:
        return await TransactionService.list_all(store)
    except Exception as exc:
        logger.exception("Error fetching all transactions")
        raise server_error() from exc
