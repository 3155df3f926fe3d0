"""
Listing of product transactions.

``list_transactions`` serves ``/transactions`` and the transaction part
of ``/combined-response``: rows of one month, optionally narrowed by a
search term, sliced with LIMIT/OFFSET in store order.  ``list_all``
dumps the whole table for diagnostics and export.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from transactions_api.app.core.db import ProductStore
from transactions_api.app.services.filters import MONTH_FILTER, build_search_clause, clamp_sqlite_int

logger = logging.getLogger(__name__)


class TransactionService:
    """Read‑only queries over the ``products`` table."""

    @classmethod
    async def fetch_page(
        cls,
        store: ProductStore,
        month_code: str,
        *,
        page: int = 1,
        per_page: int = 10,
        search: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        """Return the rows of one page without the pagination envelope.

        ``page`` and ``per_page`` are used as given: SQLite treats a
        negative LIMIT as "no limit" and a negative OFFSET as zero.  LIMIT
        and OFFSET are clamped to the range SQLite can bind.
        """
        search_sql, params = build_search_clause(search)
        query = f"SELECT * FROM products WHERE {MONTH_FILTER}{search_sql} LIMIT ? OFFSET ?"
        limit = clamp_sqlite_int(per_page)
        offset = clamp_sqlite_int((page - 1) * per_page)
        return store.fetch_all(query, [month_code, *params, limit, offset])

    @classmethod
    async def list_transactions(
        cls,
        store: ProductStore,
        month_code: str,
        *,
        page: int = 1,
        per_page: int = 10,
        search: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Return ``{page, perPage, transactions}`` for one month."""
        rows = await cls.fetch_page(store, month_code, page=page, per_page=per_page, search=search)
        logger.debug(
            "Listed %d transactions for month %s (page=%s, perPage=%s, search=%r)",
            len(rows), month_code, page, per_page, search,
        )
        return {"page": page, "perPage": per_page, "transactions": rows}

    @classmethod
    async def list_all(cls, store: ProductStore) -> Dict[str, Any]:
        return {"transactions": store.fetch_all("SELECT * FROM products")}
