"""
Monthly reports over product transactions.

All reports filter rows by the month of ``dateOfSale`` and aggregate
in SQL:

* ``statistics`` – total sale amount of sold items and sold/unsold counts;
* ``bar_chart`` – number of items per fixed price range;
* ``pie_chart`` – number of items per category;
* ``combined`` – the three reports plus a page of transactions.
"""

from __future__ import annotations

import math
from typing import Any, Dict, List, Optional

from transactions_api.app.core.db import ProductStore
from transactions_api.app.services.filters import MONTH_FILTER
from transactions_api.app.services.transaction_service import TransactionService

# (label, inclusive upper bound).  Each range starts just above the
# previous bound; the last one is open ended.
PRICE_BUCKETS = (
    ("0 - 100", 100),
    ("101 - 200", 200),
    ("201 - 300", 300),
    ("301 - 400", 400),
    ("401 - 500", 500),
    ("501 - 600", 600),
    ("601 - 700", 700),
    ("701 - 800", 800),
    ("801 - 900", 900),
    ("901-above", None),
)


def _price_range_case() -> str:
    # Negative or missing prices fall in no bucket.
    whens = ["WHEN price IS NULL OR price < 0 THEN NULL"]
    for label, upper in PRICE_BUCKETS:
        condition = f"price <= {upper}" if upper is not None else "price > 900"
        whens.append(f"WHEN {condition} THEN '{label}'")
    return "CASE " + " ".join(whens) + " END"


STATISTICS_QUERY = f"""
    SELECT
        SUM(CASE WHEN sold = 1 THEN price ELSE 0 END) AS totalSaleAmount,
        COUNT(CASE WHEN sold = 1 THEN 1 END) AS totalSoldItems,
        COUNT(CASE WHEN sold = 0 THEN 1 END) AS totalNotSoldItems
    FROM products
    WHERE {MONTH_FILTER}
"""

BAR_CHART_QUERY = f"""
    SELECT {_price_range_case()} AS priceRange, COUNT(*) AS itemCount
    FROM products
    WHERE {MONTH_FILTER}
    GROUP BY priceRange
"""

PIE_CHART_QUERY = f"""
    SELECT category, COUNT(*) AS itemCount
    FROM products
    WHERE {MONTH_FILTER}
    GROUP BY category
"""


class ReportService:
    """Aggregated, month‑filtered views of the product transactions."""

    @classmethod
    async def statistics(
        cls, store: ProductStore, month_name: str, month_code: str
    ) -> Optional[Dict[str, Any]]:
        """Return sale totals for a month.

        Aggregates without GROUP BY always yield one row, so a month
        without data reports zeros.  ``None`` is returned only if the
        store produced no row at all.
        """
        row = store.fetch_one(STATISTICS_QUERY, (month_code,))
        if row is None:
            return None
        total = row["totalSaleAmount"]
        return {
            "selectedMonth": month_name,
            "totalSaleAmount": math.floor(total) if total else 0,
            "totalSoldItems": row["totalSoldItems"] or 0,
            "totalNotSoldItems": row["totalNotSoldItems"] or 0,
        }

    @classmethod
    async def bar_chart(cls, store: ProductStore, month_code: str) -> List[Dict[str, Any]]:
        """Return ``[{priceRange, itemCount}]`` in bucket order, skipping empty buckets."""
        counts = {
            row["priceRange"]: row["itemCount"]
            for row in store.fetch_all(BAR_CHART_QUERY, (month_code,))
            if row["priceRange"] is not None
        }
        return [
            {"priceRange": label, "itemCount": counts[label]}
            for label, _ in PRICE_BUCKETS
            if label in counts
        ]

    @classmethod
    async def pie_chart(cls, store: ProductStore, month_code: str) -> List[Dict[str, Any]]:
        return store.fetch_all(PIE_CHART_QUERY, (month_code,))

    @classmethod
    async def combined(
        cls,
        store: ProductStore,
        month_name: str,
        month_code: str,
        *,
        page: int = 1,
        per_page: int = 10,
        search: Optional[str] = None,
    ) -> Optional[Dict[str, Any]]:
        """Return the transactions page and all three reports for one month.

        Returns ``None`` when the statistics query yields no row.
        """
        statistics = await cls.statistics(store, month_name, month_code)
        if statistics is None:
            return None
        transactions = await TransactionService.fetch_page(
            store, month_code, page=page, per_page=per_page, search=search
        )
        return {
            "transactions": transactions,
            "statistics": statistics,
            "barChart": await cls.bar_chart(store, month_code),
            "pieChart": await cls.pie_chart(store, month_code),
        }
