"""
Dependencies shared by the endpoint modules.

``get_store`` hands out the store opened at startup.  ``get_month``
turns the ``month`` query parameter into a ``MonthSelection`` and
rejects unknown month names with HTTP 400 before the handler runs.
"""

from typing import Optional

from fastapi import HTTPException, Query, Request, status

from transactions_api.app.core.config import settings
from transactions_api.app.core.db import ProductStore
from transactions_api.app.services.filters import InvalidMonthError, MonthSelection, select_month


def get_store(request: Request) -> ProductStore:
    return request.app.state.store


def get_month(
    month: Optional[str] = Query(None, description="English month name, case insensitive"),
) -> MonthSelection:
    try:
        return select_month(month, default=settings.default_month)
    except InvalidMonthError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid month name.") from exc


def server_error() -> HTTPException:
    """Generic 500 raised by handlers after logging the underlying error."""
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Internal Server Error"
    )
