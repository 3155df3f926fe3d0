"""
Top‑level router.

Aggregates the endpoint modules.  ``main.create_app`` mounts this
router at ``settings.api_prefix`` (the root by default).  Every error
is rendered as ``ErrorResponse``; the ``responses`` below document that
in the OpenAPI schema.
"""

from fastapi import APIRouter

from transactions_api.app.schemas.report import ErrorResponse

from .endpoints import home, reports, transactions

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Unknown month name"},
    404: {"model": ErrorResponse, "description": "No data for the selected month"},
    500: {"model": ErrorResponse, "description": "Internal Server Error"},
}

router = APIRouter()

router.include_router(home.router, tags=["home"], responses={500: ERROR_RESPONSES[500]})
router.include_router(transactions.router, tags=["transactions"], responses=ERROR_RESPONSES)
router.include_router(reports.router, tags=["reports"], responses=ERROR_RESPONSES)
