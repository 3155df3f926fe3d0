"""
Application package initializer.

The service is split into a few small layers: ``core`` holds settings,
logging and the SQLite store, ``services`` contains the seeding and
query logic, ``schemas`` the Pydantic response models and ``api`` the
FastAPI routers.  ``main`` assembles everything into the ASGI app.
"""

from .main import app  # noqa: F401
