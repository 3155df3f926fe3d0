"""
Top‑level package for the Product Transactions API.

This file makes ``transactions_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``transactions_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
