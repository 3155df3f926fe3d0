"""
Import of the remote product transaction dataset.

``SeedService.seed_products`` downloads a JSON array of product
records and inserts every record whose ``id`` is not in the store yet.
Records are stored verbatim.  Running the import again only adds
records that are still missing, so it is safe to call on every start.

Seeding is best effort: download, decoding and storage errors are
logged and the application keeps serving whatever data it already has.
"""

from __future__ import annotations

import logging
import sqlite3
from typing import Any, Optional

import requests

from transactions_api.app.core.db import ProductStore

logger = logging.getLogger(__name__)


class SeedService:
    """Populate the ``products`` table from a remote JSON endpoint."""

    @classmethod
    def fetch_products(
        cls,
        url: str,
        *,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> Any:
        """Download and decode the dataset at ``url``.

        Raises ``requests.RequestException`` on network or HTTP errors
        and ``ValueError`` if the body is not valid JSON.
        """
        http = session or requests.Session()
        logger.debug("Fetching seed data from %s", url)
        response = http.get(url, timeout=timeout)
        response.raise_for_status()
        return response.json()

    @classmethod
    def seed_products(
        cls,
        store: ProductStore,
        url: str,
        *,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> int:
        """Insert missing products from ``url`` and return how many were added."""
        inserted = 0
        try:
            data = cls.fetch_products(url, session=session, timeout=timeout)
            if not isinstance(data, list):
                logger.error("Seed data from %s is not a JSON array; nothing imported", url)
                return 0
            for item in data:
                if not isinstance(item, dict):
                    logger.warning("Skipping seed item that is not an object: %r", item)
                    continue
                if store.product_exists(item.get("id")):
                    continue
                store.insert_product(item)
                inserted += 1
        except requests.RequestException as exc:
            logger.error("Failed to fetch seed data from %s: %s", url, exc)
        except ValueError as exc:
            logger.error("Seed data from %s is not valid JSON: %s", url, exc)
        except sqlite3.Error:
            logger.exception("Failed to store seed data after %d inserts", inserted)
        else:
            logger.info("Products added to the database: %d new of %d", inserted, len(data))
        return inserted
