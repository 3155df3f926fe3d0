"""
SQLite storage for product transactions.

This module owns the single ``products`` table.  ``ProductStore``
wraps one SQLite connection which is opened in the application's
startup hook, kept on ``app.state.store`` for the lifetime of the
process and handed to request handlers through the ``get_store``
dependency in ``api.deps``.

Rows are returned as plain dictionaries keyed by column name so that
services can pass them straight into the Pydantic response schemas.
"""

from __future__ import annotations

import os
import sqlite3
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from .config import settings

PRODUCT_COLUMNS = (
    "id",
    "title",
    "price",
    "description",
    "category",
    "image",
    "sold",
    "dateOfSale",
)

SCHEMA = """
CREATE TABLE IF NOT EXISTS products (
    id INTEGER PRIMARY KEY,
    title TEXT,
    price REAL,
    description TEXT,
    category TEXT,
    image TEXT,
    sold INTEGER,
    dateOfSale TEXT
);
"""


def get_database_path() -> str:
    """Compute the path to the SQLite database file.

    If ``settings.database_url`` is an absolute path or ``:memory:``,
    use it directly.  Otherwise resolve it relative to the package
    directory.
    """
    db_url = settings.database_url
    if db_url == ":memory:" or os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent  # transactions_api/
    return str((base_dir / db_url).resolve())


class ProductStore:
    """Thin wrapper around the shared SQLite connection."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        self.conn = conn

    @classmethod
    def open(cls, path: str) -> "ProductStore":
        """Open a connection to ``path`` and return a store bound to it.

        ``check_same_thread`` is disabled because the connection is
        created in the startup hook and then shared by every request
        handler for the lifetime of the process.
        """
        conn = sqlite3.connect(path, check_same_thread=False)
        conn.row_factory = sqlite3.Row
        return cls(conn)

    def init_db(self) -> None:
        """Create the ``products`` table if it does not exist yet."""
        self.conn.executescript(SCHEMA)
        self.conn.commit()

    def fetch_one(self, sql: str, params: Sequence[Any] = ()) -> Optional[Dict[str, Any]]:
        row = self.conn.execute(sql, tuple(params)).fetchone()
        return dict(row) if row is not None else None

    def fetch_all(self, sql: str, params: Sequence[Any] = ()) -> List[Dict[str, Any]]:
        rows = self.conn.execute(sql, tuple(params)).fetchall()
        return [dict(row) for row in rows]

    def execute(self, sql: str, params: Sequence[Any] = ()) -> int:
        """Run a write statement, commit it and return the affected row count."""
        cursor = self.conn.execute(sql, tuple(params))
        self.conn.commit()
        return cursor.rowcount

    def product_exists(self, product_id: Any) -> bool:
        return self.fetch_one("SELECT id FROM products WHERE id = ?", (product_id,)) is not None

    def insert_product(self, item: Dict[str, Any]) -> None:
        """Insert one product with its attributes taken verbatim from ``item``."""
        placeholders = ", ".join("?" for _ in PRODUCT_COLUMNS)
        self.execute(
            f"INSERT INTO products ({', '.join(PRODUCT_COLUMNS)}) VALUES ({placeholders})",
            [item.get(column) for column in PRODUCT_COLUMNS],
        )

    def close(self) -> None:
        self.conn.close()
