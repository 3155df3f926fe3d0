"""
Helpers that turn request parameters into SQL fragments.

Every month‑based report filters rows with ``MONTH_FILTER`` and binds
the two‑digit month code produced by ``normalize_month``.  The search
clause is always built with placeholders; the user text never ends up
inside the SQL string itself.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, List, Optional, Tuple

MONTHS = {
    "january": "01",
    "february": "02",
    "march": "03",
    "april": "04",
    "may": "05",
    "june": "06",
    "july": "07",
    "august": "08",
    "september": "09",
    "october": "10",
    "november": "11",
    "december": "12",
}

MONTH_FILTER = "strftime('%m', dateOfSale) = ?"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)", re.ASCII)

# Range of a signed 64-bit SQLite INTEGER.
SQLITE_MAX_INTEGER = 2**63 - 1
SQLITE_MIN_INTEGER = -(2**63)


class InvalidMonthError(ValueError):
    """Raised when a month selector is not an English month name."""


@dataclass(frozen=True)
class MonthSelection:
    """A month selector as supplied by the client plus its numeric code."""

    name: str
    code: str


def normalize_month(name: str) -> str:
    """Map a case‑insensitive English month name to ``"01"``..``"12"``."""
    code = MONTHS.get(name.lower()) if isinstance(name, str) else None
    if code is None:
        raise InvalidMonthError(f"Invalid month name: {name!r}")
    return code


def select_month(name: Optional[str], default: str = "march") -> MonthSelection:
    """Resolve a possibly missing month parameter.

    An absent or empty value selects ``default``.  The original text is
    kept in ``name`` because the statistics payload echoes it back.
    """
    if not name:
        name = default
    return MonthSelection(name=name, code=normalize_month(name))


def parse_int_param(value: Optional[str], default: int) -> int:
    """Parse a pagination parameter.

    The leading integer of the value is used, so ``"2.5"`` is 2 and
    ``"5abc"`` is 5.  Only a value without a leading integer falls back
    to ``default``; zero and negative numbers are returned unchanged and
    values beyond the signed 64-bit range are clamped to it.
    """
    match = _LEADING_INT.match(value) if isinstance(value, str) else None
    if match is None:
        return default
    digits = match.group(1)
    try:
        return clamp_sqlite_int(int(digits))
    except ValueError:
        # More digits than int() accepts; far outside the SQLite range anyway.
        return SQLITE_MIN_INTEGER if digits.startswith("-") else SQLITE_MAX_INTEGER


def clamp_sqlite_int(value: int) -> int:
    """Limit ``value`` to what SQLite can bind as an INTEGER."""
    return max(SQLITE_MIN_INTEGER, min(SQLITE_MAX_INTEGER, value))


def _escape_like(text: str) -> str:
    return text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def build_search_clause(search: Optional[str]) -> Tuple[str, List[Any]]:
    """Return ``(sql, params)`` restricting rows to a search substring.

    The match is case‑insensitive over ``title`` and ``description`` and
    also checks the textual form of ``price``.  An empty search returns
    an empty clause.
    """
    if not search:
        return "", []
    pattern = f"%{_escape_like(search.lower())}%"
    sql = (
        " AND ("
        "lower(title) LIKE ? ESCAPE '\\'"
        " OR lower(description) LIKE ? ESCAPE '\\'"
        " OR CAST(price AS TEXT) LIKE ? ESCAPE '\\'"
        ")"
    )
    return sql, [pattern, pattern, pattern]
