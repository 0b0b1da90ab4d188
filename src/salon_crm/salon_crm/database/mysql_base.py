from __future__ import annotations

from contextlib import contextmanager
from decimal import Decimal
from typing import Any, Dict, List, Optional

from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def optional_decimal(value: Any) -> Optional[Decimal]:
    """Normalize MySQL DECIMAL values across connector implementations.

    mysql-connector returns DECIMAL as ``Decimal`` with the C extension but
    may hand back ``str``/``float`` with the pure-Python driver or for
    computed columns.
    """

    if value is None:
        return None
    if isinstance(value, Decimal):
        return value
    if isinstance(value, (int, float, str)):
        return Decimal(str(value))
    raise TypeError(f"Unsupported MySQL DECIMAL value type: {type(value)!r}")


def as_decimal(value: Any) -> Decimal:
    return optional_decimal(value) or Decimal("0")
