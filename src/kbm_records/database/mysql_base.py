from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    """Yield ``(conn, cursor)`` for one unit of work.

    Everything executed inside the block is committed once on exit, or
    rolled back if the block raises. The connection is always closed.
    """

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


def build_update(
    table: str,
    *,
    key_column: str,
    key_value: Any,
    changes: Mapping[str, Any],
    allowed: Iterable[str],
    touch_updated_at: bool = True,
) -> Tuple[str, tuple]:
    """Build an UPDATE statement for the supplied columns only.

    Column names come from ``allowed``; values are always bound as params.
    """

    allowed_set = set(allowed)
    unknown = set(changes) - allowed_set
    if unknown:
        raise ValueError(f"Unsupported columns for {table}: {sorted(unknown)}")

    assignments = [f"{col}=%s" for col in changes]
    params: list[Any] = list(changes.values())
    if touch_updated_at:
        assignments.append("updated_at=CURRENT_TIMESTAMP")
    params.append(key_value)

    sql = f"UPDATE {table} SET {', '.join(assignments)} WHERE {key_column}=%s"
    return sql, tuple(params)
