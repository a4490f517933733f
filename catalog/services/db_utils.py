"""Helpers for statements SQLAlchemy only exposes per dialect."""
from sqlalchemy import and_, insert, or_, select
from sqlalchemy.dialects import mysql, postgresql, sqlite

_ON_CONFLICT_DIALECTS = {
    "sqlite": sqlite.insert,
    "postgresql": postgresql.insert,
}


def insert_on_duplicate(session, table, rows, conflict_columns):
    """Insert ``rows`` into ``table``, leaving rows that already exist untouched.

    ``conflict_columns`` must be covered by a unique index on ``table``.
    """
    if not rows:
        return

    dialect = session.get_bind().dialect.name

    if dialect in _ON_CONFLICT_DIALECTS:
        stmt = _ON_CONFLICT_DIALECTS[dialect](table).values(rows)
        stmt = stmt.on_conflict_do_nothing(index_elements=conflict_columns)
        session.execute(stmt)
    elif dialect in ("mysql", "mariadb"):
        stmt = mysql.insert(table).values(rows)
        stmt = stmt.on_duplicate_key_update(
            {col: stmt.inserted[col] for col in conflict_columns}
        )
        session.execute(stmt)
    else:
        missing = _missing_rows(session, table, rows, conflict_columns)
        if missing:
            session.execute(insert(table), missing)


def _missing_rows(session, table, rows, conflict_columns):
    key_cols = [table.c[col] for col in conflict_columns]
    clauses = [
        and_(*[c == row[c.name] for c in key_cols]) for row in rows
    ]
    existing = {
        tuple(r) for r in session.execute(select(*key_cols).where(or_(*clauses)))
    }
    missing, seen = [], set()
    for row in rows:
        key = tuple(row[col] for col in conflict_columns)
        if key not in existing and key not in seen:
            seen.add(key)
            missing.append(row)
    return missing
