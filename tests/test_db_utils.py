"""Tests for the insert-or-ignore helper."""
from unittest.mock import MagicMock

from sqlalchemy import func, select
from sqlalchemy.dialects import mysql

from catalog.models.super_link import SuperLink
from catalog.services.db_utils import _missing_rows, insert_on_duplicate

table = SuperLink.__table__


def _pairs(db):
    rows = db.session.execute(select(table.c.product_id, table.c.parent_id))
    return sorted(tuple(r) for r in rows)


def test_insert_on_duplicate_keeps_existing_rows(db):
    insert_on_duplicate(
        db.session, table, [{"product_id": 1, "parent_id": 10}], ["product_id", "parent_id"]
    )
    link_id = db.session.execute(select(table.c.link_id)).scalar_one()

    insert_on_duplicate(
        db.session,
        table,
        [{"product_id": 1, "parent_id": 10}, {"product_id": 2, "parent_id": 10}],
        ["product_id", "parent_id"],
    )

    assert _pairs(db) == [(1, 10), (2, 10)]
    assert db.session.execute(
        select(table.c.link_id).where(table.c.product_id == 1)
    ).scalar_one() == link_id


def test_insert_on_duplicate_without_rows_is_noop():
    session = MagicMock()
    insert_on_duplicate(session, table, [], ["product_id", "parent_id"])
    session.execute.assert_not_called()


def test_missing_rows_skips_existing_and_repeated(db):
    insert_on_duplicate(
        db.session, table, [{"product_id": 1, "parent_id": 10}], ["product_id", "parent_id"]
    )
    rows = [
        {"product_id": 1, "parent_id": 10},
        {"product_id": 2, "parent_id": 10},
        {"product_id": 2, "parent_id": 10},
    ]

    missing = _missing_rows(db.session, table, rows, ["product_id", "parent_id"])

    assert missing == [{"product_id": 2, "parent_id": 10}]
    assert db.session.execute(select(func.count()).select_from(table)).scalar() == 1


def _session_for(dialect_name, execute=None):
    session = MagicMock()
    session.get_bind.return_value.dialect.name = dialect_name
    if execute is not None:
        session.execute.side_effect = execute
    return session


def test_insert_on_duplicate_mysql_statement():
    session = _session_for("mysql")

    insert_on_duplicate(
        session, table, [{"product_id": 1, "parent_id": 10}], ["product_id", "parent_id"]
    )

    stmt = session.execute.call_args.args[0]
    sql = str(stmt.compile(dialect=mysql.dialect()))
    assert sql.startswith("INSERT INTO catalog_product_super_link")
    assert "ON DUPLICATE KEY UPDATE" in sql


def test_insert_on_duplicate_generic_dialect_inserts_missing_rows(db):
    insert_on_duplicate(
        db.session, table, [{"product_id": 1, "parent_id": 10}], ["product_id", "parent_id"]
    )
    session = _session_for("generic", execute=db.session.execute)

    insert_on_duplicate(
        session,
        table,
        [
            {"product_id": 1, "parent_id": 10},
            {"product_id": 2, "parent_id": 10},
            {"product_id": 3, "parent_id": 10},
        ],
        ["product_id", "parent_id"],
    )

    assert _pairs(db) == [(1, 10), (2, 10), (3, 10)]


def test_insert_on_duplicate_generic_dialect_skips_insert_when_all_exist(db):
    insert_on_duplicate(
        db.session, table, [{"product_id": 1, "parent_id": 10}], ["product_id", "parent_id"]
    )
    session = _session_for("generic", execute=db.session.execute)

    insert_on_duplicate(
        session, table, [{"product_id": 1, "parent_id": 10}], ["product_id", "parent_id"]
    )

    assert session.execute.call_count == 1
    assert _pairs(db) == [(1, 10)]
