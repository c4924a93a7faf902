from datetime import time, timedelta

import pytest

from src.overtime_system.overtime_system.database.bootstrap import (
    _strip_create_db_and_use,
    _strip_line_comments,
    iter_sql_statements,
)
from src.overtime_system.overtime_system.database.mysql_base import normalize_mysql_time


def test_statements_split_on_semicolons():
    sql = "CREATE TABLE a (id INT);\nCREATE TABLE b (id INT);\n"
    assert list(iter_sql_statements(sql)) == ["CREATE TABLE a (id INT)", "CREATE TABLE b (id INT)"]


def test_semicolons_inside_strings_are_kept():
    sql = "INSERT INTO areas (name) VALUES ('Ventas; Norte');INSERT INTO areas (name) VALUES (\"it's\")"
    assert list(iter_sql_statements(sql)) == [
        "INSERT INTO areas (name) VALUES ('Ventas; Norte')",
        "INSERT INTO areas (name) VALUES (\"it's\")",
    ]


def test_escaped_quote_does_not_close_string():
    sql = "INSERT INTO t VALUES ('a\\';b');SELECT 1;"
    assert list(iter_sql_statements(sql)) == ["INSERT INTO t VALUES ('a\\';b')", "SELECT 1"]


def test_schema_header_is_stripped():
    sql = "-- schema\nCREATE DATABASE IF NOT EXISTS overtime_db;\nUSE overtime_db;\nCREATE TABLE x (id INT);\n"
    cleaned = _strip_line_comments(_strip_create_db_and_use(sql))
    assert list(iter_sql_statements(cleaned)) == ["CREATE TABLE x (id INT)"]


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, None),
        (time(8, 30), time(8, 30)),
        (timedelta(hours=17, minutes=45), time(17, 45)),
        (timedelta(hours=22, seconds=15), time(22, 0, 15)),
        ("06:00", time(6, 0)),
        ("23:59:30", time(23, 59, 30)),
    ],
)
def test_normalize_mysql_time(value, expected):
    assert normalize_mysql_time(value) == expected


def test_normalize_mysql_time_rejects_garbage():
    with pytest.raises(ValueError):
        normalize_mysql_time("0830")
    with pytest.raises(TypeError):
        normalize_mysql_time(830)
