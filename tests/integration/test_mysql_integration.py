import os
import uuid
from urllib.parse import urlparse

import pytest

from dialectkit import MySQLDialect, Table, TypeCode, default_registry


def _require_mysql_connection():
    try:
        import pymysql
    except ImportError:
        pytest.skip("PyMySQL driver not installed")
    dsn = os.getenv("DIALECTKIT_MYSQL_DSN")
    if not dsn:
        pytest.skip("DIALECTKIT_MYSQL_DSN not set; skipping MySQL integration test")
    parsed = urlparse(dsn)
    try:
        return pymysql.connect(
            host=parsed.hostname or "localhost",
            user=parsed.username,
            password=parsed.password,
            database=parsed.path.lstrip("/") or None,
            port=parsed.port or 3306,
            autocommit=True,
        )
    except Exception as exc:  # pragma: no cover - environment dependent
        pytest.skip(f"Cannot connect to MySQL for integration test: {exc}")


def test_mysql_detection_and_ddl():
    connection = _require_mysql_connection()
    table_name = f"dialectkit_my_{uuid.uuid4().hex[:8]}"
    dialect = default_registry().get_dialect_for(connection)
    assert isinstance(dialect, MySQLDialect)
    table = (
        Table(table_name)
        .add_column("Id", TypeCode.INT64, nullable=False)
        .add_column("Name", TypeCode.STRING, length=100)
        .set_primary_key("Id")
        .add_index(f"ix_{table_name}", ["Name"])
    )
    statements = [s for s in dialect.format_create_table(table).split(";") if s.strip()]
    try:
        with connection.cursor() as cursor:
            for statement in statements:
                cursor.execute(statement)
        assert table_name in dialect.get_table_names(connection)
    finally:
        with connection.cursor() as cursor:
            cursor.execute(f"DROP TABLE IF EXISTS {dialect.quote(table_name)}")
        connection.close()
