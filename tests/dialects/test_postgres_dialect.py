from dialectkit import PostgresDialect, TypeCode


def test_postgres_dialect_quotes_identifiers():
    dialect = PostgresDialect()
    assert dialect.quote_for_table_name('table"name') == '"table""name"'
    assert dialect.qualify(None, "public", dialect.quote("users")) == 'public."users"'


def test_postgres_type_names_respect_capacity():
    dialect = PostgresDialect()
    assert dialect.get_type_name(TypeCode.STRING) == "TEXT"
    assert dialect.get_type_name(TypeCode.STRING, 100) == "VARCHAR(100)"
    assert dialect.get_type_name(TypeCode.STRING, 20_000_000) == "TEXT"
    assert dialect.get_type_name(TypeCode.DECIMAL, 18, 18, 2) == "NUMERIC(18, 2)"
    assert dialect.get_type_name(TypeCode.GUID) == "UUID"
    assert dialect.get_longest_type_name(TypeCode.STRING) == "VARCHAR(10485760)"


def test_postgres_dialect_placeholder():
    dialect = PostgresDialect()
    assert dialect.param_style == "pyformat"
    assert dialect.escape_parameter("name") == "%(name)s"


def test_postgres_version_query():
    assert PostgresDialect().version_query == "SHOW server_version"
