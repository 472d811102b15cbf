from dialectkit import MySQLDialect, TypeCode


def test_mysql_dialect_quotes_identifiers():
    dialect = MySQLDialect()
    assert dialect.quote("user`name") == "`user``name`"
    assert dialect.unquote("`user``name`") == "user`name"
    assert dialect.quote_for_column_name("`ready`") == "`ready`"


def test_mysql_string_capacities():
    dialect = MySQLDialect()
    assert dialect.get_type_name(TypeCode.STRING, 100) == "VARCHAR(100)"
    assert dialect.get_type_name(TypeCode.STRING, 1000) == "TEXT"
    assert dialect.get_type_name(TypeCode.STRING, 100_000) == "MEDIUMTEXT"
    assert dialect.get_type_name(TypeCode.STRING, 100_000_000) == "LONGTEXT"
    assert dialect.get_type_name(TypeCode.STRING) == "LONGTEXT"
    assert dialect.get_longest_type_name(TypeCode.STRING) == "MEDIUMTEXT"


def test_mysql_placeholder():
    dialect = MySQLDialect()
    assert dialect.escape_parameter("id") == "%(id)s"
