import pytest

from dialectkit import MAX_PRIORITY, SqlDialect, TypeCode, UnmappedTypeError


class AnsiDialect(SqlDialect):
    name = "ansi"

    def register_column_types(self) -> None:
        self.register_column_type(TypeCode.INT32, "INTEGER")
        self.register_column_type(TypeCode.STRING, "CLOB")
        self.register_column_type(TypeCode.STRING, "VARCHAR($l)", capacity=255)


class BracketDialect(AnsiDialect):
    name = "bracket"
    open_quote = "["
    close_quote = "]"


IDENTIFIERS = [
    "plain",
    "",
    'with"quote',
    '"leading',
    'trailing"',
    '""',
    "[bracketed]",
    "a]]b[[c",
    "mixed\"[]'`",
]


def test_defaults():
    dialect = AnsiDialect()
    assert dialect.open_quote == '"'
    assert dialect.close_quote == '"'
    assert dialect.parameter_placeholder == "@"
    assert dialect.priority == MAX_PRIORITY


def test_get_type_name_delegates_to_type_names():
    dialect = AnsiDialect()
    assert dialect.get_type_name(TypeCode.INT32) == "INTEGER"
    assert dialect.get_type_name(TypeCode.STRING, 100) == "VARCHAR(100)"
    assert dialect.get_type_name(TypeCode.STRING, 1000) == "CLOB"
    assert dialect.get_longest_type_name(TypeCode.STRING) == "VARCHAR(255)"
    assert dialect.get_longest_type_name(TypeCode.GUID) is None


def test_unmapped_type_raises():
    dialect = AnsiDialect()
    with pytest.raises(UnmappedTypeError) as excinfo:
        dialect.get_type_name(TypeCode.GUID, 16)
    assert excinfo.value.type_code is TypeCode.GUID
    assert excinfo.value.length == 16
    assert "GUID" in str(excinfo.value)
    assert "ansi" in str(excinfo.value)


def test_quote_doubles_embedded_quotes():
    dialect = AnsiDialect()
    assert dialect.quote("name") == '"name"'
    assert dialect.quote('na"me') == '"na""me"'
    assert dialect.quote('"name') == '"""name"'


def test_is_quoted():
    dialect = AnsiDialect()
    assert dialect.is_quoted('"name"')
    assert not dialect.is_quoted("name")
    assert not dialect.is_quoted('"name')
    assert not dialect.is_quoted("")
    assert not dialect.is_quoted('"')


def test_unquote_examples():
    dialect = AnsiDialect()
    assert dialect.unquote('"quoted"') == "quoted"
    assert dialect.unquote('"quote""d"') == 'quote"d'
    assert dialect.unquote('quote""d') == 'quote"d'
    assert dialect.unquote_all(['"a"', 'b""c']) == ["a", 'b"c']


@pytest.mark.parametrize("dialect_cls", [AnsiDialect, BracketDialect])
@pytest.mark.parametrize("identifier", IDENTIFIERS)
def test_unquote_inverts_quote(dialect_cls, identifier):
    dialect = dialect_cls()
    assert dialect.unquote(dialect.quote(identifier)) == identifier


@pytest.mark.parametrize("dialect_cls", [AnsiDialect, BracketDialect])
@pytest.mark.parametrize("identifier", IDENTIFIERS)
def test_quote_for_names_is_idempotent(dialect_cls, identifier):
    dialect = dialect_cls()
    once = dialect.quote_for_column_name(identifier)
    assert dialect.quote_for_column_name(once) == once
    assert dialect.quote_for_table_name(dialect.quote_for_table_name(identifier)) == (
        dialect.quote_for_table_name(identifier)
    )
    assert dialect.quote_for_alias_name(dialect.quote_for_alias_name(identifier)) == (
        dialect.quote_for_alias_name(identifier)
    )


def test_differing_quote_characters_escape_both_sides():
    dialect = BracketDialect()
    assert dialect.quote("table") == "[table]"
    assert dialect.quote("a]b") == "[a]]b]"
    assert dialect.quote("a[b") == "[a[[b]"
    assert dialect.quote("[x]") == "[[[x]]]"
    assert dialect.unquote("[a]]b]") == "a]b"
    assert dialect.unquote("[[[x]]]") == "[x]"
    assert dialect.quote_for_table_name("[already]") == "[already]"
    assert dialect.quote_for_column_name('"other"') == '["other"]'


def test_qualify_omits_empty_segments():
    dialect = AnsiDialect()
    assert dialect.qualify("cat", "dbo", "users") == "cat.dbo.users"
    assert dialect.qualify(None, "dbo", "users") == "dbo.users"
    assert dialect.qualify("cat", "", "users") == "cat.users"
    assert dialect.qualify("", None, "users") == "users"


def test_escape_parameter_prefixes_placeholder():
    assert AnsiDialect().escape_parameter("id") == "@id"
