import pytest

from schema import Column, MalformedDefinition, Table, parse_create_table, parse_create_tables


def test_table_init():
    """A table built from an explicit column list keeps name and columns verbatim."""
    columns = [
        Column("id", "number", length=10, is_nullable=False, is_pkey=True),
        Column("name", "varchar", length=255),
    ]
    table = Table("test_table", columns)
    assert table.name == "test_table"
    assert len(table.columns) == 2
    assert table.columns[0] is columns[0]


def test_easy_parsing():
    """The orders definition parses into three columns with a numeric primary key."""
    table = Table.from_sql(
        "create table orders(order_id number(10) primary key, order_date date, customer_id number(10))"
    )
    assert table.name == "orders"
    assert len(table.columns) == 3

    pk = table.columns[0]
    assert pk.name == "order_id"
    assert pk.is_pkey is True
    assert pk.column_type == "number"
    assert pk.length == 10
    assert pk.is_nullable is False

    assert table.column_names == ["order_id", "order_date", "customer_id"]
    assert table.columns[1].column_type == "date"
    assert table.columns[1].length is None
    assert table.columns[2].is_pkey is False
    assert table.columns[2].is_nullable is True
    assert table.primary_key == pk


def test_medium_parsing():
    """
    Upper-case keywords, a two-parameter number with inner whitespace,
    extra spaces in PRIMARY KEY and a trailing semicolon.
    """
    table = parse_create_table("""
        CREATE TABLE Products (
            product_id NUMBER(10)   PRIMARY    KEY,
            product_name VARCHAR(255),
            product_price NUMBER( 10 , 2 )
        );
    """)
    assert table.name == "Products"
    by_name = {col.name: col for col in table.columns}

    assert by_name["product_id"].is_pkey
    assert by_name["product_name"].column_type == "varchar"
    assert by_name["product_name"].length == 255
    assert by_name["product_price"].column_type == "number"
    assert by_name["product_price"].length == 10
    assert by_name["product_price"].decimal_places == 2


def test_foreign_keys_are_never_parsed(orders_table):
    for col in orders_table.columns:
        assert col.ref_table is None
        assert col.ref_column is None
        assert not col.is_foreign_key


def test_unknown_type_is_kept_for_later():
    """Type names outside number/varchar/date parse fine and are flagged unsupported."""
    table = parse_create_table("create table t (id int primary key, created timestamp)")
    assert [col.column_type for col in table.columns] == ["int", "timestamp"]
    assert not any(col.is_supported for col in table.columns)


def test_parse_create_tables_script():
    script = """
    create table a (id number(5) primary key);
    create table b (id number(5) primary key, label varchar(10));
    """
    tables = parse_create_tables(script)
    assert list(tables) == ["a", "b"]
    assert tables["b"].get_column("label").length == 10
    assert tables["b"].get_column("missing") is None


@pytest.mark.parametrize("sql", [
    "table orders (order_id number(10))",
    "select * from orders",
    "",
    "create orders (order_id number(10))",
    "create table orders (order_id number(10)",
    "create table orders order_id number(10))",
    "create table orders (order_id, customer_id number(10))",
    "create table orders (order_id primary key)",
    "create table orders (order_id number(10) primary key extra)",
    "create table orders (customer_name varchar(10, 2))",
    "create table orders ()",
])
def test_malformed_definitions(sql):
    with pytest.raises(MalformedDefinition):
        parse_create_table(sql)


def test_column_requires_name():
    with pytest.raises(ValueError):
        Column("", "number")


def test_column_type_is_case_insensitive():
    assert Column("x", "VarChar", length=5).column_type == "varchar"
    assert Column("x", "NUMBER").is_supported


def test_table_is_immutable(orders_table):
    with pytest.raises(AttributeError):
        orders_table.name = "other"
    assert isinstance(orders_table.columns, tuple)


def test_table_comment():
    """Tables carry an optional, read-only comment; parsed tables have none."""
    table = Table("notes", [Column("body", "varchar", length=50)], comment="free-form notes")
    assert table.comment == "free-form notes"
    assert parse_create_table("create table notes (body varchar(50))").comment is None
    with pytest.raises(AttributeError):
        table.comment = "changed"
