from generating import ColumnMappingsGenerator, SqlGenerator, StatementKind, builtin_tables
from schema import Column, Table


def test_email_column_maps_to_email_provider():
    mappings = ColumnMappingsGenerator().generate(builtin_tables())
    assert "customers" in mappings
    customer_map = mappings["customers"]
    assert "customer_email" in customer_map
    assert "customer_id" not in customer_map

    value = customer_map["customer_email"](ColumnMappingsGenerator().fake, {})
    assert isinstance(value, str)
    assert "@" in value
    assert len(value) <= 255


def test_only_varchar_columns_are_mapped():
    mappings = ColumnMappingsGenerator().generate(builtin_tables())
    assert "orders" not in mappings
    for table in builtin_tables():
        for col_name in mappings.get(table.name, {}):
            assert table.get_column(col_name).column_type == "varchar"


def test_values_are_truncated_to_column_length():
    table = Table("people", [Column("email", "varchar", length=3)])
    generator_fn = ColumnMappingsGenerator().generate([table])["people"]["email"]
    fake = ColumnMappingsGenerator().fake
    for _ in range(20):
        assert len(generator_fn(fake, {})) <= 3


def test_unmatched_columns_are_left_out():
    table = Table("junk", [Column("zzqx", "varchar", length=10)])
    assert ColumnMappingsGenerator(threshold=95).generate([table]) == {}


def test_mappings_feed_the_generator():
    tables = builtin_tables()
    customers = next(t for t in tables if t.name == "customers")
    generator = SqlGenerator(
        null_probability=0.0,
        column_type_mappings=ColumnMappingsGenerator().generate(tables),
    )
    sql = generator.generate(customers, StatementKind.INSERT)
    assert sql.startswith("INSERT INTO customers (customer_id, customer_name, customer_email) VALUES (")
    assert "@" in sql
