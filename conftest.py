import pytest

from schema import Column, Table


@pytest.fixture
def orders_table():
    return Table.from_sql(
        "create table orders(order_id number(10) primary key, order_date date, customer_id number(10))"
    )


@pytest.fixture
def products_table():
    return Table.from_sql(
        "create table products(product_id number(10) primary key, product_name varchar(255), "
        "product_price number(10, 2))"
    )


@pytest.fixture
def keyless_table():
    """A table without a primary key, with a foreign key reference set explicitly."""
    return Table("order_notes", [
        Column("note", "varchar", length=20),
        Column("order_id", "number", length=10, is_nullable=False,
               ref_table="orders", ref_column="order_id"),
    ])
