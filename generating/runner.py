import logging
import os
import random

from schema.errors import ConfigurationError, IoFailure
from schema.parsing import parse_create_tables
from .sql_generator import SqlGenerator, StatementKind
from .value_mappings import ColumnMappingsGenerator

logger = logging.getLogger(__name__)

DEFAULT_NUM_RECORDS = 30
DEFAULT_OUTPUT_PATH = 'output.sql'

BUILTIN_SCHEMA = """
create table orders(order_id number(10) primary key, order_date date, customer_id number(10));
create table customers(customer_id number(10) primary key, customer_name varchar(255), customer_email varchar(255));
create table products(product_id number(10) primary key, product_name varchar(255), product_price number(10, 2));
"""


def builtin_tables() -> list:
    """The orders / customers / products tables every run draws from."""
    return list(parse_create_tables(BUILTIN_SCHEMA).values())


def read_num_records(environ=None) -> int:
    """
    Read NUM_RECORDS from the environment (default 30).

    Raises:
        ConfigurationError: If the value is not a non-negative integer.
    """
    environ = os.environ if environ is None else environ
    raw_value = environ.get('NUM_RECORDS')
    if raw_value is None or raw_value.strip() == '':
        return DEFAULT_NUM_RECORDS
    try:
        num_records = int(raw_value)
    except ValueError as e:
        raise ConfigurationError(f"NUM_RECORDS must be an integer, got {raw_value!r}.") from e
    if num_records < 0:
        raise ConfigurationError(f"NUM_RECORDS must not be negative, got {num_records}.")
    return num_records


def write_statements(tables, num_records: int, output_path=DEFAULT_OUTPUT_PATH, generator=None) -> int:
    """
    Append `num_records` random statements to `output_path`, one per line.

    Each iteration picks a table and a statement kind uniformly at random.
    The file is opened once and closed on every exit path; lines already
    written stay in place if generation fails midway.

    Returns:
        int: Number of statements written.

    Raises:
        IoFailure: If the file cannot be opened or written.
    """
    generator = generator or SqlGenerator()
    tables = list(tables)
    kinds = list(StatementKind)

    try:
        f = open(output_path, mode="a", encoding="utf-8")
    except OSError as e:
        raise IoFailure(f"Cannot open '{output_path}' for appending: {e}") from e

    written = 0
    with f:
        for _ in range(num_records):
            table = random.choice(tables)
            kind = random.choice(kinds)
            sql = generator.generate(table, kind)
            try:
                f.write(sql + "\n")
            except OSError as e:
                raise IoFailure(f"Cannot write to '{output_path}': {e}") from e
            written += 1
    return written


def run(environ=None, output_path=DEFAULT_OUTPUT_PATH, generator=None) -> int:
    num_records = read_num_records(environ)
    tables = builtin_tables()
    if generator is None:
        generator = SqlGenerator(column_type_mappings=ColumnMappingsGenerator().generate(tables))
    logger.info(f"Generating {num_records} statements for {len(tables)} tables into '{output_path}'.")
    written = write_statements(tables, num_records, output_path, generator)
    logger.info(f"Wrote {written} statements.")
    return written
