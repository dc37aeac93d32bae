import random
from datetime import date, datetime

import exrex
import numpy as np

from schema.errors import UnsupportedType
from schema.models import Column, SUPPORTED_TYPES

DEFAULT_NUMBER_RANGE = (1, 10000)
DEFAULT_NUMBER_PRECISION = 10
MAX_NUMBER_DIGITS = 18
DEFAULT_VARCHAR_CAP = 32
DATE_RANGE = (date(2000, 1, 1), date(2030, 12, 31))


def type_clause(column: Column) -> str:
    """
    Render a column's type the way the CREATE TABLE grammar reads it back,
    e.g. 'number(10,2)', 'varchar(255)', 'date'.
    """
    if column.length is None:
        return column.column_type
    if column.column_type == 'number' and column.decimal_places is not None:
        return f"{column.column_type}({column.length},{column.decimal_places})"
    return f"{column.column_type}({column.length})"


def check_supported(column: Column):
    if not column.is_supported:
        raise UnsupportedType(
            f"Column '{column.name}' has unsupported type '{column.column_type}'. "
            f"Supported types: {', '.join(SUPPORTED_TYPES)}."
        )


def format_sql_literal(value, decimal_places=None) -> str:
    """
    Render a Python value as an SQL literal.

    Strings are single-quoted with embedded quotes doubled, dates become quoted
    ISO strings, floats keep exactly `decimal_places` fractional digits when given.
    """
    if value is None:
        return 'NULL'
    elif isinstance(value, bool):
        return 'TRUE' if value else 'FALSE'
    elif isinstance(value, str):
        escaped_value = value.replace("'", "''")
        return f"'{escaped_value}'"
    elif isinstance(value, datetime):
        return f"'{value.strftime('%Y-%m-%d')}'"
    elif isinstance(value, date):
        return f"'{value.isoformat()}'"
    elif isinstance(value, float) and decimal_places is not None:
        return f"{value:.{decimal_places}f}"
    return str(value)


def generate_number(length=None, decimal_places=None):
    """
    Random number fitting number(length[, decimal_places]).

    Without decimal places the result is an int with at most `length` digits
    (1..10000 when no length is given); with decimal places it is a float with
    at most `length - decimal_places` integer digits.
    """
    if decimal_places is not None:
        precision = length if length is not None else DEFAULT_NUMBER_PRECISION
        int_digits = min(max(precision - decimal_places, 0), MAX_NUMBER_DIGITS)
        max_value = 10 ** int_digits - 1
        return round(float(np.random.uniform(0, max_value)), decimal_places)

    if length is None:
        low, high = DEFAULT_NUMBER_RANGE
    else:
        low, high = 0, 10 ** min(length, MAX_NUMBER_DIGITS) - 1
    return int(np.random.randint(low, high + 1))


def generate_varchar(length=None) -> str:
    """Random alphanumeric string no longer than `length` (capped at DEFAULT_VARCHAR_CAP)."""
    cap = DEFAULT_VARCHAR_CAP if length is None else min(length, DEFAULT_VARCHAR_CAP)
    if cap <= 0:
        return ''
    return exrex.getone(f"[A-Za-z0-9]{{1,{cap}}}", limit=cap)


def generate_date(fake) -> date:
    start_date, end_date = DATE_RANGE
    return fake.date_between(start_date=start_date, end_date=end_date)


def random_column_name(existing_names) -> str:
    """A fresh lower-case identifier that does not clash with `existing_names`."""
    existing = set(existing_names)
    while True:
        candidate = exrex.getone(r"col_[a-z]{3,8}")
        if candidate not in existing:
            return candidate


def random_column(existing_names) -> Column:
    """A freshly synthesized nullable column of a random supported type."""
    column_type = random.choice(SUPPORTED_TYPES)
    length = None
    decimal_places = None
    if column_type == 'number':
        length = random.randint(4, 12)
        if random.random() < 0.5:
            decimal_places = random.randint(1, min(4, length - 1))
    elif column_type == 'varchar':
        length = random.choice([20, 50, 100, 255])
    return Column(
        name=random_column_name(existing_names),
        column_type=column_type,
        length=length,
        decimal_places=decimal_places,
    )


def sample_in_order(columns, k=None):
    """Random non-empty subset of `columns`, kept in declaration order."""
    columns = list(columns)
    if k is None:
        k = random.randint(1, len(columns))
    chosen = set(random.sample(range(len(columns)), k))
    return [col for idx, col in enumerate(columns) if idx in chosen]
