import logging
import random
from enum import Enum

from faker import Faker

from schema.errors import EmptyTable
from schema.models import Column, Table
from .helpers import (
    check_supported, format_sql_literal, generate_date, generate_number,
    generate_varchar, random_column, sample_in_order, type_clause
)

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)


class StatementKind(Enum):
    """Statement kinds, valued by the keywords each generated statement starts with."""
    CREATE_TABLE = 'CREATE TABLE'
    ALTER_TABLE = 'ALTER TABLE'
    DROP_TABLE = 'DROP TABLE'
    INSERT = 'INSERT INTO'
    SELECT = 'SELECT'
    UPDATE = 'UPDATE'
    DELETE = 'DELETE FROM'


class SqlGenerator:
    """
    Random SQL statement generator driven by table metadata.

    Column types decide how literals look, primary keys decide which column
    WHERE clauses filter on. Tables are never modified.
    """

    def __init__(self, null_probability=0.1, predefined_values=None, column_type_mappings=None):
        """
        Args:
            null_probability (float): Chance that a nullable column gets NULL in INSERT/UPDATE.
            predefined_values (dict, optional): {table | 'global': {column: [values]}}.
            column_type_mappings (dict, optional): {table | 'global': {column: faker method name
                or callable(fake, row)}}.
        """
        if not 0 <= null_probability <= 1:
            raise ValueError(f"null_probability must be within [0, 1], got {null_probability}.")
        self.null_probability = null_probability
        self.predefined_values = predefined_values or {}
        self.column_type_mappings = column_type_mappings or {}
        self.fake = Faker()
        self._builders = {
            StatementKind.CREATE_TABLE: self.create_table_statement,
            StatementKind.ALTER_TABLE: self.alter_table_statement,
            StatementKind.DROP_TABLE: self.drop_table_statement,
            StatementKind.INSERT: self.insert_statement,
            StatementKind.SELECT: self.select_statement,
            StatementKind.UPDATE: self.update_statement,
            StatementKind.DELETE: self.delete_statement,
        }

    def generate(self, table: Table, kind: StatementKind) -> str:
        """
        Produce one random statement of `kind` for `table`.

        Raises:
            UnsupportedType: A column the statement reads has a type outside number/varchar/date.
            EmptyTable: The statement needs columns the table does not have.
        """
        kind = StatementKind(kind)
        if kind not in (StatementKind.DROP_TABLE, StatementKind.ALTER_TABLE):
            for column in table.columns:
                check_supported(column)
        sql = self._builders[kind](table)
        logger.debug(f"Generated {kind.name} for '{table.name}': {sql}")
        return sql

    # --------------------------------------------------------------------------
    # DDL
    # --------------------------------------------------------------------------

    def create_table_statement(self, table: Table) -> str:
        if not table.columns:
            raise EmptyTable(f"Cannot build CREATE TABLE for table '{table.name}' without columns.")
        column_defs = [
            f"{col.name} {type_clause(col)}{' PRIMARY KEY' if col.is_pkey else ''}"
            for col in table.columns
        ]
        return f"CREATE TABLE {table.name} ({', '.join(column_defs)});"

    def alter_table_statement(self, table: Table) -> str:
        column = random_column(table.column_names)
        return f"ALTER TABLE {table.name} ADD COLUMN {column.name} {type_clause(column)};"

    def drop_table_statement(self, table: Table) -> str:
        return f"DROP TABLE {table.name};"

    # --------------------------------------------------------------------------
    # DML
    # --------------------------------------------------------------------------

    def insert_statement(self, table: Table) -> str:
        if not table.columns:
            raise EmptyTable(f"Cannot build INSERT for table '{table.name}' without columns.")
        row = {}
        for column in table.columns:
            row[column.name] = self.generate_column_value(table, column, row)
        values = [self.column_literal(col, row[col.name]) for col in table.columns]
        return (
            f"INSERT INTO {table.name} ({', '.join(table.column_names)}) "
            f"VALUES ({', '.join(values)});"
        )

    def select_statement(self, table: Table) -> str:
        if not table.columns:
            return f"SELECT * FROM {table.name};"
        if random.random() < 0.5:
            projection = '*'
        else:
            projection = ', '.join(col.name for col in sample_in_order(table.columns))
        return f"SELECT {projection} FROM {table.name} WHERE {self.where_clause(table)};"

    def update_statement(self, table: Table) -> str:
        updatable = table.non_key_columns()
        if not updatable:
            raise EmptyTable(f"Table '{table.name}' has no non-key columns to UPDATE.")
        row = {}
        assignments = []
        for column in sample_in_order(updatable):
            row[column.name] = self.generate_column_value(table, column, row)
            assignments.append(f"{column.name} = {self.column_literal(column, row[column.name])}")
        return f"UPDATE {table.name} SET {', '.join(assignments)} WHERE {self.where_clause(table)};"

    def delete_statement(self, table: Table) -> str:
        if not table.columns:
            return f"DELETE FROM {table.name};"
        return f"DELETE FROM {table.name} WHERE {self.where_clause(table)};"

    def where_clause(self, table: Table) -> str:
        """'<col> = <literal>' on the primary key, or on a random column when there is none."""
        column = table.primary_key or random.choice(table.columns)
        value = self.generate_column_value(table, column, {}, allow_null=False)
        return f"{column.name} = {self.column_literal(column, value)}"

    # --------------------------------------------------------------------------
    # Values
    # --------------------------------------------------------------------------

    def generate_column_value(self, table: Table, column: Column, row: dict, allow_null=True):
        """
        Generate a value for a column: NULL (nullable columns only), a predefined
        value, a mapped Faker value, or a value based on the column type.

        A None coming from predefined values or mappings is only kept when the
        column may be NULL here; otherwise the type rules supply the value.
        """
        nullable = allow_null and column.is_nullable
        if nullable and random.random() < self.null_probability:
            return None

        predefined_vals = self._lookup(self.predefined_values, table.name, column.name)
        if predefined_vals is not None:
            if isinstance(predefined_vals, (list, tuple)):
                candidates = [v for v in predefined_vals if nullable or v is not None]
                if candidates:
                    return random.choice(candidates)
            else:
                return predefined_vals

        mapping_entry = self._lookup(self.column_type_mappings, table.name, column.name)
        if mapping_entry is not None:
            if callable(mapping_entry):
                value = mapping_entry(self.fake, row)
            else:
                value = getattr(self.fake, mapping_entry)()
            if value is not None or nullable:
                return value

        return self.generate_value_based_on_type(column)

    def generate_value_based_on_type(self, column: Column):
        check_supported(column)
        if column.column_type == 'number':
            return generate_number(column.length, column.decimal_places)
        elif column.column_type == 'varchar':
            return generate_varchar(column.length)
        return generate_date(self.fake)

    def column_literal(self, column: Column, value) -> str:
        decimal_places = column.decimal_places if column.column_type == 'number' else None
        return format_sql_literal(value, decimal_places)

    @staticmethod
    def _lookup(config: dict, table_name: str, col_name: str):
        if table_name in config and col_name in config[table_name]:
            return config[table_name][col_name]
        if 'global' in config and col_name in config['global']:
            return config['global'][col_name]
        return None


_default_generator = None


def generate(table: Table, kind: StatementKind) -> str:
    """Generate one statement with a shared, lazily created SqlGenerator."""
    global _default_generator
    if _default_generator is None:
        _default_generator = SqlGenerator()
    return _default_generator.generate(table, kind)
