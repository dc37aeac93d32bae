import logging

from pyparsing import (
    CaselessKeyword, Group, Optional, ParseException, ParserElement, Suppress,
    Word, ZeroOrMore, alphanums, alphas, pyparsing_common
)

from .errors import MalformedDefinition
from .models import Column, Table

ParserElement.enable_packrat()

logger = logging.getLogger(__name__)


def _create_table_parser():
    """
    Build the pyparsing grammar for the restricted CREATE TABLE form:

        CREATE TABLE <name> ( <col_def> (, <col_def>)* ) [;]
        <col_def> ::= <col_name> <type>[(<len>[, <decimals>])] [PRIMARY KEY]
    """
    lpar, rpar, comma = map(Suppress, "(),")
    identifier = Word(alphas + "_", alphanums + "_$").set_name("identifier")
    integer = pyparsing_common.integer

    type_params = lpar + integer('length') + Optional(comma + integer('decimal_places')) + rpar
    primary_key = Group(CaselessKeyword('PRIMARY') + CaselessKeyword('KEY'))('primary_key')

    column_def = Group(
        identifier('name') + identifier('column_type') + Optional(type_params) + Optional(primary_key)
    )
    column_list = Group(column_def + ZeroOrMore(comma + column_def))

    return (
        CaselessKeyword('CREATE') + CaselessKeyword('TABLE') + identifier('table_name')
        + lpar + column_list('columns') + rpar + Optional(Suppress(';'))
    )


_PARSER = _create_table_parser()


def _build_column(col_def) -> Column:
    column_type = col_def['column_type'].lower()
    decimal_places = col_def.get('decimal_places')
    if decimal_places is not None and column_type != 'number':
        raise MalformedDefinition(
            f"Column '{col_def['name']}': only number accepts decimal places, got {column_type}."
        )
    is_pkey = 'primary_key' in col_def
    return Column(
        name=col_def['name'],
        column_type=column_type,
        length=col_def.get('length'),
        decimal_places=decimal_places,
        # NOT NULL is not part of the grammar; only key columns are non-nullable.
        is_nullable=not is_pkey,
        is_pkey=is_pkey,
    )


def parse_create_table(create_table_string: str) -> Table:
    """
    Parse a single restricted CREATE TABLE statement into a Table.

    Args:
        create_table_string (str): e.g. "create table t (id number(10) primary key, name varchar(255))".

    Returns:
        Table: The parsed table. Foreign key references are never set.

    Raises:
        MalformedDefinition: If the statement does not start with CREATE TABLE,
            its parentheses are unbalanced, or a column has no type.
    """
    text = create_table_string.strip()
    words = text.lower().split(None, 2)
    if words[:2] != ['create', 'table']:
        raise MalformedDefinition(f"Statement does not start with CREATE TABLE: {text[:40]!r}")
    if text.count('(') != text.count(')'):
        raise MalformedDefinition(f"Unbalanced parentheses in: {text!r}")

    try:
        parsed = _PARSER.parse_string(text, parse_all=True)
    except ParseException as e:
        raise MalformedDefinition(f"Invalid CREATE TABLE definition: {e}") from e

    columns = [_build_column(col_def) for col_def in parsed['columns']]
    logger.debug(f"Parsed table '{parsed['table_name']}' with {len(columns)} columns.")
    return Table(parsed['table_name'], columns)


def parse_create_tables(sql_script: str) -> dict:
    """
    Parse a script of ';'-separated restricted CREATE TABLE statements.

    Args:
        sql_script (str): The script.

    Returns:
        dict: Table name -> Table, in script order.
    """
    tables = {}
    for statement in sql_script.split(';'):
        if not statement.strip():
            continue
        table = parse_create_table(statement)
        tables[table.name] = table
    return tables
