from .sql_generator import SqlGenerator, StatementKind, generate
from .value_mappings import ColumnMappingsGenerator
from .runner import run, write_statements, read_num_records, builtin_tables
