from .errors import (
    SqlGenError, MalformedDefinition, UnsupportedType, EmptyTable, ConfigurationError, IoFailure
)
from .models import Column, Table, SUPPORTED_TYPES
from .parsing import parse_create_table, parse_create_tables
