from dataclasses import dataclass, field
from typing import Optional, Sequence, Tuple

SUPPORTED_TYPES = ('number', 'varchar', 'date')


@dataclass(frozen=True)
class Column:
    """
    A single column of a table.

    Attributes:
        name (str): Column name, unique within its table.
        column_type (str): Logical type, stored lower-case ('number', 'varchar', 'date').
        length (int, optional): Varchar max length or number precision.
        decimal_places (int, optional): Number scale; ignored for other types.
        is_nullable (bool): Whether generated INSERT/UPDATE values may be NULL.
        is_pkey (bool): Whether the column is the table's primary key.
        ref_table (str, optional): Referenced table of a foreign key.
        ref_column (str, optional): Referenced column of a foreign key.
    """
    name: str
    column_type: str
    length: Optional[int] = None
    decimal_places: Optional[int] = None
    is_nullable: bool = True
    is_pkey: bool = False
    ref_table: Optional[str] = None
    ref_column: Optional[str] = None

    def __post_init__(self):
        if not self.name:
            raise ValueError("Column name must not be empty.")
        object.__setattr__(self, 'column_type', self.column_type.lower())
        if self.column_type == 'number' and self.decimal_places is not None and self.length is None:
            raise ValueError(f"Column '{self.name}': decimal places need a length, e.g. number(10,2).")

    @property
    def is_supported(self) -> bool:
        return self.column_type in SUPPORTED_TYPES

    @property
    def is_foreign_key(self) -> bool:
        return self.ref_table is not None and self.ref_column is not None


@dataclass(frozen=True)
class Table:
    """
    An immutable table definition: a name plus its columns in declaration order,
    with an optional free-form comment.
    """
    name: str
    columns: Tuple[Column, ...] = field(default_factory=tuple)
    comment: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, 'columns', tuple(self.columns))

    @classmethod
    def from_sql(cls, create_table_string: str) -> 'Table':
        """
        Build a table from a restricted CREATE TABLE statement.

        Raises:
            MalformedDefinition: If the text does not match the grammar.
        """
        from .parsing import parse_create_table
        return parse_create_table(create_table_string)

    @property
    def column_names(self) -> list:
        return [col.name for col in self.columns]

    @property
    def primary_key(self) -> Optional[Column]:
        return next((col for col in self.columns if col.is_pkey), None)

    def get_column(self, col_name: str) -> Optional[Column]:
        return next((col for col in self.columns if col.name == col_name), None)

    def non_key_columns(self) -> Sequence[Column]:
        return [col for col in self.columns if not col.is_pkey]
