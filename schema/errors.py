class SqlGenError(Exception):
    """Base class for every error raised while building schemas or generating SQL."""


class MalformedDefinition(SqlGenError):
    """A CREATE TABLE text could not be parsed."""


class UnsupportedType(SqlGenError):
    """A column type outside number / varchar / date reached the generator."""


class EmptyTable(SqlGenError):
    """A statement needs at least one (updatable) column and the table has none."""


class ConfigurationError(SqlGenError):
    """An invalid value was supplied through the environment."""


class IoFailure(SqlGenError):
    """The output file could not be opened or written."""
