"""Dataset schema capability exports."""

from .catalog import DatasetCatalog, DatasetNotFoundError
from .models import ColumnSchema, SchemaDescriptor, TableSchema

__all__ = [
    "DatasetCatalog",
    "DatasetNotFoundError",
    "ColumnSchema",
    "SchemaDescriptor",
    "TableSchema",
]
