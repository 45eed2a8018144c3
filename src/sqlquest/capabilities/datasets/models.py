"""Schema descriptor models for the public datasets a quest runs against."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ColumnSchema(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    type: str = Field(description="Declared column type, e.g. STRING, FLOAT, TIMESTAMP")
    description: Optional[str] = None


class TableSchema(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    columns: List[ColumnSchema] = Field(default_factory=list)

    @model_validator(mode="after")
    def _unique_column_names(self) -> "TableSchema":
        seen = set()
        for column in self.columns:
            if column.name in seen:
                raise ValueError(
                    f"Duplicate column '{column.name}' in table '{self.name}'"
                )
            seen.add(column.name)
        return self

    def column(self, name: str) -> Optional[ColumnSchema]:
        for column in self.columns:
            if column.name == name:
                return column
        return None


class SchemaDescriptor(BaseModel):
    """Immutable table/column inventory that a query may reference."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str = ""
    tables: List[TableSchema] = Field(default_factory=list)

    @model_validator(mode="after")
    def _unique_table_names(self) -> "SchemaDescriptor":
        seen = set()
        for table in self.tables:
            if table.name in seen:
                raise ValueError(
                    f"Duplicate table '{table.name}' in dataset '{self.id}'"
                )
            seen.add(table.name)
        return self

    def table(self, name: str) -> Optional[TableSchema]:
        for table in self.tables:
            if table.name == name:
                return table
        return None

    @property
    def table_names(self) -> List[str]:
        return [t.name for t in self.tables]

    def render_inventory(self) -> str:
        """Render the inventory as the plain-text block embedded in prompts."""
        return "\n\n".join(
            f"Table: {t.name}\nColumns: "
            + ", ".join(f"{c.name} ({c.type})" for c in t.columns)
            for t in self.tables
        )
