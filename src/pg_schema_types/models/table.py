"""Table, column, and enum definition models."""

import warnings
from typing import Optional

from pydantic import BaseModel, Field

# Suppress the specific warning about field 'schema' shadowing
warnings.filterwarnings(
    "ignore",
    message=r'Field name "schema" in ".*Definition" shadows an attribute in parent',
    category=UserWarning,
)

# Enum type name -> labels in catalog order
EnumCatalog = dict[str, tuple[str, ...]]


class CatalogColumn(BaseModel):
    """A column row as reported by the system catalog."""

    name: str = Field(..., description="Column name")
    native_type: str = Field(..., description="Storage-level type name (udt name)")
    not_null: Optional[bool] = Field(
        None, description="NOT NULL flag as reported by the catalog"
    )


class ColumnDefinition(BaseModel):
    """Structural description of a single column."""

    native_type: str = Field(..., description="Storage-level type name (udt name)")
    nullable: bool = Field(..., description="Whether column allows NULL")
    target_type: Optional[str] = Field(
        None, description="Target-language type, assigned by classification"
    )


class TableDefinition(BaseModel):
    """Columns of a table-like relation, keyed by name in catalog order."""

    name: str = Field(..., description="Relation name")
    schema: str = Field(..., description="Schema the relation belongs to")
    columns: dict[str, ColumnDefinition] = Field(
        default_factory=dict, description="Column name -> column definition"
    )

    @property
    def is_classified(self) -> bool:
        """True once every column carries a target type."""
        return all(col.target_type is not None for col in self.columns.values())

    def get_column(self, name: str) -> Optional[ColumnDefinition]:
        """Get column definition by name."""
        return self.columns.get(name)


class SchemaDefinition(BaseModel):
    """Every relation and enum discovered in one schema."""

    name: str = Field(..., description="Schema name")
    tables: dict[str, TableDefinition] = Field(
        default_factory=dict, description="Relation name -> table definition"
    )
    enums: EnumCatalog = Field(
        default_factory=dict, description="Enum type name -> ordered labels"
    )

    @property
    def table_names(self) -> list[str]:
        """Relation names in discovery order."""
        return list(self.tables)
