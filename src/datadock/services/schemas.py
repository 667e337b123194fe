"""Pydantic schemas for the data API and data compiler API payloads."""

from typing import Any

from pydantic import BaseModel, Field, model_validator

# --- Data API schemas ---


class DatabaseTableListResponse(BaseModel):
    """Body of ``GET /db_tables``."""

    database_tables: list[str]


class DatabaseTableDataResponse(BaseModel):
    """Body of ``GET /data/{table}``.

    Every row must carry exactly one cell per column, in column order.
    """

    columns: list[str] = Field(default_factory=list)
    rows: list[list[Any]] = Field(default_factory=list)

    @model_validator(mode="after")
    def _rows_match_columns(self) -> "DatabaseTableDataResponse":
        width = len(self.columns)
        for index, row in enumerate(self.rows):
            if len(row) != width:
                raise ValueError(f"row {index} has {len(row)} cells, expected {width}")
        return self


# --- Data compiler schemas ---


class ColumnDefinition(BaseModel):
    """One column of an uploaded table schema."""

    name: str
    type: str
    length: int | None = None
    nullable: bool | None = None


class TableSchema(BaseModel):
    """Shape of an uploaded table-schema document.

    Only used to describe a document; submissions are never blocked on it.
    """

    name: str
    columns: list[ColumnDefinition]
    description: str | None = None


class CompileRequest(BaseModel):
    """Body of ``POST /compile``."""

    json_data: Any


class CompilerResponse(BaseModel):
    """Body returned by ``POST /compile``."""

    status: str | None = Field(default=None, description="'success' or 'error'")
    message: str | None = None
