from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from grid_backend.cell_data import URLCellDataSchema
from grid_backend.field_types import FieldType


class HealthSchema(BaseModel):
    status: str


class CellChangesetRequestSchema(BaseModel):
    # Left untyped so non-text payloads reach changeset extraction and are
    # reported as invalid changesets rather than schema errors.
    changeset: Any = None


class URLCellChangesetResponseSchema(BaseModel):
    data: str
    cell: URLCellDataSchema


class CellDecodeRequestSchema(BaseModel):
    data: Any = None
    fieldType: str = FieldType.URL.value


class CellTextSchema(BaseModel):
    text: str


class TypeOptionSchema(BaseModel):
    fieldType: str
    typeOption: str


__all__ = [
    "CellChangesetRequestSchema",
    "CellDecodeRequestSchema",
    "CellTextSchema",
    "HealthSchema",
    "TypeOptionSchema",
    "URLCellChangesetResponseSchema",
    "URLCellDataSchema",
]
