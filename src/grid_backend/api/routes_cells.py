from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from grid_backend.cell_data import URLCellData, URLCellDataSchema
from grid_backend.cells import decode_or_default, decode_str_or_default
from grid_backend.changeset import extract_changeset_text
from grid_backend.config import get_max_cell_content_chars
from grid_backend.errors import InvalidChangeset
from grid_backend.field_types import FieldType
from grid_backend.request_context import get_request_id
from grid_backend.type_options import get_url_type_option

from .schemas import (
    CellChangesetRequestSchema,
    CellDecodeRequestSchema,
    CellTextSchema,
    HealthSchema,
    TypeOptionSchema,
    URLCellChangesetResponseSchema,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _parse_field_type(raw: str) -> FieldType:
    try:
        return FieldType.parse(raw)
    except ValueError as exc:
        raise HTTPException(
            status_code=422,
            detail=str(exc),
        ) from exc


@router.get("/health", response_model=HealthSchema)
def health_check() -> HealthSchema:
    return HealthSchema(status="ok")


@router.post("/cells/url/changeset", response_model=URLCellChangesetResponseSchema)
def apply_url_changeset(
    body: CellChangesetRequestSchema,
) -> URLCellChangesetResponseSchema:
    """
    Apply a user edit to a URL cell and return the value to persist.
    """
    try:
        content = extract_changeset_text(body.changeset)
    except InvalidChangeset as exc:
        logger.info(
            "Rejected URL cell changeset (request_id=%s): %s", get_request_id(), exc
        )
        raise HTTPException(
            status_code=422,
            detail=str(exc),
        ) from exc

    max_chars = get_max_cell_content_chars()
    if len(content) > max_chars:
        raise HTTPException(
            status_code=413,
            detail=f"Cell content exceeds {max_chars} characters",
        )

    data = get_url_type_option().apply_changeset(content)
    cell = URLCellData.from_json(data).to_schema()
    return URLCellChangesetResponseSchema(data=data, cell=cell)


@router.post("/cells/url/decode", response_model=URLCellDataSchema)
def decode_url_cell(body: CellDecodeRequestSchema) -> URLCellDataSchema:
    """
    Decode stored URL cell data for display.

    Cells read as another field type, and unreadable data, decode to the
    empty struct.
    """
    field_type = _parse_field_type(body.fieldType)
    return decode_or_default(
        get_url_type_option(), body.data, field_type, URLCellDataSchema()
    )


@router.post("/cells/url/decode-str", response_model=CellTextSchema)
def decode_url_cell_to_str(body: CellDecodeRequestSchema) -> CellTextSchema:
    field_type = _parse_field_type(body.fieldType)
    text = decode_str_or_default(get_url_type_option(), body.data, field_type)
    return CellTextSchema(text=text)


@router.get("/field-types/url/type-option", response_model=TypeOptionSchema)
def read_url_type_option() -> TypeOptionSchema:
    type_option = get_url_type_option()
    return TypeOptionSchema(
        fieldType=type_option.field_type.value,
        typeOption=type_option.to_json_str(),
    )


__all__ = ["router"]
