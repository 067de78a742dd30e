from __future__ import annotations

import logging
from typing import Any, TypeVar

from .errors import DecodeError
from .field_types import FieldType
from .type_options.base import TypeOption

logger = logging.getLogger(__name__)

SchemaT = TypeVar("SchemaT")


def decode_or_default(
    type_option: TypeOption[Any, SchemaT],
    cell_data: Any,
    field_type: FieldType,
    default: SchemaT,
) -> SchemaT:
    """
    Guarded decode to the transport struct, falling back to ``default``.

    Read paths treat unreadable cell data as "no data" rather than an error.
    """
    try:
        return type_option.try_decode_cell_data(cell_data, field_type)
    except DecodeError as exc:
        logger.warning(
            "Falling back to empty %s cell: %s", type_option.field_type.value, exc
        )
        return default


def decode_str_or_default(
    type_option: TypeOption[Any, Any],
    cell_data: Any,
    field_type: FieldType,
) -> str:
    """
    Decode stored cell data to plain text, or "" when it cannot be read.
    """
    try:
        return type_option.decode_cell_data_to_str(cell_data, field_type)
    except DecodeError as exc:
        logger.warning(
            "Falling back to empty %s cell text: %s", type_option.field_type.value, exc
        )
        return ""


__all__ = ["decode_or_default", "decode_str_or_default"]
