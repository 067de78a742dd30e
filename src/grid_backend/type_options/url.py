from __future__ import annotations

import json
import logging
from typing import Any, Optional

from ..cell_data import URLCellData, URLCellDataSchema, parse_url_cell_str
from ..changeset import extract_changeset_text
from ..field_types import FieldType
from ..url_normalization import extract_url
from .base import TypeOption, TypeOptionBuilder

logger = logging.getLogger(__name__)


class URLTypeOption(TypeOption[URLCellData, URLCellDataSchema]):
    """
    Field type handler for URL cells.

    ``data`` is the field-level configuration blob; URL fields do not use it
    yet but it is kept so stored type options round-trip.
    """

    field_type = FieldType.URL

    def __init__(self, data: str = "") -> None:
        self.data = data

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, URLTypeOption):
            return NotImplemented
        return self.data == other.data

    def __repr__(self) -> str:
        return f"URLTypeOption(data={self.data!r})"

    # Configuration blob

    def to_json_str(self) -> str:
        return json.dumps({"data": self.data}, ensure_ascii=False, separators=(",", ":"))

    @classmethod
    def from_json_str(cls, raw: str) -> "URLTypeOption":
        """
        Load a type option from its stored JSON.

        Unreadable blobs are logged and replaced by the default configuration.
        """
        try:
            payload = json.loads(raw)
            data = payload.get("data", "")
            if not isinstance(data, str):
                raise ValueError(f"'data' must be a string, got {type(data).__name__}")
        except (TypeError, ValueError, AttributeError) as exc:
            logger.error(
                "URLTypeOption deserialize from %r failed: %s", raw, exc
            )
            return cls()
        return cls(data=data)

    # Cell data

    def parse_cell_str(self, cell_data: Any) -> Optional[URLCellData]:
        return parse_url_cell_str(cell_data)

    def apply_changeset(self, changeset: Any, cell_data: Optional[str] = None) -> str:
        """
        Replace the cell content with the changeset text.

        The previous ``cell_data`` is ignored: every edit carries the full
        content. Only changeset extraction can fail.
        """
        content = extract_changeset_text(changeset)
        url = extract_url(content)
        return URLCellData(content=content, url=url).to_json()

    def decode_cell_data(
        self, cell_data: Any, decoded_field_type: FieldType
    ) -> URLCellDataSchema:
        return URLCellData.from_json(cell_data).to_schema()

    def try_decode_cell_data(
        self, cell_data: Any, decoded_field_type: FieldType
    ) -> URLCellDataSchema:
        if not decoded_field_type.is_url():
            return URLCellDataSchema()
        return self.decode_cell_data(cell_data, decoded_field_type)

    def decode_cell_data_to_str(
        self, cell_data: Any, decoded_field_type: FieldType
    ) -> str:
        return URLCellData.from_json(cell_data).content


class URLTypeOptionBuilder(TypeOptionBuilder):
    field_type = FieldType.URL

    def __init__(self, type_option: Optional[URLTypeOption] = None) -> None:
        self._type_option = type_option if type_option is not None else URLTypeOption()

    @classmethod
    def from_json_str(cls, raw: str) -> "URLTypeOptionBuilder":
        return cls(URLTypeOption.from_json_str(raw))

    @property
    def serializer(self) -> URLTypeOption:
        return self._type_option

    def transform(self, field_type: FieldType, type_option_data: str) -> None:
        # URL fields carry no configuration worth migrating.
        return None


__all__ = ["URLTypeOption", "URLTypeOptionBuilder"]
