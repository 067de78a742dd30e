from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Optional

from pydantic import BaseModel

from .errors import DecodeError

logger = logging.getLogger(__name__)

_REQUIRED_FIELDS = ("content", "url")


class URLCellDataSchema(BaseModel):
    """
    Transport projection of a URL cell, consumed by presentation/API layers.
    """

    url: str = ""
    content: str = ""


@dataclass(frozen=True)
class URLCellData:
    """
    Persisted value of a single URL cell.

    ``content`` is the raw text exactly as the user typed it; ``url`` is the
    normalized link derived from it ("" when the text holds no URL).
    """

    content: str
    url: str

    def to_json(self) -> str:
        """
        Serialize to the compact JSON form stored in cell revisions.

        The output is byte-stable for equal values; sync and history compare
        stored blobs verbatim.
        """
        return json.dumps(
            {"content": self.content, "url": self.url},
            ensure_ascii=False,
            separators=(",", ":"),
        )

    @classmethod
    def from_json(cls, data: Any) -> "URLCellData":
        if not isinstance(data, str):
            raise DecodeError(
                f"URL cell data must be a JSON string, got {type(data).__name__}"
            )
        try:
            payload = json.loads(data)
        except ValueError as exc:
            raise DecodeError(f"URL cell data is not valid JSON: {exc}") from exc

        if not isinstance(payload, dict):
            raise DecodeError("URL cell data must be a JSON object")
        for name in _REQUIRED_FIELDS:
            if not isinstance(payload.get(name), str):
                raise DecodeError(f"URL cell data is missing string field {name!r}")

        return cls(content=payload["content"], url=payload["url"])

    def to_schema(self) -> URLCellDataSchema:
        return URLCellDataSchema(url=self.url, content=self.content)


def parse_url_cell_str(data: Any) -> Optional[URLCellData]:
    """
    Parse a stored cell string, returning None when it holds no usable data.
    """
    try:
        return URLCellData.from_json(data)
    except DecodeError as exc:
        logger.debug("Ignoring unreadable URL cell data: %s", exc)
        return None


__all__ = ["URLCellData", "URLCellDataSchema", "parse_url_cell_str"]
