from __future__ import annotations

from typing import Any

from .errors import InvalidChangeset


def extract_changeset_text(changeset: Any) -> str:
    """
    Read a cell changeset as text.

    URL cells have no partial-update form: the changeset is always the full
    new content. Accepted payloads:
    - str, used as-is (including ""); it must be encodable as UTF-8
    - bytes/bytearray, decoded as UTF-8
    - int/float, via str() (bool is rejected)

    Anything else raises InvalidChangeset.
    """
    if changeset is None:
        raise InvalidChangeset("Changeset is required")
    if isinstance(changeset, str):
        try:
            changeset.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise InvalidChangeset("Changeset text is not valid Unicode") from exc
        return changeset
    if isinstance(changeset, (bytes, bytearray)):
        try:
            return bytes(changeset).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise InvalidChangeset("Changeset bytes are not valid UTF-8") from exc
    if isinstance(changeset, bool):
        raise InvalidChangeset("Changeset must be text, got bool")
    if isinstance(changeset, (int, float)):
        return str(changeset)
    raise InvalidChangeset(
        f"Changeset must be text, got {type(changeset).__name__}"
    )


__all__ = ["extract_changeset_text"]
