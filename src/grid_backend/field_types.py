from __future__ import annotations

from enum import Enum


class FieldType(str, Enum):
    """
    Declared kind of data a grid field (column) holds.

    The values are the stable tags used by API payloads and the CLI.
    """

    RichText = "RichText"
    Number = "Number"
    DateTime = "DateTime"
    SingleSelect = "SingleSelect"
    MultiSelect = "MultiSelect"
    Checkbox = "Checkbox"
    URL = "URL"
    Checklist = "Checklist"

    def is_url(self) -> bool:
        return self is FieldType.URL

    @classmethod
    def parse(cls, value: "FieldType | str") -> "FieldType":
        """
        Resolve a field type from a member or a tag (case-insensitive).

        Raises ValueError for unknown tags.
        """
        if isinstance(value, cls):
            return value
        raw = str(value).strip()
        for member in cls:
            if raw.lower() == member.value.lower():
                return member
        raise ValueError(f"Unknown field type: {value!r}")


__all__ = ["FieldType"]
