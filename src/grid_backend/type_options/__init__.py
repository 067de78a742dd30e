from __future__ import annotations

from typing import Dict, Optional, Type

from ..field_types import FieldType
from .base import TypeOption, TypeOptionBuilder
from .url import URLTypeOption, URLTypeOptionBuilder

# Closed set of field types implemented by this package.
TYPE_OPTION_BUILDERS: Dict[FieldType, Type[TypeOptionBuilder]] = {
    FieldType.URL: URLTypeOptionBuilder,
}


def get_url_type_option() -> URLTypeOption:
    """Return a default-configured URL type option."""
    return URLTypeOptionBuilder().build()


def get_builder_for_field_type(
    field_type: FieldType | str,
    type_option_data: Optional[str] = None,
) -> Optional[TypeOptionBuilder]:
    """
    Return a fresh builder for ``field_type``, or None when it is not handled here.

    When ``type_option_data`` is given the builder is loaded from that stored
    configuration instead of the defaults.
    """
    builder_cls = TYPE_OPTION_BUILDERS.get(FieldType.parse(field_type))
    if builder_cls is None:
        return None
    if type_option_data is not None:
        return builder_cls.from_json_str(type_option_data)
    return builder_cls()


__all__ = [
    "TYPE_OPTION_BUILDERS",
    "TypeOption",
    "TypeOptionBuilder",
    "URLTypeOption",
    "URLTypeOptionBuilder",
    "get_builder_for_field_type",
    "get_url_type_option",
]
