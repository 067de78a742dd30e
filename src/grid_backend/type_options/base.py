from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, Optional, TypeVar

from ..field_types import FieldType

CellDataT = TypeVar("CellDataT")
SchemaT = TypeVar("SchemaT")


class TypeOption(ABC, Generic[CellDataT, SchemaT]):
    """
    Capability interface shared by every field type handler.

    The registry selects a handler by FieldType and then only talks to it
    through these methods. ``cell_data`` arguments are always the opaque
    strings stored in cell revisions.
    """

    field_type: FieldType

    @abstractmethod
    def to_json_str(self) -> str:
        """Serialize this type option's configuration blob."""

    @abstractmethod
    def parse_cell_str(self, cell_data: Any) -> Optional[CellDataT]:
        """Parse stored cell data, returning None when it holds no usable value."""

    @abstractmethod
    def apply_changeset(self, changeset: Any, cell_data: Optional[str] = None) -> str:
        """Apply a user edit and return the new serialized cell data."""

    @abstractmethod
    def decode_cell_data(self, cell_data: Any, decoded_field_type: FieldType) -> SchemaT:
        """Decode stored cell data into its transport struct."""

    @abstractmethod
    def try_decode_cell_data(
        self, cell_data: Any, decoded_field_type: FieldType
    ) -> SchemaT:
        """
        Decode only when ``decoded_field_type`` is one this handler can read.

        Otherwise return the empty transport struct without looking at the
        data.
        """

    @abstractmethod
    def decode_cell_data_to_str(
        self, cell_data: Any, decoded_field_type: FieldType
    ) -> str:
        """Decode stored cell data into plain text for display, search and sort."""


class TypeOptionBuilder(ABC):
    """
    Registration-side wrapper around a TypeOption.
    """

    field_type: FieldType

    @classmethod
    @abstractmethod
    def from_json_str(cls, raw: str) -> "TypeOptionBuilder":
        """Load a builder from a stored configuration blob."""

    @property
    @abstractmethod
    def serializer(self) -> TypeOption:
        """The type option whose configuration this builder serializes."""

    @abstractmethod
    def transform(self, field_type: FieldType, type_option_data: str) -> None:
        """Migrate configuration when a field changes type from ``field_type``."""

    def build(self) -> TypeOption:
        return self.serializer


__all__ = ["TypeOption", "TypeOptionBuilder"]
