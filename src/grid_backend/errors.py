from __future__ import annotations


class CellError(Exception):
    """
    Base class for recoverable cell-level failures.

    Callers reading cells treat these as "no usable value" and fall back to
    defaults; only direct user edits surface them as validation messages.
    """


class InvalidChangeset(CellError):
    """The changeset payload cannot be read as text."""


class DecodeError(CellError):
    """The persisted cell blob is not valid serialized cell data."""


__all__ = ["CellError", "DecodeError", "InvalidChangeset"]
