from __future__ import annotations

import pytest

from grid_backend.changeset import extract_changeset_text
from grid_backend.errors import InvalidChangeset


def test_text_changesets() -> None:
    assert extract_changeset_text("flowy.io") == "flowy.io"
    assert extract_changeset_text("") == ""
    assert extract_changeset_text(b"caf\xc3\xa9.fr") == "café.fr"
    assert extract_changeset_text(bytearray(b"abc")) == "abc"


def test_numbers_are_coerced_to_text() -> None:
    assert extract_changeset_text(42) == "42"
    assert extract_changeset_text(1.5) == "1.5"


@pytest.mark.parametrize(
    "changeset",
    [
        None,
        True,
        False,
        b"\xff\xfe",
        b"\xed\xa0\x80",
        "\ud800 flowy.io",
        {"content": "x"},
        ["x"],
        object(),
    ],
)
def test_non_text_changesets_are_rejected(changeset) -> None:
    with pytest.raises(InvalidChangeset):
        extract_changeset_text(changeset)
