from __future__ import annotations

import json
import logging

import pytest

from grid_backend.cell_data import URLCellDataSchema
from grid_backend.errors import DecodeError, InvalidChangeset
from grid_backend.field_types import FieldType
from grid_backend.type_options import (
    TYPE_OPTION_BUILDERS,
    URLTypeOption,
    URLTypeOptionBuilder,
    get_builder_for_field_type,
    get_url_type_option,
)


def test_edit_then_read_scenario() -> None:
    type_option = URLTypeOption()

    data = type_option.apply_changeset("Check flowy.io docs")
    assert data == '{"content":"Check flowy.io docs","url":"https://flowy.io"}'

    assert type_option.decode_cell_data_to_str(data, FieldType.URL) == (
        "Check flowy.io docs"
    )
    cell = type_option.decode_cell_data(data, FieldType.URL)
    assert cell == URLCellDataSchema(url="https://flowy.io", content="Check flowy.io docs")


def test_apply_changeset_is_deterministic() -> None:
    type_option = URLTypeOption()
    first = type_option.apply_changeset("go to http://example.com now")
    second = type_option.apply_changeset("go to http://example.com now")
    assert first == second
    assert json.loads(first) == {
        "content": "go to http://example.com now",
        "url": "https://http://example.com",
    }


def test_apply_changeset_without_url_stores_empty_url() -> None:
    data = URLTypeOption().apply_changeset("just words")
    assert data == '{"content":"just words","url":""}'


def test_apply_changeset_replaces_previous_cell_data() -> None:
    type_option = URLTypeOption()
    previous = type_option.apply_changeset("old.com")
    data = type_option.apply_changeset("new.org", previous)
    assert json.loads(data) == {"content": "new.org", "url": "https://new.org"}


@pytest.mark.parametrize(
    "changeset", [None, b"\xff", {"text": "x.com"}, "\udc80 example.com"]
)
def test_apply_changeset_rejects_non_text(changeset) -> None:
    with pytest.raises(InvalidChangeset):
        URLTypeOption().apply_changeset(changeset)


def test_decode_cell_data_rejects_malformed_json() -> None:
    with pytest.raises(DecodeError):
        URLTypeOption().decode_cell_data("{not json", FieldType.URL)
    with pytest.raises(DecodeError):
        URLTypeOption().decode_cell_data_to_str("{not json", FieldType.URL)


@pytest.mark.parametrize("data", ['{"content":"a","url":"https://a.io"}', "{broken", None])
@pytest.mark.parametrize(
    "field_type", [t for t in FieldType if t is not FieldType.URL]
)
def test_try_decode_returns_empty_for_other_field_types(data, field_type) -> None:
    result = URLTypeOption().try_decode_cell_data(data, field_type)
    assert result == URLCellDataSchema()


def test_try_decode_for_url_field_type_decodes() -> None:
    type_option = URLTypeOption()
    data = type_option.apply_changeset("example.com")
    assert type_option.try_decode_cell_data(data, FieldType.URL) == URLCellDataSchema(
        url="https://example.com", content="example.com"
    )
    with pytest.raises(DecodeError):
        type_option.try_decode_cell_data("{broken", FieldType.URL)


def test_decode_to_str_returns_raw_content() -> None:
    data = '{"content":"hello world","url":"https://example.com"}'
    assert URLTypeOption().decode_cell_data_to_str(data, FieldType.URL) == "hello world"


def test_parse_cell_str() -> None:
    type_option = URLTypeOption()
    assert type_option.parse_cell_str("nope") is None
    parsed = type_option.parse_cell_str(type_option.apply_changeset("flowy.io"))
    assert parsed is not None
    assert parsed.url == "https://flowy.io"


def test_type_option_config_blob() -> None:
    assert URLTypeOption().to_json_str() == '{"data":""}'
    loaded = URLTypeOption.from_json_str('{"data":"kept"}')
    assert loaded == URLTypeOption(data="kept")
    assert URLTypeOption.from_json_str(loaded.to_json_str()) == loaded


@pytest.mark.parametrize("raw", ["", "{bad", "[]", '{"data": 3}'])
def test_type_option_config_falls_back_to_default(raw, caplog) -> None:
    caplog.set_level(logging.ERROR, logger="grid_backend.type_options.url")
    assert URLTypeOption.from_json_str(raw) == URLTypeOption()
    assert "deserialize" in caplog.text


def test_builder_serializer_and_transform() -> None:
    builder = URLTypeOptionBuilder()
    assert builder.field_type is FieldType.URL
    assert builder.serializer.to_json_str() == '{"data":""}'
    assert builder.transform(FieldType.RichText, '{"format":1}') is None
    assert builder.serializer == URLTypeOption()
    assert builder.build() is builder.serializer


def test_registry_lookup() -> None:
    assert set(TYPE_OPTION_BUILDERS) == {FieldType.URL}

    builder = get_builder_for_field_type("url")
    assert isinstance(builder, URLTypeOptionBuilder)
    assert get_builder_for_field_type(FieldType.URL) is not builder

    loaded = get_builder_for_field_type(FieldType.URL, '{"data":"x"}')
    assert loaded is not None
    assert loaded.serializer == URLTypeOption(data="x")

    assert get_builder_for_field_type(FieldType.RichText) is None
    with pytest.raises(ValueError):
        get_builder_for_field_type("Spreadsheet")


def test_get_url_type_option_returns_default_configuration() -> None:
    type_option = get_url_type_option()
    assert isinstance(type_option, URLTypeOption)
    assert type_option == URLTypeOption()
    assert type_option.field_type is FieldType.URL
