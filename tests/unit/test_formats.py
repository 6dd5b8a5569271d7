"""Tests for file format descriptors."""

import pytest

from s3source.core.exceptions import PluginError
from s3source.filesource.formats import (
    FileFormat,
    clear_custom_formats,
    get_format,
    list_formats,
    register_format,
)


@pytest.fixture(autouse=True)
def clean_custom_formats():
    clear_custom_formats()
    yield
    clear_custom_formats()


class TestBuiltinFormats:
    def test_list_formats(self):
        assert list_formats() == [
            "avro",
            "blob",
            "csv",
            "delimited",
            "json",
            "parquet",
            "text",
            "tsv",
        ]

    def test_lookup_case_insensitive(self):
        assert get_format("CSV").name == "csv"

    def test_unknown_format(self):
        with pytest.raises(PluginError) as exc_info:
            get_format("xml")
        assert "Available formats" in str(exc_info.value)

    def test_text_schema(self):
        """Test text records carry offset and body."""
        schema = get_format("text").get_schema()
        assert [(c.name, c.type) for c in schema.columns] == [("offset", "long"), ("body", "string")]

    def test_text_schema_with_path_field(self):
        schema = get_format("text").get_schema("file")
        assert schema.get_column_names() == ["offset", "body", "file"]
        assert schema.get_column("file").type == "string"

    def test_blob_schema(self):
        schema = get_format("blob").get_schema("path")
        assert [(c.name, c.type) for c in schema.columns] == [("body", "bytes"), ("path", "string")]

    @pytest.mark.parametrize("name", ["avro", "csv", "delimited", "json", "parquet", "tsv"])
    def test_content_dependent_formats_have_no_schema(self, name):
        assert get_format(name).get_schema("file") is None


class TestCustomFormats:
    def test_register_custom_format(self):
        @register_format
        class OrcFormat(FileFormat):
            @property
            def name(self) -> str:
                return "orc"

        assert "orc" in list_formats()
        assert isinstance(get_format("ORC"), OrcFormat)

    def test_builtin_cannot_be_replaced(self):
        class FakeCSV(FileFormat):
            @property
            def name(self) -> str:
                return "csv"

        with pytest.raises(PluginError):
            register_format(FakeCSV)
