"""Tests for load-time template rendering."""

import pytest

from s3source.core.exceptions import ConfigurationError
from s3source.models.templates import render_templates


class TestTemplateRendering:
    """Tests for env_var() and var() lookups."""

    def test_env_var_template(self, monkeypatch):
        """Test {{ env_var('KEY') }} template."""
        monkeypatch.setenv("TEST_ACCESS_ID", "AKIAENV")
        config_dict = {"name": "t", "properties": {"accessID": "{{ env_var('TEST_ACCESS_ID') }}"}}
        result = render_templates(config_dict)
        assert result["properties"]["accessID"] == "AKIAENV"

    def test_env_var_missing(self, monkeypatch):
        """Test that missing env_var raises error."""
        monkeypatch.delenv("MISSING_VAR", raising=False)
        config_dict = {"name": "t", "properties": {"accessID": "{{ env_var('MISSING_VAR') }}"}}
        with pytest.raises(ConfigurationError) as exc_info:
            render_templates(config_dict)
        assert "MISSING_VAR" in str(exc_info.value)

    def test_var_template(self):
        """Test {{ var('KEY') }} template with CLI vars."""
        config_dict = {"name": "t", "properties": {"path": "s3a://{{ var('bucket') }}/data/"}}
        result = render_templates(config_dict, {"bucket": "raw"})
        assert result["properties"]["path"] == "s3a://raw/data/"

    def test_double_quoted_argument(self):
        config_dict = {"name": "t", "properties": {"region": '{{ var("region") }}'}}
        assert render_templates(config_dict, {"region": "eu-west-1"})["properties"]["region"] == "eu-west-1"

    def test_several_templates_in_one_value(self):
        config_dict = {"name": "t", "properties": {"path": "s3a://{{ var('bucket') }}/{{ var('prefix') }}/"}}
        result = render_templates(config_dict, {"bucket": "raw", "prefix": "orders"})
        assert result["properties"]["path"] == "s3a://raw/orders/"

    def test_var_missing(self):
        """Test that missing var raises error naming the field."""
        config_dict = {"name": "t", "properties": {"path": "{{ var('bucket') }}"}}
        with pytest.raises(ConfigurationError, match="bucket"):
            render_templates(config_dict, {})

    def test_nested_mapping_rendered(self):
        """Test templates inside the fileSystemProperties mapping are rendered."""
        config_dict = {
            "name": "t",
            "properties": {"fileSystemProperties": {"fs.s3a.endpoint": "{{ var('endpoint') }}"}},
        }
        result = render_templates(config_dict, {"endpoint": "minio.local:9000"})
        assert result["properties"]["fileSystemProperties"] == {"fs.s3a.endpoint": "minio.local:9000"}

    def test_input_not_modified(self):
        config_dict = {"name": "t", "properties": {"path": "{{ var('bucket') }}"}}
        render_templates(config_dict, {"bucket": "raw"})
        assert config_dict["properties"]["path"] == "{{ var('bucket') }}"


class TestTemplateErrors:
    """Tests for rejected template expressions."""

    def test_unknown_function(self):
        config_dict = {"name": "t", "properties": {"path": "{{ secret('x') }}"}}
        with pytest.raises(ConfigurationError, match="Unknown template function") as exc_info:
            render_templates(config_dict)
        assert exc_info.value.context["field"] == "properties.path"

    @pytest.mark.parametrize("expression", ["{{ source.name }}", "{{ var(bucket) }}", "{{ }}"])
    def test_unsupported_expression(self, expression):
        """Test only single-argument lookup calls are accepted."""
        config_dict = {"name": "t", "properties": {"path": expression}}
        with pytest.raises(ConfigurationError, match="Unsupported template expression"):
            render_templates(config_dict)

    def test_rendered_macro_rejected(self, monkeypatch):
        """Test a template may not smuggle a ${...} macro into a field."""
        monkeypatch.setenv("TEST_REGION", "${region}")
        config_dict = {"name": "t", "properties": {"region": "{{ env_var('TEST_REGION') }}"}}
        with pytest.raises(ConfigurationError, match="macro") as exc_info:
            render_templates(config_dict)
        assert exc_info.value.context["field"] == "properties.region"


class TestMacrosAndOtherValues:
    """Tests for values templates leave alone."""

    def test_macros_left_alone(self):
        """Test ${...} macros survive template rendering."""
        config_dict = {"name": "t", "properties": {"region": "${region}"}}
        assert render_templates(config_dict)["properties"]["region"] == "${region}"

    def test_template_beside_macro(self):
        """Test a template and a macro can share one value."""
        config_dict = {"name": "t", "properties": {"path": "s3a://{{ var('bucket') }}/dt=${run_date}/"}}
        result = render_templates(config_dict, {"bucket": "raw"})
        assert result["properties"]["path"] == "s3a://raw/dt=${run_date}/"

    def test_non_strings_unchanged(self):
        config_dict = {"name": "t", "properties": {"copyHeader": True, "maxSplitSize": 10}}
        assert render_templates(config_dict) == config_dict
