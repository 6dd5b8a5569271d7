"""Integration tests for loading source configs from YAML files."""

from pathlib import Path

import pytest

from s3source import (
    ConfigurationError,
    MacroError,
    load_config,
    resolve_filesystem_properties,
    resolve_schema,
    validate,
)
from s3source.models import load_definition
from s3source.source.properties import COPY_HEADER, S3A_ACCESS_KEY, S3A_ENDPOINT, S3A_SECRET_KEY

EXAMPLE_PATH = Path(__file__).parent.parent.parent / "examples" / "orders" / "source.yaml"

SCENARIO_YAML = """
name: scenario
properties:
  referenceName: scenario
  path: s3a://bucket/data/
  authenticationMethod: Access Credentials
  accessID: AKIA...
  accessKey: secret
  region: us-east-1
  fileSystemProperties: "{}"
"""


@pytest.mark.integration
class TestConfigLoading:
    """End-to-end tests from YAML file to resolved properties."""

    def test_access_credentials_scenario(self, write_yaml):
        """Test the basic Access Credentials scenario resolves fully."""
        config = load_config(write_yaml(SCENARIO_YAML))
        validate(config)
        properties = resolve_filesystem_properties(config)
        assert properties[S3A_ACCESS_KEY] == "AKIA..."
        assert properties[S3A_SECRET_KEY] == "secret"
        assert properties[S3A_ENDPOINT] == "s3.us-east-1.amazonaws.com"

    def test_endpoint_override_scenario(self, write_yaml):
        text = SCENARIO_YAML.replace(
            'fileSystemProperties: "{}"',
            """fileSystemProperties: '{"fs.s3a.endpoint":"custom.endpoint.example.com"}'""",
        )
        properties = resolve_filesystem_properties(load_config(write_yaml(text)))
        assert properties[S3A_ENDPOINT] == "custom.endpoint.example.com"

    def test_http_path_scenario(self, write_yaml):
        text = SCENARIO_YAML.replace("s3a://bucket/data/", "http://bucket/data")
        with pytest.raises(ConfigurationError, match="s3a://"):
            validate(load_config(write_yaml(text)))

    def test_iam_scenario(self, write_yaml):
        text = """
name: iam
properties:
  referenceName: iam
  path: s3a://b/
  authenticationMethod: IAM
  region: eu-west-1
"""
        config = load_config(write_yaml(text))
        validate(config)
        assert resolve_filesystem_properties(config) == {}

    def test_deferred_region_scenario(self, write_yaml):
        text = SCENARIO_YAML.replace("region: us-east-1", 'region: "${region}"')
        config = load_config(write_yaml(text))
        validate(config)
        bound = load_config(write_yaml(text), arguments={"region": "ap-south-1"})
        assert resolve_filesystem_properties(bound)[S3A_ENDPOINT] == "s3.ap-south-1.amazonaws.com"

    def test_unbound_macro_argument(self, write_yaml):
        text = SCENARIO_YAML.replace("region: us-east-1", 'region: "${region}"')
        with pytest.raises(MacroError):
            load_config(write_yaml(text), arguments={"other": "x"})

    def test_example_config(self, monkeypatch):
        """Test the shipped example validates once its macro is bound."""
        monkeypatch.setenv("AWS_ACCESS_KEY_ID", "AKIAEXAMPLE")
        monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "example-secret")

        deferred = load_config(str(EXAMPLE_PATH))
        validate(deferred)

        config = load_config(str(EXAMPLE_PATH), arguments={"run_date": "2026-10-01"})
        properties = resolve_filesystem_properties(config)
        assert config.path == "s3a://acme-exports/orders/dt=2026-10-01/"
        assert properties["fs.s3a.connection.maximum"] == "64"
        assert properties[COPY_HEADER] == "true"
        assert resolve_schema(config).get_column_names() == ["order_id", "amount", "file"]


@pytest.mark.integration
class TestLoaderErrors:
    def test_missing_file(self, temp_dir):
        with pytest.raises(ConfigurationError, match="not found"):
            load_definition(str(temp_dir / "missing.yaml"))

    def test_invalid_yaml(self, write_yaml):
        with pytest.raises(ConfigurationError, match="Invalid YAML"):
            load_definition(write_yaml("name: [unclosed"))

    def test_not_a_mapping(self, write_yaml):
        with pytest.raises(ConfigurationError, match="YAML dictionary"):
            load_definition(write_yaml("- a\n- b\n"))

    def test_missing_name(self, write_yaml):
        with pytest.raises(ConfigurationError, match="Config validation failed"):
            load_definition(write_yaml("properties: {}\n"))

    def test_missing_path_property(self, write_yaml):
        text = "name: x\nproperties:\n  referenceName: x\n"
        with pytest.raises(ConfigurationError, match="Invalid source properties"):
            load_config(write_yaml(text))

    def test_misspelled_property(self, write_yaml):
        text = SCENARIO_YAML.replace("  region: us-east-1", "  regoin: us-east-1")
        with pytest.raises(ConfigurationError, match="regoin"):
            load_config(write_yaml(text))

    def test_unknown_plugin(self, write_yaml):
        text = SCENARIO_YAML.replace("name: scenario\n", "name: scenario\nplugin: GCS\n")
        with pytest.raises(ConfigurationError, match="Unknown source plugin") as exc_info:
            load_config(write_yaml(text))
        assert exc_info.value.context["source"] == "scenario"
        assert "S3" in exc_info.value.context["available"]

    def test_explicit_s3_plugin(self, write_yaml):
        text = SCENARIO_YAML.replace("name: scenario\n", "name: scenario\nplugin: S3\n")
        assert load_config(write_yaml(text)).region == "us-east-1"

    def test_cli_vars(self, write_yaml):
        text = SCENARIO_YAML.replace("s3a://bucket/data/", "s3a://{{ var('bucket') }}/data/")
        config = load_config(write_yaml(text), cli_vars={"bucket": "raw"})
        assert config.path == "s3a://raw/data/"
