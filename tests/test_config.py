from pathlib import Path

import pytest

from iodocs_generator.config import ConfigError, load_config, resolve_endpoint, resolve_endpoints
from iodocs_generator.model import Location, StringDefault

FIXTURES = Path(__file__).parent / "fixtures"


class TestLoadConfig:
    def test_load_fixture(self):
        config = load_config(FIXTURES / "iodocs.yaml")
        assert config.name == "name"
        assert config.base_path == "http://api.com/"
        assert config.endpoints == ["sample_api:PingApi", "sample_api:QueryApi"]
        assert len(config.extension_parameters) == 1
        ext = config.extension_parameters[0]
        assert ext.location is Location.HEADER
        assert ext.required is True
        assert ext.default == StringDefault(value="text/plain")

    def test_unquoted_version(self):
        config = load_config(FIXTURES / "mismatch.yaml")
        assert config.version == "1.0"
        assert config.description is None
        assert config.extension_parameters == []

    def test_api_meta(self):
        api = load_config(FIXTURES / "iodocs.yaml").api_meta()
        assert api.title == "title"
        assert api.base_path == "http://api.com/"

    def test_invalid_yaml(self, tmp_path):
        f = tmp_path / "bad.yaml"
        f.write_text("name: [invalid\n")
        with pytest.raises(ConfigError, match="invalid YAML"):
            load_config(f)

    def test_not_a_mapping(self, tmp_path):
        f = tmp_path / "list.yaml"
        f.write_text("- a\n- b\n")
        with pytest.raises(ConfigError, match="mapping"):
            load_config(f)

    def test_missing_fields(self, tmp_path):
        f = tmp_path / "partial.yaml"
        f.write_text("name: only-a-name\n")
        with pytest.raises(ConfigError):
            load_config(f)


class TestResolveEndpoint:
    def test_resolve(self):
        from sample_api import PingApi

        assert resolve_endpoint("sample_api:PingApi") is PingApi
        assert resolve_endpoints(["sample_api:PingApi"]) == [PingApi]

    def test_bad_reference(self):
        with pytest.raises(ConfigError, match="expected 'module:ClassName'"):
            resolve_endpoint("sample_api.PingApi")

    def test_missing_module(self):
        with pytest.raises(ConfigError, match="Cannot import"):
            resolve_endpoint("no_such_module_here:Api")

    def test_missing_attribute(self):
        with pytest.raises(ConfigError, match="no attribute"):
            resolve_endpoint("sample_api:Missing")

    def test_not_a_class(self):
        with pytest.raises(ConfigError, match="not a class"):
            resolve_endpoint("sample_api:GET")
