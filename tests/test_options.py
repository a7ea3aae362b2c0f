"""Tests for configuration loading."""

import json

import pytest

from opgen.exceptions import ConfigError
from opgen.options import Options, load_options


class TestOptions:
    def test_defaults(self):
        options = Options()
        assert options.exclude_parameters == []
        assert options.skip_json_suffix is False
        assert options.silent is False
        assert options.file_extension == ".ts"

    def test_aliases(self):
        options = Options.model_validate({"excludeParameters": ["x"], "skipJsonSuffix": True})
        assert options.exclude_parameters == ["x"]
        assert options.skip_json_suffix is True

    def test_field_names(self):
        assert Options(skip_json_suffix=True).skip_json_suffix is True


class TestLoadOptions:
    def test_valid_file(self, tmp_path):
        path = tmp_path / "opgen.json"
        path.write_text(json.dumps({
            "$schema": "./schema.json",
            "input": "api.yaml",
            "excludeParameters": ["X-Trace"],
            "silent": True,
        }))
        options = load_options(path)
        assert options.input == "api.yaml"
        assert options.exclude_parameters == ["X-Trace"]
        assert options.silent is True

    def test_unknown_key(self, tmp_path):
        path = tmp_path / "opgen.json"
        path.write_text(json.dumps({"bogus": 1}))
        with pytest.raises(ConfigError):
            load_options(path)

    def test_wrong_type(self, tmp_path):
        path = tmp_path / "opgen.json"
        path.write_text(json.dumps({"silent": "very"}))
        with pytest.raises(ConfigError):
            load_options(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError):
            load_options(tmp_path / "nope.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "opgen.json"
        path.write_text("{")
        with pytest.raises(ConfigError):
            load_options(path)
