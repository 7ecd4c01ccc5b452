"""Tests for configuration models and YAML loading."""

from pathlib import Path
from textwrap import dedent

import pytest
from pydantic import ValidationError

from applicants.core.config import InputConfig, OutputConfig, Settings


class TestInputConfig:
    def test_defaults(self) -> None:
        assert InputConfig().encoding == "utf-8"

    def test_blank_encoding_rejected(self) -> None:
        with pytest.raises(ValidationError):
            InputConfig(encoding="  ")


class TestOutputConfig:
    def test_defaults(self) -> None:
        o = OutputConfig()
        assert o.path == "output.json"
        assert o.encoding == "utf-8"

    def test_path_stripped(self) -> None:
        assert OutputConfig(path="  out/report.json ").path == "out/report.json"

    def test_blank_path_rejected(self) -> None:
        with pytest.raises(ValidationError):
            OutputConfig(path="")


class TestSettings:
    def test_defaults(self) -> None:
        s = Settings()
        assert s.input.encoding == "utf-8"
        assert s.output.path == "output.json"

    def test_from_yaml(self, tmp_path: Path) -> None:
        config_file = tmp_path / "settings.yaml"
        config_file.write_text(dedent("""\
            input:
              encoding: latin-1
            output:
              path: reports/result.json
        """))
        s = Settings.from_yaml(config_file)
        assert s.input.encoding == "latin-1"
        assert s.output.path == "reports/result.json"
        assert s.output.encoding == "utf-8"

    def test_from_yaml_empty_file(self, tmp_path: Path) -> None:
        config_file = tmp_path / "settings.yaml"
        config_file.write_text("")
        s = Settings.from_yaml(config_file)
        assert s == Settings()

    def test_from_yaml_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            Settings.from_yaml(tmp_path / "nope.yaml")

    def test_from_yaml_invalid_value(self, tmp_path: Path) -> None:
        config_file = tmp_path / "settings.yaml"
        config_file.write_text("output:\n  path: ''\n")
        with pytest.raises(ValidationError):
            Settings.from_yaml(config_file)

    def test_example_config_loads(self) -> None:
        example = Path(__file__).resolve().parents[2] / "config" / "settings.yaml"
        s = Settings.from_yaml(example)
        assert s.output.path.endswith(".json")
