"""
Unit tests for pipeline configuration loading.
"""

import os

import pytest
from pydantic import ValidationError

from csv_automation.core.config import PipelineConfigLoader


pytestmark = pytest.mark.usefixtures("clean_bot_env")


@pytest.fixture
def config_file(tmp_path):
    """Write a YAML config file and return its path"""
    def _write(content: str):
        path = tmp_path / "pipeline.yaml"
        path.write_text(content)
        return path

    return _write


@pytest.mark.unit
class TestPipelineConfigLoader:
    """Tests for PipelineConfigLoader"""

    def test_defaults_without_file(self):
        config = PipelineConfigLoader().load()
        assert config.input_dir == "./data/input"
        assert config.auto_archive is True

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            PipelineConfigLoader(tmp_path / "nope.yaml")

    def test_loads_yaml_section(self, config_file):
        path = config_file(
            "pipeline:\n"
            "  input_dir: /srv/in\n"
            "  delimiter: ';'\n"
            "  auto_archive: false\n"
            "  retry_attempts: 5\n"
        )

        config = PipelineConfigLoader(path).load()

        assert config.input_dir == "/srv/in"
        assert config.delimiter == ";"
        assert config.auto_archive is False
        assert config.retry_attempts == 5

    def test_empty_file_gives_defaults(self, config_file):
        assert PipelineConfigLoader(config_file("")).load().output_dir == "./data/output"

    def test_malformed_yaml_raises_value_error(self, config_file):
        path = config_file("pipeline: {input_dir: ./in\n")
        with pytest.raises(ValueError, match="Invalid YAML"):
            PipelineConfigLoader(path).load()

    def test_missing_section_raises(self, config_file):
        with pytest.raises(ValueError, match="'pipeline' section"):
            PipelineConfigLoader(config_file("rules: {}\n")).load()

    def test_unknown_setting_raises(self, config_file):
        with pytest.raises(ValueError, match="Unknown pipeline settings: colour"):
            PipelineConfigLoader(config_file("pipeline:\n  colour: blue\n")).load()

    def test_invalid_value_raises(self, config_file):
        with pytest.raises(ValidationError):
            PipelineConfigLoader(config_file("pipeline:\n  encoding: klingon-8\n")).load()

    def test_environment_overrides_file(self, config_file, monkeypatch):
        path = config_file("pipeline:\n  input_dir: /srv/in\n  generate_report: true\n")
        monkeypatch.setenv("CSV_BOT_INPUT_DIR", "/env/in")
        monkeypatch.setenv("CSV_BOT_GENERATE_REPORT", "no")
        monkeypatch.setenv("CSV_BOT_PROCESS_INTERVAL_SECONDS", "15")

        config = PipelineConfigLoader(path).load()

        assert config.input_dir == "/env/in"
        assert config.generate_report is False
        assert config.process_interval_seconds == 15

    def test_invalid_boolean_env_raises(self, monkeypatch):
        monkeypatch.setenv("CSV_BOT_AUTO_ARCHIVE", "sometimes")
        with pytest.raises(ValueError, match="CSV_BOT_AUTO_ARCHIVE must be a boolean"):
            PipelineConfigLoader().load()

    def test_env_file_is_loaded(self, tmp_path):
        env_file = tmp_path / "bot.env"
        env_file.write_text("CSV_BOT_OUTPUT_DIR=/from/dotenv\n")

        try:
            config = PipelineConfigLoader(env_file=env_file).load()
        finally:
            # load_dotenv writes straight to os.environ
            os.environ.pop("CSV_BOT_OUTPUT_DIR", None)

        assert config.output_dir == "/from/dotenv"

    def test_missing_env_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            PipelineConfigLoader(env_file=tmp_path / "missing.env")

    def test_overrides_win_and_none_is_ignored(self, monkeypatch):
        monkeypatch.setenv("CSV_BOT_INPUT_DIR", "/env/in")

        config = PipelineConfigLoader().load({"input_dir": "/cli/in", "output_dir": None})

        assert config.input_dir == "/cli/in"
        assert config.output_dir == "./data/output"
