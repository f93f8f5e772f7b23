"""
Unit tests for configuration loading and validation.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError
from readcore.config import Config, ExtractionSettings, MonitoringConfig, find_config_file, load_config


class TestDefaults:
    """Built-in configuration values."""

    def test_extraction_defaults(self):
        settings = Config().extraction

        assert settings.charset == "utf-8"
        assert settings.parser == "lxml"
        assert settings.paragraph_tags == ("p",)
        assert settings.min_paragraph_length == 10
        assert settings.base_score == 25
        assert settings.neutral_score == 1
        assert settings.title_delimiter == " - "

    def test_sanitizer_defaults(self):
        sanitizer = Config().sanitizer

        for tag in ("script", "style", "iframe", "form", "nav", "marquee", 'href="http://disqus.com"'):
            assert tag in sanitizer.junk_tags
        assert sanitizer.junk_attributes == ("style", "class", "onclick", "onmouseover", "align", "border", "margin")

    def test_logging_defaults_to_console(self):
        assert Config().monitoring.log_file is None


class TestValidation:
    """Rejected configuration values."""

    def test_empty_paragraph_tags(self):
        with pytest.raises(ValidationError):
            ExtractionSettings(paragraph_tags=())

    def test_paragraph_tags_normalized(self):
        assert ExtractionSettings(paragraph_tags=(" P ", "LI")).paragraph_tags == ("p", "li")

    def test_unknown_parser(self):
        with pytest.raises(ValidationError):
            ExtractionSettings(parser="regex")

    def test_non_positive_base_score(self):
        with pytest.raises(ValidationError):
            ExtractionSettings(base_score=0)

    def test_negative_min_length(self):
        with pytest.raises(ValidationError):
            ExtractionSettings(min_paragraph_length=-1)

    def test_log_file_parent_created(self, tmp_path):
        log_file = tmp_path / "logs" / "nested" / "readcore.log"

        config = MonitoringConfig(log_file=log_file)

        assert config.log_file == str(log_file)
        assert log_file.parent.is_dir()


class TestLoading:
    """YAML files and environment overrides."""

    def test_from_yaml(self, tmp_path):
        path = tmp_path / "readcore.yaml"
        path.write_text(
            "extraction:\n"
            "  title_delimiter: ' | '\n"
            "  paragraph_tags: [p, li]\n"
            "sanitizer:\n"
            "  junk_tags: [script, table]\n",
            encoding="utf-8",
        )

        config = Config.from_yaml(path)

        assert config.extraction.title_delimiter == " | "
        assert config.extraction.paragraph_tags == ("p", "li")
        assert config.sanitizer.junk_tags == ("script", "table")
        assert config.sanitizer.junk_attributes[0] == "style"

    def test_empty_yaml_gives_defaults(self, tmp_path):
        path = tmp_path / "readcore.yaml"
        path.write_text("", encoding="utf-8")

        assert Config.from_yaml(path).extraction.base_score == 25

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            Config.from_yaml(tmp_path / "nope.yaml")

    def test_invalid_yaml_values(self, tmp_path):
        path = tmp_path / "readcore.yaml"
        path.write_text("extraction:\n  parser: bogus\n", encoding="utf-8")

        with pytest.raises(ValidationError):
            Config.from_yaml(path)

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("READCORE_EXTRACTION__TITLE_DELIMITER", " | ")
        monkeypatch.setenv("READCORE_MONITORING__LOG_LEVEL", "DEBUG")

        config = Config()

        assert config.extraction.title_delimiter == " | "
        assert config.monitoring.log_level == "DEBUG"

    def test_find_config_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert find_config_file() is None

        (tmp_path / "readcore.yml").write_text("{}", encoding="utf-8")

        assert find_config_file() == Path(tmp_path / "readcore.yml")

    def test_load_config_discovers_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "readcore.yaml").write_text("extraction:\n  neutral_score: 0\n", encoding="utf-8")

        assert load_config().extraction.neutral_score == 0

    def test_load_config_without_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        assert load_config().extraction.neutral_score == 1
