"""Unit tests for configuration loading."""

from pathlib import Path
from textwrap import dedent

import pytest

from gradebook.config import (
    ConfigError,
    GradebookConfig,
    find_config,
    load_config,
    resolve_config,
)


@pytest.fixture
def temp_config(tmp_path: Path) -> Path:
    """Create a temporary config file."""
    config_content = dedent("""
        data_dir: data
        directories:
          records: Records
        logging:
          dir: var/log
          level: DEBUG
    """).strip()

    config_path = tmp_path / "gradebook.yaml"
    config_path.write_text(config_content)
    return config_path


class TestLoadConfig:
    """Tests for load_config function."""

    def test_load_valid_config(self, temp_config: Path, tmp_path: Path) -> None:
        config = load_config(temp_config)

        assert config.data_dir == "data"
        assert config.records_path == tmp_path.resolve() / "data" / "Records"
        assert config.logging.level == "DEBUG"
        assert config.log_path == tmp_path.resolve() / "var" / "log"

    def test_defaults_for_missing_keys(self, temp_config: Path, tmp_path: Path) -> None:
        config = load_config(temp_config)

        assert config.marksheets_path == tmp_path.resolve() / "data" / "Marksheets"
        assert config.transcripts_path == tmp_path.resolve() / "data" / "Transcripts"

    def test_empty_file_uses_defaults(self, tmp_path: Path) -> None:
        config_path = tmp_path / "gradebook.yaml"
        config_path.write_text("")

        config = load_config(config_path)

        assert config.records_path == tmp_path.resolve() / "StudentRecords"
        assert config.logging.level == "INFO"

    def test_load_nonexistent_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="not found"):
            load_config(tmp_path / "nonexistent.yaml")

    def test_load_invalid_yaml(self, tmp_path: Path) -> None:
        config_path = tmp_path / "gradebook.yaml"
        config_path.write_text("data_dir: [unclosed")

        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_config(config_path)

    def test_load_non_mapping(self, tmp_path: Path) -> None:
        config_path = tmp_path / "gradebook.yaml"
        config_path.write_text("- just\n- a list\n")

        with pytest.raises(ConfigError, match="mapping"):
            load_config(config_path)

    def test_section_must_be_mapping(self, tmp_path: Path) -> None:
        config_path = tmp_path / "gradebook.yaml"
        config_path.write_text("directories: Records\n")

        with pytest.raises(ConfigError, match="directories"):
            load_config(config_path)


class TestFindConfig:
    """Tests for find_config and resolve_config."""

    def test_find_in_current_directory(self, temp_config: Path, tmp_path: Path) -> None:
        assert find_config(tmp_path) == temp_config.resolve()

    def test_find_in_parent_directory(self, temp_config: Path, tmp_path: Path) -> None:
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)

        assert find_config(nested) == temp_config.resolve()

    def test_not_found(self, tmp_path: Path) -> None:
        assert find_config(tmp_path) is None

    def test_resolve_explicit(self, temp_config: Path) -> None:
        assert resolve_config(temp_config).data_dir == "data"

    def test_resolve_defaults(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)

        config = resolve_config()

        assert isinstance(config, GradebookConfig)
        assert config.records_path == tmp_path.resolve() / "StudentRecords"
