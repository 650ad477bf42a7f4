"""Tests for designarchive.config.commands CLI module."""

import pytest
import yaml
from click.testing import CliRunner

from designarchive.cli import main


@pytest.fixture
def runner():
    """Create a Click CLI test runner."""
    return CliRunner()


def test_set_writes_typed_value(runner, data_dir):
    result = runner.invoke(main, ["config", "set", "page_size", "24"])
    assert result.exit_code == 0
    assert "Set page_size = 24" in result.output
    assert yaml.safe_load((data_dir / "config.yaml").read_text()) == {"page_size": 24}


def test_set_keeps_other_values(runner, data_dir):
    runner.invoke(main, ["config", "set", "page_size", "6"])
    runner.invoke(main, ["config", "set", "default_theme", "dark"])
    config = yaml.safe_load((data_dir / "config.yaml").read_text())
    assert config == {"page_size": 6, "default_theme": "dark"}


def test_set_unknown_key(runner, data_dir):
    result = runner.invoke(main, ["config", "set", "colour", "red"])
    assert "Unknown setting: colour" in result.output
    assert not (data_dir / "config.yaml").exists()


def test_set_invalid_value(runner, data_dir):
    result = runner.invoke(main, ["config", "set", "page_size", "lots"])
    assert "Invalid value for page_size" in result.output


def test_setting_affects_browse(runner, data_dir):
    runner.invoke(main, ["config", "set", "page_size", "3"])
    result = runner.invoke(main, ["browse", "--json"])
    assert '"has_more": true' in result.output


def test_show(runner, data_dir):
    result = runner.invoke(main, ["config", "show"])
    assert result.exit_code == 0
    assert "Configuration" in result.output
    assert "Config file" in result.output


def test_path(runner, data_dir):
    result = runner.invoke(main, ["config", "path"])
    assert result.exit_code == 0
    assert "Data directory:" in result.output
    assert "Global config:" in result.output
