"""
Tests for configuration loading — rowfeed.yml parsing and validation.
"""

import textwrap
from pathlib import Path

import pytest

from rowfeed.core.config.loader import ConfigError, find_feed_file, load_feed_config
from rowfeed.core.models.feed import DEFAULT_COLUMNS, FeedConfig


class TestFindFeedFile:
    def test_finds_in_directory(self, tmp_path: Path):
        (tmp_path / "rowfeed.yml").write_text("count: 1\n")
        assert find_feed_file(tmp_path) == (tmp_path / "rowfeed.yml").resolve()

    def test_walks_up(self, tmp_path: Path):
        (tmp_path / "rowfeed.yml").write_text("count: 1\n")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        assert find_feed_file(nested) == (tmp_path / "rowfeed.yml").resolve()

    def test_not_found(self, tmp_path: Path):
        assert find_feed_file(tmp_path) is None


class TestLoadFeedConfig:
    def test_flat(self, tmp_path: Path):
        path = tmp_path / "rowfeed.yml"
        path.write_text(textwrap.dedent("""\
            count: 10
            title: Smoke
            width: 800
        """))
        c = load_feed_config(path)
        assert c.count == 10
        assert c.title == "Smoke"
        assert c.width == 800
        assert c.height == 600
        assert c.columns == DEFAULT_COLUMNS

    def test_wrapped(self, feed_yml: Path, fake_consumer: Path):
        c = load_feed_config(feed_yml)
        assert c.count == 3
        assert c.title == "Fixture Checklist"
        assert c.consumer == str(fake_consumer)
        assert c.timeout == 30

    def test_empty_file_is_defaults(self, tmp_path: Path):
        path = tmp_path / "rowfeed.yml"
        path.write_text("")
        assert load_feed_config(path) == FeedConfig()

    def test_no_file_is_defaults(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert load_feed_config() == FeedConfig()

    def test_explicit_missing_file(self, tmp_path: Path):
        with pytest.raises(ConfigError, match="not found"):
            load_feed_config(tmp_path / "nope.yml")

    def test_invalid_yaml(self, tmp_path: Path):
        path = tmp_path / "rowfeed.yml"
        path.write_text("count: [1, 2\n")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_feed_config(path)

    def test_not_a_mapping(self, tmp_path: Path):
        path = tmp_path / "rowfeed.yml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigError, match="mapping"):
            load_feed_config(path)

    def test_column_mismatch(self, tmp_path: Path):
        path = tmp_path / "rowfeed.yml"
        path.write_text("columns: [Check, Item, Category]\n")
        with pytest.raises(ConfigError, match="expected 8 columns"):
            load_feed_config(path)

    def test_boolean_count(self, tmp_path: Path):
        path = tmp_path / "rowfeed.yml"
        path.write_text("count: true\n")
        with pytest.raises(ConfigError, match="Invalid feed configuration"):
            load_feed_config(path)

    def test_string_width(self, tmp_path: Path):
        path = tmp_path / "rowfeed.yml"
        path.write_text("width: \"800\"\n")
        with pytest.raises(ConfigError):
            load_feed_config(path)

    def test_negative_count(self, tmp_path: Path):
        path = tmp_path / "rowfeed.yml"
        path.write_text("count: -5\n")
        with pytest.raises(ConfigError, match="Invalid feed configuration"):
            load_feed_config(path)
