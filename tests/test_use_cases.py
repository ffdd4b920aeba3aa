"""
Tests for use cases — show and config check.
"""

import textwrap
from pathlib import Path

from rowfeed.adapters.mock import MockAdapter
from rowfeed.core.use_cases.config_check import check_config
from rowfeed.core.use_cases.show import run_show


class TestRunShow:
    def test_dry_run(self, feed_yml: Path):
        result = run_show(config_path=feed_yml, dry_run=True)
        assert result.error is None
        assert result.receipt is None
        assert result.argv[1:3] == ["--list", "--checklist"]
        assert "Fixture Checklist" in result.command

    def test_count_override(self, feed_yml: Path):
        result = run_show(config_path=feed_yml, count=42, dry_run=True)
        assert result.config.count == 42

    def test_negative_count(self, feed_yml: Path):
        result = run_show(config_path=feed_yml, count=-1)
        assert "count must be >= 0" in result.error

    def test_mock_mode(self, feed_yml: Path):
        result = run_show(config_path=feed_yml, mock_mode=True)
        assert result.receipt.ok
        assert result.receipt.adapter == "checklist"
        assert result.receipt.metadata["mock"] is True
        assert result.receipt.records == 3
        assert result.receipt.lines == 24

    def test_explicit_adapter(self, feed_yml: Path):
        seen = []

        class Recording(MockAdapter):
            def execute(self, context):
                seen.append(context.action)
                return super().execute(context)

        run_show(config_path=feed_yml, adapter=Recording(adapter_name="checklist"))
        assert len(seen) == 1
        assert seen[0].count == 3
        assert seen[0].timeout == 30
        assert seen[0].argv[1:3] == ["--list", "--checklist"]

    def test_real_consumer(self, feed_yml: Path):
        result = run_show(config_path=feed_yml)
        assert result.receipt.ok
        assert result.receipt.output == "Item 1|Item 2"

    def test_config_error(self, tmp_path: Path):
        result = run_show(config_path=tmp_path / "missing.yml")
        assert "not found" in result.error
        assert result.to_dict()["receipt"] is None

    def test_to_dict(self, feed_yml: Path):
        d = run_show(config_path=feed_yml, mock_mode=True).to_dict()
        assert d["count"] == 3
        assert d["receipt"]["status"] == "ok"
        assert d["argv"][0].endswith("fake-zenity")


class TestCheckConfig:
    def test_valid(self, feed_yml: Path):
        result = check_config(feed_yml)
        assert result.valid
        assert result.errors == []
        assert result.warnings == []

    def test_defaults_warn(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        result = check_config()
        assert result.valid
        assert any("No rowfeed.yml" in w for w in result.warnings)

    def test_missing_consumer_warns(self, tmp_path: Path):
        path = tmp_path / "rowfeed.yml"
        path.write_text("consumer: no-such-dialog-tool-xyz\n")
        result = check_config(path)
        assert result.valid
        assert any("not found on PATH" in w for w in result.warnings)

    def test_large_and_duplicate_warnings(self, tmp_path: Path, fake_consumer: Path):
        path = tmp_path / "rowfeed.yml"
        path.write_text(textwrap.dedent(f"""\
            consumer: "{fake_consumer}"
            count: 5000000
            columns: [A, A, B, C, D, E, F, G]
        """))
        result = check_config(path)
        assert any("5,000,000" in w for w in result.warnings)
        assert any("Duplicate" in w for w in result.warnings)

    def test_invalid(self, tmp_path: Path):
        path = tmp_path / "rowfeed.yml"
        path.write_text("columns: [A]\n")
        result = check_config(path)
        assert not result.valid
        assert result.to_dict()["config"] is None
