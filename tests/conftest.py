"""
Shared test fixtures and configuration.
"""

import sys
import textwrap
from pathlib import Path

import pytest

# Stand-in for zenity-rs: reads the feed, groups it by --column count,
# and behaves according to FAKE_CONSUMER_MODE.
_FAKE_CONSUMER = textwrap.dedent("""\
    import os
    import sys
    import time

    mode = os.environ.get("FAKE_CONSUMER_MODE", "select")

    if mode == "close-early":
        sys.stdin.readline()
        sys.stdin.close()
        sys.exit(0)

    lines = sys.stdin.read().splitlines()
    columns = sum(1 for a in sys.argv[1:] if a.startswith("--column="))

    if mode == "cancel":
        sys.exit(1)
    if mode == "closed":
        sys.exit(255)
    if mode == "timeout":
        sys.exit(5)
    if mode == "button2":
        sys.exit(2)
    if mode == "button3":
        sys.exit(3)
    if mode == "error":
        sys.stderr.write("render failed\\n")
        sys.exit(100)
    if mode == "slow":
        time.sleep(10)
    if mode == "count":
        sys.stdout.write(f"{len(lines)}\\n")
        sys.exit(0)

    records = [lines[i:i + columns] for i in range(0, len(lines), columns)]
    sys.stdout.write("|".join(r[1] for r in records[:2]) + "\\n")
""")


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def fake_consumer(tmp_path: Path) -> Path:
    """An executable checklist consumer that runs under this interpreter."""
    path = tmp_path / "fake-zenity"
    path.write_text(f"#!{sys.executable}\n" + _FAKE_CONSUMER)
    path.chmod(0o755)
    return path


@pytest.fixture
def feed_yml(tmp_path: Path, fake_consumer: Path) -> Path:
    """A rowfeed.yml pointing at the fake consumer."""
    content = textwrap.dedent(f"""\
        feed:
          count: 3
          title: "Fixture Checklist"
          consumer: "{fake_consumer}"
          timeout: 30
    """)
    path = tmp_path / "rowfeed.yml"
    path.write_text(content)
    return path


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep host logging config out of tests."""
    for name in ("ROWFEED_LOG_LEVEL", "ROWFEED_LOG_FILE", "ROWFEED_LOG_FILE_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.delenv("FAKE_CONSUMER_MODE", raising=False)
