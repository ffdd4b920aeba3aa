"""
rowfeed — CLI entrypoint.

Usage:
    python -m rowfeed.main --help
    python -m rowfeed.main generate --count 1000 | zenity-rs --list --checklist ...
    python -m rowfeed.main show --dry-run
    python -m rowfeed.main config check
"""

from __future__ import annotations

import json
import logging
import os
import sys
from pathlib import Path

import click

from rowfeed import __version__
from rowfeed.core.observability.logging_config import setup_logging

logger = logging.getLogger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="rowfeed")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to rowfeed.yml (default: auto-detect).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """rowfeed — synthetic checklist rows for dialog stress tests."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["debug"] = debug
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    # ── Logging setup (once, at process start) ──────────────────
    if debug:
        level = "DEBUG"
    elif verbose:
        level = "INFO"
    elif quiet:
        level = "ERROR"
    else:
        level = os.environ.get("ROWFEED_LOG_LEVEL", "WARNING")

    setup_logging(
        level=level,
        log_file=os.environ.get("ROWFEED_LOG_FILE"),
        log_file_level=os.environ.get("ROWFEED_LOG_FILE_LEVEL"),
    )


def _detach_stdout() -> None:
    """Point stdout at /dev/null so the interpreter's exit flush can't fail again."""
    try:
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
    except (OSError, ValueError):
        # stdout has no real descriptor (captured/in-memory stream)
        return


@cli.command()
@click.option(
    "--count",
    "-n",
    type=click.IntRange(min=0),
    default=None,
    help="Number of records (default: from config, 100000).",
)
@click.pass_context
def generate(ctx: click.Context, count: int | None) -> None:
    """Write records to stdout, one field per line.

    Pipe the output into a checklist dialog with eight columns:

        rowfeed generate | zenity-rs --list --checklist --column=Check ...
    """
    from rowfeed.core.config.loader import ConfigError, load_feed_config
    from rowfeed.core.services.generator import generate as generate_records
    from rowfeed.core.services.generator import write_records

    try:
        config = load_feed_config(ctx.obj.get("config_path"))
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red", err=True)
        sys.exit(1)

    total = config.count if count is None else count

    try:
        written = write_records(generate_records(total), sys.stdout)
        sys.stdout.flush()
    except BrokenPipeError:
        logger.error("Output closed by reader before %d records were written", total)
        _detach_stdout()
        sys.exit(1)

    logger.info("Wrote %d records", written)


@cli.command()
@click.option(
    "--count",
    "-n",
    type=click.IntRange(min=0),
    default=None,
    help="Number of records (default: from config, 100000).",
)
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.option("--dry-run", is_flag=True, help="Print the consumer command, don't launch it.")
@click.option("--mock", is_flag=True, help="Use mock adapter (no real dialog).")
@click.pass_context
def show(
    ctx: click.Context,
    count: int | None,
    as_json: bool,
    dry_run: bool,
    mock: bool,
) -> None:
    """Feed records straight into the checklist dialog.

    Examples:

        rowfeed show

        rowfeed show --count 500 --dry-run

        rowfeed --config stress.yml show
    """
    from rowfeed.core.use_cases.show import run_show

    result = run_show(
        config_path=ctx.obj.get("config_path"),
        count=count,
        dry_run=dry_run,
        mock_mode=mock,
    )

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        if result.error or (result.receipt and result.receipt.failed):
            sys.exit(1)
        return

    if result.error:
        click.secho(f"❌ {result.error}", fg="red")
        sys.exit(1)

    if dry_run:
        click.echo(result.command)
        return

    receipt = result.receipt
    assert receipt is not None
    assert result.config is not None
    quiet = ctx.obj.get("quiet", False)

    if receipt.ok:
        if not quiet:
            timing = f" ({receipt.duration_ms}ms)" if receipt.duration_ms else ""
            mode_label = "[mock] " if mock else ""
            click.secho(
                f"✓ {mode_label}{receipt.records} records shown ({receipt.lines} lines){timing}",
                fg="green",
                err=True,
            )
        if receipt.output and not mock:
            click.echo(receipt.output)
    elif receipt.failed:
        click.secho(f"❌ {receipt.error}", fg="red")
        sys.exit(1)
    else:
        if not quiet:
            button = receipt.metadata.get("button")
            suffix = f" ({button})" if button is not None else ""
            click.secho(f"⊘ Dialog {receipt.output}{suffix}", fg="yellow", err=True)


@cli.group()
def config() -> None:
    """Feed configuration commands."""


@config.command("check")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def config_check(ctx: click.Context, as_json: bool) -> None:
    """Validate rowfeed.yml configuration."""
    from rowfeed.core.use_cases.config_check import check_config

    result = check_config(config_path=ctx.obj.get("config_path"))

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(0 if result.valid else 1)
        return

    if result.valid:
        assert result.config is not None  # guaranteed when valid
        click.secho("✅ Configuration is valid", fg="green", bold=True)
        click.echo(f"   Records:  {result.config.count}")
        click.echo(f"   Consumer: {result.config.consumer}")
        click.echo(f"   Columns:  {', '.join(result.config.columns)}")
    else:
        click.secho("❌ Configuration errors:", fg="red", bold=True)
        for err in result.errors:
            click.echo(f"   • {err}")

    if result.warnings:
        click.echo()
        click.secho("⚠️  Warnings:", fg="yellow")
        for warn in result.warnings:
            click.echo(f"   • {warn}")

    if not result.valid:
        click.echo()
        sys.exit(1)


if __name__ == "__main__":
    cli()
