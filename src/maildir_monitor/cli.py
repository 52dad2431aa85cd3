"""CLI entry point for Maildir Monitor."""

from __future__ import annotations

import click

from .block import MaildirBlock, emit
from .constants import DEFAULT_INTERVAL, DEFAULT_LABEL, DEFAULT_PATH, ENV_PREFIX
from .display import console, display_entries, render_summary, setup_logging
from .errors import ConfigError, ScanError
from .models import MaildirConfig, MonitorState, PollResult
from .scanner import scan_maildir
from .scheduler import run_block

path_option = click.option(
    "-p",
    "--path",
    default=DEFAULT_PATH,
    show_default=True,
    envvar=f"{ENV_PREFIX}_PATH",
    help="Maildir directory to scan.",
)
label_option = click.option(
    "-l",
    "--label",
    default=DEFAULT_LABEL,
    show_default=True,
    envvar=f"{ENV_PREFIX}_LABEL",
    help="Prefix shown in front of the mail count.",
)


def _build_config(**options) -> MaildirConfig:
    try:
        return MaildirConfig.from_dict(options)
    except ConfigError as e:
        raise click.BadParameter(e.detail, param_hint=f"'--{e.option}'") from e


@click.group()
@click.version_option(version="0.1.0", prog_name="maildir-monitor")
@click.option("-v", "--verbose", is_flag=True, help="Log every skipped file and scan.")
def cli(verbose: bool) -> None:
    """Maildir Monitor - count the mails in a maildir and show who sent them."""
    setup_logging(verbose)


@cli.command()
@path_option
@label_option
@click.option("--list", "list_", is_flag=True, help="List every mail found.")
def check(path: str, label: str, list_: bool) -> None:
    """Scan the maildir once and print the summary."""
    config = _build_config(path=path, label=label)

    try:
        scan_result = scan_maildir(config.path)
    except ScanError as e:
        raise click.ClickException(str(e)) from e

    state = emit(MonitorState.from_config(config), scan_result)
    if list_:
        display_entries(scan_result)
    console.print(render_summary(state))


@cli.command()
@path_option
@label_option
@click.option(
    "-i",
    "--interval",
    default=DEFAULT_INTERVAL.total_seconds(),
    show_default=True,
    type=click.FloatRange(min=0),
    envvar=f"{ENV_PREFIX}_INTERVAL",
    help="Seconds between polls.",
)
@click.option("-n", "--count", default=None, type=click.IntRange(min=1), help="Stop after this many polls.")
@click.option("--fail-fast", is_flag=True, help="Exit on the first failed poll.")
def watch(path: str, label: str, interval: float, count: int | None, fail_fast: bool) -> None:
    """Poll the maildir forever, printing the summary after every poll."""
    config = _build_config(path=path, label=label, interval=interval)
    block = MaildirBlock(config)

    def on_update(result: PollResult) -> None:
        if result.error is not None and fail_fast:
            raise click.ClickException(str(result.error))
        console.print(render_summary(block.state))

    try:
        run_block(block, on_update=on_update, max_polls=count)
    except KeyboardInterrupt:
        console.print("[dim]Stopped.[/dim]")
