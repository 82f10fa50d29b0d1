"""Command-line interface for logbar.

Provides a ``click``-based CLI for drawing log-friendly progress bars
from the shell.

Usage::

    logbar demo --total 20
    logbar demo --total 10 --width 80 --no-labels --tick "↓" --indicator "█"
    logbar demo --total 50 --step 5 --style mystyle.yaml --header
    find . -name "*.py" | logbar track --total 120
    some_job | logbar track --total 1000 --log

Every bar line is a new line on standard output, so the output can be
redirected straight into a log file.  With ``--log`` the lines are
written through :mod:`logging` instead.
"""

import functools
import logging
import time
from typing import Callable, Optional

import click

from logbar.bar import ProgressBar
from logbar.config import load_style
from logbar.errors import InvalidConfiguration
from logbar.sinks import LoggingSink, Sink, StreamSink
from logbar.style import Style

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _style_options(func: Callable) -> Callable:
    """Attach the style and output options shared by all commands."""
    options = [
        click.option("--total", "-n", type=int, required=True,
                     help="Number of steps representing 100%."),
        click.option("--width", "-w", type=int, default=None,
                     help="Bar body width in characters (default: 40)."),
        click.option("--no-labels", "hide_labels", is_flag=True, default=False,
                     help="Hide the percentage label."),
        click.option("--tick", default=None,
                     help="Boundary glyph (default: '|')."),
        click.option("--bar", "bar_char", default=None,
                     help="Glyph for positions not yet reached (default: '-')."),
        click.option("--indicator", default=None,
                     help="Glyph for completed positions (default: '█')."),
        click.option("--style", "style_file", type=click.Path(), default=None,
                     help="YAML style file; other options override its values."),
        click.option("--header", is_flag=True, default=False,
                     help="Draw a percentage scale above the bar lines."),
        click.option("--log", "use_logging", is_flag=True, default=False,
                     help="Write bar lines through logging instead of stdout."),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _build_style(
    style_file: Optional[str],
    width: Optional[int],
    hide_labels: bool,
    tick: Optional[str],
    bar_char: Optional[str],
    indicator: Optional[str],
) -> Style:
    """Combine an optional style file with command-line overrides."""
    style = load_style(style_file) if style_file else Style.default()
    if width is not None:
        style = style.width(width)
    if hide_labels:
        style = style.labels(False)
    if tick is not None:
        style = style.tick(tick)
    if bar_char is not None:
        style = style.bar(bar_char)
    if indicator is not None:
        style = style.indicator(indicator)
    return style


def _make_bar(total: int, use_logging: bool, **style_args) -> ProgressBar:
    """Build the bar for a command, reporting bad input as a CLI error."""
    sink: Sink = LoggingSink() if use_logging else StreamSink()
    try:
        style = _build_style(**style_args)
        return ProgressBar.with_style(total, style, sink)
    except FileNotFoundError as exc:
        raise click.ClickException(str(exc))
    except InvalidConfiguration as exc:
        raise click.ClickException(str(exc))


def _bar_command(func: Callable) -> Callable:
    """Turn the shared options into a ready :class:`ProgressBar` argument."""
    @functools.wraps(func)
    def wrapper(
        total: int,
        width: Optional[int],
        hide_labels: bool,
        tick: Optional[str],
        bar_char: Optional[str],
        indicator: Optional[str],
        style_file: Optional[str],
        header: bool,
        use_logging: bool,
        **kwargs,
    ) -> None:
        bar = _make_bar(
            total,
            use_logging,
            style_file=style_file,
            width=width,
            hide_labels=hide_labels,
            tick=tick,
            bar_char=bar_char,
            indicator=indicator,
        )
        if header:
            bar.header()
        return func(bar, **kwargs)
    return wrapper


@click.group()
@click.version_option(package_name="logbar")
@click.option("--verbose", "-v", is_flag=True, default=False,
              help="Enable debug logging on standard error.")
def cli(verbose: bool) -> None:
    """logbar — progress bars for logs and pipes."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=_LOG_FORMAT,
    )


@cli.command()
@_style_options
@click.option("--step", "-s", type=click.IntRange(min=1), default=1,
              help="Steps added per line (default: 1).")
@click.option("--delay", type=click.FloatRange(min=0.0), default=0.0,
              help="Seconds to wait between lines (default: 0).")
@_bar_command
def demo(bar: ProgressBar, step: int, delay: float) -> None:
    """Draw a bar advancing STEP at a time until it completes."""
    while bar.current + step < bar.total:
        bar.inc(step)
        if delay:
            time.sleep(delay)
    bar.finish()


@cli.command()
@_style_options
@_bar_command
def track(bar: ProgressBar) -> None:
    """Advance one step per non-empty line read from standard input.

    Finishes the bar when the input ends.
    """
    stdin = click.get_text_stream("stdin")
    for line in stdin:
        if line.strip():
            bar.inc(1)
    bar.finish()


if __name__ == "__main__":
    cli()
