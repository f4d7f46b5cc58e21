"""Command line entry point for notif-format.

Preview how notifications will read in the notification center: relative
time labels, cleaned bodies, or a whole JSONL dump of notifications.
"""

import locale
import sys

import click
from dotenv import load_dotenv
from rich.console import Console

from .. import __version__
from ..config import OUTPUT_FORMATS, DEFAULT_SEPARATOR
from ..formatters import (
    TerminalFormatter,
    PlainFormatter,
    JSONLFormatter,
    should_use_plain_output,
)
from ..notification import NotificationReader
from ..utils import get_friendly_notif_time_string, process_notification_body
from .validation import parse_timestamp_ms, check_output_path

# Load environment variables (LANG, LC_TIME, NO_COLOR) from .env file
load_dotenv()


def activate_locale() -> None:
    """Use the environment's LC_TIME locale for calendar dates."""
    try:
        locale.setlocale(locale.LC_TIME, '')
    except locale.Error as e:
        click.echo(f"Warning: {e}; dates use the default C locale", err=True)


def _timestamp_or_exit(value: str, name: str) -> int:
    timestamp, error = parse_timestamp_ms(value)
    if error:
        click.echo(f"Error: invalid {name}: {error}", err=True)
        sys.exit(1)
    return timestamp


@click.group()
@click.version_option(version=__version__)
def main():
    """Notification text formatting helpers.

    Render relative time labels and strip browser link preambles from
    notification bodies.
    """
    activate_locale()


@main.command()
@click.argument('timestamp')
@click.option('--now', help='Reference time in milliseconds (default: current time)')
def when(timestamp, now):
    """Print the relative time label for TIMESTAMP (Unix milliseconds)."""
    timestamp_ms = _timestamp_or_exit(timestamp, 'timestamp')
    now_ms = _timestamp_or_exit(now, '--now') if now else None
    click.echo(get_friendly_notif_time_string(timestamp_ms, now_ms=now_ms))


@main.command()
@click.argument('text', required=False)
@click.option('--app', '-a', 'app_name', help='Name of the application that sent the notification')
def clean(text, app_name):
    """Print TEXT with any browser link preamble removed.

    Reads the body from stdin when TEXT is omitted.
    """
    if text is None:
        text = click.get_text_stream('stdin').read()
        # Drop the newline terminating piped input
        if text.endswith('\n'):
            text = text[:-1]

    click.echo(process_notification_body(text, app_name))


@main.command()
@click.argument('source', type=click.File('rb'), default='-')
@click.option('--format', 'output_format', type=click.Choice(OUTPUT_FORMATS),
              default='auto', help='Output format (auto detects plain when piping)')
@click.option('--plain', is_flag=True, help='Force plain text output (auto-enabled when piping)')
@click.option('--separator', default=DEFAULT_SEPARATOR, help='Separator between notifications in plain mode')
@click.option('--now', help='Reference time in milliseconds (default: current time)')
@click.option('--output', '-o', default='-', help='Output file (default: stdout)')
@click.option('--no-truncate', is_flag=True, help='Show full bodies without truncation')
def show(source, output_format, plain, separator, now, output, no_truncate):
    """Render notifications from a JSONL file (default: stdin).

    Each line is a JSON object with 'timestamp' (Unix milliseconds),
    'body', and optionally 'appName', 'summary' and 'id'.
    """
    # Determine actual output format
    actual_format = output_format
    if output_format == 'auto':
        actual_format = 'plain' if (plain or should_use_plain_output()) else 'terminal'
    elif plain:
        actual_format = 'plain'

    now_ms = _timestamp_or_exit(now, '--now') if now else None

    error = check_output_path(output)
    if error:
        click.echo(f"Error: {error}", err=True)
        sys.exit(1)

    try:
        reader = NotificationReader()
        notifications = reader.read_lines(source)

        with click.open_file(output, 'w', encoding='utf-8') as out:
            render_notifications(
                notifications, actual_format, out, now_ms, separator, not no_truncate
            )

        if reader.skipped_lines:
            click.echo(f"Skipped {reader.skipped_lines} invalid line(s)", err=True)

    except KeyboardInterrupt:
        click.echo("\nOperation cancelled by user.", err=True)
        sys.exit(1)
    except OSError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


def render_notifications(notifications, output_format: str, output_file, now_ms=None,
                         separator: str = DEFAULT_SEPARATOR, truncate: bool = True) -> None:
    """Render notifications in the requested format to output_file."""
    if output_format == 'terminal':
        formatter = TerminalFormatter(Console(file=output_file), truncate=truncate)
        formatter.format_notifications(notifications, now_ms)

    elif output_format == 'plain':
        formatter = PlainFormatter(separator, truncate=truncate)
        formatter.format_notifications(notifications, now_ms, output_file)

    elif output_format == 'jsonl':
        formatter = JSONLFormatter()
        formatter.format_notifications(notifications, now_ms, output_file)


if __name__ == '__main__':
    main()
