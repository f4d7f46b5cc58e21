"""Rich terminal output formatter for notifications."""

from typing import List, Optional, TextIO

from rich.console import Console
from rich.table import Table
from rich.text import Text
from rich import box

from .base import BaseFormatter
from ..utils import truncate_body
from ..config import BODY_TRUNCATION_TERMINAL


class TerminalFormatter(BaseFormatter):
    """Formats notifications as a rich table."""

    def __init__(self, console: Optional[Console] = None, truncate: bool = True):
        self.console = console or Console()
        self.truncate = truncate

        # Color scheme
        self.colors = {
            'app': 'bright_blue',
            'summary': 'bold',
            'body': 'white',
            'time': 'dim white',
            'metadata': 'dim blue',
            'border': 'dim white',
        }

    def format_notifications(
        self,
        notifications: List,
        now_ms: Optional[float] = None,
        output_file: Optional[TextIO] = None
    ) -> Optional[str]:
        """Format and display notifications."""
        if not notifications:
            self.console.print("No notifications.", style=self.colors['metadata'])
            return None

        table = Table(
            title=f"Notifications ({len(notifications)})",
            box=box.ROUNDED,
            border_style=self.colors['border'],
            title_style="bold",
            show_lines=True,
        )

        table.add_column("When", style=self.colors['time'], no_wrap=True)
        table.add_column("App", style=self.colors['app'])
        table.add_column("Notification", style=self.colors['body'])

        for notification in notifications:
            body = notification.cleaned_body()
            if self.truncate:
                body = truncate_body(body, BODY_TRUNCATION_TERMINAL)

            if notification.summary:
                content = f"{notification.summary}\n{body}" if body else notification.summary
            else:
                content = body

            table.add_row(
                notification.friendly_time(now_ms),
                Text(notification.app_name or "Unknown"),
                Text(content),
            )

        self.console.print(table)
        return None  # Output written directly to console
