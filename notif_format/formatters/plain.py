"""Plain text output formatter for notifications."""

import os
import sys
from typing import List, TextIO, Optional

from .base import BaseFormatter
from ..utils import truncate_body
from ..config import DEFAULT_SEPARATOR, BODY_TRUNCATION_PLAIN


class PlainFormatter(BaseFormatter):
    """Formats notifications as plain text suitable for piping."""

    def __init__(self, separator: str = None, truncate: bool = True):
        """Initialize with custom separator or default em-dashes."""
        self.separator = separator or DEFAULT_SEPARATOR
        self.truncate = truncate

    def format_notifications(
        self,
        notifications: List,
        now_ms: Optional[float] = None,
        output_file: Optional[TextIO] = None
    ) -> Optional[str]:
        """Format notifications as plain text."""
        lines = []

        if not notifications:
            lines.append("No notifications.")
        else:
            for i, notification in enumerate(notifications):
                if i > 0:  # Add separator between notifications
                    lines.append("")
                    lines.append(self.separator)
                    lines.append("")

                lines.extend(self._format_one(notification, now_ms))

        plain_content = '\n'.join(lines)

        if output_file:
            output_file.write(plain_content + '\n')

        return plain_content

    def _format_one(self, notification, now_ms: Optional[float]) -> List[str]:
        """Format a single notification as plain text lines."""
        header = notification.app_name or "Unknown app"
        header += f" [{notification.friendly_time(now_ms)}]"

        lines = [header]
        if notification.summary:
            lines.append(notification.summary)

        body = notification.cleaned_body()
        if self.truncate:
            body = truncate_body(body, BODY_TRUNCATION_PLAIN)
        if body:
            lines.append(body)

        return lines


def should_use_plain_output() -> bool:
    """Detect if output should be plain text (when piping or NO_COLOR is set)."""
    # Check if output is being piped (not a terminal)
    if not sys.stdout.isatty():
        return True

    # Check for NO_COLOR environment variable
    if os.getenv('NO_COLOR'):
        return True

    return False
