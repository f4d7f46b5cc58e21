"""Notification records and the JSON-lines reader that builds them."""

import json
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, TextIO, Union

from .utils import get_friendly_notif_time_string, process_notification_body


@dataclass
class Notification:
    """A single notification as handed over by the notification service."""
    timestamp: int  # Unix milliseconds
    body: str
    app_name: Optional[str] = None
    summary: Optional[str] = None
    id: Optional[str] = None

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> 'Notification':
        """Build a notification from a decoded JSON object.

        Accepts camelCase keys ('appName') as sent by the desktop shell
        as well as snake_case ones, and 'time' as an alias of 'timestamp'.

        Raises:
            ValueError: If the object has no usable timestamp, or a body or
                summary that is not text
        """
        timestamp = raw.get('timestamp', raw.get('time'))
        if isinstance(timestamp, bool) or not isinstance(timestamp, (int, float)):
            raise ValueError(f"missing or non-numeric timestamp: {timestamp!r}")

        body = raw.get('body')
        summary = raw.get('summary')
        for field, value in (('body', body), ('summary', summary)):
            if value is not None and not isinstance(value, str):
                raise ValueError(f"{field} must be a string, got {type(value).__name__}")

        app_name = raw.get('appName', raw.get('app_name'))
        notif_id = raw.get('id')

        return cls(
            timestamp=timestamp,
            body=body or '',
            app_name=str(app_name) if app_name is not None else None,
            summary=summary,
            id=str(notif_id) if notif_id is not None else None,
        )

    def friendly_time(self, now_ms: Optional[float] = None) -> str:
        """Relative time label for this notification."""
        return get_friendly_notif_time_string(self.timestamp, now_ms=now_ms)

    def cleaned_body(self) -> str:
        """Body with any browser link preamble removed."""
        return process_notification_body(self.body, self.app_name)


class NotificationReader:
    """Reader for JSON-lines notification dumps."""

    def __init__(self):
        self.notifications: List[Notification] = []
        self.skipped_lines = 0

    def read_file(self, file_path: Path) -> List[Notification]:
        """Read notifications from a JSONL file."""
        with open(file_path, 'rb') as f:
            return self.read_lines(f)

    def read_lines(self, lines: Iterable[Union[str, bytes]]) -> List[Notification]:
        """Read notifications from an iterable of JSON lines.

        Lines may be text or raw bytes; bytes are decoded as UTF-8 one line
        at a time. Blank lines are ignored. Lines that are not UTF-8, not
        valid JSON objects, or not valid notifications are reported on
        stderr and skipped.
        """
        notifications = []
        skipped = 0

        for line_num, line in enumerate(lines, 1):
            if isinstance(line, bytes):
                try:
                    line = line.decode('utf-8')
                except UnicodeDecodeError as e:
                    _warn(f"Undecodable line {line_num}: {e}")
                    skipped += 1
                    continue

            line = line.strip()
            if not line:
                continue

            try:
                raw = json.loads(line)
            except json.JSONDecodeError as e:
                _warn(f"Invalid JSON on line {line_num}: {e}")
                skipped += 1
                continue

            if not isinstance(raw, dict):
                _warn(f"Expected an object on line {line_num}, got {type(raw).__name__}")
                skipped += 1
                continue

            try:
                notifications.append(Notification.from_dict(raw))
            except ValueError as e:
                _warn(f"Skipping line {line_num}: {e}")
                skipped += 1

        # Newest first, the way notification centers list them
        notifications.sort(key=lambda n: n.timestamp, reverse=True)

        self.notifications = notifications
        self.skipped_lines = skipped
        return notifications


def _warn(message: str, stream: Optional[TextIO] = None) -> None:
    print(f"Warning: {message}", file=stream or sys.stderr)
