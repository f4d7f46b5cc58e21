"""JSONL output formatter for notifications."""

import json
from typing import List, TextIO, Optional

from .base import BaseFormatter
from ..utils import current_time_ms


class JSONLFormatter(BaseFormatter):
    """Formats notifications as structured JSONL output."""

    def format_notifications(
        self,
        notifications: List,
        now_ms: Optional[float] = None,
        output_file: Optional[TextIO] = None
    ) -> Optional[str]:
        """Format notifications as JSONL records."""
        if now_ms is None:
            now_ms = current_time_ms()

        lines = []

        # Header record
        header_record = {
            "type": "notification_list",
            "count": len(notifications),
            "now": now_ms,
        }
        lines.append(json.dumps(header_record))

        for notification in notifications:
            record = {
                "type": "notification",
                "id": notification.id,
                "app_name": notification.app_name,
                "timestamp": notification.timestamp,
                "time": notification.friendly_time(now_ms),
                "summary": notification.summary,
                "body": notification.cleaned_body(),
            }

            # Remove None values for cleaner JSON
            record = {k: v for k, v in record.items() if v is not None}
            lines.append(json.dumps(record))

        jsonl_content = '\n'.join(lines)

        if output_file:
            output_file.write(jsonl_content + '\n')

        return jsonl_content
