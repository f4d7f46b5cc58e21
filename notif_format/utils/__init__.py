"""Shared utilities for notif-format."""

from .content import is_chromium_app, process_notification_body, truncate_body
from .timestamp import (
    current_time_ms,
    ms_to_datetime,
    format_locale_date,
    get_friendly_notif_time_string,
)

__all__ = [
    'is_chromium_app',
    'process_notification_body',
    'truncate_body',
    'current_time_ms',
    'ms_to_datetime',
    'format_locale_date',
    'get_friendly_notif_time_string',
]
