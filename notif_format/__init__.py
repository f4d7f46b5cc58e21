"""Notification text formatting.

Relative time labels and browser preamble cleanup for notification
center entries.
"""

__version__ = "1.0.0"

from .utils import get_friendly_notif_time_string, process_notification_body
from .notification import Notification, NotificationReader
from .config import CHROMIUM_BROWSERS, DEFAULT_SEPARATOR

__all__ = [
    # Formatting helpers
    'get_friendly_notif_time_string',
    'process_notification_body',
    # Notification records
    'Notification',
    'NotificationReader',
    # Config
    'CHROMIUM_BROWSERS',
    'DEFAULT_SEPARATOR',
]
