"""Notification body cleanup utilities."""

from typing import Any, Optional

from ..config import CHROMIUM_BROWSERS, BODY_SEGMENT_DELIMITER, LINK_PREAMBLE_PREFIX, ELLIPSIS


def is_chromium_app(app_name: Any) -> bool:
    """Check whether an app name belongs to a Chromium-based browser.

    Matching is case-insensitive substring containment, so
    'Google Chrome' and 'Brave Browser' both match.
    """
    if not app_name:
        return False
    lower_app = str(app_name).lower()
    return any(name in lower_app for name in CHROMIUM_BROWSERS)


def process_notification_body(body: Optional[str], app_name: Any = None) -> str:
    """Strip the link preamble Chromium browsers prepend to web notifications.

    Chromium-based browsers put the origin as an anchor in the first
    paragraph of the body. That paragraph is dropped when it starts with
    '<a' and at least one more paragraph follows.

    Args:
        body: Raw notification body text
        app_name: Name of the application that sent the notification

    Returns:
        Cleaned body, or empty string if body is empty or None
    """
    if not body:
        return ""

    if is_chromium_app(app_name):
        segments = body.split(BODY_SEGMENT_DELIMITER)
        if len(segments) > 1 and segments[0].startswith(LINK_PREAMBLE_PREFIX):
            return BODY_SEGMENT_DELIMITER.join(segments[1:])

    return body


def truncate_body(body: str, max_length: int) -> str:
    """Shorten a notification body for list views.

    Cuts at max_length characters, drops whitespace left dangling at the
    cut and marks the cut with a single ellipsis character.
    """
    if len(body) <= max_length:
        return body
    return body[:max_length - 1].rstrip() + ELLIPSIS
