"""Shared test fixtures and configuration."""

import sys
from pathlib import Path

import pytest

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

# 2024-12-01T10:00:00Z
FIXED_NOW_MS = 1733047200000

MINUTE = 60 * 1000
HOUR = 60 * MINUTE


@pytest.fixture
def sample_jsonl():
    """JSONL dump with a Chrome notification and a Slack one."""
    return '\n'.join([
        '{"id": "1", "timestamp": %d, "appName": "Google Chrome", '
        '"summary": "New message", "body": "<a href=\\"https://chat.example\\">chat.example</a>\\n\\nHello there"}'
        % (FIXED_NOW_MS - 5 * MINUTE),
        '',
        '{"id": "2", "timestamp": %d, "app_name": "Slack", "body": "Standup in 10"}'
        % (FIXED_NOW_MS - 2 * HOUR),
    ]) + '\n'
