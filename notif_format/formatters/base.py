"""Base formatter interface for output formatters."""

from abc import ABC, abstractmethod
from typing import List, TextIO, Optional


class BaseFormatter(ABC):
    """Abstract base class for all output formatters.

    All formatters should implement these methods to ensure
    consistent interface across different output formats.
    """

    @abstractmethod
    def format_notifications(
        self,
        notifications: List,
        now_ms: Optional[float] = None,
        output_file: Optional[TextIO] = None
    ) -> Optional[str]:
        """Format a list of notifications.

        Args:
            notifications: List of Notification objects, newest first
            now_ms: Reference time for relative labels (defaults to now)
            output_file: Optional file to write output to

        Returns:
            Formatted string, or None if output was written directly
        """
        pass
