"""Configuration constants for notif-format."""

# Source apps whose notification bodies may carry an injected link preamble.
# Matched by lowercase substring, so "Google Chrome" hits "chrome".
CHROMIUM_BROWSERS = (
    "brave",
    "chrome",
    "chromium",
    "vivaldi",
    "opera",
    "microsoft edge",
)

# Paragraph delimiter in notification bodies
BODY_SEGMENT_DELIMITER = "\n\n"

# Anchor markup that marks a browser preamble segment
LINK_PREAMBLE_PREFIX = "<a"

# Relative time thresholds
SECONDS_PER_MINUTE = 60
MINUTES_PER_HOUR = 60
HOURS_PER_DAY = 24
DAYS_BEFORE_DATE = 7

JUST_NOW_LABEL = "Just now"
INVALID_DATE_LABEL = "Invalid Date"

# Default separator for plain text output
DEFAULT_SEPARATOR = "—" * 24

# Truncation limits
BODY_TRUNCATION_TERMINAL = 200
BODY_TRUNCATION_PLAIN = 1000
ELLIPSIS = "\u2026"

# Output formats accepted by `notif-format show`
OUTPUT_FORMATS = ['auto', 'terminal', 'plain', 'jsonl']
