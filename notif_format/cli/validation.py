"""CLI input validation utilities."""

import os
from pathlib import Path
from typing import Optional, Tuple


def parse_timestamp_ms(value: str) -> Tuple[Optional[int], Optional[str]]:
    """Parse a millisecond timestamp given on the command line.

    Args:
        value: Integer milliseconds since the epoch, e.g. '1733047200000'

    Returns:
        Tuple of (timestamp, error_message)
    """
    value = value.strip()
    try:
        return int(value), None
    except ValueError:
        pass

    try:
        # Accept '1733047200000.0' as emitted by some JS dumps
        as_float = float(value)
    except ValueError:
        return None, f"'{value}' is not a millisecond timestamp"

    if as_float != as_float or as_float in (float('inf'), float('-inf')):
        return None, f"'{value}' is not a finite timestamp"
    return int(as_float), None


def check_output_path(output_path: str) -> Optional[str]:
    """Check that rendered notifications can be written to output_path.

    '-' means stdout. A file must either not exist yet, in a writable
    directory, or be an existing writable regular file.

    Returns:
        Error message, or None if the path is usable
    """
    if output_path == '-':
        return None

    target = Path(output_path)
    if target.is_dir():
        return f"Output path is a directory: {target}"

    if target.exists():
        if not os.access(target, os.W_OK):
            return f"Cannot overwrite {target}: permission denied"
        return None

    folder = target.parent
    if not folder.is_dir():
        return f"No such directory for output: {folder}"
    if not os.access(folder, os.W_OK):
        return f"Cannot create {target.name} in {folder}: permission denied"
    return None
