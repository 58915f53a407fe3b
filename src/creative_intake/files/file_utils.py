"""File helpers for the CSV upload flow.

Covers human-readable sizes, MIME-type guessing, and the accept-list and size
checks applied before a file is read.
"""

import math
import mimetypes

SIZE_UNITS = ("Bytes", "KB", "MB", "GB", "TB")


def format_file_size(n_bytes: int) -> str:
    """Format a byte count like '1.5 MB' (two decimals at most, trailing zeros dropped)."""
    if n_bytes <= 0:
        return "0 Bytes"
    exponent = min(int(math.log(n_bytes, 1024)), len(SIZE_UNITS) - 1)
    # log() can land just under an integer for exact powers of 1024
    if exponent + 1 < len(SIZE_UNITS) and n_bytes >= 1024 ** (exponent + 1):
        exponent += 1
    value = f"{n_bytes / 1024 ** exponent:.2f}".rstrip("0").rstrip(".")
    return f"{value} {SIZE_UNITS[exponent]}"


def validate_file_type(file_name: str, mime_type: str, accepted_types: tuple[str, ...] | list[str]) -> bool:
    """Return True if the file matches any accepted MIME type, 'type/*' wildcard, or '.ext'.

    An empty accept list accepts everything.
    """
    if not accepted_types:
        return True

    lower_name = file_name.lower()
    for accepted in accepted_types:
        if "*" in accepted:
            base_type = accepted.split("/")[0]
            if mime_type.startswith(base_type + "/"):
                return True
        elif accepted.startswith("."):
            if lower_name.endswith(accepted.lower()):
                return True
        elif mime_type == accepted:
            return True
    return False


def validate_file_size(size_bytes: int, max_size_mb: float) -> bool:
    """Return True if size_bytes does not exceed max_size_mb megabytes."""
    return size_bytes <= max_size_mb * 1024 * 1024


def guess_mime_type(file_name: str) -> str:
    """Guess a MIME type from the file name, falling back to application/octet-stream."""
    mime_type, _ = mimetypes.guess_type(file_name)
    return mime_type or "application/octet-stream"
