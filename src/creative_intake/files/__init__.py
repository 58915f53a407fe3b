"""Upload helpers: file size formatting, MIME guessing, type and size checks."""
