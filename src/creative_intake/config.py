"""Shared configuration for CSV ingest and file uploads.

Values can be overridden through environment variables or a .env file at the
project root.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

ROOT = Path(__file__).parent.parent.parent.resolve()
load_dotenv(ROOT / ".env")

# Largest upload accepted, in megabytes
MAX_UPLOAD_MB = float(os.getenv("CSV_MAX_UPLOAD_MB", "500"))

# Number of records listed in a preview before "... and N more"
PREVIEW_LIMIT = int(os.getenv("CSV_PREVIEW_LIMIT", "5"))

# Extensions and MIME types accepted by the CSV upload field
CSV_ACCEPTED_TYPES = (".csv", "text/csv")
