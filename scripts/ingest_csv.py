"""Ingest one or more asset-request CSV files and report what was loaded.

Runs each file through the upload flow (name and size checks, validation,
parsing) and prints a preview of the resulting records, the raw table, or the
records as JSON.

Usage:
    python scripts/ingest_csv.py briefs/q3_assets.csv
    python scripts/ingest_csv.py briefs/*.csv --json
    python scripts/ingest_csv.py briefs/q3_assets.csv --table
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from tqdm import tqdm

# Ensure project root is importable
ROOT = Path(__file__).parent.parent.resolve()
sys.path.insert(0, str(ROOT / "src"))

from creative_intake.config import MAX_UPLOAD_MB, PREVIEW_LIMIT  # pylint: disable=wrong-import-position
from creative_intake.csv_ingest.formatting import describe_records, format_csv_as_table  # pylint: disable=wrong-import-position
from creative_intake.csv_ingest.pipeline import ingest_csv_file, read_csv_text  # pylint: disable=wrong-import-position
from creative_intake.csv_ingest.tokenizer import parse_csv  # pylint: disable=wrong-import-position

logger = logging.getLogger(__name__)


def report(path: Path, show_table: bool, as_json: bool) -> bool:
    """Ingest a single file and print its output.  Returns True on success."""
    result = ingest_csv_file(path, max_size_mb=MAX_UPLOAD_MB)
    if not result.ok:
        print(f"{path}: {result.error}")
        return False

    print(f"== {path}")
    if as_json:
        print(json.dumps([record.as_dict() for record in result.records], indent=2))
    elif show_table:
        print(format_csv_as_table(parse_csv(read_csv_text(path))))
    else:
        print(describe_records(result.records, limit=PREVIEW_LIMIT))
    return True


def main():
    """Ingest every CSV given on the command line."""
    parser = argparse.ArgumentParser(description="Parse asset-request CSV files for bulk creation")
    parser.add_argument("paths", nargs="+", type=Path, help="CSV files to ingest")
    parser.add_argument("--table", action="store_true", help="Print the parsed table instead of a record preview")
    parser.add_argument("--json", action="store_true", help="Print the parsed records as JSON")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")

    failures = 0
    for path in tqdm(args.paths, desc="Ingesting CSVs", disable=len(args.paths) < 2):
        if not path.exists():
            logger.error("File not found: %s", path)
            failures += 1
            continue
        if not report(path, args.table, args.json):
            failures += 1

    logger.info("Done: %d/%d files ingested", len(args.paths) - failures, len(args.paths))
    sys.exit(1 if failures else 0)


if __name__ == "__main__":
    main()
