"""Compiled regex patterns and keyword tuples for CSV ingest.

Header keywords are matched as case-insensitive substrings against the
lower-cased header text.  Used by tokenizer.py, classifiers.py and mapping.py.
"""

import re

# ─── Line / Content Patterns ──────────────────────────────────────────────────

# Byte-order mark written by spreadsheet exports at the start of the file
BOM = "\ufeff"

# Line boundaries: "\n" and "\r\n" (a lone "\r" is not a boundary)
LINE_SPLIT_RE = re.compile(r"\r?\n")

# First run of ASCII digits in a cell, e.g. "15" in "15s" or "3" in "x3 variants"
DIGIT_RUN_RE = re.compile(r"([0-9]+)")

QUOTE = '"'
DELIMITER = ","

# Characters removed when trimming lines, fields and cells.  Matches the
# ECMAScript whitespace and line-terminator set: includes the BOM, but not
# the \x1c-\x1f separators or \x85 that str.strip() would also remove.
WHITESPACE = (
    "\t\n\v\f\r \u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)


# ─── Header Keywords ──────────────────────────────────────────────────────────

PLATFORM_KEYWORDS = ("platform", "channel")

# Both words must be present
CREATIVE_TYPE_KEYWORDS = ("creative", "type")

SIZE_KEYWORDS = ("size", "dimension", "aspect")

DURATION_KEYWORDS = ("duration", "length")

COUNT_KEYWORDS = ("count", "quantity", "number")

NOTES_KEYWORDS = ("note", "comment", "description")
