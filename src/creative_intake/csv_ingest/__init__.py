"""CSV ingest for bulk asset-request creation.

Submodules:
  patterns     -- compiled regex patterns, the trim set and header keyword tuples
  schema       -- ParsedTable, AssetRequestRecord, ValidationResult, IngestResult models
  tokenizer    -- quoted-field line tokenizer and table parser
  classifiers  -- ordered header classification rules
  mapping      -- row-to-record mapping with numeric extraction
  validation   -- pre-flight content checks and the CSVErrorCode taxonomy
  formatting   -- fixed-width table rendering and record previews
  pipeline     -- upload flow: file checks, validation, parsing
"""
