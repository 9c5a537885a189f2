"""Structure inference for extraction payloads.

Submodules:
  patterns   -- compiled regex patterns for HTML scraping and line splitting
  schema     -- ParsedTable / ParsedText Pydantic models
  scraping   -- regex-based HTML table and product-card extraction
  delimited  -- delimiter detection and quoted CSV/TSV line parsing
  pipeline   -- parse_extracted_data() strategy chain and cell formatting
"""
