"""Validation of extracted rows against user expectations.

Submodules:
  schema     -- ValidationIssue / ValidationResult Pydantic models and enums
  matching   -- Levenshtein distance and fuzzy column-name matching
  validator  -- validate_extraction() checks and format_validation_message()
"""
