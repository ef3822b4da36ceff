"""
Schema version for exported calculation data.

The JSON schemas themselves are generated from the Pydantic models via
scripts/generate_schemas.py. Bump SCHEMA_VERSION when a record gains,
loses or renames a field.
"""

SCHEMA_VERSION = "1.0"
