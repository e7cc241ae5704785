# column_types.py
from sqlalchemy import JSON, Text
from sqlalchemy.dialects.postgresql import ARRAY, JSONB

# text[] on PostgreSQL; SQLite has no array type so the list is stored as JSON
StringArray = ARRAY(Text).with_variant(JSON(none_as_null=True), "sqlite")

# Opaque documents (business hours, ratings, menu, ...). No shape validation.
# An omitted document is SQL NULL, not the JSON literal null.
Document = JSONB(none_as_null=True).with_variant(JSON(none_as_null=True), "sqlite")
