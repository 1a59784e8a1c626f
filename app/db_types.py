"""Database-agnostic column types.

Configuration records keep identifier maps, token lists and template
bundles in JSON columns. PostgreSQL stores them as JSONB, SQLite as JSON.
"""
from sqlalchemy import JSON
from sqlalchemy.dialects.postgresql import JSONB

JSONType = JSON().with_variant(JSONB(), "postgresql")
