from __future__ import annotations


class SchemaDefinitionError(TypeError):
    """Raised when an object cannot be used as a schema (wrong kind or shape)."""
