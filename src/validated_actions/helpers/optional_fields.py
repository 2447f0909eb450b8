from __future__ import annotations

from typing import Any, Dict, Mapping

from validated_actions.errors import SchemaDefinitionError
from validated_actions.schema.pydantic_schema import as_schema


def strip_empty_strings(data: Mapping[str, Any], schema: Any) -> Dict[str, Any]:
    """
    Drop "" values for fields the schema declares optional or nullable.

    HTML forms post empty inputs as "", which would otherwise fail e.g. a date field
    that is simply not filled in. Only exact empty strings are touched; other type
    mismatches are left for validation to report.

    Top-level only: nested objects are passed through as they are.
    Returns a shallow copy; `data` is not mutated.
    """
    schema = as_schema(schema)
    if not getattr(schema, "is_object", True):
        raise SchemaDefinitionError(f"{schema!r} is not an object schema")

    cleaned = dict(data)
    for key in schema.optional_fields():
        value = cleaned.get(key)
        if isinstance(value, str) and value == "":
            del cleaned[key]
    return cleaned
