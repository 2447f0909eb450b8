from validated_actions.schema.pydantic_schema import PydanticSchema, as_schema
from validated_actions.schema.types import Schema, ValidationIssue, ValidationResult

__all__ = ["PydanticSchema", "Schema", "ValidationIssue", "ValidationResult", "as_schema"]
