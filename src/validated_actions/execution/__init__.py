"""
Validated execution wrappers.

Public API:
- SchemaValidatedService(payload_schema, response_schema, service) -> ValidationResult
- SchemaValidatedAction(payload_schema, object_schema, action) -> Response
- validated_service / validated_action decorators
"""

from validated_actions.execution.action import SchemaValidatedAction
from validated_actions.execution.decorators import (
    FunctionAction,
    FunctionService,
    validated_action,
    validated_service,
)
from validated_actions.execution.pipeline import ValidatedExecutor
from validated_actions.execution.service import SchemaValidatedService

__all__ = [
    "FunctionAction",
    "FunctionService",
    "SchemaValidatedAction",
    "SchemaValidatedService",
    "ValidatedExecutor",
    "validated_action",
    "validated_service",
]
