"""
Schema-validated services, actions and tools.

Public API:
- SchemaValidatedService / SchemaValidatedAction (+ validated_service / validated_action decorators)
- ActionTool / ServiceTool, to_langchain_tool
- Response, Message, ErrorCode, create_response_schema, create_error_response
- strip_empty_strings
"""

from validated_actions.contracts.error_codes import ErrorCode
from validated_actions.contracts.response import Message, Response, create_response_schema
from validated_actions.errors import SchemaDefinitionError
from validated_actions.execution import (
    SchemaValidatedAction,
    SchemaValidatedService,
    validated_action,
    validated_service,
)
from validated_actions.helpers.optional_fields import strip_empty_strings
from validated_actions.helpers.response import create_error_response
from validated_actions.schema import ValidationIssue, ValidationResult
from validated_actions.tools import ActionTool, ServiceTool, to_langchain_tool

__all__ = [
    "ActionTool",
    "ErrorCode",
    "Message",
    "Response",
    "SchemaDefinitionError",
    "SchemaValidatedAction",
    "SchemaValidatedService",
    "ServiceTool",
    "ValidationIssue",
    "ValidationResult",
    "create_error_response",
    "create_response_schema",
    "strip_empty_strings",
    "to_langchain_tool",
    "validated_action",
    "validated_service",
]
