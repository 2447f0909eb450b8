"""
Schema-validated action.

Responsibilities:
- Turn "" into absent for optional/nullable payload fields before validation
- Report payload issues as a uniform Response (VALIDATION_ERROR messages)
- Validate only the action's data against the object schema, dropping undeclared fields
- Keep the action's own success/messages when its data is valid
- Optionally keep an action's own failure messages when its data is invalid
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional

from validated_actions.config.settings import settings
from validated_actions.contracts.interfaces import ActionInterface
from validated_actions.contracts.response import Response
from validated_actions.execution.pipeline import ValidatedExecutor
from validated_actions.helpers.optional_fields import strip_empty_strings
from validated_actions.helpers.response import validation_error_response
from validated_actions.logging.logger import setup_logger
from validated_actions.schema.types import ValidationResult

logger = setup_logger(__name__)


def _as_response(result: Any) -> Response:
    if isinstance(result, Response):
        return result
    # Plain response-shaped mappings are accepted too.
    if isinstance(result, Mapping):
        return Response.model_validate(dict(result))
    return Response.model_validate(result, from_attributes=True)


class SchemaValidatedAction(ValidatedExecutor[Response]):
    kind = "action"

    def __init__(
        self,
        payload_schema: Any,
        object_schema: Any,
        action: ActionInterface,
        *,
        preserve_upstream_failures: Optional[bool] = None,
    ):
        """
        Args:
            payload_schema: pydantic model (or Schema) for the input payload
            object_schema: pydantic model (or Schema) for Response.data
            action: object with `async execute(payload) -> Response`
            preserve_upstream_failures: defaults to settings.preserve_upstream_failures
        """
        super().__init__(payload_schema, object_schema, action)
        self._preserve_upstream_failures = (
            settings.preserve_upstream_failures
            if preserve_upstream_failures is None
            else preserve_upstream_failures
        )

    @property
    def object_schema(self):
        return self.response_schema

    def _prepare_payload(self, payload: Any) -> Any:
        if isinstance(payload, Mapping) and self.payload_schema.optional_fields():
            return strip_empty_strings(payload, self.payload_schema)
        return payload

    def _on_invalid_payload(self, parsed: ValidationResult) -> Response:
        return validation_error_response(parsed.issues)

    def _finish(self, result: Any) -> Response:
        response = _as_response(result)

        validated = self._validate_output(response.data)
        if validated.success:
            return response.model_copy(update={"data": validated.data})

        if not response.success and response.messages and self._preserve_upstream_failures:
            logger.info(
                "Action reported failure, keeping its messages | action=%s | codes=%s",
                self.name,
                [m.code for m in response.messages or []],
            )
            return response.model_copy(update={"data": None})

        return validation_error_response(validated.issues)
