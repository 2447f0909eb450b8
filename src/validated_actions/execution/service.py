from __future__ import annotations

from typing import Any

from validated_actions.execution.pipeline import ValidatedExecutor
from validated_actions.schema.types import ValidationResult


class SchemaValidatedService(ValidatedExecutor[ValidationResult]):
    """
    Wraps a service (bare return value) between two schemas.

    The result is the schema engine's own envelope:
    - invalid payload -> the payload ValidationResult (success=False), service not called
    - otherwise       -> the ValidationResult of the service's return value
    """

    kind = "service"

    def __init__(self, payload_schema: Any, response_schema: Any, service: Any):
        super().__init__(payload_schema, response_schema, service)

    def _on_invalid_payload(self, parsed: ValidationResult) -> ValidationResult:
        return parsed

    def _finish(self, result: Any) -> ValidationResult:
        return self._validate_output(result)
