"""
Tools: validated services/actions with a name and description.

A tool is what an AI orchestration layer discovers and calls:
- name / description for tool selection
- parameters: the payload schema (pydantic model), used to build the tool-call schema
- execute(payload): delegates to the validated wrapper, nothing more
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict

from pydantic_core import to_jsonable_python

from validated_actions.contracts.response import Response
from validated_actions.execution.action import SchemaValidatedAction
from validated_actions.execution.pipeline import ValidatedExecutor
from validated_actions.execution.service import SchemaValidatedService
from validated_actions.schema.types import ValidationResult


class ValidatedTool(ABC):
    def __init__(self, name: str, description: str, executor: ValidatedExecutor):
        if not name:
            raise ValueError("Tool name must be a non-empty string")
        self._name = name
        self._description = description
        self._executor = executor

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str:
        return self._description

    @property
    def parameters(self) -> Any:
        return self._executor.payload_schema.model

    @property
    def executor(self) -> ValidatedExecutor:
        return self._executor

    async def execute(self, payload: Any) -> Any:
        return await self._executor.execute(payload)

    @abstractmethod
    def to_payload(self, result: Any) -> Dict[str, Any]:
        """JSON-ready form of an execute() result."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r})"


class ActionTool(ValidatedTool):
    """
    Uses a given action as a tool. Results are uniform Response records.
    """

    def __init__(
        self,
        name: str,
        description: str,
        payload_schema: Any,
        object_schema: Any,
        action: Any,
        **kwargs: Any,
    ):
        super().__init__(name, description, SchemaValidatedAction(payload_schema, object_schema, action, **kwargs))

    def to_payload(self, result: Response) -> Dict[str, Any]:
        return result.to_payload()


class ServiceTool(ValidatedTool):
    """
    Uses a given service as a tool. Results are ValidationResult envelopes.
    """

    def __init__(self, name: str, description: str, payload_schema: Any, response_schema: Any, service: Any):
        super().__init__(name, description, SchemaValidatedService(payload_schema, response_schema, service))

    def to_payload(self, result: ValidationResult) -> Dict[str, Any]:
        if result.success:
            return {"success": True, "data": to_jsonable_python(result.data)}
        return {
            "success": False,
            "issues": [{"message": i.message, "path": list(i.path), "code": i.code} for i in result.issues],
        }
