"""
Validate -> execute -> validate skeleton shared by services and actions.

Responsibilities:
- Hold immutable references to the payload schema, the response schema and the wrapped unit
- Short-circuit on invalid payloads (the wrapped unit never sees them)
- Await the wrapped unit exactly once; its exceptions propagate untouched
- Leave result shaping to subclasses (_on_invalid_payload / _finish)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from validated_actions.config.settings import settings
from validated_actions.contracts.interfaces import ServiceInterface
from validated_actions.logging.logger import setup_logger
from validated_actions.schema.pydantic_schema import as_schema
from validated_actions.schema.types import Schema, ValidationResult

logger = setup_logger(__name__)

TypeResult = TypeVar("TypeResult")


def _unit_name(unit: Any) -> str:
    return getattr(unit, "name", None) or type(unit).__name__


class ValidatedExecutor(ABC, Generic[TypeResult]):
    kind = "executor"

    def __init__(self, payload_schema: Any, response_schema: Any, unit: Any):
        if not isinstance(unit, ServiceInterface):
            raise TypeError(f"{type(unit).__name__} has no execute(payload) method")

        self._payload_schema: Schema = as_schema(payload_schema)
        self._response_schema: Schema = as_schema(response_schema)
        self._unit = unit
        self._name = _unit_name(unit)

        logger.info(
            "Validated %s ready | name=%s | payload_schema=%r | response_schema=%r",
            self.kind,
            self._name,
            self._payload_schema,
            self._response_schema,
        )

    @property
    def payload_schema(self) -> Schema:
        return self._payload_schema

    @property
    def response_schema(self) -> Schema:
        return self._response_schema

    @property
    def wrapped(self) -> Any:
        return self._unit

    @property
    def name(self) -> str:
        return self._name

    def _prepare_payload(self, payload: Any) -> Any:
        return payload

    @abstractmethod
    def _on_invalid_payload(self, parsed: ValidationResult) -> TypeResult:
        """Result returned when the payload does not validate."""

    @abstractmethod
    def _finish(self, result: Any) -> TypeResult:
        """Shape the wrapped unit's return value into the final result."""

    def _validate_output(self, value: Any) -> ValidationResult:
        validated = self._response_schema.safe_validate(value, strip=True)
        if validated.success:
            logger.debug("Output validation ok | %s=%s", self.kind, self._name)
        else:
            logger.warning(
                "Output validation failed | %s=%s | issues=%s",
                self.kind,
                self._name,
                [(i.path, i.message) for i in validated.issues],
            )
        return validated

    async def execute(self, payload: Any) -> TypeResult:
        if settings.log_payloads:
            logger.debug("Execute | %s=%s | payload=%r", self.kind, self._name, payload)

        prepared = self._prepare_payload(payload)

        logger.debug("Payload validation start | %s=%s", self.kind, self._name)
        parsed = self._payload_schema.safe_validate(prepared)
        if not parsed.success:
            logger.warning(
                "Payload validation failed | %s=%s | issues=%s",
                self.kind,
                self._name,
                [(i.path, i.message) for i in parsed.issues],
            )
            return self._on_invalid_payload(parsed)

        result = await self._unit.execute(parsed.data)

        if settings.log_payloads:
            logger.debug("Wrapped unit returned | %s=%s | result=%r", self.kind, self._name, result)
        return self._finish(result)
