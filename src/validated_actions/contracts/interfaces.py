from __future__ import annotations

from typing import Any, Awaitable, Protocol, TypeVar, runtime_checkable

from validated_actions.contracts.response import Response

TypePayload = TypeVar("TypePayload", contravariant=True)
TypeResult = TypeVar("TypeResult", covariant=True)
TypeObject = TypeVar("TypeObject")


@runtime_checkable
class ServiceInterface(Protocol[TypePayload, TypeResult]):
    """
    Re-usable business logic executed with a payload.
    """

    def execute(self, payload: TypePayload) -> Awaitable[TypeResult]: ...


@runtime_checkable
class ActionInterface(Protocol[TypePayload, TypeObject]):
    """
    A service that answers with the uniform Response record.

    Typically an integration doing network calls.
    """

    def execute(self, payload: TypePayload) -> Awaitable[Response[TypeObject]]: ...


@runtime_checkable
class ToolInterface(Protocol):
    """
    Capability exposed to an AI orchestration caller.

    - name / description: how the model discovers the tool
    - parameters: the payload schema (pydantic model)
    """

    name: str
    description: str
    parameters: Any

    def execute(self, payload: Any) -> Awaitable[Any]: ...
