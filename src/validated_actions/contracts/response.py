"""
Uniform response contract for actions.

Every action (wrapped or validated) answers with the same record:

    {"success": bool, "messages": [{"code": str, "text": str}, ...]?, "data": T?}

- success is True only when data is present and valid for the action's object schema.
- messages explain failures; on success they are whatever the action chose to report.
"""

from __future__ import annotations

from typing import Any, Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel, Field

TypeObject = TypeVar("TypeObject")


class Message(BaseModel):
    code: str = Field(..., description="Error/info code, usually an ErrorCode value.")
    text: str = Field(..., description="Human readable message.")


class Response(BaseModel, Generic[TypeObject]):
    success: bool
    messages: Optional[List[Message]] = None
    data: Optional[TypeObject] = None

    def to_payload(self) -> dict:
        """JSON-ready dict, omitting absent fields (what tool callers receive)."""
        return self.model_dump(mode="json", exclude_none=True)


def create_response_schema(data_schema: Type[Any]) -> Type[Response[Any]]:
    """
    Build the response model for a given data type.

    Useful when a caller receives responses over the wire and wants to validate
    the whole envelope, not just data.
    """
    return Response[data_schema]  # type: ignore[valid-type]
