"""
Decorators turning plain coroutine functions into validated services/actions.

    @validated_action(CreateUserIn, UserOut)
    async def create_user(payload: CreateUserIn) -> Response:
        ...

    result = await create_user.execute({"name": "John Doe"})
"""

from __future__ import annotations

import functools
import inspect
from dataclasses import dataclass
from typing import Any, Awaitable, Callable

from validated_actions.execution.action import SchemaValidatedAction
from validated_actions.execution.service import SchemaValidatedService


@dataclass(frozen=True)
class FunctionService:
    """Adapts `async def fn(payload)` to the execute(payload) interface."""

    fn: Callable[[Any], Awaitable[Any]]

    @property
    def name(self) -> str:
        return getattr(self.fn, "__name__", type(self).__name__)

    async def execute(self, payload: Any) -> Any:
        return await self.fn(payload)


class FunctionAction(FunctionService):
    """Same adapter; the function is expected to return a Response."""


def _require_coroutine(fn: Callable[..., Any]) -> None:
    if not inspect.iscoroutinefunction(fn):
        raise TypeError(f"{getattr(fn, '__name__', fn)!r} must be an async function")


def validated_service(payload_schema: Any, response_schema: Any):
    def decorator(fn: Callable[[Any], Awaitable[Any]]) -> SchemaValidatedService:
        _require_coroutine(fn)
        wrapper = SchemaValidatedService(payload_schema, response_schema, FunctionService(fn))
        functools.update_wrapper(wrapper, fn, updated=())
        return wrapper

    return decorator


def validated_action(payload_schema: Any, object_schema: Any, **kwargs: Any):
    def decorator(fn: Callable[[Any], Awaitable[Any]]) -> SchemaValidatedAction:
        _require_coroutine(fn)
        wrapper = SchemaValidatedAction(payload_schema, object_schema, FunctionAction(fn), **kwargs)
        functools.update_wrapper(wrapper, fn, updated=())
        return wrapper

    return decorator
