"""
LangChain binding for validated tools.

Wraps a ValidatedTool in a LangChain BaseTool so agents/supervisors can call it:
- Keeps the tool's name/description.
- args_schema is the JSON schema of tool.parameters. It is passed as a dict so LangChain
  forwards raw args untouched; validation (including ""-to-absent normalization) happens
  once, inside the wrapped tool.
- Returns the JSON-ready result (Response -> dict, ValidationResult -> dict).
"""

from __future__ import annotations

import asyncio
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Dict

from langchain_core.tools import BaseTool
from pydantic import ConfigDict, PrivateAttr

from validated_actions.errors import SchemaDefinitionError
from validated_actions.logging.logger import setup_logger
from validated_actions.tools.base import ValidatedTool

logger = setup_logger(__name__)


def _args_json_schema(tool: ValidatedTool) -> Dict[str, Any]:
    model = tool.parameters
    if not hasattr(model, "model_json_schema"):
        raise SchemaDefinitionError(
            f"Tool {tool.name!r} needs an object (BaseModel) payload schema to be exposed to LangChain"
        )
    return model.model_json_schema()


class ValidatedLangChainTool(BaseTool):
    """
    Transparent LangChain facade over a ValidatedTool.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    _tool: ValidatedTool = PrivateAttr()

    def __init__(self, tool: ValidatedTool, **kwargs: Any):
        super().__init__(
            name=tool.name,
            description=tool.description or "",
            args_schema=_args_json_schema(tool),
            **kwargs,
        )
        self._tool = tool

    @property
    def validated_tool(self) -> ValidatedTool:
        return self._tool

    async def _arun(self, **kwargs: Any) -> Any:
        logger.debug("LangChain tool call | tool=%s | args=%s", self.name, sorted(kwargs))
        result = await self._tool.execute(kwargs)
        return self._tool.to_payload(result)

    def _run(self, **kwargs: Any) -> Any:
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            return asyncio.run(self._arun(**kwargs))
        # Sync invoke from inside a running loop: run on a private loop in a worker thread.
        with ThreadPoolExecutor(max_workers=1) as pool:
            return pool.submit(asyncio.run, self._arun(**kwargs)).result()


def to_langchain_tool(tool: ValidatedTool, **kwargs: Any) -> BaseTool:
    return ValidatedLangChainTool(tool, **kwargs)
