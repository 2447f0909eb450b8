"""
Tool adapters.

Public API:
- ActionTool / ServiceTool(name, description, payload_schema, response_schema, unit)
- to_langchain_tool(tool) -> BaseTool
"""

from validated_actions.tools.base import ActionTool, ServiceTool, ValidatedTool
from validated_actions.tools.langchain import ValidatedLangChainTool, to_langchain_tool

__all__ = ["ActionTool", "ServiceTool", "ValidatedTool", "ValidatedLangChainTool", "to_langchain_tool"]
