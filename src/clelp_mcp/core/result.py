"""
ToolResult - 工具调用结果

成功与失败使用同一结构返回；失败时 is_error=True，
payload 为 {"success": false, "error": ..., "category": ...}。
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from mcp import types

from .errors import ErrorCategory


@dataclass
class ToolResult:
    """工具调用结果"""

    payload: dict[str, Any] = field(default_factory=dict)
    is_error: bool = False

    @classmethod
    def ok(cls, payload: dict[str, Any]) -> "ToolResult":
        return cls(payload=payload)

    @classmethod
    def decline(cls, category: ErrorCategory, message: str) -> "ToolResult":
        """结构化的拒绝/失败结果"""
        return cls(
            payload={"success": False, "error": message, "category": category.value},
            is_error=True,
        )

    @property
    def error(self) -> str | None:
        return self.payload.get("error") if self.is_error else None

    @property
    def category(self) -> ErrorCategory | None:
        if not self.is_error:
            return None
        return ErrorCategory(self.payload["category"])

    def to_text(self) -> str:
        return json.dumps(self.payload, indent=2, ensure_ascii=False, default=str)

    def to_call_tool_result(self) -> types.CallToolResult:
        """转换为 MCP CallToolResult"""
        return types.CallToolResult(
            content=[types.TextContent(type="text", text=self.to_text())],
            isError=self.is_error,
        )
