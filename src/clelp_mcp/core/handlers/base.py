"""
BaseHandler - 工具处理器基类

提供共享的依赖（catalog 客户端、冷却门）与输入拒绝辅助方法。
"""

from __future__ import annotations

from typing import Any, Optional

from loguru import logger

from ..catalog import CatalogClient
from ..errors import ErrorCategory
from ..governance import CooldownGate
from ..result import ToolResult


class BaseHandler:
    """工具处理器基类"""

    tool_name: str = ""

    def __init__(self, client: CatalogClient, gate: CooldownGate):
        self.client = client
        self.gate = gate

    async def handle(
        self, arguments: dict[str, Any], credential: Optional[str]
    ) -> ToolResult:
        raise NotImplementedError

    def reject(self, errors: list[str]) -> ToolResult:
        """输入校验失败，不发起网络请求"""
        logger.debug(f"{self.tool_name} 输入被拒绝: {errors}")
        return ToolResult.decline(ErrorCategory.INPUT_REJECTED, "; ".join(errors))
