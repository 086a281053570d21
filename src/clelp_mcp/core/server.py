"""
ClelpServer - MCP 服务器

使用官方 mcp SDK 的底层 Server 暴露 tools/list 与 tools/call，
通过 stdio 与 MCP 客户端通信。
"""

from __future__ import annotations

from typing import Any, Optional

from loguru import logger
from mcp import types
from mcp.server.lowlevel import Server

from .config import GatewayConfig
from .dispatch import ToolDispatcher
from .tools import SERVER_NAME, SERVER_VERSION, list_tools


class ClelpServer:
    """
    Clelp MCP 服务器

    Example:
        >>> config = GatewayConfig.from_env().validate()
        >>> asyncio.run(ClelpServer(config).run_stdio())
    """

    def __init__(
        self,
        config: GatewayConfig,
        dispatcher: Optional[ToolDispatcher] = None,
    ):
        self.config = config
        self.dispatcher = dispatcher or ToolDispatcher(config)
        self.server = self._build_server()

    def _build_server(self) -> Server:
        server = Server(SERVER_NAME, version=SERVER_VERSION)

        @server.list_tools()
        async def _list_tools() -> list[types.Tool]:
            return list_tools()

        # 关闭 SDK 的 schema 校验，由处理器返回统一的拒绝结构
        @server.call_tool(validate_input=False)
        async def _call_tool(name: str, arguments: dict[str, Any]) -> types.CallToolResult:
            result = await self.dispatcher.dispatch(name, arguments)
            return result.to_call_tool_result()

        return server

    async def run_stdio(self) -> None:
        """在 stdio 上运行，直到客户端断开"""
        from mcp.server.stdio import stdio_server

        try:
            async with stdio_server() as (read_stream, write_stream):
                logger.info("Clelp MCP server running on stdio")
                await self.server.run(
                    read_stream,
                    write_stream,
                    self.server.create_initialization_options(),
                )
        finally:
            await self.dispatcher.aclose()
            logger.info("Clelp MCP server stopped")
