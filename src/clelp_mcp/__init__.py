"""
Clelp MCP - Clelp 技能目录的 MCP 网关

为 AI Agent 提供技能搜索、详情查询与评分提交三个工具，
转发到 Clelp API，并负责输入校验、评分配额、查看冷却与错误脱敏。

核心概念:
- GatewayConfig: 网关配置 (API 地址、凭证、配额)
- ToolDispatcher: 工具分发，调用 -> 处理器 -> ToolResult
- ClelpServer: MCP 服务器，通过 stdio 暴露工具

Example:
    >>> from clelp_mcp import GatewayConfig, ToolDispatcher
    >>>
    >>> config = GatewayConfig.from_env().validate()
    >>> dispatcher = ToolDispatcher(config)
    >>>
    >>> result = await dispatcher.dispatch("clelp_search", {"query": "database"})
    >>> result = await dispatcher.dispatch("clelp_get_skill", {"skill_id": "postgres-mcp"})
    >>> print(result.to_text())
"""

from clelp_mcp.core import (
    SERVER_VERSION,
    ClelpServer,
    GatewayConfig,
    ToolDispatcher,
    ToolResult,
)

__version__ = SERVER_VERSION
__all__ = ["ClelpServer", "GatewayConfig", "ToolDispatcher", "ToolResult"]
