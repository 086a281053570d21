"""
Clelp MCP Core - 核心模块
"""

from clelp_mcp.core.config import GatewayConfig, configure_logging
from clelp_mcp.core.errors import (
    ConfigError,
    ErrorCategory,
    GatewayError,
    UnresolvableIdentifierError,
)
from clelp_mcp.core.result import ToolResult
from clelp_mcp.core.dispatch import ToolDispatcher
from clelp_mcp.core.server import ClelpServer
from clelp_mcp.core.tools import SERVER_NAME, SERVER_VERSION

__all__ = [
    # 配置
    "GatewayConfig",
    "configure_logging",
    # 错误
    "ConfigError",
    "ErrorCategory",
    "GatewayError",
    "UnresolvableIdentifierError",
    # 核心
    "ClelpServer",
    "ToolDispatcher",
    "ToolResult",
    "SERVER_NAME",
    "SERVER_VERSION",
]
