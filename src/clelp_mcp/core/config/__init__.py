"""
网关配置模块

提供配置加载、校验与日志初始化。
"""

from .settings import (
    ALLOWED_DOMAIN,
    DEFAULT_API_URL,
    GatewayConfig,
    is_allowed_host,
)
from .logsetup import configure_logging


__all__ = [
    "GatewayConfig",
    "configure_logging",
    "is_allowed_host",
    "ALLOWED_DOMAIN",
    "DEFAULT_API_URL",
]
