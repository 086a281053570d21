"""
ToolDispatcher - 工具调用分发

接收工具名与参数，路由到对应处理器。
下游抛出的任何异常都在这里转换为结构化的失败结果，不会向传输层抛出。
"""

from __future__ import annotations

import time
from typing import Any, Callable, Optional

from loguru import logger

from .catalog import CatalogClient, CatalogError, IdentifierResolver
from .config import GatewayConfig
from .errors import ErrorCategory, GatewayError
from .governance import CooldownGate, GovernanceStore, RateGovernor
from .handlers import BaseHandler, DetailHandler, RateHandler, SearchHandler
from .result import ToolResult


class ToolDispatcher:
    """
    工具分发器

    持有治理状态 (GovernanceStore) 与 catalog 客户端，生命周期与进程一致。

    Example:
        >>> dispatcher = ToolDispatcher(GatewayConfig.from_env())
        >>> result = await dispatcher.dispatch("clelp_search", {"query": "database"})
        >>> result.is_error
        False
    """

    def __init__(
        self,
        config: GatewayConfig,
        *,
        client: Optional[CatalogClient] = None,
        store: Optional[GovernanceStore] = None,
        clock: Callable[[], float] = time.time,
    ):
        """
        Args:
            config: 网关配置
            client: catalog 客户端，默认按 config 创建
            store: 治理状态，默认新建空状态
            clock: 时间源（测试时注入）
        """
        self.config = config
        self.credential = config.api_key
        self.client = client or CatalogClient(
            config.api_url, config.api_key, timeout=config.timeout
        )
        self.store = store or GovernanceStore()

        self.governor = RateGovernor(
            self.store, daily_limit=config.max_ratings_per_day, clock=clock
        )
        self.gate = CooldownGate(
            self.store,
            interval_seconds=config.cooldown_minutes * 60,
            allow_unseen=config.allow_unseen_ratings,
            clock=clock,
        )
        self.resolver = IdentifierResolver(self.client)

        self.handlers: dict[str, BaseHandler] = {
            handler.tool_name: handler
            for handler in (
                SearchHandler(self.client, self.gate),
                DetailHandler(self.client, self.gate),
                RateHandler(self.client, self.gate, self.governor, self.resolver),
            )
        }

    async def dispatch(self, name: str, arguments: Any = None) -> ToolResult:
        """
        执行一次工具调用

        Args:
            name: 工具名称
            arguments: 参数字典

        Returns:
            ToolResult，失败时 is_error=True
        """
        handler = self.handlers.get(name)
        if handler is None:
            return ToolResult.decline(
                ErrorCategory.INPUT_REJECTED, f"Unknown tool: {name}"
            )

        if arguments is None:
            arguments = {}
        if not isinstance(arguments, dict):
            return ToolResult.decline(
                ErrorCategory.INPUT_REJECTED, "Tool arguments must be an object"
            )

        logger.debug(f"调用工具: {name}")
        try:
            result = await handler.handle(arguments, self.credential)
        except CatalogError as e:
            logger.warning(f"{name} 上游调用失败: {e.kind.value} ({e.status_code})")
            return ToolResult.decline(e.category, str(e))
        except GatewayError as e:
            logger.warning(f"{name} 调用失败: {e}")
            return ToolResult.decline(e.category, str(e))
        except Exception:
            logger.exception(f"{name} 处理异常")
            return ToolResult.decline(
                ErrorCategory.INTERNAL_ERROR,
                f"Internal error while handling {name}. Please try again later.",
            )

        if result.is_error:
            logger.info(f"{name} 被拒绝: {result.category.value}")
        return result

    async def aclose(self) -> None:
        await self.client.aclose()
