"""
RateGovernor - 每凭证每日评分配额

窗口惰性推进：检查时若已过 window_end，则计数清零并将窗口后移一天。
check() 与 commit() 分离，下游失败（如标识解析失败）不消耗配额。
"""

from __future__ import annotations

import math
import time
from dataclasses import dataclass
from typing import Callable, Optional

from loguru import logger

from .store import GovernanceStore

DAY_SECONDS = 24 * 60 * 60


@dataclass(frozen=True)
class RateDecision:
    """配额检查结果"""

    allowed: bool
    remaining: int = 0
    reset_in_minutes: Optional[int] = None


class RateGovernor:
    """每日评分配额"""

    def __init__(
        self,
        store: GovernanceStore,
        *,
        daily_limit: int = 10,
        window_seconds: float = DAY_SECONDS,
        clock: Callable[[], float] = time.time,
    ):
        self.store = store
        self.daily_limit = daily_limit
        self.window_seconds = window_seconds
        self._clock = clock

    def check(self, credential: str) -> RateDecision:
        """
        检查凭证是否还有配额

        Returns:
            RateDecision: 允许时带 remaining，拒绝时带 reset_in_minutes
        """
        now = self._clock()
        with self.store.locked() as store:
            window = store.window_for(credential)
            if now > window.window_end:
                window.count = 0
                window.window_end = now + self.window_seconds

            if window.count >= self.daily_limit:
                reset_in = math.ceil((window.window_end - now) / 60)
                logger.debug(f"评分配额已用尽，{reset_in} 分钟后重置")
                return RateDecision(allowed=False, reset_in_minutes=reset_in)

            return RateDecision(
                allowed=True, remaining=self.daily_limit - window.count
            )

    def commit(self, credential: str) -> int:
        """
        记录一次成功的评分

        Returns:
            当前窗口剩余配额
        """
        with self.store.locked() as store:
            window = store.window_for(credential)
            window.count += 1
            return max(self.daily_limit - window.count, 0)
