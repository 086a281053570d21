"""
CooldownGate - 查看后等待才能评分

每次成功查看（搜索结果或详情）都会记录时间戳；
评分要求同一凭证此前查看过该条目，且已过冷却时间。
只能说明调用方在本进程内查询过该条目，并不能证明其真的使用过。
"""

from __future__ import annotations

import math
import time
from dataclasses import dataclass
from typing import Callable, Optional

from loguru import logger

from .store import GovernanceStore

HOUR_SECONDS = 60 * 60


@dataclass(frozen=True)
class CooldownDecision:
    """冷却检查结果"""

    allowed: bool
    wait_minutes: int = 0
    seen: bool = True


class CooldownGate:
    """
    冷却门

    allow_unseen=False（默认）时，从未查看过的条目一律拒绝。
    """

    def __init__(
        self,
        store: GovernanceStore,
        *,
        interval_seconds: float = HOUR_SECONDS,
        allow_unseen: bool = False,
        clock: Callable[[], float] = time.time,
    ):
        self.store = store
        self.interval_seconds = interval_seconds
        self.allow_unseen = allow_unseen
        self._clock = clock

    def record(self, credential: Optional[str], *item_ids: Optional[str]) -> None:
        """记录查看时间，空标识会被忽略"""
        if not credential:
            return
        ids = [i for i in item_ids if isinstance(i, str) and i]
        if not ids:
            return

        now = self._clock()
        with self.store.locked() as store:
            stamps = store.stamps_for(credential)
            for item_id in ids:
                stamps[item_id] = now

    def check(self, credential: str, item_id: str) -> CooldownDecision:
        """检查凭证能否为该条目评分"""
        now = self._clock()
        with self.store.locked() as store:
            seen_at = store.stamps.get(credential, {}).get(item_id)

        if seen_at is None:
            if self.allow_unseen:
                return CooldownDecision(allowed=True, seen=False)
            logger.debug(f"冷却检查: {item_id} 尚未被查看")
            return CooldownDecision(
                allowed=False,
                wait_minutes=math.ceil(self.interval_seconds / 60),
                seen=False,
            )

        elapsed = now - seen_at
        if elapsed < self.interval_seconds:
            wait = math.ceil((self.interval_seconds - elapsed) / 60)
            return CooldownDecision(allowed=False, wait_minutes=wait)

        return CooldownDecision(allowed=True)
