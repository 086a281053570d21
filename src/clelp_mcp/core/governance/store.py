"""
GovernanceStore - 进程内治理状态

保存每个凭证的评分窗口 (RateWindow) 与查看记录 (cooldown stamps)。
启动时为空，进程退出即丢弃，不做持久化。

RateGovernor / CooldownGate 只通过本类访问状态，
替换为持久化或分布式存储时无需改动 handler。
"""

from __future__ import annotations

import asyncio
import threading
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator


@dataclass
class RateWindow:
    """单个凭证的每日评分窗口"""

    count: int = 0
    window_end: float = 0.0


@dataclass
class GovernanceStore:
    """
    内存治理状态

    所有读-改-写都在 `locked()` 中完成，锁不会跨 await 持有。
    """

    windows: dict[str, RateWindow] = field(default_factory=dict)
    stamps: dict[str, dict[str, float]] = field(default_factory=dict)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)
    _credential_locks: dict[str, asyncio.Lock] = field(
        default_factory=dict, repr=False
    )

    @contextmanager
    def locked(self) -> Iterator["GovernanceStore"]:
        """在互斥锁内访问状态"""
        with self._lock:
            yield self

    def window_for(self, credential: str) -> RateWindow:
        """获取（或惰性创建）凭证的评分窗口，调用方需持有锁"""
        window = self.windows.get(credential)
        if window is None:
            window = self.windows[credential] = RateWindow()
        return window

    def stamps_for(self, credential: str) -> dict[str, float]:
        """获取（或惰性创建）凭证的查看记录，调用方需持有锁"""
        return self.stamps.setdefault(credential, {})

    def credential_lock(self, credential: str) -> asyncio.Lock:
        """按凭证串行化评分提交 (check -> submit -> commit)"""
        with self._lock:
            lock = self._credential_locks.get(credential)
            if lock is None:
                lock = self._credential_locks[credential] = asyncio.Lock()
            return lock

    def clear(self) -> None:
        """清空全部状态"""
        with self._lock:
            self.windows.clear()
            self.stamps.clear()
            self._credential_locks.clear()
