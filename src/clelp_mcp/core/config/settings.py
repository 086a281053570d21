"""
GatewayConfig - 网关配置数据模型

负责定义配置结构、从环境变量加载，以及校验 API 地址。
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional
from urllib.parse import urlsplit

from ..errors import ConfigError

DEFAULT_API_URL = "https://clelp.ai/api"
ALLOWED_DOMAIN = "clelp.ai"
LOCAL_HOSTS = frozenset({"localhost", "127.0.0.1", "::1"})

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


def _env_int(env: Mapping[str, str], key: str, default: int) -> int:
    raw = env.get(key)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        raise ConfigError(f"{key} must be an integer, got {raw!r}")


def _env_float(env: Mapping[str, str], key: str, default: float) -> float:
    raw = env.get(key)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw.strip())
    except ValueError:
        raise ConfigError(f"{key} must be a number, got {raw!r}")


def _env_bool(env: Mapping[str, str], key: str, default: bool) -> bool:
    raw = env.get(key)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigError(f"{key} must be a boolean (true/false), got {raw!r}")


def is_allowed_host(host: str) -> bool:
    """clelp.ai 及其子域名，或本机地址"""
    host = host.lower().rstrip(".")
    if host in LOCAL_HOSTS:
        return True
    return host == ALLOWED_DOMAIN or host.endswith("." + ALLOWED_DOMAIN)


@dataclass
class GatewayConfig:
    """
    网关配置

    api_key 为空时网关处于只读模式（可搜索、查看，不能评分）。
    """

    api_url: str = DEFAULT_API_URL
    api_key: Optional[str] = None
    timeout: float = 30.0
    max_ratings_per_day: int = 10
    cooldown_minutes: int = 60
    allow_unseen_ratings: bool = False
    log_level: str = "INFO"

    def __post_init__(self):
        self.api_url = self.api_url.strip().rstrip("/")
        if self.api_key is not None:
            self.api_key = self.api_key.strip() or None

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "GatewayConfig":
        """从环境变量加载配置 (CLELP_*)"""
        if env is None:
            env = os.environ
        return cls(
            api_url=env.get("CLELP_API_URL") or DEFAULT_API_URL,
            api_key=env.get("CLELP_API_KEY") or None,
            timeout=_env_float(env, "CLELP_TIMEOUT", 30.0),
            max_ratings_per_day=_env_int(env, "CLELP_MAX_RATINGS_PER_DAY", 10),
            cooldown_minutes=_env_int(env, "CLELP_COOLDOWN_MINUTES", 60),
            allow_unseen_ratings=_env_bool(env, "CLELP_ALLOW_UNSEEN_RATINGS", False),
            log_level=(env.get("CLELP_LOG_LEVEL") or "INFO").upper(),
        )

    def validate(self) -> "GatewayConfig":
        """
        校验配置

        Raises:
            ConfigError: API 地址不在允许的域名内，或数值参数越界
        """
        parts = urlsplit(self.api_url)
        host = parts.hostname or ""
        if parts.scheme not in ("http", "https") or not host:
            raise ConfigError(f"CLELP_API_URL is not a valid http(s) URL: {self.api_url}")
        if not is_allowed_host(host):
            raise ConfigError(
                f"CLELP_API_URL host '{host}' is not allowed. "
                f"Use {ALLOWED_DOMAIN}, one of its subdomains, or localhost."
            )
        if parts.scheme != "https" and host not in LOCAL_HOSTS:
            raise ConfigError(f"CLELP_API_URL must use https for host '{host}'")

        if self.timeout <= 0:
            raise ConfigError("CLELP_TIMEOUT must be greater than 0")
        if self.max_ratings_per_day < 1:
            raise ConfigError("CLELP_MAX_RATINGS_PER_DAY must be at least 1")
        if self.cooldown_minutes < 0:
            raise ConfigError("CLELP_COOLDOWN_MINUTES cannot be negative")
        return self

    @property
    def read_only(self) -> bool:
        return self.api_key is None

    def __repr__(self) -> str:
        key = "set" if self.api_key else "unset"
        return f"GatewayConfig(api_url={self.api_url}, api_key={key})"
