"""
请求治理模块

输入校验、每日配额、查看冷却。
"""

from .store import GovernanceStore, RateWindow
from .rate_limit import RateDecision, RateGovernor
from .cooldown import CooldownDecision, CooldownGate
from .validator import (
    MAX_IDENTIFIER_LENGTH,
    coerce_score,
    is_canonical_id,
    validate_identifier,
    validate_score,
    validate_text,
)

__all__ = [
    "GovernanceStore",
    "RateWindow",
    "RateGovernor",
    "RateDecision",
    "CooldownGate",
    "CooldownDecision",
    "MAX_IDENTIFIER_LENGTH",
    "coerce_score",
    "is_canonical_id",
    "validate_identifier",
    "validate_score",
    "validate_text",
]
