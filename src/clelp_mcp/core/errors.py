"""Gateway-level exceptions and failure categories."""

from enum import Enum


class ErrorCategory(Enum):
    """调用方可见的失败类别"""

    INPUT_REJECTED = "input_rejected"
    QUOTA_EXCEEDED = "quota_exceeded"
    COOLDOWN_NOT_ELAPSED = "cooldown_not_elapsed"
    UNRESOLVABLE_IDENTIFIER = "unresolvable_identifier"
    UPSTREAM_FAILURE = "upstream_failure"
    INTERNAL_ERROR = "internal_error"


class GatewayError(Exception):
    """Base exception for all gateway errors."""

    category = ErrorCategory.UPSTREAM_FAILURE


class ConfigError(GatewayError):
    """Raised when gateway configuration is invalid."""


class UnresolvableIdentifierError(GatewayError):
    """Raised when a slug does not map to a catalog item."""

    category = ErrorCategory.UNRESOLVABLE_IDENTIFIER

    def __init__(self, identifier: str):
        super().__init__(
            f"Skill '{identifier}' not found. "
            "Use clelp_search to find the skill first, then rate it by its ID or slug."
        )
        self.identifier = identifier
