"""Catalog API exceptions."""

from enum import Enum
from typing import Optional

from ..errors import ErrorCategory, GatewayError


class CatalogErrorKind(Enum):
    """上游调用失败的分类，由 CatalogClient 自身产生"""

    TIMEOUT = "timeout"
    AUTH_FAILURE = "auth_failure"
    UPSTREAM_STATUS = "upstream_status"
    NETWORK_FAILURE = "network_failure"


class CatalogError(GatewayError):
    """Raised when a catalog API call fails.

    The message is already sanitized and safe to show to the caller.
    """

    category = ErrorCategory.UPSTREAM_FAILURE

    def __init__(
        self,
        kind: CatalogErrorKind,
        message: str,
        status_code: Optional[int] = None,
    ):
        super().__init__(message)
        self.kind = kind
        self.status_code = status_code

    @property
    def not_found(self) -> bool:
        return self.kind is CatalogErrorKind.UPSTREAM_STATUS and self.status_code == 404
