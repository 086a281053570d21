"""
Catalog 模块

Clelp API 客户端、响应模型与标识解析。
"""

from .errors import CatalogError, CatalogErrorKind
from .models import (
    UNRATED,
    CatalogItems,
    RatingSubmission,
    SkillDetail,
    SkillSummary,
)
from .client import API_KEY_HEADER, CatalogClient
from .resolver import IdentifierResolver

__all__ = [
    "CatalogClient",
    "CatalogError",
    "CatalogErrorKind",
    "CatalogItems",
    "IdentifierResolver",
    "RatingSubmission",
    "SkillDetail",
    "SkillSummary",
    "API_KEY_HEADER",
    "UNRATED",
]
