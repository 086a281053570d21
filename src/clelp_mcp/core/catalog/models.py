"""
Catalog 数据模型

上游返回的技能记录字段不固定，这里统一投影为固定结构，缺失字段取默认值。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from loguru import logger

from .errors import CatalogError, CatalogErrorKind

UNRATED = "Not yet rated"


@dataclass
class CatalogItems:
    """
    列表类响应

    上游可能返回 {"skills": [...]} 或直接返回 [...]，
    from_payload() 统一归一化为 items。
    """

    items: list[dict] = field(default_factory=list)

    @classmethod
    def from_payload(cls, payload: Any) -> "CatalogItems":
        if isinstance(payload, dict) and isinstance(payload.get("skills"), list):
            raw = payload["skills"]
        elif isinstance(payload, list):
            raw = payload
        else:
            raise CatalogError(
                CatalogErrorKind.UPSTREAM_STATUS,
                "Clelp API returned an unexpected response format for skill search.",
            )

        items = [item for item in raw if isinstance(item, dict)]
        if len(items) != len(raw):
            logger.warning(f"忽略 {len(raw) - len(items)} 条格式错误的技能记录")
        return cls(items=items)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)


@dataclass
class SkillSummary:
    """搜索结果中的技能投影"""

    id: Optional[str]
    name: Optional[str]
    slug: Optional[str]
    description: Optional[str]
    type: Optional[str]
    url: Optional[str]
    avg_claws: Any = UNRATED
    total_ratings: int = 0
    verified: bool = False
    best_for: list = field(default_factory=list)

    @classmethod
    def from_record(cls, record: dict) -> "SkillSummary":
        return cls(
            id=record.get("id"),
            name=record.get("name"),
            slug=record.get("slug"),
            description=record.get("description"),
            type=record.get("type"),
            url=record.get("url"),
            avg_claws=record.get("avg_claws") or UNRATED,
            total_ratings=record.get("total_ratings") or 0,
            verified=bool(record.get("verified")),
            best_for=record.get("best_for") or [],
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "slug": self.slug,
            "description": self.description,
            "type": self.type,
            "url": self.url,
            "avg_claws": self.avg_claws,
            "total_ratings": self.total_ratings,
            "verified": self.verified,
            "best_for": self.best_for,
        }


@dataclass
class SkillDetail(SkillSummary):
    """技能详情：摘要字段 + 作者、兼容性、更新时间、评分列表"""

    author: Any = None
    compatibility: Any = None
    freshness: Optional[str] = None
    ratings: list = field(default_factory=list)

    @classmethod
    def from_record(cls, record: dict) -> "SkillDetail":
        summary = SkillSummary.from_record(record)
        return cls(
            **summary.__dict__,
            author=record.get("author"),
            compatibility=record.get("compatibility"),
            freshness=record.get("updated_at"),
            ratings=record.get("ratings") or [],
        )

    def to_dict(self) -> dict:
        result = super().to_dict()
        result.update(
            {
                "author": self.author,
                "compatibility": self.compatibility,
                "freshness": self.freshness,
                "ratings": self.ratings,
            }
        )
        return result


@dataclass
class RatingSubmission:
    """一次评分提交，发送一次，不自动重试"""

    skill_id: str
    claws: int
    commentary: str
    reliability: Optional[int] = None
    security: Optional[int] = None
    speed: Optional[int] = None

    def to_dict(self) -> dict:
        result = {
            "skill_id": self.skill_id,
            "claws": self.claws,
            "commentary": self.commentary,
        }
        for key in ("reliability", "security", "speed"):
            value = getattr(self, key)
            if value is not None:
                result[key] = value
        return result
