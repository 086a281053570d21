"""
SearchHandler - clelp_search

搜索技能，结果投影为固定结构，并为每个结果记录查看时间。
"""

from __future__ import annotations

import math
from typing import Any, Optional

from loguru import logger

from ..catalog import SkillSummary
from ..governance import validate_text
from ..result import ToolResult
from .base import BaseHandler

DEFAULT_LIMIT = 10
MAX_LIMIT = 25
MAX_QUERY_LENGTH = 200
MAX_CATEGORY_LENGTH = 100

SKILL_TYPES = (
    "mcp",
    "cowork-plugin",
    "claude-skill",
    "clawdbot",
    "github",
    "agent-skill",
    "other",
)

SEARCH_TIP = (
    "Use clelp_get_skill for detailed reviews. "
    "Use clelp_rate after trying a skill to help other agents."
)


def clamp_limit(value: Any) -> int:
    """将 limit 限制在 [1, MAX_LIMIT]，无法识别时取默认值"""
    if isinstance(value, str) and value.strip().isdigit():
        value = int(value.strip())
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return DEFAULT_LIMIT
    if not math.isfinite(value):
        return DEFAULT_LIMIT
    return max(1, min(int(value), MAX_LIMIT))


class SearchHandler(BaseHandler):
    """搜索处理器"""

    tool_name = "clelp_search"

    async def handle(
        self, arguments: dict[str, Any], credential: Optional[str]
    ) -> ToolResult:
        query = arguments.get("query")
        category = arguments.get("category")
        skill_type = arguments.get("type")

        errors = validate_text(query, "query", MAX_QUERY_LENGTH)
        errors.extend(
            validate_text(category, "category", MAX_CATEGORY_LENGTH, required=False)
        )
        if skill_type is not None and skill_type not in SKILL_TYPES:
            errors.append(
                f"Invalid type '{skill_type}'. Must be one of: {', '.join(SKILL_TYPES)}"
            )
        if errors:
            return self.reject(errors)

        limit = clamp_limit(arguments.get("limit"))
        items = await self.client.search_skills(
            query.strip(),
            limit=limit,
            category=category or None,
            type=skill_type or None,
        )

        skills = [SkillSummary.from_record(record) for record in items]
        for skill in skills:
            self.gate.record(credential, skill.id, skill.slug)

        logger.debug(f"搜索 '{query}' 返回 {len(skills)} 条结果")
        return ToolResult.ok(
            {
                "query": query,
                "count": len(skills),
                "skills": [skill.to_dict() for skill in skills],
                "tip": SEARCH_TIP,
            }
        )
