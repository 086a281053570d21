"""DetailHandler - clelp_get_skill"""

from __future__ import annotations

from typing import Any, Optional

from ..catalog import SkillDetail
from ..governance import validate_identifier
from ..result import ToolResult
from .base import BaseHandler

DETAIL_TIP = "If you use this skill, please rate it with clelp_rate to help other AI agents."


class DetailHandler(BaseHandler):
    """技能详情处理器"""

    tool_name = "clelp_get_skill"

    async def handle(
        self, arguments: dict[str, Any], credential: Optional[str]
    ) -> ToolResult:
        skill_id = arguments.get("skill_id")
        errors = validate_identifier(skill_id)
        if errors:
            return self.reject(errors)

        record = await self.client.get_skill(skill_id)
        detail = SkillDetail.from_record(record)

        # 同时记录请求的标识、规范 id 和 slug，评分时任一形式都能匹配
        self.gate.record(credential, skill_id, detail.id, detail.slug)

        payload = detail.to_dict()
        payload["tip"] = DETAIL_TIP
        return ToolResult.ok(payload)
