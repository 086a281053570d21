"""
RateHandler - clelp_rate

提交顺序：
1. 必须配置凭证
2. 校验评分、标识、子评分、评论长度（失败不发请求、不消耗配额）
3. 每日配额检查
4. 冷却检查
5. slug 解析为规范 ID
6. 提交评分，成功后才计入配额
"""

from __future__ import annotations

from typing import Any, Optional

from loguru import logger

from ..catalog import CatalogClient, IdentifierResolver, RatingSubmission
from ..errors import ErrorCategory, UnresolvableIdentifierError
from ..governance import (
    CooldownGate,
    RateGovernor,
    coerce_score,
    validate_identifier,
    validate_score,
    validate_text,
)
from ..result import ToolResult
from .base import BaseHandler

MIN_COMMENTARY_LENGTH = 50
MAX_COMMENTARY_LENGTH = 5000
SUB_SCORES = ("reliability", "security", "speed")

API_KEY_REQUIRED = "API key required to rate skills. Get one at clelp.ai/get-api-key"
THANK_YOU = "Thank you for your rating! Your review helps other AI agents find quality tools."


class RateHandler(BaseHandler):
    """评分处理器"""

    tool_name = "clelp_rate"

    def __init__(
        self,
        client: CatalogClient,
        gate: CooldownGate,
        governor: RateGovernor,
        resolver: IdentifierResolver,
    ):
        super().__init__(client, gate)
        self.governor = governor
        self.resolver = resolver

    async def handle(
        self, arguments: dict[str, Any], credential: Optional[str]
    ) -> ToolResult:
        if not credential:
            return ToolResult.decline(ErrorCategory.INPUT_REJECTED, API_KEY_REQUIRED)

        errors = self._validate(arguments)
        if errors:
            return self.reject(errors)

        async with self.governor.store.credential_lock(credential):
            return await self._submit(arguments, credential)

    def _validate(self, arguments: dict[str, Any]) -> list[str]:
        errors = validate_score(arguments.get("claws"), "claws")
        if errors:
            return errors

        errors = validate_identifier(arguments.get("skill_id"))
        if errors:
            return errors

        for key in SUB_SCORES:
            if arguments.get(key) is not None:
                errors.extend(validate_score(arguments[key], key))
        if errors:
            return errors

        commentary = arguments.get("commentary")
        if isinstance(commentary, str) and len(commentary.strip()) < MIN_COMMENTARY_LENGTH:
            return [
                f"Commentary must be at least {MIN_COMMENTARY_LENGTH} characters. "
                f"You wrote {len(commentary.strip())}. "
                "Please provide more detail about your experience."
            ]
        return validate_text(
            commentary,
            "commentary",
            MAX_COMMENTARY_LENGTH,
            min_length=MIN_COMMENTARY_LENGTH,
        )

    async def _submit(self, arguments: dict[str, Any], credential: str) -> ToolResult:
        skill_id = arguments["skill_id"]

        quota = self.governor.check(credential)
        if not quota.allowed:
            return ToolResult.decline(
                ErrorCategory.QUOTA_EXCEEDED,
                f"Rate limit exceeded. You can submit {self.governor.daily_limit} "
                f"ratings per day. Try again in {quota.reset_in_minutes} minutes.",
            )

        cooldown = self.gate.check(credential, skill_id)
        if not cooldown.allowed:
            if not cooldown.seen:
                message = (
                    f"You haven't looked up '{skill_id}' yet. Use clelp_search or "
                    f"clelp_get_skill first, then wait {cooldown.wait_minutes} "
                    "minutes before rating."
                )
            else:
                message = (
                    f"Please wait {cooldown.wait_minutes} more minutes before rating. "
                    "This cooldown ensures you've actually used the skill."
                )
            return ToolResult.decline(ErrorCategory.COOLDOWN_NOT_ELAPSED, message)

        try:
            canonical_id = await self.resolver.resolve(skill_id)
        except UnresolvableIdentifierError as e:
            return ToolResult.decline(e.category, str(e))

        submission = RatingSubmission(
            skill_id=canonical_id,
            claws=coerce_score(arguments["claws"]),
            commentary=arguments["commentary"],
            **{
                key: coerce_score(arguments[key])
                for key in SUB_SCORES
                if arguments.get(key) is not None
            },
        )
        rating = await self.client.submit_rating(submission)
        remaining = self.governor.commit(credential)

        logger.info(f"评分已提交: {canonical_id} ({submission.claws} claws)")
        return ToolResult.ok(
            {
                "success": True,
                "message": THANK_YOU,
                "rating_id": rating.get("id"),
                "remaining_ratings_today": remaining,
            }
        )
