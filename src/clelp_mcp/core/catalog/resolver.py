"""
IdentifierResolver - slug -> 规范 ID

评分接口只接受规范 ID (UUID)，而搜索/详情同时返回 slug。
"""

from __future__ import annotations

from loguru import logger

from ..errors import UnresolvableIdentifierError
from ..governance.validator import is_canonical_id
from .client import CatalogClient
from .errors import CatalogError


class IdentifierResolver:
    """标识解析器"""

    def __init__(self, client: CatalogClient):
        self.client = client

    async def resolve(self, identifier: str) -> str:
        """
        返回评分所需的规范 ID

        已是规范 ID 时原样返回，不发起网络请求；
        否则按 slug 查询一次详情并取其 id 字段。

        Raises:
            UnresolvableIdentifierError: slug 不存在或详情中没有合法 id
            CatalogError: 其它上游失败（超时、认证、网络）
        """
        if is_canonical_id(identifier):
            return identifier

        try:
            record = await self.client.get_skill(identifier)
        except CatalogError as e:
            if e.not_found:
                raise UnresolvableIdentifierError(identifier) from None
            raise

        canonical = record.get("id")
        if not is_canonical_id(canonical):
            logger.warning(f"无法解析 slug: {identifier} (详情中缺少合法 id)")
            raise UnresolvableIdentifierError(identifier)

        logger.debug(f"slug 解析: {identifier} -> {canonical}")
        return canonical
