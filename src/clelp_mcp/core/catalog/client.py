"""
CatalogClient - Clelp API 客户端

基于 httpx.AsyncClient 的请求/响应桥接：
  - 存在凭证时附带 X-API-Key 请求头
  - 每次调用有总时长上限，超时即放弃
  - 失败统一映射为 CatalogError(kind)，不向调用方暴露底层异常信息
"""

from __future__ import annotations

import asyncio
import json
from typing import Any, Optional
from urllib.parse import quote

import httpx
from loguru import logger

from .errors import CatalogError, CatalogErrorKind
from .models import CatalogItems, RatingSubmission

API_KEY_HEADER = "X-API-Key"
API_KEY_URL = "clelp.ai/get-api-key"
USER_AGENT = "clelp-mcp/1.0.0"
MAX_DETAIL_LENGTH = 500


class CatalogClient:
    """
    Clelp catalog API 客户端

    Example::

        async with CatalogClient("https://clelp.ai/api", api_key="...") as client:
            items = await client.search_skills("database", limit=5)
    """

    def __init__(
        self,
        base_url: str,
        api_key: Optional[str] = None,
        *,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Args:
            base_url: API 根地址，如 https://clelp.ai/api
            api_key: 凭证，None 表示只读
            timeout: 单次调用的总等待上限（秒）
            transport: 自定义 httpx transport（测试时注入 MockTransport）
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._has_key = bool(api_key)

        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "User-Agent": USER_AGENT,
        }
        if api_key:
            headers[API_KEY_HEADER] = api_key

        self._http = httpx.AsyncClient(
            base_url=self.base_url,
            headers=headers,
            timeout=httpx.Timeout(timeout),
            transport=transport,
        )

    # ==================== Public API ====================

    async def request(
        self,
        path: str,
        method: str = "GET",
        *,
        params: Optional[dict[str, Any]] = None,
        body: Optional[dict[str, Any]] = None,
    ) -> Any:
        """
        发送请求并解析 JSON 响应

        Raises:
            CatalogError: 超时、网络错误、认证失败、响应无法解码或非 2xx 状态
        """
        logger.debug(f"Catalog 请求: {method} {path}")
        try:
            response = await asyncio.wait_for(
                self._http.request(method, path, params=params, json=body),
                timeout=self.timeout,
            )
        except (httpx.TimeoutException, asyncio.TimeoutError):
            logger.warning(f"Catalog 请求超时: {method} {path}")
            raise CatalogError(
                CatalogErrorKind.TIMEOUT,
                f"Request to the Clelp API timed out after {self.timeout:g} seconds. "
                "Please try again later.",
            ) from None
        except httpx.TransportError as e:
            logger.warning(f"Catalog 网络错误: {method} {path} ({type(e).__name__})")
            raise CatalogError(
                CatalogErrorKind.NETWORK_FAILURE,
                "Could not reach the Clelp API. Check your network connection and try again.",
            ) from None
        except httpx.RequestError as e:
            # 解码失败、重定向过多等
            logger.warning(f"Catalog 响应异常: {method} {path} ({type(e).__name__})")
            raise CatalogError(
                CatalogErrorKind.UPSTREAM_STATUS,
                "Clelp API returned an unreadable response. Please try again later.",
            ) from None

        if not response.is_success:
            raise self._status_error(response)

        try:
            return response.json()
        except (json.JSONDecodeError, UnicodeDecodeError):
            logger.warning(f"Catalog 响应不是合法 JSON: {method} {path}")
            raise CatalogError(
                CatalogErrorKind.UPSTREAM_STATUS,
                f"Clelp API returned an unreadable response ({response.status_code}).",
                status_code=response.status_code,
            ) from None

    async def search_skills(
        self,
        query: str,
        *,
        limit: int = 10,
        category: Optional[str] = None,
        type: Optional[str] = None,
    ) -> CatalogItems:
        """GET /skills?search=&limit=&category=&type="""
        params: dict[str, Any] = {"search": query, "limit": str(limit)}
        if category:
            params["category"] = category
        if type:
            params["type"] = type
        payload = await self.request("/skills", params=params)
        return CatalogItems.from_payload(payload)

    async def get_skill(self, identifier: str) -> dict:
        """GET /skills/{identifier}"""
        payload = await self.request(f"/skills/{quote(identifier, safe='')}")
        if not isinstance(payload, dict):
            raise CatalogError(
                CatalogErrorKind.UPSTREAM_STATUS,
                "Clelp API returned an unexpected response format for skill details.",
            )
        return payload

    async def submit_rating(self, submission: RatingSubmission) -> dict:
        """POST /ratings"""
        payload = await self.request("/ratings", "POST", body=submission.to_dict())
        return payload if isinstance(payload, dict) else {}

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> "CatalogClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    # ==================== Internal Utils ====================

    def _status_error(self, response: httpx.Response) -> CatalogError:
        """将非 2xx 响应转换为 CatalogError"""
        status = response.status_code
        logger.info(f"Catalog 返回错误状态: {status} {response.request.url.path}")

        if status in (401, 403):
            if self._has_key:
                reason = f"the API key sent in the {API_KEY_HEADER} header was rejected"
            else:
                reason = f"no API key was sent in the {API_KEY_HEADER} header"
            return CatalogError(
                CatalogErrorKind.AUTH_FAILURE,
                f"Clelp API authentication failed ({status}): {reason}. "
                f"Set the CLELP_API_KEY environment variable to a valid key. "
                f"Get one at {API_KEY_URL}",
                status_code=status,
            )

        return CatalogError(
            CatalogErrorKind.UPSTREAM_STATUS,
            f"Clelp API error ({status}): {self._extract_detail(response)}",
            status_code=status,
        )

    @staticmethod
    def _extract_detail(response: httpx.Response) -> str:
        """提取服务端错误说明，优先使用 JSON 中的 detail/error/message"""
        text = response.text.strip()
        try:
            data = json.loads(text) if text else None
        except json.JSONDecodeError:
            data = None

        if isinstance(data, dict):
            for key in ("detail", "error", "message"):
                value = data.get(key)
                if isinstance(value, str) and value.strip():
                    text = value.strip()
                    break

        if not text:
            text = response.reason_phrase or "no details"
        if len(text) > MAX_DETAIL_LENGTH:
            text = text[:MAX_DETAIL_LENGTH] + "..."
        return text
