"""
工具处理器模块

每个 MCP 工具对应一个处理器。
"""

from .base import BaseHandler
from .search import SearchHandler
from .detail import DetailHandler
from .rate import RateHandler

__all__ = ["BaseHandler", "SearchHandler", "DetailHandler", "RateHandler"]
