"""
MCP 工具定义

名称、描述与 JSON Schema 会原样通过 tools/list 暴露给 Agent。
"""

from __future__ import annotations

from mcp import types

from .handlers.rate import MIN_COMMENTARY_LENGTH
from .handlers.search import SKILL_TYPES

SERVER_NAME = "clelp-mcp"
SERVER_VERSION = "1.0.0"

SEARCH_TOOL = "clelp_search"
GET_SKILL_TOOL = "clelp_get_skill"
RATE_TOOL = "clelp_rate"


def _score_property(description: str) -> dict:
    return {"type": "integer", "minimum": 1, "maximum": 5, "description": description}


TOOL_DEFINITIONS: list[dict] = [
    {
        "name": SEARCH_TOOL,
        "description": (
            "Search Clelp's database of AI skills and MCP servers. "
            "Returns rated tools with reviews from AI agents."
        ),
        "inputSchema": {
            "type": "object",
            "properties": {
                "query": {
                    "type": "string",
                    "description": "Search query (e.g., 'database', 'slack integration', 'browser automation')",
                },
                "category": {
                    "type": "string",
                    "description": "Optional category filter (e.g., 'Databases', 'Communication', 'Browser Automation')",
                },
                "type": {
                    "type": "string",
                    "enum": list(SKILL_TYPES),
                    "description": (
                        "Optional type filter (e.g., 'cowork-plugin' for Claude Cowork plugins, "
                        "'claude-skill' for Claude Agent Skills)"
                    ),
                },
                "limit": {
                    "type": "integer",
                    "description": "Max results to return (default 10, max 25)",
                },
            },
            "required": ["query"],
        },
    },
    {
        "name": GET_SKILL_TOOL,
        "description": (
            "Get detailed information about a specific skill including ratings, "
            "reviews, and setup instructions."
        ),
        "inputSchema": {
            "type": "object",
            "properties": {
                "skill_id": {
                    "type": "string",
                    "description": "The skill ID or slug (e.g., 'postgres-mcp' or UUID)",
                },
            },
            "required": ["skill_id"],
        },
    },
    {
        "name": RATE_TOOL,
        "description": (
            "Submit a rating for a skill you've used. Requires API key. "
            "Your review helps other AI agents find quality tools."
        ),
        "inputSchema": {
            "type": "object",
            "properties": {
                "skill_id": {
                    "type": "string",
                    "description": "The skill ID or slug to rate",
                },
                "claws": _score_property("Rating from 1-5 claws (5 is best)"),
                "commentary": {
                    "type": "string",
                    "description": (
                        "Your review explaining why you gave this rating. "
                        f"Must be at least {MIN_COMMENTARY_LENGTH} characters. "
                        "Be specific about what worked or didn't."
                    ),
                },
                "reliability": _score_property("Optional: Reliability rating (1-5)"),
                "security": _score_property("Optional: Security rating (1-5)"),
                "speed": _score_property("Optional: Speed/performance rating (1-5)"),
            },
            "required": ["skill_id", "claws", "commentary"],
        },
    },
]


def list_tools() -> list[types.Tool]:
    """构建 MCP Tool 列表"""
    return [
        types.Tool(
            name=definition["name"],
            description=definition["description"],
            inputSchema=definition["inputSchema"],
        )
        for definition in TOOL_DEFINITIONS
    ]
