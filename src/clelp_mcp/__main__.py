"""
Clelp MCP 命令行入口

用法:
    python -m clelp_mcp
    python -m clelp_mcp --api-url http://localhost:3000/api --log-level DEBUG

环境变量见 GatewayConfig.from_env()。
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from typing import Optional, Sequence

from loguru import logger

from clelp_mcp.core import (
    SERVER_VERSION,
    ClelpServer,
    ConfigError,
    GatewayConfig,
    configure_logging,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="clelp-mcp",
        description="Clelp MCP server: search, inspect and rate AI skills over stdio.",
    )
    parser.add_argument("--api-url", help="Clelp API base URL (overrides CLELP_API_URL)")
    parser.add_argument(
        "--timeout", type=float, help="Upstream request timeout in seconds (overrides CLELP_TIMEOUT)"
    )
    parser.add_argument("--log-level", help="Log level (overrides CLELP_LOG_LEVEL)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {SERVER_VERSION}")
    return parser


def load_config(args: argparse.Namespace) -> GatewayConfig:
    """环境变量 + 命令行参数，命令行优先"""
    config = GatewayConfig.from_env()
    if args.api_url:
        config.api_url = args.api_url.strip().rstrip("/")
    if args.timeout is not None:
        config.timeout = args.timeout
    if args.log_level:
        config.log_level = args.log_level.upper()
    return config.validate()


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args)
        configure_logging(config.log_level)
    except (ConfigError, ValueError) as e:
        logger.error(f"配置错误: {e}")
        return 1

    if config.read_only:
        logger.info("未设置 CLELP_API_KEY，以只读模式运行（无法评分）")
    logger.debug(f"加载配置: {config!r}")

    try:
        asyncio.run(ClelpServer(config).run_stdio())
    except KeyboardInterrupt:
        return 0
    except Exception as e:
        logger.opt(exception=e).error(f"Fatal error: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
