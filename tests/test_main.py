"""
命令行入口测试
"""

from unittest.mock import patch

import pytest

from clelp_mcp.__main__ import build_parser, load_config, main


class TestLoadConfig:
    """测试配置合并"""

    def test_cli_overrides_env(self, monkeypatch):
        monkeypatch.setenv("CLELP_API_URL", "https://clelp.ai/api")
        monkeypatch.setenv("CLELP_TIMEOUT", "30")
        args = build_parser().parse_args(
            ["--api-url", "http://localhost:3000/api/", "--timeout", "5", "--log-level", "debug"]
        )

        config = load_config(args)

        assert config.api_url == "http://localhost:3000/api"
        assert config.timeout == 5.0
        assert config.log_level == "DEBUG"


class TestMain:
    """测试退出码"""

    def test_disallowed_url_exits_non_zero(self, monkeypatch):
        """非法 API 地址直接退出，返回 1"""
        monkeypatch.setenv("CLELP_API_URL", "https://evil.example.com/api")

        with patch("clelp_mcp.__main__.ClelpServer") as server_cls:
            assert main([]) == 1

        server_cls.assert_not_called()

    def test_fatal_server_error_exits_non_zero(self, monkeypatch):
        monkeypatch.delenv("CLELP_API_URL", raising=False)

        with patch("clelp_mcp.__main__.ClelpServer") as server_cls:
            server_cls.return_value.run_stdio.side_effect = RuntimeError("stdio closed")
            assert main([]) == 1

    def test_clean_shutdown(self, monkeypatch):
        monkeypatch.delenv("CLELP_API_URL", raising=False)

        async def _run():
            return None

        with patch("clelp_mcp.__main__.ClelpServer") as server_cls:
            server_cls.return_value.run_stdio.side_effect = _run
            assert main([]) == 0

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            build_parser().parse_args(["--version"])

        assert exc_info.value.code == 0
        assert "1.0.0" in capsys.readouterr().out
