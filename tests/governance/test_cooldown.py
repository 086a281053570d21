"""
CooldownGate 冷却测试
"""

import pytest

from clelp_mcp.core.governance import CooldownGate, GovernanceStore


@pytest.fixture
def gate(clock) -> CooldownGate:
    return CooldownGate(GovernanceStore(), interval_seconds=3600, clock=clock)


class TestCooldownCheck:
    """测试冷却检查"""

    def test_unseen_is_denied(self, gate: CooldownGate):
        """从未查看过的条目被拒绝，等待时间为完整冷却期"""
        decision = gate.check("agent-a", "postgres-mcp")

        assert not decision.allowed
        assert not decision.seen
        assert decision.wait_minutes == 60

    def test_recently_seen_is_denied(self, gate: CooldownGate, clock):
        """冷却期内被拒绝"""
        gate.record("agent-a", "postgres-mcp")
        clock.advance(minutes=20)

        decision = gate.check("agent-a", "postgres-mcp")

        assert not decision.allowed
        assert decision.seen
        assert decision.wait_minutes == 40

    def test_allowed_after_interval(self, gate: CooldownGate, clock):
        """冷却期结束后允许"""
        gate.record("agent-a", "postgres-mcp")
        clock.advance(hours=1)

        assert gate.check("agent-a", "postgres-mcp").allowed

    def test_wait_rounds_up(self, gate: CooldownGate, clock):
        """等待时间向上取整"""
        gate.record("agent-a", "postgres-mcp")
        clock.advance(minutes=59, seconds=59)

        assert gate.check("agent-a", "postgres-mcp").wait_minutes == 1

    def test_new_lookup_restarts_cooldown(self, gate: CooldownGate, clock):
        """再次查看会刷新时间戳"""
        gate.record("agent-a", "postgres-mcp")
        clock.advance(hours=2)
        gate.record("agent-a", "postgres-mcp")

        assert not gate.check("agent-a", "postgres-mcp").allowed

    def test_stamps_are_per_credential(self, gate: CooldownGate, clock):
        """其他凭证的查看记录不算数"""
        gate.record("agent-a", "postgres-mcp")
        clock.advance(hours=2)

        assert gate.check("agent-a", "postgres-mcp").allowed
        assert not gate.check("agent-b", "postgres-mcp").allowed

    def test_stamps_are_per_item(self, gate: CooldownGate, clock):
        """其他条目的查看记录不算数"""
        gate.record("agent-a", "postgres-mcp")
        clock.advance(hours=2)

        assert not gate.check("agent-a", "slack-mcp").allowed


class TestCooldownRecord:
    """测试记录查看"""

    def test_records_every_form(self, gate: CooldownGate, clock):
        """一次记录多个标识形式"""
        gate.record("agent-a", "postgres-mcp", "3f6c2a9e-1b2d-4c5e-8f90-123456789abc")
        clock.advance(hours=1)

        assert gate.check("agent-a", "postgres-mcp").allowed
        assert gate.check("agent-a", "3f6c2a9e-1b2d-4c5e-8f90-123456789abc").allowed

    def test_ignores_empty_ids(self, gate: CooldownGate):
        """None 与空字符串被忽略"""
        gate.record("agent-a", None, "", "postgres-mcp")

        assert set(gate.store.stamps["agent-a"]) == {"postgres-mcp"}

    def test_anonymous_not_recorded(self, gate: CooldownGate):
        """匿名调用不记录"""
        gate.record(None, "postgres-mcp")

        assert gate.store.stamps == {}


class TestAllowUnseen:
    """测试 allow_unseen 配置"""

    def test_unseen_allowed_when_configured(self, clock):
        gate = CooldownGate(
            GovernanceStore(), interval_seconds=3600, allow_unseen=True, clock=clock
        )

        decision = gate.check("agent-a", "postgres-mcp")

        assert decision.allowed
        assert not decision.seen

    def test_seen_still_enforced(self, clock):
        """即使允许未查看，查看过的仍需等待"""
        gate = CooldownGate(
            GovernanceStore(), interval_seconds=3600, allow_unseen=True, clock=clock
        )
        gate.record("agent-a", "postgres-mcp")

        assert not gate.check("agent-a", "postgres-mcp").allowed
