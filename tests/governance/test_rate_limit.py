"""
RateGovernor 每日配额测试
"""

import pytest

from clelp_mcp.core.governance import GovernanceStore, RateGovernor


@pytest.fixture
def governor(clock) -> RateGovernor:
    return RateGovernor(GovernanceStore(), daily_limit=10, clock=clock)


def use(governor: RateGovernor, credential: str, times: int) -> None:
    for _ in range(times):
        assert governor.check(credential).allowed
        governor.commit(credential)


class TestRateGovernorCheck:
    """测试配额检查"""

    def test_first_check_allows_full_quota(self, governor: RateGovernor):
        """首次检查返回完整配额"""
        decision = governor.check("agent-a")

        assert decision.allowed
        assert decision.remaining == 10

    def test_check_does_not_consume(self, governor: RateGovernor):
        """只检查不提交不会消耗配额"""
        for _ in range(20):
            assert governor.check("agent-a").allowed
        assert governor.check("agent-a").remaining == 10

    def test_commit_decrements_remaining(self, governor: RateGovernor):
        """提交后剩余配额减一"""
        governor.check("agent-a")
        assert governor.commit("agent-a") == 9
        assert governor.check("agent-a").remaining == 9

    def test_eleventh_action_denied(self, governor: RateGovernor, clock):
        """同一窗口内第 11 次被拒绝，并给出重置分钟数"""
        use(governor, "agent-a", 10)
        clock.advance(hours=2)

        decision = governor.check("agent-a")

        assert not decision.allowed
        assert decision.remaining == 0
        assert decision.reset_in_minutes == 22 * 60

    def test_reset_after_window(self, governor: RateGovernor, clock):
        """窗口结束后计数清零"""
        use(governor, "agent-a", 10)
        assert not governor.check("agent-a").allowed

        clock.advance(hours=24, seconds=1)

        decision = governor.check("agent-a")
        assert decision.allowed
        assert decision.remaining == 10

    def test_window_starts_at_first_check(self, governor: RateGovernor, clock):
        """窗口从首次检查开始，而不是按自然日"""
        use(governor, "agent-a", 10)
        clock.advance(hours=23, minutes=59)

        assert not governor.check("agent-a").allowed

    def test_credentials_are_independent(self, governor: RateGovernor):
        """不同凭证互不影响"""
        use(governor, "agent-a", 10)

        assert not governor.check("agent-a").allowed
        assert governor.check("agent-b").allowed
        assert governor.check("agent-b").remaining == 10

    def test_reset_minutes_round_up(self, governor: RateGovernor, clock):
        """剩余时间向上取整到分钟"""
        use(governor, "agent-a", 10)
        clock.advance(hours=23, minutes=59, seconds=30)

        assert governor.check("agent-a").reset_in_minutes == 1


class TestRateGovernorCustomLimit:
    """测试自定义配额"""

    def test_limit_of_one(self, clock):
        governor = RateGovernor(GovernanceStore(), daily_limit=1, clock=clock)
        use(governor, "agent-a", 1)

        assert not governor.check("agent-a").allowed

    def test_commit_never_reports_negative(self, clock):
        governor = RateGovernor(GovernanceStore(), daily_limit=1, clock=clock)
        governor.check("agent-a")
        governor.commit("agent-a")

        assert governor.commit("agent-a") == 0
