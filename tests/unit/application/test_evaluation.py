"""Unit tests for the precedence evaluation engine."""

from __future__ import annotations

import itertools

import pytest

from flagengine.application.feature_flags import (
    EvaluationContext,
    FeatureFlag,
    OverrideKind,
    evaluate,
    resolve,
)


def make_flag(is_enabled: bool = False) -> FeatureFlag:
    return FeatureFlag("test-flag", is_enabled)


# ---------------------------------------------------------------------------
# Global default
# ---------------------------------------------------------------------------


class TestGlobalDefault:
    @pytest.mark.parametrize("enabled", [True, False])
    def test_no_overrides_returns_global(self, enabled: bool) -> None:
        assert evaluate(make_flag(enabled), EvaluationContext()) is enabled

    def test_unmatched_context_falls_back_to_global(self) -> None:
        flag = make_flag(True)
        flag.set_override(OverrideKind.USER, "alice", False)
        flag.set_override(OverrideKind.GROUP, "beta", False)
        flag.set_override(OverrideKind.REGION, "eu", False)
        ctx = EvaluationContext.of(user_id="bob", group_ids=["gamma"], region_id="us")
        result = resolve(flag, ctx)
        assert result.is_enabled is True
        assert result.tier == "global"
        assert result.target_id is None


# ---------------------------------------------------------------------------
# Individual tiers
# ---------------------------------------------------------------------------


class TestTiers:
    @pytest.mark.parametrize("value", [True, False])
    def test_user_override(self, value: bool) -> None:
        flag = make_flag(not value)
        flag.set_override(OverrideKind.USER, "alice", value)
        result = resolve(flag, EvaluationContext(user_id="alice"))
        assert result.is_enabled is value
        assert result.tier == "user"
        assert result.target_id == "alice"

    @pytest.mark.parametrize("value", [True, False])
    def test_group_override(self, value: bool) -> None:
        flag = make_flag(not value)
        flag.set_override(OverrideKind.GROUP, "beta", value)
        result = resolve(flag, EvaluationContext(group_ids=("beta",)))
        assert result.is_enabled is value
        assert result.tier == "group"

    @pytest.mark.parametrize("value", [True, False])
    def test_region_override(self, value: bool) -> None:
        flag = make_flag(not value)
        flag.set_override(OverrideKind.REGION, "eu-west", value)
        result = resolve(flag, EvaluationContext(region_id="eu-west"))
        assert result.is_enabled is value
        assert result.tier == "region"

    def test_user_without_override_falls_through_to_group(self) -> None:
        flag = make_flag(False)
        flag.set_override(OverrideKind.GROUP, "beta", True)
        assert evaluate(flag, EvaluationContext.of("nobody", ["beta"])) is True


# ---------------------------------------------------------------------------
# Precedence ordering
# ---------------------------------------------------------------------------


class TestPrecedence:
    def test_user_beats_group(self) -> None:
        flag = make_flag(False)
        flag.set_override(OverrideKind.GROUP, "beta", True)
        flag.set_override(OverrideKind.USER, "alice", False)
        assert evaluate(flag, EvaluationContext.of("alice", ["beta"])) is False

    def test_group_beats_region(self) -> None:
        flag = make_flag(False)
        flag.set_override(OverrideKind.REGION, "eu", False)
        flag.set_override(OverrideKind.GROUP, "beta", True)
        assert evaluate(flag, EvaluationContext.of(group_ids=["beta"], region_id="eu")) is True

    def test_user_beats_region(self) -> None:
        flag = make_flag(True)
        flag.set_override(OverrideKind.REGION, "eu", True)
        flag.set_override(OverrideKind.USER, "alice", False)
        assert evaluate(flag, EvaluationContext.of("alice", region_id="eu")) is False

    def test_full_chain(self) -> None:
        flag = make_flag(False)
        flag.set_override(OverrideKind.USER, "alice", True)
        flag.set_override(OverrideKind.GROUP, "beta", False)
        flag.set_override(OverrideKind.REGION, "eu", True)

        assert evaluate(flag, EvaluationContext.of("alice", ["beta"], "eu")) is True
        assert evaluate(flag, EvaluationContext.of("bob", ["beta"], "eu")) is False
        assert evaluate(flag, EvaluationContext.of("bob", [], "eu")) is True
        assert evaluate(flag, EvaluationContext.of("bob", [], "us")) is False

    def test_every_context_resolves_to_exactly_one_tier(self) -> None:
        flag = make_flag(True)
        flag.set_override(OverrideKind.USER, "u1", False)
        flag.set_override(OverrideKind.GROUP, "g1", False)
        flag.set_override(OverrideKind.GROUP, "g2", True)
        flag.set_override(OverrideKind.REGION, "r1", False)

        users = [None, "", "u1", "u2"]
        groups = [(), ("g1",), ("g2", "g1"), ("gx",)]
        regions = [None, "", "r1", "r2"]
        for user_id, group_ids, region_id in itertools.product(users, groups, regions):
            ctx = EvaluationContext(user_id, group_ids, region_id)
            result = resolve(flag, ctx)
            if user_id == "u1":
                expected = ("user", False)
            elif group_ids and group_ids[0] in ("g1", "g2"):
                expected = ("group", group_ids[0] == "g2")
            elif region_id == "r1":
                expected = ("region", False)
            else:
                expected = ("global", True)
            assert (result.tier, result.is_enabled) == expected, ctx


# ---------------------------------------------------------------------------
# Group ordering
# ---------------------------------------------------------------------------


class TestGroupOrder:
    def _flag(self) -> FeatureFlag:
        flag = make_flag(False)
        flag.set_override(OverrideKind.GROUP, "alpha", True)
        flag.set_override(OverrideKind.GROUP, "beta", False)
        return flag

    def test_first_match_wins(self) -> None:
        assert evaluate(self._flag(), EvaluationContext.of(group_ids=["alpha", "beta"])) is True

    def test_reversed_order_flips_result(self) -> None:
        assert evaluate(self._flag(), EvaluationContext.of(group_ids=["beta", "alpha"])) is False

    def test_only_second_group_matches(self) -> None:
        result = resolve(self._flag(), EvaluationContext.of(group_ids=["nope", "beta"]))
        assert result.is_enabled is False
        assert result.target_id == "beta"

    def test_order_is_caller_order_not_insertion_order(self) -> None:
        flag = make_flag(False)
        flag.set_override(OverrideKind.GROUP, "zeta", True)
        flag.set_override(OverrideKind.GROUP, "alpha", False)
        assert evaluate(flag, EvaluationContext.of(group_ids=["alpha", "zeta"])) is False


# ---------------------------------------------------------------------------
# Missing / empty context fields
# ---------------------------------------------------------------------------


class TestEmptyContext:
    def test_empty_user_id_skips_user_tier(self) -> None:
        flag = make_flag(True)
        flag.set_override(OverrideKind.USER, "alice", False)
        assert evaluate(flag, EvaluationContext(user_id="")) is True

    def test_none_and_empty_string_are_equivalent(self) -> None:
        flag = make_flag(False)
        flag.set_override(OverrideKind.REGION, "eu", True)
        assert evaluate(flag, EvaluationContext(region_id=None)) == evaluate(
            flag, EvaluationContext(region_id="")
        )

    def test_empty_group_list_skips_group_tier(self) -> None:
        flag = make_flag(False)
        flag.set_override(OverrideKind.GROUP, "beta", True)
        assert evaluate(flag, EvaluationContext.of(group_ids=[])) is False

    def test_none_group_list_skips_group_tier(self) -> None:
        flag = make_flag(False)
        flag.set_override(OverrideKind.GROUP, "beta", True)
        assert evaluate(flag, EvaluationContext.of(group_ids=None)) is False

    def test_context_of_preserves_order(self) -> None:
        ctx = EvaluationContext.of(group_ids=iter(["c", "a", "b"]))
        assert ctx.group_ids == ("c", "a", "b")
