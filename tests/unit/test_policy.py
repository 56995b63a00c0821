"""Tests for resolution policies and the policy registry."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from extfix.models.policy import ResolutionPolicy
from extfix.policy.registry import (
    DEFAULT_POLICY,
    EXTENDED_POLICY,
    PolicyRegistry,
    UnknownPolicyError,
)


class TestPolicyRegistry:
    def test_available_policies(self) -> None:
        available = PolicyRegistry.available()
        assert "default" in available
        assert "extended" in available

    def test_get_default(self) -> None:
        assert PolicyRegistry.get("default") is DEFAULT_POLICY

    def test_unknown_policy_error(self) -> None:
        with pytest.raises(UnknownPolicyError) as exc_info:
            PolicyRegistry.get("bundler")
        assert "bundler" in str(exc_info.value)
        assert "default" in str(exc_info.value)
        assert exc_info.value.policy_name == "bundler"


class TestBuiltinPolicies:
    def test_default_probe_order(self) -> None:
        assert DEFAULT_POLICY.suffixes == ("", ".ts", ".js")
        assert DEFAULT_POLICY.supports_index is False
        assert DEFAULT_POLICY.source_suffixes == (".ts", ".js")

    def test_extended_policy(self) -> None:
        assert EXTENDED_POLICY.suffixes[0] == ""
        assert EXTENDED_POLICY.suffixes.index(".ts") < EXTENDED_POLICY.suffixes.index(".js")
        assert EXTENDED_POLICY.supports_index is True
        assert EXTENDED_POLICY.index_files == ("index",)
        assert ".tsx" in EXTENDED_POLICY.source_suffixes


class TestResolutionPolicy:
    def test_exact_match_forced_first(self) -> None:
        policy = ResolutionPolicy(name="p", suffixes=(".js", "", ".ts"))
        assert policy.suffixes == ("", ".js", ".ts")

    def test_exact_match_added_when_absent(self) -> None:
        policy = ResolutionPolicy(name="p", suffixes=(".mjs",))
        assert policy.suffixes == ("", ".mjs")

    def test_source_suffix_needs_dot(self) -> None:
        with pytest.raises(ValidationError):
            ResolutionPolicy(name="p", source_suffixes=("ts",))

    def test_source_suffixes_not_empty(self) -> None:
        with pytest.raises(ValidationError):
            ResolutionPolicy(name="p", source_suffixes=())

    def test_frozen(self) -> None:
        with pytest.raises(ValidationError):
            DEFAULT_POLICY.name = "changed"  # type: ignore[misc]
