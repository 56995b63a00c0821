"""Named resolution policies."""

from extfix.policy.registry import (
    DEFAULT_POLICY,
    EXTENDED_POLICY,
    PolicyRegistry,
    UnknownPolicyError,
)

__all__ = [
    "DEFAULT_POLICY",
    "EXTENDED_POLICY",
    "PolicyRegistry",
    "UnknownPolicyError",
]
