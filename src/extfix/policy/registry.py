"""Resolution policy registry — named suffix probing policies."""

from __future__ import annotations

from extfix.models.policy import ResolutionPolicy


class UnknownPolicyError(Exception):
    """Raised when a requested policy is not registered."""

    def __init__(self, name: str, available: list[str]) -> None:
        self.policy_name = name
        self.available = available
        super().__init__(f"Unknown resolution policy '{name}'. Available: {', '.join(available)}")


class PolicyRegistry:
    """Registry for resolution policies, keyed by name."""

    _policies: dict[str, ResolutionPolicy] = {}

    @classmethod
    def register(cls, policy: ResolutionPolicy) -> ResolutionPolicy:
        """Register a policy under its own name, replacing any previous one."""
        cls._policies[policy.name] = policy
        return policy

    @classmethod
    def get(cls, name: str) -> ResolutionPolicy:
        """Get the policy registered under *name*."""
        if name not in cls._policies:
            raise UnknownPolicyError(name, available=cls.available())
        return cls._policies[name]

    @classmethod
    def available(cls) -> list[str]:
        """List registered policy names."""
        return sorted(cls._policies.keys())


# Exact path, then TypeScript before JavaScript.  No directory lookup.
DEFAULT_POLICY = PolicyRegistry.register(
    ResolutionPolicy(
        name="default",
        suffixes=("", ".ts", ".js"),
        source_suffixes=(".ts", ".js"),
    )
)

_EXTENDED_SUFFIXES = (".ts", ".tsx", ".mts", ".cts", ".js", ".jsx", ".mjs", ".cjs")

EXTENDED_POLICY = PolicyRegistry.register(
    ResolutionPolicy(
        name="extended",
        suffixes=("", *_EXTENDED_SUFFIXES),
        index_files=("index",),
        source_suffixes=_EXTENDED_SUFFIXES,
    )
)
