"""
Hook permission record

A fixed-shape set of boolean flags telling the pool manager which lifecycle
points a hook participates in. Records are immutable; features each produce
their own and the assembly engine folds them with `merge`.
"""

from dataclasses import dataclass, fields
from typing import Dict, Iterable, Iterator, List, Tuple

# (attribute, Solidity field) in Hooks.Permissions declaration order
PERMISSION_FIELDS = (
    ("before_initialize", "beforeInitialize"),
    ("after_initialize", "afterInitialize"),
    ("before_add_liquidity", "beforeAddLiquidity"),
    ("after_add_liquidity", "afterAddLiquidity"),
    ("before_remove_liquidity", "beforeRemoveLiquidity"),
    ("after_remove_liquidity", "afterRemoveLiquidity"),
    ("before_swap", "beforeSwap"),
    ("after_swap", "afterSwap"),
    ("before_donate", "beforeDonate"),
    ("after_donate", "afterDonate"),
    ("before_swap_return_delta", "beforeSwapReturnDelta"),
    ("after_swap_return_delta", "afterSwapReturnDelta"),
    ("after_add_liquidity_return_delta", "afterAddLiquidityReturnDelta"),
    ("after_remove_liquidity_return_delta", "afterRemoveLiquidityReturnDelta"),
)

_ATTRIBUTE_BY_SOLIDITY = {solidity: attr for attr, solidity in PERMISSION_FIELDS}


@dataclass(frozen=True)
class HookPermissions:
    """Which hook points a contract participates in"""
    before_initialize: bool = False
    after_initialize: bool = False
    before_add_liquidity: bool = False
    after_add_liquidity: bool = False
    before_remove_liquidity: bool = False
    after_remove_liquidity: bool = False
    before_swap: bool = False
    after_swap: bool = False
    before_donate: bool = False
    after_donate: bool = False
    before_swap_return_delta: bool = False
    after_swap_return_delta: bool = False
    after_add_liquidity_return_delta: bool = False
    after_remove_liquidity_return_delta: bool = False

    @classmethod
    def zero(cls) -> "HookPermissions":
        return cls()

    @classmethod
    def enabled(cls, *names: str) -> "HookPermissions":
        """
        Record with the given flags set.

        Args:
            names: Solidity field names, e.g. "beforeSwap"

        Raises:
            ValueError: If a name is not a permission flag
        """
        values = {}
        for name in names:
            if name not in _ATTRIBUTE_BY_SOLIDITY:
                raise ValueError(f"Unknown hook permission: {name!r}")
            values[_ATTRIBUTE_BY_SOLIDITY[name]] = True
        return cls(**values)

    def merge(self, other: "HookPermissions") -> "HookPermissions":
        """Flag-wise OR"""
        return HookPermissions(**{
            f.name: getattr(self, f.name) or getattr(other, f.name)
            for f in fields(self)
        })

    __or__ = merge

    def covers(self, other: "HookPermissions") -> bool:
        """True when every flag set in `other` is also set here"""
        return all(getattr(self, f.name) or not getattr(other, f.name) for f in fields(self))

    def flags(self) -> Iterator[Tuple[str, bool]]:
        """(Solidity field, value) pairs in declaration order"""
        for attr, solidity in PERMISSION_FIELDS:
            yield solidity, getattr(self, attr)

    def enabled_flags(self) -> List[str]:
        return [name for name, value in self.flags() if value]

    def to_dict(self) -> Dict[str, bool]:
        return dict(self.flags())


def zero() -> HookPermissions:
    """All-false record; identity of `merge`"""
    return HookPermissions.zero()


def merge(a: HookPermissions, b: HookPermissions) -> HookPermissions:
    return a.merge(b)


def merge_all(records: Iterable[HookPermissions]) -> HookPermissions:
    """Fold `merge` over records; empty input yields `zero()`"""
    result = zero()
    for record in records:
        result = result.merge(record)
    return result


def render_permissions_body(permissions: HookPermissions) -> List[str]:
    """Statement lines returning the Hooks.Permissions struct"""
    entries = [
        f"    {name}: {'true' if value else 'false'}"
        for name, value in permissions.flags()
    ]
    lines = ["return Hooks.Permissions({"]
    lines.extend(f"{entry}," for entry in entries[:-1])
    lines.append(entries[-1])
    lines.append("});")
    return lines
