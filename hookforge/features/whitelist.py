"""
Whitelist hook: only whitelisted callers may swap
"""

from typing import Tuple

from ..core.functions import BEFORE_INITIALIZE, BEFORE_SWAP
from ..core.models import FunctionSignature, HookBody, ParentReference
from .base import ACCESS_STAGE, HookFeature, forward_call

WHITELIST = ParentReference(name="Whitelist", path="../hooks/access/Whitelist.sol")


def whitelist_guard(parent: ParentReference = WHITELIST) -> Tuple[str, ...]:
    """Decode the caller from hookData and revert unless it is whitelisted"""
    return (
        "address user = abi.decode(hookData, (address));",
        f"if (!{parent.name}.isWhitelisted(user)) revert OnlyWhitelistedUsers();",
    )


class WhitelistHook(HookFeature):
    toggle = "whitelist_hook"
    parent = WHITELIST
    permission_flags = ("beforeInitialize", "beforeSwap")
    supplies = (BEFORE_INITIALIZE, BEFORE_SWAP)
    stage = ACCESS_STAGE

    def _body(self, function: FunctionSignature) -> HookBody:
        guard = whitelist_guard(self.parent) if function is BEFORE_SWAP else ()
        return HookBody(guard=guard, forward=(forward_call(self.parent, function),))
