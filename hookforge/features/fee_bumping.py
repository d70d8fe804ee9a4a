"""
Fee-bumping hook: forwards initialize and swap hooks to BumpingFee
"""

from ..core.functions import AFTER_INITIALIZE, AFTER_SWAP, BEFORE_SWAP
from ..core.models import FunctionSignature, HookBody, ParentReference
from .base import PRICING_STAGE, HookFeature, forward_call

BUMPING_FEE = ParentReference(name="BumpingFee", path="../hooks/fee/BumpingFee.sol")


class FeeBumpingHook(HookFeature):
    toggle = "bumping_fee_hook"
    parent = BUMPING_FEE
    permission_flags = ("afterInitialize", "beforeSwap", "afterSwap")
    supplies = (AFTER_INITIALIZE, BEFORE_SWAP, AFTER_SWAP)
    stage = PRICING_STAGE
    constructor_code = ("startTimestamp = block.timestamp;",)

    def _body(self, function: FunctionSignature) -> HookBody:
        mutability = "view" if function is BEFORE_SWAP else None
        return HookBody(forward=(forward_call(self.parent, function),), mutability=mutability)
