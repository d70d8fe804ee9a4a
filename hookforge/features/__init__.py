"""
Optional hook features

FEATURES lists every feature in application order: parents and override
declarations are added to a contract in this order.
"""

from .base import ACCESS_STAGE, PRICING_STAGE, HookFeature, forward_call
from .fee_bumping import BUMPING_FEE, FeeBumpingHook
from .whitelist import WHITELIST, WhitelistHook, whitelist_guard

FEATURES = (FeeBumpingHook(), WhitelistHook())

__all__ = [
    "FEATURES",
    "HookFeature",
    "FeeBumpingHook",
    "WhitelistHook",
    "BUMPING_FEE",
    "WHITELIST",
    "ACCESS_STAGE",
    "PRICING_STAGE",
    "forward_call",
    "whitelist_guard",
]
