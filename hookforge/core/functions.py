"""
Catalog of hook function signatures

Every function the generator can override or supply a body for is defined
here exactly once. The rest of the system holds on to the returned
signature objects and compares them by identity, never by name.
"""

from typing import Any, Dict, Iterator, List, Mapping

from .config import MUTABILITIES, VISIBILITIES
from .errors import CatalogError
from .models import FunctionSignature


class FunctionCatalog:
    """Immutable name -> signature registry"""

    def __init__(self, signatures: Mapping[str, FunctionSignature]):
        self._signatures: Dict[str, FunctionSignature] = dict(signatures)

    def lookup(self, name: str) -> FunctionSignature:
        """
        Resolve a function name to its catalog entry.

        Raises:
            CatalogError: If no function with that name is defined
        """
        try:
            return self._signatures[name]
        except KeyError:
            raise CatalogError(f"Unknown hook function: {name!r}") from None

    def contains(self, signature: Any) -> bool:
        """True when `signature` is one of this catalog's own entries"""
        return any(entry is signature for entry in self._signatures.values())

    def names(self) -> List[str]:
        return list(self._signatures)

    def __iter__(self) -> Iterator[FunctionSignature]:
        return iter(self._signatures.values())

    def __len__(self) -> int:
        return len(self._signatures)


def define_functions(definitions: Mapping[str, Mapping[str, Any]]) -> FunctionCatalog:
    """
    Build a catalog from plain definitions.

    Args:
        definitions: {name: {"kind", "args": [(name, type)], "returns": [...],
                     "mutability" (optional, default nonpayable)}}

    Returns:
        FunctionCatalog

    Raises:
        CatalogError: If a definition uses an unknown visibility or mutability
    """
    signatures = {}
    for name, definition in definitions.items():
        kind = definition["kind"]
        mutability = definition.get("mutability", "nonpayable")
        if kind not in VISIBILITIES:
            raise CatalogError(f"Function {name!r} has invalid visibility {kind!r}")
        if mutability not in MUTABILITIES:
            raise CatalogError(f"Function {name!r} has invalid mutability {mutability!r}")

        signatures[name] = FunctionSignature(
            name=name,
            kind=kind,
            args=tuple((arg_name, arg_type) for arg_name, arg_type in definition.get("args", ())),
            returns=tuple(definition.get("returns", ())),
            mutability=mutability,
        )
    return FunctionCatalog(signatures)


_SENDER = ("sender", "address")
_KEY = ("key", "PoolKey memory")
_HOOK_DATA = ("hookData", "bytes calldata")
_LIQUIDITY_PARAMS = ("params", "IPoolManager.ModifyLiquidityParams memory")
_SWAP_PARAMS = ("params", "IPoolManager.SwapParams memory")
_DELTA = ("delta", "BalanceDelta")
_DONATION = [("amount0", "uint256"), ("amount1", "uint256")]

FUNCTIONS = define_functions({
    "getHookPermissions": {
        "kind": "public",
        "mutability": "pure",
        "args": [],
        "returns": ["Hooks.Permissions memory"],
    },
    "beforeInitialize": {
        "kind": "public",
        "args": [_SENDER, _KEY, ("sqrtPriceX96", "uint160"), _HOOK_DATA],
        "returns": ["bytes4"],
    },
    "afterInitialize": {
        "kind": "public",
        "args": [_SENDER, _KEY, ("sqrtPriceX96", "uint160"), ("tick", "int24"), _HOOK_DATA],
        "returns": ["bytes4"],
    },
    "beforeAddLiquidity": {
        "kind": "public",
        "args": [_SENDER, _KEY, _LIQUIDITY_PARAMS, _HOOK_DATA],
        "returns": ["bytes4"],
    },
    "afterAddLiquidity": {
        "kind": "public",
        "args": [_SENDER, _KEY, _LIQUIDITY_PARAMS, _DELTA, _HOOK_DATA],
        "returns": ["bytes4", "BalanceDelta"],
    },
    "beforeRemoveLiquidity": {
        "kind": "public",
        "args": [_SENDER, _KEY, _LIQUIDITY_PARAMS, _HOOK_DATA],
        "returns": ["bytes4"],
    },
    "afterRemoveLiquidity": {
        "kind": "public",
        "args": [_SENDER, _KEY, _LIQUIDITY_PARAMS, _DELTA, _HOOK_DATA],
        "returns": ["bytes4", "BalanceDelta"],
    },
    # returns (selector, BeforeSwapDelta hookReturn, uint24 lpFeeOverride)
    "beforeSwap": {
        "kind": "public",
        "mutability": "view",
        "args": [_SENDER, _KEY, _SWAP_PARAMS, _HOOK_DATA],
        "returns": ["bytes4", "BeforeSwapDelta", "uint24"],
    },
    "afterSwap": {
        "kind": "public",
        "args": [_SENDER, _KEY, _SWAP_PARAMS, _DELTA, _HOOK_DATA],
        "returns": ["bytes4", "int128"],
    },
    "beforeDonate": {
        "kind": "public",
        "args": [_SENDER, _KEY, *_DONATION, _HOOK_DATA],
        "returns": ["bytes4"],
    },
    "afterDonate": {
        "kind": "public",
        "args": [_SENDER, _KEY, *_DONATION, _HOOK_DATA],
        "returns": ["bytes4"],
    },
})

GET_HOOK_PERMISSIONS = FUNCTIONS.lookup("getHookPermissions")
BEFORE_INITIALIZE = FUNCTIONS.lookup("beforeInitialize")
AFTER_INITIALIZE = FUNCTIONS.lookup("afterInitialize")
BEFORE_SWAP = FUNCTIONS.lookup("beforeSwap")
AFTER_SWAP = FUNCTIONS.lookup("afterSwap")


def lookup(name: str) -> FunctionSignature:
    """Resolve a name against the default catalog"""
    return FUNCTIONS.lookup(name)
