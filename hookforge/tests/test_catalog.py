"""
Tests for the function catalog
"""

import pytest
from hookforge.core.errors import CatalogError
from hookforge.core.functions import (
    BEFORE_SWAP,
    FUNCTIONS,
    GET_HOOK_PERMISSIONS,
    define_functions,
    lookup,
)


def test_lookup_returns_same_object():
    """Lookups are stable handles"""
    assert lookup("beforeSwap") is BEFORE_SWAP
    assert FUNCTIONS.lookup("beforeSwap") is lookup("beforeSwap")


def test_unknown_name_raises():
    with pytest.raises(CatalogError, match="notAHook"):
        lookup("notAHook")


def test_catalog_contents():
    """getHookPermissions plus the ten lifecycle hook points"""
    assert len(FUNCTIONS) == 11
    for stage in ("before", "after"):
        for point in ("Initialize", "AddLiquidity", "RemoveLiquidity", "Swap", "Donate"):
            assert f"{stage}{point}" in FUNCTIONS.names()


def test_signature_details():
    assert GET_HOOK_PERMISSIONS.mutability == "pure"
    assert GET_HOOK_PERMISSIONS.returns == ("Hooks.Permissions memory",)
    assert BEFORE_SWAP.mutability == "view"
    assert BEFORE_SWAP.arg_names == ["sender", "key", "params", "hookData"]
    assert BEFORE_SWAP.returns == ("bytes4", "BeforeSwapDelta", "uint24")
    assert lookup("afterSwap").mutability == "nonpayable"


def test_identity_not_structural_equality():
    """A structurally identical signature from another catalog is a different function"""
    other = define_functions({
        "beforeSwap": {
            "kind": "public",
            "mutability": "view",
            "args": list(BEFORE_SWAP.args),
            "returns": list(BEFORE_SWAP.returns),
        }
    })
    twin = other.lookup("beforeSwap")

    assert twin != BEFORE_SWAP
    assert not FUNCTIONS.contains(twin)
    assert FUNCTIONS.contains(BEFORE_SWAP)
    assert len({twin, BEFORE_SWAP}) == 2


def test_define_functions_rejects_bad_modifiers():
    with pytest.raises(CatalogError):
        define_functions({"f": {"kind": "everywhere", "args": [], "returns": []}})
    with pytest.raises(CatalogError):
        define_functions({"f": {"kind": "public", "mutability": "constant"}})
