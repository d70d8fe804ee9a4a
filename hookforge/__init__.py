"""
Hookforge: Solidity hook contract generator
"""

from .core.assembly import build_hook, compute_hook_permissions, generate, print_hook
from .core.errors import CatalogError, FeatureDefinitionError, HookforgeError, OptionsError
from .core.functions import FUNCTIONS, lookup
from .core.options import HookOptions, Info, is_access_control_required, with_defaults
from .core.permissions import HookPermissions, merge, merge_all, zero
from .generators.solidity import print_contract

__version__ = "0.1.0"
__all__ = [
    "build_hook",
    "print_hook",
    "print_contract",
    "generate",
    "compute_hook_permissions",
    "HookOptions",
    "Info",
    "with_defaults",
    "is_access_control_required",
    "HookPermissions",
    "zero",
    "merge",
    "merge_all",
    "FUNCTIONS",
    "lookup",
    "HookforgeError",
    "CatalogError",
    "FeatureDefinitionError",
    "OptionsError",
]
