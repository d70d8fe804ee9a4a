"""
Hook contract assembly

Turns options into a ContractBuilder:

1. attach the BaseHook parent and its pool-manager constructor argument
2. render the merged permission record as getHookPermissions
3. attach the active features; a function claimed by more than one feature
   is composed as a pipeline instead of letting one body replace the other
"""

import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Union

from .builder import ContractBuilder
from .config import BASE_HOOK, POOL_MANAGER_ARG
from .functions import GET_HOOK_PERMISSIONS
from .models import FunctionSignature, HookBody
from .options import HookOptions, with_defaults
from .permissions import HookPermissions, merge_all, render_permissions_body
from ..api_models import GenerationResult
from ..features import FEATURES, HookFeature
from ..generators.solidity import print_contract

logger = logging.getLogger(__name__)

Options = Optional[Union[HookOptions, Mapping[str, Any]]]


def active_features(options: HookOptions) -> List[HookFeature]:
    """Features toggled on, in application order"""
    return [feature for feature in FEATURES if feature.is_active(options)]


def compute_hook_permissions(options: HookOptions) -> HookPermissions:
    """Flag-wise OR of every feature's contribution (inactive ones give zero)"""
    return merge_all(feature.compute_permissions(options) for feature in FEATURES)


def compose_pipeline(contributions: Sequence[Tuple[HookFeature, HookBody]]) -> HookBody:
    """
    Combine several features' bodies for one shared function.

    Contributions run in stage order (access control before pricing):
    every guard is kept in that order, then the last stage's forward
    produces the return value. Earlier stages' forwards are dropped since
    a function can only return once.
    """
    ordered = sorted(contributions, key=lambda item: item[0].stage)
    guard: List[str] = []
    for _, body in ordered:
        guard.extend(body.guard)
    last = ordered[-1][1]
    return HookBody(guard=tuple(guard), forward=last.forward, mutability=last.mutability)


def add_base(c: ContractBuilder) -> None:
    c.add_constructor_argument(POOL_MANAGER_ARG)
    c.add_parent(BASE_HOOK, [POOL_MANAGER_ARG.name])


def add_hook_permissions(c: ContractBuilder, options: HookOptions) -> HookPermissions:
    permissions = compute_hook_permissions(options)
    c.set_function_body(render_permissions_body(permissions), GET_HOOK_PERMISSIONS, "pure")
    c.add_override(BASE_HOOK, GET_HOOK_PERMISSIONS)
    return permissions


def add_combined_features(c: ContractBuilder, features: Sequence[HookFeature]) -> None:
    """Attach several features at once, composing functions they share"""
    for feature in features:
        feature.add_parent(c)
    for feature in features:
        feature.add_overrides(c)

    claims: Dict[FunctionSignature, List[Tuple[HookFeature, HookBody]]] = {}
    for feature in features:
        for function in feature.supplies:
            claims.setdefault(function, []).append((feature, feature.body_for(function)))

    for function, contributions in claims.items():
        if len(contributions) == 1:
            body = contributions[0][1]
        else:
            logger.debug(
                "Composing %s from %s", function.name,
                ", ".join(type(feature).__name__ for feature, _ in contributions),
            )
            body = compose_pipeline(contributions)
        c.set_function_body(body.lines(), function, body.mutability)


def build_hook(options: Options = None) -> ContractBuilder:
    """
    Build the contract IR for a hook.

    Args:
        options: HookOptions, a mapping of options, or None for defaults

    Returns:
        A new ContractBuilder ready for printing

    Raises:
        OptionsError: If the options are invalid
        HookforgeError: On any other composition failure; nothing is returned
    """
    opts = with_defaults(options)
    c = ContractBuilder(opts.name, license=opts.info.license, security_contact=opts.info.security_contact)

    add_base(c)
    add_hook_permissions(c, opts)

    features = active_features(opts)
    logger.debug("Building %s with features: %s", c.name, features or "none")
    if len(features) == 1:
        features[0].attach(c)
    elif features:
        add_combined_features(c, features)

    return c


def print_hook(options: Options = None) -> str:
    """Build and print a hook contract"""
    return print_contract(build_hook(options))


def generate(options: Options = None) -> GenerationResult:
    """
    Build and print a hook, returning the source with a composition summary.

    Raises:
        HookforgeError: If the build fails; no partial source is produced
    """
    opts = with_defaults(options)
    contract = build_hook(opts)
    source = print_contract(contract)
    return GenerationResult.from_builder(contract, source, compute_hook_permissions(opts))
