"""
Common behaviour of optional hook features

A feature contributes four things to a contract: permission flags, a parent
contract (plus constructor code), override declarations, and bodies for the
functions it supplies. Subclasses only declare data and implement `_body`;
declarations are checked when the subclass is created so a malformed
feature fails at import time instead of producing a broken contract.
"""

from typing import Any, Optional, Tuple

from ..core.builder import ContractBuilder
from ..core.config import BASE_HOOK
from ..core.errors import FeatureDefinitionError
from ..core.functions import FUNCTIONS, GET_HOOK_PERMISSIONS
from ..core.models import FunctionSignature, HookBody, OverrideDeclaration, ParentReference
from ..core.permissions import HookPermissions

# Pipeline position when several features share one function.
# Lower stages run first.
ACCESS_STAGE = 0
PRICING_STAGE = 10


def forward_call(parent: ParentReference, function: FunctionSignature) -> str:
    """`return Parent.fn(args);` forwarding every argument unchanged"""
    return f"return {parent.name}.{function.name}({', '.join(function.arg_names)});"


class HookFeature:
    """Base class for optional hook capabilities"""

    toggle: str = ""
    parent: Optional[ParentReference] = None
    permission_flags: Tuple[str, ...] = ()
    supplies: Tuple[FunctionSignature, ...] = ()
    stage: int = PRICING_STAGE
    constructor_code: Tuple[str, ...] = ()

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        _check_definition(cls)

    # ------------------------------------------------------------------
    # Capability set
    # ------------------------------------------------------------------

    def is_active(self, options: Any) -> bool:
        return bool(getattr(options, self.toggle, False))

    def compute_permissions(self, options: Any) -> HookPermissions:
        """This feature's permission contribution; all-false when toggled off"""
        if not self.is_active(options):
            return HookPermissions.zero()
        return HookPermissions.enabled(*self.permission_flags)

    def required_overrides(self) -> Tuple[OverrideDeclaration, ...]:
        """Overrides this feature needs whenever it is active"""
        declarations = [
            OverrideDeclaration(BASE_HOOK, GET_HOOK_PERMISSIONS),
            OverrideDeclaration(self.parent, GET_HOOK_PERMISSIONS),
        ]
        for function in self.supplies:
            declarations.append(OverrideDeclaration(self.parent, function))
            declarations.append(OverrideDeclaration(BASE_HOOK, function))
        return tuple(declarations)

    def body_for(self, function: FunctionSignature) -> HookBody:
        """
        Generated body for one supplied function.

        Raises:
            FeatureDefinitionError: If this feature does not supply `function`
        """
        if function not in self.supplies:
            raise FeatureDefinitionError(
                f"{type(self).__name__} does not supply a body for {function.name}"
            )
        return self._body(function)

    def _body(self, function: FunctionSignature) -> HookBody:
        raise NotImplementedError

    # ------------------------------------------------------------------
    # Attachment
    # ------------------------------------------------------------------

    def add_parent(self, builder: ContractBuilder) -> None:
        builder.add_parent(self.parent)
        for code in self.constructor_code:
            builder.add_constructor_code(code)

    def add_overrides(self, builder: ContractBuilder) -> None:
        for declaration in self.required_overrides():
            builder.add_override(declaration.parent, declaration.function)

    def attach(self, builder: ContractBuilder) -> None:
        """Attach this feature on its own: parent, overrides and every body"""
        self.add_parent(builder)
        self.add_overrides(builder)
        for function in self.supplies:
            body = self.body_for(function)
            builder.set_function_body(body.lines(), function, body.mutability)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


def _check_definition(cls: type) -> None:
    name = cls.__name__
    if not cls.toggle:
        raise FeatureDefinitionError(f"{name} must name its options toggle")
    if not isinstance(cls.parent, ParentReference):
        raise FeatureDefinitionError(f"{name} must declare a parent contract")
    if not cls.supplies:
        raise FeatureDefinitionError(f"{name} does not supply any function")

    for function in cls.supplies:
        if not FUNCTIONS.contains(function):
            raise FeatureDefinitionError(f"{name} supplies {function!r}, which is not in the function catalog")
        if function is GET_HOOK_PERMISSIONS:
            raise FeatureDefinitionError(f"{name} cannot supply getHookPermissions")
    if len(set(cls.supplies)) != len(cls.supplies):
        raise FeatureDefinitionError(f"{name} lists a supplied function twice")

    try:
        HookPermissions.enabled(*cls.permission_flags)
    except ValueError as e:
        raise FeatureDefinitionError(f"{name}: {e}") from None
    if cls._body is HookFeature._body:
        raise FeatureDefinitionError(f"{name} does not implement _body")
