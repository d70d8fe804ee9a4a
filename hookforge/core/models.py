"""
Data models for the contract under construction
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple


@dataclass(frozen=True, eq=False)
class FunctionSignature:
    """
    Catalog entry for one contract function.

    Equality and hashing are by identity: two signatures are the same
    function only when they are the same catalog object.
    """
    name: str
    kind: str
    args: Tuple[Tuple[str, str], ...]  # ((name, type), ...)
    returns: Tuple[str, ...]
    mutability: str = "nonpayable"

    @property
    def arg_names(self) -> List[str]:
        return [name for name, _ in self.args]

    def __repr__(self) -> str:
        return f"FunctionSignature({self.name})"


@dataclass(frozen=True)
class ParentReference:
    """Base or mixin contract to inherit from"""
    name: str
    path: Optional[str] = None


@dataclass
class Parent:
    """Parent as held by the contract, with forwarded constructor arguments"""
    contract: ParentReference
    params: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class ContractArgument:
    """Constructor argument"""
    name: str
    type: str


@dataclass(frozen=True)
class OverrideDeclaration:
    """States that `function` overrides the implementation inherited from `parent`"""
    parent: ParentReference
    function: FunctionSignature


@dataclass
class FunctionBody:
    """Generated implementation for one catalog function"""
    function: FunctionSignature
    lines: List[str]
    mutability: Optional[str] = None


@dataclass(frozen=True)
class HookBody:
    """
    Body fragment produced by a feature for one function.

    `guard` statements must run before anything else; `forward` holds the
    statements that produce the return value. Keeping them apart lets
    several features share one function as a pipeline.
    """
    guard: Tuple[str, ...] = ()
    forward: Tuple[str, ...] = ()
    mutability: Optional[str] = None

    def lines(self) -> List[str]:
        return list(self.guard) + list(self.forward)
