"""
Mutable representation of a contract under construction
"""

import logging
from typing import Dict, Iterable, List, Optional

from .config import DEFAULT_LICENSE, MUTABILITIES
from .errors import CatalogError
from .functions import FUNCTIONS, FunctionCatalog
from .models import (
    ContractArgument,
    FunctionBody,
    FunctionSignature,
    OverrideDeclaration,
    Parent,
    ParentReference,
)

logger = logging.getLogger(__name__)


class ContractBuilder:
    """
    Contract IR: parents, constructor, override declarations and bodies.

    Function tables are keyed by catalog signature objects. A fresh builder
    is created for every build and is not reused afterwards.
    """

    def __init__(self,
                 name: str,
                 license: str = DEFAULT_LICENSE,
                 security_contact: str = "",
                 catalog: FunctionCatalog = FUNCTIONS):
        self.name = name
        self.license = license
        self.security_contact = security_contact
        self.catalog = catalog

        self.parents: List[Parent] = []
        self.constructor_args: List[ContractArgument] = []
        self.constructor_code: List[str] = []
        self.overrides: List[OverrideDeclaration] = []
        self._bodies: Dict[FunctionSignature, FunctionBody] = {}
        # first-registration order of every function touched
        self._functions: Dict[FunctionSignature, None] = {}

    # ------------------------------------------------------------------
    # Parents and constructor
    # ------------------------------------------------------------------

    def add_parent(self, contract: ParentReference, params: Iterable[str] = ()) -> bool:
        """
        Inherit from `contract`, forwarding `params` to its constructor.

        Returns:
            False if the parent was already present (the first entry is kept)
        """
        if self.has_parent(contract.name):
            return False
        self.parents.append(Parent(contract=contract, params=list(params)))
        return True

    def has_parent(self, name: str) -> bool:
        return any(parent.contract.name == name for parent in self.parents)

    def add_constructor_argument(self, argument: ContractArgument) -> None:
        if argument not in self.constructor_args:
            self.constructor_args.append(argument)

    def add_constructor_code(self, code: str) -> None:
        self.constructor_code.append(code)

    # ------------------------------------------------------------------
    # Functions
    # ------------------------------------------------------------------

    def _register(self, function: FunctionSignature) -> None:
        if not self.catalog.contains(function):
            raise CatalogError(f"{function!r} is not an entry of the function catalog")
        self._functions.setdefault(function, None)

    def add_override(self, parent: ParentReference, function: FunctionSignature) -> None:
        """Record that `function` overrides the implementation inherited from `parent`"""
        self._register(function)
        self.overrides.append(OverrideDeclaration(parent=parent, function=function))

    def set_function_body(self,
                          lines: Iterable[str],
                          function: FunctionSignature,
                          mutability: Optional[str] = None) -> None:
        """
        Set the body of `function`, replacing any previous one.

        Raises:
            CatalogError: If `function` is not a catalog entry
            ValueError: If `mutability` is not a Solidity mutability
        """
        self._register(function)
        if mutability is not None and mutability not in MUTABILITIES:
            raise ValueError(f"Invalid mutability {mutability!r} for {function.name}")
        if function in self._bodies:
            logger.debug("Replacing body of %s in %s", function.name, self.name)
        self._bodies[function] = FunctionBody(function=function, lines=list(lines), mutability=mutability)

    def get_body(self, function: FunctionSignature) -> Optional[FunctionBody]:
        return self._bodies.get(function)

    @property
    def functions(self) -> List[FunctionSignature]:
        """Every function with an override or a body, in first-registration order"""
        return list(self._functions)

    def overrides_for(self, function: FunctionSignature) -> List[ParentReference]:
        """Distinct parents `function` overrides, in first-declared order"""
        parents: List[ParentReference] = []
        for declaration in self.overrides:
            if declaration.function is function and declaration.parent not in parents:
                parents.append(declaration.parent)
        return parents

    def mutability_of(self, function: FunctionSignature) -> str:
        body = self._bodies.get(function)
        if body is not None and body.mutability is not None:
            return body.mutability
        return function.mutability
