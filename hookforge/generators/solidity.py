"""
Solidity source generation from a ContractBuilder
"""

import re
from typing import List, Set

from ..core.builder import ContractBuilder
from ..core.config import SOLIDITY_PRAGMA, TYPE_IMPORTS
from ..core.models import FunctionSignature

INDENT = "    "

_TYPE_ROOT = re.compile(r"[A-Za-z_$][\w$]*")


def indent_lines(lines: List[str], level: int = 1) -> List[str]:
    """Indent non-empty lines by `level` steps"""
    prefix = INDENT * level
    return [f"{prefix}{line}" if line else "" for line in lines]


def _type_root(type_expr: str) -> str:
    match = _TYPE_ROOT.match(type_expr)
    return match.group(0) if match else ""


def collect_imports(contract: ContractBuilder) -> List[str]:
    """Import lines: referenced v4 types (sorted), then parents in inheritance order"""
    used: Set[str] = set()
    for argument in contract.constructor_args:
        used.add(_type_root(argument.type))
    for function in contract.functions:
        for _, arg_type in function.args:
            used.add(_type_root(arg_type))
        for return_type in function.returns:
            used.add(_type_root(return_type))

    lines = [
        f'import {{{name}}} from "{TYPE_IMPORTS[name]}";'
        for name in sorted(used) if name in TYPE_IMPORTS
    ]
    for parent in contract.parents:
        if parent.contract.path:
            lines.append(f'import {{{parent.contract.name}}} from "{parent.contract.path}";')
    return lines


def print_constructor(contract: ContractBuilder) -> List[str]:
    initializers = [
        f"{parent.contract.name}({', '.join(parent.params)})"
        for parent in contract.parents if parent.params
    ]
    if not (contract.constructor_args or initializers or contract.constructor_code):
        return []

    args = ", ".join(f"{arg.type} {arg.name}" for arg in contract.constructor_args)
    lines = [f"constructor({args})"]
    lines.extend(indent_lines(initializers))
    if contract.constructor_code:
        lines.append("{")
        lines.extend(indent_lines(contract.constructor_code))
        lines.append("}")
    else:
        lines.append("{}")
    return lines


def print_function(contract: ContractBuilder, function: FunctionSignature) -> List[str]:
    """
    Render one function with its modifiers and body.

    A function with override declarations but no body defers to `super`.
    """
    args = ", ".join(f"{arg_type} {name}" for name, arg_type in function.args)
    modifiers = [function.kind]

    mutability = contract.mutability_of(function)
    if mutability != "nonpayable":
        modifiers.append(mutability)

    parents = contract.overrides_for(function)
    if len(parents) == 1:
        modifiers.append("override")
    elif parents:
        modifiers.append(f"override({', '.join(parent.name for parent in parents)})")

    if function.returns:
        modifiers.append(f"returns ({', '.join(function.returns)})")

    body = contract.get_body(function)
    if body is not None:
        statements = body.lines
    else:
        statements = [f"return super.{function.name}({', '.join(function.arg_names)});"]

    lines = [f"function {function.name}({args})"]
    lines.extend(indent_lines(modifiers))
    lines.append("{")
    lines.extend(indent_lines(statements))
    lines.append("}")
    return lines


def print_contract(contract: ContractBuilder) -> str:
    """
    Generate Solidity source for a contract.

    Args:
        contract: Finished ContractBuilder

    Returns:
        Solidity source; identical builders always print identical text
    """
    lines = [
        f"// SPDX-License-Identifier: {contract.license}",
        f"pragma solidity {SOLIDITY_PRAGMA};",
        "",
    ]

    imports = collect_imports(contract)
    if imports:
        lines.extend(imports)
        lines.append("")

    if contract.security_contact:
        lines.append(f"/// @custom:security-contact {contract.security_contact}")

    parent_names = [parent.contract.name for parent in contract.parents]
    inheritance = f" is {', '.join(parent_names)}" if parent_names else ""
    lines.append(f"contract {contract.name}{inheritance} {{")

    blocks = []
    constructor = print_constructor(contract)
    if constructor:
        blocks.append(constructor)
    for function in contract.functions:
        blocks.append(print_function(contract, function))

    for i, block in enumerate(blocks):
        if i:
            lines.append("")
        lines.extend(indent_lines(block))

    lines.append("}")
    return "\n".join(lines) + "\n"
