"""
Data models for HOOKFORGE API
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List

from hookforge.core.builder import ContractBuilder
from hookforge.core.permissions import HookPermissions


@dataclass
class GenerationResult:
    """Generated contract plus a summary of how it was composed"""
    contract: str
    source: str
    parents: List[str]
    permissions: Dict[str, bool]
    functions: List[str] = field(default_factory=list)

    @classmethod
    def from_builder(cls, builder: ContractBuilder, source: str,
                     permissions: HookPermissions) -> "GenerationResult":
        return cls(
            contract=builder.name,
            source=source,
            parents=[parent.contract.name for parent in builder.parents],
            permissions=permissions.to_dict(),
            functions=[function.name for function in builder.functions],
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "contract": self.contract,
            "source": self.source,
            "parents": self.parents,
            "permissions": self.permissions,
            "functions": self.functions
        }
