"""
Exception types raised while assembling a hook contract
"""


class HookforgeError(Exception):
    """Base class for every build failure"""


class CatalogError(HookforgeError, KeyError):
    """Unknown function name, or a signature that is not a catalog entry"""

    def __str__(self) -> str:
        # KeyError quotes its message; keep it readable
        return str(self.args[0]) if self.args else ""


class FeatureDefinitionError(HookforgeError, TypeError):
    """A feature module is declared inconsistently"""


class OptionsError(HookforgeError, ValueError):
    """Invalid option value or missing structural prerequisite"""
