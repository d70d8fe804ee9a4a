"""
Solidity identifier normalization
"""

import re
import unicodedata

_LEADING_INVALID = re.compile(r"^[^a-zA-Z$_]+")
_INNER_INVALID = re.compile(r"[^\w$]+(.?)")


def to_identifier(text: str, capitalize: bool = False) -> str:
    """
    Turn free text (e.g. a contract name typed into a form) into a valid
    Solidity identifier. Accents are stripped, leading characters that
    cannot start an identifier are dropped, and each run of invalid
    characters is removed with the following character upper-cased.

    Raises:
        ValueError: If nothing usable remains
    """
    decomposed = unicodedata.normalize("NFD", text)
    result = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    result = result.encode("ascii", "ignore").decode("ascii")
    result = _LEADING_INVALID.sub("", result)
    if capitalize and result:
        result = result[0].upper() + result[1:]
    result = _INNER_INVALID.sub(lambda m: m.group(1).upper(), result)

    if not result:
        raise ValueError("Identifier is empty or does not have valid characters")
    return result
