"""
Hook options and their normalization
"""

from dataclasses import dataclass, field, fields, replace
from typing import Any, Dict, Mapping, Optional, Union

from .config import ACCESS_MODES, CLOCK_MODES, DEFAULT_LICENSE, UPGRADEABLE_MODES
from .errors import OptionsError
from ..utils.identifiers import to_identifier


@dataclass
class Info:
    """Informational metadata printed in the contract header"""
    license: str = DEFAULT_LICENSE
    security_contact: str = ""


@dataclass
class HookOptions:
    """Options describing one hook contract"""
    name: str = "MyHook"
    symbol: str = "MTK"
    burnable: bool = False
    pausable: bool = False
    premint: str = "0"
    mintable: bool = False
    permit: bool = True
    votes: Union[bool, str] = False  # True, "blocknumber" or "timestamp"
    flashmint: bool = False
    access: Union[bool, str] = False
    upgradeable: Union[bool, str] = False
    info: Info = field(default_factory=Info)
    whitelist_hook: bool = False
    bumping_fee_hook: bool = False

    def to_dict(self) -> Dict[str, Any]:
        data = {f.name: getattr(self, f.name) for f in fields(self)}
        data["info"] = {
            "license": self.info.license,
            "security_contact": self.info.security_contact,
        }
        return data


DEFAULTS = HookOptions()

# camelCase keys sent by the web form
_ALIASES = {
    "whitelistHook": "whitelist_hook",
    "bumpingFeeHook": "bumping_fee_hook",
    "securityContact": "security_contact",
}

_BOOLEAN_OPTIONS = (
    "burnable", "pausable", "mintable", "permit", "flashmint",
    "whitelist_hook", "bumping_fee_hook",
)


def _canonical_keys(data: Mapping[str, Any]) -> Dict[str, Any]:
    return {_ALIASES.get(key, key): value for key, value in data.items()}


def _info_from(value: Any) -> Info:
    if value is None:
        return Info()
    if isinstance(value, Info):
        return replace(value)
    if not isinstance(value, Mapping):
        raise OptionsError(f"info must be a mapping, got {type(value).__name__}")

    data = _canonical_keys(value)
    unknown = set(data) - {"license", "security_contact"}
    if unknown:
        raise OptionsError(f"Unknown info option(s): {', '.join(sorted(unknown))}")
    return Info(
        license=data.get("license") or DEFAULT_LICENSE,
        security_contact=data.get("security_contact") or "",
    )


def _from_mapping(data: Mapping[str, Any]) -> HookOptions:
    data = _canonical_keys(data)
    known = {f.name for f in fields(HookOptions)}
    unknown = set(data) - known
    if unknown:
        raise OptionsError(f"Unknown option(s): {', '.join(sorted(unknown))}")

    values = {key: value for key, value in data.items() if value is not None and key != "info"}
    return HookOptions(info=_info_from(data.get("info")), **values)


def with_defaults(options: Optional[Union[HookOptions, Mapping[str, Any]]] = None) -> HookOptions:
    """
    Fill unspecified options with defaults and validate the result.

    Args:
        options: HookOptions, a mapping of option names (snake_case or the
                 form's camelCase), or None for all defaults

    Returns:
        A new, fully populated HookOptions

    Raises:
        OptionsError: On unknown keys, invalid values, or a missing prerequisite
    """
    if options is None:
        opts = HookOptions()
    elif isinstance(options, HookOptions):
        opts = replace(options, info=_info_from(options.info))
    elif isinstance(options, Mapping):
        opts = _from_mapping(options)
    else:
        raise OptionsError(f"Unsupported options type: {type(options).__name__}")

    try:
        opts.name = to_identifier(opts.name or DEFAULTS.name, capitalize=True)
    except ValueError as e:
        raise OptionsError(f"Invalid contract name {opts.name!r}: {e}") from None
    opts.symbol = opts.symbol or DEFAULTS.symbol
    opts.premint = opts.premint or DEFAULTS.premint

    _validate(opts)
    return opts


def _validate(opts: HookOptions) -> None:
    for name in _BOOLEAN_OPTIONS:
        if not isinstance(getattr(opts, name), bool):
            raise OptionsError(f"Option {name!r} must be a boolean")

    if opts.access not in ACCESS_MODES:
        raise OptionsError(f"Unknown access control mode: {opts.access!r}")
    if opts.upgradeable not in UPGRADEABLE_MODES:
        raise OptionsError(f"Unknown upgradeability mode: {opts.upgradeable!r}")
    if not isinstance(opts.votes, bool) and opts.votes not in CLOCK_MODES:
        raise OptionsError(f"Unknown clock mode for votes: {opts.votes!r}")

    if opts.votes and not opts.permit:
        raise OptionsError("Missing ERC20Permit requirement for ERC20Votes")


def is_access_control_required(options: Union[HookOptions, Mapping[str, Any]]) -> bool:
    """Whether the options need an access-control mode to be chosen"""
    if isinstance(options, Mapping):
        options = _from_mapping(options)
    return bool(options.mintable or options.pausable or options.upgradeable == "uups")
