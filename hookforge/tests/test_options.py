"""
Tests for option normalization
"""

import pytest
from hookforge.core.errors import OptionsError
from hookforge.core.options import HookOptions, Info, is_access_control_required, with_defaults
from hookforge.utils.identifiers import to_identifier


def test_defaults():
    opts = with_defaults()
    assert opts.name == "MyHook"
    assert opts.symbol == "MTK"
    assert opts.premint == "0"
    assert opts.permit is True
    assert opts.votes is False
    assert opts.access is False
    assert opts.upgradeable is False
    assert opts.info == Info(license="MIT", security_contact="")
    assert opts.whitelist_hook is False
    assert opts.bumping_fee_hook is False


def test_mapping_with_form_keys():
    opts = with_defaults({"bumpingFeeHook": True, "whitelistHook": True, "name": None})
    assert opts.bumping_fee_hook and opts.whitelist_hook
    assert opts.name == "MyHook"


def test_empty_strings_fall_back_to_defaults():
    opts = with_defaults({"premint": "", "symbol": "", "info": {"license": ""}})
    assert opts.premint == "0"
    assert opts.symbol == "MTK"
    assert opts.info.license == "MIT"


def test_does_not_mutate_input():
    original = HookOptions(name="my hook")
    normalized = with_defaults(original)
    assert original.name == "my hook"
    assert normalized.name == "MyHook"
    assert normalized is not original
    assert normalized.info is not original.info


def test_unknown_option_rejected():
    with pytest.raises(OptionsError, match="colour"):
        with_defaults({"colour": "blue"})
    with pytest.raises(OptionsError):
        with_defaults({"info": {"website": "x"}})


@pytest.mark.parametrize("options", [
    {"access": "admin"},
    {"upgradeable": "beacon"},
    {"votes": "sometimes"},
    {"whitelist_hook": 1},
    {"name": "???"},
])
def test_invalid_values_rejected(options):
    with pytest.raises(OptionsError):
        with_defaults(options)


def test_votes_require_permit():
    with pytest.raises(OptionsError, match="ERC20Permit"):
        with_defaults({"votes": "timestamp", "permit": False})
    assert with_defaults({"votes": "timestamp"}).votes == "timestamp"


def test_is_access_control_required():
    assert not is_access_control_required({})
    assert is_access_control_required({"mintable": True})
    assert is_access_control_required(HookOptions(pausable=True))
    assert is_access_control_required({"upgradeable": "uups"})
    assert not is_access_control_required({"upgradeable": "transparent"})


def test_to_dict_round_trips_through_with_defaults():
    opts = with_defaults({"bumping_fee_hook": True})
    assert with_defaults(opts.to_dict()) == opts


@pytest.mark.parametrize("text,expected", [
    ("MyHook", "MyHook"),
    ("my hook", "MyHook"),
    ("fee-bumping hook 2", "FeeBumpingHook2"),
    ("42 Crème Hook", "CremeHook"),
    ("$pecial_name", "$pecial_name"),
])
def test_to_identifier(text, expected):
    assert to_identifier(text, capitalize=True) == expected


def test_to_identifier_empty():
    with pytest.raises(ValueError):
        to_identifier("  !!  ")
