#!/usr/bin/env python3
"""
Generate a Solidity hook contract from the command line.

Usage:
    python3 -m hookforge.cli --name MyHook --bumping-fee
    python3 -m hookforge.cli --whitelist --bumping-fee --output my_hook
    python3 -m hookforge.cli --whitelist --json
"""

import argparse
import json
import sys
from typing import List, Optional

from hookforge.core.assembly import generate
from hookforge.core.errors import HookforgeError
from hookforge.utils.files import save_contract


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hookforge",
        description="Generate a Uniswap v4 hook contract"
    )
    parser.add_argument("--name", default="MyHook", help="Contract name (default: MyHook)")
    parser.add_argument("--symbol", default="MTK", help="Token symbol (default: MTK)")
    parser.add_argument("--bumping-fee", action="store_true", help="Enable the fee-bumping hook")
    parser.add_argument("--whitelist", action="store_true", help="Enable the whitelist hook")
    parser.add_argument("--license", default="MIT", help="SPDX license identifier")
    parser.add_argument("--security-contact", default="", help="Security contact printed in the header")
    parser.add_argument("--output", nargs="?", const="", default=None, metavar="BASE_NAME",
                        help="Save to the output directory instead of printing")
    parser.add_argument("--output-dir", default=None, help="Directory for --output (default: HOOKFORGE_OUTPUT_DIR)")
    parser.add_argument("--json", action="store_true", help="Print the source with a composition summary as JSON")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    options = {
        "name": args.name,
        "symbol": args.symbol,
        "bumping_fee_hook": args.bumping_fee,
        "whitelist_hook": args.whitelist,
        "info": {"license": args.license, "security_contact": args.security_contact},
    }

    try:
        result = generate(options)
    except HookforgeError as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        return 1

    if args.output is not None:
        path = save_contract(result.source, args.output or result.contract, args.output_dir)
        print(f"✅ {result.contract} written to {path}")
    elif args.json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        print(result.source, end="")

    return 0


if __name__ == "__main__":
    sys.exit(main())
