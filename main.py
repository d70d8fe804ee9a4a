#!/usr/bin/env python3
"""
Hookforge examples - Solidity hook generation
"""

from hookforge import generate


def example(title: str, **options):
    print("\n" + "="*70)
    print(title)
    print("="*70)

    result = generate(options)

    enabled = [name for name, value in result.permissions.items() if value]
    print(f"\nParents:     {', '.join(result.parents)}")
    print(f"Permissions: {', '.join(enabled) or 'none'}")
    print(f"\nSolidity source:\n{result.source}")

    return result


def main():
    """Run all examples"""
    print("\n" + "╔" + "="*68 + "╗")
    print("║" + " "*17 + "HOOKFORGE - Uniswap v4 hook generator" + " "*14 + "║")
    print("╚" + "="*68 + "╝")

    results = []

    try:
        results.append(example("Example 1: Base hook only"))
        results.append(example("Example 2: Fee bumping", name="FeeHook", bumping_fee_hook=True))
        results.append(example("Example 3: Whitelist", name="GatedHook", whitelist_hook=True))
        results.append(example("Example 4: Whitelist + fee bumping", name="GatedFeeHook",
                               bumping_fee_hook=True, whitelist_hook=True))

        print("\n" + "="*70)
        print(f"✓ Generated {len(results)} contracts")
        print("="*70)

        return 0

    except Exception as e:
        print(f"\n✗ Error: {e}")
        import traceback
        traceback.print_exc()
        return 1


if __name__ == "__main__":
    exit(main())
