"""
keysplit — Basic Usage Example

Deals a 256-bit secret to five participants so that any three of them
can rebuild it, then shows that two cannot.
"""

import itertools
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

from keysplit import Dealer, InvalidParameterError, SharingConfig, recover_secret


def main():
    print("=" * 50)
    print("  keysplit — 3-of-5 Shamir sharing")
    print("=" * 50)

    config = SharingConfig(bit_strength=256, participants=5, threshold=3, identifier_step=1)
    dealer = Dealer(config)
    shares = dealer.deal()

    print(f"\nPrime:  {dealer.prime.bit_length()} bits")
    print(f"Secret: {dealer.secret:#x}")
    for share in shares:
        print(f"  participant {share.identifier}: {share.value:#x}")

    # Any three participants can pool their shares
    for combo in itertools.combinations(shares, 3):
        recovered = recover_secret(combo, dealer.prime)
        status = "OK" if recovered == dealer.secret else "MISMATCH"
        print(f"  [{status}] participants {[s.identifier for s in combo]}")

    # Two are refused by the dealer...
    print("\nAttempting reconstruction with two shares...")
    try:
        dealer.combine(shares[:2])
        print("  ERROR: Should have failed!")
    except InvalidParameterError as e:
        print(f"  Correctly rejected — {e}")

    # ...and interpolating them anyway yields an unrelated number
    guess = recover_secret(shares[:2], dealer.prime)
    print(f"  Raw interpolation of two shares: {guess:#x} (matches: {guess == dealer.secret})")


if __name__ == "__main__":
    main()
