"""
keysplit — command line demo
Run one sharing session end to end and print every step.

    1. Prime p: we work in Z/pZ
    2. Secret S
    3. Random polynomial of degree k-1
    4. Shares (x_i, y_i) for each participant i in 1..N
    5. Reconstruct S from the first k participants

Defaults come from SharingConfig (and KEYSPLIT_* environment variables);
flags override them.
"""

import argparse
import logging
import random
import secrets
import sys

from keysplit.config import SharingConfig
from keysplit.dealer import assign_identifiers
from keysplit.errors import InvalidParameterError, SharingError
from keysplit.field import generate_prime, generate_secret, is_prime
from keysplit.lagrange import lagrange_coefficients, reconstruct
from keysplit.polynomial import compute_shares, format_polynomial, split

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="keysplit",
        description="Split a secret with Shamir's scheme and reconstruct it.",
    )
    parser.add_argument("--bits", type=int, help="bit strength of the generated prime")
    parser.add_argument("--prime", type=int, help="use this prime instead of generating one")
    parser.add_argument("--participants", "-n", type=int, help="number of shares to deal (N)")
    parser.add_argument("--threshold", "-k", type=int, help="shares needed to reconstruct (K)")
    parser.add_argument("--step", type=int, help="identifier of participant i is step * i")
    parser.add_argument("--secret", type=int, help="secret to share (random if omitted)")
    parser.add_argument(
        "--reduce-shares", action="store_true", default=None,
        help="reduce share values modulo the prime",
    )
    parser.add_argument("--seed", type=int, help="seed a reproducible (insecure) random source")
    parser.add_argument("--debug", action="store_true", help="print the polynomial and debug logs")
    return parser


def config_from_args(args: argparse.Namespace, environ: dict = None) -> SharingConfig:
    """Environment config with command-line overrides applied, validated."""
    config = SharingConfig.from_env(environ)
    overrides = {
        "bit_strength": args.bits,
        "participants": args.participants,
        "threshold": args.threshold,
        "identifier_step": args.step,
        "reduce_shares": args.reduce_shares,
    }
    for name, value in overrides.items():
        if value is not None:
            setattr(config, name, value)
    config.validate()
    return config


def run(
    config: SharingConfig,
    rng: random.Random,
    secret: int = None,
    prime: int = None,
    show_polynomial: bool = False,
) -> bool:
    """Run one session, printing each step. Returns True if S was recovered."""
    if prime is None:
        prime = generate_prime(config.bit_strength, rng)
    elif not is_prime(prime):
        raise InvalidParameterError(f"Modulus {prime} is not prime")
    print(f"Random prime 'p' = {prime}")

    if secret is None:
        secret = generate_secret(prime, rng)
    print(f"Secret number 'S' = {secret}")

    coefficients = split(secret, prime, config.threshold, rng)
    if show_polynomial:
        print(f"Polynomial {format_polynomial(coefficients)}")

    identifiers = assign_identifiers(config.participants, config.identifier_step, prime)
    shares = compute_shares(coefficients, identifiers, prime, reduce=config.reduce_shares)
    del coefficients

    pairs = " , ".join(
        f"( x{i}={x} ; y{i}={y} )" for i, (x, y) in enumerate(zip(identifiers, shares), 1)
    )
    print(f"Login and share of each participant : {pairs}")

    k = config.threshold
    logger.debug("Reconstructing from participants 1..%d", k)
    alphas = lagrange_coefficients(identifiers[:k], prime)
    recovered = reconstruct(alphas, shares[:k], prime)
    print(f"Reconstruction of the secret : S = {recovered}")

    return recovered == secret


def main(argv: list[str] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = config_from_args(args)
        rng = random.Random(args.seed) if args.seed is not None else secrets.SystemRandom()
        ok = run(
            config, rng,
            secret=args.secret,
            prime=args.prime,
            show_polynomial=args.debug,
        )
    except SharingError as e:
        print(f"keysplit: error: {e}", file=sys.stderr)
        return 2

    if not ok:
        print("keysplit: reconstructed value does not match the secret", file=sys.stderr)
        return 1
    return 0
