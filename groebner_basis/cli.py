#!/usr/bin/env python3
"""
Groebner Basis Command Line
===========================

Builds a polynomial system, computes its basis and prints it.

Usage:
    python -m groebner_basis                                # 3 random polys, doubles
    python -m groebner_basis --coeff modp --modulus 13 --exponents packed
    python -m groebner_basis --system symmetric --order lex --coeff modp
    python -m groebner_basis --system cyclic --n 4 --json out.json

License: MIT
"""

import argparse
import logging
import sys

from groebner_basis.basis import GroebnerConfig, GroebnerEngine
from groebner_basis.errors import GroebnerError
from groebner_basis.exponents import EXPONENT_KINDS
from groebner_basis.families import BUILDERS, build_system
from groebner_basis.fields import COEFFICIENT_KINDS, is_prime
from groebner_basis.orders import TermOrder

logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(
        prog="groebner_basis", description="Naive Groebner basis computation")
    parser.add_argument("--system", choices=BUILDERS, default="random",
                        help="generator family (default: random)")
    parser.add_argument("--n", type=int, default=3,
                        help="cyclic size, or number of random polynomials")
    parser.add_argument("--num-polys", type=int, default=None,
                        help="number of random polynomials (overrides --n)")
    parser.add_argument("--num-terms", type=int, default=3,
                        help="terms per random polynomial")
    parser.add_argument("--coeff", choices=COEFFICIENT_KINDS, default="double")
    parser.add_argument("--exponents", choices=EXPONENT_KINDS, default="vec")
    parser.add_argument("--order", choices=[o.value for o in TermOrder], default="lex")
    parser.add_argument("--modulus", type=int, default=13)
    parser.add_argument("--max-passes", type=int, default=100)
    parser.add_argument("--max-basis-size", type=int, default=1000)
    parser.add_argument("--json", metavar="PATH", help="save the result as JSON")
    parser.add_argument("--verbose", action="store_true")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    if args.coeff == "modp" and not is_prime(args.modulus):
        logger.warning("modulus %d is not prime; some divisions will fail", args.modulus)

    n = args.num_polys if args.num_polys is not None else args.n
    config = GroebnerConfig(max_passes=args.max_passes,
                            max_basis_size=args.max_basis_size,
                            verbose=args.verbose)
    try:
        system = build_system(args.system, n, args.coeff, args.exponents,
                              args.order, args.modulus, args.num_terms)
        print("Input polynomials ({}, order={}):".format(system.name, args.order))
        for i, text in enumerate(system.formatted()):
            print("  F{}: {}".format(i, text))

        result = GroebnerEngine(config).run(system)
    except GroebnerError as e:
        print("ERROR: {}".format(e), file=sys.stderr)
        return 1

    print("Groebner basis ({} elements, {} passes):".format(
        len(result.basis), result.passes))
    for i, text in enumerate(result.basis):
        print("  G{}: {}".format(i, text))
    if args.json:
        result.save(args.json)
        print("Saved: {}".format(args.json))
    return 0


if __name__ == "__main__":
    sys.exit(main())
