#!/usr/bin/env python3
"""primefield walk-through.

Usage:
    python -m primefield.demo.run_demo

The script:
1. Builds elements of F_13 and shows a rejected construction.
2. Runs addition, subtraction and multiplication.
3. Shows negation, including the zero boundary.
4. Raises to positive and negative powers in F_31.
5. Contrasts floor division with inverse division.
6. Reports a modulus mismatch.
7. Multiplies two elements of the secp256k1 base field.
"""

from __future__ import annotations

import logging
import sys

from primefield.config import DEMO_PRIME, DEMO_PRIME_LARGE, LOG_LEVEL, SECP256K1_P
from primefield.crypto.errors import FieldMismatchError, FieldValueError
from primefield.crypto.field import FieldElement

logger = logging.getLogger(__name__)


def banner(msg: str) -> None:
    print(f"\n{'='*60}")
    print(f"  {msg}")
    print(f"{'='*60}")


def check(label: str, got: FieldElement, expected: FieldElement) -> None:
    match = "✓" if got == expected else "✗"
    print(f"   {label} = {got}  (expected {expected}) {match}")


def main() -> None:
    p = DEMO_PRIME

    # ---- 1. Construct ----
    banner(f"1) Construct elements of F_{p}")
    a = FieldElement(3, p)
    print(f"   a = {a}")
    print(f"   zero = {FieldElement(0, p)}")
    for bad in (p, p + 1):
        try:
            FieldElement(bad, p)
        except FieldValueError as err:
            print(f"   FieldElement({bad}, {p}) rejected: {err}")

    # ---- 2. Ring operations ----
    banner("2) Add / subtract / multiply")
    check("2 + 10", FieldElement(2, p) + FieldElement(10, p), FieldElement(12, p))
    check("5 + 12", FieldElement(5, p) + FieldElement(12, p), FieldElement(4, p))
    check("10 - 2", FieldElement(10, p) - FieldElement(2, p), FieldElement(8, p))
    check("5 - 12", FieldElement(5, p) - FieldElement(12, p), FieldElement(6, p))
    check("11 * 2", FieldElement(11, p) * FieldElement(2, p), FieldElement(9, p))
    check("3 * 5 (scalar)", 3 * FieldElement(5, p), FieldElement(2, p))

    # ---- 3. Negation ----
    banner("3) Negation")
    print(f"   -{a} = {-a}")
    zero_neg = -FieldElement(0, p)
    print(f"   -0 = num {zero_neg.num}  (equals the modulus, outside [0, {p}))")

    # ---- 4. Powers ----
    banner("4) Powers")
    check("7^4", FieldElement(7, p).pow(4), FieldElement(9, p))
    q = DEMO_PRIME_LARGE
    check("17^-3", FieldElement(17, q).pow(-3), FieldElement(7, q))

    # ---- 5. Division ----
    banner("5) Floor division vs inverse division")
    x, y = FieldElement(3, q), FieldElement(24, q)
    print(f"   {x} / {y} = {x / y}  (floor division of residues)")
    print(f"   {x} * {y}^-1 = {x * y.inverse()}")

    # ---- 6. Mismatch ----
    banner("6) Modulus mismatch")
    try:
        FieldElement(1, p) + FieldElement(1, q)
    except FieldMismatchError as err:
        print(f"   {err}")

    # ---- 7. secp256k1 ----
    banner("7) secp256k1 base field")
    g = FieldElement(0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798, SECP256K1_P)
    cube = g.pow(3) + FieldElement(7, SECP256K1_P)
    print(f"   x^3 + 7 = {cube.num:x}")
    logger.info({"action": "demo", "status": "success"})


if __name__ == "__main__":
    logging.basicConfig(level=LOG_LEVEL, stream=sys.stdout)
    main()
