"""Global configuration for primefield."""

import os

# ---------- Demo moduli ----------
# Small primes that keep hand-checked results readable.
DEMO_PRIME = 13
DEMO_PRIME_LARGE = 31

# ---------- Curve base field ----------
# secp256k1 base field prime  p = 2^256 - 2^32 - 977
SECP256K1_P = 2**256 - 2**32 - 977

# ---------- Logging ----------
# Env var PRIMEFIELD_LOG_LEVEL overrides the level used by entry points.
LOG_LEVEL = os.environ.get("PRIMEFIELD_LOG_LEVEL", "INFO").upper()
