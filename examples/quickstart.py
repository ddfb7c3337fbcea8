#!/usr/bin/env python3
"""Quick start example: recover a secret from threshold shares.

Demonstrates the core workflow:
  1. Decode a share payload (values in mixed bases)
  2. Keep the first k shares and pick a field
  3. Interpolate at x = 0
  4. Check that a different k-subset agrees
"""

from ssr.decoding import decode_share, parse_payload
from ssr.interpolation import SecretReconstructor
from ssr.primes import select_modulus
from ssr.reconstruct import calculate_secret, select_points

# --- 1. A payload: 4 shares of f(x) = x^2 + 3, any 3 reconstruct ---
payload = parse_payload({
    "keys": {"n": 4, "k": 3},
    "1": {"base": "10", "value": "4"},
    "2": {"base": "2", "value": "111"},   # 7
    "3": {"base": "10", "value": "12"},
    "6": {"base": "4", "value": "213"},   # 39
})

# --- 2. First k points and a modulus larger than every value ---
points = select_points(payload)
prime = select_modulus(p.y for p in points)
print(f"Using shares {[p.x for p in points]} over a {prime.bit_length()}-bit field")

# --- 3. Reconstruct ---
secret = calculate_secret(payload)
print(f"The secret (constant term) is: {secret}")

# --- 4. Any other 3 shares give the same secret ---
all_points = [decode_share(s) for s in payload.shares]
rec = SecretReconstructor(prime)
print(f"Shares {[p.x for p in all_points[1:]]} give: {rec.reconstruct(all_points[1:])}")
