"""Two-dimensional Perlin noise normalised to the range 0..1."""

from __future__ import annotations

import math

# Classic 256-entry Perlin permutation, stored as hex and doubled so that
# lookups of index + 1 never need wrapping.
_PERMUTATION_HEX = (
    "97a0895b5a0f830dc95f6035c2e907e1"
    "8c24671e458e086325f0150a17be0694"
    "f778ea4b001ac53e5efcdbcb75230b20"
    "39b12158ed953857ae147d88aba844af"
    "4aa547868b301ba64d929ee7536fe57a"
    "3cd385e6dc695c29372ef528f4668f36"
    "41193fa101d85049d14c84bbd05912a9"
    "c8c4878274bc9f56a4646dc6adba0340"
    "34d9e2fa7c7b05ca2693767eff5255d4"
    "cfce3be32f103a11b6bd1c2adfb7aad5"
    "77f898022c9aa346dd99659ba72bac09"
    "811627fd13626c6e4f71e0e8b2b97068"
    "daf661e4fb22f2c1eed2900cbfb3a2f1"
    "513391ebf90eef6b31c0d61fb5c76a9d"
    "b854ccb07379322d7f0496fe8aeccd5d"
    "de72431d1848f38d80c34e42d73d9cb4"
)
_PERM = bytes.fromhex(_PERMUTATION_HEX) * 2
_CELL_LIMIT = 2**64

# Gradient directions selected by the low two bits of a hash.
_GRADIENTS = ((1.0, 1.0), (-1.0, 1.0), (1.0, -1.0), (-1.0, -1.0))


def _smoothstep5(t: float) -> float:
    return t * t * t * (t * (t * 6.0 - 15.0) + 10.0)


def _mix(a: float, b: float, t: float) -> float:
    return a + t * (b - a)


def _dot_gradient(hash_value: int, dx: float, dy: float) -> float:
    gx, gy = _GRADIENTS[hash_value & 0x3]
    return gx * dx + gy * dy


def _cell(floored: float) -> int:
    """Lattice index; negative coordinates collapse to cell 0."""
    if floored <= 0:
        return 0
    if floored >= _CELL_LIMIT:
        return 255
    return int(floored) & 255


def perlin_noise(x: float, y: float) -> float:
    """Return Perlin noise at (x, y), scaled into 0.0..1.0."""
    if not (math.isfinite(x) and math.isfinite(y)):
        return math.nan
    floor_x, floor_y = math.floor(x), math.floor(y)
    cx, cy = _cell(floor_x), _cell(floor_y)
    dx, dy = x - floor_x, y - floor_y

    left = _PERM[cx]
    right = _PERM[cx + 1]
    h00 = _PERM[left + cy]
    h01 = _PERM[left + cy + 1]
    h10 = _PERM[right + cy]
    h11 = _PERM[right + cy + 1]

    u = _smoothstep5(dx)
    v = _smoothstep5(dy)
    bottom = _mix(_dot_gradient(h00, dx, dy), _dot_gradient(h10, dx - 1.0, dy), u)
    top = _mix(
        _dot_gradient(h01, dx, dy - 1.0),
        _dot_gradient(h11, dx - 1.0, dy - 1.0),
        u,
    )
    return (_mix(bottom, top, v) + 1.0) * 0.5