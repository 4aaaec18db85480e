"""Compact display of resource amounts."""

from __future__ import annotations

_SCALES = (
    (1_000_000_000, 1_000_000_000, "B"),
    (1_000_000, 1_000_000, "M"),
    (10_000, 1_000, "K"),
)


def format_number(num: int) -> str:
    """Format a non-negative amount: plain below 10,000, else one decimal and a suffix."""
    if num < 0:
        raise ValueError(f"amount must be non-negative, got {num}")
    value = float(num)
    for threshold, divisor, suffix in _SCALES:
        if value >= threshold:
            return f"{value / divisor:.1f}{suffix}"
    return f"{value:.0f}"