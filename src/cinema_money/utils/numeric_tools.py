from __future__ import annotations

from decimal import Decimal

# Number of sub-units (cents) in one whole unit (euro)
SUBUNITS_PER_UNIT = 100

# Largest sub-unit count a single amount may carry
MAX_FRACTION = SUBUNITS_PER_UNIT - 1


def is_strict_int(value: object) -> bool:
    """Return True if $value is an `int`, excluding `bool`."""
    return isinstance(value, int) and not isinstance(value, bool)


def to_subunits(whole: int, fraction: int) -> int:
    """Combine whole units and sub-units into a single sub-unit total.

    Args:
        whole: Whole-unit count.
        fraction: Sub-unit count.

    Returns:
        Total count of sub-units.

    Examples:
        >>> to_subunits(5, 50)
        550
        >>> to_subunits(0, 7)
        7
    """
    return whole * SUBUNITS_PER_UNIT + fraction


def split_subunits(total: int) -> tuple[int, int]:
    """Split a sub-unit total into `(whole, fraction)`.

    Uses truncating division, so for non-negative $total the fraction always
    lands in [0, MAX_FRACTION].

    Args:
        total: Non-negative count of sub-units.

    Returns:
        Tuple of whole units and remaining sub-units.

    Raises:
        ValueError: If $total is negative.

    Examples:
        >>> split_subunits(550)
        (5, 50)
        >>> split_subunits(99)
        (0, 99)
    """
    if total < 0:
        raise ValueError(f"$total must be >= 0, but provided value is: {total}")
    return divmod(total, SUBUNITS_PER_UNIT)


def subunits_as_decimal(total: int) -> Decimal:
    """Convert a sub-unit total into a two-place `Decimal` of whole units."""
    return Decimal(total).scaleb(-2)
