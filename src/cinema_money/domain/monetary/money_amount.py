from __future__ import annotations

import logging
import re
from decimal import Decimal

from cinema_money.utils.numeric_tools import MAX_FRACTION, is_strict_int, split_subunits, subunits_as_decimal, to_subunits

logger: logging.Logger = logging.getLogger(__name__)

# Max number of significant digits accepted for the whole-unit part when parsing
MAX_WHOLE_DIGITS = 7

# Decimal-comma format: optional leading zeros, up to 7 significant digits, optional ",", ",d" or ",dd"
_AMOUNT_PATTERN = re.compile(rf"0*?([1-9][0-9]{{0,{MAX_WHOLE_DIGITS - 1}}})?(,([0-9][0-9]?)?)?")


class ContractViolationError(ValueError, TypeError):
    """Raised when a caller breaks a precondition of `MoneyAmount`.

    This signals a programming error (bad argument supplied by code), not bad user input.
    """


class MoneyAmountFormatError(ValueError):
    """Raised when text cannot be parsed into a `MoneyAmount`."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"Cannot parse '{text}' as MoneyAmount; expected format like '12,50' (up to {MAX_WHOLE_DIGITS} digits, optional ',' with 1-2 digits)")


class MoneyAmount:
    """Immutable amount of money made of whole units (euros) and sub-units (cents).

    Arithmetic works on magnitudes only: results of `+`, `-` and `*` are never negative.
    Subtracting a bigger amount from a smaller one yields the size of the gap
    (`5,00 - 8,00 == 3,00`) and multiplying by a negative factor ignores its sign.
    Callers that need signed differences must track the sign themselves.

    Hashing uses `whole + fraction`, so many different amounts share a hash
    (e.g. `5,03`, `3,05` and `4,04`). Only "equal amounts have equal hashes" is guaranteed.

    Attributes:
        whole (int): Whole-unit count, >= 0 for all amounts built through public methods.
        fraction (int): Sub-unit count in [0, 99].
    """

    __slots__ = ("_whole", "_fraction")

    def __init__(self, whole: int, fraction: int) -> None:
        """Initialize a MoneyAmount. Prefer `MoneyAmount.create` in calling code.

        Args:
            whole: Whole-unit count.
            fraction: Sub-unit count in [0, 99].

        Raises:
            ContractViolationError: If $whole or $fraction is not an int, or $fraction is outside [0, 99].
        """
        # Raise: both components must be plain ints
        if not is_strict_int(whole):
            raise ContractViolationError(f"Cannot call `MoneyAmount.create` because $whole is not int (got type '{type(whole).__name__}')")
        if not is_strict_int(fraction):
            raise ContractViolationError(f"Cannot call `MoneyAmount.create` because $fraction is not int (got type '{type(fraction).__name__}')")

        # Raise: $fraction must fit into one whole unit
        if fraction > MAX_FRACTION:
            raise ContractViolationError(f"Cannot call `MoneyAmount.create` because $fraction ({fraction}) > {MAX_FRACTION}")
        if fraction < 0:
            raise ContractViolationError(f"Cannot call `MoneyAmount.create` because $fraction ({fraction}) < 0")

        self._whole = whole
        self._fraction = fraction

    # region Factories

    @classmethod
    def create(cls, whole: int, fraction: int) -> MoneyAmount:
        """Create an amount from whole units and sub-units.

        Args:
            whole: Whole-unit count.
            fraction: Sub-unit count in [0, 99].

        Returns:
            MoneyAmount: New amount.

        Raises:
            ContractViolationError: If $fraction is outside [0, 99] or an argument is not int.
        """
        return cls(whole, fraction)

    @classmethod
    def zero(cls) -> MoneyAmount:
        """Return the amount `00,00`."""
        return cls(0, 0)

    @classmethod
    def from_subunits(cls, total: int) -> MoneyAmount:
        """Create an amount from a total count of sub-units (e.g. 550 cents -> `05,50`).

        Args:
            total: Non-negative count of sub-units.

        Returns:
            MoneyAmount: New amount.

        Raises:
            ContractViolationError: If $total is not int or is negative.
        """
        if not is_strict_int(total):
            raise ContractViolationError(f"Cannot call `MoneyAmount.from_subunits` because $total is not int (got type '{type(total).__name__}')")

        # Raise: negative totals would produce a negative $whole
        if total < 0:
            raise ContractViolationError(f"Cannot call `MoneyAmount.from_subunits` because $total ({total}) < 0")

        whole, fraction = split_subunits(total)
        return cls(whole, fraction)

    @classmethod
    def parse(cls, text: str) -> MoneyAmount:
        """Parse an amount written in decimal-comma format.

        Accepted forms (no sign, no currency symbol, no thousands separator):
            - "" or "," -> `00,00`
            - "5" -> `05,00`, leading zeros are dropped ("005" -> `05,00`)
            - "5,5" -> `05,50` (a single fractional digit counts tens of cents)
            - "5,05" -> `05,05`, "5,25" -> `05,25`
            - at most 7 significant digits before the comma and 2 after it

        Args:
            text: Text to parse.

        Returns:
            MoneyAmount: Parsed amount.

        Raises:
            MoneyAmountFormatError: If $text does not match the format.
            ContractViolationError: If $text is not a str.
        """
        if not isinstance(text, str):
            raise ContractViolationError(f"Cannot call `MoneyAmount.parse` because $text is not str (got type '{type(text).__name__}')")

        match = _AMOUNT_PATTERN.fullmatch(text)
        if match is None:
            logger.debug(f"Rejected MoneyAmount text '{text}'")
            raise MoneyAmountFormatError(text)

        whole_digits = match.group(1)
        fraction_digits = match.group(3)

        whole = int(whole_digits) if whole_digits is not None else 0
        fraction = _parse_fraction_digits(fraction_digits) if fraction_digits is not None else 0

        return cls(whole, fraction)

    @classmethod
    def from_str(cls, text: str) -> MoneyAmount:
        """Alias for `parse`, named like the other `from_str` factories."""
        return cls.parse(text)

    # endregion

    # region Properties

    @property
    def whole(self) -> int:
        """Get the whole-unit count."""
        return self._whole

    @property
    def fraction(self) -> int:
        """Get the sub-unit count."""
        return self._fraction

    @property
    def subunits(self) -> int:
        """Get the whole amount expressed in sub-units."""
        return to_subunits(self._whole, self._fraction)

    def to_decimal(self) -> Decimal:
        """Return the amount as a two-place Decimal (e.g. `Decimal("5.50")`)."""
        return subunits_as_decimal(self.subunits)

    # endregion

    # region Arithmetic

    def add(self, other: MoneyAmount) -> MoneyAmount:
        """Return the sum of this amount and $other.

        Raises:
            ContractViolationError: If $other is not a MoneyAmount.
        """
        self._require_amount(other, "add")
        return MoneyAmount.from_subunits(abs(self.subunits + other.subunits))

    def subtract(self, other: MoneyAmount) -> MoneyAmount:
        """Return the distance between this amount and $other.

        The result is always the magnitude of the difference: `05,00 - 08,00` gives `03,00`.

        Raises:
            ContractViolationError: If $other is not a MoneyAmount.
        """
        self._require_amount(other, "subtract")
        return MoneyAmount.from_subunits(abs(self.subunits - other.subunits))

    def multiply(self, factor: int) -> MoneyAmount:
        """Return this amount multiplied by $factor, ignoring the sign of $factor.

        Args:
            factor: Non-zero integer multiplier.

        Raises:
            ContractViolationError: If $factor is not int or is zero.
        """
        if not is_strict_int(factor):
            raise ContractViolationError(f"Cannot call `MoneyAmount.multiply` because $factor is not int (got type '{type(factor).__name__}')")

        # Raise: zero multiplier is not allowed
        if factor == 0:
            raise ContractViolationError("Cannot call `MoneyAmount.multiply` because $factor is 0")

        return MoneyAmount.from_subunits(abs(self.subunits * factor))

    def __add__(self, other):
        if not isinstance(other, MoneyAmount):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, MoneyAmount):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other):
        if not is_strict_int(other):
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other):
        """Right multiplication: int * MoneyAmount."""
        return self.__mul__(other)

    # endregion

    # region Comparison

    def compare(self, other: MoneyAmount) -> int:
        """Compare with $other by whole units first, then by sub-units.

        Returns:
            int: -1 if this amount is smaller, 0 if equal, 1 if bigger.

        Raises:
            ContractViolationError: If $other is not a MoneyAmount.
        """
        self._require_amount(other, "compare")

        if self._whole != other._whole:
            return -1 if self._whole < other._whole else 1
        if self._fraction != other._fraction:
            return -1 if self._fraction < other._fraction else 1
        return 0

    def is_greater_than(self, other: MoneyAmount) -> bool:
        """Return True if this amount is bigger than $other."""
        return self.compare(other) > 0

    def is_less_than(self, other: MoneyAmount) -> bool:
        """Return True if this amount is smaller than $other."""
        return self.compare(other) < 0

    def equal(self, other: MoneyAmount) -> bool:
        """Return True if whole units and sub-units both match $other.

        Raises:
            ContractViolationError: If $other is not a MoneyAmount.
        """
        self._require_amount(other, "equal")
        return self._whole == other._whole and self._fraction == other._fraction

    def __eq__(self, other) -> bool:
        if not isinstance(other, MoneyAmount):
            return False
        return self.equal(other)

    def __lt__(self, other) -> bool:
        if not isinstance(other, MoneyAmount):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other) -> bool:
        if not isinstance(other, MoneyAmount):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other) -> bool:
        if not isinstance(other, MoneyAmount):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other) -> bool:
        if not isinstance(other, MoneyAmount):
            return NotImplemented
        return self.compare(other) >= 0

    def __hash__(self) -> int:
        """Hash as `whole + fraction`.

        Distinct amounts collide often; do not rely on hash uniqueness.
        """
        return self._whole + self._fraction

    # endregion

    # region String representations

    def to_str(self) -> str:
        """Return the amount as 'WW,FF' (e.g. '09,99', '123,05')."""
        return f"{self._whole:02d},{self._fraction:02d}"

    def __str__(self) -> str:
        return self.to_str()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(whole={self._whole}, fraction={self._fraction})"

    # endregion

    @staticmethod
    def _require_amount(other: object, operation: str) -> None:
        # Raise: operand is required and must be a MoneyAmount
        if other is None:
            raise ContractViolationError(f"Cannot call `MoneyAmount.{operation}` because $other is None")
        if not isinstance(other, MoneyAmount):
            raise ContractViolationError(f"Cannot call `MoneyAmount.{operation}` because $other is not MoneyAmount (got type '{type(other).__name__}')")


def _parse_fraction_digits(digits: str) -> int:
    """Turn the 1-2 digits after the comma into cents.

    One digit counts tens ("5" -> 50). Two digits are read as-is, with a
    leading zero dropped first ("05" -> 5, "25" -> 25).
    """
    if len(digits) > 1 and digits.startswith("0"):
        return int(digits[1:])
    if len(digits) > 1:
        return int(digits)
    return int(digits) * 10
