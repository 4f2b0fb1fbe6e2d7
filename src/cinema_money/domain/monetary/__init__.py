"""Monetary domain package.

This package contains the `MoneyAmount` value type used for ticket prices and
cash handling in the cinema system, together with the errors it raises.
"""

from cinema_money.domain.monetary.money_amount import ContractViolationError, MoneyAmount, MoneyAmountFormatError

__all__ = ["ContractViolationError", "MoneyAmount", "MoneyAmountFormatError"]
