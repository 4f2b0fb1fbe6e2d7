__version__ = "0.0.1"

from cinema_money.domain.monetary.money_amount import ContractViolationError, MoneyAmount, MoneyAmountFormatError

__all__ = ["ContractViolationError", "MoneyAmount", "MoneyAmountFormatError"]
