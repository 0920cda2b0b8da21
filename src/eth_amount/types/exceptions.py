"""Exception hierarchy for currency amounts."""

from __future__ import annotations

from typing import Any


class AmountError(Exception):
    """
    Base exception for all amount-related errors.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


class AmountOverflowError(AmountError, OverflowError):
    """
    Raised when an arithmetic result cannot be represented in 256 bits.

    Underflow (a negative difference) is reported under the same kind.

    Attributes:
        operation: Verb describing the attempted operation (e.g. "adding").
        lhs: The left operand, as a smallest-unit count.
        rhs: The right operand (an amount's smallest-unit count or a scalar).
    """

    _TEMPLATES = {
        "adding": "Overflow in U256 when adding {lhs} to {rhs}",
        "subtracting": "Overflow in U256 when subtracting {lhs} from {rhs}",
        "multiplying": "Overflow in U256 when multiplying {lhs} by {rhs}",
        "dividing": "Overflow in U256 when dividing {lhs} by {rhs}",
        "converting": "Overflow when converting {lhs} to {rhs}",
    }

    def __init__(self, operation: str, lhs: Any, rhs: Any) -> None:
        self.operation = operation
        self.lhs = lhs
        self.rhs = rhs

        template = self._TEMPLATES.get(operation, "Overflow in U256 when {operation} {lhs}, {rhs}")
        super().__init__(template.format(operation=operation, lhs=lhs, rhs=rhs))


class AmountDivisionByZeroError(AmountOverflowError):
    """Raised when an amount is divided by a zero amount."""

    def __init__(self, lhs: Any) -> None:
        super().__init__("dividing", lhs, 0)
        self.message = f"{self.message} (division by zero)"
        self.args = (self.message,)
