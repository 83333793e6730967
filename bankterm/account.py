"""Bank account records and the operations that change a balance."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable


class InvalidAmountError(ValueError):
    """Raised when a deposit or withdrawal amount is not greater than zero."""


class InsufficientFundsError(ValueError):
    """Raised when a withdrawal exceeds the available balance."""


@dataclass
class Account:
    """A bank account with personal details and a balance."""

    account_number: int
    name: str
    age: int
    gender: str
    balance: float = 0.0
    date_of_creation: str = ""

    def deposit(self, amount: float) -> float:
        """Add a positive amount to the balance and return the new balance."""
        if amount <= 0:
            raise InvalidAmountError("Invalid amount. Deposit must be greater than zero.")
        self.balance += amount
        return self.balance

    def withdraw(self, amount: float) -> float:
        """Take a positive amount, not above the balance, and return the new balance."""
        if amount <= 0:
            raise InvalidAmountError("Invalid amount. Withdrawal must be greater than zero.")
        if amount > self.balance:
            raise InsufficientFundsError("Insufficient funds. Withdrawal failed.")
        self.balance -= amount
        return self.balance

    def to_record(self) -> str:
        """Return the account as one database line, without the newline."""
        return (
            f"{self.account_number},{self.name},{self.age},{self.gender},"
            f"{self.balance:.2f},{self.date_of_creation}"
        )

    @classmethod
    def from_record(cls, line: str) -> "Account":
        """Parse one database line; raise ValueError if it is malformed."""
        text = line.rstrip("\n")
        parts = text.split(",", 5)
        if len(parts) != 6:
            raise ValueError(f"malformed account record: {line!r}")
        number, name, age, gender, balance, date = parts
        if not name or len(gender) != 1 or not date:
            raise ValueError(f"malformed account record: {line!r}")
        try:
            return cls(int(number), name, int(age), gender, float(balance), date)
        except ValueError as exc:
            raise ValueError(f"malformed account record: {line!r}") from exc


def find_account(accounts: Iterable[Account], account_number: int) -> Account | None:
    """Return the first account with the given number, or None."""
    return next((a for a in accounts if a.account_number == account_number), None)