"""Text-file storage for bank accounts, one comma-separated record per line."""

from __future__ import annotations

from itertools import islice
from pathlib import Path
from typing import Iterable, Iterator

from .account import Account

DATABASE_FILE = Path("database/bank_accounts.txt")
MAX_ACCOUNTS = 100
BASE_ACCOUNT_NUMBER = 1000


class AccountDatabase:
    """Accounts kept in a plain text file."""

    def __init__(self, path: str | Path = DATABASE_FILE, max_accounts: int = MAX_ACCOUNTS):
        self.path = Path(path)
        self.max_accounts = max_accounts

    def ensure_exists(self) -> None:
        """Create the database file if it is missing; raise OSError if it cannot be."""
        with self.path.open("a", encoding="utf-8"):
            pass

    def _records(self) -> Iterator[Account]:
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return
        for line in text.split("\n"):
            if not line.strip():
                continue
            try:
                yield Account.from_record(line)
            except ValueError:
                return

    def _write_all(self, accounts: Iterable[Account]) -> None:
        with self.path.open("w", encoding="utf-8") as handle:
            for account in accounts:
                handle.write(account.to_record() + "\n")

    def last_account_number(self) -> int:
        """Return the highest stored account number, or the base number if none."""
        return max(
            (a.account_number for a in self._records()),
            default=BASE_ACCOUNT_NUMBER,
        )

    def load(self) -> list[Account]:
        """Return up to max_accounts accounts, stopping at the first malformed line."""
        return list(islice(self._records(), self.max_accounts))

    def save(self, account: Account) -> None:
        """Append a new account to the file."""
        with self.path.open("a", encoding="utf-8") as handle:
            handle.write(account.to_record() + "\n")

    def update(self, account: Account) -> bool:
        """Rewrite the file with this account replacing the stored one of the same number.

        Returns whether a matching record was found.
        """
        accounts = self.load()
        found = False
        rewritten = []
        for stored in accounts:
            if stored.account_number == account.account_number:
                rewritten.append(account)
                found = True
            else:
                rewritten.append(stored)
        self._write_all(rewritten)
        return found

    def remove(self, account_number: int) -> bool:
        """Rewrite the file without the given account; return whether it was there."""
        accounts = self.load()
        kept = [a for a in accounts if a.account_number != account_number]
        self._write_all(kept)
        return len(kept) != len(accounts)