"""Terminal presentation and input helpers for the banking application."""

from __future__ import annotations

import os
import re
import subprocess
import sys
import time
from typing import Iterable, TextIO

from .account import Account

DEFAULT_CLEAR_COMMAND = "cls" if os.name == "nt" else "clear"

GREEN = "\033[32m"
YELLOW = "\033[33m"
RESET = "\033[0m"

LOADING_STAGES = (
    "Connecting to server       ",
    "Authenticating transaction ",
    "Processing request         ",
    "Updating account balance   ",
    "Finalizing transaction     ",
)

TABLE_RULE = "-" * 66

_INT = re.compile(r"\s*([+-]?\d+)")
_FLOAT = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def format_account_details(account: Account) -> str:
    """Return the multi-line account details block."""
    return (
        "\n===== Account Details =====\n"
        f"Account Number: {account.account_number}\n"
        f"Name: {account.name}\n"
        f"Age: {account.age}\n"
        f"Gender: {account.gender}\n"
        f"Balance: ${account.balance:.2f}\n"
        f"Date of Creation: {account.date_of_creation}\n"
    )


def format_table_header() -> str:
    """Return the account table's column titles and rule, as two lines."""
    titles = (
        f"{'Acc. No.':<10} {'Name':<20} {'Age':<5} {'Gender':<6} "
        f"{'Balance':<10} {'Creation Date':<12}"
    )
    return f"{titles}\n{TABLE_RULE}"


def format_table_row(account: Account) -> str:
    """Return one account as a table row."""
    return (
        f"{account.account_number:<10d} {account.name:<20} {account.age:<5d} "
        f"{account.gender:<6} ${account.balance:<9.2f} {account.date_of_creation}"
    )


class Console:
    """Line-oriented terminal input and output with optional animation delays."""

    def __init__(
        self,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        delay: float = 1.0,
        clear_command: str | None = DEFAULT_CLEAR_COMMAND,
    ):
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.delay = delay
        self.clear_command = clear_command

    def write(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()

    def _sleep(self, seconds: float) -> None:
        if self.delay > 0:
            time.sleep(seconds * self.delay)

    def clear_screen(self) -> None:
        """Run the clear command, if one is configured."""
        if not self.clear_command:
            return
        self.stdout.flush()
        subprocess.run(self.clear_command, shell=True, check=False)

    def read_line(self) -> str:
        """Read one line without its newline; raise EOFError at end of input."""
        line = self.stdin.readline()
        if not line:
            raise EOFError("end of input")
        return line[:-1] if line.endswith("\n") else line

    def _read_token_line(self) -> str:
        while True:
            line = self.stdin.readline()
            if not line:
                raise EOFError("end of input")
            if line.strip():
                return line

    def read_int(self) -> int | None:
        """Read a line starting with an integer; None if it does not parse.

        Blank lines are skipped and the rest of the line is discarded.
        """
        match = _INT.match(self._read_token_line())
        return int(match.group(1)) if match else None

    def read_float(self) -> float | None:
        """Read a line starting with a number; None if it does not parse."""
        match = _FLOAT.match(self._read_token_line())
        return float(match.group(1)) if match else None

    def read_char(self) -> str:
        """Read a single character and discard the rest of its line.

        A bare newline counts as the character, after which the next line
        is discarded as well.
        """
        line = self.stdin.readline()
        if not line:
            raise EOFError("end of input")
        char = line[0]
        if char == "\n":
            self.stdin.readline()
        return char

    def message_and_wait(self, message: str) -> None:
        """Show a message and wait for Enter."""
        self.write(f"\n{message}\nPress Enter to continue...")
        self.stdin.readline()

    def show_account_details(self, account: Account) -> None:
        self.write(format_account_details(account))

    def show_account_table(self, accounts: Iterable[Account]) -> None:
        """Write the table header followed by one row per account."""
        self.write(f"\n{format_table_header()}\n")
        for account in accounts:
            self.write(format_table_row(account) + "\n")

    def _dots(self, label: str, settle: float) -> None:
        self.write(label)
        for _ in range(3):
            self._sleep(0.3)
            self.write(f"{GREEN}.{RESET}")
        self._sleep(settle)
        self.write(f" {GREEN}[Done]{RESET}\n")

    def loading_dots(self, label: str) -> None:
        """Write a label followed by three animated dots and a done marker."""
        self._dots(label, 0.0)

    def transaction_processing(self, operation: str) -> None:
        """Show the staged transaction-processing animation."""
        self.write(f"\n{YELLOW}=== {operation} Transaction Processing ==={RESET}\n")
        for stage in LOADING_STAGES:
            self._dots(stage, 0.2)
        self.write(f"{GREEN}=== Transaction Completed Successfully ==={RESET}\n\n")
        self._sleep(0.5)