"""Interactive menus of the banking application and its command entry point."""

from __future__ import annotations

import argparse
from datetime import date
from typing import Callable

from .account import Account, InsufficientFundsError, InvalidAmountError, find_account
from .database import DATABASE_FILE, AccountDatabase
from .ui import GREEN, RESET, YELLOW, Console

BOLD = "\033[1m"
NAME_LIMIT = 49
RETURN_PROMPT = "Press Enter to return to the main menu."


class BankingApp:
    """Menu-driven front end over an account database."""

    def __init__(
        self,
        database: AccountDatabase | None = None,
        console: Console | None = None,
        today: Callable[[], date] = date.today,
    ):
        self.database = database if database is not None else AccountDatabase()
        self.console = console if console is not None else Console()
        self.today = today

    def run(self) -> int:
        """Prepare the database, greet the user and run the main menu.

        Returns the process exit status.
        """
        try:
            self.database.ensure_exists()
        except OSError:
            self.console.write("Error: Unable to create or access the database file.\n")
            return 1
        self.console.write(
            "Welcome to the Banking System Application\n"
            "========================================\n"
            "Initializing system...\n"
        )
        try:
            self.main_menu()
        except EOFError:
            self.console.write("\n")
        return 0

    def main_menu(self) -> None:
        """Show the main menu until the user confirms exiting."""
        actions = {
            1: self.create_account,
            2: self.list_all_accounts,
            3: self.delete_account,
            4: self.operate_on_account,
        }
        while True:
            self.console.clear_screen()
            self.console.write(
                "\n===== Banking System Menu =====\n"
                "1. Create Account\n"
                "2. List All Accounts\n"
                "3. Delete Account\n"
                "4. Operate on Account\n"
                "5. Exit\n"
                "==============================\n"
                "Enter your choice: "
            )
            choice = self.console.read_int()
            if choice == 5:
                if self.exit_application():
                    return
            elif choice in actions:
                actions[choice]()
            else:
                self.console.message_and_wait("Invalid choice. Please try again.")

    def exit_application(self) -> bool:
        """Ask for confirmation; return True if the user chose to exit."""
        console = self.console
        console.clear_screen()
        console.write("\n===== Exit Application =====\nAre you sure you want to exit? (Y/N): ")
        choice = console.read_char()
        if choice in ("Y", "y"):
            console.clear_screen()
            console.write(
                "\n===== Banking System =====\n"
                "Thank you for using the banking system.\n"
                "All changes have been saved.\n"
                "Goodbye!\n\n"
            )
            return True
        console.write(f"\nContinuing with the application...\n{RETURN_PROMPT}")
        console.stdin.readline()
        return False

    def create_account(self) -> None:
        """Ask for the holder's details and store a new zero-balance account."""
        console = self.console
        number = self.database.last_account_number() + 1
        console.clear_screen()
        console.write("\n===== Create New Account =====\n")
        console.write("Enter name: ")
        name = console.read_line()[:NAME_LIMIT]
        console.write("Enter age: ")
        age = console.read_int()
        console.write("Enter gender (M/F): ")
        gender = console.read_char()
        account = Account(
            account_number=number,
            name=name,
            age=age if age is not None else 0,
            gender=gender,
            balance=0.0,
            date_of_creation=self.today().strftime("%Y-%m-%d"),
        )
        try:
            self.database.save(account)
        except OSError:
            console.write("Error opening database file.\n")
            console.write("\nError creating account. Please try again.\n")
        else:
            console.write("\nAccount created successfully!\n")
            console.show_account_details(account)
        console.message_and_wait(RETURN_PROMPT)

    def list_all_accounts(self) -> None:
        """Show every stored account as a table."""
        accounts = self.database.load()
        self.console.clear_screen()
        if not accounts:
            self.console.message_and_wait("No accounts found.")
            return
        self.console.write(f"\n===== All Accounts ({len(accounts)}) =====\n")
        self.console.show_account_table(accounts)
        self.console.message_and_wait(RETURN_PROMPT)

    def _choose_account(self, title: str, prompt: str) -> tuple[list[Account], int, Account | None] | None:
        accounts = self.database.load()
        self.console.clear_screen()
        if not accounts:
            self.console.message_and_wait("No accounts found.")
            return None
        self.console.write(f"\n===== {title} =====\n")
        self.console.show_account_table(accounts)
        self.console.write(f"\n{prompt}")
        number = self.console.read_int()
        account = find_account(accounts, number) if number is not None else None
        if account is None:
            self.console.message_and_wait("Account not found.")
            return None
        return accounts, number, account

    def delete_account(self) -> None:
        """Let the user pick an account and remove it from the database."""
        chosen = self._choose_account("Delete Account", "Enter account number to delete: ")
        if chosen is None:
            return
        _, number, _ = chosen
        try:
            removed = self.database.remove(number)
        except OSError:
            self.console.write("Error opening database file.\n")
            removed = False
        if removed:
            self.console.message_and_wait(f"Account {number} deleted successfully.")
        else:
            self.console.message_and_wait("Error deleting account. Please try again.")

    def _transaction(self, account: Account, verb: str, operation: str, apply: Callable[[float], float]) -> bool:
        console = self.console
        console.write(f"\nCurrent balance: ${account.balance:.2f}\n")
        console.write(f"Enter amount to {verb}: ")
        amount = console.read_float()
        try:
            apply(amount if amount is not None else 0.0)
        except (InvalidAmountError, InsufficientFundsError) as exc:
            console.write(f"\n{exc}\n")
            return False
        console.transaction_processing(operation)
        console.write(f"\n{operation} successful. New balance: ${account.balance:.2f}\n")
        return True

    def _store(self, account: Account) -> None:
        try:
            self.database.update(account)
        except OSError:
            self.console.write("Error opening database file.\n")

    def operate_on_account(self) -> None:
        """Let the user pick an account and deposit, withdraw or view its status."""
        chosen = self._choose_account("Operate on Account", "Enter account number: ")
        if chosen is None:
            return
        _, _, account = chosen
        console = self.console
        console.clear_screen()
        console.show_account_details(account)
        console.write(
            "\n===== Account Operations =====\n"
            "1. Deposit\n"
            "2. Withdraw\n"
            "3. View Account Status\n"
            "4. Return to Main Menu\n"
            "Enter choice: "
        )
        choice = console.read_int()
        if choice == 1:
            if self._transaction(account, "deposit", "Deposit", account.deposit):
                self._store(account)
        elif choice == 2:
            if self._transaction(account, "withdraw", "Withdrawal", account.withdraw):
                self._store(account)
        elif choice == 3:
            self.show_account_status(account)
            console.message_and_wait(f"\n{RETURN_PROMPT}")
        elif choice == 4:
            return
        else:
            console.write("\nInvalid choice.\n")
        console.message_and_wait(RETURN_PROMPT)

    def show_account_status(self, account: Account) -> None:
        """Write the detailed status report of one account."""
        console = self.console
        console.clear_screen()
        console.write(f"\n{YELLOW}=== Retrieving Account Status ==={RESET}\n")
        console.loading_dots("Retrieving account data")
        console.write("\n")
        console.write(f"{YELLOW}===== ACCOUNT STATUS ====={RESET}\n")
        console.write(f"\n{BOLD}General Information{RESET}\n")
        console.write(f"{'Account Number':<20}: {account.account_number}\n")
        console.write(f"{'Account Holder':<20}: {account.name}\n")
        console.write(f"{'Age':<20}: {account.age}\n")
        console.write(f"{'Gender':<20}: {account.gender}\n")
        console.write(f"\n{BOLD}Financial Information{RESET}\n")
        console.write(f"{'Current Balance':<20}: ${account.balance:.2f}\n")
        console.write(f"{'Account Created on':<20}: {account.date_of_creation}\n")
        console.write(f"\n{BOLD}Account Status{RESET}\n")
        colour, standing = (GREEN, "GOOD STANDING") if account.balance > 0 else (YELLOW, "ZERO BALANCE")
        console.write(f"{'Current Status':<20}: {colour}ACTIVE{RESET}\n")
        console.write(f"{'Standing':<20}: {colour}{standing}{RESET}\n")


def main(argv: list[str] | None = None) -> int:
    """Run the interactive banking application."""
    parser = argparse.ArgumentParser(prog="bankterm", description="Text-file banking system.")
    parser.add_argument("--database", default=str(DATABASE_FILE), help="path of the accounts file")
    parser.add_argument("--no-clear", action="store_true", help="do not clear the screen")
    args = parser.parse_args(argv)
    console = Console(clear_command=None) if args.no_clear else Console()
    app = BankingApp(AccountDatabase(args.database), console)
    return app.run()


if __name__ == "__main__":
    raise SystemExit(main())