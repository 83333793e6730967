# bankterm

A small interactive banking system for the terminal. Accounts are kept in a
plain comma-separated text file, one account per line. This keeps the data
easy to read and to back up.

## Installing

    pip install .

## Running

    bankterm

Options:

- `--database PATH` sets the accounts file to use. The default is
  `database/bank_accounts.txt`, relative to the current directory.
- `--no-clear` stops the program from clearing the screen between menus.

If the accounts file does not exist, the program creates it. It does not
create the directory that holds the file. If the `database` directory (or
the directory you gave with `--database`) is missing, the program prints
`Error: Unable to create or access the database file.` and exits with
status 1.

On start the program opens the main menu:

    ===== Banking System Menu =====
    1. Create Account
    2. List All Accounts
    3. Delete Account
    4. Operate on Account
    5. Exit

- **Create Account** asks for a name, an age and a gender. Names longer than
  49 characters are cut to 49. The new account gets the next number after the
  highest one stored, starting at 1001. Its balance is zero and its creation
  date is today's date.
- **List All Accounts** prints every stored account as a table.
- **Delete Account** shows the table and removes the account whose number you
  enter.
- **Operate on Account** shows the table and asks for an account number. For
  that account you can then:
  - deposit,
  - withdraw,
  - view a detailed status report.

  Amounts must be greater than zero, and a withdrawal cannot be more than the
  current balance. A successful deposit or withdrawal is written back to the
  file straight away, after a short processing animation.
- **Exit** asks for confirmation (`Y`/`y`) before it quits.

The program also stops when its input ends.

Only the first 100 accounts in the file are loaded.

## Database format

Each line has this form:

    account_number,name,age,gender,balance,date_of_creation

For example:

    1001,Jane Doe,34,F,250.00,2024-01-15

Balances are written with two decimals. Reading stops at the first line that
does not have this form. Blank lines are skipped.

## Using it as a library

    from bankterm.account import Account, find_account
    from bankterm.database import AccountDatabase

    db = AccountDatabase("database/bank_accounts.txt", 100)
    db.ensure_exists()
    accounts = db.load()
    account = find_account(accounts, 1001)
    if account is not None:
        account.deposit(50.0)
        db.update(account)

`bankterm.account`:

- `Account` is a dataclass with these fields:
  - `account_number`
  - `name`
  - `age`
  - `gender`
  - `balance`
  - `date_of_creation`
- `Account.deposit(amount)` and `Account.withdraw(amount)` return the new
  balance. Both raise `InvalidAmountError` when the amount is not positive.
  `withdraw` raises `InsufficientFundsError` when the amount is more than the
  balance.
- `Account.to_record()` turns an account into a database line.
  `Account.from_record(line)` parses one, and raises `ValueError` if the line
  is malformed.
- `find_account(accounts, account_number)` returns the first account with
  that number, or `None`.

`bankterm.database.AccountDatabase(path, max_accounts)`:

- `ensure_exists()` creates the file if it is missing.
- `load()` returns the stored accounts.
- `save(account)` appends an account.
- `update(account)` rewrites the file with the changed account. It returns
  whether a matching account was found.
- `remove(account_number)` rewrites the file without that account. It returns
  whether the account was there.
- `last_account_number()` returns the highest stored number, or 1000 when the
  file holds no accounts.

`bankterm.ui` holds the terminal helpers:

- `format_account_details`, `format_table_header` and `format_table_row`
  return the text the program prints.
- `Console(stdin, stdout, delay, clear_command)` does line-oriented input and
  output. `delay=0` turns off the animation pauses. `clear_command=None`
  turns off screen clearing.

`bankterm.menu.BankingApp(database, console, today)` is the interactive
program. Call `run()` to start it; it returns the exit status.

## Running the tests

    pip install ".[test]"
    pytest