import pytest

from bankterm.account import Account
from bankterm.database import BASE_ACCOUNT_NUMBER, AccountDatabase


def make(number, name="Alice", balance=0.0):
    return Account(number, name, 30, "F", balance, "2024-01-02")


@pytest.fixture
def db(tmp_path):
    return AccountDatabase(tmp_path / "accounts.txt", 100)


def test_load_missing_file_is_empty(db):
    assert db.load() == []


def test_last_account_number_defaults_to_base(db):
    assert db.last_account_number() == BASE_ACCOUNT_NUMBER
    assert BASE_ACCOUNT_NUMBER == 1000


def test_ensure_exists_creates_and_keeps_content(db):
    db.ensure_exists()
    assert db.path.read_text() == ""
    db.save(make(1001))
    db.ensure_exists()
    assert db.load() == [make(1001)]


def test_ensure_exists_missing_directory_raises(tmp_path):
    database = AccountDatabase(tmp_path / "missing" / "accounts.txt", 100)
    with pytest.raises(OSError):
        database.ensure_exists()


def test_save_and_load_round_trip(db):
    accounts = [make(1001, "Alice", 10.5), make(1002, "Bob", 0.0)]
    for account in accounts:
        db.save(account)
    assert db.load() == accounts


def test_saved_line_matches_record(db):
    account = make(1001, "Alice", 3.25)
    db.save(account)
    assert db.path.read_text() == account.to_record() + "\n"


def test_last_account_number_is_maximum(db):
    for number in (1005, 1002, 1009, 1003):
        db.save(make(number))
    assert db.last_account_number() == 1009


def test_update_replaces_matching_account(db):
    db.save(make(1001, "Alice", 1.0))
    db.save(make(1002, "Bob", 2.0))
    changed = make(1002, "Bob", 99.5)
    assert db.update(changed) is True
    assert db.load() == [make(1001, "Alice", 1.0), changed]


def test_update_unknown_account_leaves_records(db):
    db.save(make(1001))
    assert db.update(make(4242)) is False
    assert db.load() == [make(1001)]


def test_remove_existing_account(db):
    db.save(make(1001))
    db.save(make(1002))
    assert db.remove(1001) is True
    assert db.load() == [make(1002)]


def test_remove_missing_account(db):
    db.save(make(1001))
    assert db.remove(1005) is False
    assert db.load() == [make(1001)]


def test_load_respects_max_accounts(tmp_path):
    database = AccountDatabase(tmp_path / "accounts.txt", 2)
    for number in (1001, 1002, 1003):
        database.save(make(number))
    assert [a.account_number for a in database.load()] == [1001, 1002]
    assert database.last_account_number() == 1003


def test_malformed_line_stops_reading(db):
    db.path.write_text(
        make(1001).to_record() + "\nnot a record\n" + make(1007).to_record() + "\n"
    )
    assert db.load() == [make(1001)]
    assert db.last_account_number() == 1001


def test_blank_lines_are_skipped(db):
    db.path.write_text("\n" + make(1001).to_record() + "\n\n  \n" + make(1002).to_record() + "\n")
    assert [a.account_number for a in db.load()] == [1001, 1002]