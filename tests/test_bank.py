from algoshelf.bank import Bank

START = [10, 100, 20, 50, 30]


def test_initial_balance_is_copied():
    source = list(START)
    bank = Bank(source)
    bank.deposit(1, 5)
    assert source == START
    assert bank.balance[0] == START[0] + 5


def test_withdraw_reduces_balance():
    bank = Bank(START)
    assert bank.withdraw(3, 10)
    assert bank.balance[2] == START[2] - 10


def test_withdraw_insufficient_funds_changes_nothing():
    bank = Bank(START)
    assert not bank.withdraw(1, START[0] + 1)
    assert bank.balance == START


def test_withdraw_unknown_account():
    bank = Bank(START)
    assert not bank.withdraw(10, 50)
    assert not bank.withdraw(0, 1)
    assert bank.balance == START


def test_transfer_conserves_total():
    bank = Bank(START)
    assert bank.transfer(5, 1, 20)
    assert sum(bank.balance) == sum(START)
    assert bank.balance[4] == START[4] - 20
    assert bank.balance[0] == START[0] + 20


def test_transfer_rejections():
    bank = Bank(START)
    assert not bank.transfer(3, 4, START[2] + 1)
    assert not bank.transfer(1, 6, 1)
    assert not bank.transfer(6, 1, 0)
    assert bank.balance == START


def test_transfer_whole_balance():
    bank = Bank(START)
    assert bank.transfer(2, 3, START[1])
    assert bank.balance[1] == 0


def test_deposit():
    bank = Bank(START)
    assert bank.deposit(5, 20)
    assert bank.balance[4] == START[4] + 20
    assert not bank.deposit(len(START) + 1, 20)