"""A simple bank holding numbered accounts."""

from __future__ import annotations

from collections.abc import Iterable


class Bank:
    """Accounts numbered from 1, each with a balance."""

    def __init__(self, balance: Iterable[int]) -> None:
        self.balance = list(balance)

    def _is_valid(self, account: int) -> bool:
        return 1 <= account <= len(self.balance)

    def transfer(self, account1: int, account2: int, money: int) -> bool:
        """Move ``money`` from one account to another; False if it cannot be done."""
        if not (self._is_valid(account1) and self._is_valid(account2)):
            return False
        if self.balance[account1 - 1] < money:
            return False
        self.balance[account1 - 1] -= money
        self.balance[account2 - 1] += money
        return True

    def deposit(self, account: int, money: int) -> bool:
        """Add ``money`` to an account; False if the account does not exist."""
        if not self._is_valid(account):
            return False
        self.balance[account - 1] += money
        return True

    def withdraw(self, account: int, money: int) -> bool:
        """Take ``money`` from an account; False if it does not exist or lacks funds."""
        if not self._is_valid(account):
            return False
        if self.balance[account - 1] < money:
            return False
        self.balance[account - 1] -= money
        return True