"""Net worth from account balances."""

from __future__ import annotations

from decimal import Decimal

import pytest

from moneymap.domain.errors import InvalidInputError
from moneymap.domain.records import AccountCategory, AccountRecord
from moneymap.services.net_position import compute_net_position
from tests.conftest import assert_money_equal


class TestComputeNetPosition:
    def test_demo_accounts(self, account_record):
        """Checking, savings and investment are assets; the card balance is owed."""
        accounts = [
            account_record("2450.75", AccountCategory.CHECKING, id=1),
            account_record("8500.00", AccountCategory.SAVINGS, id=2),
            account_record("-1250.30", AccountCategory.CREDIT, id=3),
            account_record("15750.25", AccountCategory.INVESTMENT, id=4),
        ]

        position = compute_net_position(accounts)

        assert_money_equal(position.total_assets, "26701.00")
        assert_money_equal(position.total_liabilities, "1250.30")
        assert_money_equal(position.net_worth, "25450.70")

    def test_empty_accounts(self):
        position = compute_net_position([])
        assert position.total_assets == 0
        assert position.total_liabilities == 0
        assert position.net_worth == 0

    def test_credit_float_counts_as_asset(self, account_record):
        """A positive credit balance is money the card owes you."""
        position = compute_net_position([account_record("100", AccountCategory.CREDIT)])

        assert position.total_assets == Decimal("100")
        assert position.total_liabilities == 0

    def test_overdrawn_checking_is_neither(self, account_record):
        position = compute_net_position(
            [
                account_record("-50", AccountCategory.CHECKING, id=1),
                account_record("200", AccountCategory.SAVINGS, id=2),
            ]
        )

        assert position.total_assets == Decimal("200")
        assert position.total_liabilities == 0
        assert position.net_worth == Decimal("200")

    def test_net_worth_identity(self, account_record):
        accounts = [
            account_record("0.10", AccountCategory.CHECKING, id=1),
            account_record("0.20", AccountCategory.SAVINGS, id=2),
            account_record("-0.05", AccountCategory.CREDIT, id=3),
        ]

        position = compute_net_position(accounts)

        assert position.net_worth == position.total_assets - position.total_liabilities
        assert position.net_worth == Decimal("0.25")

    def test_liabilities_are_positive(self, account_record):
        position = compute_net_position([account_record("-900", AccountCategory.CREDIT)])

        assert position.total_liabilities == Decimal("900")
        assert position.net_worth == Decimal("-900")

    def test_rejects_non_numeric_balance(self):
        account = AccountRecord(id=1, name="Broken", category=AccountCategory.CHECKING, balance="abc")

        with pytest.raises(InvalidInputError) as exc:
            compute_net_position([account])
        assert exc.value.field == "balance"
