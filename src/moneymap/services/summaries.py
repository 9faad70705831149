"""View-ready summaries composed from the calculators.

``FinanceSummaryService`` reads through the repository protocols on every
call and keeps no state of its own. Collections are processed item by item: a
debt that can never be paid off, or a goal nobody contributes to, is skipped
and reported in ``failures`` instead of aborting the whole page.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields, is_dataclass
from datetime import date, timedelta
from decimal import Decimal
from enum import Enum
from typing import Any, Callable, Optional

from ..domain.errors import GoalUnreachableError, MetricsError
from ..domain.records import (
    AccountRecord,
    BillRecord,
    BillStatus,
    BudgetRecord,
    DebtRecord,
    SavingsGoalRecord,
    TransactionRecord,
    TransactionType,
)
from ..domain.repositories import (
    AccountRepository,
    BillRepository,
    BudgetRepository,
    DebtRepository,
    SavingsGoalRepository,
    TransactionRepository,
)
from ..logging_config import get_logger
from .bills import BillClassification, classify_bill
from .dates import month_bounds
from .debts import DebtProjection, payoff_order, project_debt, weighted_average_rate
from .money import ZERO, percent, quantize_cents, sum_money, to_money
from .net_position import NetPosition, compute_net_position
from .pay_period import (
    BudgetAdvice,
    PayPeriod,
    PeriodBudget,
    budget_recommendation,
    compute_period_budget,
    pay_period_for,
    period_income,
    period_spend,
    projected_bills,
)
from .savings import (
    GoalPacing,
    average_time_to_goal,
    goal_progress_pct,
    is_completed,
    longest_time_to_goal,
    pace_goal,
)
from .transactions import (
    TransactionTotals,
    filter_transactions,
    recent_transactions,
    savings_rate,
    summarize_transactions,
    totals_by_category,
)

logger = get_logger("summaries")

_ONE_DAY = timedelta(days=1)


@dataclass(frozen=True, slots=True)
class Failure:
    """A record that could not be computed, with the error's ``kind``."""

    kind: str
    item_id: int
    name: str
    message: str


@dataclass(frozen=True, slots=True)
class DashboardSummary:
    as_of: date
    net_position: NetPosition
    total_debt: Decimal
    monthly_income: Decimal
    monthly_expenses: Decimal
    savings_rate: Optional[Decimal]
    recent_transactions: list[TransactionRecord]


@dataclass(frozen=True, slots=True)
class AccountsOverview:
    net_position: NetPosition
    accounts: list[AccountRecord]
    active_count: int
    inactive_count: int


@dataclass(frozen=True, slots=True)
class DebtsOverview:
    projections: list[DebtProjection]
    total_debt: Decimal
    total_paid: Decimal
    weighted_rate: Decimal
    focus_debt: Optional[DebtRecord]
    count: int
    failures: list[Failure] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class GoalRow:
    goal: SavingsGoalRecord
    progress_pct: Decimal
    pacing: GoalPacing


@dataclass(frozen=True, slots=True)
class SavingsOverview:
    goals: list[GoalRow]
    completed: list[SavingsGoalRecord]
    total_target: Decimal
    total_saved: Decimal
    total_monthly_contribution: Decimal
    overall_progress_pct: Decimal
    months_to_all_goals: Optional[int]
    average_months_to_goal: Optional[int]
    failures: list[Failure] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class BillRow:
    bill: BillRecord
    classification: BillClassification


@dataclass(frozen=True, slots=True)
class BillsOverview:
    bills: list[BillRow]
    total_amount: Decimal
    paid_total: Decimal
    paid_count: int
    unpaid_total: Decimal
    unpaid_count: int
    overdue_total: Decimal
    overdue_count: int
    upcoming_count: int
    categories: list[str]


@dataclass(frozen=True, slots=True)
class BudgetOverview:
    budget: BudgetRecord
    current_period: PayPeriod
    period_budget: PeriodBudget
    advice: BudgetAdvice
    next_period: PayPeriod
    next_period_income: Decimal
    next_period_bills: Decimal
    next_period_available: Decimal


@dataclass(frozen=True, slots=True)
class TransactionsOverview:
    totals: TransactionTotals
    expenses_by_category: dict[str, Decimal]
    categories: list[str]
    transactions: list[TransactionRecord]


def _failure(error: MetricsError, *, item_id: int, name: str) -> Failure:
    return Failure(kind=error.kind, item_id=item_id, name=name, message=str(error))


class FinanceSummaryService:
    """Compose page summaries from injected repositories."""

    def __init__(
        self,
        *,
        accounts: AccountRepository,
        debts: DebtRepository,
        bills: BillRepository,
        goals: SavingsGoalRepository,
        transactions: TransactionRepository,
        budgets: BudgetRepository,
        low_remaining_threshold: Decimal = Decimal("200"),
        recent_limit: int = 5,
    ):
        self.accounts = accounts
        self.debts = debts
        self.bills = bills
        self.goals = goals
        self.transactions = transactions
        self.budgets = budgets
        self.low_remaining_threshold = low_remaining_threshold
        self.recent_limit = recent_limit

    @classmethod
    def from_session_factory(cls, session_factory: Callable, config: Any = None) -> "FinanceSummaryService":
        """Wire the SQLModel repositories around *session_factory*."""

        from ..infra.repositories import (
            SQLModelAccountRepository,
            SQLModelBillRepository,
            SQLModelBudgetRepository,
            SQLModelDebtRepository,
            SQLModelSavingsGoalRepository,
            SQLModelTransactionRepository,
        )

        options: dict[str, Any] = {}
        if config is not None:
            options["low_remaining_threshold"] = config.LOW_REMAINING_THRESHOLD
            options["recent_limit"] = config.RECENT_TRANSACTION_LIMIT
        return cls(
            accounts=SQLModelAccountRepository(session_factory),
            debts=SQLModelDebtRepository(session_factory),
            bills=SQLModelBillRepository(session_factory),
            goals=SQLModelSavingsGoalRepository(session_factory),
            transactions=SQLModelTransactionRepository(session_factory),
            budgets=SQLModelBudgetRepository(session_factory),
            **options,
        )

    # Dashboard ------------------------------------------------------------
    def dashboard(self, user_id: int, *, as_of: date) -> DashboardSummary:
        """Headline numbers: net worth, debt, this month's cash flow."""

        month_start, next_month = month_bounds(as_of)
        month_txns = self.transactions.list_for_user(user_id, start=month_start, end=next_month)
        totals = summarize_transactions(month_txns)

        budget = self.budgets.get_for_user(user_id)
        income = to_money(budget.monthly_income) if budget else totals.income

        return DashboardSummary(
            as_of=as_of,
            net_position=compute_net_position(self.accounts.list_for_user(user_id)),
            total_debt=sum_money(debt.balance for debt in self.debts.list_for_user(user_id)),
            monthly_income=income,
            monthly_expenses=totals.expenses,
            savings_rate=savings_rate(income, totals.expenses),
            recent_transactions=recent_transactions(
                self.transactions.list_for_user(user_id, end=as_of + _ONE_DAY),
                self.recent_limit,
            ),
        )

    # Accounts -------------------------------------------------------------
    def accounts_overview(self, user_id: int) -> AccountsOverview:
        accounts = self.accounts.list_for_user(user_id)
        active = sum(1 for account in accounts if account.is_active)
        return AccountsOverview(
            net_position=compute_net_position(accounts),
            accounts=accounts,
            active_count=active,
            inactive_count=len(accounts) - active,
        )

    # Debts ----------------------------------------------------------------
    def debts_overview(self, user_id: int, *, as_of: date) -> DebtsOverview:
        debts = self.debts.list_for_user(user_id)
        projections: list[DebtProjection] = []
        failures: list[Failure] = []
        for debt in debts:
            try:
                projections.append(project_debt(debt, as_of=as_of))
            except MetricsError as exc:
                logger.warning(
                    "Skipping debt projection",
                    extra={"debt_id": debt.id, "kind": exc.kind, "reason": str(exc)},
                )
                failures.append(_failure(exc, item_id=debt.id, name=debt.name))

        order = payoff_order(debts, "avalanche")
        return DebtsOverview(
            projections=projections,
            total_debt=sum_money(debt.balance for debt in debts),
            total_paid=sum(
                (max(to_money(d.principal) - to_money(d.balance), ZERO) for d in debts), ZERO
            ),
            weighted_rate=weighted_average_rate(debts),
            focus_debt=order[0] if order else None,
            count=len(debts),
            failures=failures,
        )

    # Savings --------------------------------------------------------------
    def savings_overview(self, user_id: int, *, as_of: date) -> SavingsOverview:
        goals = self.goals.list_for_user(user_id)
        active = [goal for goal in goals if goal.is_active]
        completed = [goal for goal in goals if not goal.is_active and is_completed(goal)]

        rows: list[GoalRow] = []
        failures: list[Failure] = []
        for goal in active:
            try:
                rows.append(
                    GoalRow(
                        goal=goal,
                        progress_pct=goal_progress_pct(goal.target_amount, goal.current_amount),
                        pacing=pace_goal(goal, as_of=as_of),
                    )
                )
            except GoalUnreachableError as exc:
                logger.warning(
                    "Savings goal has no contribution",
                    extra={"goal_id": goal.id, "required": exc.required_monthly_contribution},
                )
                failures.append(_failure(exc, item_id=goal.id, name=goal.name))
            except MetricsError as exc:
                logger.warning(
                    "Skipping savings goal",
                    extra={"goal_id": goal.id, "kind": exc.kind, "reason": str(exc)},
                )
                failures.append(_failure(exc, item_id=goal.id, name=goal.name))

        total_target = sum_money(goal.target_amount for goal in active)
        total_saved = sum_money(goal.current_amount for goal in active)
        pacings = [row.pacing for row in rows]
        return SavingsOverview(
            goals=rows,
            completed=completed,
            total_target=total_target,
            total_saved=total_saved,
            total_monthly_contribution=sum_money(goal.monthly_contribution for goal in active),
            overall_progress_pct=percent(total_saved, total_target) if total_target > 0 else ZERO,
            months_to_all_goals=longest_time_to_goal(pacings),
            average_months_to_goal=average_time_to_goal(pacings),
            failures=failures,
        )

    # Bills ----------------------------------------------------------------
    def bills_overview(self, user_id: int, *, as_of: date) -> BillsOverview:
        rows = [
            BillRow(bill=bill, classification=classify_bill(bill, as_of=as_of))
            for bill in self.bills.list_for_user(user_id)
        ]

        def _total(status: Optional[BillStatus] = None, *, unpaid: bool = False) -> tuple[Decimal, int]:
            selected = [
                row.bill
                for row in rows
                if (unpaid and row.classification.status != BillStatus.PAID)
                or (status is not None and row.classification.status == status)
            ]
            return sum_money(bill.amount for bill in selected), len(selected)

        paid_total, paid_count = _total(BillStatus.PAID)
        unpaid_total, unpaid_count = _total(unpaid=True)
        overdue_total, overdue_count = _total(BillStatus.OVERDUE)
        _, upcoming_count = _total(BillStatus.PENDING)

        return BillsOverview(
            bills=rows,
            total_amount=sum_money(row.bill.amount for row in rows),
            paid_total=paid_total,
            paid_count=paid_count,
            unpaid_total=unpaid_total,
            unpaid_count=unpaid_count,
            overdue_total=overdue_total,
            overdue_count=overdue_count,
            upcoming_count=upcoming_count,
            categories=sorted({row.bill.category for row in rows if row.bill.category}),
        )

    # Budget ---------------------------------------------------------------
    def budget_overview(self, user_id: int, *, as_of: date) -> Optional[BudgetOverview]:
        """Current pay period and a projection of the next; ``None`` without a budget."""

        budget = self.budgets.get_for_user(user_id)
        if budget is None:
            return None

        current = pay_period_for(budget.first_pay_date, budget.pay_frequency, as_of)
        spent = period_spend(
            self.transactions.list_for_user(user_id, start=current.start, end=current.next_start),
            current,
        )
        period_budget = compute_period_budget(
            budget.monthly_income, budget.pay_frequency, spent, current.start, current.end
        )

        upcoming = current.next()
        next_income = period_income(budget.monthly_income, budget.pay_frequency)
        next_bills = projected_bills(self.bills.list_for_user(user_id), upcoming)
        return BudgetOverview(
            budget=budget,
            current_period=current,
            period_budget=period_budget,
            advice=budget_recommendation(
                period_budget.remaining, threshold=self.low_remaining_threshold
            ),
            next_period=upcoming,
            next_period_income=next_income,
            next_period_bills=next_bills,
            next_period_available=next_income - next_bills,
        )

    # Transactions ---------------------------------------------------------
    def transactions_overview(
        self,
        user_id: int,
        *,
        search: Optional[str] = None,
        category: Optional[str] = None,
        type: Optional[TransactionType | str] = None,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> TransactionsOverview:
        """Totals always cover the whole date range; the list honours the filters."""

        transactions = self.transactions.list_for_user(user_id, start=start, end=end)
        return TransactionsOverview(
            totals=summarize_transactions(transactions),
            expenses_by_category=totals_by_category(transactions, type=TransactionType.EXPENSE),
            categories=sorted({txn.category for txn in transactions if txn.category}),
            transactions=filter_transactions(
                transactions, search=search, category=category, type=type
            ),
        )


def to_payload(value: Any) -> Any:
    """Convert summaries to JSON-safe primitives.

    Money becomes a two-decimal string, dates ISO strings, enums their value.
    Pay periods are rendered as their inclusive ``start``/``end`` days.
    """

    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Decimal):
        return str(quantize_cents(value))
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, PayPeriod):
        return {"start": value.start.isoformat(), "end": value.end.isoformat()}
    if is_dataclass(value) and not isinstance(value, type):
        return {f.name: to_payload(getattr(value, f.name)) for f in fields(value)}
    if isinstance(value, dict):
        return {str(to_payload(k)): to_payload(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_payload(item) for item in value]
    return value

__all__ = [
    "AccountsOverview",
    "BillRow",
    "BillsOverview",
    "BudgetOverview",
    "DashboardSummary",
    "DebtsOverview",
    "Failure",
    "FinanceSummaryService",
    "GoalRow",
    "SavingsOverview",
    "TransactionsOverview",
    "to_payload",
]
