"""
Account report builder.

Combines an account snapshot with a bounded window of its recent
operations (and optionally transactions) into an AccountReport.
"""

from datetime import datetime, timezone
from typing import List, Optional, Sequence

from ..models.ledger import Account, Operation, OperationKind, Transaction
from ..models.reports import AccountReport, BalanceLine, TransactionSummary
from .assets import format_balance_asset

DEFAULT_PAYMENT_WINDOW = 200
DEFAULT_RECENT_TRANSACTIONS = 5

_OLDEST = datetime.min.replace(tzinfo=timezone.utc)


def count_payments(operations: Sequence[Operation], window: int = DEFAULT_PAYMENT_WINDOW) -> int:
    """Count payment operations among the first ``window`` (most recent) operations."""
    return sum(1 for op in operations[:window] if op.kind == OperationKind.PAYMENT)


def summarize_transactions(
    transactions: Sequence[Transaction],
    limit: int = DEFAULT_RECENT_TRANSACTIONS,
) -> List[TransactionSummary]:
    """Newest-first summaries of at most ``limit`` transactions."""
    newest_first = sorted(
        transactions,
        key=lambda tx: tx.created_at or _OLDEST,
        reverse=True,
    )
    return [
        TransactionSummary(
            hash=tx.hash,
            created_at=tx.created_at,
            fee_charged=tx.fee_charged,
            successful=tx.successful,
            memo=tx.memo,
        )
        for tx in newest_first[:limit]
    ]


def build_account_report(
    account: Account,
    recent_ops: Sequence[Operation],
    recent_txs: Optional[Sequence[Transaction]] = None,
    payment_window: int = DEFAULT_PAYMENT_WINDOW,
    transaction_limit: int = DEFAULT_RECENT_TRANSACTIONS,
) -> AccountReport:
    """
    Build an account report.

    ``total_payments`` is only as good as the operation window: it counts
    payments among the most recent ``payment_window`` operations and says
    nothing about older history.

    Args:
        account: Account snapshot
        recent_ops: Account operations, most recent first
        recent_txs: Recent transactions, or None to leave them out
        payment_window: Maximum operations scanned for payments
        transaction_limit: Maximum transactions included

    Returns:
        AccountReport
    """
    scanned = min(len(recent_ops), payment_window)

    transactions = None
    if recent_txs is not None:
        transactions = summarize_transactions(recent_txs, transaction_limit)

    return AccountReport(
        account=account.account_id,
        sequence=account.sequence,
        subentry_count=account.subentry_count,
        home_domain=account.home_domain,
        balances=[
            BalanceLine(asset=format_balance_asset(b), balance=b.amount)
            for b in account.balances
        ],
        signers=list(account.signers),
        total_payments=count_payments(recent_ops, payment_window),
        operations_scanned=scanned,
        transactions=transactions,
    )
