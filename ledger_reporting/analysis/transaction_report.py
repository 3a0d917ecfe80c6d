"""
Transaction report builder.
"""

from typing import Sequence

from ..models.ledger import Operation, Transaction
from ..models.reports import TransactionReport
from .operation_normalizer import normalize_operation


def build_transaction_report(
    tx: Transaction,
    ops: Sequence[Operation],
) -> TransactionReport:
    """
    Build a transaction report.

    Operations keep the order Horizon returned them in (ledger apply
    order). Each one falls back to the transaction's source account.
    """
    return TransactionReport(
        hash=tx.hash,
        ledger=tx.ledger,
        created_at=tx.created_at,
        source_account=tx.source_account,
        fee_charged=tx.fee_charged,
        successful=tx.successful,
        operation_count=tx.operation_count,
        memo=tx.memo,
        operations=[normalize_operation(op, tx.source_account) for op in ops],
    )
