"""Ledger reporting models."""

from .ledger import (
    Account,
    AssetKind,
    Balance,
    Operation,
    OperationKind,
    Signer,
    Transaction,
)
from .reports import (
    AccountReport,
    BalanceLine,
    NormalizedOperation,
    TransactionReport,
    TransactionSummary,
    TrustlineAudit,
    TrustlineEntry,
)

__all__ = [
    "Account",
    "AssetKind",
    "Balance",
    "Operation",
    "OperationKind",
    "Signer",
    "Transaction",
    "AccountReport",
    "BalanceLine",
    "NormalizedOperation",
    "TransactionReport",
    "TransactionSummary",
    "TrustlineAudit",
    "TrustlineEntry",
]
