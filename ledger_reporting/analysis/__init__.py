"""Normalization and report building over ledger records."""

from .account_report import build_account_report
from .operation_normalizer import normalize_operation
from .transaction_report import build_transaction_report
from .trustline_auditor import audit_trustlines

__all__ = [
    "build_account_report",
    "build_transaction_report",
    "normalize_operation",
    "audit_trustlines",
]
