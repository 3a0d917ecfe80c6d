"""
Ledger Reporting - Stellar account and transaction reports.

Queries Horizon and normalizes its polymorphic operation records into
stable, JSON-safe account, transaction and trustline reports.
"""

from .reporter import LedgerReporter
from .runner import LedgerRunner

__version__ = "0.1.0"
__all__ = ["LedgerReporter", "LedgerRunner"]
