"""
Trustline auditor.

Lists an account's non-native balance lines and flags the ones holding
nothing.
"""

import logging
from decimal import Decimal, InvalidOperation
from typing import List

from ..models.ledger import Account
from ..models.reports import TrustlineEntry
from .assets import format_balance_asset

logger = logging.getLogger(__name__)


def is_zero_balance(amount: str) -> bool:
    """Exact decimal comparison against zero ("0.0000000" is zero)."""
    try:
        return Decimal(amount) == 0
    except (InvalidOperation, TypeError):
        logger.warning(f"Unparseable balance {amount!r}, treating as non-zero")
        return False


def audit_trustlines(account: Account) -> List[TrustlineEntry]:
    """
    Audit an account's trustlines.

    The native balance is skipped; every other line is kept in the order
    Horizon returned it, without deduplication.
    """
    return [
        TrustlineEntry(
            asset=format_balance_asset(balance),
            balance=balance.amount,
            limit=balance.limit,
            zero_balance=is_zero_balance(balance.amount),
        )
        for balance in account.balances
        if not balance.is_native
    ]
