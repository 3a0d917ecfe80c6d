"""
Main ledger reporter.

Validates identifiers, queries Horizon and hands the raw records to the
report builders. Any query failure aborts the report and propagates.
"""

import logging
import re
from typing import Optional

from .analysis.account_report import build_account_report
from .analysis.transaction_report import build_transaction_report
from .analysis.trustline_auditor import audit_trustlines
from .config import LedgerReportingSettings
from .data.horizon_client import HorizonClient
from .exceptions import ValidationError
from .models.reports import AccountReport, TransactionReport, TrustlineAudit

logger = logging.getLogger(__name__)

ACCOUNT_ADDRESS_PATTERN = re.compile(r"^G[A-Z2-7]{55}$")
TRANSACTION_HASH_PATTERN = re.compile(r"^[0-9a-fA-F]{64}$")


def validate_account_address(address: Optional[str]) -> str:
    """Check a public account address (G..., 56 base32 characters)."""
    if not address:
        raise ValidationError("account", "an account address is required")
    address = address.strip()
    if not ACCOUNT_ADDRESS_PATTERN.match(address):
        raise ValidationError(
            "account", f"'{address}' is not a public account address (G... 56 chars)"
        )
    return address


def validate_transaction_hash(tx_hash: Optional[str]) -> str:
    """Check a transaction hash (64 hex characters)."""
    if not tx_hash:
        raise ValidationError("transaction", "a transaction hash is required")
    tx_hash = tx_hash.strip()
    if not TRANSACTION_HASH_PATTERN.match(tx_hash):
        raise ValidationError("transaction", "must be a 64-character hex hash")
    return tx_hash.lower()


class LedgerReporter:
    """
    Main entry point for building ledger reports.

    Issues sequential queries through the ledger client and runs the pure
    builders over the results.
    """

    def __init__(
        self,
        settings: LedgerReportingSettings,
        network: Optional[str] = None,
        client: Optional[HorizonClient] = None,
    ):
        self.settings = settings
        self.network = network or settings.default_network
        self.client = client or HorizonClient(
            settings.resolve_horizon_url(self.network),
            timeout=settings.horizon.request_timeout,
        )

    def account_report(
        self,
        address: str,
        include_transactions: bool = False,
    ) -> AccountReport:
        """
        Build a report for an account.

        The payment count covers one page of recent operations
        (``report.operations_window``), not the full history.
        """
        address = validate_account_address(address)
        window = self.settings.report.operations_window

        account = self.client.load_account(address)
        operations = self.client.list_operations(
            for_account=address, order="desc", limit=window
        )

        transactions = None
        if include_transactions:
            transactions = self.client.list_transactions(
                for_account=address,
                order="desc",
                limit=self.settings.report.recent_transactions,
            )

        report = build_account_report(
            account,
            operations,
            transactions,
            payment_window=window,
            transaction_limit=self.settings.report.recent_transactions,
        )
        logger.info(
            f"Account report for {address}: {len(report.balances)} balances, "
            f"{report.total_payments} payments in last {report.operations_scanned} operations"
        )
        return report

    def transaction_report(self, tx_hash: str) -> TransactionReport:
        """Build a report for a transaction and its operations."""
        tx_hash = validate_transaction_hash(tx_hash)

        transaction = self.client.get_transaction(tx_hash)
        operations = self.client.list_operations(
            for_transaction=tx_hash,
            order="asc",
            limit=self.settings.report.transaction_operations_limit,
        )

        report = build_transaction_report(transaction, operations)
        logger.info(
            f"Transaction report for {tx_hash}: {len(report.operations)} operations"
        )
        return report

    def trustline_audit(self, address: str) -> TrustlineAudit:
        """Audit an account's trustlines."""
        address = validate_account_address(address)

        account = self.client.load_account(address)
        audit = TrustlineAudit(
            account=address,
            network=self.network,
            trustlines=audit_trustlines(account),
        )
        logger.info(
            f"Trustline audit for {address}: {len(audit.trustlines)} trustlines, "
            f"{audit.zero_balance_count} with zero balance"
        )
        return audit

    def shutdown(self) -> None:
        """Clean up resources."""
        self.client.close()
