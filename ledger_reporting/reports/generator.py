"""
Report generator.

Renders ledger reports as plain text or JSON.
"""

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional, Union

from ..config import LedgerReportingSettings
from ..models.reports import AccountReport, TransactionReport, TrustlineAudit

logger = logging.getLogger(__name__)

Report = Union[AccountReport, TransactionReport, TrustlineAudit]

SEPARATOR = "-------------------"


def _label(key: str) -> str:
    """Turn a field key like source_max into "Source max"."""
    return key.replace("_", " ").capitalize()


class ReportGenerator:
    """Generates formatted output from ledger reports."""

    def __init__(self, settings: LedgerReportingSettings):
        self.settings = settings

    def to_json(self, report: Report) -> str:
        """Serialize a report as indented JSON."""
        return json.dumps(report.to_dict(), indent=2, default=str)

    def default_filename(self, report: Report, now: Optional[datetime] = None) -> str:
        """Timestamped filename for a report saved without an explicit name."""
        ts = (now or datetime.now(timezone.utc)).isoformat().replace(":", "-")

        if isinstance(report, AccountReport):
            short = f"{report.account[:4]}...{report.account[-4:]}"
            name = f"account_{short}_{ts}.json"
        elif isinstance(report, TransactionReport):
            name = f"transaction_{report.hash[:6]}_{ts}.json"
        else:
            name = f"trustlines_{report.account[:4]}_{ts}.json"

        return str(Path(self.settings.report_output_dir) / name)

    def write_json(self, report: Report, output_path: Optional[str] = None) -> str:
        """
        Write a report as JSON.

        Args:
            report: The report to write
            output_path: Target file, or None for a default timestamped name

        Returns:
            Path the report was written to
        """
        path = Path(output_path or self.default_filename(report))
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            f.write(self.to_json(report))

        logger.info(f"Report saved to {path}")
        return str(path)

    def account_to_text(self, report: AccountReport) -> str:
        lines: List[str] = []

        lines.append("Account Info")
        lines.append(SEPARATOR)
        lines.append(f"Account:        {report.account}")
        lines.append(f"Sequence:       {report.sequence}")
        lines.append(f"Subentry Count: {report.subentry_count}")
        if report.home_domain:
            lines.append(f"Home Domain:    {report.home_domain}")
        lines.append(SEPARATOR)

        if report.show_signers:
            lines.append("Signers:")
            for signer in report.signers:
                lines.append(f"  - {signer.key} (weight: {signer.weight})")
            lines.append(SEPARATOR)

        lines.append("Balances:")
        for balance in report.balances:
            lines.append(f"  - {balance.balance} {balance.asset}")
        lines.append(SEPARATOR)

        lines.append(
            f"Total payment operations: {report.total_payments} "
            f"(last {report.operations_scanned} operations)"
        )

        if report.transactions:
            lines.append(SEPARATOR)
            lines.append(f"Last {len(report.transactions)} Transactions:")
            for i, tx in enumerate(report.transactions, start=1):
                created = tx.created_at.isoformat() if tx.created_at else "-"
                lines.append(f"  #{i}:")
                lines.append(f"    Hash:    {tx.hash}")
                lines.append(f"    Created: {created}")
                lines.append(f"    Fee:     {tx.fee_charged} stroops")
                lines.append(f"    Success: {'yes' if tx.successful else 'no'}")
                lines.append(f"    Memo:    {tx.memo or '(none)'}")

        return "\n".join(lines)

    def transaction_to_text(self, report: TransactionReport) -> str:
        lines: List[str] = []
        created = report.created_at.isoformat() if report.created_at else "-"

        lines.append("Transaction Info")
        lines.append(SEPARATOR)
        lines.append(f"Hash:        {report.hash}")
        lines.append(f"Ledger:      {report.ledger}")
        lines.append(f"Created At:  {created}")
        lines.append(f"Source:      {report.source_account}")
        lines.append(f"Fee:         {report.fee_charged} stroops")
        lines.append(f"Memo:        {report.memo or '(none)'}")
        lines.append(f"Status:      {'Success' if report.successful else 'Failed'}")
        lines.append(f"Operations:  {report.operation_count}")
        lines.append(SEPARATOR)

        for i, op in enumerate(report.operations, start=1):
            lines.append(f"  #{i}: [{op.type}]")
            lines.append(f"      From: {op.source}")
            for key, value in op.fields.items():
                if key == "raw":
                    value = json.dumps(value, default=str)
                lines.append(f"      {_label(key)}: {value}")

        return "\n".join(lines)

    def trustlines_to_text(self, audit: TrustlineAudit) -> str:
        lines: List[str] = []

        lines.append("Trustlines Audit")
        lines.append(SEPARATOR)
        if not audit.trustlines:
            lines.append("No non-native trustlines found.")
            return "\n".join(lines)

        for i, t in enumerate(audit.trustlines, start=1):
            mark = " [zero balance]" if t.zero_balance else ""
            lines.append(f"#{i}: Asset: {t.asset}{mark}")
            lines.append(f"    Balance: {t.balance}")
            lines.append(f"    Limit:   {t.limit}")

        return "\n".join(lines)

    def to_text(self, report: Report) -> str:
        """Render any report as text."""
        if isinstance(report, AccountReport):
            return self.account_to_text(report)
        if isinstance(report, TransactionReport):
            return self.transaction_to_text(report)
        return self.trustlines_to_text(report)
