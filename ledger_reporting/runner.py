"""
Ledger reporting runner.

Main entry point for the command line.
"""

import argparse
import logging
import sys
from dataclasses import dataclass
from typing import Optional, Union

from .config import LedgerReportingSettings, load_settings
from .exceptions import LedgerReportingError
from .reporter import LedgerReporter
from .reports.generator import Report, ReportGenerator

logger = logging.getLogger(__name__)


@dataclass
class OutputOptions:
    """Resolved network and output options shared by every command."""

    network: str
    json: bool = False
    # None: stdout; True: default filename; str: explicit path
    out: Union[None, bool, str] = None


def resolve_options(
    args: argparse.Namespace,
    settings: LedgerReportingSettings,
) -> OutputOptions:
    """Resolve command-line flags against configured defaults."""
    network = getattr(args, "network", None) or settings.default_network
    out = getattr(args, "out", None)
    want_json = bool(getattr(args, "json", False)) or out is not None

    # "." explicitly asks for stdout
    if out == ".":
        out = None

    return OutputOptions(network=network, json=want_json, out=out)


class LedgerRunner:
    """
    Runner for the ledger reporting commands.

    Supports:
    - account: account summary with optional recent transactions
    - transaction: transaction with normalized operations
    - trustlines: trustline audit
    """

    def __init__(
        self,
        settings: LedgerReportingSettings,
        options: OutputOptions,
        reporter: Optional[LedgerReporter] = None,
    ):
        self.settings = settings
        self.options = options
        self.reporter = reporter or LedgerReporter(settings, network=options.network)
        self.generator = ReportGenerator(settings)
        self._shutdown_called = False

    def emit(self, report: Report) -> Optional[str]:
        """
        Print or save a report according to the output options.

        Returns:
            Path of the written file, if any
        """
        if not self.options.json:
            print(self.generator.to_text(report))
            return None

        if self.options.out is None:
            sys.stdout.write(self.generator.to_json(report))
            sys.stdout.write("\n")
            return None

        output_path = self.options.out if isinstance(self.options.out, str) else None
        path = self.generator.write_json(report, output_path)
        print(f"JSON saved to {path}")
        return path

    def run_account(self, account: str, include_transactions: bool = False) -> Optional[str]:
        report = self.reporter.account_report(account, include_transactions)
        return self.emit(report)

    def run_transaction(self, tx_hash: str) -> Optional[str]:
        report = self.reporter.transaction_report(tx_hash)
        return self.emit(report)

    def run_trustlines(self, account: str) -> Optional[str]:
        audit = self.reporter.trustline_audit(account)
        return self.emit(audit)

    def shutdown(self) -> None:
        """Clean up resources. Safe to call multiple times."""
        if not self._shutdown_called:
            self._shutdown_called = True
            self.reporter.shutdown()


def _add_output_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--network",
        help="Network: public, testnet, or a custom Horizon URL",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Return JSON output",
    )
    parser.add_argument(
        "--out",
        nargs="?",
        const=True,
        default=None,
        help="Write JSON output to a file (default name if omitted, '.' for stdout)",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ledger-reporting",
        description="Stellar ledger account and transaction reports",
    )
    parser.add_argument(
        "--config",
        "-c",
        help="Path to config file",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: from config)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    account_parser = subparsers.add_parser(
        "get-account-info", help="Fetch detailed information about an account"
    )
    account_parser.add_argument("--account", required=True, help="Public account address")
    account_parser.add_argument(
        "--get-transactions",
        action="store_true",
        help="Include the last transactions",
    )
    _add_output_arguments(account_parser)

    tx_parser = subparsers.add_parser(
        "get-transaction-info", help="Fetch detailed information about a transaction"
    )
    tx_parser.add_argument("--transaction", required=True, help="Transaction hash to fetch")
    _add_output_arguments(tx_parser)

    audit_parser = subparsers.add_parser(
        "audit-trustlines", help="Audit asset trustlines for an account"
    )
    audit_parser.add_argument("--account", required=True, help="Public account address")
    _add_output_arguments(audit_parser)

    return parser


FAILURE_MESSAGES = {
    "get-account-info": "Failed to fetch account info",
    "get-transaction-info": "Failed to fetch transaction info",
    "audit-trustlines": "Failed to audit trustlines",
}


def main(argv=None):
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = load_settings(args.config)

    # Logs go to stderr so JSON on stdout stays parseable
    logging.basicConfig(
        level=getattr(logging, args.log_level or settings.log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    if not args.command:
        parser.print_help()
        sys.exit(1)

    runner = LedgerRunner(settings, resolve_options(args, settings))

    try:
        if args.command == "get-account-info":
            runner.run_account(args.account, args.get_transactions)

        elif args.command == "get-transaction-info":
            runner.run_transaction(args.transaction)

        elif args.command == "audit-trustlines":
            runner.run_trustlines(args.account)

    except (LedgerReportingError, OSError) as e:
        logger.error(f"{FAILURE_MESSAGES[args.command]}: {e}")
        sys.exit(1)

    finally:
        runner.shutdown()


if __name__ == "__main__":
    main()
