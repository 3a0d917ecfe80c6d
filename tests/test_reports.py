"""Tests for report generation."""

import json
from dataclasses import replace
from datetime import datetime, timezone

import pytest

from ledger_reporting.analysis.account_report import build_account_report
from ledger_reporting.analysis.transaction_report import build_transaction_report
from ledger_reporting.analysis.trustline_auditor import audit_trustlines
from ledger_reporting.models.ledger import Operation, Signer
from ledger_reporting.models.reports import TrustlineAudit
from ledger_reporting.reports.generator import ReportGenerator

from .conftest import ACCOUNT_ID, OTHER_ACCOUNT, TX_HASH


@pytest.fixture
def generator(settings):
    return ReportGenerator(settings)


@pytest.fixture
def account_report(sample_account, sample_transaction, payment_op):
    return build_account_report(sample_account, [payment_op], [sample_transaction])


@pytest.fixture
def transaction_report(sample_transaction, payment_op):
    ops = [
        payment_op,
        Operation.from_dict({"type": "bump_sequence", "bump_to": "42"}),
    ]
    return build_transaction_report(sample_transaction, ops)


class TestReportGenerator:
    """Tests for ReportGenerator."""

    def test_account_to_text(self, generator, account_report):
        text = generator.account_to_text(account_report)

        assert "Account Info" in text
        assert f"Account:        {ACCOUNT_ID}" in text
        assert "Home Domain:    example.com" in text
        assert "  - 686754.2506758 XLM" in text
        assert "Total payment operations: 1 (last 1 operations)" in text
        assert "Fee:     100 stroops" in text
        assert "Memo:    invoice 42" in text
        # Default self-signer is not shown
        assert "Signers:" not in text

    def test_account_to_text_shows_extra_signers(self, generator, sample_account):
        report = build_account_report(sample_account, [])
        report = replace(report, signers=[Signer(ACCOUNT_ID, 1), Signer(OTHER_ACCOUNT, 2)])
        text = generator.account_to_text(report)
        assert "Signers:" in text
        assert f"  - {OTHER_ACCOUNT} (weight: 2)" in text

    def test_transaction_to_text(self, generator, transaction_report):
        text = generator.transaction_to_text(transaction_report)

        assert "Transaction Info" in text
        assert f"Hash:        {TX_HASH}" in text
        assert "Status:      Success" in text
        assert "  #1: [payment]" in text
        assert "      Asset: XLM" in text
        assert "  #2: [bump_sequence]" in text
        assert '"bump_to": "42"' in text

    def test_trustlines_to_text(self, generator, sample_account):
        audit = TrustlineAudit(
            account=ACCOUNT_ID, network="public", trustlines=audit_trustlines(sample_account)
        )
        text = generator.trustlines_to_text(audit)

        assert "Trustlines Audit" in text
        assert "[zero balance]" in text
        assert text.count("[zero balance]") == 1

    def test_empty_trustlines(self, generator, native_only_account):
        audit = TrustlineAudit(
            account=ACCOUNT_ID,
            network="public",
            trustlines=audit_trustlines(native_only_account),
        )
        assert "No non-native trustlines found." in generator.to_text(audit)

    def test_to_json(self, generator, transaction_report):
        data = json.loads(generator.to_json(transaction_report))

        assert data["hash"] == TX_HASH
        assert data["created_at"] == "2024-07-09T08:29:31+00:00"
        assert data["operations"][0]["fields"]["asset"] == "XLM"
        assert data["operations"][1]["fields"]["raw"]["bump_to"] == "42"

    def test_default_filenames(self, generator, account_report, transaction_report):
        now = datetime(2024, 7, 9, 8, 29, 31, tzinfo=timezone.utc)

        account_name = generator.default_filename(account_report, now)
        tx_name = generator.default_filename(transaction_report, now)

        assert account_name.endswith(
            "account_GDJF...SGX5_2024-07-09T08-29-31+00-00.json"
        )
        assert tx_name.endswith("transaction_3389e9_2024-07-09T08-29-31+00-00.json")

    def test_write_json(self, settings, tmp_path, account_report):
        settings.report_output_dir = str(tmp_path / "reports")
        generator = ReportGenerator(settings)

        path = generator.write_json(account_report)

        with open(path) as f:
            data = json.load(f)
        assert data["account"] == ACCOUNT_ID
        assert path.startswith(str(tmp_path / "reports"))

    def test_write_json_explicit_path(self, generator, tmp_path, account_report):
        target = tmp_path / "out.json"
        assert generator.write_json(account_report, str(target)) == str(target)
        assert json.loads(target.read_text())["total_payments"] == 1
