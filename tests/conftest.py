"""Pytest configuration and shared fixtures."""

import pytest

from ledger_reporting.config import LedgerReportingSettings
from ledger_reporting.models.ledger import Account, Operation, Transaction

ACCOUNT_ID = "GDJF3HLA53SLZ47BV6M2RHO5EBWT44RAYDPAOI6ENIDI4F44LODJSGX5"
ISSUER = "GAOURM3PGXAIIWUVBTLMJBY4T5LPZGUMLG6PLLQQH5FF2UB35YBPIG76"
OTHER_ACCOUNT = "GCLZAIXJIRECWWUSCEJJSFWSTQ6XZ7YEQNVXVICQCHG3X53ZOWN2OM7Z"
TX_HASH = "3389e9f0f1a65f19736cacf544c2e825313e8447f569233bb8db39aa607c8889"


def make_operation(op_type: str, **attrs) -> Operation:
    """Helper to build an Operation the way Horizon returns it."""
    data = {"id": "12884905985", "type": op_type, "source_account": ACCOUNT_ID}
    data.update(attrs)
    return Operation.from_dict(data)


@pytest.fixture
def settings():
    """Create default test settings."""
    return LedgerReportingSettings()


@pytest.fixture
def account_data():
    """Horizon account resource with a native and an issued balance."""
    return {
        "id": ACCOUNT_ID,
        "account_id": ACCOUNT_ID,
        "sequence": "145182521808907275",
        "subentry_count": 3,
        "home_domain": "example.com",
        "balances": [
            {
                "balance": "686754.2506758",
                "buying_liabilities": "0.0000000",
                "selling_liabilities": "0.0000000",
                "asset_type": "native",
            },
            {
                "balance": "0.0000000",
                "limit": "1000.0000000",
                "asset_type": "credit_alphanum4",
                "asset_code": "USD",
                "asset_issuer": ISSUER,
            },
            {
                "balance": "12.5000000",
                "limit": "922337203685.4775807",
                "asset_type": "credit_alphanum12",
                "asset_code": "EURTOKEN",
                "asset_issuer": ISSUER,
            },
        ],
        "signers": [
            {"weight": 1, "key": ACCOUNT_ID, "type": "ed25519_public_key"},
        ],
    }


@pytest.fixture
def sample_account(account_data):
    return Account.from_dict(account_data)


@pytest.fixture
def native_only_account(account_data):
    account_data["balances"] = account_data["balances"][:1]
    return Account.from_dict(account_data)


@pytest.fixture
def transaction_data():
    """Horizon transaction resource."""
    return {
        "hash": TX_HASH,
        "ledger": 52491094,
        "created_at": "2024-07-09T08:29:31Z",
        "source_account": ACCOUNT_ID,
        "fee_charged": "100",
        "memo_type": "text",
        "memo": "invoice 42",
        "successful": True,
        "operation_count": 2,
    }


@pytest.fixture
def sample_transaction(transaction_data):
    return Transaction.from_dict(transaction_data)


@pytest.fixture
def payment_op():
    return make_operation(
        "payment",
        to=OTHER_ACCOUNT,
        amount="25.0000000",
        asset_type="native",
    )


@pytest.fixture
def issued_payment_op():
    return make_operation(
        "payment",
        to=OTHER_ACCOUNT,
        amount="10.0000000",
        asset_type="credit_alphanum4",
        asset_code="USD",
        asset_issuer=ISSUER,
    )
