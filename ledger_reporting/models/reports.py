"""
Report models produced by the builders.

Every report is built once and handed to the caller; ``to_dict`` output is
JSON-safe.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from .ledger import Signer


def _isoformat(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None


@dataclass(frozen=True)
class NormalizedOperation:
    """Canonical, flat rendering of one operation."""

    type: str
    source: str
    fields: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict:
        return {
            "type": self.type,
            "source": self.source,
            "fields": dict(self.fields),
        }


@dataclass(frozen=True)
class BalanceLine:
    """A balance with its asset rendered as "XLM" or "code:issuer"."""

    asset: str
    balance: str

    def to_dict(self) -> Dict:
        return {"asset": self.asset, "balance": self.balance}


@dataclass(frozen=True)
class TransactionSummary:
    """Short form of a transaction listed in an account report."""

    hash: str
    created_at: Optional[datetime]
    fee_charged: int
    successful: bool
    memo: Optional[str] = None

    def to_dict(self) -> Dict:
        return {
            "hash": self.hash,
            "created_at": _isoformat(self.created_at),
            "fee_charged": self.fee_charged,
            "successful": self.successful,
            "memo": self.memo,
        }


@dataclass(frozen=True)
class TrustlineEntry:
    """A non-native balance line."""

    asset: str
    balance: str
    limit: Optional[str]
    zero_balance: bool

    def to_dict(self) -> Dict:
        return {
            "asset": self.asset,
            "balance": self.balance,
            "limit": self.limit,
            "zero_balance": self.zero_balance,
        }


@dataclass(frozen=True)
class AccountReport:
    """
    Summary of an account.

    ``total_payments`` counts payment operations among the most recent
    ``operations_scanned`` operations only. It is an approximation bounded
    by a single page of history, not a lifetime count.
    """

    account: str
    sequence: int
    subentry_count: int
    home_domain: Optional[str]
    balances: List[BalanceLine] = field(default_factory=list)
    signers: List[Signer] = field(default_factory=list)
    total_payments: int = 0
    operations_scanned: int = 0
    transactions: Optional[List[TransactionSummary]] = None

    @property
    def show_signers(self) -> bool:
        """False only for the default setup: one signer, the account itself."""
        return not (
            len(self.signers) == 1 and self.signers[0].key == self.account
        )

    def to_dict(self) -> Dict:
        return {
            "account": self.account,
            "sequence": self.sequence,
            "subentry_count": self.subentry_count,
            "home_domain": self.home_domain,
            "balances": [b.to_dict() for b in self.balances],
            "signers": [s.to_dict() for s in self.signers],
            "total_payments": self.total_payments,
            "operations_scanned": self.operations_scanned,
            "transactions": (
                [t.to_dict() for t in self.transactions]
                if self.transactions is not None
                else None
            ),
        }


@dataclass(frozen=True)
class TransactionReport:
    """A transaction with its normalized operations in ledger apply order."""

    hash: str
    ledger: int
    created_at: Optional[datetime]
    source_account: str
    fee_charged: int
    successful: bool
    operation_count: int
    memo: Optional[str] = None
    operations: List[NormalizedOperation] = field(default_factory=list)

    def to_dict(self) -> Dict:
        return {
            "hash": self.hash,
            "ledger": self.ledger,
            "created_at": _isoformat(self.created_at),
            "source_account": self.source_account,
            "fee_charged": self.fee_charged,
            "memo": self.memo,
            "successful": self.successful,
            "operation_count": self.operation_count,
            "operations": [op.to_dict() for op in self.operations],
        }


@dataclass(frozen=True)
class TrustlineAudit:
    """Trustline audit result for one account on one network."""

    account: str
    network: str
    trustlines: List[TrustlineEntry] = field(default_factory=list)

    @property
    def zero_balance_count(self) -> int:
        return sum(1 for t in self.trustlines if t.zero_balance)

    def to_dict(self) -> Dict:
        return {
            "account": self.account,
            "network": self.network,
            "trustlines": [t.to_dict() for t in self.trustlines],
        }
