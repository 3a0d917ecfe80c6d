"""
Ledger record models matching Horizon's JSON resources.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional


class AssetKind(Enum):
    """What kind of asset a balance line holds."""

    NATIVE = "native"
    ISSUED = "issued"
    LIQUIDITY_POOL = "liquidity_pool"

    @classmethod
    def from_asset_type(cls, asset_type: Optional[str]) -> "AssetKind":
        """Map Horizon's asset_type (credit_alphanum4, ...) to a kind."""
        if asset_type == "native":
            return cls.NATIVE
        if asset_type == "liquidity_pool_shares":
            return cls.LIQUIDITY_POOL
        return cls.ISSUED


class OperationKind(Enum):
    """Operation types with a dedicated normalization; OTHER covers the rest."""

    PAYMENT = "payment"
    CREATE_ACCOUNT = "create_account"
    CHANGE_TRUST = "change_trust"
    ALLOW_TRUST = "allow_trust"
    SET_OPTIONS = "set_options"
    MANAGE_DATA = "manage_data"
    PATH_PAYMENT_STRICT_SEND = "path_payment_strict_send"
    PATH_PAYMENT_STRICT_RECEIVE = "path_payment_strict_receive"
    ACCOUNT_MERGE = "account_merge"
    OTHER = "other"

    @classmethod
    def from_type(cls, op_type: Optional[str]) -> "OperationKind":
        """Resolve an operation type string; unknown types map to OTHER."""
        try:
            kind = cls(op_type)
        except ValueError:
            return cls.OTHER
        return kind


def parse_timestamp(value: Any) -> Optional[datetime]:
    """Parse Horizon's ISO-8601 timestamps ("2024-07-09T08:29:31Z")."""
    if not value:
        return None
    if isinstance(value, datetime):
        parsed = value
    else:
        try:
            parsed = datetime.fromisoformat(str(value).replace("Z", "+00:00"))
        except (ValueError, TypeError):
            return None
    # Horizon timestamps are UTC; offset-less values are read as UTC
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


@dataclass(frozen=True)
class Balance:
    """One balance line of an account."""

    asset_kind: AssetKind
    amount: str
    asset_code: Optional[str] = None
    asset_issuer: Optional[str] = None
    limit: Optional[str] = None
    liquidity_pool_id: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict) -> "Balance":
        """Create from a Horizon balance entry."""
        kind = AssetKind.from_asset_type(data.get("asset_type"))
        if kind == AssetKind.NATIVE:
            return cls(asset_kind=kind, amount=data.get("balance", "0"))
        return cls(
            asset_kind=kind,
            amount=data.get("balance", "0"),
            asset_code=data.get("asset_code"),
            asset_issuer=data.get("asset_issuer"),
            limit=data.get("limit"),
            liquidity_pool_id=data.get("liquidity_pool_id"),
        )

    @property
    def is_native(self) -> bool:
        return self.asset_kind == AssetKind.NATIVE


@dataclass(frozen=True)
class Signer:
    """Account signer and its weight."""

    key: str
    weight: int

    @classmethod
    def from_dict(cls, data: Dict) -> "Signer":
        return cls(key=data.get("key", ""), weight=int(data.get("weight", 0)))

    def to_dict(self) -> Dict:
        return {"key": self.key, "weight": self.weight}


@dataclass(frozen=True)
class Account:
    """Account snapshot from GET /accounts/{id}."""

    account_id: str
    sequence: int
    subentry_count: int = 0
    home_domain: Optional[str] = None
    balances: List[Balance] = field(default_factory=list)
    signers: List[Signer] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict) -> "Account":
        """Create from a Horizon account resource."""
        return cls(
            account_id=data.get("account_id") or data["id"],
            # Horizon serializes the sequence number as a string
            sequence=int(data.get("sequence", 0)),
            subentry_count=int(data.get("subentry_count", 0)),
            home_domain=data.get("home_domain") or None,
            balances=[Balance.from_dict(b) for b in data.get("balances", [])],
            signers=[Signer.from_dict(s) for s in data.get("signers", [])],
        )


@dataclass(frozen=True)
class Operation:
    """
    One operation record.

    ``raw`` keeps the record exactly as Horizon returned it; the
    per-kind attributes are read from it by the normalizer.
    """

    type: str
    source: Optional[str] = None
    raw: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict) -> "Operation":
        return cls(
            type=data.get("type", ""),
            source=data.get("source_account") or None,
            raw=data,
        )

    @property
    def kind(self) -> OperationKind:
        return OperationKind.from_type(self.type)


@dataclass(frozen=True)
class Transaction:
    """Transaction record from GET /transactions/{hash}."""

    hash: str
    ledger: int
    created_at: Optional[datetime]
    source_account: str
    fee_charged: int
    successful: bool
    operation_count: int
    memo: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict) -> "Transaction":
        """Create from a Horizon transaction resource."""
        return cls(
            hash=data["hash"],
            ledger=int(data.get("ledger", 0)),
            created_at=parse_timestamp(data.get("created_at")),
            source_account=data.get("source_account", ""),
            # fee_charged arrives as a string of stroops
            fee_charged=int(data.get("fee_charged", 0)),
            successful=bool(data.get("successful", False)),
            operation_count=int(data.get("operation_count", 0)),
            memo=data.get("memo") or None,
        )
