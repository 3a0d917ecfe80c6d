"""
Asset formatting shared by every report.
"""

from typing import Dict, Optional

from ..models.ledger import AssetKind, Balance

NATIVE_ASSET_CODE = "XLM"

# Stands in for a code or issuer missing from an issued-asset record
UNKNOWN_PART = "unknown"


def format_asset(
    kind: AssetKind,
    asset_code: Optional[str] = None,
    asset_issuer: Optional[str] = None,
    liquidity_pool_id: Optional[str] = None,
) -> str:
    """
    Render an asset the way every report shows it.

    Native lumens become "XLM", issued assets "CODE:ISSUER" and liquidity
    pool shares "pool:<id>". A missing code or issuer renders as "unknown".
    """
    if kind == AssetKind.NATIVE:
        return NATIVE_ASSET_CODE
    if kind == AssetKind.LIQUIDITY_POOL:
        return f"pool:{liquidity_pool_id}"
    return f"{asset_code or UNKNOWN_PART}:{asset_issuer or UNKNOWN_PART}"


def format_record_asset(record: Dict, prefix: str = "") -> str:
    """Format the asset described by ``{prefix}asset_type`` etc. in a raw record."""
    return format_asset(
        AssetKind.from_asset_type(record.get(f"{prefix}asset_type")),
        record.get(f"{prefix}asset_code"),
        record.get(f"{prefix}asset_issuer"),
        record.get(f"{prefix}liquidity_pool_id"),
    )


def format_balance_asset(balance: Balance) -> str:
    """Format the asset of a parsed balance line."""
    return format_asset(
        balance.asset_kind,
        balance.asset_code,
        balance.asset_issuer,
        balance.liquidity_pool_id,
    )
