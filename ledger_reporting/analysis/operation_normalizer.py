"""
Operation normalizer.

Projects each Horizon operation record onto a flat, JSON-safe
NormalizedOperation. One extractor per known operation kind; any other
kind keeps its raw record so new operation types still show up.
"""

import base64
import binascii
import copy
import logging
from typing import Any, Callable, Dict, Optional

from ..models.ledger import Operation, OperationKind
from ..models.reports import NormalizedOperation
from .assets import format_record_asset

logger = logging.getLogger(__name__)

DELETED_DATA_VALUE = "DELETED"

FieldExtractor = Callable[[Dict[str, Any]], Dict[str, Any]]


def _payment(raw: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "to": raw.get("to"),
        "amount": raw.get("amount"),
        "asset": format_record_asset(raw),
    }


def _create_account(raw: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "new_account": raw.get("account"),
        "starting_balance": raw.get("starting_balance"),
    }


def _change_trust(raw: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "asset": format_record_asset(raw),
        "limit": raw.get("limit"),
    }


def _allow_trust(raw: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "trustor": raw.get("trustor"),
        "asset": format_record_asset(raw),
        "authorize": raw.get("authorize"),
    }


def _set_options(raw: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "home_domain": raw.get("home_domain"),
        "inflation_dest": raw.get("inflation_dest"),
        "signer_key": raw.get("signer_key"),
        "signer_weight": raw.get("signer_weight"),
        "master_key_weight": raw.get("master_key_weight"),
    }


def decode_data_value(value: Any) -> Any:
    """
    Decode a manage_data value.

    Horizon returns the value base64-encoded, or null when the entry was
    removed. Values that are not base64 strings are returned unchanged.
    """
    if value is None:
        return DELETED_DATA_VALUE
    if not isinstance(value, str):
        logger.warning(f"manage_data value is not a string: {value!r}")
        return value
    try:
        decoded = base64.b64decode(value, validate=True)
    except (binascii.Error, ValueError):
        logger.warning(f"manage_data value is not valid base64: {value!r}")
        return value
    return decoded.decode("utf-8", errors="replace")


def _manage_data(raw: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "name": raw.get("name"),
        "value": decode_data_value(raw.get("value")),
    }


def _path_payment(raw: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "to": raw.get("to"),
        "amount": raw.get("amount"),
        "source_max": raw.get("source_max"),
        "asset": format_record_asset(raw),
    }


def _account_merge(raw: Dict[str, Any]) -> Dict[str, Any]:
    return {"into": raw.get("into")}


def _other(raw: Dict[str, Any]) -> Dict[str, Any]:
    return {"raw": copy.deepcopy(raw)}


EXTRACTORS: Dict[OperationKind, FieldExtractor] = {
    OperationKind.PAYMENT: _payment,
    OperationKind.CREATE_ACCOUNT: _create_account,
    OperationKind.CHANGE_TRUST: _change_trust,
    OperationKind.ALLOW_TRUST: _allow_trust,
    OperationKind.SET_OPTIONS: _set_options,
    OperationKind.MANAGE_DATA: _manage_data,
    OperationKind.PATH_PAYMENT_STRICT_SEND: _path_payment,
    OperationKind.PATH_PAYMENT_STRICT_RECEIVE: _path_payment,
    OperationKind.ACCOUNT_MERGE: _account_merge,
    OperationKind.OTHER: _other,
}


def normalize_operation(
    op: Operation,
    transaction_source_account: str,
) -> NormalizedOperation:
    """
    Normalize one operation.

    Args:
        op: Operation as returned by Horizon
        transaction_source_account: Used when the operation has no source
            account of its own

    Returns:
        NormalizedOperation keeping the original type string
    """
    extractor = EXTRACTORS[op.kind]
    return NormalizedOperation(
        type=op.type,
        source=op.source or transaction_source_account,
        fields=extractor(op.raw),
    )
