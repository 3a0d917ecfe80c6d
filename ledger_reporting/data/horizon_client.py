"""
Horizon REST client.

Reads accounts, operations and transactions from a Stellar Horizon
server. One request per call: no paging, no retries. Failures are raised
as NotFoundError or NetworkError with Horizon's problem detail attached.
"""

import logging
from typing import Any, Dict, List, Optional

import requests

from ..exceptions import NetworkError, NotFoundError
from ..models.ledger import Account, Operation, Transaction

logger = logging.getLogger(__name__)

ORDERS = ("asc", "desc")


def _problem_detail(resp: requests.Response) -> Optional[str]:
    """Pull the human-readable part out of a Horizon problem+json body."""
    try:
        body = resp.json()
    except ValueError:
        return resp.text or None
    if isinstance(body, dict):
        return body.get("detail") or body.get("title")
    return None


class HorizonClient:
    """Ledger query service backed by Horizon's REST API."""

    def __init__(
        self,
        base_url: str = "https://horizon.stellar.org",
        timeout: int = 10,
        session: Optional[requests.Session] = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._session = session or requests.Session()

    @property
    def base_url(self) -> str:
        return self._base_url

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self._session.close()

    def _get(
        self,
        path: str,
        resource: str,
        identifier: str,
        params: Optional[Dict[str, Any]] = None,
    ) -> Dict:
        url = f"{self._base_url}{path}"
        logger.debug(f"GET {url} params={params}")

        try:
            resp = self._session.get(url, params=params, timeout=self._timeout)
        except requests.RequestException as e:
            logger.error(f"Request to Horizon failed: {e}")
            raise NetworkError(f"Request to {url} failed: {e}") from e

        if resp.status_code == 404:
            raise NotFoundError(resource, identifier, _problem_detail(resp))

        try:
            resp.raise_for_status()
        except requests.HTTPError as e:
            detail = _problem_detail(resp) or str(e)
            logger.error(f"Horizon returned {resp.status_code} for {url}: {detail}")
            raise NetworkError(detail, status_code=resp.status_code) from e

        try:
            return resp.json()
        except ValueError as e:
            raise NetworkError(
                f"Malformed JSON from {url}", status_code=resp.status_code
            ) from e

    @staticmethod
    def _records(page: Dict) -> List[Dict]:
        return page.get("_embedded", {}).get("records", [])

    @staticmethod
    def _page_params(order: str, limit: int) -> Dict[str, Any]:
        if order not in ORDERS:
            raise ValueError(f"order must be one of {ORDERS}, got {order!r}")
        return {"order": order, "limit": limit}

    def load_account(self, address: str) -> Account:
        """Fetch an account snapshot."""
        data = self._get(f"/accounts/{address}", "Account", address)
        return Account.from_dict(data)

    def list_operations(
        self,
        for_account: Optional[str] = None,
        for_transaction: Optional[str] = None,
        order: str = "desc",
        limit: int = 200,
    ) -> List[Operation]:
        """
        List one page of operations for an account or a transaction.

        Exactly one of ``for_account`` and ``for_transaction`` must be given.
        """
        if (for_account is None) == (for_transaction is None):
            raise ValueError("Pass exactly one of for_account or for_transaction")

        if for_account is not None:
            path, resource, identifier = (
                f"/accounts/{for_account}/operations", "Account", for_account
            )
        else:
            path, resource, identifier = (
                f"/transactions/{for_transaction}/operations",
                "Transaction",
                for_transaction,
            )

        page = self._get(path, resource, identifier, self._page_params(order, limit))
        return [Operation.from_dict(r) for r in self._records(page)]

    def list_transactions(
        self,
        for_account: str,
        order: str = "desc",
        limit: int = 5,
    ) -> List[Transaction]:
        """List one page of an account's transactions."""
        page = self._get(
            f"/accounts/{for_account}/transactions",
            "Account",
            for_account,
            self._page_params(order, limit),
        )
        return [Transaction.from_dict(r) for r in self._records(page)]

    def get_transaction(self, tx_hash: str) -> Transaction:
        """Fetch a single transaction."""
        data = self._get(f"/transactions/{tx_hash}", "Transaction", tx_hash)
        return Transaction.from_dict(data)
