"""Exchange-wallet implementation of PaymentConfirmation.

Customers pay into the shop's exchange wallet and put the order ID in
the transfer note.  A payment counts as cleared when the wallet's fund
records contain an entry whose ``note`` equals the order ID and whose
``status`` is ``"success"``.

Requests are signed the way the exchange expects: every query parameter
except ``sign`` is sorted by key, joined as ``key=value`` pairs with
``&``, and HMAC-SHA256'd with the API secret (hex digest).
"""

from __future__ import annotations

import hashlib
import hmac
import logging
import time
from collections.abc import Callable

import requests

from storefront.domain.exceptions import ExternalServiceError
from storefront.domain.model.order import Order
from storefront.domain.service.payment_confirmation import PaymentConfirmation

logger = logging.getLogger(__name__)

FUND_RECORDS_PATH = "/v2/private/wallet/fund/records"


def sign_params(params: dict[str, object], secret: str) -> str:
    payload = "&".join(f"{key}={params[key]}" for key in sorted(params))
    return hmac.new(secret.encode("utf-8"), payload.encode("utf-8"), hashlib.sha256).hexdigest()


class ExchangeWalletClient(PaymentConfirmation):

    def __init__(
        self,
        base_url: str,
        api_key: str,
        api_secret: str,
        timeout: float = 5.0,
        session: requests.Session | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        if not api_key or not api_secret:
            raise ValueError("Exchange API key and secret are required")
        self._base_url = base_url.rstrip("/")
        self._api_key = api_key
        self._api_secret = api_secret
        self._timeout = timeout
        self._session = session or requests.Session()
        self._clock = clock

    def confirm_payment(self, order: Order) -> bool:
        if not order.id:
            return False
        records = self._fetch_fund_records()
        for record in records:
            if not isinstance(record, dict):
                continue
            if record.get("note") == order.id and record.get("status") == "success":
                logger.info("Payment for order %s found in wallet records", order.id)
                return True
        return False

    def signed_params(self) -> dict[str, object]:
        params: dict[str, object] = {
            "api_key": self._api_key,
            "timestamp": int(self._clock() * 1000),
        }
        params["sign"] = sign_params(params, self._api_secret)
        return params

    def _fetch_fund_records(self) -> list:
        url = f"{self._base_url}{FUND_RECORDS_PATH}"
        try:
            response = self._session.get(url, params=self.signed_params(), timeout=self._timeout)
            response.raise_for_status()
            data = response.json()
        except requests.RequestException as exc:
            raise ExternalServiceError(f"Exchange API request failed: {exc}") from exc
        except ValueError as exc:
            raise ExternalServiceError("Exchange API returned invalid JSON") from exc

        result = data.get("result") if isinstance(data, dict) else None
        records = result.get("data") if isinstance(result, dict) else None
        if not isinstance(records, list):
            raise ExternalServiceError("Exchange API response has no fund records")
        return records
