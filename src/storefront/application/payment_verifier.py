"""Bounded, fail-closed wrapper around the payment collaborator.

The collaborator talks to the outside world and may hang or fail.  The
verifier gives it a fixed amount of time and turns every outcome other
than an explicit ``True`` into "not confirmed".
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeoutError

from storefront.domain.exceptions import ExternalServiceError
from storefront.domain.model.order import Order
from storefront.domain.service.payment_confirmation import PaymentConfirmation

logger = logging.getLogger(__name__)


class PaymentVerifier:

    def __init__(self, confirmation: PaymentConfirmation, timeout: float = 5.0) -> None:
        if timeout <= 0:
            raise ValueError("timeout must be positive")
        self._confirmation = confirmation
        self._timeout = timeout
        self._executor = ThreadPoolExecutor(max_workers=4, thread_name_prefix="payment-check")

    def is_confirmed(self, order: Order) -> bool:
        try:
            future = self._executor.submit(self._confirmation.confirm_payment, order)
            result = future.result(timeout=self._timeout)
        except FutureTimeoutError:
            future.cancel()
            logger.warning(
                "Payment check for order %s timed out after %ss", order.id, self._timeout
            )
            return False
        except ExternalServiceError as exc:
            logger.warning("Payment check for order %s failed: %s", order.id, exc)
            return False
        except Exception:
            logger.warning(
                "Payment check for order %s raised unexpectedly", order.id, exc_info=True
            )
            return False
        return result is True

    def close(self) -> None:
        """Stop the worker threads; later checks report "not confirmed"."""
        self._executor.shutdown(wait=False, cancel_futures=True)
