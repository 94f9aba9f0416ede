"""Domain port: Payment Confirmation.

Something outside the shop (an exchange wallet, a payment provider)
knows whether the money for an order has arrived.  The order lifecycle
only needs a yes/no answer; how it is obtained is an infrastructure
concern.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.order import Order


class PaymentConfirmation(ABC):

    @abstractmethod
    def confirm_payment(self, order: Order) -> bool:
        """Return True only if the payment for *order* has cleared.

        May raise ExternalServiceError when the answer cannot be obtained.
        """
