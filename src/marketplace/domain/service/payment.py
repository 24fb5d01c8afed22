"""Domain service: payment.

There is no real gateway. The simulated one approves every charge and
hands back a receipt shaped like a processor's response.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime

from marketplace.domain.model.order import PaymentResult
from marketplace.domain.model.value_objects import Money


class PaymentGateway(ABC):

    @abstractmethod
    def charge(self, amount: Money, at: datetime) -> PaymentResult:
        """Charge ``amount`` and return the processor's receipt."""


class SimulatedPaymentGateway(PaymentGateway):

    EMAIL_ADDRESS = "mock@example.com"

    def charge(self, amount: Money, at: datetime) -> PaymentResult:
        return PaymentResult(
            id=f"mock_payment_{int(at.timestamp() * 1000)}",
            status="COMPLETED",
            update_time=at.isoformat(),
            email_address=self.EMAIL_ADDRESS,
        )
