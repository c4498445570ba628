"""
Email Sender Port - Outbound mail, best effort.
"""

from abc import ABC, abstractmethod


class EmailSender(ABC):
    @abstractmethod
    async def send(self, to_address: str, subject: str, body: str) -> bool:
        """Returns False when the message was not sent (unconfigured or failed)."""
        ...
